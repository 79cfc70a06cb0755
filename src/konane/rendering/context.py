from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Tuple

from konane.systems.board_ops import grid_dimensions
from konane.ui.layout import cell_center, compute_board_geometry

if TYPE_CHECKING:
    from konane.engine import EngineSnapshot

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    snapshot: EngineSnapshot
    status_message: str
    round_number: int
    window_width: int
    window_height: int
    rows: int
    cols: int
    tile_size: int
    board_left: float
    board_bottom: float
    board_width: float
    board_height: float
    cell_centers: Dict[BoardPos, Tuple[float, float]] = field(default_factory=dict)


def build_render_context(
    snapshot: EngineSnapshot,
    window_width: int,
    window_height: int,
    *,
    status_message: str = "",
    round_number: int = 1,
) -> RenderContext:
    """Populate a RenderContext for the current frame, sized from the snapshot's board."""

    rows, cols = grid_dimensions(snapshot.board)
    tile_size, board_left, board_bottom = compute_board_geometry(window_width, window_height, rows, cols)
    centers: Dict[BoardPos, Tuple[float, float]] = {}
    for row in range(rows):
        for col in range(cols):
            centers[(row, col)] = cell_center(row, col, tile_size, board_left, board_bottom, rows)

    return RenderContext(
        snapshot=snapshot,
        status_message=status_message,
        round_number=round_number,
        window_width=window_width,
        window_height=window_height,
        rows=rows,
        cols=cols,
        tile_size=tile_size,
        board_left=board_left,
        board_bottom=board_bottom,
        board_width=tile_size * cols,
        board_height=tile_size * rows,
        cell_centers=centers,
    )
