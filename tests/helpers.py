from __future__ import annotations

from typing import Mapping, Tuple

from konane.components.game_state import GamePhase
from konane.components.piece_color import PieceColor
from konane.engine import KonaneEngine
from konane.events.bus import EVENT_BOARD_CHANGED
from konane.systems.board_ops import apply_layout, grid_from_pieces
from konane.utils.game_state import get_game_state, set_phase

Position = Tuple[int, int]


def load_position(
    engine: KonaneEngine,
    pieces: Mapping[Position, PieceColor],
    *,
    phase: GamePhase = GamePhase.PLAYING,
    active_color: PieceColor = PieceColor.BLACK,
) -> KonaneEngine:
    """Replace the engine's board with only the given pieces and jump straight to phase."""

    changed = apply_layout(engine.world, grid_from_pieces(dict(pieces)))
    state = get_game_state(engine.world)
    state.active_color = active_color
    set_phase(engine.world, engine.event_bus, phase)
    engine.event_bus.emit(EVENT_BOARD_CHANGED, reason="test_layout", positions=changed)
    return engine


def click_cells(engine: KonaneEngine, *cells: Position) -> None:
    for row, col in cells:
        engine.handle_cell_select(row, col)
