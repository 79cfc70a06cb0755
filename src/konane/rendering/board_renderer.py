from __future__ import annotations

from typing import TYPE_CHECKING

from konane.components.piece_color import PieceColor
from konane.constants import (
    PIECE_BLACK,
    PIECE_OUTLINE,
    PIECE_WHITE,
    SELECTION_RING,
    SQUARE_DARK,
    SQUARE_DESTINATION,
    SQUARE_LIGHT,
)

if TYPE_CHECKING:
    from konane.rendering.context import RenderContext
    from konane.systems.render import RenderSystem


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 6):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        snap = ctx.snapshot
        destinations = set(snap.legal_destinations)
        half = ctx.tile_size / 2
        radius = max(ctx.tile_size - self._padding * 2, 4) / 2
        ring_commands: list[tuple[float, float, float, tuple[int, int, int]]] = []

        rs._last_cell_layout = {}
        for (row, col), (cx, cy) in ctx.cell_centers.items():
            piece = snap.board[row][col]
            is_destination = (row, col) in destinations
            is_selected = snap.selection == (row, col)
            is_pending = snap.pending_removal == (row, col)
            rs._last_cell_layout[(row, col)] = {
                "center": (cx, cy),
                "radius": radius,
                "piece": piece,
                "selected": is_selected,
                "destination": is_destination,
                "pending": is_pending,
            }
            if is_selected:
                ring_commands.append((cx, cy, radius + 3, SELECTION_RING))
            elif is_pending:
                ring_commands.append((cx, cy, radius, PIECE_OUTLINE))
            if headless:
                continue

            if is_destination:
                fill = SQUARE_DESTINATION
            else:
                fill = SQUARE_LIGHT if (row + col) % 2 == 0 else SQUARE_DARK
            square = [
                (cx - half, cy - half),
                (cx + half, cy - half),
                (cx + half, cy + half),
                (cx - half, cy + half),
            ]
            arcade.draw_polygon_filled(square, fill)
            arcade.draw_polygon_outline(square, PIECE_OUTLINE, 1)

            if piece is not None:
                body = PIECE_BLACK if piece is PieceColor.BLACK else PIECE_WHITE
                arcade.draw_circle_filled(cx, cy, radius, body)
                arcade.draw_circle_outline(cx, cy, radius, PIECE_OUTLINE, 2)
            elif is_destination:
                arcade.draw_circle_filled(cx, cy, radius * 0.25, SELECTION_RING)

        if headless:
            return
        for cx, cy, ring_radius, ring_color in ring_commands:
            arcade.draw_circle_outline(cx, cy, ring_radius, ring_color, 3)
