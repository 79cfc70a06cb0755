from __future__ import annotations

from typing import TYPE_CHECKING, List

from konane.components.game_state import GamePhase
from konane.components.move_history import MoveRecord
from konane.constants import GRID_ROWS, STATUS_HISTORY_LINES
from konane.ui.layout import reset_button_rect, status_panel_rect

if TYPE_CHECKING:
    from konane.rendering.context import RenderContext
    from konane.systems.render import RenderSystem


def square_name(position: tuple[int, int], rows: int = GRID_ROWS) -> str:
    row, col = position
    return f"{chr(ord('a') + col)}{rows - row}"


def format_move(record: MoveRecord, rows: int = GRID_ROWS) -> str:
    route = "-".join(square_name(pos, rows) for pos in record.path)
    return f"{record.color.label} {route} x{record.hops}"


class StatusPanelRenderer:
    """Render the status text, move log and the New Game button beside the board."""

    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def lines_for(self, ctx: RenderContext) -> List[str]:
        snap = ctx.snapshot
        lines = ["Konane", ctx.status_message]
        if snap.phase == GamePhase.SETUP:
            lines.append("Click two adjacent pieces to remove them.")
        elif snap.phase == GamePhase.PLAYING:
            lines.append(f"Move #{ctx.round_number}")
        lines.append(f"Turns played: {snap.move_count}")
        for record in snap.history[-STATUS_HISTORY_LINES:]:
            lines.append(format_move(record, ctx.rows))
        return lines

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        lines = self.lines_for(ctx)
        button = reset_button_rect(ctx.window_width, ctx.window_height, ctx.rows, ctx.cols)
        rs._status_lines = lines
        rs._reset_button_rect = button
        if headless:
            return

        left, right, bottom, top = status_panel_rect(ctx.window_width, ctx.window_height, ctx.rows, ctx.cols)
        panel = [(left, bottom), (right, bottom), (right, top), (left, top)]
        arcade.draw_polygon_filled(panel, (40, 40, 48))
        arcade.draw_polygon_outline(panel, (130, 130, 130), 2)
        center_x = (left + right) / 2
        y = top - 40
        for index, text in enumerate(lines):
            size = 22 if index == 0 else 14 if index == 1 else 11
            arcade.draw_text(text, center_x, y, arcade.color.ANTIQUE_WHITE, size, anchor_x="center")
            y -= size + 12

        b_left, b_right, b_bottom, b_top = button
        button_points = [(b_left, b_bottom), (b_right, b_bottom), (b_right, b_top), (b_left, b_top)]
        arcade.draw_polygon_filled(button_points, (70, 70, 100))
        arcade.draw_polygon_outline(button_points, (230, 230, 230), 2)
        arcade.draw_text(
            "New Game",
            (b_left + b_right) / 2,
            b_bottom + (b_top - b_bottom) / 2 - 7,
            arcade.color.ANTIQUE_WHITE,
            14,
            anchor_x="center",
        )
