from __future__ import annotations

from typing import Any

from konane.engine import KonaneEngine
from konane.events.bus import EVENT_GAME_RESET, EVENT_JUMP_EXECUTED
from konane.rendering.board_renderer import BoardRenderer
from konane.rendering.context import RenderContext, build_render_context
from konane.rendering.status_panel_renderer import StatusPanelRenderer


class RenderSystem:
    """Draws the engine snapshot; never mutates it.

    Layout caches are refreshed on every ``process`` call, with or without an
    open window, so input and tests can inspect what would be drawn.
    """

    def __init__(self, engine: KonaneEngine, window):
        self.engine = engine
        self.window = window
        self.engine.event_bus.subscribe(EVENT_JUMP_EXECUTED, self.on_jump_executed)
        self.engine.event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)
        self.last_jump: dict[str, Any] | None = None
        self._render_ctx: RenderContext | None = None
        self._last_cell_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self._status_lines: list[str] = []
        self._reset_button_rect: tuple[float, float, float, float] | None = None
        self._board_renderer = BoardRenderer(self)
        self._status_panel_renderer = StatusPanelRenderer(self)

    def on_jump_executed(self, sender, **kwargs):
        self.last_jump = {
            "src": kwargs.get("src"),
            "dst": kwargs.get("dst"),
            "captured": kwargs.get("captured"),
        }

    def on_game_reset(self, sender, **kwargs):
        self.last_jump = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = build_render_context(
            self.engine.snapshot(),
            self.window.width,
            self.window.height,
            status_message=self.engine.status_message,
            round_number=self.engine.round_number,
        )
        self._render_ctx = ctx
        self._board_renderer.render(arcade, ctx, headless=headless)
        self._status_panel_renderer.render(arcade, ctx, headless=headless)

    def cell_layout(self, row: int, col: int) -> dict[str, Any] | None:
        return self._last_cell_layout.get((row, col))

    @property
    def status_lines(self) -> list[str]:
        return list(self._status_lines)
