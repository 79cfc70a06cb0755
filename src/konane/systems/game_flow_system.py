"""Coordinator for starting a fresh game."""
from __future__ import annotations

from esper import World
from loguru import logger

from konane.components.game_state import GamePhase
from konane.components.piece_color import PieceColor
from konane.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_GAME_RESET,
    EVENT_GAME_RESET_REQUEST,
)
from konane.systems.board_ops import apply_layout, board_dimensions, initialize_board
from konane.utils.game_state import (
    get_game_state,
    get_move_history,
    get_pending_removal,
    get_selection,
    get_turn_state,
    set_phase,
)


class GameFlowSystem:
    """Restores the world to the state of a freshly created game on request."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAME_RESET_REQUEST, self._on_reset_request)

    def _on_reset_request(self, sender, **payload) -> None:
        self.reset(reason=payload.get("reason"))

    def reset(self, reason: str | None = None) -> None:
        rows, cols = board_dimensions(self.world)
        changed = apply_layout(self.world, initialize_board(rows, cols))
        state = get_game_state(self.world)
        state.active_color = PieceColor.BLACK
        state.winner = None
        state.move_count = 0
        get_selection(self.world).position = None
        pending = get_pending_removal(self.world)
        pending.position = None
        pending.removed = 0
        get_turn_state(self.world).clear()
        get_move_history(self.world).records.clear()
        set_phase(self.world, self.event_bus, GamePhase.SETUP)
        logger.info("Game reset ({})", reason or "requested")
        if changed:
            self.event_bus.emit(EVENT_BOARD_CHANGED, reason="reset", positions=changed)
        self.event_bus.emit(EVENT_GAME_RESET, reason=reason)
