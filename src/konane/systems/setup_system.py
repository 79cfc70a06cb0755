from __future__ import annotations

from esper import World
from loguru import logger

from konane.components.game_state import GamePhase
from konane.constants import SETUP_REMOVALS
from konane.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_SETUP_CLICK,
    EVENT_SETUP_COMPLETE,
    EVENT_SETUP_PIECE_REMOVED,
    EVENT_SETUP_PIECE_RESTORED,
)
from konane.systems.board_ops import Position, cell_color, is_orthogonally_adjacent, set_cell_color
from konane.utils.game_state import get_pending_removal, get_selection, set_phase


class SetupSystem:
    """Runs the opening handshake: two orthogonally adjacent pieces are lifted before play.

    Flow:
      - First click on an occupied square removes it and records it as pending.
      - Second click removes its piece; if the square does not touch the pending one
        the piece is put back and the handshake waits for another partner.
      - An adjacent second removal clears the pending square and starts play.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SETUP_CLICK, self.on_setup_click)

    def on_setup_click(self, sender, **payload):
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        self.remove_piece((row, col))

    def remove_piece(self, position: Position) -> bool:
        """Attempt a setup removal at position. Returns True when the piece stays removed."""
        color = cell_color(self.world, position)
        if color is None:
            return False
        pending = get_pending_removal(self.world)
        set_cell_color(self.world, position, None)

        if pending.position is None:
            pending.position = position
            pending.removed = 1
            logger.debug("Setup removed {} piece at {}", color.label, position)
            self.event_bus.emit(
                EVENT_SETUP_PIECE_REMOVED,
                row=position[0],
                col=position[1],
                color=color,
                removed=pending.removed,
            )
            self.event_bus.emit(EVENT_BOARD_CHANGED, reason="setup_removal", positions=[position])
            return True

        first = pending.position
        if not is_orthogonally_adjacent(first, position):
            set_cell_color(self.world, position, color)
            logger.debug("Setup pair {} / {} is not adjacent; restored {}", first, position, position)
            self.event_bus.emit(
                EVENT_SETUP_PIECE_RESTORED,
                row=position[0],
                col=position[1],
                color=color,
                pending=first,
            )
            return False

        pending.removed += 1
        pending.position = None
        self.event_bus.emit(
            EVENT_SETUP_PIECE_REMOVED,
            row=position[0],
            col=position[1],
            color=color,
            removed=pending.removed,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="setup_removal", positions=[position])
        if pending.removed >= SETUP_REMOVALS:
            get_selection(self.world).position = None
            set_phase(self.world, self.event_bus, GamePhase.PLAYING)
            self.event_bus.emit(EVENT_SETUP_COMPLETE, removed=[first, position])
        return True
