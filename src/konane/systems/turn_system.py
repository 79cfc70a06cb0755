from __future__ import annotations

from esper import World
from loguru import logger

from konane.components.game_state import GamePhase
from konane.components.move_history import MoveRecord
from konane.components.piece_color import PieceColor
from konane.events.bus import (
    EventBus,
    EVENT_CHAIN_ENDED,
    EVENT_GAME_FINISHED,
    EVENT_SETUP_COMPLETE,
    EVENT_TURN_ADVANCED,
)
from konane.systems.board_ops import all_legal_moves, board_snapshot
from konane.utils.game_state import get_game_state, get_move_history, get_selection, set_phase


class TurnSystem:
    """Passes the turn once a jump chain ends and detects the stalemate that ends the game.

    Flow:
      - EVENT_CHAIN_ENDED records the turn, flips the active color and counts one move,
        however many hops the chain contained.
      - The new player to move is scanned for single-hop starts. Any legal turn begins
        with a single hop, so an empty scan means the game is over and the mover wins.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CHAIN_ENDED, self.on_chain_ended)
        self.event_bus.subscribe(EVENT_SETUP_COMPLETE, self.on_setup_complete)

    def on_chain_ended(self, sender, **payload):
        color = payload.get("color")
        if not isinstance(color, PieceColor):
            return
        path = tuple(payload.get("path") or ())
        captured = tuple(payload.get("captured") or ())
        if path:
            get_move_history(self.world).records.append(
                MoveRecord(color=color, path=path, captured=captured)
            )
        self._advance_turn(color)
        self._check_stalemate()

    def on_setup_complete(self, sender, **payload):
        self._check_stalemate()

    def _advance_turn(self, mover: PieceColor) -> None:
        state = get_game_state(self.world)
        state.active_color = mover.opponent
        state.move_count += 1
        logger.info("Turn {} complete; {} to move", state.move_count, state.active_color.label)
        self.event_bus.emit(
            EVENT_TURN_ADVANCED,
            previous_color=mover,
            new_color=state.active_color,
            move_count=state.move_count,
        )

    def _check_stalemate(self) -> None:
        state = get_game_state(self.world)
        if state.phase != GamePhase.PLAYING:
            return
        to_move = state.active_color
        if all_legal_moves(to_move, board_snapshot(self.world)):
            return
        state.winner = to_move.opponent
        get_selection(self.world).position = None
        logger.info("{} has no jumps; {} wins after {} moves", to_move.label, state.winner.label, state.move_count)
        set_phase(self.world, self.event_bus, GamePhase.FINISHED)
        self.event_bus.emit(EVENT_GAME_FINISHED, winner=state.winner, move_count=state.move_count)
