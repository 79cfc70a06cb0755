from __future__ import annotations

from typing import List, Optional

from esper import World
from loguru import logger

from konane.components.game_state import GamePhase
from konane.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CHAIN_CONTINUED,
    EVENT_CHAIN_ENDED,
    EVENT_JUMP_EXECUTED,
    EVENT_PIECE_DESELECTED,
    EVENT_PIECE_SELECTED,
    EVENT_PLAY_CLICK,
)
from konane.systems.board_ops import (
    Direction,
    Position,
    board_snapshot,
    captured_position,
    direction_between,
    legal_moves,
    set_cell_color,
)
from konane.utils.game_state import get_game_state, get_selection, get_turn_state


class MoveSystem:
    """Selection handling and jump execution for the playing phase.

    A turn is a chain of hops by one piece in one direction. After each hop the
    landing square is searched again in the same direction only; while that search
    finds something the piece stays selected and the same player clicks again.
    During a chain the only accepted click is a continuation square; every other
    click, the chaining piece included, is ignored.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PLAY_CLICK, self.on_play_click)

    def on_play_click(self, sender, **payload):
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        self.handle_click((row, col))

    def handle_click(self, position: Position) -> None:
        state = get_game_state(self.world)
        if state.phase != GamePhase.PLAYING:
            return
        color = state.active_color
        grid = board_snapshot(self.world)
        turn = get_turn_state(self.world)

        if turn.chain_active:
            if position in legal_moves(turn.piece, grid, color, turn.direction):
                self.execute_move(turn.piece, position)
            return

        selected = get_selection(self.world).position
        clicked = grid[position[0]][position[1]]
        if selected is None:
            if clicked == color:
                self._select(position)
            return
        if position in legal_moves(selected, grid, color):
            self.execute_move(selected, position)
        elif clicked == color:
            self._select(position)
        else:
            self._deselect(reason="invalid_target")

    def destinations(self) -> List[Position]:
        """Legal landing squares for the current selection, honouring an active chain."""
        state = get_game_state(self.world)
        if state.phase != GamePhase.PLAYING:
            return []
        selected = get_selection(self.world).position
        if selected is None:
            return []
        turn = get_turn_state(self.world)
        forced: Optional[Direction] = turn.direction if turn.chain_active else None
        return legal_moves(selected, board_snapshot(self.world), state.active_color, forced)

    def execute_move(self, src: Position, dst: Position) -> None:
        """Jump the active player's piece from src to dst and capture the square between.

        Callers must pass a destination that is legal for the current chain context.
        """
        state = get_game_state(self.world)
        assert state.phase == GamePhase.PLAYING, f"execute_move during {state.phase.name}"
        color = state.active_color
        grid = board_snapshot(self.world)
        assert grid[src[0]][src[1]] == color, f"No {color.label} piece at {src}"
        turn = get_turn_state(self.world)
        forced: Optional[Direction] = None
        if turn.chain_active:
            assert src == turn.piece, f"Chain belongs to {turn.piece}, not {src}"
            forced = turn.direction
        assert dst in legal_moves(src, grid, color, forced), f"Illegal jump {src} -> {dst}"

        direction = direction_between(src, dst)
        captured = captured_position(src, dst)
        set_cell_color(self.world, dst, color)
        set_cell_color(self.world, src, None)
        set_cell_color(self.world, captured, None)
        if not turn.chain_active:
            turn.path = [src]
        turn.path.append(dst)
        turn.captured.append(captured)
        turn.piece = dst
        turn.direction = direction
        logger.debug("{} jumps {} -> {} capturing {}", color.label, src, dst, captured)
        self.event_bus.emit(
            EVENT_JUMP_EXECUTED,
            src=src,
            dst=dst,
            captured=captured,
            color=color,
            direction=direction,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="jump", positions=[src, captured, dst])

        continuation = legal_moves(dst, board_snapshot(self.world), color, direction)
        if continuation:
            get_selection(self.world).position = dst
            self.event_bus.emit(EVENT_PIECE_SELECTED, row=dst[0], col=dst[1], color=color)
            self.event_bus.emit(
                EVENT_CHAIN_CONTINUED,
                position=dst,
                direction=direction,
                destinations=continuation,
            )
            return
        self._end_chain(reason="exhausted")

    def _end_chain(self, reason: str) -> None:
        state = get_game_state(self.world)
        turn = get_turn_state(self.world)
        path = list(turn.path)
        captured = list(turn.captured)
        turn.clear()
        self._deselect(reason="turn_end")
        self.event_bus.emit(
            EVENT_CHAIN_ENDED,
            color=state.active_color,
            path=path,
            captured=captured,
            reason=reason,
        )

    def _select(self, position: Position) -> None:
        selection = get_selection(self.world)
        if selection.position == position:
            return
        selection.position = position
        color = get_game_state(self.world).active_color
        logger.debug("{} selects {}", color.label, position)
        self.event_bus.emit(EVENT_PIECE_SELECTED, row=position[0], col=position[1], color=color)

    def _deselect(self, reason: str) -> None:
        selection = get_selection(self.world)
        prev = selection.position
        if prev is None:
            return
        selection.position = None
        self.event_bus.emit(EVENT_PIECE_DESELECTED, reason=reason, prev_row=prev[0], prev_col=prev[1])
