"""Konane rules engine.

Composes the ECS world, the event bus and the rule systems behind the two
mutating entry points a board UI needs: ``handle_cell_select`` and ``reset``.
Everything else is a read-only view of the current position.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from esper import World

from konane.components.game_state import GamePhase
from konane.components.move_history import MoveRecord
from konane.components.piece_color import PieceColor
from konane.constants import GRID_COLS, GRID_ROWS
from konane.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CELL_CLICK,
    EVENT_CHAIN_CONTINUED,
    EVENT_GAME_FINISHED,
    EVENT_GAME_RESET,
    EVENT_PHASE_CHANGED,
    EVENT_PIECE_DESELECTED,
    EVENT_PIECE_SELECTED,
    EVENT_SETUP_PIECE_REMOVED,
    EVENT_TURN_ADVANCED,
)
from konane.systems import board_ops
from konane.systems.board import BoardSystem
from konane.systems.board_ops import Direction, Grid, Move, Position
from konane.systems.game_flow_system import GameFlowSystem
from konane.systems.move_system import MoveSystem
from konane.systems.setup_system import SetupSystem
from konane.systems.turn_system import TurnSystem
from konane.utils.game_state import get_game_state, get_move_history, get_pending_removal, get_selection
from konane.world import create_world

_MUTATION_EVENTS = (
    EVENT_BOARD_CHANGED,
    EVENT_CHAIN_CONTINUED,
    EVENT_GAME_FINISHED,
    EVENT_GAME_RESET,
    EVENT_PHASE_CHANGED,
    EVENT_PIECE_DESELECTED,
    EVENT_PIECE_SELECTED,
    EVENT_SETUP_PIECE_REMOVED,
    EVENT_TURN_ADVANCED,
)


@dataclass(frozen=True)
class EngineSnapshot:
    """Everything a presentation layer reads, frozen at one version."""

    board: Grid
    active_color: PieceColor
    phase: GamePhase
    selection: Optional[Position]
    pending_removal: Optional[Position]
    winner: Optional[PieceColor]
    move_count: int
    legal_destinations: Tuple[Position, ...]
    history: Tuple[MoveRecord, ...]
    version: int = field(default=0, compare=False)


class KonaneEngine:
    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world: World = create_world(self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus, rows=rows, cols=cols)
        self.setup_system = SetupSystem(self.world, self.event_bus)
        self.move_system = MoveSystem(self.world, self.event_bus)
        self.turn_system = TurnSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self._version = 0
        self._snapshot: EngineSnapshot | None = None
        for name in _MUTATION_EVENTS:
            self.event_bus.subscribe(name, self._on_mutation)

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def handle_cell_select(self, row: int, col: int) -> None:
        """Feed one click on (row, col). Clicks that mean nothing in the current state are ignored."""
        self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def reset(self) -> None:
        self.game_flow_system.reset(reason="reset")

    def execute_move(self, src: Position, dst: Position) -> None:
        self.move_system.execute_move(src, dst)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def legal_moves(self, position: Position, forced_direction: Direction | None = None) -> List[Position]:
        state = get_game_state(self.world)
        if state.phase != GamePhase.PLAYING:
            return []
        return board_ops.legal_moves(position, self.board, state.active_color, forced_direction)

    def all_legal_moves(self, color: PieceColor | None = None) -> List[Move]:
        """Every single-hop start for color (default: the player to move). Empty outside Playing."""
        state = get_game_state(self.world)
        if state.phase != GamePhase.PLAYING:
            return []
        return board_ops.all_legal_moves(color or state.active_color, self.board)

    @property
    def board(self) -> Grid:
        return board_ops.board_snapshot(self.world)

    @property
    def active_color(self) -> PieceColor:
        return get_game_state(self.world).active_color

    @property
    def phase(self) -> GamePhase:
        return get_game_state(self.world).phase

    @property
    def is_setup(self) -> bool:
        return self.phase == GamePhase.SETUP

    @property
    def selection(self) -> Optional[Position]:
        return get_selection(self.world).position

    @property
    def pending_removal(self) -> Optional[Position]:
        return get_pending_removal(self.world).position

    @property
    def winner(self) -> Optional[PieceColor]:
        return get_game_state(self.world).winner

    @property
    def move_count(self) -> int:
        return get_game_state(self.world).move_count

    @property
    def round_number(self) -> int:
        return self.move_count // 2 + 1

    @property
    def legal_destinations(self) -> List[Position]:
        return self.move_system.destinations()

    @property
    def move_history(self) -> Tuple[MoveRecord, ...]:
        return tuple(get_move_history(self.world).records)

    @property
    def status_message(self) -> str:
        state = get_game_state(self.world)
        if state.winner is not None:
            return f"{state.winner.label} Wins!"
        if state.phase == GamePhase.SETUP:
            return "Remove two adjacent pieces to begin"
        if state.phase == GamePhase.PLAYING:
            return f"{state.active_color.label}'s Turn"
        return "Game Over"

    @property
    def version(self) -> int:
        return self._version

    def snapshot(self) -> EngineSnapshot:
        """Frozen view of the current state, cached until the next mutation."""
        if self._snapshot is None or self._snapshot.version != self._version:
            state = get_game_state(self.world)
            self._snapshot = EngineSnapshot(
                board=self.board,
                active_color=state.active_color,
                phase=state.phase,
                selection=self.selection,
                pending_removal=self.pending_removal,
                winner=state.winner,
                move_count=state.move_count,
                legal_destinations=tuple(self.legal_destinations),
                history=self.move_history,
                version=self._version,
            )
        return self._snapshot

    def _on_mutation(self, sender, **payload) -> None:
        self._version += 1
