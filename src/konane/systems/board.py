from esper import World
from loguru import logger

from konane.components.board import Board
from konane.components.board_position import BoardPosition
from konane.components.cell import Cell
from konane.components.game_state import GamePhase
from konane.constants import GRID_COLS, GRID_ROWS
from konane.events.bus import EventBus, EVENT_CELL_CLICK, EVENT_PLAY_CLICK, EVENT_SETUP_CLICK
from konane.systems.board_ops import in_bounds, initialize_board
from konane.utils.game_state import get_game_state


class BoardSystem:
    """Owns the board and routes cell clicks to the system handling the current phase."""

    def __init__(self, world: World, event_bus: EventBus, rows: int = GRID_ROWS, cols: int = GRID_COLS):
        self.world = world
        self.event_bus = event_bus
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(rows=rows, cols=cols))
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self._init_board()

    @property
    def rows(self) -> int:
        return self.world.component_for_entity(self.board_entity, Board).rows

    @property
    def cols(self) -> int:
        return self.world.component_for_entity(self.board_entity, Board).cols

    def _init_board(self):
        board: Board = self.world.component_for_entity(self.board_entity, Board)
        layout = initialize_board(board.rows, board.cols)
        for r in range(board.rows):
            for c in range(board.cols):
                self.world.create_entity(BoardPosition(row=r, col=c), Cell(color=layout[r][c]))

    def on_cell_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        if not in_bounds(row, col, self.rows, self.cols):
            logger.debug("Ignoring click outside the board at ({}, {})", row, col)
            return
        # Phase is read once so a click that ends setup is not replayed as a play click.
        phase = get_game_state(self.world).phase
        if phase == GamePhase.SETUP:
            self.event_bus.emit(EVENT_SETUP_CLICK, row=row, col=col)
        elif phase == GamePhase.PLAYING:
            self.event_bus.emit(EVENT_PLAY_CLICK, row=row, col=col)
