from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from esper import World

from konane.components.board import Board
from konane.components.board_position import BoardPosition
from konane.components.cell import Cell
from konane.components.piece_color import PieceColor
from konane.constants import GRID_COLS, GRID_ROWS

Position = Tuple[int, int]
Direction = Tuple[int, int]
Move = Tuple[Position, Position]
Grid = Tuple[Tuple[Optional[PieceColor], ...], ...]

# Up, down, left, right. Move generation enumerates in this order.
DIRECTIONS: Tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def in_bounds(row: int, col: int, rows: int = GRID_ROWS, cols: int = GRID_COLS) -> bool:
    return 0 <= row < rows and 0 <= col < cols


def initialize_board(rows: int = GRID_ROWS, cols: int = GRID_COLS) -> Grid:
    """Return the starting checkerboard: black where (row + col) is even, white elsewhere."""
    return tuple(
        tuple(PieceColor.BLACK if (row + col) % 2 == 0 else PieceColor.WHITE for col in range(cols))
        for row in range(rows)
    )


def grid_from_pieces(
    pieces: dict[Position, PieceColor],
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> Grid:
    """Build a grid holding only the given pieces."""
    return tuple(
        tuple(pieces.get((row, col)) for col in range(cols))
        for row in range(rows)
    )


def grid_dimensions(grid: Grid) -> Tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def is_orthogonally_adjacent(a: Position, b: Position) -> bool:
    ar, ac = a
    br, bc = b
    return (abs(ar - br) == 1 and ac == bc) or (abs(ac - bc) == 1 and ar == br)


def direction_between(src: Position, dst: Position) -> Direction:
    """Unit vector pointing from src toward dst along a row or column."""
    dr = dst[0] - src[0]
    dc = dst[1] - src[1]
    return (dr > 0) - (dr < 0), (dc > 0) - (dc < 0)


def captured_position(src: Position, dst: Position) -> Position:
    """Square jumped over by a hop from src to dst."""
    dr, dc = direction_between(src, dst)
    return src[0] + dr, src[1] + dc


def legal_moves(
    position: Position,
    grid: Grid,
    color: PieceColor,
    forced_direction: Optional[Direction] = None,
) -> List[Position]:
    """Return single-hop landing squares for the piece at position.

    Only the piece's own color may move. When forced_direction is given (mid-chain)
    the search is restricted to that vector. Results follow DIRECTIONS order.
    """
    rows, cols = grid_dimensions(grid)
    row, col = position
    if not in_bounds(row, col, rows, cols):
        return []
    if grid[row][col] != color:
        return []
    directions: Iterable[Direction] = (forced_direction,) if forced_direction is not None else DIRECTIONS
    opponent = color.opponent
    destinations: List[Position] = []
    for dr, dc in directions:
        land_row = row + dr * 2
        land_col = col + dc * 2
        if not in_bounds(land_row, land_col, rows, cols):
            continue
        if grid[row + dr][col + dc] != opponent:
            continue
        if grid[land_row][land_col] is not None:
            continue
        destinations.append((land_row, land_col))
    return destinations


def all_legal_moves(color: PieceColor, grid: Grid) -> List[Move]:
    """Every single-hop start available to color, scanning rows then columns."""
    rows, cols = grid_dimensions(grid)
    moves: List[Move] = []
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] != color:
                continue
            for dst in legal_moves((row, col), grid, color):
                moves.append(((row, col), dst))
    return moves


def count_pieces(grid: Grid, color: PieceColor | None = None) -> int:
    if color is None:
        return sum(1 for line in grid for value in line if value is not None)
    return sum(1 for line in grid for value in line if value == color)


# ----------------------------------------------------------------------------
# World helpers
# ----------------------------------------------------------------------------

def board_dimensions(world: World) -> Tuple[int, int]:
    for _, board in world.get_component(Board):
        return board.rows, board.cols
    raise RuntimeError("Board component not found")


def get_entity_at(world: World, row: int, col: int) -> int | None:
    for entity, position in world.get_component(BoardPosition):
        if position.row == row and position.col == col:
            return entity
    return None


def cell_color(world: World, position: Position) -> Optional[PieceColor]:
    entity = get_entity_at(world, position[0], position[1])
    if entity is None:
        return None
    return world.component_for_entity(entity, Cell).color


def set_cell_color(world: World, position: Position, color: Optional[PieceColor]) -> bool:
    """Place color on the square (None empties it). Returns False off the board."""
    entity = get_entity_at(world, position[0], position[1])
    if entity is None:
        return False
    world.component_for_entity(entity, Cell).color = color
    return True


def board_snapshot(world: World) -> Grid:
    """Immutable copy of the current board."""
    rows, cols = board_dimensions(world)
    values: List[List[Optional[PieceColor]]] = [[None] * cols for _ in range(rows)]
    for _, (position, cell) in world.get_components(BoardPosition, Cell):
        values[position.row][position.col] = cell.color
    return tuple(tuple(line) for line in values)


def apply_layout(world: World, grid: Grid) -> List[Position]:
    """Overwrite every cell from grid and return the squares whose content changed."""
    rows, cols = board_dimensions(world)
    if grid_dimensions(grid) != (rows, cols):
        raise ValueError(f"Layout is {grid_dimensions(grid)}, board is {(rows, cols)}")
    changed: List[Position] = []
    for _, (position, cell) in world.get_components(BoardPosition, Cell):
        value = grid[position.row][position.col]
        if cell.color != value:
            cell.color = value
            changed.append((position.row, position.col))
    return sorted(changed)
