from typing import Optional, Tuple

from konane.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    GRID_COLS,
    GRID_ROWS,
    RESET_BUTTON_BOTTOM,
    RESET_BUTTON_HEIGHT,
    RESET_BUTTON_WIDTH,
    SIDE_GAP,
    STATUS_PANEL_MIN_WIDTH,
    STATUS_PANEL_TOP_MARGIN,
)

Rect = Tuple[float, float, float, float]  # left, right, bottom, top


def compute_board_geometry(
    window_width: int,
    window_height: int,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
):
    """Return (tile_size, start_x, start_y) for the board's lower-left corner.

    Shared by rendering and input so a click always maps to the square drawn under it.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < 20:
        tile_size = 20
    total_width = cols * tile_size
    start_x = max(SIDE_GAP, (window_width - total_width - SIDE_GAP - STATUS_PANEL_MIN_WIDTH) / 2)
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_center(
    row: int,
    col: int,
    tile_size: int,
    start_x: float,
    start_y: float,
    rows: int = GRID_ROWS,
) -> Tuple[float, float]:
    # Row 0 is drawn at the top of the board.
    x = start_x + col * tile_size + tile_size / 2
    y = start_y + (rows - 1 - row) * tile_size + tile_size / 2
    return x, y


def cell_at_point(
    x: float,
    y: float,
    window_width: int,
    window_height: int,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> Optional[Tuple[int, int]]:
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    row = rows - 1 - int((y - start_y) // tile_size)
    return row, col


def status_panel_rect(
    window_width: int,
    window_height: int,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> Rect:
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    left = start_x + cols * tile_size + SIDE_GAP
    right = max(left + STATUS_PANEL_MIN_WIDTH, window_width - SIDE_GAP)
    return left, right, start_y, window_height - STATUS_PANEL_TOP_MARGIN


def reset_button_rect(
    window_width: int,
    window_height: int,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> Rect:
    left, right, bottom, _top = status_panel_rect(window_width, window_height, rows, cols)
    center_x = (left + right) / 2
    button_bottom = bottom + RESET_BUTTON_BOTTOM
    return (
        center_x - RESET_BUTTON_WIDTH / 2,
        center_x + RESET_BUTTON_WIDTH / 2,
        button_bottom,
        button_bottom + RESET_BUTTON_HEIGHT,
    )


def point_in_rect(x: float, y: float, rect: Rect) -> bool:
    left, right, bottom, top = rect
    return left <= x <= right and bottom <= y <= top
