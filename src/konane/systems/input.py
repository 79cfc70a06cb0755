from konane.constants import GRID_COLS, GRID_ROWS
from konane.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_GAME_RESET_REQUEST,
    EVENT_MOUSE_PRESS,
)
from konane.ui.layout import cell_at_point, point_in_rect, reset_button_rect

# arcade.key.N and arcade.key.R; kept as plain ints so the system stays importable headless.
KEY_NEW_GAME = (110, 114)
MOUSE_BUTTON_LEFT = 1


class InputSystem:
    """Maps throttled mouse presses and key presses onto engine requests."""

    def __init__(self, event_bus: EventBus, window, *, rows: int = GRID_ROWS, cols: int = GRID_COLS):
        self.event_bus = event_bus
        self.window = window
        self.rows = rows
        self.cols = cols
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        width, height = self.window.width, self.window.height
        if point_in_rect(x, y, reset_button_rect(width, height, self.rows, self.cols)):
            self.event_bus.emit(EVENT_GAME_RESET_REQUEST, reason="button")
            return
        cell = cell_at_point(x, y, width, height, self.rows, self.cols)
        if cell is None:
            return
        row, col = cell
        self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol in KEY_NEW_GAME:
            self.event_bus.emit(EVENT_GAME_RESET_REQUEST, reason="key")
