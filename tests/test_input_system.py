from konane.components.game_state import GamePhase
from konane.engine import KonaneEngine
from konane.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_GAME_RESET_REQUEST,
    EVENT_MOUSE_PRESS,
)
from konane.systems.input import InputSystem
from konane.ui.layout import (
    cell_at_point,
    cell_center,
    compute_board_geometry,
    reset_button_rect,
)


class DummyWindow:
    def __init__(self, width=960, height=640):
        self.width = width
        self.height = height


def _collect(bus, name):
    received = []
    bus.subscribe(name, lambda sender, **kwargs: received.append(kwargs))
    return received


def test_geometry_for_default_window():
    assert compute_board_geometry(960, 640) == (69, 79.0, 20)


def test_mouse_press_translates_to_cell_click():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    clicks = _collect(bus, EVENT_CELL_CLICK)
    tile, start_x, start_y = compute_board_geometry(window.width, window.height)
    # Row 0 sits along the top edge of the board.
    x = start_x + tile / 2
    y = start_y + 7 * tile + tile / 2
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"row": 0, "col": 0}]


def test_cell_centers_map_back_to_their_cells():
    tile, start_x, start_y = compute_board_geometry(960, 640)
    for row in range(8):
        for col in range(8):
            x, y = cell_center(row, col, tile, start_x, start_y)
            assert cell_at_point(x, y, 960, 640) == (row, col)


def test_press_outside_board_is_ignored():
    bus = EventBus()
    InputSystem(bus, DummyWindow())
    clicks = _collect(bus, EVENT_CELL_CLICK)
    bus.emit(EVENT_MOUSE_PRESS, x=5, y=5, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=300, y=630, button=1)
    assert clicks == []


def test_non_left_button_is_ignored():
    bus = EventBus()
    InputSystem(bus, DummyWindow())
    clicks = _collect(bus, EVENT_CELL_CLICK)
    bus.emit(EVENT_MOUSE_PRESS, x=113, y=537, button=4)
    assert clicks == []


def test_new_game_button_requests_reset():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    resets = _collect(bus, EVENT_GAME_RESET_REQUEST)
    clicks = _collect(bus, EVENT_CELL_CLICK)
    left, right, bottom, top = reset_button_rect(window.width, window.height)
    bus.emit(EVENT_MOUSE_PRESS, x=(left + right) / 2, y=(bottom + top) / 2, button=1)
    assert resets == [{"reason": "button"}]
    assert clicks == []


def test_new_game_keys_request_reset():
    bus = EventBus()
    input_system = InputSystem(bus, DummyWindow())
    resets = _collect(bus, EVENT_GAME_RESET_REQUEST)
    input_system.handle_key_press(110, 0)
    input_system.handle_key_press(114, 0)
    input_system.handle_key_press(65, 0)
    assert resets == [{"reason": "key"}, {"reason": "key"}]


def test_presses_drive_the_engine():
    bus = EventBus()
    window = DummyWindow()
    engine = KonaneEngine(bus)
    InputSystem(bus, window)
    tile, start_x, start_y = compute_board_geometry(window.width, window.height)
    for row, col in ((3, 3), (3, 4)):
        x, y = cell_center(row, col, tile, start_x, start_y)
        bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert engine.phase == GamePhase.PLAYING
    assert engine.board[3][3] is None and engine.board[3][4] is None
    left, right, bottom, top = reset_button_rect(window.width, window.height)
    bus.emit(EVENT_MOUSE_PRESS, x=left + 1, y=bottom + 1, button=1)
    assert engine.phase == GamePhase.SETUP
    assert engine.board[3][3] is not None


def test_press_maps_onto_smaller_board():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window, rows=6, cols=6)
    clicks = _collect(bus, EVENT_CELL_CLICK)
    tile, start_x, start_y = compute_board_geometry(window.width, window.height, 6, 6)
    for row, col in ((0, 0), (5, 5)):
        x, y = cell_center(row, col, tile, start_x, start_y, rows=6)
        bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"row": 0, "col": 0}, {"row": 5, "col": 5}]
