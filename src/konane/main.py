"""Entry point for the Konane board.

Sets up the rules engine, input throttling, input mapping, rendering and the Arcade window.
"""
import sys

from arcade import Window, run, color
from loguru import logger

from konane.constants import LOG_LEVEL
from konane.engine import KonaneEngine
from konane.events.bus import EventBus, EVENT_MOUSE_PRESS_RAW
from konane.systems.board_ops import grid_dimensions
from konane.systems.input import InputSystem
from konane.systems.mouse_throttle_system import MouseThrottleSystem
from konane.systems.render import RenderSystem


class KonaneWindow(Window):
    def __init__(self):
        super().__init__(960, 640, "Konane", resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.mouse_throttle_system = MouseThrottleSystem(self.event_bus)
        self.engine = KonaneEngine(self.event_bus)
        rows, cols = grid_dimensions(self.engine.board)
        self.input_system = InputSystem(self.event_bus, self, rows=rows, cols=cols)
        self.render_system = RenderSystem(self.engine, self)
        self.background_color = color.BLACK

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS_RAW,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        self.input_system.handle_key_press(symbol, modifiers)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} {level} {message}")


def main():
    configure_logging()
    window = KonaneWindow()
    run()

if __name__ == "__main__":
    main()
