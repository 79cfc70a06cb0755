from __future__ import annotations

from typing import Any

from loguru import logger

from konane.events.bus import (
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_PRESS_RAW,
    EventBus,
)
from konane.utils.input_throttle import ClickThrottle


class MouseThrottleSystem:
    """Turns raw window presses into throttled presses, one at a time."""

    def __init__(
        self,
        event_bus: EventBus,
        *,
        throttle: ClickThrottle | None = None,
    ) -> None:
        self.event_bus = event_bus
        self._throttle = throttle or ClickThrottle()
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self._on_mouse_press_raw)

    @property
    def throttle(self) -> ClickThrottle:
        return self._throttle

    def _on_mouse_press_raw(self, sender: Any, **payload: Any) -> None:
        try:
            x = float(payload["x"])
            y = float(payload["y"])
            button = int(payload["button"])
        except (KeyError, TypeError, ValueError):
            return
        if not self._throttle.allow():
            logger.debug("Dropped rapid press at ({:.0f}, {:.0f})", x, y)
            return
        self.event_bus.emit(
            EVENT_MOUSE_PRESS,
            x=x,
            y=y,
            button=button,
            press_id=self._throttle.last_sequence,
        )
