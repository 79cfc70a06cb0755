from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable


@dataclass(slots=True)
class ClickThrottle:
	"""Serializes board clicks by discarding presses that arrive too quickly.

	The engine has no reentrancy guard, so the window funnels presses through
	this filter: any press closer than ``min_interval`` seconds to the previous
	accepted press is dropped, as is any press inside a ``block`` window.
	Accepted presses receive an increasing sequence id.
	"""

	min_interval: float = 0.12
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_last_time: float | None = field(init=False, default=None, repr=False)
	_block_until: float = field(init=False, default=0.0, repr=False)
	_sequence: int = field(init=False, default=0, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self.min_interval = max(0.0, float(self.min_interval))

	def allow(self) -> bool:
		now = self._clock()
		if now < self._block_until:
			return False
		if self._last_time is not None and (now - self._last_time) < self.min_interval:
			return False
		self._last_time = now
		self._sequence += 1
		return True

	def block(self, duration: float) -> None:
		if duration <= 0.0:
			return
		self._block_until = max(self._block_until, self._clock() + float(duration))

	def reset(self) -> None:
		self._last_time = None
		self._block_until = 0.0
		self._sequence = 0

	@property
	def last_sequence(self) -> int | None:
		return self._sequence or None
