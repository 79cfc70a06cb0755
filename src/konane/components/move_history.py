from dataclasses import dataclass, field
from typing import List, Tuple

from konane.components.piece_color import PieceColor

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One completed turn: the mover, every square visited and every capture."""
    color: PieceColor
    path: Tuple[Position, ...]
    captured: Tuple[Position, ...]

    @property
    def origin(self) -> Position:
        return self.path[0]

    @property
    def destination(self) -> Position:
        return self.path[-1]

    @property
    def hops(self) -> int:
        return len(self.captured)


@dataclass(slots=True)
class MoveHistory:
    """Session-only log of completed turns, oldest first."""
    records: List[MoveRecord] = field(default_factory=list)
