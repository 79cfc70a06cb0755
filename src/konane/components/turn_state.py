from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Position = Tuple[int, int]
Direction = Tuple[int, int]


@dataclass(slots=True)
class TurnState:
    """Tracks the jump chain of the turn in progress.

    piece: square of the chaining piece once the first hop has landed.
    direction: vector every further hop of this turn must reuse.
    path: squares visited, origin first.
    captured: squares emptied by the hops so far.
    """

    piece: Optional[Position] = None
    direction: Optional[Direction] = None
    path: List[Position] = field(default_factory=list)
    captured: List[Position] = field(default_factory=list)

    @property
    def chain_active(self) -> bool:
        return self.piece is not None

    def clear(self) -> None:
        self.piece = None
        self.direction = None
        self.path = []
        self.captured = []
