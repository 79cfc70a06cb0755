from dataclasses import dataclass
from typing import Optional, Tuple

Position = Tuple[int, int]


@dataclass(slots=True)
class Selection:
    """Piece currently chosen by the active player during the playing phase."""
    position: Optional[Position] = None


@dataclass(slots=True)
class PendingRemoval:
    """Setup handshake progress.

    position: first removed square waiting for its adjacent partner.
    removed: number of accepted removals so far.
    """
    position: Optional[Position] = None
    removed: int = 0
