from dataclasses import dataclass
from typing import Optional

from konane.components.piece_color import PieceColor

@dataclass(slots=True)
class Cell:
    """Per-square occupancy.

    color: owner of the piece standing on the square; None when the square is empty.
    """
    color: Optional[PieceColor] = None
