"""Game state resource describing the current phase and turn bookkeeping."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from konane.components.piece_color import PieceColor


class GamePhase(Enum):
    """High-level phases that decide which systems react to clicks."""
    SETUP = auto()
    PLAYING = auto()
    FINISHED = auto()


@dataclass
class GameState:
    """Singleton component storing phase, turn owner, winner and move counter."""
    phase: GamePhase = GamePhase.SETUP
    active_color: PieceColor = PieceColor.BLACK
    winner: Optional[PieceColor] = None
    move_count: int = 0
