from enum import Enum


class PieceColor(Enum):
    """Piece identity and turn ownership."""
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "PieceColor":
        return PieceColor.WHITE if self is PieceColor.BLACK else PieceColor.BLACK

    @property
    def label(self) -> str:
        return self.value.capitalize()
