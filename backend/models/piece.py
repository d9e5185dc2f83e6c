from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    RED = "RED"
    WHITE = "WHITE"

    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.RED else Color.RED

    @property
    def forward(self) -> int:
        """Row delta of a forward step: red plays up the board, white down."""
        return -1 if self is Color.RED else 1

    @property
    def king_row(self) -> int:
        return 0 if self is Color.RED else 7


class PieceType(str, Enum):
    SINGLE = "SINGLE"
    KING = "KING"


@dataclass
class Piece:
    color: Color
    type: PieceType = PieceType.SINGLE

    @property
    def is_king(self) -> bool:
        return self.type is PieceType.KING

    def crown(self) -> None:
        self.type = PieceType.KING
