"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import PieceParseError


class PieceType(Enum):
    EMPTY = auto()
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    def flip(self) -> Self:
        """The opponent's color"""
        return Color.BLACK if self == Color.WHITE else Color.WHITE


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Move notation names the piece with a capital letter. Pawns have no letter at all.
DESIGNATOR_TO_PIECE: dict[str, PieceType] = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}

PIECE_TO_DESIGNATOR: dict[PieceType, str] = {
    value: key for key, value in DESIGNATOR_TO_PIECE.items()
}


@dataclass(frozen=True)
class Piece:
    """
    What occupies a square.

    NOTE: an empty square is a Piece as well (type EMPTY). Its color is meaningless, always use `is_blank`
    instead of looking at it.
    """

    type: PieceType
    color: Color

    @property
    def is_blank(self) -> bool:
        return self.type == PieceType.EMPTY

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        if character.lower() not in FEN_TO_PIECE:
            raise PieceParseError(f"Unknown piece character {character!r}")
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    @classmethod
    def from_designator(cls, designator: str, color: Color) -> Self:
        """
        Piece letter as used in move notation: N, B, R, Q, K. An empty designator means a pawn.
        The color is never part of the notation, the caller knows whose turn it is.
        """
        if designator == "":
            return cls(PieceType.PAWN, color)
        if designator not in DESIGNATOR_TO_PIECE:
            raise PieceParseError(
                f"Unknown piece designator {designator!r}. Pick one from {', '.join(DESIGNATOR_TO_PIECE)}"
            )
        return cls(DESIGNATOR_TO_PIECE[designator], color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    def to_designator(self) -> str:
        """Reverse of `from_designator()`: pawns (and blanks) have no letter"""
        return PIECE_TO_DESIGNATOR.get(self.type, "")

    def symbol(self, blank: str = "_") -> str:
        """Single character used when drawing a board"""
        return blank if self.is_blank else self.to_fen()

    def __str__(self) -> str:
        return self.symbol()


# The blank square. Color is arbitrary (see Piece docstring)
BLANK = Piece(PieceType.EMPTY, Color.WHITE)

WHITE_PAWN = Piece(PieceType.PAWN, Color.WHITE)
WHITE_KNIGHT = Piece(PieceType.KNIGHT, Color.WHITE)
WHITE_BISHOP = Piece(PieceType.BISHOP, Color.WHITE)
WHITE_ROOK = Piece(PieceType.ROOK, Color.WHITE)
WHITE_QUEEN = Piece(PieceType.QUEEN, Color.WHITE)
WHITE_KING = Piece(PieceType.KING, Color.WHITE)

BLACK_PAWN = Piece(PieceType.PAWN, Color.BLACK)
BLACK_KNIGHT = Piece(PieceType.KNIGHT, Color.BLACK)
BLACK_BISHOP = Piece(PieceType.BISHOP, Color.BLACK)
BLACK_ROOK = Piece(PieceType.ROOK, Color.BLACK)
BLACK_QUEEN = Piece(PieceType.QUEEN, Color.BLACK)
BLACK_KING = Piece(PieceType.KING, Color.BLACK)
