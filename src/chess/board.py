"""
The Game board: the `position` (in chess: the configuration of pieces on the board)

A Board is a value. `set()` hands back a new Board and leaves the one it was called on untouched,
so earlier boards can be kept around (history) and a failed move never has to be rolled back.
"""

from dataclasses import dataclass
from typing import Self

from src.chess.pieces import BLANK, Piece
from src.chess.square import (
    ALL_SQUARES,
    BOARD_DIMENSIONS,
    FILE_LETTERS,
    RANK_DIGITS,
    Square,
)
from src.core.exceptions import BoardFormatError, PieceParseError

NUM_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

# Rendering variants: the trailer line underneath the 8 ranks
DEFAULT_TRAILER = "-|" + " ".join(FILE_LETTERS)
PLAIN_TRAILER = "  " + " ".join(FILE_LETTERS)


@dataclass(frozen=True)
class Board:
    squares: tuple[Piece, ...]

    def __post_init__(self) -> None:
        if len(self.squares) != NUM_SQUARES:
            raise BoardFormatError(
                f"A board has exactly {NUM_SQUARES} squares, got {len(self.squares)}"
            )

    @classmethod
    def empty(cls) -> Self:
        return cls(tuple(BLANK for _ in range(NUM_SQUARES)))

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION_FEN)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using a given FEN string.

        That is, we supply the first part of the FEN string that denotes the board position
        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces. Again, left-to-right reads a1-h1.
        """
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[1]:
            raise BoardFormatError(
                f"FEN position must have {BOARD_DIMENSIONS[1]} ranks separated by '/', got {fen_str!r}"
            )

        cells: list[Piece] = [BLANK] * NUM_SQUARES
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - 1 - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 0
            for character in fen_one_rank:
                if character in RANK_DIGITS:
                    # A number (1-8) denotes the amount of empty squares after each other
                    file += int(character)
                    continue
                if file >= BOARD_DIMENSIONS[0]:
                    raise BoardFormatError(
                        f"Rank {rank + 1} in FEN {fen_str!r} has more than {BOARD_DIMENSIONS[0]} files"
                    )
                try:
                    cells[Square(file, rank).to_offset()] = Piece.from_fen(character)
                except PieceParseError as err:
                    raise BoardFormatError(f"{err} in FEN {fen_str!r}") from err
                file += 1

            if file != BOARD_DIMENSIONS[0]:
                raise BoardFormatError(
                    f"Rank {rank + 1} in FEN {fen_str!r} does not describe {BOARD_DIMENSIONS[0]} files"
                )
        return cls(tuple(cells))

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(BOARD_DIMENSIONS[0]):
            piece = self.get(Square(file, rank))

            if not piece.is_blank:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def get(self, square: Square) -> Piece:
        return self.squares[square.to_offset()]

    def set(self, square: Square, piece: Piece) -> Self:
        """Copy of this board with a single square changed"""
        cells = list(self.squares)
        cells[square.to_offset()] = piece
        return type(self)(tuple(cells))

    def squares_of(self, piece: Piece) -> list[Square]:
        """All squares the given piece stands on"""
        return [square for square in ALL_SQUARES if self.get(square) == piece]

    def render(self, blank: str = "_", trailer: str = DEFAULT_TRAILER) -> str:
        """
        Text drawing of the board, 8th rank on top:

        8|r|n|b|q|k|b|n|r|
        ...
        1|R|N|B|Q|K|B|N|R|
        -|a b c d e f g h
        """
        lines: list[str] = []
        for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1):
            cells = "".join(
                f"|{self.get(Square(file, rank)).symbol(blank)}"
                for file in range(BOARD_DIMENSIONS[0])
            )
            lines.append(f"{rank + 1}{cells}|")
        lines.append(trailer)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


INITIAL_BOARD = Board.starting_position()
