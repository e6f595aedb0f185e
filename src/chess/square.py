"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import SquareParseError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

FILE_LETTERS = "abcdefgh"
RANK_DIGITS = "12345678"


@dataclass(frozen=True)
class Square:
    """file and rank are 0-indexed: a1 is (0, 0), h8 is (7, 7)"""

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        if len(sq) != 2:
            raise SquareParseError(
                f"A square is a file letter followed by a rank digit, got {sq!r}"
            )
        file_char, rank_char = sq
        if file_char not in FILE_LETTERS:
            raise SquareParseError(f"Unknown file {file_char!r} in square {sq!r}")
        if rank_char not in RANK_DIGITS:
            raise SquareParseError(f"Unknown rank {rank_char!r} in square {sq!r}")
        return cls(FILE_LETTERS.index(file_char), RANK_DIGITS.index(rank_char))

    @classmethod
    def from_offset(cls, offset: int) -> Square:
        """Inverse of `to_offset()`"""
        file, rank = offset % BOARD_DIMENSIONS[0], offset // BOARD_DIMENSIONS[0]
        square = cls(file, rank)
        if not square.is_within_bounds():
            raise ValueError(f"Offset {offset} lies outside the board")
        return square

    def to_algebraic(self) -> str:
        return f"{FILE_LETTERS[self.file]}{RANK_DIGITS[self.rank]}"

    def to_offset(self) -> int:
        """Index into the board's cells: rank-major, starting at a1"""
        return self.rank * BOARD_DIMENSIONS[0] + self.file

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )

    def __str__(self) -> str:
        return self.to_algebraic()


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square.from_offset(offset)
    for offset in range(BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1])
)
