"""
Moves written in (long) algebraic notation, and how they change the board.

The notation is read strictly left to right:

    [piece] <from square> <'-' or 'x'> [taken piece] <to square>

* "e2-e4"   : pawn moves from e2 to e4
* "Ng1-f3"  : knight moves from g1 to f3
* "e4xd5"   : pawn on e4 takes the pawn on d5
* "Bb5xNc6" : bishop on b5 takes the knight on c6

Piece letters are always capitals (N, B, R, Q, K), whoever is moving. No letter means a pawn.
The color of the moving piece is supplied by the caller (whose turn it is), the taken piece belongs to the opponent.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.chess.board import Board
from src.chess.movement import can_move
from src.chess.pieces import BLANK, Color, Piece
from src.chess.square import Square
from src.core.exceptions import IllegalMoveError, MoveFormatError

_log = logging.getLogger(__name__)

MOVE_SEPARATOR = "-"
CAPTURE_SEPARATOR = "x"


@dataclass(frozen=True)
class PlainMove:
    """A piece moves onto an empty square, such as "Bb1-e4" or "e2-e4"."""

    piece: Piece
    from_square: Square
    to_square: Square

    def to_notation(self) -> str:
        return f"{self.piece.to_designator()}{self.from_square}{MOVE_SEPARATOR}{self.to_square}"

    def __str__(self) -> str:
        return self.to_notation()


@dataclass(frozen=True)
class CaptureMove:
    """A piece takes the opponent's piece standing on the target square, such as "Bb1xe4" or "Bb1xQe4"."""

    piece: Piece
    from_square: Square
    to_square: Square
    taken: Piece

    def to_notation(self) -> str:
        return (
            f"{self.piece.to_designator()}{self.from_square}{CAPTURE_SEPARATOR}"
            f"{self.taken.to_designator()}{self.to_square}"
        )

    def __str__(self) -> str:
        return self.to_notation()


Move = PlainMove | CaptureMove


# --- PARSING ---
def parse_move(token: str, color: Color) -> Move:
    """
    Parse a single move token for the player with the `color` pieces.

    Raises MoveFormatError for truncated / overlong tokens or a missing separator,
    PieceParseError for an unknown piece letter and SquareParseError for a square off the board.
    """
    designator, rest = _parse_designator(token)
    piece = Piece.from_designator(designator, color)
    from_square, rest = _parse_square(rest, token)
    is_capture, rest = _parse_separator(rest, token)
    # NOTE: a taken piece letter is allowed after '-' as well. It is simply not used by a plain move.
    taken_designator, rest = _parse_designator(rest)
    taken = Piece.from_designator(taken_designator, color.flip())
    to_square, rest = _parse_square(rest, token)

    if rest:
        raise MoveFormatError(f"Unexpected {rest!r} at the end of move {token!r}")

    move: Move = (
        CaptureMove(piece, from_square, to_square, taken)
        if is_capture
        else PlainMove(piece, from_square, to_square)
    )
    _log.debug("Parsed %r as %r", token, move)
    return move


def _parse_designator(text: str) -> tuple[str, str]:
    """Optional piece letter. Any capital counts as an attempt at one (and gets validated by the Piece)"""
    if text and text[0].isupper():
        return text[0], text[1:]
    return "", text


def _parse_square(text: str, token: str) -> tuple[Square, str]:
    if len(text) < 2:
        raise MoveFormatError(f"Move {token!r} ends before a square is complete")
    return Square.from_algebraic(text[:2]), text[2:]


def _parse_separator(text: str, token: str) -> tuple[bool, str]:
    """True for a capture"""
    if not text:
        raise MoveFormatError(
            f"Move {token!r} is missing '{MOVE_SEPARATOR}' or '{CAPTURE_SEPARATOR}'"
        )
    separator = text[0]
    if separator not in (MOVE_SEPARATOR, CAPTURE_SEPARATOR):
        raise MoveFormatError(
            f"Expected '{MOVE_SEPARATOR}' or '{CAPTURE_SEPARATOR}' in move {token!r}, got {separator!r}"
        )
    return separator == CAPTURE_SEPARATOR, text[1:]


# --- APPLYING MOVES ---
def apply_move(move: Move, board: Board) -> Optional[Board]:
    """
    The board after making the move, or None if the move cannot be made on this board.

    * the moving piece must stand on the starting square
    * plain move: the target square must be empty
    * capture: the target square must hold exactly the piece that is said to be taken
    * the piece must be able to travel from one square to the other (see movement.py)
    """
    match move:
        case PlainMove(piece=piece, from_square=from_square, to_square=to_square):
            target_ok = board.get(to_square).is_blank
        case CaptureMove(
            piece=piece, from_square=from_square, to_square=to_square, taken=taken
        ):
            target_ok = board.get(to_square) == taken

    if not (
        board.get(from_square) == piece
        and target_ok
        and can_move(piece, board, from_square, to_square)
    ):
        _log.debug("Move %s is not legal", move)
        return None

    _log.debug("Move %s", move)
    return board.set(from_square, BLANK).set(to_square, piece)


def ensure_legal(move: Move, board: Board) -> Board:
    """Same as `apply_move()`, but an illegal move raises instead of returning None"""
    new_board = apply_move(move, board)
    if new_board is None:
        raise IllegalMoveError(f"Move not allowed: {move}")
    return new_board
