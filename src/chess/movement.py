"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement rule for each piece type.

Each rule answers a single question: "can this piece travel from one square to the other on this board?"
Occupancy of the starting square and the target square is checked by the move itself (see moves.py),
the rules here only look at the shape of the move and at the squares strictly in between.
"""

from typing import Callable, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def get(self, square: Square) -> Piece: ...


Vector = tuple[int, int]

# Pawns walk up the board for White, down for Black
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
# 0-indexed rank the pawns start on (2nd and 7th rank)
PAWN_STARTING_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def delta(from_square: Square, to_square: Square) -> Vector:
    """(change in file, change in rank)"""
    return to_square.file - from_square.file, to_square.rank - from_square.rank


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Find the squares strictly in between the two squares specified.

    Only defined for squares on the same rank, file or diagonal. Anything else is a programming error.
    """
    df, dr = delta(from_square, to_square)
    is_straight = (df == 0) != (dr == 0)
    is_diagonal = df != 0 and abs(df) == abs(dr)
    if not (is_straight or is_diagonal):
        raise ValueError(
            f"squares_between requires both squares to lie on one line. \n from: {from_square}\n to:{to_square}"
        )

    step: Vector = (_sign(df), _sign(dr))
    squares_found: list[Square] = []
    square = Square(from_square.file + step[0], from_square.rank + step[1])
    while square != to_square:
        squares_found.append(square)
        square = Square(square.file + step[0], square.rank + step[1])
    return squares_found


def is_path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    """Path-clearing check: every square strictly between the two squares is empty"""
    return all(board.get(square).is_blank for square in squares_between(from_square, to_square))


# --- MOVEMENT RULES ---
def pawn_can_move(
    piece: Piece, board: Board, from_square: Square, to_square: Square
) -> bool:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two in their first move (so when on their starting rank), when both squares are empty
    - takes diagonally (and only takes: there is no en passant)
    """
    direction = PAWN_DIRECTION[piece.color]
    df, dr = delta(from_square, to_square)

    if df == 0 and dr == direction:
        return board.get(to_square).is_blank

    if df == 0 and dr == 2 * direction:
        on_starting_rank = from_square.rank == PAWN_STARTING_RANK[piece.color]
        passed_square = Square(from_square.file, from_square.rank + direction)
        return (
            on_starting_rank
            and board.get(passed_square).is_blank
            and board.get(to_square).is_blank
        )

    if abs(df) == 1 and dr == direction:
        return not board.get(to_square).is_blank

    return False


def knight_can_move(
    piece: Piece, board: Board, from_square: Square, to_square: Square
) -> bool:
    """Knights always move such that {|delta_file|, |delta_rank|} = {1, 2}. They jump, so nothing can block them."""
    df, dr = delta(from_square, to_square)
    return (abs(df), abs(dr)) in [(1, 2), (2, 1)]


def bishop_can_move(
    piece: Piece, board: Board, from_square: Square, to_square: Square
) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    df, dr = delta(from_square, to_square)
    if df == 0 or abs(df) != abs(dr):
        return False
    return is_path_clear(board, from_square, to_square)


def rook_can_move(
    piece: Piece, board: Board, from_square: Square, to_square: Square
) -> bool:
    """Rooks move either horizontally or vertically"""
    df, dr = delta(from_square, to_square)
    if (df == 0) == (dr == 0):
        return False
    return is_path_clear(board, from_square, to_square)


def queen_can_move(
    piece: Piece, board: Board, from_square: Square, to_square: Square
) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return bishop_can_move(piece, board, from_square, to_square) or rook_can_move(
        piece, board, from_square, to_square
    )


def king_can_move(
    piece: Piece, board: Board, from_square: Square, to_square: Square
) -> bool:
    """
    The king can move by a single square at the time.

    No castling.
    """
    df, dr = delta(from_square, to_square)
    return max(abs(df), abs(dr)) == 1


def blank_can_move(
    piece: Piece, board: Board, from_square: Square, to_square: Square
) -> bool:
    """An empty square has nothing to move"""
    return False


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CanMoveFn = Callable[[Piece, Board, Square, Square], bool]
MOVEMENT_RULES: dict[PieceType, CanMoveFn] = {
    PieceType.EMPTY: blank_can_move,
    PieceType.PAWN: pawn_can_move,
    PieceType.KNIGHT: knight_can_move,
    PieceType.BISHOP: bishop_can_move,
    PieceType.ROOK: rook_can_move,
    PieceType.QUEEN: queen_can_move,
    PieceType.KING: king_can_move,
}


def can_move(piece: Piece, board: Board, from_square: Square, to_square: Square) -> bool:
    """Dispatch to the movement rule of the piece's type"""
    movement_rule: CanMoveFn = MOVEMENT_RULES[piece.type]
    return movement_rule(piece, board, from_square, to_square)
