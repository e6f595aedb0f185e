"""Unit tests for /src/chess/board.py"""

import pytest

from src.chess.board import (
    DEFAULT_TRAILER,
    INITIAL_BOARD,
    PLAIN_TRAILER,
    STARTING_POSITION_FEN,
    Board,
)
from src.chess.pieces import (
    BLACK_KING,
    BLACK_PAWN,
    BLANK,
    WHITE_KNIGHT,
    WHITE_QUEEN,
    Color,
    Piece,
    PieceType,
)
from src.chess.square import ALL_SQUARES, Square
from src.core.exceptions import BoardFormatError

EMPTY_FEN = "/".join(["8"] * 8)


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """Make sure board position is correctly initialized using a partial FEN string"""
    board = Board.from_fen(STARTING_POSITION_FEN)
    back_rank = [
        PieceType.ROOK,
        PieceType.KNIGHT,
        PieceType.BISHOP,
        PieceType.QUEEN,
        PieceType.KING,
        PieceType.BISHOP,
        PieceType.KNIGHT,
        PieceType.ROOK,
    ]

    for file, piece_type in enumerate(back_rank):
        assert board.get(Square(file, 7)) == Piece(piece_type, Color.BLACK)
        assert board.get(Square(file, 6)) == Piece(PieceType.PAWN, Color.BLACK)
        assert board.get(Square(file, 1)) == Piece(PieceType.PAWN, Color.WHITE)
        assert board.get(Square(file, 0)) == Piece(piece_type, Color.WHITE)

    # 6th, 5th, 4th, 3rd ranks all empty
    for rank in range(2, 6):
        for file in range(8):
            assert board.get(Square(file, rank)).is_blank


def test_initial_board_constant() -> None:
    assert INITIAL_BOARD == Board.starting_position()
    assert INITIAL_BOARD.to_fen() == STARTING_POSITION_FEN


def test_creating_board_after_e4() -> None:
    """Say, white moved the pawn from e2 to e4, and I want to load up the board in this position"""
    board = Board.from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR")
    assert board.get(Square.from_algebraic("e2")).is_blank
    assert board.get(Square.from_algebraic("e4")) == Piece(PieceType.PAWN, Color.WHITE)


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION_FEN,
        EMPTY_FEN,
        "rnbqkbnr/pp1ppppp/8/2p5/4P3/5N2/PPPP1PPP/RNBQKB1R",
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1",
    ],
)
def test_fen_roundtrip(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


@pytest.mark.parametrize(
    "fen",
    [
        "/".join(["8"] * 7),  # a rank short
        "/".join(["8"] * 9),  # a rank too many
        "/".join(["7"] + ["8"] * 7),  # one file short
        "/".join(["9"] + ["8"] * 7),  # one file too many
        "/".join(["ppppppppp"] + ["8"] * 7),  # one piece too many
        "/".join(["x7"] + ["8"] * 7),  # not a piece
        "/".join(["8"] * 7 + ["RNBQKBN²"]),  # superscript two is not a count of empty squares
        "/".join(["٨"] + ["8"] * 7),  # only ASCII digits count empty squares
    ],
)
def test_invalid_fen(fen: str) -> None:
    with pytest.raises(BoardFormatError):
        Board.from_fen(fen)


def test_board_must_have_64_squares() -> None:
    with pytest.raises(BoardFormatError):
        Board(tuple(BLANK for _ in range(63)))


def test_empty_board() -> None:
    board = Board.empty()
    assert all(board.get(square).is_blank for square in ALL_SQUARES)
    assert board.to_fen() == EMPTY_FEN


# -- GET / SET ---
@pytest.mark.parametrize("square", ALL_SQUARES)
def test_set_then_get(square: Square) -> None:
    board = INITIAL_BOARD.set(square, WHITE_QUEEN)
    assert board.get(square) == WHITE_QUEEN


@pytest.mark.parametrize("square", ALL_SQUARES)
def test_set_leaves_original_board_untouched(square: Square) -> None:
    """No aliasing between the boards: the original keeps its piece"""
    original_piece = INITIAL_BOARD.get(square)
    new_board = INITIAL_BOARD.set(square, BLACK_KING)
    assert INITIAL_BOARD.get(square) == original_piece
    assert INITIAL_BOARD.to_fen() == STARTING_POSITION_FEN
    assert new_board is not INITIAL_BOARD


def test_set_changes_a_single_square() -> None:
    d4 = Square.from_algebraic("d4")
    board = INITIAL_BOARD.set(d4, WHITE_KNIGHT)
    for square in ALL_SQUARES:
        if square != d4:
            assert board.get(square) == INITIAL_BOARD.get(square)


def test_squares_of() -> None:
    assert INITIAL_BOARD.squares_of(WHITE_KNIGHT) == [
        Square.from_algebraic("b1"),
        Square.from_algebraic("g1"),
    ]
    assert len(INITIAL_BOARD.squares_of(BLACK_PAWN)) == 8
    assert INITIAL_BOARD.squares_of(WHITE_QUEEN) == [Square.from_algebraic("d1")]


def test_boards_are_immutable() -> None:
    with pytest.raises(AttributeError):
        INITIAL_BOARD.squares = ()  # type: ignore[misc]


# -- RENDERING ---
def test_render_starting_position() -> None:
    expected = "\n".join(
        [
            "8|r|n|b|q|k|b|n|r|",
            "7|p|p|p|p|p|p|p|p|",
            "6|_|_|_|_|_|_|_|_|",
            "5|_|_|_|_|_|_|_|_|",
            "4|_|_|_|_|_|_|_|_|",
            "3|_|_|_|_|_|_|_|_|",
            "2|P|P|P|P|P|P|P|P|",
            "1|R|N|B|Q|K|B|N|R|",
            "-|a b c d e f g h",
        ]
    )
    assert INITIAL_BOARD.render() == expected
    assert str(INITIAL_BOARD) == expected


def test_render_with_spaces() -> None:
    lines = INITIAL_BOARD.render(blank=" ", trailer=PLAIN_TRAILER).splitlines()
    assert len(lines) == 9
    assert lines[2] == "6| | | | | | | | |"
    assert lines[-1] == "  a b c d e f g h"
    assert DEFAULT_TRAILER == "-|a b c d e f g h"
