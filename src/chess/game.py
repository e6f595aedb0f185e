"""
The Game class is the entrypoint into the domain layer for the service layer.

A Game is the list of moves played, read from text with one round per line:

    e2-e4 e7-e5
    Ng1-f3 Nb8-c6
    Bf1-b5

The first move on a line is White's, the second one Black's. Only the last line may hold White's move alone.
Applying a game replays the moves one by one and stops at the first move that is not legal.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.chess.board import INITIAL_BOARD, Board
from src.chess.moves import Move, apply_move, parse_move
from src.chess.pieces import Color
from src.core.exceptions import GameFormatError, IllegalMoveError

_log = logging.getLogger(__name__)

MOVES_PER_ROUND = 2


def color_for_ply(ply: int) -> Color:
    """White makes the 1st, 3rd, 5th ... move (counting from 0: the even ones)"""
    return Color.WHITE if ply % MOVES_PER_ROUND == 0 else Color.BLACK


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of replaying a game.

    * success: every move was legal and `board` is the final position
    * failure: `board` is the position just before `failed_move`, the first move that was not legal
    """

    board: Board
    success: bool
    moves_applied: int
    failed_move: Optional[Move] = None

    def __iter__(self) -> Iterator[Board | bool]:
        """Allows unpacking as `board, success = game.apply()`"""
        return iter((self.board, self.success))

    def raise_for_failure(self) -> None:
        if not self.success:
            raise IllegalMoveError(
                f"Move not allowed: {self.failed_move} (move {self.moves_applied + 1}, {color_for_ply(self.moves_applied).name.lower()})"
            )


@dataclass(frozen=True)
class Game:
    moves: tuple[Move, ...]

    @classmethod
    def from_text(cls, text: str) -> Self:
        """
        Parse a whole game. Any mistake in the notation aborts the parse (raises a NotationError).

        Blank lines are skipped.
        """
        lines = [
            (line_number, line.split())
            for line_number, line in enumerate(text.splitlines(), start=1)
            if line.strip()
        ]

        moves: list[Move] = []
        for idx, (line_number, tokens) in enumerate(lines):
            is_last_line = idx == len(lines) - 1
            if len(tokens) > MOVES_PER_ROUND:
                raise GameFormatError(
                    f"Line {line_number} holds {len(tokens)} moves, a round has at most {MOVES_PER_ROUND}: {' '.join(tokens)!r}"
                )
            if len(tokens) < MOVES_PER_ROUND and not is_last_line:
                raise GameFormatError(
                    f"Line {line_number} is missing Black's move. Only the last round can be incomplete."
                )
            for token in tokens:
                moves.append(parse_move(token, color_for_ply(len(moves))))

        _log.debug("Parsed game with %d moves", len(moves))
        return cls(tuple(moves))

    def apply(self, board: Board = INITIAL_BOARD) -> GameResult:
        """Replay the moves in order, starting from `board`. Stops at the first move that is not legal."""
        for ply, move in enumerate(self.moves):
            new_board = apply_move(move, board)
            if new_board is None:
                _log.info(
                    "Move %d (%s) is not legal: %s",
                    ply + 1,
                    color_for_ply(ply).name.lower(),
                    move,
                )
                return GameResult(board, False, ply, move)
            board = new_board
        return GameResult(board, True, len(self.moves))

    def positions(self, board: Board = INITIAL_BOARD) -> Iterator[Board]:
        """The starting board, followed by the board after every legal move (up to the first illegal one)"""
        yield board
        for move in self.moves:
            new_board = apply_move(move, board)
            if new_board is None:
                return
            board = new_board
            yield board

    def rounds(self) -> list[tuple[Move, ...]]:
        """Moves grouped per round: (White's, Black's)"""
        return [
            self.moves[idx : idx + MOVES_PER_ROUND]
            for idx in range(0, len(self.moves), MOVES_PER_ROUND)
        ]

    def to_text(self) -> str:
        return "\n".join(
            " ".join(move.to_notation() for move in one_round)
            for one_round in self.rounds()
        )

    def __str__(self) -> str:
        return self.to_text()

    def __len__(self) -> int:
        return len(self.moves)


def parse_game(text: str) -> Game:
    """Entrypoint for whatever supplies the game text (a file, a request, ...)"""
    return Game.from_text(text)
