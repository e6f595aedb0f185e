"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    ValidateGameRequest,
)
from src.chess.board import Board
from src.chess.game import MOVES_PER_ROUND, Game, GameResult, color_for_ply
from src.chess.moves import ensure_legal, parse_move
from src.core.config import Settings, get_settings
from src.core.exceptions import GameStateError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.db.repository import GameRepository

_log = logging.getLogger(__name__)


class ValidationService:
    """Orchestration of layers for validating chess games."""

    def __init__(self, repository: GameRepository, settings: Settings | None = None) -> None:
        self.repo = repository
        self.settings = settings or get_settings()

    # -- API routes logic ---
    def validate_game(self, request: ValidateGameRequest) -> GameResponse:
        """Check a whole game, played from the starting position. The outcome is stored either way."""

        # Parse the game text (notation errors propagate: nothing gets stored)
        game = Game.from_text(request.game_text)

        # Replay the moves
        result = game.apply()

        # Store the GameModel in the repository
        game_data = self._to_model(request.game_text, game, result)
        stored_game, game_id = self.repo.create_game(game_data)
        _log.info("Stored game %s: %s", game_id, stored_game.status)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """Retrieve a stored validation."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Continue a stored (valid) game with one more move.
        ----
        The moving color follows from the number of moves already played.
        """
        stored_model = self._fetch_game(request.game_id)
        if stored_model.status != Status.VALID:
            raise GameStateError(
                f"Game {request.game_id} stopped at an illegal move ({stored_model.failed_move}). It cannot be continued."
            )

        # Attempt the move
        color = color_for_ply(len(stored_model.moves))
        move = parse_move(request.move, color)
        board = ensure_legal(move, Board.from_fen(stored_model.current_fen))

        # Capture updated state in GameModel
        # Black answers on the same line, White starts a new round
        separator = "\n" if len(stored_model.moves) % MOVES_PER_ROUND == 0 else " "
        after_move = GameModel(
            game_text=f"{stored_model.game_text.rstrip()}{separator}{request.move}",
            moves=[*stored_model.moves, move.to_notation()],
            current_fen=board.to_fen(),
            moves_applied=stored_model.moves_applied + 1,
            status=Status.VALID,
        )

        # store in repository
        self.repo.update_game(request.game_id, after_move)
        _log.info("Game %s continued with %s", request.game_id, move)

        return self._create_game_response(request.game_id, after_move)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _to_model(self, game_text: str, game: Game, result: GameResult) -> GameModel:
        return GameModel(
            game_text=game_text,
            moves=[move.to_notation() for move in game.moves],
            current_fen=result.board.to_fen(),
            moves_applied=result.moves_applied,
            status=Status.VALID if result.success else Status.ILLEGAL_MOVE,
            failed_move=(
                result.failed_move.to_notation() if result.failed_move else None
            ),
        )

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        board = Board.from_fen(model.current_fen)
        drawing = board.render(
            blank=self.settings.render_blank, trailer=self.settings.render_trailer
        )
        return GameResponse(
            game_id=game_id,
            status=Status(model.status),
            moves=model.moves,
            moves_applied=model.moves_applied,
            failed_move=model.failed_move,
            board_fen=model.current_fen,
            board=drawing.splitlines(),
            next_to_move=Color[color_for_ply(model.moves_applied).name],
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
