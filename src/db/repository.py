"""Storage interface for game validations. `SQLGameRepository` is the SQLAlchemy implementation, tests use an in-memory mock."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """
    Keeps the outcome of validating a game: the submitted text, the parsed moves,
    the FEN of the last legal position, the status and, for an illegal game, the move that failed.
    """

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Stored validation, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a fresh validation and hand back what was stored with its new ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite a validation after a move was added. None when the ID is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Drop a validation. Returns the removed record, None when the ID is unknown."""
        ...
