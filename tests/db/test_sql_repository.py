"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.core.shared_types import Status
from src.db.sql_repository import GameModel, SQLGameRepository


def mock_model(**overrides) -> GameModel:
    data = dict(
        game_text="e2-e4 e7-e5\nKe1-e3",
        moves=["e2-e4", "e7-e5", "Ke1-e3"],
        current_fen="FEN string",
        moves_applied=2,
        status=Status.ILLEGAL_MOVE,
        failed_move="Ke1-e3",
    )
    data.update(overrides)
    return GameModel(**data)


def test_create_game(db_session_repo: Session) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    model = mock_model()
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(mock_model())
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(mock_model())
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session) -> None:
    """Update an earlier created record."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(
        mock_model(
            game_text="e2-e4",
            moves=["e2-e4"],
            moves_applied=1,
            status=Status.VALID,
            failed_move=None,
        )
    )

    updated = mock_model(
        game_text="e2-e4 e7-e5",
        moves=["e2-e4", "e7-e5"],
        moves_applied=2,
        status=Status.VALID,
        failed_move=None,
    )
    record = repo.update_game(game_id, updated)
    assert record == updated
    assert repo.get_game(game_id) == updated


def test_update_unknown_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), mock_model()) is None


def test_delete_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    model, game_id = repo.create_game(mock_model())
    assert repo.delete_game(game_id) == model
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None
