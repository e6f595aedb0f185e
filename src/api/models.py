"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

# longest token: piece + square + 'x' + piece + square
MAX_MOVE_LENGTH = 7


# --- REQUEST MODELS ---
class ValidateGameRequest(BaseModel):
    game_text: str

    @field_validator("game_text")
    @classmethod
    def validate_game_text(cls, value: str) -> str:
        """Only structural checks. The notation itself gets parsed by the domain layer."""
        if not value.strip():
            raise InvalidRequestError("Game text must contain at least one move.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    move: str

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: str) -> str:
        def _looks_like_a_move(value: str) -> bool:
            if not (5 <= len(value) <= MAX_MOVE_LENGTH):
                return False
            return ("-" in value or "x" in value) and not any(
                character.isspace() for character in value
            )

        if not _looks_like_a_move(value):
            raise InvalidRequestError(
                f"Cannot interpret move: {value!r} as a move in algebraic notation."
            )
        return value


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    status: Status
    moves: list[str]
    moves_applied: int
    failed_move: Optional[str]
    board_fen: str
    board: list[str]
    next_to_move: Color
