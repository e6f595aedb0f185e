"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameModel:
    """Transport-safe representation of a validated chess game used between API, Service, and DB layers."""

    game_text: str
    moves: list[str]
    current_fen: str
    moves_applied: int
    status: str
    failed_move: Optional[str] = None
