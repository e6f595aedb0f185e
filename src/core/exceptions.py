"""
Custom errors shared by all layers.

Everything derives from GameError, so the (future) API layer can catch a single type
and map it onto an error response.
"""


class GameError(Exception):
    """Base class for anything that goes wrong while handling a chess game."""


# --- PARSING ---
class NotationError(GameError):
    """Text could not be interpreted. Raised at parse time, so nothing partial is ever returned."""


class SquareParseError(NotationError):
    """Not a square in algebraic notation ('a1' - 'h8')."""


class PieceParseError(NotationError):
    """Unknown single-letter piece designator."""


class MoveFormatError(NotationError):
    """Move token is truncated, too long or has no '-' / 'x' separator."""


class GameFormatError(NotationError):
    """A line of game text does not hold one or two move tokens."""


class BoardFormatError(NotationError):
    """Piece placement (FEN) string does not describe an 8x8 board."""


# --- RULES / STATE ---
class IllegalMoveError(GameError):
    """Move does not match the board: wrong occupant on either square, or the piece cannot move like that."""


class GameStateError(GameError):
    """The stored game does not accept the requested operation."""


# --- OTHER LAYERS ---
class RepositoryError(GameError):
    """Record could not be found / stored."""


class InvalidRequestError(GameError, ValueError):
    """Request payload rejected by a validator (ValueError so pydantic reports it as a validation error)."""
