"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    VALID = "valid"
    ILLEGAL_MOVE = "illegal move"


# --- Color here DOES NOT know about the domain's Color enum (src/chess/pieces.py). Only its name is shared.
# --- NOTE Same name on purpose: reads clearly, and the imports show which version is used in what part of the code


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
