"""
Application settings and logging setup.

Defaults can be overridden by a TOML file, and the TOML file by environment variables:

    [chess_validator]
    database_url = "sqlite:///./chess_games.db"
    log_level = "DEBUG"
    render_blank = " "

`get_settings` and `configure_logging` are called once by the application entry point (API startup).
"""

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Self

from src.chess.board import DEFAULT_TRAILER

CONFIG_SECTION = "chess_validator"
ENV_PREFIX = "CHESS_VALIDATOR_"
DEFAULT_CONFIG_PATH = "config.toml"


@dataclass
class Settings:
    database_url: str = "sqlite:///./chess_games.db"
    log_level: str = "INFO"
    # Board drawings: character for an empty square, and the line with the file names underneath
    render_blank: str = "_"
    render_trailer: str = DEFAULT_TRAILER

    @classmethod
    def load_from_toml(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> Self:
        """Missing file: defaults. Unknown keys are ignored."""
        settings = cls()
        if not os.path.exists(path):
            return settings
        with open(path, "rb") as f:
            data = tomllib.load(f)
        section = data.get(CONFIG_SECTION, {})
        for field in fields(cls):
            if field.name in section:
                setattr(settings, field.name, str(section[field.name]))
        return settings

    def override_from_env(self) -> Self:
        """CHESS_VALIDATOR_DATABASE_URL, CHESS_VALIDATOR_LOG_LEVEL, ..."""
        for field in fields(self):
            value = os.environ.get(f"{ENV_PREFIX}{field.name.upper()}")
            if value is not None:
                setattr(self, field.name, value)
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings.load_from_toml().override_from_env()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
