"""
Settings read from the environment (optionally from a .env file).

Every variable is prefixed with QUORIDOR_ and has a sensible default, so nothing needs configuring to play a local game.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from src.core.exceptions import ConfigurationError
from src.quoridor.position import MIN_BOARD_SIDE
from src.quoridor.state import DEFAULT_COLS, DEFAULT_ROWS, DEFAULT_WALLS_PER_PLAYER

DEFAULT_DATABASE_URL = "sqlite:///quoridor.db"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    walls_per_player: int = DEFAULT_WALLS_PER_PLAYER
    log_level: str = DEFAULT_LOG_LEVEL


def _int_from_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as err:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from err
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")
    return value


def load_settings() -> Settings:
    """Read the .env file (searched from the working directory upwards, if present) and build the Settings from the environment variables."""
    load_dotenv(find_dotenv(usecwd=True))

    log_level = os.getenv("QUORIDOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ConfigurationError(f"Unknown log level: {log_level!r}")

    return Settings(
        database_url=os.getenv("QUORIDOR_DATABASE_URL", DEFAULT_DATABASE_URL),
        rows=_int_from_env("QUORIDOR_ROWS", DEFAULT_ROWS, MIN_BOARD_SIDE),
        cols=_int_from_env("QUORIDOR_COLS", DEFAULT_COLS, MIN_BOARD_SIDE),
        walls_per_player=_int_from_env(
            "QUORIDOR_WALLS_PER_PLAYER", DEFAULT_WALLS_PER_PLAYER, 0
        ),
        log_level=log_level,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Entry points call this once. Library code only creates module level loggers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
