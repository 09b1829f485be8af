"""
Configuration, logging setup and game registry.

The registry starts empty. Entry points call register_default_games()
before looking games up.
"""

import logging
from typing import Callable, Dict, List, Mapping, Optional

from othello.games.game_base import GameBase
from othello.games.othello import OthelloGame


GameFactory = Callable[[Optional[Mapping[str, object]]], GameBase]


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES: Dict[str, GameFactory] = {}

DEFAULT_GAMES: Dict[str, GameFactory] = {
    "othello": OthelloGame,
}


def register_game(name: str, factory: GameFactory) -> None:
    """
    Make `factory` available under `name`.

    Re-registering the same factory is a no-op; registering a different
    one under a taken name raises ValueError.
    """
    existing = GAMES.get(name)
    if existing is not None and existing is not factory:
        raise ValueError(f"Game already registered: {name}")
    GAMES[name] = factory


def unregister_game(name: str) -> None:
    GAMES.pop(name, None)


def registered_games() -> List[str]:
    return sorted(GAMES)


def register_default_games() -> None:
    """Register every game shipped with the package."""
    for name, factory in DEFAULT_GAMES.items():
        register_game(name, factory)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    """Install a root handler. Only application entry points call this."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Command-line configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "othello",
        perspective: Optional[int] = None,
        log_level: str = "WARNING",
    ):
        if perspective not in (None, 0, 1):
            raise ValueError(f"Invalid perspective: {perspective}. Expected 0 or 1.")
        if log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {log_level}. Expected one of {', '.join(LOG_LEVELS)}")

        self.game_name = game_name
        # None renders from the side to move
        self.perspective = perspective
        self.log_level = log_level.upper()
