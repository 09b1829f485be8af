"""
Factory functions for creating games and states.
"""

import re
from typing import Dict, Mapping, Optional

from othello.games.game_base import GameBase, StateBase
from othello.utils.config import GAMES

_GAME_STRING = re.compile(r"^\s*(?P<name>\w+)\s*(?:\((?P<params>.*)\))?\s*$")


def create_game(game_name: str, params: Optional[Mapping[str, object]] = None) -> GameBase:
    """
    Create a game definition from the registry.

    Args:
        game_name: Key from GAMES registry (e.g., "othello")
        params: Game parameters, validated by the game itself

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(sorted(GAMES)) or "none registered"
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    return GAMES[game_name](params)


def create_state(game_name: str, params: Optional[Mapping[str, object]] = None) -> StateBase:
    """Create a game and return its initial state."""
    return create_game(game_name, params).new_initial_state()


def _parse_value(text: str) -> object:
    if text in ("True", "False"):
        return text == "True"
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            pass
    return text


def parse_game_string(game_string: str) -> tuple:
    """
    Split "name(key=value,...)" into (name, params).

    Values become bool, int or float where they parse as one.
    """
    match = _GAME_STRING.match(game_string)
    if match is None:
        raise ValueError(f"Malformed game string: {game_string!r}")

    params: Dict[str, object] = {}
    body = match.group("params")
    if body and body.strip():
        for item in body.split(","):
            key, sep, value = item.partition("=")
            if not sep or not key.strip():
                raise ValueError(f"Malformed game parameter {item!r} in {game_string!r}")
            params[key.strip()] = _parse_value(value.strip())

    return match.group("name"), params


def load_game(game_string: str) -> GameBase:
    """Create a game from a string such as "othello" or "othello()"."""
    name, params = parse_game_string(game_string)
    return create_game(name, params)
