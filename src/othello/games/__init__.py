"""
Games module - rules engine and abstract game interfaces.
"""

from othello.games.game_state import GameState
from othello.games.game_base import GameBase, StateBase
from othello.games.game_rules import (
    Direction,
    on_board,
    row_col_from_move,
    row_col_to_move,
    count_steps,
    can_capture,
    capture,
    disk_count,
    legal_regular_actions,
)
from othello.games.othello import OthelloGame, OthelloState

__all__ = [
    "GameState",
    "GameBase",
    "StateBase",
    "OthelloGame",
    "OthelloState",
    "Direction",
    "on_board",
    "row_col_from_move",
    "row_col_to_move",
    "count_steps",
    "can_capture",
    "capture",
    "disk_count",
    "legal_regular_actions",
]
