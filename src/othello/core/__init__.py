"""
Core module - board constants, enums and player mappings.
"""

from othello.core.types import (
    NUM_ROWS,
    NUM_COLS,
    NUM_CELLS,
    NUM_PLAYERS,
    CELL_STATES,
    PASS_MOVE,
    CellState,
    ChanceMode,
    Dynamics,
    GameType,
    Information,
    Outcome,
    Result,
    RewardModel,
    Utility,
    cell_glyph,
    check_player,
    opponent,
    player_to_cell_state,
)

__all__ = [
    # Constants
    "NUM_ROWS",
    "NUM_COLS",
    "NUM_CELLS",
    "NUM_PLAYERS",
    "CELL_STATES",
    "PASS_MOVE",
    # Types
    "CellState",
    "Outcome",
    "Result",
    "GameType",
    "Dynamics",
    "ChanceMode",
    "Information",
    "Utility",
    "RewardModel",
    # Functions
    "cell_glyph",
    "check_player",
    "opponent",
    "player_to_cell_state",
]
