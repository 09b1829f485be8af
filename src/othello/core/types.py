"""
Core types, constants, and mappings.

This module contains the fundamental types used throughout the engine:
- Board geometry constants and the PASS action id
- CellState / Outcome / Result enums
- GameType: static facts about a game (dynamics, information, utility)
- Player <-> cell state and glyph mappings
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Dict, Mapping, Tuple


# ─── Board Geometry ───────────────────────────────────────────────────────────

NUM_ROWS = 8
NUM_COLS = 8
NUM_CELLS = NUM_ROWS * NUM_COLS
NUM_PLAYERS = 2

# Channels of the observation tensor (empty / mine / theirs)
CELL_STATES = 3

# The one action id that is not a cell
PASS_MOVE = NUM_CELLS

COL_LABELS = "abcdefgh"
ROW_LABELS = "12345678"


class CellState(IntEnum):
    """
    Contents of a single cell.

    Values double as observation tensor channels for player 0.
    """

    EMPTY = 0
    BLACK = 1
    WHITE = 2


class Outcome(Enum):
    """Decided result of a game; UNDECIDED while play continues."""

    UNDECIDED = auto()
    PLAYER_0 = auto()
    PLAYER_1 = auto()
    DRAW = auto()


class Result(Enum):
    """Outcome from one player's point of view."""

    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


# ─── Game Type ────────────────────────────────────────────────────────────────

class Dynamics(Enum):
    SEQUENTIAL = auto()
    SIMULTANEOUS = auto()


class ChanceMode(Enum):
    DETERMINISTIC = auto()
    EXPLICIT_STOCHASTIC = auto()
    SAMPLED_STOCHASTIC = auto()


class Information(Enum):
    PERFECT_INFORMATION = auto()
    IMPERFECT_INFORMATION = auto()


class Utility(Enum):
    ZERO_SUM = auto()
    CONSTANT_SUM = auto()
    GENERAL_SUM = auto()
    IDENTICAL = auto()


class RewardModel(Enum):
    """TERMINAL: utilities only at the end. REWARDS: after every action."""

    TERMINAL = auto()
    REWARDS = auto()


@dataclass(frozen=True)
class GameType:
    """
    Static facts about a game that search code can branch on.

    The provides_* flags say which observation methods a state implements.
    """

    short_name: str
    long_name: str
    dynamics: Dynamics
    chance_mode: ChanceMode
    information: Information
    utility: Utility
    reward_model: RewardModel
    max_num_players: int
    min_num_players: int
    provides_information_state_string: bool
    provides_information_state_tensor: bool
    provides_observation_string: bool
    provides_observation_tensor: bool
    parameter_specification: Mapping[str, object] = field(default_factory=dict)


# ─── Player Mappings ──────────────────────────────────────────────────────────

# Player 0 plays Black, player 1 plays White
PLAYER_CELL_STATES: Dict[int, CellState] = {
    0: CellState.BLACK,
    1: CellState.WHITE,
}

# Each player sees its own colour as "x"
GLYPHS: Dict[int, Dict[CellState, str]] = {
    0: {CellState.EMPTY: "-", CellState.BLACK: "x", CellState.WHITE: "o"},
    1: {CellState.EMPTY: "-", CellState.BLACK: "o", CellState.WHITE: "x"},
}

RETURNS: Dict[Outcome, Tuple[float, float]] = {
    Outcome.UNDECIDED: (0.0, 0.0),
    Outcome.PLAYER_0: (1.0, -1.0),
    Outcome.PLAYER_1: (-1.0, 1.0),
    Outcome.DRAW: (0.0, 0.0),
}


def check_player(player: int) -> int:
    """Return `player` unchanged, or raise ValueError if it is not 0 or 1."""
    if player not in PLAYER_CELL_STATES:
        raise ValueError(f"Invalid player id {player}")
    return player


def player_to_cell_state(player: int) -> CellState:
    return PLAYER_CELL_STATES[check_player(player)]


def opponent(player: int) -> int:
    return 1 - check_player(player)


def cell_glyph(player: int, cell: int) -> str:
    """Display character for `cell` as seen by `player`."""
    return GLYPHS[check_player(player)][CellState(int(cell))]
