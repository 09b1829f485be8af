"""
Othello game implementation.

Uses a flat int8 board (see GameState):
    0 = empty
    1 = black (player 0)
    2 = white (player 1)

Action ids 0..63 place a disk on that cell; PASS_MOVE (64) passes.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

import numpy as np

from othello.core.types import (
    CELL_STATES,
    COL_LABELS,
    NUM_CELLS,
    NUM_COLS,
    NUM_PLAYERS,
    NUM_ROWS,
    PASS_MOVE,
    RETURNS,
    ROW_LABELS,
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
from othello.games.game_base import GameBase, StateBase
from othello.games.game_rules import (
    Direction,
    can_capture,
    capture,
    count_steps,
    disk_count,
    legal_regular_actions,
    row_col_from_move,
    row_col_to_move,
)
from othello.games.game_state import GameState

logger = logging.getLogger(__name__)

COL_HEADER = "  " + " ".join(COL_LABELS) + "  "

# Observation channel per stored cell value, indexed by player
_CHANNELS = (
    np.array([0, 1, 2], dtype=np.intp),
    np.array([0, 2, 1], dtype=np.intp),
)

_WINNER_OUTCOME = {0: Outcome.PLAYER_0, 1: Outcome.PLAYER_1}

GAME_TYPE = GameType(
    short_name="othello",
    long_name="Othello",
    dynamics=Dynamics.SEQUENTIAL,
    chance_mode=ChanceMode.DETERMINISTIC,
    information=Information.PERFECT_INFORMATION,
    utility=Utility.ZERO_SUM,
    reward_model=RewardModel.TERMINAL,
    max_num_players=NUM_PLAYERS,
    min_num_players=NUM_PLAYERS,
    provides_information_state_string=True,
    provides_information_state_tensor=False,
    provides_observation_string=True,
    provides_observation_tensor=True,
)


class OthelloGame(GameBase):
    """Othello on the standard 8x8 board. Takes no parameters."""

    __slots__ = ('params',)

    def __init__(self, params: Optional[Mapping[str, object]] = None):
        params = dict(params or {})
        unknown = sorted(set(params) - set(self.parameter_specification()))
        if unknown:
            raise ValueError(f"Unknown parameter(s) for othello: {', '.join(unknown)}")
        self.params = params

    def game_type(self) -> GameType:
        return GAME_TYPE

    def game_id(self) -> str:
        return GAME_TYPE.short_name

    def long_name(self) -> str:
        return GAME_TYPE.long_name

    def parameter_specification(self) -> Dict[str, object]:
        return dict(GAME_TYPE.parameter_specification)

    def num_players(self) -> int:
        return NUM_PLAYERS

    def num_distinct_actions(self) -> int:
        return NUM_CELLS + 1

    def min_utility(self) -> float:
        return -1.0

    def max_utility(self) -> float:
        return 1.0

    def utility_sum(self) -> float:
        return 0.0

    def max_game_length(self) -> int:
        # 60 placements, and a pass is always followed by a placement
        return 2 * (NUM_CELLS - 4)

    def observation_tensor_shape(self) -> List[int]:
        return [CELL_STATES, NUM_ROWS, NUM_COLS]

    def new_initial_state(self) -> "OthelloState":
        return OthelloState(self)

    def __repr__(self) -> str:
        return "OthelloGame()"


class OthelloState(StateBase):
    """A position in an Othello game."""

    __slots__ = ('game', 'state')

    def __init__(self, game: Optional[OthelloGame] = None):
        self.game = game
        self.state = GameState.initial()

    # ─── State access ─────────────────────────────────────────────────────

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def current_player(self) -> int:
        return self.state.current_player

    @property
    def outcome(self) -> Outcome:
        return self.state.outcome

    def board_at(self, row: int, col: Optional[int] = None) -> CellState:
        """Cell contents by (row, col), or by flat index when col is omitted."""
        if col is None:
            row_col_from_move(row)
            return CellState(int(self.state.board[row]))
        return CellState(int(self.state.board[row_col_to_move(row, col)]))

    def disk_count(self, player: int) -> int:
        return disk_count(self.state.board, player)

    # ─── Moves ────────────────────────────────────────────────────────────

    def is_legal(self, move: int) -> bool:
        """True if the player to act may place at `move` (passes excluded)."""
        return can_capture(self.state.board, self.state.current_player, move)

    def legal_actions(self) -> List[int]:
        if self.is_terminal():
            return []
        moves = legal_regular_actions(self.state.board, self.state.current_player)
        if not moves:
            moves.append(PASS_MOVE)
        return moves

    def apply_action(self, action: int) -> None:
        """
        Apply `action` for the player to act.

        A pass only hands the turn over; callers are trusted to pass only
        when legal_actions() == [PASS_MOVE]. A placement must be legal.
        After a placement the game ends if neither player can place;
        otherwise the turn passes to the opponent.

        Raises:
            ValueError: the game is over, or `action` is out of range or illegal.
        """
        if self.is_terminal():
            raise ValueError(f"Cannot apply action {action}: game is over")

        state = self.state
        player = state.current_player

        if action == PASS_MOVE:
            logger.debug("player %d passes", player)
            state.history.append(action)
            state.current_player = opponent(player)
            return

        row_col_from_move(action)
        if not can_capture(state.board, player, action):
            raise ValueError(f"Invalid move {action}")

        state.board[action] = player_to_cell_state(player)
        for direction in Direction:
            steps = count_steps(state.board, player, action, direction)
            if steps > 0:
                capture(state.board, player, action, direction, steps)

        state.history.append(action)
        logger.debug("player %d plays %d", player, action)

        if self._no_valid_actions():
            self._decide_outcome()
        else:
            state.current_player = opponent(player)

    def _no_valid_actions(self) -> bool:
        board = self.state.board
        return not legal_regular_actions(board, 0) and not legal_regular_actions(board, 1)

    def _decide_outcome(self) -> None:
        black = self.disk_count(0)
        white = self.disk_count(1)

        if black > white:
            self.state.outcome = _WINNER_OUTCOME[0]
        elif black < white:
            self.state.outcome = _WINNER_OUTCOME[1]
        else:
            self.state.outcome = Outcome.DRAW

        logger.info("game over: %s (black %d, white %d)", self.state.outcome.name, black, white)

    # ─── Results ──────────────────────────────────────────────────────────

    def is_terminal(self) -> bool:
        return self.state.outcome is not Outcome.UNDECIDED

    def returns(self) -> List[float]:
        return list(RETURNS[self.state.outcome])

    def result(self, player: int) -> Result:
        check_player(player)
        outcome = self.state.outcome
        if outcome is Outcome.UNDECIDED:
            return Result.NEUTRAL
        if outcome is Outcome.DRAW:
            return Result.TIE
        return Result.WIN if outcome is _WINNER_OUTCOME[player] else Result.LOSS

    # ─── Rendering & observation ──────────────────────────────────────────

    def action_to_string(self, player: int, action: int) -> str:
        glyph = cell_glyph(player, player_to_cell_state(player))
        if action == PASS_MOVE:
            return f"{glyph}(pass)"
        row, col = row_col_from_move(action)
        return f"{COL_LABELS[col]}{ROW_LABELS[row]} ({glyph})"

    def to_string_for_player(self, player: int) -> str:
        check_player(player)
        board = self.state.board
        lines = [COL_HEADER]
        for r in range(NUM_ROWS):
            label = ROW_LABELS[r]
            cells = "".join(
                cell_glyph(player, board[r * NUM_COLS + c]) + " " for c in range(NUM_COLS)
            )
            lines.append(f"{label} {cells}{label}")
        lines.append(COL_HEADER)
        return "\n".join(lines)

    def to_string(self) -> str:
        return self.to_string_for_player(self.state.current_player)

    def observation_string(self, player: int) -> str:
        return self.to_string_for_player(player)

    def information_state_string(self, player: int) -> str:
        check_player(player)
        return self.history_string()

    def observation_tensor(self, player: int, out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        One-hot encode the board as (CELL_STATES, NUM_CELLS) float32.

        Channel 0 is empty, channel 1 is `player`'s colour, channel 2 the
        opponent's. When `out` is given it must hold CELL_STATES * NUM_CELLS
        contiguous elements; it is overwritten and returned.
        """
        check_player(player)
        if out is None:
            out = np.zeros((CELL_STATES, NUM_CELLS), dtype=np.float32)
            view = out
        else:
            if out.size != CELL_STATES * NUM_CELLS:
                raise ValueError(
                    f"Observation buffer has {out.size} elements, expected {CELL_STATES * NUM_CELLS}"
                )
            view = out.reshape(CELL_STATES, NUM_CELLS)
            if not np.shares_memory(view, out):
                raise ValueError("Observation buffer must be contiguous")
            view.fill(0)

        channels = _CHANNELS[player][self.state.board]
        view[channels, np.arange(NUM_CELLS)] = 1
        return out

    # ─── Copying ──────────────────────────────────────────────────────────

    def clone(self) -> "OthelloState":
        s = OthelloState.__new__(OthelloState)
        s.game = self.game
        s.state = self.state.copy()
        return s

    def __repr__(self) -> str:
        return f"OthelloState(current_player={self.state.current_player}, outcome={self.state.outcome.name})"

