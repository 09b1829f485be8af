"""
Board utilities for Othello on a flat NumPy board.

Every function takes the board explicitly so that the same code serves
read-only legality checks and in-place capture. `count_steps` is the only
place the flank length is computed.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

import numpy as np

from othello.core.types import (
    NUM_CELLS,
    NUM_COLS,
    NUM_ROWS,
    CellState,
    player_to_cell_state,
)


class Direction(Enum):
    """Ray directions; each value is the (drow, dcol) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP_RIGHT = (-1, 1)
    UP_LEFT = (-1, -1)
    DOWN_RIGHT = (1, 1)
    DOWN_LEFT = (1, -1)

    def next(self, row: int, col: int) -> Tuple[int, int]:
        """Return the cell one step from (row, col) in this direction."""
        dr, dc = self.value
        return row + dr, col + dc


def on_board(row: int, col: int) -> bool:
    """Return True if (row, col) is inside the board."""
    return 0 <= row < NUM_ROWS and 0 <= col < NUM_COLS


def row_col_from_move(move: int) -> Tuple[int, int]:
    """Convert a cell index to (row, col)."""
    if move < 0 or move >= NUM_CELLS:
        raise ValueError(f"Move out of range: {move}")
    return move // NUM_COLS, move % NUM_COLS


def row_col_to_move(row: int, col: int) -> int:
    """Convert (row, col) to a cell index."""
    if not on_board(row, col):
        raise ValueError(f"Invalid move ({row}, {col})")
    return row * NUM_COLS + col


def count_steps(board: np.ndarray, player: int, move: int, direction: Direction) -> int:
    """
    Length of the opposing run flanked by placing at `move` in `direction`.

    Walks outward from the cell next to `move`:
        - own disk     → return the number of opposing disks passed
        - empty cell   → return 0
        - opposing     → keep walking
    Falling off the board also returns 0. The board is not modified.
    """
    own = player_to_cell_state(player)
    row, col = direction.next(*row_col_from_move(move))

    count = 0
    while on_board(row, col):
        cell = board[row * NUM_COLS + col]
        if cell == own:
            return count
        if cell == CellState.EMPTY:
            return 0
        count += 1
        row, col = direction.next(row, col)

    return 0


def can_capture(board: np.ndarray, player: int, move: int) -> bool:
    """Return True if `move` is empty and flanks at least one opposing run."""
    if board[move] != CellState.EMPTY:
        return False
    return any(count_steps(board, player, move, d) for d in Direction)


def capture(board: np.ndarray, player: int, move: int, direction: Direction, steps: int) -> None:
    """
    Flip `steps` opposing disks next to `move` in `direction`, in place.

    The whole run is checked before any cell is flipped, so a failed call
    leaves the board untouched.

    Raises:
        RuntimeError: a cell on the run is off the board, empty or already
            `player`'s colour, meaning `steps` did not come from count_steps
            on this board.
    """
    own = player_to_cell_state(player)
    row, col = direction.next(*row_col_from_move(move))

    run = []
    for _ in range(steps):
        if not on_board(row, col):
            raise RuntimeError(f"Cannot capture cell ({row}, {col}): off the board")
        idx = row * NUM_COLS + col
        if board[idx] == CellState.EMPTY or board[idx] == own:
            raise RuntimeError(f"Cannot capture cell ({row}, {col})")
        run.append(idx)
        row, col = direction.next(row, col)

    board[run] = own


def disk_count(board: np.ndarray, player: int) -> int:
    """Number of cells holding `player`'s colour."""
    return int(np.count_nonzero(board == player_to_cell_state(player)))


def legal_regular_actions(board: np.ndarray, player: int) -> List[int]:
    """All placements available to `player`, in ascending cell order."""
    return [move for move in range(NUM_CELLS) if can_capture(board, player, move)]
