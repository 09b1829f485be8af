"""
GameState - mutable game state container.

Optimized for fast copying.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from othello.core.types import NUM_CELLS, CellState, Outcome


class GameState:
    """
    Lightweight game state container.

    Uses a flat int8 board of NUM_CELLS cells, indexed row * NUM_COLS + col:
        0 = empty
        1 = black (player 0)
        2 = white (player 1)
    """
    __slots__ = ('board', 'current_player', 'outcome', 'history')

    def __init__(
        self,
        board: np.ndarray,
        current_player: int,
        outcome: Outcome = Outcome.UNDECIDED,
        history: Optional[List[int]] = None,
    ):
        self.board = board
        self.current_player = current_player
        self.outcome = outcome
        self.history = [] if history is None else history

    @staticmethod
    def initial() -> "GameState":
        """Starting position: four centre disks, Black (player 0) to move."""
        board = np.zeros(NUM_CELLS, dtype=np.int8)
        board[27] = CellState.WHITE  # d4
        board[28] = CellState.BLACK  # e4
        board[35] = CellState.BLACK  # d5
        board[36] = CellState.WHITE  # e5
        return GameState(board, current_player=0)

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(
            self.board.copy(), self.current_player, self.outcome, list(self.history)
        )
