"""
Shared test fixtures for othello tests.

Design principles:
- Boards are built from explicit cell lists, never from move sequences,
  when a test needs a specific position
- The game registry is reset around every test
- Random playouts use a seeded generator
"""

from typing import Callable, Generator, Iterable

import numpy as np
import pytest

from othello.core.types import NUM_CELLS, CellState
from othello.games.game_state import GameState
from othello.games.othello import OthelloGame, OthelloState
from othello.utils import config


# =============================================================================
# Registry Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def default_registry() -> Generator[None, None, None]:
    """Registry holds exactly the default games during each test."""
    saved = dict(config.GAMES)
    config.GAMES.clear()
    config.register_default_games()
    yield
    config.GAMES.clear()
    config.GAMES.update(saved)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> OthelloGame:
    return OthelloGame()


@pytest.fixture
def state(game: OthelloGame) -> OthelloState:
    """Fresh state at the opening position."""
    return game.new_initial_state()


BoardBuilder = Callable[..., OthelloState]


@pytest.fixture
def board_state(game: OthelloGame) -> BoardBuilder:
    """
    Build a state from explicit disk positions.

    Usage: board_state(black=[0, 16], white=[9, 17], player=0)
    """
    def build(
        black: Iterable[int] = (),
        white: Iterable[int] = (),
        player: int = 0,
    ) -> OthelloState:
        board = np.zeros(NUM_CELLS, dtype=np.int8)
        board[np.asarray(list(black), dtype=np.intp)] = CellState.BLACK
        board[np.asarray(list(white), dtype=np.intp)] = CellState.WHITE
        s = game.new_initial_state()
        s.set_state(GameState(board, current_player=player))
        return s

    return build


# =============================================================================
# Randomness
# =============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20190101)


@pytest.fixture
def playout(rng: np.random.Generator) -> Callable[..., OthelloState]:
    """Play uniformly random legal actions until the game ends."""
    def run(s: OthelloState, on_step: Callable = None) -> OthelloState:
        while not s.is_terminal():
            legal = s.legal_actions()
            action = int(legal[rng.integers(len(legal))])
            if on_step is not None:
                on_step(s, action)
            s.apply_action(action)
        return s

    return run
