"""
Othello - rules engine for the two-player disk-flipping board game.

The engine enumerates legal moves, applies moves with captures, detects
the end of the game and renders observations for either player.

Quick Start:
    from othello import register_default_games, create_state

    register_default_games()
    state = create_state("othello")
    while not state.is_terminal():
        state.apply_action(state.legal_actions()[0])
    print(state.returns())

Modules:
    core   - Board constants, cell/outcome enums, player mappings
    games  - GameState container, abstract interfaces, rules, Othello
    utils  - Game registry, configuration and factories
    cli    - Command-line replay and interactive play
"""

from othello.core.types import PASS_MOVE, CellState, Outcome, Result
from othello.games import GameState, OthelloGame, OthelloState
from othello.utils.config import register_default_games, register_game, registered_games
from othello.utils.factory import create_game, create_state, load_game

__version__ = "1.0.0"

__all__ = [
    # Main API
    "create_game",
    "create_state",
    "load_game",
    "register_game",
    "register_default_games",
    "registered_games",
    # Types
    "GameState",
    "OthelloGame",
    "OthelloState",
    "CellState",
    "Outcome",
    "Result",
    "PASS_MOVE",
]
