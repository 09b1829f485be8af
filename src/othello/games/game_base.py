"""
GameBase / StateBase - abstract base classes for turn-based board games.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import numpy as np

from othello.core.types import GameType, Result
from othello.games.game_state import GameState


class GameBase(ABC):
    """
    Static description of a game plus a factory for its initial state.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - A GameBase holds no play state and is safe to share.
    - All mutation happens on StateBase objects from new_initial_state().
    """

    __slots__ = ()

    @abstractmethod
    def game_type(self) -> GameType:
        """Static facts about the game (dynamics, information, utility, ...)."""
        pass

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'othello')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def num_distinct_actions(self) -> int:
        """Size of the action id space (legal actions are a subset)."""
        pass

    @abstractmethod
    def max_game_length(self) -> int:
        """Upper bound on the number of actions in one game."""
        pass

    @abstractmethod
    def observation_tensor_shape(self) -> List[int]:
        """Shape of the array returned by StateBase.observation_tensor()."""
        pass

    @abstractmethod
    def new_initial_state(self) -> "StateBase":
        """Return a fresh state at the start of the game."""
        pass

    def parameter_specification(self) -> Dict[str, object]:
        """Accepted game parameters and their defaults."""
        return {}

    def observation_tensor_size(self) -> int:
        return int(np.prod(self.observation_tensor_shape()))


class StateBase(ABC):
    """
    A position in a game, mutated in place by apply_action().

    States are cloned rather than shared: anything exploring a game tree
    must call clone() before applying actions.
    """

    __slots__ = ()

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the underlying state container."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the underlying state container."""
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return ID of player to act."""
        pass

    @abstractmethod
    def legal_actions(self) -> List[int]:
        """Return all legal action ids for the player to act."""
        pass

    @abstractmethod
    def apply_action(self, action: int) -> None:
        """Apply an action for the player to act. Mutates internal state."""
        pass

    def undo_action(self, player: int, action: int) -> None:
        raise NotImplementedError(f"Undo not implemented for {type(self).__name__}")

    @abstractmethod
    def is_terminal(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def returns(self) -> List[float]:
        """Per-player utilities; all zero until the game ends."""
        pass

    @abstractmethod
    def result(self, player: int) -> Result:
        """
        Return payoff for the player:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def action_to_string(self, player: int, action: int) -> str:
        pass

    @abstractmethod
    def observation_string(self, player: int) -> str:
        pass

    @abstractmethod
    def observation_tensor(self, player: int, out: Optional[np.ndarray] = None) -> np.ndarray:
        pass

    @abstractmethod
    def information_state_string(self, player: int) -> str:
        pass

    @abstractmethod
    def clone(self) -> "StateBase":
        """
        Deep copy of the state.
        Clones never share mutable data with the original.
        """
        pass

    @abstractmethod
    def to_string(self) -> str:
        """Pretty string representation of the state."""
        pass

    def history(self) -> List[int]:
        """Actions applied so far, in order."""
        return list(self.get_state().history)

    def history_string(self) -> str:
        return ", ".join(str(a) for a in self.get_state().history)

    def __str__(self) -> str:
        return self.to_string()
