"""
Command-line interface for replaying and playing Othello games.
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from othello.core.types import COL_LABELS, NUM_COLS, PASS_MOVE, ROW_LABELS
from othello.games.game_base import StateBase
from othello.utils.config import Config, LOG_LEVELS, configure_logging, register_default_games
from othello.utils.factory import create_state

logger = logging.getLogger(__name__)

PASS_WORDS = ("pass", "p")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="othello",
        description="Replay or play Othello games",
    )
    parser.add_argument(
        "--perspective",
        type=int,
        choices=[0, 1],
        default=None,
        help="Render the board for this player (default: player to move)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    replay = commands.add_parser("replay", help="Apply moves and print the final position")
    replay.add_argument(
        "moves",
        nargs="*",
        help="Moves such as d3 c5 ... ('pass' to pass)",
    )

    commands.add_parser("play", help="Interactive game for two humans")

    return parser.parse_args(argv)


def parse_action(text: str) -> int:
    """
    Convert "d3" (column letter, row digit) or "pass" to an action id.

    Raises:
        ValueError: text is not a board coordinate or pass.
    """
    token = text.strip().lower()
    if token in PASS_WORDS:
        return PASS_MOVE
    if len(token) != 2 or token[0] not in COL_LABELS or token[1] not in ROW_LABELS:
        raise ValueError(f"Invalid move '{text}'. Expected a coordinate like 'd3' or 'pass'.")
    return ROW_LABELS.index(token[1]) * NUM_COLS + COL_LABELS.index(token[0])


def _check_legal(state: StateBase, action: int, text: str) -> None:
    legal = state.legal_actions()
    if action not in legal:
        player = state.current_player()
        options = ", ".join(state.action_to_string(player, a) for a in legal)
        raise ValueError(f"Illegal move '{text}' for player {player}. Legal: {options}")


def _render(state: StateBase, perspective: Optional[int]) -> str:
    player = state.current_player() if perspective is None else perspective
    return state.observation_string(player)


def _summary(state: StateBase) -> str:
    if state.is_terminal():
        r0, r1 = state.returns()
        return f"Game over. Returns: {r0:+.0f} {r1:+.0f}"
    player = state.current_player()
    moves = " ".join(state.action_to_string(player, a) for a in state.legal_actions())
    return f"Player {player} to move. Legal: {moves}"


def replay(moves: Iterable[str], config: Config, out: Optional[TextIO] = None) -> StateBase:
    """Apply `moves` to a fresh game and print the resulting position."""
    out = out or sys.stdout
    state = create_state(config.game_name)
    for text in moves:
        if state.is_terminal():
            raise ValueError(f"Move '{text}' given after the game ended")
        action = parse_action(text)
        _check_legal(state, action, text)
        state.apply_action(action)

    print(_render(state, config.perspective), file=out)
    print(_summary(state), file=out)
    return state


def play(config: Config, inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> StateBase:
    """Read moves from `inp` until the game ends or input runs out."""
    inp = inp or sys.stdin
    out = out or sys.stdout
    state = create_state(config.game_name)

    while not state.is_terminal():
        print(_render(state, config.perspective), file=out)
        print(_summary(state), file=out)
        print("> ", end="", file=out, flush=True)

        line = inp.readline()
        if not line:
            logger.info("input closed before the game ended")
            break
        text = line.strip()
        if not text:
            continue

        try:
            action = parse_action(text)
            _check_legal(state, action, text)
        except ValueError as e:
            print(e, file=out)
            continue
        state.apply_action(action)

    if state.is_terminal():
        print(_render(state, config.perspective), file=out)
        print(_summary(state), file=out)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = Config(perspective=args.perspective, log_level=args.log_level)
    configure_logging(config.log_level)
    register_default_games()

    try:
        if args.command == "replay":
            replay(args.moves, config)
        else:
            play(config)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
