"""
Tests for othello.utils.config

Tests configuration and game registry.
"""

import logging

import pytest

from othello.games.othello import OthelloGame
from othello.utils import config
from othello.utils.config import (
    GAMES, Config,
    configure_logging, register_default_games, register_game,
    registered_games, unregister_game,
)


class TestGameRegistry:
    """GAMES registry tests."""

    def test_defaults_registered(self):
        """The autouse fixture registers the shipped games."""
        assert registered_games() == ["othello"]
        assert GAMES["othello"] is OthelloGame

    def test_empty_until_registered(self):
        GAMES.clear()
        assert registered_games() == []
        register_default_games()
        assert "othello" in GAMES

    def test_register_is_idempotent(self):
        register_default_games()
        register_game("othello", OthelloGame)
        assert registered_games() == ["othello"]

    def test_conflicting_registration(self):
        with pytest.raises(ValueError, match="already registered"):
            register_game("othello", lambda params=None: OthelloGame(params))

    def test_register_alias(self):
        register_game("reversi", OthelloGame)
        assert registered_games() == ["othello", "reversi"]

    def test_unregister(self):
        unregister_game("othello")
        unregister_game("othello")
        assert registered_games() == []

    def test_import_has_no_side_effects(self):
        """Default games are listed separately from the live registry."""
        GAMES.clear()
        assert "othello" in config.DEFAULT_GAMES
        assert "othello" not in GAMES


class TestConfig:
    """Config defaults and validation tests."""

    def test_defaults(self):
        c = Config()
        assert c.game_name == "othello"
        assert c.perspective is None
        assert c.log_level == "WARNING"

    def test_normalises_log_level(self):
        assert Config(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("perspective", [-1, 2])
    def test_invalid_perspective(self, perspective):
        with pytest.raises(ValueError, match="perspective"):
            Config(perspective=perspective)

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="log level"):
            Config(log_level="LOUD")


class TestLogging:
    """configure_logging tests."""

    def test_sets_root_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        configure_logging("info")
        assert calls["level"] == logging.INFO
        assert calls["format"] == config.LOG_FORMAT
