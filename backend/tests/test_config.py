"""
Tests for config.py - environment-driven settings.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig, load_config, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_MAX_ROUNDS

ENV_VARS = [
    'SNAKE_BOARD_WIDTH',
    'SNAKE_BOARD_HEIGHT',
    'SNAKE_MAX_ROUNDS',
    'SNAKE_SEED',
    'SNAKE_TICK_SECONDS',
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:

    def test_defaults(self):
        config = load_config()
        assert config.width == DEFAULT_WIDTH
        assert config.height == DEFAULT_HEIGHT
        assert config.max_rounds == DEFAULT_MAX_ROUNDS
        assert config.seed is None
        assert config.tick_seconds == 0.0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv('SNAKE_BOARD_WIDTH', '30')
        monkeypatch.setenv('SNAKE_BOARD_HEIGHT', '15')
        monkeypatch.setenv('SNAKE_MAX_ROUNDS', '100')
        monkeypatch.setenv('SNAKE_SEED', '42')
        monkeypatch.setenv('SNAKE_TICK_SECONDS', '0.1')

        config = load_config()
        assert config == GameConfig(width=30, height=15, max_rounds=100, seed=42, tick_seconds=0.1)

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv('SNAKE_SEED', '  ')
        assert load_config().seed is None

    def test_malformed_value_names_variable(self, monkeypatch):
        monkeypatch.setenv('SNAKE_BOARD_WIDTH', 'wide')
        with pytest.raises(ValueError, match='SNAKE_BOARD_WIDTH'):
            load_config()

    def test_out_of_range_value_raises(self, monkeypatch):
        monkeypatch.setenv('SNAKE_BOARD_HEIGHT', '0')
        with pytest.raises(ValueError):
            load_config()


class TestGameConfigValidate:

    @pytest.mark.parametrize("overrides", [
        {"width": 0},
        {"height": -1},
        {"max_rounds": 0},
        {"tick_seconds": -0.5},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            GameConfig(**overrides).validate()

    def test_validate_returns_config(self):
        config = GameConfig(width=5, height=5)
        assert config.validate() is config
