"""
Tests for players/ - move sources for the game loop.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from players import Player, RandomPlayer, ScriptedPlayer, get_player_class, AVAILABLE_PLAYERS


def make_state(body, direction=RIGHT, width=10, height=10, food=(9, 9)):
    return GameState(
        round_number=0,
        body=body,
        food=food,
        direction=direction,
        score=0,
        game_over=False,
        width=width,
        height=height,
    )


class TestPlayerBase:

    def test_base_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(5, 5)]))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_move(self):
        player = RandomPlayer(random.Random(1))
        assert player.get_move(make_state([(5, 5)])) in VALID_MOVES

    def test_random_player_never_reverses(self):
        player = RandomPlayer(random.Random(2))
        for _ in range(50):
            assert player.get_move(make_state([(5, 5)], direction=RIGHT)) != LEFT

    def test_random_player_avoids_walls_when_possible(self):
        """In the (0,0) corner moving right only DOWN and RIGHT are safe."""
        player = RandomPlayer(random.Random(3))
        state = make_state([(0, 0)], direction=RIGHT)
        moves = {player.get_move(state) for _ in range(50)}
        assert moves <= {DOWN, RIGHT}

    def test_random_player_avoids_far_walls(self):
        player = RandomPlayer(random.Random(4))
        state = make_state([(9, 9)], direction=DOWN)
        moves = {player.get_move(state) for _ in range(50)}
        assert moves == {LEFT}

    def test_random_player_avoids_self_collision(self):
        """The tail still blocks, so only UP and RIGHT are safe."""
        player = RandomPlayer(random.Random(5))
        state = make_state([(5, 5), (5, 6), (4, 6), (4, 5)], direction=UP)
        moves = {player.get_move(state) for _ in range(50)}
        assert moves <= {UP, RIGHT}

    def test_random_player_keeps_direction_when_trapped(self):
        player = RandomPlayer(random.Random(6))
        state = make_state([(0, 0)], direction=RIGHT, width=1, height=1)
        assert player.get_move(state) == RIGHT

    def test_random_player_is_reproducible_with_seed(self):
        state = make_state([(5, 5)])
        first = [RandomPlayer(random.Random(7)).get_move(state) for _ in range(5)]
        second = [RandomPlayer(random.Random(7)).get_move(state) for _ in range(5)]
        assert first == second


class TestScriptedPlayer:
    """Tests for the ScriptedPlayer class."""

    def test_replays_moves_in_order(self):
        player = ScriptedPlayer([UP, LEFT, DOWN])
        state = make_state([(5, 5)])
        assert [player.get_move(state) for _ in range(3)] == [UP, LEFT, DOWN]

    def test_keeps_current_direction_after_script(self):
        player = ScriptedPlayer([UP])
        player.get_move(make_state([(5, 5)]))
        assert player.get_move(make_state([(5, 4)], direction=UP)) == UP

    def test_lowercase_moves_accepted(self):
        player = ScriptedPlayer(["up", "left"])
        assert player.moves == [UP, LEFT]

    def test_unknown_move_raises(self):
        with pytest.raises(ValueError):
            ScriptedPlayer(["UP", "SIDEWAYS"])


class TestPlayerRegistry:

    def test_available_players(self):
        assert AVAILABLE_PLAYERS == ["random", "scripted"]

    def test_get_player_class(self):
        assert get_player_class("random") is RandomPlayer
        assert get_player_class("scripted") is ScriptedPlayer

    def test_unknown_player_raises(self):
        with pytest.raises(ValueError):
            get_player_class("llm")
