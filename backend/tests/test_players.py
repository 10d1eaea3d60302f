"""
Tests for the player implementations and the player registry.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from players import (
    AVAILABLE_PLAYERS,
    GreedyPlayer,
    Player,
    RandomPlayer,
    get_player_class,
    list_players,
    safe_moves,
)


def make_state(snake_positions, food=(0, 0), last_direction=LEFT, width=9, height=9):
    return GameState(
        round_number=0,
        snake_positions=snake_positions,
        food=food,
        score=0,
        remaining_food=1,
        width=width,
        height=height,
        last_direction=last_direction,
    )


class TestSafeMoves:
    """Tests for safe_moves()."""

    def test_reverse_excluded(self):
        state = make_state([(4, 4), (4, 5)])
        assert set(safe_moves(state)) == {UP, DOWN, LEFT}

    def test_walls_excluded(self):
        state = make_state([(0, 0), (0, 1)], food=(5, 5))
        assert safe_moves(state) == [DOWN]

    def test_body_excluded(self):
        state = make_state([(4, 4), (3, 4), (3, 3), (4, 3), (5, 3)], last_direction=DOWN)
        assert set(safe_moves(state)) == {DOWN, RIGHT}

    def test_no_safe_moves(self):
        state = make_state([(0, 0), (0, 1), (1, 1), (1, 0), (2, 0)], last_direction=LEFT)
        assert safe_moves(state) == []


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(4, 4), (4, 5)]))

    def test_random_player_returns_valid_move(self):
        player = RandomPlayer(rng=random.Random(1))
        assert player.get_move(make_state([(4, 4), (4, 5)])) in VALID_MOVES

    def test_random_player_avoids_walls_when_possible(self):
        player = RandomPlayer(rng=random.Random(7))
        state = make_state([(0, 0), (0, 1)], food=(5, 5))
        for _ in range(20):
            assert player.get_move(state) == DOWN

    def test_random_player_moves_when_trapped(self):
        player = RandomPlayer(rng=random.Random(3))
        state = make_state([(0, 0), (0, 1), (1, 1), (1, 0), (2, 0)])
        assert player.get_move(state) in VALID_MOVES


class TestGreedyPlayer:
    """Tests for the GreedyPlayer class."""

    def test_heads_for_food(self):
        player = GreedyPlayer(rng=random.Random(0))
        assert player.get_move(make_state([(4, 4), (4, 5)], food=(4, 0))) == LEFT
        assert player.get_move(make_state([(4, 4), (4, 5)], food=(0, 4))) == UP
        assert player.get_move(make_state([(4, 4), (4, 5)], food=(8, 4))) == DOWN

    def test_turns_instead_of_reversing(self):
        player = GreedyPlayer(rng=random.Random(0))
        # Food is straight behind the head: every safe move ties, UP comes first
        assert player.get_move(make_state([(4, 4), (4, 5)], food=(4, 8))) == UP

    def test_avoids_body_even_when_closer(self):
        player = GreedyPlayer(rng=random.Random(0))
        state = make_state([(4, 4), (4, 5), (3, 5), (3, 4), (3, 3)], food=(0, 4),
                           last_direction=DOWN)
        assert player.get_move(state) in {LEFT, RIGHT, DOWN}
        assert player.get_move(state) != UP

    def test_without_food_falls_back(self):
        player = GreedyPlayer(rng=random.Random(0))
        state = make_state([(4, 4), (4, 5)], food=None)
        assert player.get_move(state) in {UP, DOWN, LEFT}


class TestRegistry:
    """Tests for the player registry."""

    def test_available_players(self):
        assert AVAILABLE_PLAYERS == ["random", "greedy"]
        assert [p["key"] for p in list_players()] == AVAILABLE_PLAYERS

    @pytest.mark.parametrize("key,cls", [
        ("random", RandomPlayer), ("greedy", GreedyPlayer), (" Greedy ", GreedyPlayer),
        (None, GreedyPlayer), ("", GreedyPlayer),
    ])
    def test_get_player_class(self, key, cls):
        assert get_player_class(key) is cls

    def test_unknown_player(self):
        with pytest.raises(ValueError, match="Unknown player"):
            get_player_class("llm")
