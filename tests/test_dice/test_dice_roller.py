"""Tests for dice roller."""

from unittest.mock import patch

import pytest

from dprcalc.dice.parser import DiceParseError, parse_dice
from dprcalc.dice.roller import roll, roll_dice, simulate
from dprcalc.dice.types import RollResult


class TestRollDice:
    """Tests for roll_dice function."""

    def test_returns_roll_result(self):
        result = roll_dice(parse_dice("1d20"))
        assert isinstance(result, RollResult)

    def test_values_in_range(self):
        result = roll_dice(parse_dice("10d6"))
        assert len(result.kept_rolls) == 10
        assert all(1 <= r <= 6 for r in result.kept_rolls)

    def test_total_includes_modifier(self):
        with patch("dprcalc.dice.roller.random.randint", side_effect=[4, 2]):
            result = roll_dice(parse_dice("2d6+3"))
        assert result.kept_rolls == (4, 2)
        assert result.modifier == 3
        assert result.total == 9

    def test_keep_highest_drops_lowest(self):
        with patch("dprcalc.dice.roller.random.randint", side_effect=[3, 6, 1, 5]):
            result = roll_dice(parse_dice("4d6kh3"))
        assert result.kept_rolls == (6, 5, 3)
        assert result.discarded_rolls == (1,)
        assert result.total == 14

    def test_keep_lowest_drops_highest(self):
        with patch("dprcalc.dice.roller.random.randint", side_effect=[17, 8]):
            result = roll_dice(parse_dice("2d20kl1"))
        assert result.kept_rolls == (8,)
        assert result.discarded_rolls == (17,)
        assert result.total == 8

    def test_flat_expression(self):
        result = roll_dice(parse_dice("7"))
        assert result.kept_rolls == ()
        assert result.total == 7


class TestRoll:
    """Tests for the notation convenience wrappers."""

    def test_roll_parses_notation(self):
        result = roll("3d8")
        assert 3 <= result.total <= 24

    def test_roll_invalid_raises(self):
        with pytest.raises(DiceParseError):
            roll("not dice")

    def test_simulate_string_and_expression(self):
        with patch("dprcalc.dice.roller.random.randint", return_value=6):
            assert simulate("2d6+1") == 13
            assert simulate(parse_dice("1d6")) == 6

    def test_simulate_average_close_to_expectation(self):
        totals = [simulate("2d6") for _ in range(2000)]
        assert sum(totals) / len(totals) == pytest.approx(7, abs=0.5)
