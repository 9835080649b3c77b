"""Tests for dice notation parser."""

import pytest

from dprcalc.dice.parser import DiceParseError, format_dice, parse_dice, require_dice
from dprcalc.dice.stats import average
from dprcalc.dice.types import DiceExpression, DiceTerm, KeepMode, KeepRule


class TestParseDiceBasic:
    """Tests for basic dice notation parsing."""

    def test_parse_2d6(self):
        """Test parsing multiple dice."""
        expr = parse_dice("2d6")
        assert expr == DiceExpression(terms=(DiceTerm(count=2, sides=6),))

    def test_parse_d20_implicit_one(self):
        """Test parsing d20 implies 1d20."""
        expr = parse_dice("d20")
        assert expr.terms == (DiceTerm(count=1, sides=20),)

    def test_keeps_original_text(self):
        """Test the source text is kept but ignored for equality."""
        expr = parse_dice("2d6")
        assert expr.original == "2d6"
        assert expr == DiceExpression(terms=(DiceTerm(count=2, sides=6),), original="other")

    def test_parse_uppercase_and_spaces(self):
        """Test notation is case and whitespace insensitive."""
        assert parse_dice(" 2D6 + 3 ") == parse_dice("2d6+3")


class TestParseDiceModifiers:
    """Tests for flat modifiers."""

    def test_positive_modifier(self):
        expr = parse_dice("2d6+3")
        assert expr.modifier == 3

    def test_negative_modifier(self):
        expr = parse_dice("4d6-2")
        assert expr.modifier == -2

    def test_multi_digit_modifier(self):
        expr = parse_dice("1d8+10")
        assert expr.modifier == 10

    def test_leading_modifier(self):
        """Test a number before the first dice term counts as a modifier."""
        expr = parse_dice("5+2d6")
        assert expr.modifier == 5
        assert expr.terms == (DiceTerm(count=2, sides=6),)

    def test_multiple_modifiers_are_summed(self):
        expr = parse_dice("1d4+2+3")
        assert expr.modifier == 5

    def test_dice_count_is_not_a_modifier(self):
        """Test '+10d8' adds a dice term, not a +10 or +1 modifier."""
        expr = parse_dice("1d6+10d8")
        assert expr.modifier == 0
        assert expr.terms == (DiceTerm(count=1, sides=6), DiceTerm(count=10, sides=8))


class TestParseDiceMultipleTerms:
    """Tests for expressions with several dice groups."""

    def test_two_terms_and_modifier(self):
        expr = parse_dice("1d10+2d6+3")
        assert expr.terms == (DiceTerm(count=1, sides=10), DiceTerm(count=2, sides=6))
        assert expr.modifier == 3

    def test_terms_keep_order(self):
        expr = parse_dice("2d8+1d6")
        assert [term.sides for term in expr.terms] == [8, 6]


class TestParseDiceKeepRules:
    """Tests for keep-highest / keep-lowest notation."""

    def test_keep_highest(self):
        expr = parse_dice("4d6kh3")
        assert expr.terms[0].keep == KeepRule(mode=KeepMode.HIGHEST, count=3)

    def test_keep_lowest(self):
        expr = parse_dice("2d20kl1")
        assert expr.terms[0].keep == KeepRule(mode=KeepMode.LOWEST, count=1)

    def test_kept_count(self):
        assert parse_dice("4d6kh3").terms[0].kept_count == 3
        assert parse_dice("4d6").terms[0].kept_count == 4

    def test_keep_more_than_rolled_is_invalid(self):
        assert parse_dice("2d6kh3") is None

    def test_keep_zero_is_invalid(self):
        assert parse_dice("2d6kh0") is None


class TestParseDiceFlat:
    """Tests for plain numbers."""

    def test_bare_integer_is_flat_damage(self):
        expr = parse_dice("7")
        assert expr.is_flat
        assert expr.modifier == 7

    def test_zero_is_invalid(self):
        assert parse_dice("0") is None


class TestParseDiceInvalid:
    """Tests for text that cannot be parsed."""

    @pytest.mark.parametrize("notation", ["", "   ", "fire damage", "d", "abc"])
    def test_unparseable_returns_none(self, notation):
        assert parse_dice(notation) is None

    @pytest.mark.parametrize("notation", [None, 12, ["2d6"]])
    def test_non_string_returns_none(self, notation):
        assert parse_dice(notation) is None

    def test_zero_dice_rejects_whole_expression(self):
        """Test one bad term makes the entire expression invalid."""
        assert parse_dice("0d6+2d8") is None

    def test_zero_sides_invalid(self):
        assert parse_dice("2d0") is None


class TestRequireDice:
    """Tests for the raising variant."""

    def test_returns_expression(self):
        assert require_dice("2d6+3").modifier == 3

    def test_empty_raises(self):
        with pytest.raises(DiceParseError, match="cannot be empty"):
            require_dice("")

    def test_invalid_raises(self):
        with pytest.raises(DiceParseError, match="Invalid dice notation"):
            require_dice("fire damage")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            require_dice("xyz")


class TestFormatDice:
    """Tests for canonical rendering."""

    def test_canonical_form(self):
        assert format_dice(parse_dice("2D6 + 1d8 - 1")) == "2d6+1d8-1"

    def test_keep_rule(self):
        assert format_dice(parse_dice("4d6kh3")) == "4d6kh3"

    def test_implicit_count_made_explicit(self):
        assert format_dice(parse_dice("d8+2")) == "1d8+2"

    def test_flat(self):
        assert format_dice(parse_dice("7")) == "7"

    def test_none(self):
        assert format_dice(None) == ""


class TestFormatRoundTrip:
    """Formatting then re-parsing keeps the expected value."""

    @pytest.mark.parametrize(
        "notation",
        [
            "2d6+3",
            "5+2d6",
            "4d6kh3",
            "2d20kl1",
            "-5",
            "3d6kl2+1d4-2",
            "d8-1+2",
            "2d6-1d4",
            "1d10+2d6+4",
        ],
    )
    def test_average_survives_round_trip(self, notation):
        expr = parse_dice(notation)
        reparsed = parse_dice(format_dice(expr))

        assert reparsed is not None
        assert average(reparsed) == pytest.approx(average(expr))
