"""Dice roll simulation.

Rolls are random and therefore never used by the analysis modules, which
work from expectations only. This is a utility for the CLI and for sanity
checking averages by sampling.
"""

import random

from dprcalc.dice.parser import require_dice
from dprcalc.dice.types import DiceExpression, KeepMode, RollResult


def roll_dice(expression: DiceExpression) -> RollResult:
    """Roll dice according to the expression.

    Each die is drawn uniformly from 1..sides. Terms with a keep rule are
    sorted descending and only the highest or lowest dice are kept.

    Args:
        expression: The dice expression to roll.

    Returns:
        RollResult with kept and discarded rolls and the total.

    Examples:
        >>> from dprcalc.dice.parser import parse_dice
        >>> result = roll_dice(parse_dice("4d6kh3"))
        >>> len(result.kept_rolls), len(result.discarded_rolls)
        (3, 1)
    """
    kept: list[int] = []
    discarded: list[int] = []

    for term in expression.terms:
        rolls = [random.randint(1, term.sides) for _ in range(term.count)]

        if term.keep:
            rolls.sort(reverse=True)
            if term.keep.mode is KeepMode.HIGHEST:
                kept.extend(rolls[: term.keep.count])
                discarded.extend(rolls[term.keep.count :])
            else:
                kept.extend(rolls[-term.keep.count :])
                discarded.extend(rolls[: -term.keep.count])
        else:
            kept.extend(rolls)

    return RollResult(
        expression=expression,
        kept_rolls=tuple(kept),
        modifier=expression.modifier,
        total=sum(kept) + expression.modifier,
        discarded_rolls=tuple(discarded),
    )


def roll(notation: str) -> RollResult:
    """Parse dice notation and roll.

    Convenience function combining require_dice and roll_dice.

    Args:
        notation: Dice notation string (e.g., "2d6+3").

    Returns:
        RollResult with individual rolls and total.

    Raises:
        DiceParseError: If notation is invalid.
    """
    return roll_dice(require_dice(notation))


def simulate(expression: DiceExpression | str) -> int:
    """Roll an expression once and return only the total."""
    if isinstance(expression, str):
        return roll(expression).total
    return roll_dice(expression).total
