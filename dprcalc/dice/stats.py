"""Deterministic statistics for dice expressions.

Average, minimum and maximum of a parsed expression, including the
order-statistic treatment of keep-highest / keep-lowest terms.
"""

from dprcalc.dice.parser import parse_dice
from dprcalc.dice.types import DiceExpression, DiceSummary, DiceTerm, KeepMode


# Exact expectations for the common keep rules: (count, sides, mode, kept)
EXACT_KEEP_AVERAGES: dict[tuple[int, int, KeepMode, int], float] = {
    (4, 6, KeepMode.HIGHEST, 3): 12.24,  # Ability score generation
    (2, 20, KeepMode.HIGHEST, 1): 13.825,  # Advantage
    (2, 20, KeepMode.LOWEST, 1): 7.175,  # Disadvantage
}


def _coerce(expression: DiceExpression | str | None) -> DiceExpression | None:
    if isinstance(expression, DiceExpression):
        return expression
    return parse_dice(expression)


def keep_average(count: int, sides: int, mode: KeepMode, kept: int) -> float:
    """Expected sum of the kept dice of a keep-highest/lowest roll.

    Uses the exact value for the common cases and otherwise approximates
    the i-th order statistic of ``count`` dice as ``(sides + 1) * rank / (count + 1)``.

    Args:
        count: Dice rolled.
        sides: Faces per die.
        mode: Keep highest or lowest.
        kept: Dice kept.

    Returns:
        Expected total of the kept dice.

    Examples:
        >>> keep_average(4, 6, KeepMode.HIGHEST, 3)
        12.24
        >>> keep_average(3, 6, KeepMode.LOWEST, 1)
        1.75
    """
    exact = EXACT_KEEP_AVERAGES.get((count, sides, mode, kept))
    if exact is not None:
        return exact

    if mode is KeepMode.HIGHEST:
        ranks = [count - i for i in range(kept)]
    else:
        ranks = [i + 1 for i in range(kept)]

    return sum((sides + 1) * rank / (count + 1) for rank in ranks)


def term_average(term: DiceTerm) -> float:
    """Expected value of a single dice term."""
    if term.keep:
        return keep_average(term.count, term.sides, term.keep.mode, term.keep.count)
    return term.count * (term.sides + 1) / 2


def average(expression: DiceExpression | str | None) -> float:
    """Expected value of an expression (0 when it cannot be parsed).

    Examples:
        >>> average("2d6+3")
        10.0
    """
    parsed = _coerce(expression)
    if parsed is None:
        return 0

    return parsed.modifier + sum(term_average(term) for term in parsed.terms)


def minimum(expression: DiceExpression | str | None) -> int:
    """Lowest possible total: one per kept die plus the modifier."""
    parsed = _coerce(expression)
    if parsed is None:
        return 0

    return parsed.modifier + sum(term.kept_count for term in parsed.terms)


def maximum(expression: DiceExpression | str | None) -> int:
    """Highest possible total: every kept die at its top face plus the modifier."""
    parsed = _coerce(expression)
    if parsed is None:
        return 0

    return parsed.modifier + sum(term.kept_count * term.sides for term in parsed.terms)


def summarize_dice(notation: str | None) -> DiceSummary:
    """Parse notation and compute its average, minimum, and maximum.

    Args:
        notation: Dice notation string.

    Returns:
        DiceSummary; ``valid`` is False when the notation is unparseable.
    """
    parsed = parse_dice(notation)
    if parsed is None:
        return DiceSummary(original=notation, valid=False)

    return DiceSummary(
        original=notation,
        valid=True,
        average=average(parsed),
        minimum=minimum(parsed),
        maximum=maximum(parsed),
        expression=parsed,
    )
