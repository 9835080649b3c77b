"""Rounding for displayed figures.

Calculations keep full precision; these helpers are applied only when a
result record is built. Halves round up, so 0.125 displays as 0.13.
"""

import math


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals with halves rounded toward +infinity.

    Examples:
        >>> round_half_up(0.125)
        0.13
        >>> round_half_up(-0.125)
        -0.12
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_damage(value: float) -> float:
    """Damage figures are shown with two decimals."""
    return round_half_up(value, 2)


def to_percent(probability: float) -> int:
    """Probability as a whole percent."""
    return int(math.floor(probability * 100 + 0.5))
