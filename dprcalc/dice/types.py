"""Dice system type definitions.

Immutable dataclasses for dice expressions, summaries, and roll results.
"""

from dataclasses import dataclass, field
from enum import Enum


class KeepMode(str, Enum):
    """Which dice a keep rule retains."""

    HIGHEST = "highest"
    LOWEST = "lowest"

    @property
    def suffix(self) -> str:
        """Single-letter notation suffix ("h" or "l")."""
        return "h" if self is KeepMode.HIGHEST else "l"


@dataclass(frozen=True)
class KeepRule:
    """Keep-highest / keep-lowest rule attached to a dice term.

    Attributes:
        mode: Whether the highest or lowest dice are kept.
        count: Number of dice kept.
    """

    mode: KeepMode
    count: int


@dataclass(frozen=True)
class DiceTerm:
    """A single group of identical dice, like 4d6kh3.

    Attributes:
        count: Number of dice rolled.
        sides: Faces per die.
        keep: Optional keep rule.
    """

    count: int
    sides: int
    keep: KeepRule | None = None

    @property
    def kept_count(self) -> int:
        """Number of dice that contribute to the total."""
        return self.keep.count if self.keep else self.count


@dataclass(frozen=True)
class DiceExpression:
    """A parsed dice expression like 1d10+2d6+3.

    Attributes:
        terms: Dice terms in the order they appeared.
        modifier: Flat modifier added to the total (may be negative).
        original: The text the expression was parsed from, if any.
    """

    terms: tuple[DiceTerm, ...] = ()
    modifier: int = 0
    original: str | None = field(default=None, compare=False)

    @property
    def is_flat(self) -> bool:
        """True when the expression has no dice, only a number."""
        return not self.terms


@dataclass(frozen=True)
class DiceSummary:
    """Statistics for a dice expression.

    ``valid`` is False when the text could not be parsed; all numeric
    fields are then zero and ``expression`` is None.
    """

    original: str | None
    valid: bool
    average: float = 0.0
    minimum: int = 0
    maximum: int = 0
    expression: DiceExpression | None = None


@dataclass(frozen=True)
class RollResult:
    """Result of simulating a dice expression.

    Attributes:
        expression: The dice expression that was rolled.
        kept_rolls: Every die that counted toward the total.
        discarded_rolls: Dice dropped by keep rules.
        modifier: The modifier applied.
        total: Sum of kept rolls plus modifier.
    """

    expression: DiceExpression
    kept_rolls: tuple[int, ...]
    modifier: int
    total: int
    discarded_rolls: tuple[int, ...] = field(default_factory=tuple)
