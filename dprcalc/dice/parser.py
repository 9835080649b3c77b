"""Dice notation parser.

Parses informal damage notation like 2d6, 3d8+5, 1d10+2d6+3, 5+2d6 and
keep rules like 4d6kh3 or 2d20kl1. Parsing never raises: unparseable text
yields None so bulk analysis can continue past a bad record.
"""

import logging
import re

from dprcalc.dice.types import DiceExpression, DiceTerm, KeepMode, KeepRule


logger = logging.getLogger(__name__)


class DiceParseError(ValueError):
    """Error parsing dice notation."""

    pass


# Pattern: optional count, 'd', die size, optional keep rule
# Examples: 2d6, d8, 4d6kh3, 2d20kl1
DICE_TERM_PATTERN = re.compile(r"(\d+)?d(\d+)(?:k([hl])(\d+))?")

# Signed flat numbers that are not the count of a following dice term
MODIFIER_PATTERN = re.compile(r"([+-])(\d+)(?![\dd])")

# A bare number in front of the first operator, as in "5+2d6"
LEADING_MODIFIER_PATTERN = re.compile(r"^(\d+)(?=[+-])")

BARE_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def normalize_notation(text: str) -> str:
    """Lowercase the notation and drop all whitespace."""
    return re.sub(r"\s+", "", text.lower())


def parse_dice(notation: object) -> DiceExpression | None:
    """Parse dice notation into a DiceExpression.

    Args:
        notation: Dice notation string (e.g., "2d6+3", "1d10+2d6", "4d6kh3").

    Returns:
        DiceExpression with parsed terms and modifier, or None when the
        text is empty, not a string, or contains nothing recognizable.

    Examples:
        >>> parse_dice("2d6+3").modifier
        3
        >>> parse_dice("4d6kh3").terms[0].keep.count
        3
        >>> parse_dice("fire damage") is None
        True
    """
    if not isinstance(notation, str) or not notation.strip():
        return None

    normalized = normalize_notation(notation)

    terms: list[DiceTerm] = []
    for match in DICE_TERM_PATTERN.finditer(normalized):
        count_str, sides_str, keep_mode, keep_count_str = match.groups()
        count = int(count_str) if count_str else 1
        sides = int(sides_str)

        keep = None
        if keep_mode:
            keep = KeepRule(
                mode=KeepMode.HIGHEST if keep_mode == "h" else KeepMode.LOWEST,
                count=int(keep_count_str),
            )

        if count < 1 or sides < 1 or (keep and not 1 <= keep.count <= count):
            logger.debug("Rejecting dice term %r in %r", match.group(0), notation)
            return None

        terms.append(DiceTerm(count=count, sides=sides, keep=keep))

    modifier = sum(
        int(sign + digits) for sign, digits in MODIFIER_PATTERN.findall(normalized)
    )

    leading = LEADING_MODIFIER_PATTERN.match(normalized)
    if leading:
        modifier += int(leading.group(1))

    if not terms and modifier == 0:
        # Plain numbers like "7" are flat damage
        if BARE_INTEGER_PATTERN.match(normalized) and int(normalized) != 0:
            return DiceExpression(modifier=int(normalized), original=notation)
        logger.debug("No dice or modifier found in %r", notation)
        return None

    return DiceExpression(terms=tuple(terms), modifier=modifier, original=notation)


def require_dice(notation: str) -> DiceExpression:
    """Parse dice notation, raising on failure.

    Args:
        notation: Dice notation string.

    Returns:
        Parsed DiceExpression.

    Raises:
        DiceParseError: If notation is empty or invalid.
    """
    if not isinstance(notation, str) or not notation.strip():
        raise DiceParseError("Dice notation cannot be empty")

    expression = parse_dice(notation)
    if expression is None:
        raise DiceParseError(f"Invalid dice notation: '{notation}'")
    return expression


def format_dice(expression: DiceExpression | None) -> str:
    """Render an expression in canonical notation.

    Terms are joined with "+" and the modifier is appended with its sign.

    Examples:
        >>> format_dice(parse_dice("2D6 + 1d8 - 1"))
        '2d6+1d8-1'
        >>> format_dice(parse_dice("4d6kh3"))
        '4d6kh3'
    """
    if expression is None:
        return ""

    parts = []
    for term in expression.terms:
        text = f"{term.count}d{term.sides}"
        if term.keep:
            text += f"k{term.keep.mode.suffix}{term.keep.count}"
        parts.append(text)

    result = "+".join(parts)

    if expression.modifier > 0:
        result += f"+{expression.modifier}" if parts else str(expression.modifier)
    elif expression.modifier < 0:
        result += str(expression.modifier)

    return result
