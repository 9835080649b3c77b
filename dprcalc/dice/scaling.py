"""Damage scaling for upcast spells and cantrip tiers."""

import dataclasses
import logging
import re

from dprcalc.dice.parser import format_dice, parse_dice
from dprcalc.dice.types import DiceTerm


logger = logging.getLogger(__name__)

# First dice group in a rule like "the damage increases by 1d6 for each slot level above 3rd"
SCALING_DICE_PATTERN = re.compile(r"(\d+)?d(\d+)", re.IGNORECASE)


def scale_spell_damage(
    base_damage: str | None,
    base_level: int,
    cast_level: int,
    scaling_rule: str | None,
) -> str | None:
    """Scale a damage roll for casting with a higher-level slot.

    The first dice group in ``scaling_rule`` is added once per level above
    ``base_level``. It is merged into an existing term with the same die
    size, or appended as a new term.

    Args:
        base_damage: Damage notation at the spell's base level.
        base_level: Level the spell is normally cast at.
        cast_level: Slot level actually used.
        scaling_rule: Free-text "At Higher Levels" description.

    Returns:
        The scaled damage notation, or ``base_damage`` unchanged when
        nothing applies.

    Examples:
        >>> scale_spell_damage("8d6", 3, 5, "increases by 1d6 for each slot level above 3rd")
        '10d6'
        >>> scale_spell_damage("3d10", 2, 4, "1d8 per level")
        '3d10+2d8'
    """
    if not scaling_rule or not base_damage:
        return base_damage

    parsed = parse_dice(base_damage)
    if parsed is None or not parsed.terms:
        return base_damage

    level_diff = cast_level - base_level
    if level_diff <= 0:
        return base_damage

    match = SCALING_DICE_PATTERN.search(scaling_rule)
    if not match:
        logger.debug("No scaling dice in rule %r", scaling_rule)
        return base_damage

    added = int(match.group(1) or 1) * level_diff
    sides = int(match.group(2))

    terms = list(parsed.terms)
    for index, term in enumerate(terms):
        if term.sides == sides:
            terms[index] = dataclasses.replace(term, count=term.count + added)
            break
    else:
        terms.append(DiceTerm(count=added, sides=sides))

    return format_dice(dataclasses.replace(parsed, terms=tuple(terms)))


def scale_cantrip_dice(base_damage: str | None, dice: int) -> str | None:
    """Set the dice count of a cantrip's first term for a character-level tier.

    Examples:
        >>> scale_cantrip_dice("1d10", 3)
        '3d10'
    """
    parsed = parse_dice(base_damage)
    if parsed is None or not parsed.terms:
        return base_damage

    first = dataclasses.replace(parsed.terms[0], count=dice, keep=None)
    return format_dice(dataclasses.replace(parsed, terms=(first,)))
