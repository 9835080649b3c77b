"""Dice expression engine.

Parses damage notation and computes expectations, bounds, and scaling.

Usage:
    >>> from dprcalc.dice import parse_dice, average
    >>> average(parse_dice("8d6"))
    28.0
"""

# Types
from dprcalc.dice.types import (
    DiceExpression,
    DiceSummary,
    DiceTerm,
    KeepMode,
    KeepRule,
    RollResult,
)

# Parser
from dprcalc.dice.parser import DiceParseError, format_dice, parse_dice, require_dice

# Statistics
from dprcalc.dice.stats import average, keep_average, maximum, minimum, summarize_dice

# Scaling
from dprcalc.dice.scaling import scale_cantrip_dice, scale_spell_damage

# Roller (nondeterministic)
from dprcalc.dice.roller import roll, roll_dice, simulate

__all__ = [
    # Types
    "DiceExpression",
    "DiceSummary",
    "DiceTerm",
    "KeepMode",
    "KeepRule",
    "RollResult",
    # Parser
    "DiceParseError",
    "format_dice",
    "parse_dice",
    "require_dice",
    # Statistics
    "average",
    "keep_average",
    "maximum",
    "minimum",
    "summarize_dice",
    # Scaling
    "scale_cantrip_dice",
    "scale_spell_damage",
    # Roller
    "roll",
    "roll_dice",
    "simulate",
]
