"""Feat and class feature breakpoint analysis."""

from dprcalc.breakpoints.cheatsheet import generate_cheat_sheet
from dprcalc.breakpoints.features import (
    AC_SWEEP,
    divine_smite_analysis,
    power_attack_breakpoint,
    reckless_attack_breakpoint,
    spell_slot_pacing,
    stunning_strike_dc,
    stunning_strike_value,
)
from dprcalc.breakpoints.optimizer import calculate_breakpoints

__all__ = [
    "AC_SWEEP",
    "calculate_breakpoints",
    "divine_smite_analysis",
    "generate_cheat_sheet",
    "power_attack_breakpoint",
    "reckless_attack_breakpoint",
    "spell_slot_pacing",
    "stunning_strike_dc",
    "stunning_strike_value",
]
