"""Spell and attack damage analysis.

Usage:
    >>> from dprcalc.analysis import analyze_spell
    >>> from dprcalc.schemas import SpellFact
    >>> fact = SpellFact(name="Fire Bolt", level=0, damage_roll="2d10", attack_roll=True)
    >>> analyze_spell(fact).damage.hit_chance
    65
"""

from dprcalc.analysis.aoe import (
    AOE_SQUARES,
    TARGET_RULES,
    RuleMatch,
    TargetEstimate,
    estimate_targets,
    first_matching_rule,
    squares_to_targets,
)
from dprcalc.analysis.damage_types import DamageTypeInfo, detect_damage_type_choice
from dprcalc.analysis.duration import estimate_duration
from dprcalc.analysis.efficiency import compare_to_cantrip, rate_slot_efficiency
from dprcalc.analysis.overrides import SPECIAL_DAMAGE_FORMULAS, DamageOverride
from dprcalc.analysis.ranking import (
    analyze_cantrip_scaling,
    best_spells_for_slot,
    compare_spells,
)
from dprcalc.analysis.spell_dpr import analyze_spell
from dprcalc.analysis.tactical import generate_tactical_notes

__all__ = [
    # AoE
    "AOE_SQUARES",
    "TARGET_RULES",
    "RuleMatch",
    "TargetEstimate",
    "estimate_targets",
    "first_matching_rule",
    "squares_to_targets",
    # Heuristics
    "DamageTypeInfo",
    "detect_damage_type_choice",
    "estimate_duration",
    "SPECIAL_DAMAGE_FORMULAS",
    "DamageOverride",
    # Rating
    "compare_to_cantrip",
    "rate_slot_efficiency",
    "generate_tactical_notes",
    # Analysis
    "analyze_spell",
    "compare_spells",
    "best_spells_for_slot",
    "analyze_cantrip_scaling",
]
