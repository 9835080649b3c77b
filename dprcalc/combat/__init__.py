"""Attack and saving throw probability model."""

from dprcalc.combat.probability import (
    apply_advantage,
    crit_probability,
    expected_attack_damage,
    hit_probability,
    save_fail_probability,
    spell_attack_bonus,
    spell_save_dc,
)
from dprcalc.combat.rounding import round_damage, round_half_up, to_percent

__all__ = [
    "apply_advantage",
    "crit_probability",
    "expected_attack_damage",
    "hit_probability",
    "save_fail_probability",
    "spell_attack_bonus",
    "spell_save_dc",
    "round_damage",
    "round_half_up",
    "to_percent",
]
