"""Tactical notes attached to a spell analysis."""

from dprcalc.schemas.analysis import TacticalAnalysis
from dprcalc.schemas.context import normalize_ability
from dprcalc.schemas.facts import SpellFact


# Save ability -> (note, condition tag)
SAVE_NOTES = {
    "dexterity": ("DEX save - less effective vs agile enemies", "target_low_dex"),
    "constitution": ("CON save - less effective vs tough enemies", "target_low_con"),
    "wisdom": ("WIS save - effective vs low-WIS creatures", "target_low_wis"),
    "intelligence": ("INT save - very effective vs beasts/undead", "target_low_int"),
}

CONTROL_CONDITIONS = ("restrained", "paralyzed", "stunned")


def generate_tactical_notes(fact: SpellFact, targets: int) -> TacticalAnalysis:
    """Build notes and condition tags for a damaging spell.

    Args:
        fact: The spell being analyzed.
        targets: Expected number of targets from the AoE estimate.
    """
    notes: list[str] = []
    conditions: list[str] = []

    if fact.concentration:
        notes.append("Requires concentration - can be interrupted")
        conditions.append("maintain_concentration")

    save_note = SAVE_NOTES.get(normalize_ability(fact.saving_throw) or "")
    if save_note:
        notes.append(save_note[0])
        conditions.append(save_note[1])

    if targets > 1:
        notes.append(f"AoE spell - best with {targets}+ clustered enemies")
        conditions.append("multiple_targets")

    if fact.ritual:
        notes.append("Can be cast as ritual (no slot, +10 min)")

    desc = (fact.description or "").lower()

    if any(condition in desc for condition in CONTROL_CONDITIONS):
        notes.append("Applies powerful condition - tactical control")
        conditions.append("control_spell")

    if "bonus action" in desc:
        notes.append("Uses bonus action - good action economy")
        conditions.append("bonus_action")

    return TacticalAnalysis(
        notes=notes,
        best_conditions=conditions,
        is_control="control_spell" in conditions,
        is_aoe=targets > 1,
    )
