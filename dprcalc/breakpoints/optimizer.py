"""Builds the full breakpoint report for a character."""

import logging

from dprcalc.breakpoints.features import (
    divine_smite_analysis,
    power_attack_breakpoint,
    reckless_attack_breakpoint,
    spell_slot_pacing,
    stunning_strike_value,
)
from dprcalc.schemas.character import (
    BreakpointReport,
    CharacterRecord,
    CharacterSummary,
    DivineSmiteReport,
    PowerAttackReport,
    StunningStrikeReport,
)


logger = logging.getLogger(__name__)

DEFAULT_WISDOM_MOD = 3
DEFAULT_SMITE_SLOTS = [2, 2]

# Representative targets for smite decisions
SMITE_TARGET_HP = 50
SMITE_TARGET_MAX_HP = 100

# Target CON save bonuses: casters/rogues, warriors, brutes
CON_SAVE_BANDS = {"bad": 0, "average": 3, "good": 6}


def character_summary(character: CharacterRecord) -> CharacterSummary:
    return CharacterSummary(
        name=character.name,
        class_name=character.class_name,
        level=character.level,
    )


def calculate_breakpoints(character: CharacterRecord) -> BreakpointReport:
    """Run every analysis that applies to the character.

    Power attack runs for GWM or Sharpshooter; Reckless Attack for
    barbarians; Stunning Strike for monks; Divine Smite for paladins; slot
    pacing whenever spell slots are given.
    """
    report = BreakpointReport(character=character_summary(character))
    resources = character.resources
    char_class = character.normalized_class

    feat = character.power_attack_feat
    if feat:
        normal = power_attack_breakpoint(character.attack_bonus, character.base_damage)
        with_advantage = power_attack_breakpoint(
            character.attack_bonus, character.base_damage, advantage=True
        )

        report.power_attack[feat] = PowerAttackReport(
            normal=normal,
            normal_advice=f"Use {feat} against AC {normal.breakpoint} or lower",
            with_advantage=with_advantage,
            with_advantage_advice=(
                f"With advantage: use {feat} against AC {with_advantage.breakpoint} or lower"
            ),
        )

        low = min(normal.breakpoint, with_advantage.breakpoint)
        high = max(normal.breakpoint, with_advantage.breakpoint)
        report.recommendations.extend(
            [
                f"{feat}: Always use vs AC ≤{low}",
                f"{feat}: Never use vs AC ≥{high + 3}",
                f"{feat}: With advantage, threshold increases by "
                f"~{with_advantage.breakpoint - normal.breakpoint} AC",
            ]
        )

    if char_class == "barbarian":
        report.reckless_attack = reckless_attack_breakpoint(
            character.attack_bonus,
            character.base_damage,
            resources.expected_enemy_damage,
        )
        report.recommendations.extend(
            [
                "Reckless Attack: Best when you have high HP and resistance",
                "Reckless Attack: Avoid when facing many enemies or low HP",
            ]
        )

    if char_class == "monk":
        wisdom = character.stats.get("wisdom", DEFAULT_WISDOM_MOD)
        bands = {
            band: stunning_strike_value(character.level, wisdom, con_save, resources.ki)
            for band, con_save in CON_SAVE_BANDS.items()
        }
        report.stunning_strike = StunningStrikeReport(
            vs_bad_con=bands["bad"],
            vs_average_con=bands["average"],
            vs_good_con=bands["good"],
        )
        report.recommendations.extend(
            [
                "Stunning Strike: Target low-CON enemies (casters, rogues)",
                "Stunning Strike: Save ki vs high-CON brutes",
            ]
        )

    if char_class == "paladin":
        slots = resources.spell_slots or DEFAULT_SMITE_SLOTS
        report.divine_smite = DivineSmiteReport(
            on_crit=divine_smite_analysis(
                character.level, slots, SMITE_TARGET_HP, SMITE_TARGET_MAX_HP, True
            ),
            on_hit=divine_smite_analysis(
                character.level, slots, SMITE_TARGET_HP, SMITE_TARGET_MAX_HP, False
            ),
        )
        report.recommendations.extend(
            [
                "Divine Smite: Always smite on critical hits",
                "Divine Smite: Save slots for crits unless you need to secure a kill",
            ]
        )

    if resources.spell_slots:
        report.spell_pacing = spell_slot_pacing(
            character.level,
            resources.spell_slots,
            resources.expected_encounters,
        )

    logger.debug(
        "Breakpoints for %s: %d recommendations",
        character.name,
        len(report.recommendations),
    )
    return report
