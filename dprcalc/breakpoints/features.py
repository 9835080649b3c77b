"""Decision math for damage feats and class features.

Each analysis sweeps target AC (or checks a resource) and says when the
option is worth using: Great Weapon Master / Sharpshooter, Reckless
Attack, Stunning Strike, and Divine Smite, plus spell slot pacing.
"""

import math

from dprcalc.combat.probability import expected_attack_damage
from dprcalc.combat.rounding import round_damage, round_half_up, to_percent
from dprcalc.schemas.character import (
    BreakpointRow,
    BreakpointTable,
    SmiteAnalysis,
    SmiteOption,
    SpellPacing,
    StunningStrikeResult,
)


AC_SWEEP = range(10, 26)

# Great Weapon Master / Sharpshooter trade
POWER_ATTACK_PENALTY = 5
POWER_ATTACK_DAMAGE = 10

# Share of enemy damage added when enemies gain advantage
RECKLESS_DAMAGE_TAKEN_FACTOR = 0.25

# Abstract value of a stun, roughly two rounds of the monk's damage
STUN_VALUE = 20
KI_VALUE_SCALE = 10

# Average Divine Smite damage for 1st-4th level slots (2d8 .. 5d8)
SMITE_DAMAGE = (9, 13.5, 18, 22.5)
SLOT_SCARCITY_THRESHOLD = 0.3


def _breakpoint(rows: list[BreakpointRow]) -> int:
    """Highest AC in the sweep where the option is still recommended."""
    recommended = [row.ac for row in rows if row.recommended]
    return recommended[-1] if recommended else 0


def power_attack_breakpoint(
    attack_bonus: int,
    base_damage: float,
    advantage: bool = False,
    disadvantage: bool = False,
    crit_range: int = 20,
    crit_dice: int = 0,
    bonus_crit_damage: float = 0,
) -> BreakpointTable:
    """Sweep AC 10-25 comparing normal attacks to the -5/+10 power attack.

    Args:
        attack_bonus: Normal attack bonus.
        base_damage: Average damage of a normal hit.
        advantage: Attacks are made with advantage.
        disadvantage: Attacks are made with disadvantage.
        crit_range: Lowest natural roll that crits.
        crit_dice: Extra dice on a crit.
        bonus_crit_damage: Flat damage added on a crit.

    Returns:
        BreakpointTable; ``breakpoint`` is the highest AC where the power
        attack deals more expected damage.
    """
    options = dict(
        advantage=advantage,
        disadvantage=disadvantage,
        crit_range=crit_range,
        crit_dice=crit_dice,
        bonus_crit_damage=bonus_crit_damage,
    )
    rows = []

    for ac in AC_SWEEP:
        normal = expected_attack_damage(attack_bonus, ac, base_damage, **options)
        powered = expected_attack_damage(
            attack_bonus - POWER_ATTACK_PENALTY,
            ac,
            base_damage + POWER_ATTACK_DAMAGE,
            **options,
        )
        rows.append(
            BreakpointRow(
                ac=ac,
                baseline_dpr=round_damage(normal),
                modified_dpr=round_damage(powered),
                recommended=powered > normal,
                difference=round_damage(powered - normal),
            )
        )

    return BreakpointTable(rows=rows, breakpoint=_breakpoint(rows))


def reckless_attack_breakpoint(
    attack_bonus: int,
    base_damage: float,
    expected_enemy_damage: float,
    crit_range: int = 20,
    crit_dice: int = 0,
    bonus_crit_damage: float = 0,
) -> BreakpointTable:
    """Sweep AC 10-25 weighing Reckless Attack's advantage against its cost.

    Reckless Attack gives the barbarian advantage but also gives enemies
    advantage. The cost is estimated as 25% more of the damage enemies
    would deal, so ``difference`` is the net benefit per round.
    """
    options = dict(
        crit_range=crit_range,
        crit_dice=crit_dice,
        bonus_crit_damage=bonus_crit_damage,
    )
    extra_taken = expected_enemy_damage * RECKLESS_DAMAGE_TAKEN_FACTOR
    rows = []

    for ac in AC_SWEEP:
        normal = expected_attack_damage(attack_bonus, ac, base_damage, **options)
        reckless = expected_attack_damage(
            attack_bonus, ac, base_damage, advantage=True, **options
        )
        net_benefit = reckless - normal - extra_taken

        rows.append(
            BreakpointRow(
                ac=ac,
                baseline_dpr=round_damage(normal),
                modified_dpr=round_damage(reckless),
                recommended=net_benefit > 0,
                difference=round_damage(net_benefit),
                extra_damage_taken=round_damage(extra_taken),
            )
        )

    return BreakpointTable(rows=rows, breakpoint=_breakpoint(rows))


def stunning_strike_dc(monk_level: int, wisdom_mod: int) -> int:
    """Ki save DC with proficiency approximated as ceil(level / 4) + 1."""
    return 8 + math.ceil(monk_level / 4) + 1 + wisdom_mod


def stunning_strike_value(
    monk_level: int,
    wisdom_mod: int,
    target_con_save: int,
    remaining_ki: int,
) -> StunningStrikeResult:
    """Decide whether spending ki on Stunning Strike is worthwhile.

    The stun is worth a fixed amount; ki gets more precious as it runs out,
    so the bar rises to ``10 / remaining_ki``.

    Examples:
        >>> stunning_strike_value(5, 3, 0, 5).dc
        14
    """
    dc = stunning_strike_dc(monk_level, wisdom_mod)
    fail_probability = max(0.05, min(0.95, (dc - target_con_save - 1) / 20))

    expected_value = fail_probability * STUN_VALUE
    ki_value = KI_VALUE_SCALE / max(1, remaining_ki)

    if fail_probability < 0.25:
        reasoning = "Low success chance - save your ki"
    elif fail_probability < 0.5:
        reasoning = "Moderate chance - use if target is high priority"
    else:
        reasoning = "Good chance - worth attempting"

    return StunningStrikeResult(
        dc=dc,
        fail_probability=to_percent(fail_probability),
        recommend_use=expected_value > ki_value,
        reasoning=reasoning,
    )


def divine_smite_analysis(
    paladin_level: int,
    remaining_slots: list[int],
    target_current_hp: float,
    target_max_hp: float,
    is_crit: bool,
) -> SmiteAnalysis:
    """Recommend whether to smite, per available slot level (1st-4th).

    Always smite on a crit (the dice double). Otherwise smite when it can
    finish the target, or when slots of that level are not scarce.

    Args:
        paladin_level: Paladin level, used to estimate total slots.
        remaining_slots: Remaining slots by level, starting at 1st.
        target_current_hp: Target's current hit points.
        target_max_hp: Target's maximum hit points.
        is_crit: Whether the triggering hit was a critical hit.
    """
    total_slots = paladin_level // 2 + 2
    options = []

    for slot_level, remaining in enumerate(remaining_slots[: len(SMITE_DAMAGE)], start=1):
        if remaining <= 0:
            continue

        damage = SMITE_DAMAGE[slot_level - 1] * (2 if is_crit else 1)
        can_kill = target_current_hp <= damage
        scarce = remaining / total_slots < SLOT_SCARCITY_THRESHOLD

        if is_crit:
            recommendation = "Always smite on crits!"
        elif can_kill:
            recommendation = "Smite to secure the kill"
        elif scarce:
            recommendation = "Conserve slots - target isn't critical"
        else:
            recommendation = "Smite if target is high priority"

        options.append(
            SmiteOption(
                slot_level=slot_level,
                expected_damage=round_half_up(damage, 1),
                can_kill=can_kill,
                should_smite=is_crit or can_kill or not scarce,
                recommendation=recommendation,
            )
        )

    if is_crit:
        advice = "SMITE! Crits double your smite dice."
    elif target_max_hp > 0 and target_current_hp / target_max_hp < 0.25:
        advice = "Target is low - smite to finish them"
    else:
        advice = "Consider saving slots for crits unless this target must die now"

    return SmiteAnalysis(is_crit=is_crit, recommendations=options, general_advice=advice)


def spell_slot_pacing(
    caster_level: int,
    current_slots: list[int],
    expected_encounters: int,
) -> SpellPacing:
    """Spread leveled spell slots over an adventuring day.

    A short rest is assumed every three encounters.
    """
    encounters = max(1, expected_encounters)
    total_slots = sum(current_slots)
    slots_per_encounter = total_slots / encounters

    if slots_per_encounter < 1:
        recommendations = [
            "Conserve heavily - rely on cantrips for most encounters",
            "Save leveled spells for emergencies or boss fights",
        ]
    elif slots_per_encounter < 2:
        recommendations = [
            "Use one leveled spell per encounter on average",
            "Save high-level slots for difficult fights",
        ]
    else:
        recommendations = [
            "You have slots to spare - don't be afraid to use them",
            "Lead with strong spells to end fights quickly",
        ]

    return SpellPacing(
        total_slots=total_slots,
        expected_encounters=encounters,
        slots_per_encounter=round_half_up(slots_per_encounter, 1),
        short_rests_expected=encounters // 3,
        recommendations=recommendations,
    )
