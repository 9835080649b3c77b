"""Spell and attack damage-per-round analysis.

Combines the dice engine, the hit/save probability model, and the AoE
estimator into one expected-damage figure per cast, then rates it.

The analysis is deterministic: it never rolls dice, and the same fact and
context always produce the same result.
"""

import logging

from dprcalc.analysis.aoe import estimate_targets
from dprcalc.analysis.damage_types import detect_damage_type_choice
from dprcalc.analysis.duration import estimate_duration
from dprcalc.analysis.efficiency import compare_to_cantrip, rate_slot_efficiency
from dprcalc.analysis.overrides import find_override
from dprcalc.analysis.tactical import generate_tactical_notes
from dprcalc.combat.probability import hit_probability, save_fail_probability
from dprcalc.combat.rounding import round_damage, to_percent
from dprcalc.dice.scaling import scale_spell_damage
from dprcalc.dice.stats import summarize_dice
from dprcalc.schemas.analysis import (
    AnalysisResult,
    ChainMechanic,
    ContextSummary,
    DamageAnalysis,
    EfficiencyAnalysis,
    SpellSummary,
)
from dprcalc.schemas.context import DEFAULT_CONTEXT, CombatContext
from dprcalc.schemas.facts import SpellFact


logger = logging.getLogger(__name__)

# Attack rolls crit on a natural 20; a crit adds roughly one more average roll
CRIT_CHANCE = 0.05
HALF_DAMAGE_PHRASE = "half as much damage"


def _chain_bonus(average: float, chain_chance: float, hit_chance: float) -> float:
    """Expected damage from repeated chaining.

    Each chain is a full new attack, so the bonus is a geometric series
    ``d*pq + d*(pq)^2 + ... = d*pq / (1 - pq)`` where ``d`` includes the
    crit bonus.
    """
    pq = chain_chance * hit_chance
    if pq >= 1:
        return 0.0
    return average * (1 + CRIT_CHANCE) * pq / (1 - pq)


def analyze_spell(
    fact: SpellFact,
    context: CombatContext | None = None,
    cast_level: int | None = None,
) -> AnalysisResult:
    """Compute expected damage and efficiency for one spell or attack.

    Args:
        fact: Spell record from the content store.
        context: Combat context; defaults to ``DEFAULT_CONTEXT``.
        cast_level: Slot level to cast at. Above the spell's level, damage
            is scaled using the spell's higher-level rule.

    Returns:
        AnalysisResult. Spells without a damage roll, or with damage that
        cannot be parsed, get ``damage.has_damage = False`` and a note.
    """
    ctx = context or DEFAULT_CONTEXT
    spell_dc = ctx.spell_save_dc

    result = AnalysisResult(
        spell=SpellSummary(
            key=fact.key,
            name=fact.name,
            level=fact.level,
            school=fact.school,
            concentration=fact.concentration,
            ritual=fact.ritual,
        ),
        context=ContextSummary(
            caster_level=ctx.caster_level,
            spell_dc=spell_dc,
            spell_attack_bonus=ctx.attack_bonus,
        ),
        damage=DamageAnalysis(has_damage=False),
    )

    if not fact.damage_roll:
        result.damage.note = "Utility/control spell - no direct damage"
        return result

    override = find_override(fact.normalized_key)
    effective_roll = fact.damage_roll
    chain: ChainMechanic | None = None
    base_damage_note = None

    if override:
        logger.debug("Applying damage override for %s", fact.normalized_key)
        effective_roll = override.base_damage
        base_damage_note = f'Corrected from scraped "{fact.damage_roll}"'
        if override.chain_chance:
            chain = ChainMechanic(
                chance=override.chain_chance,
                description=override.chain_description or "",
            )

    slot_level = fact.level
    if cast_level is not None and cast_level > fact.level:
        scaling_rule = (override and override.slot_scaling) or fact.higher_level
        effective_roll = scale_spell_damage(effective_roll, fact.level, cast_level, scaling_rule)
        slot_level = cast_level

    dice = summarize_dice(effective_roll)
    if not dice.valid:
        logger.warning("Could not parse damage %r for %s", fact.damage_roll, fact.name)
        result.damage.note = f"Could not parse damage: {fact.damage_roll}"
        return result

    # Hit chance: attack roll, failed save, or automatic
    hit_chance = 1.0
    save_for_half = False

    if fact.attack_roll:
        hit_chance = hit_probability(ctx.attack_bonus, ctx.target_ac)
    elif fact.saving_throw:
        save_bonus = ctx.target_saves.bonus_for(fact.saving_throw)
        hit_chance = save_fail_probability(spell_dc, save_bonus)
        save_for_half = HALF_DAMAGE_PHRASE in (fact.description or "").lower()

    expected = dice.average * hit_chance

    if save_for_half:
        expected += dice.average * (1 - hit_chance) * 0.5

    if fact.attack_roll:
        expected += dice.average * CRIT_CHANCE

    target_info = estimate_targets(fact.description, ctx)
    total_expected = expected * target_info.targets

    if chain:
        chain_bonus = _chain_bonus(dice.average, chain.chance, hit_chance)
        total_expected += chain_bonus
        chain = chain.model_copy(update={"expected_bonus_damage": round_damage(chain_bonus)})

    sustained = None
    if fact.concentration and fact.duration:
        sustained = round_damage(total_expected * estimate_duration(fact.duration))

    damage_types = detect_damage_type_choice(fact)

    result.damage = DamageAnalysis(
        has_damage=True,
        base_damage=effective_roll,
        base_damage_note=base_damage_note,
        average_roll=dice.average,
        minimum=dice.minimum,
        maximum=dice.maximum,
        hit_chance=to_percent(hit_chance),
        save_for_half=save_for_half,
        expected_damage=round_damage(expected),
        targets=target_info.targets,
        max_targets=target_info.max_targets,
        total_expected_damage=round_damage(total_expected),
        sustained_damage=sustained,
        chain_mechanic=chain,
        damage_types=list(damage_types.types),
        damage_type_choice=damage_types.has_choice,
        damage_type_random=damage_types.is_random,
    )

    result.efficiency = EfficiencyAnalysis(
        damage_per_slot_level=round_damage(total_expected / max(1, slot_level)),
        damage_per_action=round_damage(total_expected),
        vs_cantrip=compare_to_cantrip(total_expected, ctx.caster_level),
        slot_efficiency=rate_slot_efficiency(total_expected, slot_level),
    )

    result.tactical = generate_tactical_notes(fact, target_info.targets)

    return result
