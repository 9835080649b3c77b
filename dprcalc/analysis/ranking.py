"""Comparing and ranking spells by expected damage."""

from dprcalc.analysis.efficiency import cantrip_dice
from dprcalc.analysis.spell_dpr import analyze_spell
from dprcalc.dice.scaling import scale_cantrip_dice
from dprcalc.schemas.analysis import AnalysisResult, CantripTier, SpellComparison
from dprcalc.schemas.context import DEFAULT_CONTEXT, CombatContext
from dprcalc.schemas.facts import SpellFact


# Character levels where cantrip damage steps up
CANTRIP_TIER_LEVELS = (1, 5, 11, 17)


def _total_damage(analysis: AnalysisResult) -> float:
    return analysis.damage.total_expected_damage if analysis.damage.has_damage else 0.0


def compare_spells(
    facts: list[SpellFact],
    context: CombatContext | None = None,
) -> SpellComparison:
    """Analyze several spells and rank them by total expected damage.

    Returns:
        SpellComparison with analyses sorted best first, plus the names of
        the top spell by damage and by damage per slot level.
    """
    analyses = sorted(
        (analyze_spell(fact, context) for fact in facts),
        key=_total_damage,
        reverse=True,
    )

    rated = [a for a in analyses if a.efficiency is not None]
    best_efficiency = max(
        rated,
        key=lambda a: a.efficiency.damage_per_slot_level,
        default=None,
    )

    return SpellComparison(
        spells=analyses,
        best_damage=analyses[0].spell.name if analyses else None,
        best_efficiency=best_efficiency.spell.name if best_efficiency else None,
    )


def best_spells_for_slot(
    facts: list[SpellFact],
    slot_level: int,
    context: CombatContext | None = None,
    limit: int = 10,
) -> list[AnalysisResult]:
    """Best damage spells to cast with a slot of ``slot_level``.

    Leveled damage spells at or below the slot level are upcast to it and
    ranked by damage per slot level.

    Damage per slot level divides by the slot actually spent, not the
    spell's base level. A 1st-level spell cast with a 3rd-level slot is
    rated on its upcast damage over 3, so spells that upcast poorly rank
    below native spells of that level.
    """
    eligible = [
        fact
        for fact in facts
        if 0 < fact.level <= slot_level and fact.damage_roll
    ]

    analyses = [analyze_spell(fact, context, cast_level=slot_level) for fact in eligible]
    damaging = [a for a in analyses if a.damage.has_damage]
    damaging.sort(key=lambda a: a.efficiency.damage_per_slot_level, reverse=True)

    return damaging[:limit]


def analyze_cantrip_scaling(
    cantrip: SpellFact,
    context: CombatContext | None = None,
) -> list[CantripTier]:
    """Analyze a cantrip at each character-level damage tier."""
    ctx = context or DEFAULT_CONTEXT
    tiers = []

    for level in CANTRIP_TIER_LEVELS:
        dice = cantrip_dice(level)
        scaled = cantrip.model_copy(
            update={"damage_roll": scale_cantrip_dice(cantrip.damage_roll, dice)}
        )
        analysis = analyze_spell(scaled, ctx.with_overrides(caster_level=level))
        tiers.append(CantripTier(level=level, dice=dice, analysis=analysis))

    return tiers
