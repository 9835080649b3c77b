"""Tests for spell damage-per-round analysis."""

import pytest

from dprcalc.analysis.spell_dpr import analyze_spell
from dprcalc.schemas.context import CombatContext
from dprcalc.schemas.facts import SpellFact


class TestSaveSpells:
    """Tests for saving throw spells."""

    def test_fireball_expected_damage(self, fireball, context):
        """Test DC 15 vs +3 DEX with half damage on a save."""
        damage = analyze_spell(fireball, context).damage

        assert damage.has_damage
        assert damage.hit_chance == 55
        assert damage.save_for_half is True
        assert damage.average_roll == 28
        assert (damage.minimum, damage.maximum) == (8, 48)
        assert damage.expected_damage == pytest.approx(21.7)

    def test_fireball_area(self, fireball, context):
        damage = analyze_spell(fireball, context).damage
        assert damage.targets == 13
        assert damage.max_targets == 52
        assert damage.total_expected_damage == pytest.approx(282.1)

    def test_save_without_half_damage(self, context):
        fact = SpellFact(
            name="Mind Spike",
            level=2,
            damage_roll="3d8",
            saving_throw="wisdom",
            description="The target takes 3d8 psychic damage on a failed save.",
        )
        damage = analyze_spell(fact, context).damage

        assert damage.save_for_half is False
        assert damage.hit_chance == 65
        assert damage.expected_damage == pytest.approx(13.5 * 0.65, abs=0.01)

    def test_abbreviated_save_ability(self, fireball, context):
        abbreviated = fireball.model_copy(update={"saving_throw": "DEX"})
        assert analyze_spell(abbreviated, context).damage.hit_chance == 55

    def test_stronger_saves_lower_damage(self, fireball):
        ctx = CombatContext().with_overrides(target_saves={"dexterity": 8})
        damage = analyze_spell(fireball, ctx).damage
        assert damage.hit_chance == 30


class TestAttackSpells:
    """Tests for attack roll spells."""

    def test_fire_bolt(self, fire_bolt, context):
        damage = analyze_spell(fire_bolt, context).damage

        assert damage.hit_chance == 65
        assert damage.save_for_half is False
        # 5.5 * 0.65 plus 5% crit bonus
        assert damage.expected_damage == pytest.approx(3.85)
        assert damage.targets == 1

    def test_higher_ac_lowers_hit_chance(self, fire_bolt):
        damage = analyze_spell(fire_bolt, CombatContext(target_ac=20)).damage
        assert damage.hit_chance == 40

    def test_auto_hit_spell(self, context):
        fact = SpellFact(
            key="magic-missile",
            name="Magic Missile",
            level=1,
            damage_roll="3d4+3",
            description="You create three glowing darts of magical force.",
        )
        damage = analyze_spell(fact, context).damage

        assert damage.hit_chance == 100
        assert damage.targets == 3
        assert damage.total_expected_damage == pytest.approx(31.5)


class TestNoDamage:
    """Tests for spells that deal no direct damage."""

    def test_utility_spell(self, shield, context):
        result = analyze_spell(shield, context)

        assert result.damage.has_damage is False
        assert result.damage.note == "Utility/control spell - no direct damage"
        assert result.efficiency is None
        assert result.tactical is None

    def test_missing_damage_ignores_other_fields(self, context):
        fact = SpellFact(
            name="Hold Person",
            level=2,
            concentration=True,
            saving_throw="wisdom",
            attack_roll=True,
            description="Each creature in a 20-foot-radius sphere is paralyzed.",
        )
        result = analyze_spell(fact, context)

        assert result.damage.has_damage is False
        assert result.damage.targets == 1
        assert result.damage.total_expected_damage == 0

    def test_unparseable_damage(self, context):
        fact = SpellFact(name="Odd Spell", level=1, damage_roll="see text")
        damage = analyze_spell(fact, context).damage

        assert damage.has_damage is False
        assert damage.note == "Could not parse damage: see text"

    def test_spell_summary_still_filled(self, shield, context):
        result = analyze_spell(shield, context)
        assert result.spell.name == "Shield"
        assert result.context.spell_dc == 15


class TestOverrides:
    """Tests for corrected damage formulas and chain mechanics."""

    def test_chaos_bolt_damage_corrected(self, chaos_bolt, context):
        damage = analyze_spell(chaos_bolt, context).damage

        assert damage.base_damage == "2d8+1d6"
        assert damage.base_damage_note == 'Corrected from scraped "1d6"'
        assert damage.average_roll == 12.5
        assert damage.expected_damage == pytest.approx(8.75)

    def test_chaos_bolt_chain(self, chaos_bolt, context):
        damage = analyze_spell(chaos_bolt, context).damage

        assert damage.chain_mechanic.chance == 0.125
        assert damage.chain_mechanic.expected_bonus_damage == pytest.approx(1.16)
        assert damage.total_expected_damage == pytest.approx(9.91)

    def test_chaos_bolt_random_damage_type(self, chaos_bolt, context):
        damage = analyze_spell(chaos_bolt, context).damage
        assert damage.damage_type_random is True
        assert "force" in damage.damage_types

    def test_chaos_bolt_upcast_uses_override_scaling(self, chaos_bolt, context):
        result = analyze_spell(chaos_bolt, context, cast_level=3)
        assert result.damage.base_damage == "2d8+3d6"
        assert result.damage.average_roll == 19.5


class TestUpcasting:
    """Tests for casting with a higher slot."""

    def test_fireball_at_fifth_level(self, fireball, context):
        result = analyze_spell(fireball, context, cast_level=5)

        assert result.damage.base_damage == "10d6"
        assert result.damage.average_roll == 35
        assert result.damage.expected_damage == pytest.approx(27.13, abs=0.01)

    def test_efficiency_uses_cast_level(self, fireball, context):
        result = analyze_spell(fireball, context, cast_level=5)
        total = result.damage.total_expected_damage
        assert result.efficiency.damage_per_slot_level == pytest.approx(total / 5, abs=0.01)

    def test_lower_cast_level_ignored(self, fireball, context):
        result = analyze_spell(fireball, context, cast_level=2)
        assert result.damage.base_damage == "8d6"


class TestSustainedDamage:
    """Tests for concentration damage over the spell's duration."""

    def test_concentration_spell(self, moonbeam, context):
        damage = analyze_spell(moonbeam, context).damage
        assert damage.targets == 1
        # About 8.53 per round over a one-minute duration
        assert damage.sustained_damage == pytest.approx(85.25, abs=0.011)

    def test_instantaneous_spell_has_none(self, fireball, context):
        assert analyze_spell(fireball, context).damage.sustained_damage is None

    def test_single_round_concentration_spell(self, moonbeam, context):
        """A one-round duration still reports sustained damage."""
        brief = moonbeam.model_copy(update={"duration": "Concentration, up to 1 round"})
        damage = analyze_spell(brief, context).damage
        assert damage.sustained_damage == pytest.approx(damage.total_expected_damage)

    def test_concentration_without_duration_has_none(self, moonbeam, context):
        undated = moonbeam.model_copy(update={"duration": None})
        assert analyze_spell(undated, context).damage.sustained_damage is None


class TestEfficiencyAndTactics:
    """Tests for the rating sections of the result."""

    def test_fireball_efficiency(self, fireball, context):
        efficiency = analyze_spell(fireball, context).efficiency

        assert efficiency.damage_per_slot_level == pytest.approx(94.03)
        assert efficiency.damage_per_action == pytest.approx(282.1)
        assert efficiency.slot_efficiency.rating == "excellent"
        assert efficiency.vs_cantrip.worth_slot is True

    def test_cantrip_divides_by_one(self, fire_bolt, context):
        efficiency = analyze_spell(fire_bolt, context).efficiency
        assert efficiency.damage_per_slot_level == pytest.approx(3.85)

    def test_fireball_tactics(self, fireball, context):
        tactical = analyze_spell(fireball, context).tactical
        assert tactical.is_aoe is True
        assert "target_low_dex" in tactical.best_conditions
        assert "multiple_targets" in tactical.best_conditions


class TestDeterminism:
    """Tests that analysis is a pure function of its inputs."""

    def test_repeated_calls_identical(self, fireball, context):
        first = analyze_spell(fireball, context)
        second = analyze_spell(fireball, context)
        assert first.model_dump() == second.model_dump()

    def test_default_context_used(self, fireball):
        assert analyze_spell(fireball).model_dump() == analyze_spell(
            fireball, CombatContext()
        ).model_dump()

    def test_inputs_not_modified(self, fireball, context):
        before = fireball.model_dump()
        analyze_spell(fireball, context, cast_level=6)
        assert fireball.model_dump() == before
