"""Tests for tactical notes."""

from dprcalc.analysis.tactical import generate_tactical_notes
from dprcalc.schemas.facts import SpellFact


class TestGenerateTacticalNotes:
    """Tests for notes and condition tags."""

    def test_concentration_and_save(self, moonbeam):
        tactical = generate_tactical_notes(moonbeam, targets=1)

        assert "Requires concentration - can be interrupted" in tactical.notes
        assert "CON save - less effective vs tough enemies" in tactical.notes
        assert tactical.best_conditions == ["maintain_concentration", "target_low_con"]
        assert tactical.is_aoe is False

    def test_aoe(self, fireball):
        tactical = generate_tactical_notes(fireball, targets=13)
        assert "AoE spell - best with 13+ clustered enemies" in tactical.notes
        assert tactical.is_aoe is True

    def test_abbreviated_save(self):
        fact = SpellFact(name="Dissonant Whispers", saving_throw="WIS")
        assert generate_tactical_notes(fact, 1).best_conditions == ["target_low_wis"]

    def test_control_condition(self):
        fact = SpellFact(name="Web", description="A creature caught in the webs is restrained.")
        tactical = generate_tactical_notes(fact, 1)
        assert tactical.is_control is True
        assert "control_spell" in tactical.best_conditions

    def test_bonus_action_and_ritual(self):
        fact = SpellFact(
            name="Odd Ritual",
            ritual=True,
            description="You can use a bonus action to move the effect.",
        )
        tactical = generate_tactical_notes(fact, 1)
        assert "Can be cast as ritual (no slot, +10 min)" in tactical.notes
        assert "bonus_action" in tactical.best_conditions

    def test_nothing_notable(self):
        tactical = generate_tactical_notes(SpellFact(name="Plain"), 1)
        assert tactical.notes == []
        assert tactical.best_conditions == []
