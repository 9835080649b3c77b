"""Tests for damage type choice detection."""

from dprcalc.analysis.damage_types import RANDOM_DAMAGE_TYPES, detect_damage_type_choice
from dprcalc.schemas.facts import SpellFact


class TestKnownSpells:
    """Tests for spells listed by key."""

    def test_chromatic_orb(self):
        fact = SpellFact(key="srd_chromatic-orb", name="Chromatic Orb", damage_types=["acid"])
        info = detect_damage_type_choice(fact)

        assert info.has_choice is True
        assert info.types == ("acid", "cold", "fire", "lightning", "poison", "thunder")

    def test_table_beats_description(self):
        fact = SpellFact(
            key="spirit-shroud",
            name="Spirit Shroud",
            description="You choose acid or fire.",
        )
        assert detect_damage_type_choice(fact).types == ("cold", "necrotic", "radiant")


class TestChoiceWording:
    """Tests for "you choose" descriptions."""

    def test_choose_list(self):
        fact = SpellFact(name="Orb", description="You choose acid, cold, or fire.")
        info = detect_damage_type_choice(fact)

        assert info.has_choice is True
        assert info.types == ("acid", "cold", "fire")

    def test_choose_two(self):
        fact = SpellFact(name="Bane", description="When you cast it, you choose cold or lightning.")
        assert detect_damage_type_choice(fact).types == ("cold", "lightning")

    def test_single_repeated_type_is_not_a_choice(self):
        fact = SpellFact(
            name="Odd",
            damage_types=["fire"],
            description="You choose fire or fire.",
        )
        info = detect_damage_type_choice(fact)
        assert info.has_choice is False
        assert info.types == ("fire",)


class TestRandomTypes:
    """Tests for randomly determined damage types."""

    def test_die_determines_type(self):
        fact = SpellFact(
            name="Wild Bolt",
            description="The number rolled on that die determines the attack's damage type.",
        )
        info = detect_damage_type_choice(fact)

        assert info.is_random is True
        assert info.has_choice is False
        assert info.types == RANDOM_DAMAGE_TYPES


class TestDeclaredTypes:
    """Tests for falling back to the record's own types."""

    def test_declared(self, fireball):
        info = detect_damage_type_choice(fireball)
        assert info.types == ("fire",)
        assert not info.has_choice and not info.is_random

    def test_none_declared(self):
        assert detect_damage_type_choice(SpellFact(name="Thing")).types == ()
