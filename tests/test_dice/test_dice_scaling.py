"""Tests for upcast and cantrip damage scaling."""

from dprcalc.dice.scaling import scale_cantrip_dice, scale_spell_damage


FIREBALL_RULE = "the damage increases by 1d6 for each slot level above 3rd"


class TestScaleSpellDamage:
    """Tests for scale_spell_damage."""

    def test_merges_matching_die(self):
        assert scale_spell_damage("8d6", 3, 5, FIREBALL_RULE) == "10d6"

    def test_appends_new_die(self):
        assert scale_spell_damage("3d10", 2, 4, "1d8 per level") == "3d10+2d8"

    def test_multiple_dice_per_level(self):
        assert scale_spell_damage("3d8", 1, 3, "increases by 2d8") == "7d8"

    def test_modifier_is_kept(self):
        assert scale_spell_damage("3d4+3", 1, 2, "1d4 for each level") == "4d4+3"

    def test_merges_into_first_matching_term(self):
        assert scale_spell_damage("2d8+1d6", 1, 3, "1d6") == "2d8+3d6"

    def test_same_or_lower_level_unchanged(self):
        assert scale_spell_damage("8d6", 3, 3, FIREBALL_RULE) == "8d6"
        assert scale_spell_damage("8d6", 3, 2, FIREBALL_RULE) == "8d6"

    def test_missing_rule_unchanged(self):
        assert scale_spell_damage("8d6", 3, 5, None) == "8d6"

    def test_rule_without_dice_unchanged(self):
        assert scale_spell_damage("3d4+3", 1, 3, "one more dart per level") == "3d4+3"

    def test_unparseable_base_unchanged(self):
        assert scale_spell_damage("special", 1, 3, "1d6") == "special"
        assert scale_spell_damage(None, 1, 3, "1d6") is None


class TestScaleCantripDice:
    """Tests for scale_cantrip_dice."""

    def test_sets_dice_count(self):
        assert scale_cantrip_dice("1d10", 3) == "3d10"

    def test_keeps_modifier_drops_extra_terms(self):
        assert scale_cantrip_dice("1d8+1d6+2", 2) == "2d8+2"

    def test_unparseable_unchanged(self):
        assert scale_cantrip_dice("varies", 2) == "varies"
