"""Attack, critical, and saving throw probabilities for d20 rolls.

Natural 1 always misses and natural 20 always hits, so hit chances are
clamped to 5%..95%. Saves mirror this: the target fails at least on a
natural 1 and succeeds at least on a natural 20.
"""

from dprcalc.schemas.context import CombatContext


def apply_advantage(probability: float, advantage: bool, disadvantage: bool) -> float:
    """Adjust a single-roll success chance for advantage or disadvantage.

    Having both cancels out, as does having neither.

    Examples:
        >>> apply_advantage(0.5, True, False)
        0.75
        >>> apply_advantage(0.5, False, True)
        0.25
        >>> apply_advantage(0.5, True, True)
        0.5
    """
    if advantage and not disadvantage:
        return 1 - (1 - probability) * (1 - probability)
    if disadvantage and not advantage:
        return probability * probability
    return probability


def hit_probability(
    attack_bonus: int,
    target_ac: int,
    advantage: bool = False,
    disadvantage: bool = False,
) -> float:
    """Chance that an attack roll hits.

    Args:
        attack_bonus: Total bonus added to the d20.
        target_ac: Target Armor Class.
        advantage: Roll twice, keep the higher.
        disadvantage: Roll twice, keep the lower.

    Returns:
        Probability in [0.05, 0.95] before advantage is applied.

    Examples:
        >>> hit_probability(7, 15)
        0.65
    """
    needed = target_ac - attack_bonus

    if needed <= 1:
        base = 0.95  # Only a natural 1 misses
    elif needed >= 20:
        base = 0.05  # Only a natural 20 hits
    else:
        base = (21 - needed) / 20

    return apply_advantage(base, advantage, disadvantage)


def crit_probability(
    crit_range: int = 20,
    advantage: bool = False,
    disadvantage: bool = False,
) -> float:
    """Chance of a critical hit.

    Args:
        crit_range: Lowest natural roll that crits (20 normally, 19 for
            Improved Critical, 18 for Superior Critical).

    Examples:
        >>> crit_probability()
        0.05
        >>> crit_probability(19)
        0.1
    """
    base = (21 - crit_range) / 20
    return apply_advantage(base, advantage, disadvantage)


def save_fail_probability(dc: int, target_save_bonus: int) -> float:
    """Chance that a target fails a saving throw.

    Examples:
        >>> save_fail_probability(15, 3)
        0.55
    """
    needed = dc - target_save_bonus

    if needed <= 1:
        return 0.05  # Only a natural 1 fails
    if needed >= 20:
        return 0.95  # Only a natural 20 succeeds

    return (needed - 1) / 20


def expected_attack_damage(
    attack_bonus: int,
    target_ac: int,
    base_damage: float,
    advantage: bool = False,
    disadvantage: bool = False,
    crit_range: int = 20,
    crit_dice: int = 0,
    bonus_crit_damage: float = 0,
) -> float:
    """Expected damage of a single weapon attack.

    A crit is approximated as 1.5x base damage (dice double, flat bonuses
    do not), plus any extra crit dice (averaging 3.5 each) and flat crit
    bonus damage.

    Args:
        attack_bonus: Total attack bonus.
        target_ac: Target Armor Class.
        base_damage: Average damage of a normal hit.
        advantage: Attack with advantage.
        disadvantage: Attack with disadvantage.
        crit_range: Lowest natural roll that crits.
        crit_dice: Extra dice rolled on a crit (e.g., Brutal Critical).
        bonus_crit_damage: Flat damage added on a crit.

    Returns:
        Expected damage per attack.
    """
    hit = hit_probability(attack_bonus, target_ac, advantage, disadvantage)
    crit = crit_probability(crit_range, advantage, disadvantage)

    normal_damage = (hit - crit) * base_damage
    crit_damage = crit * (base_damage * 1.5 + crit_dice * 3.5 + bonus_crit_damage)

    return normal_damage + crit_damage


def spell_save_dc(context: CombatContext) -> int:
    """Spell save DC for the caster described by the context."""
    return context.spell_save_dc


def spell_attack_bonus(context: CombatContext) -> int:
    """Spell attack bonus for the caster described by the context."""
    return context.attack_bonus
