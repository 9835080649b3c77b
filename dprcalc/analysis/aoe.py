"""Area-of-effect and multi-target estimation from spell descriptions.

Target counts come from how many 5-foot grid squares a template covers
(Xanathar's token method: grid distance, templates start at a grid
intersection) divided by how densely enemies are packed.

Description matching is an ordered list of rules. The first rule that
matches decides the result, so specific shapes are listed before generic
phrases like "each creature".
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, NamedTuple

from dprcalc.schemas.context import DEFAULT_CONTEXT, CombatContext


logger = logging.getLogger(__name__)


# Squares covered by each template size (feet -> squares)
AOE_SQUARES: dict[str, dict[int, int]] = {
    # Triangular numbers: a cone n squares long has rows of 1, 2, ..., n
    "cone": {
        10: 3,
        15: 6,
        30: 21,  # Given explicitly in XGtE
        60: 78,
    },
    # Radius r spreads r/5 squares each way from the origin point, with
    # the corners of the resulting square cut off for large radii
    "sphere": {
        5: 4,
        10: 16,
        15: 36,
        20: 52,  # Fireball
        30: 120,
        40: 200,
    },
    "cube": {
        5: 1,
        10: 4,
        15: 9,
        20: 16,
        30: 36,
    },
    # 5 feet wide, length / 5 squares long
    "line": {
        30: 6,
        60: 12,
        100: 20,
        120: 24,
    },
    # Horizontal footprint follows the sphere rules
    "cylinder": {
        5: 4,
        10: 16,
        20: 52,
        30: 120,
    },
}

# Enemies per square: spread out vs bunched up
SPREAD_DENSITY = 4
CLUSTERED_DENSITY = 2

# Cap for "each creature" wording with no stated area
GENERIC_AOE_MAX_TARGETS = 20
GENERIC_AOE_DEFAULT_TARGETS = 2

NUMBER_WORDS = {"two": 2, "three": 3, "four": 4, "five": 5, "six": 6}


@dataclass(frozen=True)
class RuleMatch:
    """What a single description rule found.

    Area rules leave ``default_targets`` as None; it is derived from
    ``max_targets`` (the squares covered) and the enemy density.
    """

    rule: str
    max_targets: int
    default_targets: int | None = None
    shape: str | None = None
    size: int | None = None


@dataclass(frozen=True)
class TargetEstimate:
    """Expected and maximum number of creatures affected."""

    targets: int
    max_targets: int
    rule: str | None = None
    shape: str | None = None
    size: int | None = None


class TargetRule(NamedTuple):
    name: str
    match: Callable[[str], RuleMatch | None]


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


def squares_to_targets(squares: int, clustered: bool = False) -> int:
    """Typical number of enemies inside an area of ``squares`` squares.

    Examples:
        >>> squares_to_targets(52)
        13
        >>> squares_to_targets(52, clustered=True)
        26
        >>> squares_to_targets(1)
        1
    """
    density = CLUSTERED_DENSITY if clustered else SPREAD_DENSITY
    return max(1, _round(squares / density))


def _area(rule: str, shape: str, size: int, squares: int) -> RuleMatch:
    return RuleMatch(rule=rule, max_targets=squares, shape=shape, size=size)


def _fixed(rule: str, count: int, max_targets: int | None = None) -> RuleMatch:
    return RuleMatch(
        rule=rule,
        max_targets=count if max_targets is None else max_targets,
        default_targets=count,
    )


# =============================================================================
# Area shapes
# =============================================================================

CONE_PATTERN = re.compile(r"(\d+)[- ]foot[- ]cone")

CYLINDER_DETECT_PATTERNS = (
    re.compile(r"(\d+)[- ]foot[- ]radius.{0,30}(cylinder|high)"),
    re.compile(r"(cylinder|column).{0,50}(\d+)[- ]foot[- ]radius"),
)
CYLINDER_SIZE_PATTERNS = (
    re.compile(r"(\d+)[- ]foot[- ]radius.{0,10}(,|\s).*?(cylinder|high)"),
    re.compile(r"(cylinder|column).{0,30}(\d+)[- ]foot[- ]radius"),
)

DISTANCE_PATTERN = re.compile(r"to a distance of (\d+) feet")
CUBE_PATTERN = re.compile(r"(\d+)[- ]foot[- ]cube")

LINE_DETECT_PATTERNS = (
    re.compile(r"(\d+)[- ]foot[- ]line"),
    re.compile(r"line.+(\d+)[- ]feet? long"),
)
LINE_SIZE_PATTERNS = (
    re.compile(r"(\d+)[- ]foot"),
    re.compile(r"(\d+)[- ]feet"),
)

RADIUS_PATTERN = re.compile(r"(\d+)[- ]foot[- ]radius")
# Spells that strike a point but mention a radius elsewhere (Call Lightning)
POINT_STRIKE_PATTERN = re.compile(r"bolt.{0,20}(flash|strike|hit)")


def match_cone(desc: str) -> RuleMatch | None:
    match = CONE_PATTERN.search(desc)
    if not match:
        return None
    size = int(match.group(1))
    squares = AOE_SQUARES["cone"].get(size) or _round(size * size / 25)
    return _area("cone", "cone", size, squares)


def match_cylinder(desc: str) -> RuleMatch | None:
    """Cylinders and columns (Moonbeam, Flame Strike).

    Checked before the generic radius rule. When the wording is detected
    but no size can be pulled out, the spell still counts as handled and
    falls back to a single target.
    """
    if not any(pattern.search(desc) for pattern in CYLINDER_DETECT_PATTERNS):
        return None

    for pattern in CYLINDER_SIZE_PATTERNS:
        match = pattern.search(desc)
        if match:
            size = int(next(group for group in match.groups() if group and group.isdigit()))
            squares = (
                AOE_SQUARES["cylinder"].get(size) or AOE_SQUARES["sphere"].get(size) or 4
            )
            return _area("cylinder", "cylinder", size, squares)

    logger.debug("Cylinder wording without a usable size")
    return _fixed("cylinder", 1)


def match_distance(desc: str) -> RuleMatch | None:
    """Emanations like Spirit Guardians: "to a distance of 15 feet"."""
    match = DISTANCE_PATTERN.search(desc)
    if not match:
        return None
    size = int(match.group(1))
    squares = AOE_SQUARES["sphere"].get(size) or _round((size / 5 * 2) ** 2)
    return _area("distance", "sphere", size, squares)


def match_cube(desc: str) -> RuleMatch | None:
    match = CUBE_PATTERN.search(desc)
    if not match:
        return None
    size = int(match.group(1))
    squares = AOE_SQUARES["cube"].get(size) or _round((size / 5) ** 2)
    return _area("cube", "cube", size, squares)


def match_line(desc: str) -> RuleMatch | None:
    if not any(pattern.search(desc) for pattern in LINE_DETECT_PATTERNS):
        return None

    for pattern in LINE_SIZE_PATTERNS:
        match = pattern.search(desc)
        if match:
            size = int(match.group(1))
            squares = AOE_SQUARES["line"].get(size) or _round(size / 5)
            return _area("line", "line", size, squares)

    return _fixed("line", 1)


def match_radius(desc: str) -> RuleMatch | None:
    match = RADIUS_PATTERN.search(desc)
    if not match or POINT_STRIKE_PATTERN.search(desc):
        return None
    size = int(match.group(1))
    squares = AOE_SQUARES["sphere"].get(size) or _round(math.pi * (size / 5) ** 2)
    return _area("radius", "sphere", size, squares)


# =============================================================================
# Explicit target counts
# =============================================================================

PROJECTILE_PATTERN = re.compile(
    r"(two|three|four|five|six)\s+\w*\s*(darts?|bolts?|beams?|rays?|missiles?)"
)


def match_chain(desc: str) -> RuleMatch | None:
    """Chain Lightning: the primary target plus three others."""
    if "three other targets" in desc or "3 other targets" in desc:
        return _fixed("chain", 4)
    return None


def match_projectiles(desc: str) -> RuleMatch | None:
    """Magic Missile, Scorching Ray, Eldritch Blast beams."""
    match = PROJECTILE_PATTERN.search(desc)
    if not match:
        return None
    return _fixed("projectiles", NUMBER_WORDS[match.group(1)])


def match_counted_creatures(desc: str) -> RuleMatch | None:
    for word in ("two", "three", "four"):
        if f"{word} creatures" in desc or f"{word} targets" in desc:
            return _fixed("counted", NUMBER_WORDS[word])
    return None


def match_each_creature(desc: str) -> RuleMatch | None:
    if "each creature" in desc or "all creatures" in desc:
        return _fixed(
            "each_creature",
            GENERIC_AOE_DEFAULT_TARGETS,
            max_targets=GENERIC_AOE_MAX_TARGETS,
        )
    return None


SINGLE_TARGET_PHRASES = ("one creature", "one target", "a creature", "a target")


def match_single_target(desc: str) -> RuleMatch | None:
    if any(phrase in desc for phrase in SINGLE_TARGET_PHRASES):
        return _fixed("single", 1)
    return None


# Evaluation order matters: the first match wins
TARGET_RULES: tuple[TargetRule, ...] = (
    TargetRule("cone", match_cone),
    TargetRule("cylinder", match_cylinder),
    TargetRule("distance", match_distance),
    TargetRule("cube", match_cube),
    TargetRule("line", match_line),
    TargetRule("radius", match_radius),
    TargetRule("chain", match_chain),
    TargetRule("projectiles", match_projectiles),
    TargetRule("counted", match_counted_creatures),
    TargetRule("each_creature", match_each_creature),
    TargetRule("single", match_single_target),
)


def first_matching_rule(description: str | None) -> RuleMatch | None:
    """Run the rules in order against a description and return the first hit."""
    desc = (description or "").lower()
    for rule in TARGET_RULES:
        result = rule.match(desc)
        if result is not None:
            logger.debug("Target rule %s matched (max %d)", rule.name, result.max_targets)
            return result
    return None


def estimate_targets(
    description: str | None,
    context: CombatContext | None = None,
    clustered: bool | None = None,
) -> TargetEstimate:
    """Estimate how many creatures a spell affects.

    Args:
        description: Free-text spell description.
        context: Combat context; ``expected_targets > 1`` means the caller
            chose a target count, which is capped at the area's maximum.
        clustered: Override the context's enemy-clustering assumption.

    Returns:
        TargetEstimate; unrecognized descriptions are single-target.

    Examples:
        >>> estimate_targets("Each creature in a 20-foot-radius sphere must save.").targets
        13
    """
    ctx = context or DEFAULT_CONTEXT
    is_clustered = ctx.clustered if clustered is None else clustered

    match = first_matching_rule(description)
    if match is None:
        return TargetEstimate(targets=1, max_targets=1)

    default_targets = match.default_targets
    if default_targets is None:
        default_targets = squares_to_targets(match.max_targets, is_clustered)

    targets = default_targets
    if ctx.expected_targets > 1:
        targets = min(ctx.expected_targets, match.max_targets)

    return TargetEstimate(
        targets=targets,
        max_targets=match.max_targets,
        rule=match.rule,
        shape=match.shape,
        size=match.size,
    )
