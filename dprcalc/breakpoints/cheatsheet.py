"""Printable combat cheat sheets built from a breakpoint report."""

from dprcalc.breakpoints.features import stunning_strike_dc
from dprcalc.breakpoints.optimizer import DEFAULT_WISDOM_MOD, character_summary
from dprcalc.schemas.character import (
    BreakpointReport,
    CharacterRecord,
    CheatSheet,
    CheatSheetSection,
)


COMBAT_PRIORITY_TIPS = [
    "1. Eliminate enemy casters first (concentration)",
    "2. Focus fire - dead enemies deal no damage",
    "3. Control > Damage when outnumbered",
    "4. Save resources for hard fights",
]

ACTION_ECONOMY_REFERENCE = [
    "Action: Attack, Cast, Dash, Dodge, Help, Hide",
    "Bonus Action: Class features, some spells",
    "Reaction: Opportunity Attack, Shield, Counterspell",
    "Free: Drop item, speak briefly",
]


def _rule(condition: str, action: str, priority: str) -> dict[str, str]:
    return {"condition": condition, "action": action, "priority": priority}


def _power_attack_section(feat: str, breakpoint: int) -> CheatSheetSection:
    return CheatSheetSection(
        type="decision",
        title=f"{feat} (-5/+10)",
        rules=[
            _rule(f"AC ≤ {breakpoint - 2}", "ALWAYS use", "high"),
            _rule(
                f"AC {breakpoint - 1}-{breakpoint + 1}",
                "Use with advantage only",
                "medium",
            ),
            _rule(f"AC ≥ {breakpoint + 2}", "DO NOT use", "low"),
        ],
        modifiers=[
            "Bless active: +2 to AC thresholds",
            "Advantage: +3 to AC thresholds",
            "Disadvantage: -4 to AC thresholds",
        ],
    )


def generate_cheat_sheet(character: CharacterRecord, report: BreakpointReport) -> CheatSheet:
    """Turn a breakpoint report into short, table-side decision rules.

    Args:
        character: The character the report was built for.
        report: Output of ``calculate_breakpoints``.
    """
    summary = character_summary(character)
    char_class = character.normalized_class

    sections = [
        CheatSheetSection(
            type="header",
            content=f"{character.name} - Level {character.level} {character.class_name or ''}".rstrip(),
        ),
        CheatSheetSection(
            type="stats",
            title="Combat Stats",
            items=[
                f"Attack Bonus: +{character.attack_bonus}",
                f"Base Damage: {character.base_damage:g}",
                f"AC: {character.ac}",
            ],
        ),
    ]

    feat = character.power_attack_feat
    if feat and feat in report.power_attack:
        sections.append(_power_attack_section(feat, report.power_attack[feat].normal.breakpoint))

    if char_class == "barbarian":
        sections.append(
            CheatSheetSection(
                type="decision",
                title="Reckless Attack",
                rules=[
                    _rule("High HP, few enemies, have resistance", "USE Reckless", "high"),
                    _rule("Low HP or many enemies", "SKIP Reckless", "low"),
                ],
                notes=[
                    "Gives YOU advantage",
                    "Gives ENEMIES advantage against you",
                    "Best value when Rage is active (resistance)",
                ],
            )
        )

    if char_class == "monk":
        if report.stunning_strike:
            dc = report.stunning_strike.vs_average_con.dc
        else:
            dc = stunning_strike_dc(character.level, DEFAULT_WISDOM_MOD)
        sections.append(
            CheatSheetSection(
                type="decision",
                title="Stunning Strike",
                rules=[
                    _rule("vs. Casters/Rogues (low CON)", "WORTH IT - attempt stun", "high"),
                    _rule(
                        "vs. Warriors (average CON)",
                        "Use on high-priority targets only",
                        "medium",
                    ),
                    _rule("vs. Brutes/Giants (high CON)", "SAVE YOUR KI", "low"),
                ],
                notes=[
                    f"Your DC: {dc}",
                    "Stunned = incapacitated, auto-fail STR/DEX saves, attacks have advantage",
                    "Ki is precious - don't waste on unlikely stuns",
                ],
            )
        )

    if char_class == "paladin":
        sections.append(
            CheatSheetSection(
                type="decision",
                title="Divine Smite",
                rules=[
                    _rule("You rolled a CRIT", "ALWAYS SMITE (double dice!)", "high"),
                    _rule("Target is almost dead", "Smite to secure kill", "medium"),
                    _rule("Normal hit, target healthy", "Save slots for crits", "low"),
                ],
                notes=[
                    "1st: 2d8 (9 avg) | 2nd: 3d8 (13.5 avg)",
                    "3rd: 4d8 (18 avg) | 4th: 5d8 (22.5 avg)",
                    "+1d8 vs undead/fiends",
                    "Crits DOUBLE all smite dice!",
                ],
            )
        )

    sections.append(
        CheatSheetSection(type="tips", title="Combat Priority", items=COMBAT_PRIORITY_TIPS)
    )
    sections.append(
        CheatSheetSection(
            type="reference",
            title="Action Economy",
            items=ACTION_ECONOMY_REFERENCE,
        )
    )

    return CheatSheet(character=summary, sections=sections)
