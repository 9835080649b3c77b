"""Input records, combat context, and analysis result schemas."""

from dprcalc.schemas.analysis import (
    AnalysisResult,
    CantripComparison,
    CantripTier,
    ChainMechanic,
    ContextSummary,
    DamageAnalysis,
    EfficiencyAnalysis,
    SlotEfficiency,
    SpellComparison,
    SpellSummary,
    TacticalAnalysis,
)
from dprcalc.schemas.character import (
    BreakpointReport,
    BreakpointRow,
    BreakpointTable,
    CharacterRecord,
    CharacterResources,
    CheatSheet,
    CheatSheetSection,
)
from dprcalc.schemas.context import (
    ABILITIES,
    DEFAULT_CONTEXT,
    CombatContext,
    TargetSaves,
    normalize_ability,
)
from dprcalc.schemas.facts import AttackFact, SpellFact, normalize_key

__all__ = [
    # Analysis results
    "AnalysisResult",
    "CantripComparison",
    "CantripTier",
    "ChainMechanic",
    "ContextSummary",
    "DamageAnalysis",
    "EfficiencyAnalysis",
    "SlotEfficiency",
    "SpellComparison",
    "SpellSummary",
    "TacticalAnalysis",
    # Characters and breakpoints
    "BreakpointReport",
    "BreakpointRow",
    "BreakpointTable",
    "CharacterRecord",
    "CharacterResources",
    "CheatSheet",
    "CheatSheetSection",
    # Context
    "ABILITIES",
    "DEFAULT_CONTEXT",
    "CombatContext",
    "TargetSaves",
    "normalize_ability",
    # Facts
    "AttackFact",
    "SpellFact",
    "normalize_key",
]
