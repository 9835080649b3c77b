"""Output schemas for spell and attack analysis.

All displayed numbers are rounded when these models are built: damage to
two decimals, chances to whole percent.
"""

from pydantic import BaseModel, Field


class SpellSummary(BaseModel):
    """Identity of the analyzed spell."""

    key: str
    name: str
    level: int
    school: str | None = None
    concentration: bool = False
    ritual: bool = False


class ContextSummary(BaseModel):
    """Derived caster numbers used for the analysis."""

    caster_level: int
    spell_dc: int
    spell_attack_bonus: int


class ChainMechanic(BaseModel):
    """A chance for the effect to repeat against a new target."""

    chance: float = Field(..., description="Chance to chain after a successful hit")
    description: str
    expected_bonus_damage: float = 0.0


class DamageAnalysis(BaseModel):
    """Expected damage breakdown.

    Only ``has_damage`` and ``note`` are set for utility spells and
    unparseable damage.
    """

    has_damage: bool
    note: str | None = None
    base_damage: str | None = None
    base_damage_note: str | None = None
    average_roll: float = 0.0
    minimum: int = 0
    maximum: int = 0
    hit_chance: int = Field(default=0, description="Whole percent")
    save_for_half: bool = False
    expected_damage: float = 0.0
    targets: int = 1
    max_targets: int = 1
    total_expected_damage: float = 0.0
    sustained_damage: float | None = None
    chain_mechanic: ChainMechanic | None = None
    damage_types: list[str] = Field(default_factory=list)
    damage_type_choice: bool = False
    damage_type_random: bool = False


class CantripComparison(BaseModel):
    """Spell damage measured against an at-will cantrip."""

    cantrip_damage: float
    ratio: float
    worth_slot: bool


class SlotEfficiency(BaseModel):
    """Qualitative rating of damage for the slot spent."""

    rating: str  # excellent, good, average, poor
    score: float


class EfficiencyAnalysis(BaseModel):
    """Damage per resource spent."""

    damage_per_slot_level: float
    damage_per_action: float
    vs_cantrip: CantripComparison
    slot_efficiency: SlotEfficiency


class TacticalAnalysis(BaseModel):
    """Human-readable notes and machine-readable condition tags."""

    notes: list[str] = Field(default_factory=list)
    best_conditions: list[str] = Field(default_factory=list)
    is_control: bool = False
    is_aoe: bool = False


class AnalysisResult(BaseModel):
    """Full analysis of one spell or attack."""

    spell: SpellSummary
    context: ContextSummary
    damage: DamageAnalysis
    efficiency: EfficiencyAnalysis | None = None
    tactical: TacticalAnalysis | None = None


class SpellComparison(BaseModel):
    """Several analyses ranked by total expected damage."""

    spells: list[AnalysisResult]
    best_damage: str | None = None
    best_efficiency: str | None = None


class CantripTier(BaseModel):
    """A cantrip analyzed at one character-level tier."""

    level: int
    dice: int
    analysis: AnalysisResult
