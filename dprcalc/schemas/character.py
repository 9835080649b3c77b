"""Character records and breakpoint report schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


POWER_ATTACK_FEATS = ("GWM", "Sharpshooter")


class CharacterResources(BaseModel):
    """Limited resources a character can spend."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ki: int = Field(default=5, ge=0, description="Remaining ki points")
    spell_slots: list[int] | None = Field(
        default=None,
        description="Remaining slots by level, starting at 1st",
    )
    expected_enemy_damage: float = Field(
        default=10.0,
        description="Damage enemies deal per round when they hit",
    )
    expected_encounters: int = Field(default=4, ge=1)


class CharacterRecord(BaseModel):
    """A character as entered in the breakpoint form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = "Character"
    class_name: str | None = Field(default=None, alias="class")
    level: int = Field(default=1, ge=1, le=20)
    attack_bonus: int = 5
    base_damage: float = Field(default=10.0, description="Average damage per hit")
    ac: int = 15
    feats: list[str] = Field(default_factory=list)
    stats: dict[str, int] = Field(
        default_factory=dict,
        description="Ability modifiers keyed by ability name",
    )
    resources: CharacterResources = Field(default_factory=CharacterResources)

    @property
    def normalized_class(self) -> str:
        return (self.class_name or "").lower()

    @property
    def power_attack_feat(self) -> str | None:
        """GWM or Sharpshooter, whichever the character has (GWM first)."""
        for feat in POWER_ATTACK_FEATS:
            if feat in self.feats:
                return feat
        return None


class BreakpointRow(BaseModel):
    """Baseline vs modified DPR at one target AC."""

    ac: int
    baseline_dpr: float
    modified_dpr: float
    recommended: bool
    difference: float
    extra_damage_taken: float = 0.0


class BreakpointTable(BaseModel):
    """An AC sweep and the highest AC where the modified option still wins."""

    rows: list[BreakpointRow]
    breakpoint: int = Field(default=0, description="0 when never recommended")


class PowerAttackReport(BaseModel):
    """Power attack sweep with and without advantage."""

    normal: BreakpointTable
    normal_advice: str
    with_advantage: BreakpointTable
    with_advantage_advice: str


class StunningStrikeResult(BaseModel):
    dc: int
    fail_probability: int = Field(..., description="Whole percent")
    recommend_use: bool
    reasoning: str


class StunningStrikeReport(BaseModel):
    vs_bad_con: StunningStrikeResult
    vs_average_con: StunningStrikeResult
    vs_good_con: StunningStrikeResult


class SmiteOption(BaseModel):
    slot_level: int
    expected_damage: float
    can_kill: bool
    should_smite: bool
    recommendation: str


class SmiteAnalysis(BaseModel):
    is_crit: bool
    recommendations: list[SmiteOption]
    general_advice: str


class DivineSmiteReport(BaseModel):
    on_crit: SmiteAnalysis
    on_hit: SmiteAnalysis


class SpellPacing(BaseModel):
    total_slots: int
    expected_encounters: int
    slots_per_encounter: float
    short_rests_expected: int
    recommendations: list[str]


class CharacterSummary(BaseModel):
    name: str
    class_name: str | None = None
    level: int


class BreakpointReport(BaseModel):
    """Everything the breakpoint analyzer found for a character."""

    character: CharacterSummary
    power_attack: dict[str, PowerAttackReport] = Field(default_factory=dict)
    reckless_attack: BreakpointTable | None = None
    stunning_strike: StunningStrikeReport | None = None
    divine_smite: DivineSmiteReport | None = None
    spell_pacing: SpellPacing | None = None
    recommendations: list[str] = Field(default_factory=list)


class CheatSheetSection(BaseModel):
    """One block of a printable cheat sheet."""

    type: str  # header, stats, decision, tips, reference
    title: str | None = None
    content: str | None = None
    items: list[str] = Field(default_factory=list)
    rules: list[dict[str, str]] = Field(default_factory=list)
    modifiers: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class CheatSheet(BaseModel):
    character: CharacterSummary
    sections: list[CheatSheetSection]
