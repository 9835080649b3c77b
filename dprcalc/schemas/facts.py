"""Input records supplied by the content store.

Field names are snake_case; camelCase aliases (``damageRoll``,
``savingThrow``, ...) are accepted so exported JSON can be loaded as is.
"""

import re

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Prefixes added by the content store to tell sources apart
SOURCE_KEY_PREFIX = re.compile(r"^(wikidot_|srd_)")


def normalize_key(key: str | None) -> str:
    """Strip a known source prefix from a record key.

    Examples:
        >>> normalize_key("wikidot_chaos-bolt")
        'chaos-bolt'
    """
    if not key:
        return ""
    return SOURCE_KEY_PREFIX.sub("", key)


class SpellFact(BaseModel):
    """A spell or attack as described by the content store.

    The analyzer only reads these fields; it never changes them.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    key: str = Field(default="", description="Unique key, possibly source-prefixed")
    name: str = Field(..., description="Display name")
    level: int = Field(default=0, ge=0, le=9, description="Spell level (0 = cantrip)")
    school: str | None = None
    casting_time: str | None = None
    range: str | None = None
    duration: str | None = None
    concentration: bool = False
    ritual: bool = False
    damage_roll: str | None = Field(
        default=None,
        description="Damage notation (e.g., '8d6'); None for utility spells",
    )
    damage_types: list[str] = Field(default_factory=list)
    saving_throw: str | None = Field(
        default=None,
        description="Ability the target saves with, if any",
    )
    attack_roll: bool = False
    classes: list[str] = Field(default_factory=list)
    description: str = ""
    higher_level: str | None = Field(
        default=None,
        description="'At Higher Levels' scaling text",
    )
    source: str | None = None

    @property
    def normalized_key(self) -> str:
        """Key without its source prefix, used for override lookups."""
        return normalize_key(self.key)


# Attacks share the same shape
AttackFact = SpellFact
