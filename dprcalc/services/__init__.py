"""Services that feed records to the analysis core."""

from dprcalc.services.fact_loader import (
    FactLoadError,
    filter_facts,
    load_character,
    load_spell_facts,
)

__all__ = [
    "FactLoadError",
    "filter_facts",
    "load_character",
    "load_spell_facts",
]
