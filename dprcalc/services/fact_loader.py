"""Loader for spell and character records stored as YAML or JSON.

The content store exports plain records; this service reads them from
disk and validates them into SpellFact / CharacterRecord models.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dprcalc.schemas.character import CharacterRecord
from dprcalc.schemas.facts import SpellFact


logger = logging.getLogger(__name__)


class FactLoadError(Exception):
    """Error during fact loading."""

    pass


def _read_file(file_path: Path) -> Any:
    if not file_path.exists():
        raise FactLoadError(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()
    try:
        with open(file_path, encoding="utf-8") as f:
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(f)
            if suffix == ".json":
                return json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        raise FactLoadError(f"Failed to parse {file_path}: {e}") from e

    raise FactLoadError(f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json")


def load_spell_facts(file_path: Path) -> list[SpellFact]:
    """Load spell records from a file.

    The file may hold a list of records, a mapping with a ``spells`` list,
    or a single record.

    Args:
        file_path: Path to a YAML or JSON file.

    Returns:
        Validated SpellFact records in file order.

    Raises:
        FactLoadError: If the file is missing, unparseable, or a record is invalid.
    """
    data = _read_file(file_path)

    if isinstance(data, dict):
        records = data.get("spells", [data])
    elif isinstance(data, list):
        records = data
    else:
        raise FactLoadError(f"Expected a list of spells in {file_path}")

    facts = []
    for index, record in enumerate(records):
        try:
            facts.append(SpellFact.model_validate(record))
        except ValidationError as e:
            raise FactLoadError(f"Invalid spell #{index + 1} in {file_path}: {e}") from e

    logger.info("Loaded %d spells from %s", len(facts), file_path)
    return facts


def load_character(file_path: Path) -> CharacterRecord:
    """Load a single character record from a file.

    Raises:
        FactLoadError: If the file is missing, unparseable, or invalid.
    """
    data = _read_file(file_path)

    if not isinstance(data, dict):
        raise FactLoadError(f"Expected a character mapping in {file_path}")

    try:
        return CharacterRecord.model_validate(data.get("character", data))
    except ValidationError as e:
        raise FactLoadError(f"Invalid character in {file_path}: {e}") from e


def filter_facts(
    facts: list[SpellFact],
    level: int | None = None,
    school: str | None = None,
    concentration: bool | None = None,
    damaging_only: bool = False,
) -> list[SpellFact]:
    """Filter spells the way the content store's query options do."""
    selected = facts
    if level is not None:
        selected = [f for f in selected if f.level == level]
    if school:
        selected = [f for f in selected if (f.school or "").lower() == school.lower()]
    if concentration is not None:
        selected = [f for f in selected if f.concentration == concentration]
    if damaging_only:
        selected = [f for f in selected if f.damage_roll]
    return selected
