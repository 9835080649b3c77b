"""Spell analysis commands."""

import json
from pathlib import Path
from typing import Optional

import typer

from dprcalc.analysis import (
    analyze_cantrip_scaling,
    analyze_spell,
    best_spells_for_slot,
    compare_spells,
)
from dprcalc.cli.display import (
    console,
    display_analysis,
    display_error,
    display_info,
    display_spell_ranking,
    display_success,
)
from dprcalc.config import get_settings
from dprcalc.schemas.context import CombatContext
from dprcalc.schemas.facts import SpellFact, normalize_key
from dprcalc.services import FactLoadError, filter_facts, load_spell_facts

app = typer.Typer(help="Spell analysis commands")


def build_context(
    target_ac: int | None = None,
    targets: int | None = None,
    caster_level: int | None = None,
    clustered: bool | None = None,
) -> CombatContext:
    """Combat context from settings, with command-line flags on top."""
    settings = get_settings()
    base = CombatContext(
        proficiency_bonus=settings.proficiency_bonus,
        ability_modifier=settings.ability_modifier,
        caster_level=settings.caster_level,
        target_ac=settings.target_ac,
        expected_targets=settings.expected_targets,
        expected_encounters=settings.expected_encounters,
        clustered=settings.clustered,
    )
    return base.with_overrides(
        target_ac=target_ac,
        expected_targets=targets,
        caster_level=caster_level,
        clustered=clustered,
    )


def _load(file: Path) -> list[SpellFact]:
    try:
        return load_spell_facts(file)
    except FactLoadError as e:
        display_error(str(e))
        raise typer.Exit(1)


def _echo_json(data: object) -> None:
    typer.echo(json.dumps(data, indent=2))


@app.command()
def analyze(
    file: Path = typer.Argument(..., help="Spell file (.yaml or .json)"),
    spell: Optional[str] = typer.Option(None, "--spell", "-s", help="Only this spell (name or key)"),
    level: Optional[int] = typer.Option(None, "--level", "-l", help="Filter by spell level"),
    school: Optional[str] = typer.Option(None, "--school", help="Filter by school"),
    cast_level: Optional[int] = typer.Option(None, "--cast-level", "-c", help="Upcast to slot level"),
    target_ac: Optional[int] = typer.Option(None, "--target-ac", "-a", help="Target Armor Class"),
    targets: Optional[int] = typer.Option(None, "--targets", "-t", help="Targets in the area"),
    caster_level: Optional[int] = typer.Option(None, "--caster-level", help="Character level"),
    clustered: Optional[bool] = typer.Option(None, "--clustered/--spread", help="Enemies bunched together"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Analyze expected damage for spells in a file."""
    facts = filter_facts(_load(file), level=level, school=school)
    if spell:
        wanted = normalize_key(spell.lower().replace(" ", "-"))
        facts = [
            f for f in facts
            if f.name.lower() == spell.lower() or f.normalized_key == wanted
        ]

    if not facts:
        display_error("No matching spells found")
        raise typer.Exit(1)

    ctx = build_context(target_ac, targets, caster_level, clustered)
    analyses = [analyze_spell(fact, ctx, cast_level=cast_level) for fact in facts]

    if as_json:
        _echo_json([a.model_dump(mode="json") for a in analyses])
        return

    for analysis in analyses:
        display_analysis(analysis)


@app.command()
def compare(
    file: Path = typer.Argument(..., help="Spell file (.yaml or .json)"),
    level: Optional[int] = typer.Option(None, "--level", "-l", help="Filter by spell level"),
    target_ac: Optional[int] = typer.Option(None, "--target-ac", "-a", help="Target Armor Class"),
    targets: Optional[int] = typer.Option(None, "--targets", "-t", help="Targets in the area"),
    caster_level: Optional[int] = typer.Option(None, "--caster-level", help="Character level"),
    clustered: Optional[bool] = typer.Option(None, "--clustered/--spread", help="Enemies bunched together"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Rank spells by total expected damage."""
    facts = filter_facts(_load(file), level=level, damaging_only=True)
    ctx = build_context(target_ac, targets, caster_level, clustered)
    comparison = compare_spells(facts, ctx)

    if as_json:
        _echo_json(comparison.model_dump(mode="json"))
        return

    display_spell_ranking(comparison.spells, title="Spells by Expected Damage")
    if comparison.best_damage:
        display_success(f"Most damage: {comparison.best_damage}")
    if comparison.best_efficiency:
        display_info(f"Best per slot level: {comparison.best_efficiency}")


@app.command()
def best(
    file: Path = typer.Argument(..., help="Spell file (.yaml or .json)"),
    slot: int = typer.Option(..., "--slot", min=1, max=9, help="Slot level to spend"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Rows to show"),
    target_ac: Optional[int] = typer.Option(None, "--target-ac", "-a", help="Target Armor Class"),
    targets: Optional[int] = typer.Option(None, "--targets", "-t", help="Targets in the area"),
    caster_level: Optional[int] = typer.Option(None, "--caster-level", help="Character level"),
    clustered: Optional[bool] = typer.Option(None, "--clustered/--spread", help="Enemies bunched together"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Best damage spells for a slot level, upcast where possible."""
    ctx = build_context(target_ac, targets, caster_level, clustered)
    ranked = best_spells_for_slot(
        _load(file),
        slot,
        ctx,
        limit=limit or get_settings().top_spells_limit,
    )

    if as_json:
        _echo_json([a.model_dump(mode="json") for a in ranked])
        return

    display_spell_ranking(ranked, title=f"Best Spells for a Level {slot} Slot")


@app.command()
def cantrip(
    file: Path = typer.Argument(..., help="Spell file (.yaml or .json)"),
    target_ac: Optional[int] = typer.Option(None, "--target-ac", "-a", help="Target Armor Class"),
    targets: Optional[int] = typer.Option(None, "--targets", "-t", help="Targets in the area"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Show how each damage cantrip scales across character levels."""
    cantrips = filter_facts(_load(file), level=0, damaging_only=True)
    if not cantrips:
        display_info("No damage cantrips found")
        return

    ctx = build_context(target_ac, targets)
    results = {fact.name: analyze_cantrip_scaling(fact, ctx) for fact in cantrips}

    if as_json:
        _echo_json(
            {name: [tier.model_dump(mode="json") for tier in tiers] for name, tiers in results.items()}
        )
        return

    for name, tiers in results.items():
        console.print(f"\n[bold]{name}[/bold]")
        for tier in tiers:
            damage = tier.analysis.damage
            console.print(
                f"  Level {tier.level:>2}: {damage.base_damage or '-':<8} "
                f"expected {damage.total_expected_damage}"
            )
