"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dprcalc.dice.types import DiceSummary, RollResult
from dprcalc.schemas.analysis import AnalysisResult
from dprcalc.schemas.character import BreakpointReport, BreakpointTable, CheatSheet


# Shared console instance
console = Console()

RATING_COLORS = {
    "excellent": "bright_green",
    "good": "green",
    "average": "yellow",
    "poor": "red",
}

PRIORITY_COLORS = {"high": "green", "medium": "yellow", "low": "red"}


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_success(message: str) -> None:
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    console.print(f"[dim]{message}[/dim]")


def display_dice_summary(summary: DiceSummary, canonical: str) -> None:
    """Display average, minimum, and maximum of a dice expression.

    Args:
        summary: Statistics from summarize_dice.
        canonical: The expression in canonical notation.
    """
    table = Table(title=f"Dice: {canonical}", box=box.ROUNDED)
    table.add_column("Average", justify="right", style="cyan")
    table.add_column("Minimum", justify="right")
    table.add_column("Maximum", justify="right")
    table.add_row(f"{summary.average:g}", str(summary.minimum), str(summary.maximum))
    console.print(table)


def display_rolls(results: list[RollResult]) -> None:
    """Display simulated rolls, with dropped dice dimmed."""
    table = Table(title="Rolls", box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kept")
    table.add_column("Dropped", style="dim")
    table.add_column("Total", justify="right", style="bold cyan")

    for index, result in enumerate(results, start=1):
        table.add_row(
            str(index),
            ", ".join(str(r) for r in result.kept_rolls) or "-",
            ", ".join(str(r) for r in result.discarded_rolls),
            str(result.total),
        )

    console.print(table)


def display_analysis(analysis: AnalysisResult) -> None:
    """Display a single spell analysis as a panel."""
    damage = analysis.damage
    spell = analysis.spell
    level = "Cantrip" if spell.level == 0 else f"Level {spell.level}"
    lines = [f"[bold]{spell.name}[/bold] [dim]({level})[/dim]"]

    if not damage.has_damage:
        lines.append(f"[dim]{damage.note}[/dim]")
        console.print(Panel("\n".join(lines), border_style="dim"))
        return

    lines.append(
        f"Damage: [cyan]{damage.base_damage}[/cyan] "
        f"(avg {damage.average_roll:g}, {damage.minimum}-{damage.maximum})"
    )
    if damage.base_damage_note:
        lines.append(f"[dim]{damage.base_damage_note}[/dim]")

    chance_label = "Save fail" if damage.save_for_half else "Success"
    lines.append(f"{chance_label} chance: {damage.hit_chance}%")
    lines.append(
        f"Expected: [bold]{damage.expected_damage}[/bold] per target x {damage.targets} "
        f"(max {damage.max_targets}) = [bold cyan]{damage.total_expected_damage}[/bold cyan]"
    )

    if damage.sustained_damage is not None:
        lines.append(f"Sustained (concentration): {damage.sustained_damage}")
    if damage.chain_mechanic:
        lines.append(
            f"Chain: {damage.chain_mechanic.description} "
            f"(+{damage.chain_mechanic.expected_bonus_damage})"
        )
    if damage.damage_types:
        flag = " (choice)" if damage.damage_type_choice else ""
        flag = " (random)" if damage.damage_type_random else flag
        lines.append(f"Types: {', '.join(damage.damage_types)}{flag}")

    if analysis.efficiency:
        rating = analysis.efficiency.slot_efficiency.rating
        color = RATING_COLORS.get(rating, "white")
        vs_cantrip = analysis.efficiency.vs_cantrip
        lines.append("")
        lines.append(
            f"Efficiency: [{color}]{rating}[/{color}] "
            f"({analysis.efficiency.damage_per_slot_level} per slot level)"
        )
        lines.append(
            f"vs cantrip: x{vs_cantrip.ratio}"
            + (" - worth a slot" if vs_cantrip.worth_slot else "")
        )

    if analysis.tactical and analysis.tactical.notes:
        lines.append("")
        lines.extend(f"  - {note}" for note in analysis.tactical.notes)

    console.print(Panel("\n".join(lines), border_style="cyan"))


def display_spell_ranking(analyses: list[AnalysisResult], title: str = "Spell Ranking") -> None:
    """Display analyses as a ranked table."""
    if not analyses:
        console.print("[dim]No spells to rank.[/dim]")
        return

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Spell", style="white")
    table.add_column("Lvl", justify="center")
    table.add_column("Damage", style="cyan")
    table.add_column("Chance", justify="right")
    table.add_column("Targets", justify="right")
    table.add_column("Total", justify="right", style="bold")
    table.add_column("Per Slot", justify="right")
    table.add_column("Rating")

    for index, analysis in enumerate(analyses, start=1):
        damage = analysis.damage
        if not damage.has_damage:
            table.add_row(str(index), analysis.spell.name, str(analysis.spell.level), "-", "", "", "", "", "")
            continue

        efficiency = analysis.efficiency
        rating = efficiency.slot_efficiency.rating if efficiency else ""
        color = RATING_COLORS.get(rating, "white")
        table.add_row(
            str(index),
            analysis.spell.name,
            str(analysis.spell.level),
            damage.base_damage or "",
            f"{damage.hit_chance}%",
            str(damage.targets),
            f"{damage.total_expected_damage}",
            f"{efficiency.damage_per_slot_level}" if efficiency else "",
            f"[{color}]{rating}[/{color}]",
        )

    console.print(table)


def display_breakpoint_table(table_data: BreakpointTable, title: str, modified_label: str) -> None:
    """Display an AC sweep, highlighting rows where the option wins."""
    table = Table(title=f"{title} (breakpoint AC {table_data.breakpoint})", box=box.SIMPLE)
    table.add_column("AC", justify="right")
    table.add_column("Normal", justify="right")
    table.add_column(modified_label, justify="right")
    table.add_column("Diff", justify="right")
    table.add_column("Use?", justify="center")

    for row in table_data.rows:
        style = "green" if row.recommended else "dim"
        table.add_row(
            str(row.ac),
            f"{row.baseline_dpr:.2f}",
            f"{row.modified_dpr:.2f}",
            f"{row.difference:+.2f}",
            "yes" if row.recommended else "no",
            style=style,
        )

    console.print(table)


def display_breakpoint_report(report: BreakpointReport) -> None:
    """Display every section of a breakpoint report."""
    character = report.character
    console.print()
    console.print(
        Panel(
            f"[bold cyan]{character.name}[/bold cyan] - Level {character.level} "
            f"{character.class_name or ''}",
            style="cyan",
        )
    )

    for feat, power in report.power_attack.items():
        display_breakpoint_table(power.normal, feat, feat)
        display_breakpoint_table(power.with_advantage, f"{feat} with advantage", feat)

    if report.reckless_attack:
        display_breakpoint_table(report.reckless_attack, "Reckless Attack", "Reckless")

    if report.stunning_strike:
        table = Table(title="Stunning Strike", box=box.ROUNDED)
        table.add_column("Target CON")
        table.add_column("DC", justify="right")
        table.add_column("Fail %", justify="right")
        table.add_column("Use?", justify="center")
        table.add_column("Reasoning")
        for label, result in (
            ("Bad", report.stunning_strike.vs_bad_con),
            ("Average", report.stunning_strike.vs_average_con),
            ("Good", report.stunning_strike.vs_good_con),
        ):
            table.add_row(
                label,
                str(result.dc),
                f"{result.fail_probability}%",
                "yes" if result.recommend_use else "no",
                result.reasoning,
            )
        console.print(table)

    if report.divine_smite:
        for smite in (report.divine_smite.on_crit, report.divine_smite.on_hit):
            table = Table(
                title=f"Divine Smite ({'crit' if smite.is_crit else 'hit'})",
                caption=smite.general_advice,
                box=box.ROUNDED,
            )
            table.add_column("Slot", justify="center")
            table.add_column("Damage", justify="right")
            table.add_column("Kill?", justify="center")
            table.add_column("Advice")
            for option in smite.recommendations:
                table.add_row(
                    str(option.slot_level),
                    f"{option.expected_damage:g}",
                    "yes" if option.can_kill else "",
                    option.recommendation,
                )
            console.print(table)

    if report.spell_pacing:
        pacing = report.spell_pacing
        console.print(
            f"[bold]Spell pacing:[/bold] {pacing.total_slots} slots over "
            f"{pacing.expected_encounters} encounters ({pacing.slots_per_encounter} each)"
        )
        for line in pacing.recommendations:
            console.print(f"  - {line}")

    if report.recommendations:
        console.print()
        console.print("[underline]Recommendations[/underline]")
        for line in report.recommendations:
            console.print(f"  - {line}")


def display_cheat_sheet(sheet: CheatSheet) -> None:
    """Display a cheat sheet as stacked panels."""
    for section in sheet.sections:
        if section.type == "header":
            console.print(Panel(f"[bold]{section.content}[/bold]", style="cyan"))
            continue

        lines = list(section.items)
        for rule in section.rules:
            color = PRIORITY_COLORS.get(rule.get("priority", ""), "white")
            lines.append(f"[{color}]{rule['condition']}[/{color}]: {rule['action']}")
        lines.extend(f"[dim]{modifier}[/dim]" for modifier in section.modifiers)
        lines.extend(f"- {note}" for note in section.notes)

        console.print(Panel("\n".join(lines), title=section.title, border_style="dim"))
