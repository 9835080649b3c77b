"""Dice notation commands."""

import typer

from dprcalc.cli.display import display_dice_summary, display_error, display_rolls
from dprcalc.dice import (
    DiceParseError,
    format_dice,
    require_dice,
    roll_dice,
    scale_spell_damage,
    summarize_dice,
)

app = typer.Typer(help="Dice notation commands")


@app.command()
def stats(
    notation: str = typer.Argument(..., help="Dice notation, e.g. 8d6 or 4d6kh3+2"),
) -> None:
    """Show average, minimum and maximum of a dice expression."""
    try:
        expression = require_dice(notation)
    except DiceParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_dice_summary(summarize_dice(notation), format_dice(expression))


@app.command()
def roll(
    notation: str = typer.Argument(..., help="Dice notation to roll"),
    times: int = typer.Option(1, "--times", "-n", min=1, help="Number of rolls"),
) -> None:
    """Roll a dice expression."""
    try:
        expression = require_dice(notation)
    except DiceParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_rolls([roll_dice(expression) for _ in range(times)])


@app.command()
def scale(
    notation: str = typer.Argument(..., help="Damage at the spell's base level"),
    base_level: int = typer.Option(..., "--base", "-b", help="Spell level"),
    cast_level: int = typer.Option(..., "--cast", "-c", help="Slot level used"),
    rule: str = typer.Option(
        ..., "--rule", "-r", help='Higher-level text, e.g. "1d6 for each slot level above 3rd"'
    ),
) -> None:
    """Scale damage for casting with a higher-level slot."""
    try:
        require_dice(notation)
    except DiceParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    scaled = scale_spell_damage(notation, base_level, cast_level, rule)
    display_dice_summary(summarize_dice(scaled), scaled)
