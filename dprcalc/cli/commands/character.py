"""Character breakpoint commands."""

import json
from pathlib import Path

import typer

from dprcalc.breakpoints import calculate_breakpoints, generate_cheat_sheet
from dprcalc.cli.display import (
    display_breakpoint_report,
    display_cheat_sheet,
    display_error,
)
from dprcalc.services import FactLoadError, load_character

app = typer.Typer(help="Character breakpoint commands")


@app.command()
def breakpoints(
    file: Path = typer.Argument(..., help="Character file (.yaml or .json)"),
    cheatsheet: bool = typer.Option(
        False, "--cheatsheet", help="Print table-side decision rules instead"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Find when feats and class features are worth using."""
    try:
        record = load_character(file)
    except FactLoadError as e:
        display_error(str(e))
        raise typer.Exit(1)

    report = calculate_breakpoints(record)
    output = generate_cheat_sheet(record, report) if cheatsheet else report

    if as_json:
        typer.echo(json.dumps(output.model_dump(mode="json"), indent=2))
    elif cheatsheet:
        display_cheat_sheet(output)
    else:
        display_breakpoint_report(output)
