"""Main CLI application for the DPR calculator."""

import logging

import typer
from rich.logging import RichHandler

from dprcalc.cli.commands import character, dice, spells
from dprcalc.cli.display import console
from dprcalc.config import get_settings

# Create main app
app = typer.Typer(
    name="dprcalc",
    help="Expected damage-per-round calculator for D&D 5e spells and attacks",
    add_completion=True,
)

# Add sub-commands
app.add_typer(dice.app, name="dice")
app.add_typer(spells.app, name="spells")
app.add_typer(character.app, name="character")


def configure_logging(level: str) -> None:
    """Send library log records through a rich handler."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """DPR Calculator - expected damage for spells, attacks and class features.

    Use 'dprcalc spells analyze spells.yaml' to rate a spell list.
    """
    settings = get_settings()
    configure_logging("DEBUG" if debug else settings.effective_log_level)


if __name__ == "__main__":
    app()
