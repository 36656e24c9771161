"""CLI entry point for mcal."""

from importlib.metadata import version
from pathlib import Path

import typer

from mcal.commands.admin import init_command
from mcal.commands.show import show_command

app = typer.Typer(
    name="mcal",
    help="Display a calendar month in the style of cal",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mcal {version('mcal')}")
        raise typer.Exit()


# Options are accepted with no command at all, but must come before a
# command name.
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    year: int = typer.Option(None, "-y", "--year", help="Display the specified year [default: current]"),
    month: int = typer.Option(None, "-m", "--month", help="Display the specified month [default: current]"),
    months_after: int = typer.Option(
        None, "-A", "--months-after", min=0, help="Number of months to show after the month [default: 0]"
    ),
    months_before: int = typer.Option(
        None, "-B", "--months-before", min=0, help="Number of months to show before the month [default: 0]"
    ),
    config: Path = typer.Option(None, "--config", help="Config file (default: ~/.config/mcal/config.toml)"),
    show_version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Print version information"
    ),
) -> None:
    """Display a calendar for the current or given month."""
    if ctx.invoked_subcommand is None:
        show_command(year, month, months_before, months_after, config)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    config: Path = typer.Option(None, "--config", help="Config file (default: ~/.config/mcal/config.toml)"),
) -> None:
    """Write the default mcal configuration file."""
    init_command(force, config)


if __name__ == "__main__":
    app()
