"""Show command for printing one or more calendar months."""

import sys
import tomllib
from pathlib import Path

import typer
from rich.console import Console

from mcal.config import get_range_defaults, load_config
from mcal.dates import current_month
from mcal.domain.errors import MonthBoundaryError
from mcal.domain.layout import validate
from mcal.domain.models import Month
from mcal.domain.render import render_months
from mcal.domain.sequence import months_around

# sysexits.h EX_USAGE, as the traditional cal uses for bad arguments
EXIT_USAGE = 64

err_console = Console(stderr=True)


def resolve_range(
    months_before: int | None,
    months_after: int | None,
    config_path: Path | None = None,
) -> tuple[int, int]:
    """Fill in range counts not given on the command line from config.

    Args:
        months_before: Count from the command line, or None.
        months_after: Count from the command line, or None.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Tuple of (months_before, months_after).
    """
    if months_before is not None and months_after is not None:
        return months_before, months_after

    try:
        default_before, default_after = get_range_defaults(load_config(config_path))
    except tomllib.TOMLDecodeError as e:
        err_console.print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        err_console.print(f"[red]Invalid config value: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        err_console.print(f"[red]Could not read config: {e}[/red]", style="bold")
        sys.exit(1)

    if months_before is None:
        months_before = default_before
    if months_after is None:
        months_after = default_after
    return months_before, months_after


def resolve_anchor(year: int | None, month: int | None) -> Month:
    """Validate the requested month, defaulting missing parts to today.

    Exits with EXIT_USAGE on an invalid year or month.
    """
    now = current_month()
    anchor, error = validate(
        year if year is not None else now.year,
        month if month is not None else now.month_number,
    )
    if error is not None:
        err_console.print(f"[red]mcal: {error}[/red]")
        sys.exit(EXIT_USAGE)

    assert anchor is not None
    return anchor


def show_command(
    year: int | None = None,
    month: int | None = None,
    months_before: int | None = None,
    months_after: int | None = None,
    config_path: Path | None = None,
) -> None:
    """Print the requested month and its neighbours."""
    months_before, months_after = resolve_range(months_before, months_after, config_path)
    anchor = resolve_anchor(year, month)

    try:
        months = months_around(anchor, months_before, months_after)
    except MonthBoundaryError as e:
        err_console.print(f"[red]mcal: {e}[/red]")
        sys.exit(EXIT_USAGE)

    # Plain echo: the block is fixed-width text and must not be reflowed
    typer.echo(render_months(months))
