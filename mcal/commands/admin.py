"""Admin commands for setting up mcal."""

import sys
from pathlib import Path

from rich.console import Console

from mcal.config import create_default_config, get_config_path

console = Console()


def init_command(force: bool = False, config_path: Path | None = None) -> None:
    """Write the default configuration file."""
    if config_path is None:
        config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if not force and config_path.exists():
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'mcal init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Config: {config_path}[/dim]")
