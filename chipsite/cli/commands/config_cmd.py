"""Config command for viewing chipsite configuration."""

import json
from pathlib import Path

import typer

from ...config import CONFIG_FILE_NAME, get_config
from ..app import app, console, get_json_mode


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show",
    ),
):
    """View the resolved chipsite configuration.

    Examples:
        chipsite config show
    """
    if action == "show":
        _show_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    if get_json_mode():
        print(json.dumps(config.to_dict(), indent=2))
        return

    console.print()
    console.print("[bold]chipsite Configuration[/bold]")
    console.print("─" * 40)
    console.print(f"root = {config.root}")

    console.print()
    console.print("[bold cyan]Directories[/bold cyan] (fixed)")
    console.print(f"  input    = {config.dirs.input}")
    console.print(f"  includes = {config.dirs.includes}")
    console.print(f"  layouts  = {config.dirs.layouts}")
    console.print(f"  data     = {config.dirs.data}")
    console.print(f"  output   = {config.dirs.output}")
    console.print(f"  [dim]data dir   -> {config.data_dir}[/dim]")
    console.print(f"  [dim]output dir -> {config.output_dir}[/dim]")

    console.print()
    console.print("[bold cyan]Chips[/bold cyan]")
    sources = ", ".join(config.chips.sources) or "[dim](none)[/dim]"
    console.print(f"  sources    = {sources}")
    console.print(f"  specs_file = {config.chips.specs_file}")

    console.print()
    console.print("[bold cyan]Data[/bold cyan]")
    console.print(f"  series_file  = {config.data.series_file}")
    console.print(f"  devices_file = {config.data.devices_file}")

    console.print()
    console.print("[bold cyan]Debug[/bold cyan]")
    console.print(f"  trace_lookups = {config.debug.trace_lookups}")

    console.print()
    config_file = Path.cwd() / CONFIG_FILE_NAME
    if config_file.exists():
        console.print(f"Config file: {config_file}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({config_file})")
    console.print()
