"""Collections command: build every collection and report its size."""

import typer

from ...config import get_config
from ...site import configure_site
from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output


@app.command("collections")
def collections_command():
    """Build the site's collections and show how many items each holds.

    Examples:
        chipsite collections
        chipsite --json collections
    """
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    if not config.data_dir.is_dir():
        out.error(
            f"Data directory not found: {config.data_dir}",
            suggestion="Run from the site root or set CHIPSITE_ROOT",
            exit_code=ExitCode.FILE_NOT_FOUND,
        )
        raise typer.Exit(out.finish())

    registry = configure_site(config=config)
    built = registry.build_collections()

    out.table(
        "Collections",
        ["Name", "Items"],
        [[name, str(len(items))] for name, items in built.items()],
    )
    raise typer.Exit(out.finish())
