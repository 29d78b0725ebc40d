"""Chips command: resolve chip ids the way templates do."""

import typer

from ...config import get_config
from ...site import CHIPS_COLLECTION, configure_site
from ..app import app, console, get_json_mode
from ..utils import Output


@app.command("chips")
def chips_command(
    ids: list[str] = typer.Argument(..., help="Chip ids, in the order to show them"),
):
    """Look up chips by id, in request order.

    Ids are matched by their text, so numeric ids in the data files work too.

    Examples:
        chipsite chips m1 m2
        chipsite --json chips a17
    """
    out = Output(console=console, json_mode=get_json_mode())
    registry = configure_site(config=get_config())
    collections = registry.build_collections()

    # Command-line ids are text; map them back to the ids as written in YAML
    by_text = {
        str(chip.get("id")): chip.get("id")
        for chip in collections.get(CHIPS_COLLECTION, [])
    }
    requested = [by_text.get(chip_id, chip_id) for chip_id in ids]

    found = registry.globals["getChips"](requested, collections)
    known = {str(chip.get("id")) for chip in found}
    for chip_id in ids:
        if chip_id not in known:
            out.warning(f"No chip with id {chip_id!r}")

    out.table(
        "Chips",
        ["Id", "Name", "Spec groups"],
        [
            [
                str(chip.get("id")),
                str(chip.get("name", "")),
                str(len(chip.get("groupedSpecs", []))),
            ]
            for chip in found
        ],
    )
    out.set_data(
        "groupedSpecs", {str(c.get("id")): c.get("groupedSpecs") for c in found}
    )
    raise typer.Exit(out.finish())
