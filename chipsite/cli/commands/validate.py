"""Validate command for the site's data files."""

from collections import Counter
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.markup import escape

from ...config import SiteConfig, get_config
from ...core.models import SpecGroupDefinition
from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output


def _read_data_file(path: Path, out: Output):
    """Parse one data file, reporting problems on ``out``. Returns None on failure."""
    if not path.exists():
        out.error(
            f"Missing data file: {path.name}",
            file=str(path),
            exit_code=ExitCode.FILE_NOT_FOUND,
        )
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        out.error(
            f"Malformed YAML in {path.name}: {escape(str(exc))}", file=str(path)
        )
        return None
    return [] if data is None else data


def _check_sequence(path: Path, out: Output) -> list | None:
    data = _read_data_file(path, out)
    if data is None:
        return None
    if not isinstance(data, list):
        out.error(
            f"{path.name} must be a list of records, got {type(data).__name__}",
            file=str(path),
        )
        return None
    return data


def _check_specs(path: Path, out: Output) -> None:
    data = _read_data_file(path, out)
    if data is None:
        return
    try:
        definition = SpecGroupDefinition.from_data(data)
    except ValidationError as exc:
        out.error(
            f"Invalid spec groups in {path.name}: {escape(str(exc))}", file=str(path)
        )
        return
    if not definition.groups:
        out.warning(
            f"{path.name} defines no spec groups",
            file=str(path),
            suggestion="Add a top-level 'groups' list",
        )


def _check_chips(config: SiteConfig, out: Output) -> int:
    ids: Counter = Counter()
    total = 0
    for filename in config.chips.sources:
        records = _check_sequence(config.data_dir / filename, out)
        if records is None:
            continue
        for index, record in enumerate(records):
            if not isinstance(record, dict) or "id" not in record:
                out.warning(f"{filename}: entry {index} has no id", file=filename)
                continue
            ids[record["id"]] += 1
        total += len(records)

    for chip_id, count in ids.items():
        if count > 1:
            out.warning(f"Chip id {chip_id!r} appears {count} times")
    return total


@app.command("validate")
def validate_command():
    """Check that every configured data file exists and parses.

    Exits with 1 on malformed files and 3 on missing ones.
    """
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    _check_specs(config.data_dir / config.chips.specs_file, out)
    chip_count = _check_chips(config, out)
    for filename in (config.data.series_file, config.data.devices_file):
        _check_sequence(config.data_dir / filename, out)

    if out.exit_code == ExitCode.SUCCESS:
        out.success(f"Data files OK ({chip_count} chips)", chips=chip_count)
    raise typer.Exit(out.finish())
