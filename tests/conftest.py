"""Shared fixtures: a small site tree with YAML data files."""

import logging
from pathlib import Path

import pytest

from chipsite.config import SiteConfig, configure, reset_config

SPECS_YAML = """\
groups:
  - name: Core
    fields:
      - key: cores
        label: Cores
      - key: ghz
        label: Clock
  - name: Memory
    fields:
      - key: ram
        label: RAM
      - key: ecc
        label: ECC
  - name: Media
    fields:
      - key: codec
        label: Codec
"""

CHIPS_M_YAML = """\
- id: m1
  name: M1
  specs:
    ghz: 3.2
    cores: 8
    ram: 16
- id: m2
  name: M2
  specs:
    ghz: 3.5
    ecc: false
"""

CHIPS_A_YAML = """\
- id: a17
  name: A17
  specs:
    cores: 6
    codec: ""
- id: a18
  name: A18
"""

SERIES_YAML = """\
- id: m
  name: M series
- id: a
  name: A series
"""

DEVICES_YAML = """\
- id: macbook-air
  chips: [m1, m2]
"""


def write_site(root: Path, files: dict[str, str]) -> Path:
    data_dir = root / "src" / "_data"
    data_dir.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (data_dir / name).write_text(content, encoding="utf-8")
    return data_dir


@pytest.fixture(autouse=True)
def _restore_log_levels():
    """CLI runs raise the chipsite logger level; undo that between tests."""
    yield
    logging.getLogger("chipsite").setLevel(logging.NOTSET)


@pytest.fixture
def site_root(tmp_path):
    """A site root holding every data file the catalogue reads."""
    write_site(
        tmp_path,
        {
            "specs.yml": SPECS_YAML,
            "chips-m.yml": CHIPS_M_YAML,
            "chips-a.yml": CHIPS_A_YAML,
            "series.yml": SERIES_YAML,
            "devices.yml": DEVICES_YAML,
        },
    )
    return tmp_path


@pytest.fixture
def site_config(site_root):
    """Global config pointed at ``site_root``; reset afterwards."""
    config = SiteConfig(root=site_root)
    configure(config)
    yield config
    reset_config()
