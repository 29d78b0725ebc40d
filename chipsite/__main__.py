"""Allow ``python -m chipsite``."""

from .cli import app

app()
