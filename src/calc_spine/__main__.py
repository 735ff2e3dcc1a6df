"""Allow ``python -m calc_spine``."""

from calc_spine.cli.app import app

app()
