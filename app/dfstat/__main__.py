"""Allow running dfstat as ``python -m dfstat``."""

from dfstat.cli.main import app

app()
