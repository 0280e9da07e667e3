"""CLI package for dfstat.

This package contains the Typer application.
"""

from dfstat.cli.main import app

__all__ = ["app"]
