"""CLI package for scrub.

This package contains the Typer application and its result display.
"""

from scrub.cli.main import app, run

__all__ = ["app", "run"]
