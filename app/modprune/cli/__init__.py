"""CLI package for modprune.

This package contains the Typer application.
"""

from modprune.cli.main import app

__all__ = ["app"]
