"""CLI package for condastate.

This package contains the Typer application and all subcommands.
"""

from condastate.cli.main import app

__all__ = ["app"]
