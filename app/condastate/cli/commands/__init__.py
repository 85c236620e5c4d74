"""CLI commands for condastate.

This package contains all subcommand implementations.
"""

from condastate.cli.commands import config, inventory, packages

__all__ = ["config", "inventory", "packages"]
