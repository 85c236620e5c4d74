"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

import subprocess
from enum import Enum
from pathlib import Path

import typer

from condastate.core.config import CondaConfig, ConfigError, load_config
from condastate.core.provider import CondaError, CondaProvider
from condastate.utils.formatting import print_error
from condastate.utils.shell import CommandError

# Errors a provider call may raise that are reported to the user
PROVIDER_ERRORS: tuple[type[Exception], ...] = (
    CondaError,
    CommandError,
    subprocess.TimeoutExpired,
    OSError,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_config(ctx: typer.Context) -> CondaConfig:
    """Load the configuration selected by the global ``--config`` option.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    obj = ctx.ensure_object(dict)
    config_path: Path | None = obj.get("config_path")
    try:
        return load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_provider(ctx: typer.Context) -> CondaProvider:
    """Create a provider honouring the global ``--config`` and ``--dry-run`` options.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    obj = ctx.ensure_object(dict)
    return CondaProvider(get_config(ctx), dry_run=bool(obj.get("dry_run", False)))
