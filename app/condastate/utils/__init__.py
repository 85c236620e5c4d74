"""Utility modules for condastate.

This module exports commonly used utility functions.
"""

from condastate.utils.formatting import (
    console,
    create_package_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from condastate.utils.shell import CommandError, CommandResult, command_exists, run_command

__all__ = [
    "CommandError",
    "CommandResult",
    "command_exists",
    "console",
    "create_package_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
