"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from condastate.models.action import Action
    from condastate.models.package import PackageRecord

# Style names used in markup throughout the CLI
THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "added": "#c1ff62",
        "removed": "#f53263",
        "changed": "#0e8ac8",
        "env": "#69B9A1",
    }
)


def _detect_color_system() -> str | None:
    """Return "truecolor" for interactive terminals, None to let Rich decide."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_package_table(title: str = "Installed Conda Packages") -> Table:
    """Create a pre-configured table for displaying package records.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for package display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Environment", style="env", no_wrap=True)
    table.add_column("Package", no_wrap=True)
    table.add_column("Version", style="muted")
    table.add_column("Build", style="info")
    return table


def format_package_row(pkg: PackageRecord) -> tuple[str, str, str, str]:
    """Format a package record as a table row.

    Returns:
        Tuple of (environment, package, version, build) with Rich markup.
    """
    env = "[muted](global)[/]" if pkg.is_global else str(pkg.environment)
    return (env, f"[text]{pkg.package_name}[/]", pkg.version, pkg.build or "-")


def create_actions_table(actions: list[Action], dry_run: bool = False) -> Table:
    """Create a Rich table displaying planned actions.

    Args:
        actions: List of actions to display.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for action display.
    """
    title = "Planned Actions (Dry Run)" if dry_run else "Planned Actions"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Action", width=8, justify="center")
    table.add_column("Package", no_wrap=True)
    table.add_column("Reason")

    for action in actions:
        if action.is_install:
            action_text = "[added]+install[/added]"
        elif action.is_update:
            action_text = "[changed]~update[/changed]"
        else:
            action_text = "[removed]-remove[/removed]"

        package = action.target
        if action.version and not action.is_remove:
            package = f"{package}=={action.version}"

        table.add_row(action_text, package, f"[muted]{action.reason or ''}[/muted]")

    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")
