"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from condastate import __version__
from condastate.cli.commands import config, inventory, packages
from condastate.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="condastate",
    help="Desired-state management for conda packages and environments.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"condastate version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to config.toml (default: ~/.config/condastate/config.toml).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show what would change without running conda install/remove.",
        ),
    ] = False,
) -> None:
    """condastate - Desired-state management for conda packages.

    Query installed packages across all environments and bring
    individual packages to a desired state.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    ctx.obj["dry_run"] = dry_run


# Register commands
app.command("list")(inventory.list_packages)
app.command("envs")(inventory.list_environments)
app.command("query")(inventory.query_package)
app.command("latest")(inventory.latest_version)
app.command("install")(packages.install_package)
app.command("update")(packages.update_package)
app.command("remove")(packages.remove_package)
app.command("ensure")(packages.ensure_package)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
