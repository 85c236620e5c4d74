"""Inventory commands.

Read-only commands that report installed packages, environments and
available versions.
"""

import json
from typing import Annotated

import typer

from condastate.cli.types import PROVIDER_ERRORS, OutputFormat, get_provider
from condastate.models.desired import DesiredState
from condastate.models.inventory import Inventory
from condastate.utils.formatting import (
    console,
    create_package_table,
    format_package_row,
    print_error,
    print_info,
    print_warning,
)


def list_packages(
    ctx: typer.Context,
    environment: Annotated[
        str | None,
        typer.Option(
            "--env",
            "-n",
            help="Only list packages of this environment.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List installed conda packages.

    Without --env, the global scope is listed first, followed by every
    environment in the environments directory.

    Examples:
        condastate list                 # All scopes
        condastate list --env ml        # Only the 'ml' environment
        condastate list --format json   # Output as JSON
    """
    provider = get_provider(ctx)
    if not provider.scanner.is_available():
        print_warning(f"conda executable not found: {provider.config.conda}")

    try:
        if environment:
            inventory = Inventory.from_records(provider.scanner.scan(environment))
        else:
            inventory = provider.scanner.inventory()
    except PROVIDER_ERRORS as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(inventory.to_dict()))
        return

    title = f"Conda Packages ({environment})" if environment else "Conda Packages"
    table = create_package_table(title)
    for pkg in inventory:
        table.add_row(*format_package_row(pkg))
    console.print(table)

    environments = inventory.environments()
    console.print(f"\n[dim]{len(inventory)} packages across {len(environments)} environment(s)[/]")


def list_environments(ctx: typer.Context) -> None:
    """List named conda environments."""
    provider = get_provider(ctx)
    try:
        environments = list(provider.scanner.environments.scan())
    except PROVIDER_ERRORS as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not environments:
        print_info("No named environments found.")
        return

    for name in environments:
        console.print(f"[env]{name}[/]")


def query_package(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Package name, optionally 'env::package'.")],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the installed state of a package (case-insensitive)."""
    provider = get_provider(ctx)
    try:
        properties = provider.query(name)
    except PROVIDER_ERRORS as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(properties))
        return

    if properties is None:
        print_info(f"{name} is not installed.")
        return

    for key, value in properties.items():
        console.print(f"[muted]{key}:[/] {value if value is not None else '-'}")


def latest_version(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Package name, optionally 'env::package'.")],
    channel: Annotated[
        str | None,
        typer.Option(
            "--channel",
            "-c",
            help="Search this channel.",
        ),
    ] = None,
) -> None:
    """Show the newest version conda can find for a package."""
    provider = get_provider(ctx)
    try:
        version = provider.latest(DesiredState(name=name, source=channel))
    except PROVIDER_ERRORS as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if version is None:
        print_info(f"No version of {name} found.")
        return

    console.print(version)
