"""Package management commands.

Commands that change installed packages: install, update, remove, and
ensure (reconcile one package with a desired state).
"""

from collections.abc import Callable
from typing import Annotated

import typer

from condastate.cli.types import PROVIDER_ERRORS, get_provider
from condastate.models.action import ActionResult
from condastate.models.desired import DesiredState, Ensure
from condastate.models.target import QualifiedTarget
from condastate.utils.formatting import (
    console,
    create_actions_table,
    print_error,
    print_info,
    print_success,
)

NameArgument = Annotated[str, typer.Argument(help="Package name, optionally 'env::package'.")]
ChannelOption = Annotated[
    str | None,
    typer.Option(
        "--channel",
        "-c",
        help="Install from this channel.",
    ),
]
VersionOption = Annotated[
    str | None,
    typer.Option(
        "--version",
        help="Exact version to install.",
    ),
]


def _require_package(name: str) -> None:
    """Exit with an error if ``name`` does not name a package."""
    if not QualifiedTarget.parse(name).package:
        print_error(f"No package name given in '{name}'")
        raise typer.Exit(code=1)


def _report(result: ActionResult) -> None:
    """Print the outcome of an executed action."""
    action = result.action
    message = result.message or "Operation completed"
    print_success(f"{action.action_type.value} {action.target}: {message}")


def _run(operation: Callable[[DesiredState], ActionResult], desired: DesiredState) -> None:
    """Run one provider operation and report it, exiting on failure."""
    try:
        result = operation(desired)
    except PROVIDER_ERRORS as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    _report(result)


def install_package(
    ctx: typer.Context,
    name: NameArgument,
    version: VersionOption = None,
    channel: ChannelOption = None,
) -> None:
    """Install a package into the global scope or an environment.

    Examples:
        condastate install numpy
        condastate install ml::numpy --version 1.26.4
        condastate install ml::pytorch --channel pytorch
    """
    _require_package(name)
    ensure = Ensure.exact(version) if version else Ensure.present()
    _run(get_provider(ctx).install, DesiredState(name=name, ensure=ensure, source=channel))


def update_package(
    ctx: typer.Context,
    name: NameArgument,
    version: VersionOption = None,
    channel: ChannelOption = None,
) -> None:
    """Update a package by re-running install with the desired version."""
    _require_package(name)
    ensure = Ensure.exact(version) if version else Ensure.latest()
    _run(get_provider(ctx).update, DesiredState(name=name, ensure=ensure, source=channel))


def remove_package(ctx: typer.Context, name: NameArgument) -> None:
    """Remove a package; removing an absent package is left to conda."""
    _require_package(name)
    _run(get_provider(ctx).uninstall, DesiredState(name=name, ensure=Ensure.absent()))


def ensure_package(
    ctx: typer.Context,
    name: NameArgument,
    state: Annotated[
        str,
        typer.Option(
            "--state",
            "-s",
            help="Desired state: present, absent, latest, or an exact version.",
        ),
    ] = "present",
    channel: ChannelOption = None,
) -> None:
    """Bring a package to the desired state if it is not already there.

    Examples:
        condastate ensure numpy                     # Installed, any version
        condastate ensure ml::numpy --state 1.26.4  # Exact version
        condastate ensure ml::scipy --state latest  # Newest version
        condastate ensure old-tool --state absent   # Not installed
    """
    _require_package(name)
    try:
        ensure = Ensure.parse(state)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    provider = get_provider(ctx)
    desired = DesiredState(name=name, ensure=ensure, source=channel)

    try:
        action = provider.plan(desired)
        if action is None:
            print_info(f"{name} is already {ensure}.")
            return
        if not action.is_remove:
            provider.check_environment(desired)

        console.print(create_actions_table([action], dry_run=provider.dry_run))
        result = provider.apply(action, desired)
    except PROVIDER_ERRORS as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    _report(result)
