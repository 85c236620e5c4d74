"""Configuration commands.

Show the effective configuration or write the platform defaults to the
config file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from condastate.cli.types import get_config
from condastate.core.config import (
    ConfigError,
    config_to_dict,
    detect_platform_config,
    get_config_path,
    save_config,
)
from condastate.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the condastate configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as TOML."""
    config = get_config(ctx)
    console.print(tomli_w.dumps(config_to_dict(config)), markup=False, highlight=False)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write the platform defaults to the config file."""
    obj = ctx.ensure_object(dict)
    config_path: Path = obj.get("config_path") or get_config_path()

    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(detect_platform_config(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
