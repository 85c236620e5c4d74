"""Conda provider configuration.

This module provides the configuration model handed to scanners and
operators, the platform switch that supplies its defaults, and TOML I/O.

Configuration is stored in ~/.config/condastate/config.toml. Every key is
optional; missing keys fall back to the platform defaults:

- Windows: C:\\Anaconda\\Scripts\\conda.exe, C:\\Anaconda\\envs, ``dir /b``
- Others: /opt/anaconda/bin/conda, /opt/anaconda/envs, ``ls -1``
"""

import logging
import os
import tomllib
from pathlib import Path, PureWindowsPath
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

APP_NAME = "condastate"

# Environment variables overriding file configuration
ENV_CONDA_EXECUTABLE = "CONDASTATE_CONDA"
ENV_ENVS_DIR = "CONDASTATE_ENVS_DIR"

# Interpreter build tag used to pick one build per version in searches
DEFAULT_PYTHON_TAG = "py27"

_POSIX_INSTALL_PATH = "/opt/anaconda"
_WINDOWS_INSTALL_PATH = "C:\\Anaconda"


class CondaConfig(BaseModel):
    """Resolved locations and options for driving conda.

    Attributes:
        conda_executable: Path to the conda executable.
        envs_dir: Directory holding one subdirectory per named environment.
        listing_command: Command that lists ``envs_dir`` one name per line;
            the directory is appended as the last argument.
        python_tag: Build tag substring used to filter search results.
        timeout_seconds: Timeout for install/remove commands (None = wait).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    conda_executable: Annotated[
        Path,
        Field(description="Path to the conda executable"),
    ]
    envs_dir: Annotated[
        Path,
        Field(description="Directory containing named environments"),
    ]
    listing_command: Annotated[
        list[str],
        Field(min_length=1, description="Line-oriented directory listing command"),
    ]
    python_tag: Annotated[
        str,
        Field(min_length=1, description="Build tag filter for version searches"),
    ] = DEFAULT_PYTHON_TAG
    timeout_seconds: Annotated[
        int | None,
        Field(ge=1, le=86400, description="Timeout for mutating commands (1-86400)"),
    ] = None

    @field_validator("listing_command")
    @classmethod
    def validate_listing_command(cls, v: list[str]) -> list[str]:
        """Reject blank command words."""
        if any(not part.strip() for part in v):
            msg = "listing_command must not contain empty arguments"
            raise ValueError(msg)
        return v

    @property
    def conda(self) -> str:
        """Return the conda executable as a command argument."""
        return str(self.conda_executable)

    def env_listing_args(self) -> list[str]:
        """Return the full command line listing the environments directory."""
        return [*self.listing_command, str(self.envs_dir)]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to $XDG_CONFIG_HOME/condastate/config.toml, falling back to
        ~/.config when XDG_CONFIG_HOME is unset.
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME / "config.toml"


def is_windows() -> bool:
    """Check whether we are running on Windows."""
    return os.environ.get("OS") == "Windows_NT" or os.name == "nt"


def detect_platform_config(windows: bool | None = None) -> CondaConfig:
    """Build the default configuration for the current platform.

    Args:
        windows: Force the Windows (True) or POSIX (False) layout. If None,
            the running platform is detected.

    Returns:
        CondaConfig with the platform's default install locations.
    """
    if windows is None:
        windows = is_windows()

    if windows:
        root = PureWindowsPath(_WINDOWS_INSTALL_PATH)
        return CondaConfig(
            conda_executable=Path(str(root / "Scripts" / "conda.exe")),
            envs_dir=Path(str(root / "envs")),
            listing_command=["cmd", "/c", "dir", "/b"],
        )

    root_path = Path(_POSIX_INSTALL_PATH)
    return CondaConfig(
        conda_executable=root_path / "bin" / "conda",
        envs_dir=root_path / "envs",
        listing_command=["ls", "-1"],
    )


def _apply_env_overrides(data: dict[str, object]) -> dict[str, object]:
    """Overlay environment variable overrides onto raw config data."""
    conda = os.environ.get(ENV_CONDA_EXECUTABLE)
    if conda:
        logger.debug("Using conda executable from %s: %s", ENV_CONDA_EXECUTABLE, conda)
        data["conda_executable"] = conda

    envs_dir = os.environ.get(ENV_ENVS_DIR)
    if envs_dir:
        logger.debug("Using envs directory from %s: %s", ENV_ENVS_DIR, envs_dir)
        data["envs_dir"] = envs_dir

    return data


def load_config(path: Path | None = None) -> CondaConfig:
    """Load configuration from a TOML file over the platform defaults.

    A missing file at the default location is not an error: the platform
    defaults are used. A missing file that was asked for explicitly is.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CondaConfig object.

    Raises:
        ConfigNotFoundError: If an explicit config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()
    data: dict[str, object] = detect_platform_config().model_dump()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data.update(tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config {config_path}: {e}") from e
        logger.debug("Loaded config from %s", config_path)
    elif path is not None:
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        return CondaConfig.model_validate(_apply_env_overrides(data))
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def config_to_dict(config: CondaConfig) -> dict[str, object]:
    """Convert CondaConfig to a dictionary for TOML serialization.

    Only includes non-None values to keep the file clean.
    """
    result: dict[str, object] = {
        "conda_executable": str(config.conda_executable),
        "envs_dir": str(config.envs_dir),
        "listing_command": list(config.listing_command),
        "python_tag": config.python_tag,
    }
    if config.timeout_seconds is not None:
        result["timeout_seconds"] = config.timeout_seconds
    return result


def save_config(config: CondaConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The CondaConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    from tempfile import NamedTemporaryFile

    config_path = path or get_config_path()
    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
