"""Unit tests for conda configuration."""

from pathlib import Path

import pytest
from condastate.core.config import (
    DEFAULT_PYTHON_TAG,
    CondaConfig,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    detect_platform_config,
    get_config_path,
    load_config,
    save_config,
)
from pydantic import ValidationError


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user config and overrides out of the tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("CONDASTATE_CONDA", raising=False)
    monkeypatch.delenv("CONDASTATE_ENVS_DIR", raising=False)
    monkeypatch.delenv("OS", raising=False)


class TestDetectPlatformConfig:
    """Tests for the platform switch."""

    def test_posix_defaults(self) -> None:
        """POSIX layout uses /opt/anaconda and ls -1."""
        config = detect_platform_config(windows=False)

        assert config.conda_executable == Path("/opt/anaconda/bin/conda")
        assert config.envs_dir == Path("/opt/anaconda/envs")
        assert config.listing_command == ["ls", "-1"]
        assert config.python_tag == DEFAULT_PYTHON_TAG

    def test_windows_defaults(self) -> None:
        """Windows layout uses C:\\Anaconda and dir /b."""
        config = detect_platform_config(windows=True)

        assert config.conda == "C:\\Anaconda\\Scripts\\conda.exe"
        assert str(config.envs_dir) == "C:\\Anaconda\\envs"
        assert config.listing_command == ["cmd", "/c", "dir", "/b"]

    def test_windows_detected_from_os_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """OS=Windows_NT selects the Windows layout."""
        monkeypatch.setenv("OS", "Windows_NT")

        assert detect_platform_config().listing_command[0] == "cmd"


class TestCondaConfig:
    """Tests for CondaConfig validation."""

    def test_env_listing_args(self, conda_config: CondaConfig) -> None:
        """The environments directory is appended to the listing command."""
        assert conda_config.env_listing_args() == ["ls", "-1", "/opt/anaconda/envs"]

    def test_rejects_unknown_keys(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            CondaConfig(
                conda_executable=Path("conda"),
                envs_dir=Path("envs"),
                listing_command=["ls"],
                colour="blue",  # type: ignore[call-arg]
            )

    def test_rejects_empty_listing_command(self) -> None:
        """The listing command needs at least one word."""
        with pytest.raises(ValidationError):
            CondaConfig(conda_executable=Path("conda"), envs_dir=Path("envs"), listing_command=[])

    def test_rejects_blank_listing_argument(self) -> None:
        """Blank listing arguments are rejected."""
        with pytest.raises(ValidationError):
            CondaConfig(
                conda_executable=Path("conda"),
                envs_dir=Path("envs"),
                listing_command=["ls", " "],
            )

    def test_timeout_range(self) -> None:
        """timeout_seconds must be positive."""
        with pytest.raises(ValidationError):
            CondaConfig(
                conda_executable=Path("conda"),
                envs_dir=Path("envs"),
                listing_command=["ls"],
                timeout_seconds=0,
            )


class TestLoadConfig:
    """Tests for load_config and save_config."""

    def test_missing_default_file_uses_platform_defaults(self) -> None:
        """No config file means platform defaults."""
        config = load_config()

        assert config == detect_platform_config()

    def test_missing_explicit_file_is_error(self, tmp_path: Path) -> None:
        """An explicit path that does not exist raises."""
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_partial_file_overrides_defaults(self, tmp_path: Path) -> None:
        """Keys in the file replace defaults; others are kept."""
        path = tmp_path / "config.toml"
        path.write_text('conda_executable = "/usr/local/conda/bin/conda"\npython_tag = "py311"\n')

        config = load_config(path)

        assert config.conda_executable == Path("/usr/local/conda/bin/conda")
        assert config.python_tag == "py311"
        assert config.envs_dir == detect_platform_config().envs_dir

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("conda_executable = ")

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text("timeout_seconds = -5\n")

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """CONDASTATE_* variables override file and defaults."""
        monkeypatch.setenv("CONDASTATE_CONDA", "/srv/conda/bin/conda")
        monkeypatch.setenv("CONDASTATE_ENVS_DIR", "/srv/conda/envs")

        config = load_config()

        assert config.conda_executable == Path("/srv/conda/bin/conda")
        assert config.envs_dir == Path("/srv/conda/envs")

    def test_save_and_load(self, tmp_path: Path, conda_config: CondaConfig) -> None:
        """A saved config loads back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        updated = conda_config.model_copy(update={"timeout_seconds": 900})

        saved = save_config(updated, path)

        assert saved == path
        assert load_config(path) == updated


class TestGetConfigPath:
    """Tests for the default config location."""

    def test_xdg_config_home(self, tmp_path: Path) -> None:
        """XDG_CONFIG_HOME is honoured."""
        assert get_config_path() == tmp_path / "xdg" / "condastate" / "config.toml"

    def test_home_fallback(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Without XDG_CONFIG_HOME the file lives under ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_config_path() == tmp_path / ".config" / "condastate" / "config.toml"
