"""Fixtures for CLI tests.

Every CLI test runs against an in-memory conda: one global package, two
environments and a small search index.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from unittest.mock import MagicMock, patch

import pytest
from condastate.core.config import CondaConfig
from condastate.utils.shell import CommandResult


@dataclass
class CondaMachine:
    """Answers conda and envs-directory listings from fixed data."""

    global_packages: list[str] = field(default_factory=lambda: ["NumPy-1.2-py27_0"])
    environments: dict[str, list[str]] = field(
        default_factory=lambda: {
            "ml": ["scipy-1.11.4-py27_0"],
            "web": ["flask-3.0.2-py27_0"],
        }
    )
    search: list[str] = field(
        default_factory=lambda: ["foo-1.0.0-py27_0", "foo-1.1.0-py38_0", "foo-0.9.0-py27_1"]
    )
    run: MagicMock = field(default_factory=MagicMock)

    def stream(self, args: list[str]) -> Iterator[str]:
        if args[0] == "ls":
            return iter(list(self.environments))
        if args[1] == "search":
            return iter(self.search)
        if "-n" in args:
            return iter(self.environments[args[args.index("-n") + 1]])
        return iter(self.global_packages)


@pytest.fixture
def machine(conda_config: CondaConfig) -> Iterator[CondaMachine]:
    """Patch configuration loading and every conda call."""
    fake = CondaMachine()
    fake.run.return_value = CommandResult(stdout="", stderr="", returncode=0)
    with (
        patch("condastate.cli.types.load_config", return_value=conda_config),
        patch("condastate.scanners.conda.command_exists", return_value=True),
        patch("condastate.scanners.conda.stream_command", side_effect=fake.stream),
        patch("condastate.scanners.environments.stream_command", side_effect=fake.stream),
        patch("condastate.operators.conda.stream_command", side_effect=fake.stream),
        patch("condastate.operators.conda.run_checked", fake.run),
    ):
        yield fake
