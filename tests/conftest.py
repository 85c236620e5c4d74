"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from condastate.core.config import CondaConfig


@pytest.fixture
def conda_config() -> CondaConfig:
    """Config pointing at a POSIX-style conda install."""
    return CondaConfig(
        conda_executable=Path("/opt/anaconda/bin/conda"),
        envs_dir=Path("/opt/anaconda/envs"),
        listing_command=["ls", "-1"],
    )


@pytest.fixture
def mock_conda_list_output() -> list[str]:
    """Sample ``conda list --canonical`` output for the global scope."""
    return [
        "# packages in environment at /opt/anaconda:",
        "#",
        "numpy-1.26.4-py311h64a7726_0",
        "my-package-1.2.0-py38_0",
        "python-3.11.8-hab00c5b_0",
        "",
    ]


@pytest.fixture
def mock_env_list_output() -> list[str]:
    """Sample ``conda list --canonical -n ml`` output."""
    return [
        "# packages in environment at /opt/anaconda/envs/ml:",
        "NumPy-1.24.0-py310_0",
        "scikit-learn-1.4.1-py310h1128e8f_0",
    ]


@pytest.fixture
def mock_search_output() -> list[str]:
    """Sample ``conda search --canonical`` output."""
    return [
        "Loading channels: done",
        "foo-1.0.0-py27_0",
        "foo-1.1.0-py38_0",
        "foo-0.9.0-py27_1",
    ]
