"""Package models for conda inventory scanning.

This module defines the record produced for every installed or
discoverable conda package.
"""

from dataclasses import dataclass, field
from typing import Any

# Separator between an environment name and a package name
ENV_DELIMITER = "::"

# Provider identifier reported in query properties
PROVIDER_NAME = "conda"


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """Represents a package parsed from conda output.

    This is an immutable data structure. When the package lives in a named
    environment, ``name`` carries the qualified identity
    ``environment::package``; packages in the global scope keep their bare
    name.

    Attributes:
        name: Externally visible identity (e.g., 'numpy', 'ml::numpy').
        version: Installed version string.
        environment: Environment the package belongs to, None for the
            global/default scope.
        build: Build tag reported by conda (e.g., 'py38_0'), if known.
    """

    name: str
    version: str
    environment: str | None = field(default=None)
    build: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if not self.version:
            msg = "Package version cannot be empty"
            raise ValueError(msg)

    @property
    def package_name(self) -> str:
        """Return the package name without its environment prefix."""
        if self.environment and self.name.startswith(f"{self.environment}{ENV_DELIMITER}"):
            return self.name[len(self.environment) + len(ENV_DELIMITER) :]
        return self.name

    @property
    def is_global(self) -> bool:
        """Check if package lives in the global/default scope."""
        return not self.environment

    def matches(self, name: str) -> bool:
        """Check whether this record answers to ``name``.

        Comparison is case-insensitive since conda is not consistent about
        capitalization between listing and user input.
        """
        return self.name.lower() == name.lower()

    @property
    def properties(self) -> dict[str, Any]:
        """Return the property mapping reported for a query."""
        return {
            "name": self.name,
            "ensure": self.version,
            "environment": self.environment,
            "build": self.build,
            "provider": PROVIDER_NAME,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "package": self.package_name,
            "version": self.version,
            "environment": self.environment,
            "build": self.build,
        }
