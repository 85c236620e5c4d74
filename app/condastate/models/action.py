"""Action models for package operations.

This module defines data structures for representing conda package
actions (install, update, remove) and their execution results.
"""

from dataclasses import dataclass
from enum import Enum


class ActionType(Enum):
    """Type of package management action.

    Attributes:
        INSTALL: Install a package that is not currently installed.
        UPDATE: Bring an installed package to the desired version.
        REMOVE: Remove an installed package.
    """

    INSTALL = "install"
    UPDATE = "update"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class Action:
    """Represents a single conda action to be executed.

    Attributes:
        action_type: The type of action.
        package: Bare package name to operate on.
        environment: Target environment, None for the global scope.
        version: Exact version requested, if any.
        channel: Channel override, if any.
        reason: Optional explanation for why this action is being taken.
    """

    action_type: ActionType
    package: str
    environment: str | None = None
    version: str | None = None
    channel: str | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        """Validate action data after initialization."""
        if not self.package:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def is_install(self) -> bool:
        """Check if this is an install action."""
        return self.action_type == ActionType.INSTALL

    @property
    def is_update(self) -> bool:
        """Check if this is an update action."""
        return self.action_type == ActionType.UPDATE

    @property
    def is_remove(self) -> bool:
        """Check if this is a remove action."""
        return self.action_type == ActionType.REMOVE

    @property
    def spec(self) -> str:
        """Return the package spec handed to conda (``name`` or ``name==version``)."""
        if self.version:
            return f"{self.package}=={self.version}"
        return self.package

    @property
    def target(self) -> str:
        """Return the qualified name of the package this action touches."""
        if self.environment:
            return f"{self.environment}::{self.package}"
        return self.package


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of executing a conda action.

    Attributes:
        action: The action that was executed.
        success: Whether the action completed successfully.
        message: Optional success message or additional information.
    """

    action: Action
    success: bool
    message: str | None = None
