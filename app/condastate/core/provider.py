"""Conda package provider.

The provider reconciles a desired package state with what conda reports.
It holds no state between calls: every operation re-runs the conda
commands it needs, so conda is the only source of truth and calls are
safe to repeat.
"""

import logging
from dataclasses import replace
from typing import Any

from condastate.core.config import CondaConfig
from condastate.core.versions import max_version, parse_version
from condastate.models.action import Action, ActionResult, ActionType
from condastate.models.desired import DesiredState, EnsureKind
from condastate.models.target import QualifiedTarget
from condastate.operators.conda import CondaOperator
from condastate.scanners.conda import CondaScanner

logger = logging.getLogger(__name__)


class CondaError(Exception):
    """Base exception for provider errors."""


class EnvironmentNotFoundError(CondaError):
    """Raised when installing into an environment that does not exist.

    Attributes:
        package: Target name as given by the user.
        version: Requested state (version string or keyword).
        environment: The missing environment.
    """

    def __init__(self, package: str, version: str, environment: str) -> None:
        self.package = package
        self.version = version
        self.environment = environment
        super().__init__(
            f"Package {package} version {version} is in an error state: "
            f"env {environment} does not exist"
        )


class CondaProvider:
    """Desired-state provider for conda packages.

    Example:
        >>> provider = CondaProvider(load_config())
        >>> state = DesiredState("ml::numpy", Ensure.exact("1.26.4"))
        >>> if not provider.is_insync(state):
        ...     provider.ensure(state)
    """

    def __init__(self, config: CondaConfig, dry_run: bool = False) -> None:
        self._config = config
        self._scanner = CondaScanner(config)
        self._operator = CondaOperator(config, dry_run=dry_run)

    @property
    def config(self) -> CondaConfig:
        return self._config

    @property
    def scanner(self) -> CondaScanner:
        return self._scanner

    @property
    def operator(self) -> CondaOperator:
        return self._operator

    @property
    def dry_run(self) -> bool:
        """Check if mutating actions are simulated."""
        return self._operator.dry_run

    def query(self, name: str) -> dict[str, Any] | None:
        """Look up the installed state of a package across all scopes.

        Args:
            name: Package name, optionally qualified as ``environment::package``.
                An empty environment (``::numpy``) means the global scope.

        Returns:
            Properties of the first case-insensitive match, or None if the
            package is not installed anywhere.
        """
        wanted = QualifiedTarget.parse(name).qualified_name
        for record in self._scanner.scan_all():
            if record.matches(wanted):
                return record.properties
        return None

    def install(self, desired: DesiredState) -> ActionResult:
        """Install the package so it satisfies ``desired``.

        Raises:
            EnvironmentNotFoundError: If the target environment is missing.
            CommandError: If conda install fails.
        """
        return self._operator.install(self._install_action(desired, ActionType.INSTALL))

    def update(self, desired: DesiredState) -> ActionResult:
        """Update the package; conda's install is idempotent, so this reinstalls.

        Raises:
            EnvironmentNotFoundError: If the target environment is missing.
            CommandError: If conda install fails.
        """
        return self._operator.install(self._install_action(desired, ActionType.UPDATE))

    def uninstall(self, desired: DesiredState) -> ActionResult:
        """Remove the package.

        Raises:
            CommandError: If conda remove fails.
        """
        target = desired.target
        action = Action(
            action_type=ActionType.REMOVE,
            package=target.package,
            environment=target.environment,
        )
        return self._operator.remove(action)

    def latest(self, desired: DesiredState) -> str | None:
        """Return the newest version conda can find for the package.

        Returns:
            Highest matching version, or None if no build for the configured
            Python tag was found.

        Raises:
            CommandError: If conda search fails.
        """
        target = desired.target
        versions = list(
            self._operator.search_versions(target.package, target.environment, desired.channel)
        )
        if not versions:
            logger.debug("No %s versions found for %s", self._config.python_tag, desired.name)
            return None
        return max_version(versions)

    def is_insync(self, desired: DesiredState) -> bool:
        """Check whether the installed state already satisfies ``desired``."""
        return self.plan(desired) is None

    def plan(self, desired: DesiredState) -> Action | None:
        """Return the action that brings the package to ``desired``, if any.

        For a LATEST state on an installed package conda is searched; the
        update pins the version found. When the search finds nothing the
        installed version is accepted.
        """
        target = desired.target
        current = self.query(target.qualified_name)
        kind = desired.ensure.kind

        if kind == EnsureKind.ABSENT:
            if current is None:
                return None
            return Action(
                action_type=ActionType.REMOVE,
                package=target.package,
                environment=target.environment,
                reason=f"installed at {current['ensure']}",
            )

        if current is None:
            return self._install_action(desired, ActionType.INSTALL, validate=False)

        installed: str = current["ensure"]
        if kind == EnsureKind.PRESENT:
            return None
        if kind == EnsureKind.VERSION:
            if installed == desired.ensure.version:
                return None
            wanted = desired.ensure.version
        else:
            newest = self.latest(desired)
            if newest is None or parse_version(installed) >= parse_version(newest):
                return None
            wanted = newest

        return replace(
            self._install_action(desired, ActionType.UPDATE, validate=False),
            version=wanted,
            reason=f"installed at {installed}, want {wanted}",
        )

    def ensure(self, desired: DesiredState) -> ActionResult | None:
        """Apply the planned action for ``desired``; None when already in sync.

        Raises:
            EnvironmentNotFoundError: If installing into a missing environment.
            CommandError: If the conda command fails.
        """
        action = self.plan(desired)
        if action is None:
            logger.debug("%s is in sync (%s)", desired.name, desired.ensure)
            return None
        return self.apply(action, desired)

    def apply(self, action: Action, desired: DesiredState) -> ActionResult:
        """Execute an action returned by plan() for ``desired``.

        Raises:
            EnvironmentNotFoundError: If installing into a missing environment.
            CommandError: If the conda command fails.
        """
        if not action.is_remove:
            self.check_environment(desired)
        return self._operator.execute(action)

    def _install_action(
        self,
        desired: DesiredState,
        action_type: ActionType,
        validate: bool = True,
    ) -> Action:
        if validate:
            self.check_environment(desired)
        target = desired.target
        return Action(
            action_type=action_type,
            package=target.package,
            environment=target.environment,
            version=desired.ensure.version if desired.ensure.is_version else None,
            channel=desired.channel,
        )

    def check_environment(self, desired: DesiredState) -> None:
        """Verify that the environment ``desired`` targets exists.

        Unscoped targets always pass.

        Raises:
            EnvironmentNotFoundError: If the environment is missing.
        """
        target = desired.target
        if not target.is_scoped:
            return
        if not self._scanner.environments.exists(target.environment):
            raise EnvironmentNotFoundError(desired.name, str(desired.ensure), target.environment)
