"""Conda package operator implementation.

Executes package installation, removal and version searches using the
conda CLI.
"""

import logging
from collections.abc import Iterator

from condastate.core.config import CondaConfig
from condastate.core.parser import parse_search_line
from condastate.models.action import Action, ActionResult, ActionType
from condastate.utils.shell import run_checked, stream_command

logger = logging.getLogger(__name__)


class CondaOperator:
    """Operator for conda packages.

    Builds conda command lines and runs them. A failing conda command
    raises CommandError; there is no retry.

    Attributes:
        dry_run: If True, only simulate mutating actions without executing them.

    Example:
        >>> operator = CondaOperator(config, dry_run=True)
        >>> result = operator.install(Action(ActionType.INSTALL, "numpy"))
        >>> result.message
        'Dry-run: would install'
    """

    def __init__(self, config: CondaConfig, dry_run: bool = False) -> None:
        """Initialize the operator.

        Args:
            config: Resolved conda locations and options.
            dry_run: If True, only simulate actions without executing them.
        """
        self._config = config
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    def install_args(self, action: Action) -> list[str]:
        """Build ``conda install`` arguments for an install or update action."""
        args = ["install", "--yes", "--quiet"]
        if action.environment:
            args.extend(["-n", action.environment])
        if action.channel:
            args.extend(["--channel", action.channel])
        args.append(action.spec)
        return args

    def remove_args(self, action: Action) -> list[str]:
        """Build ``conda remove`` arguments for a remove action."""
        args = ["remove", "--yes"]
        if action.environment:
            args.extend(["-n", action.environment])
        args.append(action.package)
        return args

    def search_args(
        self,
        package: str,
        environment: str | None = None,
        channel: str | None = None,
    ) -> list[str]:
        """Build ``conda search`` arguments anchored to an exact package name."""
        args = ["search", "--canonical"]
        if environment:
            args.extend(["-n", environment])
        if channel:
            args.extend(["--channel", channel])
        args.append(f"^{package}$")
        return args

    def install(self, action: Action) -> ActionResult:
        """Install (or update) a package.

        Args:
            action: INSTALL or UPDATE action to execute.

        Returns:
            ActionResult for the action.

        Raises:
            CommandError: If conda install fails.
        """
        verb = "update" if action.is_update else "install"
        if self.dry_run:
            logger.info("Dry-run: Would %s conda package %s", verb, action.target)
            return ActionResult(action=action, success=True, message=f"Dry-run: would {verb}")

        logger.info("Installing conda package: %s (%s)", action.target, action.spec)
        self._run(self.install_args(action))
        return ActionResult(action=action, success=True, message="Operation completed")

    def remove(self, action: Action) -> ActionResult:
        """Remove a package.

        Removing a package that is not installed is left to conda.

        Raises:
            CommandError: If conda remove fails.
        """
        if self.dry_run:
            logger.info("Dry-run: Would remove conda package %s", action.target)
            return ActionResult(action=action, success=True, message="Dry-run: would remove")

        logger.info("Removing conda package: %s", action.target)
        self._run(self.remove_args(action))
        return ActionResult(action=action, success=True, message="Operation completed")

    def execute(self, action: Action) -> ActionResult:
        """Dispatch an action to install or remove."""
        if action.action_type == ActionType.REMOVE:
            return self.remove(action)
        return self.install(action)

    def search_versions(
        self,
        package: str,
        environment: str | None = None,
        channel: str | None = None,
    ) -> Iterator[str]:
        """Yield versions of ``package`` available for the configured Python tag.

        Searches run even in dry-run mode since they change nothing.

        Raises:
            CommandError: If conda search fails.
        """
        args = [self._config.conda, *self.search_args(package, environment, channel)]
        for line in stream_command(args):
            version = parse_search_line(line, self._config.python_tag)
            if version is not None:
                yield version

    def _run(self, args: list[str]) -> None:
        run_checked([self._config.conda, *args], timeout=self._config.timeout_seconds)
