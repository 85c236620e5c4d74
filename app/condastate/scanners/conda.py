"""Conda package scanner implementation.

Collects installed packages from the global scope and from every named
environment using ``conda list --canonical``.
"""

import logging
from collections.abc import Iterator

from condastate.core.config import CondaConfig
from condastate.core.parser import parse_listing_output
from condastate.models.inventory import Inventory
from condastate.models.package import PackageRecord
from condastate.scanners.environments import EnvironmentScanner
from condastate.utils.shell import command_exists, stream_command

logger = logging.getLogger(__name__)


class CondaScanner:
    """Scanner for conda packages.

    Every scan runs conda afresh; nothing is cached between calls.

    Example:
        >>> scanner = CondaScanner(config)
        >>> if scanner.is_available():
        ...     for pkg in scanner.scan_all():
        ...         print(f"{pkg.name}: {pkg.version}")
    """

    def __init__(self, config: CondaConfig) -> None:
        self._config = config
        self._environments = EnvironmentScanner(config)

    @property
    def environments(self) -> EnvironmentScanner:
        """Return the scanner used to discover environments."""
        return self._environments

    def is_available(self) -> bool:
        """Check if the configured conda executable can be run."""
        return command_exists(self._config.conda)

    def list_args(self, environment: str | None = None) -> list[str]:
        """Build the ``conda list`` command line for one scope."""
        args = [self._config.conda, "list", "-c"]
        if environment:
            args.extend(["-n", environment])
        return args

    def scan(self, environment: str | None = None) -> Iterator[PackageRecord]:
        """Scan installed packages of one scope.

        Args:
            environment: Environment name, or None for the global scope.

        Yields:
            PackageRecord for each installed package. Records of a named
            environment carry ``environment::name`` identities.

        Raises:
            CommandError: If conda list fails.
        """
        logger.debug("Scanning conda packages in %s", environment or "global scope")
        yield from parse_listing_output(stream_command(self.list_args(environment)), environment)

    def scan_all(self) -> Iterator[PackageRecord]:
        """Scan the global scope followed by every named environment.

        Environments are visited in listing order, one conda process each.

        Yields:
            PackageRecord for every installed package on the machine.

        Raises:
            CommandError: If conda list or the environment listing fails.
        """
        yield from self.scan()
        for environment in self._environments.scan():
            yield from self.scan(environment)

    def inventory(self) -> Inventory:
        """Collect a full snapshot of installed packages."""
        return Inventory.from_records(self.scan_all())
