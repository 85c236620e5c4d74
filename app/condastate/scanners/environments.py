"""Conda environment scanner.

Discovers named environments by listing the conda environments directory.
"""

import logging
from collections.abc import Iterator

from condastate.core.config import CondaConfig
from condastate.utils.shell import stream_command

logger = logging.getLogger(__name__)


class EnvironmentScanner:
    """Scanner for named conda environments.

    Runs the configured directory listing command (``ls -1`` or ``dir /b``)
    against the environments directory. Errors from the listing command,
    such as a missing directory, propagate to the caller.

    Example:
        >>> scanner = EnvironmentScanner(config)
        >>> for env in scanner.scan():
        ...     print(env)
    """

    def __init__(self, config: CondaConfig) -> None:
        self._config = config

    def scan(self) -> Iterator[str]:
        """Yield environment names in listing order.

        Yields:
            Each non-empty listing line with surrounding whitespace removed.

        Raises:
            CommandError: If the listing command fails.
        """
        for line in stream_command(self._config.env_listing_args()):
            name = line.strip()
            if name:
                yield name

    def exists(self, name: str) -> bool:
        """Check whether an environment exists (exact, case-sensitive match)."""
        found = any(env == name for env in self.scan())
        if not found:
            logger.debug("Environment %r not found in %s", name, self._config.envs_dir)
        return found
