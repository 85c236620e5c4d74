"""Version ordering for conda version strings.

Conda versions are mostly PEP 440 compatible, but channels also publish
strings such as ``1.0.2g`` or ``2019.1_custom``. Those are ordered by their
leading numeric segments, with any tail after them ranking as a
pre-release of that number, the same way a PEP 440 ``1.0.2a`` does.
"""

import logging
import re
from collections.abc import Iterable

from packaging.version import InvalidVersion, Version

logger = logging.getLogger(__name__)

_NUMERIC_PREFIX = re.compile(r"^\d+(?:\.\d+)*")


def parse_version(value: str) -> Version:
    """Parse a version string leniently.

    Args:
        value: Version string as printed by conda.

    Returns:
        A packaging Version. Strings that are not PEP 440 compliant become
        the earliest pre-release of their leading ``N.N.N`` segments
        (``1.0.2g`` -> ``1.0.2a0``), or ``0`` if there are none.
    """
    try:
        return Version(value)
    except InvalidVersion:
        match = _NUMERIC_PREFIX.match(value.strip())
        loose = f"{match.group(0)}a0" if match else "0"
        logger.debug("Non-PEP 440 version %r compared as %s", value, loose)
        return Version(loose)


def version_key(value: str) -> tuple[Version, str]:
    """Sort key for version strings; ties are broken by the raw string."""
    return parse_version(value), value


def max_version(values: Iterable[str]) -> str | None:
    """Return the highest version string, or None if there are none."""
    candidates = list(values)
    if not candidates:
        return None
    return max(candidates, key=version_key)
