"""Parsers for conda listing and search output.

``conda list --canonical`` and ``conda search --canonical`` print one
package per line as ``<name>-<version>-<build>``. Package names may contain
hyphens themselves (``my-package-1.2.0-py38_0``) while versions and build
tags never do, so lines are split from the right.
"""

import logging
from collections.abc import Iterable, Iterator

from condastate.models.package import ENV_DELIMITER, PackageRecord

logger = logging.getLogger(__name__)


def _split_identifier(line: str) -> tuple[str, str, str] | None:
    """Split a canonical identifier into name, version and build.

    Newer conda releases prefix canonical names with ``channel/subdir::``;
    that prefix is dropped.

    Returns:
        Tuple of (name, version, build), or None if the line has no
        ``-`` separated build tag.
    """
    text = line.strip()
    if not text or text.startswith("#"):
        return None

    _, _, text = text.rpartition(ENV_DELIMITER)

    remainder, _, build = text.rpartition("-")
    if not remainder:
        return None

    name, _, version = remainder.rpartition("-")
    return name, version, build


def parse_list_line(line: str, environment: str | None = None) -> PackageRecord | None:
    """Parse one line of ``conda list --canonical`` output.

    Args:
        line: Raw output line.
        environment: Environment the listing was taken from. When set, the
            record name is qualified as ``environment::name``.

    Returns:
        PackageRecord if the line is a package identifier, None for headers,
        blank lines, comments and anything else that does not parse.
    """
    parts = _split_identifier(line)
    if parts is None:
        logger.debug("Skipping unparsable conda line: %r", line[:100])
        return None

    name, version, build = parts
    if not name or not version:
        logger.debug("Skipping conda line with empty name/version: %r", line[:100])
        return None

    if environment:
        name = f"{environment}{ENV_DELIMITER}{name}"

    return PackageRecord(
        name=name,
        version=version,
        environment=environment or None,
        build=build or None,
    )


def parse_search_line(line: str, python_tag: str) -> str | None:
    """Parse one line of ``conda search --canonical`` output.

    Only builds made for one interpreter line are counted so a version
    published for several Pythons is seen once.

    Args:
        line: Raw output line.
        python_tag: Substring the build tag must contain (e.g., 'py27').

    Returns:
        The version string if the build matches ``python_tag``, else None.
    """
    parts = _split_identifier(line)
    if parts is None:
        return None

    _, version, build = parts
    if python_tag not in build or not version:
        return None
    return version


def parse_listing_output(
    lines: Iterable[str],
    environment: str | None = None,
) -> Iterator[PackageRecord]:
    """Lazily parse listing output, dropping lines that do not parse.

    Args:
        lines: Output lines, typically streamed from a running process.
        environment: Environment hint passed to parse_list_line.

    Yields:
        PackageRecord for every parsable line, in input order.
    """
    for line in lines:
        record = parse_list_line(line, environment)
        if record is not None:
            yield record
