"""Inventory snapshot model.

An inventory is the list of package records collected in one pass over the
machine. It is never persisted; a new snapshot is built for every query.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from condastate.models.package import PackageRecord


@dataclass(frozen=True, slots=True)
class Inventory:
    """Snapshot of installed conda packages.

    Records keep collection order: global scope first, then each
    environment in listing order.

    Attributes:
        records: Collected package records.
        collected_at: ISO timestamp of collection (UTC).
    """

    records: tuple[PackageRecord, ...]
    collected_at: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    @classmethod
    def from_records(cls, records: Iterable[PackageRecord]) -> "Inventory":
        """Build a snapshot by draining an iterable of records.

        A record repeated under the same qualified name replaces the earlier
        one in place, so the last-parsed record wins.
        """
        unique = {record.name: record for record in records}
        return cls(records=tuple(unique.values()))

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def environments(self) -> list[str]:
        """Return environment names in the order they were collected."""
        seen: dict[str, None] = {}
        for record in self.records:
            if record.environment:
                seen.setdefault(record.environment, None)
        return list(seen)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "collected_at": self.collected_at,
            "count": len(self.records),
            "packages": [record.to_dict() for record in self.records],
        }
