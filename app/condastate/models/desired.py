"""Desired-state models.

A desired state names a package target, what should be true about it
(present, absent, latest, or an exact version) and an optional channel.
"""

from dataclasses import dataclass, field
from enum import Enum

from condastate.models.target import QualifiedTarget


class EnsureKind(str, Enum):
    """Kind of desired state for a package.

    Attributes:
        PRESENT: Any installed version satisfies the state.
        ABSENT: The package must not be installed.
        LATEST: The newest version conda can find must be installed.
        VERSION: An exact version must be installed.
    """

    PRESENT = "present"
    ABSENT = "absent"
    LATEST = "latest"
    VERSION = "version"


# Keywords accepted by Ensure.parse, mapped to their kind
_KEYWORDS: dict[str, EnsureKind] = {
    "present": EnsureKind.PRESENT,
    "installed": EnsureKind.PRESENT,
    "absent": EnsureKind.ABSENT,
    "latest": EnsureKind.LATEST,
}


@dataclass(frozen=True, slots=True)
class Ensure:
    """Tagged desired-state value.

    Attributes:
        kind: Which variant this is.
        version: The exact version, set only for EnsureKind.VERSION.
    """

    kind: EnsureKind
    version: str | None = None

    def __post_init__(self) -> None:
        """Validate that only the VERSION variant carries a version."""
        if self.kind == EnsureKind.VERSION and not self.version:
            msg = "A version is required for an exact-version state"
            raise ValueError(msg)
        if self.kind != EnsureKind.VERSION and self.version is not None:
            msg = f"'{self.kind.value}' state does not take a version"
            raise ValueError(msg)

    @classmethod
    def present(cls) -> "Ensure":
        return cls(EnsureKind.PRESENT)

    @classmethod
    def absent(cls) -> "Ensure":
        return cls(EnsureKind.ABSENT)

    @classmethod
    def latest(cls) -> "Ensure":
        return cls(EnsureKind.LATEST)

    @classmethod
    def exact(cls, version: str) -> "Ensure":
        return cls(EnsureKind.VERSION, version)

    @classmethod
    def parse(cls, value: str) -> "Ensure":
        """Build an Ensure from its textual form.

        Keywords are matched case-insensitively; anything else is taken
        as an exact version.

        Raises:
            ValueError: If the value is blank.
        """
        text = value.strip()
        if not text:
            msg = "Desired state cannot be empty"
            raise ValueError(msg)
        kind = _KEYWORDS.get(text.lower())
        if kind is not None:
            return cls(kind)
        return cls.exact(text)

    @property
    def is_version(self) -> bool:
        """Check if an exact version is requested."""
        return self.kind == EnsureKind.VERSION

    def __str__(self) -> str:
        return self.version if self.version is not None else self.kind.value


@dataclass(frozen=True, slots=True)
class DesiredState:
    """Desired state of one package.

    Attributes:
        name: Target name, optionally qualified as ``environment::package``.
        ensure: What should be true about the package.
        source: Channel override passed to install and search.
    """

    name: str
    ensure: Ensure = field(default_factory=Ensure.present)
    source: str | None = None

    @property
    def target(self) -> QualifiedTarget:
        """Return the resolved target of this state."""
        return QualifiedTarget.parse(self.name)

    @property
    def channel(self) -> str | None:
        """Return the channel override, treating blank values as unset."""
        if self.source is None or not str(self.source).strip():
            return None
        return str(self.source)
