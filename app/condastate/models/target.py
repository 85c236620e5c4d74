"""Qualified package targets.

A target is what the user names on the command line or in a desired-state
declaration: ``package`` or ``environment::package``.
"""

from dataclasses import dataclass

from condastate.models.package import ENV_DELIMITER


@dataclass(frozen=True, slots=True)
class QualifiedTarget:
    """A package name resolved into environment and package coordinates.

    Attributes:
        environment: Environment name, or None for the global/default scope.
        package: Bare package name. May be empty; validation of the name
            is left to conda.
    """

    environment: str | None
    package: str

    @classmethod
    def parse(cls, raw: str) -> "QualifiedTarget":
        """Split a raw target string on the first ``::``.

        An empty environment part (``::numpy``) is treated as unscoped.
        Every string is accepted.

        Examples:
            >>> QualifiedTarget.parse("ml::numpy")
            QualifiedTarget(environment='ml', package='numpy')
            >>> QualifiedTarget.parse("::numpy")
            QualifiedTarget(environment=None, package='numpy')
        """
        env, delim, package = raw.partition(ENV_DELIMITER)
        if not delim:
            return cls(environment=None, package=raw)
        return cls(environment=env or None, package=package)

    @property
    def is_scoped(self) -> bool:
        """Check if the target names an environment."""
        return self.environment is not None

    @property
    def qualified_name(self) -> str:
        """Return the ``environment::package`` form (or the bare package)."""
        if self.environment:
            return f"{self.environment}{ENV_DELIMITER}{self.package}"
        return self.package


def resolve(raw: str) -> tuple[str | None, str]:
    """Resolve a raw target string into ``(environment, package)``.

    Args:
        raw: Target as supplied by the user.

    Returns:
        Tuple of environment (None when unscoped) and package name.
    """
    target = QualifiedTarget.parse(raw)
    return target.environment, target.package
