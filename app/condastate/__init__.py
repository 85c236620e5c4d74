"""condastate - desired-state management for conda packages."""

__version__ = "0.1.0"
