"""Package and environment scanners.

This module exports the scanner classes for querying installed packages.
"""

from condastate.scanners.conda import CondaScanner
from condastate.scanners.environments import EnvironmentScanner

__all__ = ["CondaScanner", "EnvironmentScanner"]
