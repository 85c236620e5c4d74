"""Data models for condastate.

This module exports the core data structures used throughout the application.
"""

from condastate.models.action import Action, ActionResult, ActionType
from condastate.models.desired import DesiredState, Ensure, EnsureKind
from condastate.models.inventory import Inventory
from condastate.models.package import PackageRecord
from condastate.models.target import QualifiedTarget, resolve

__all__ = [
    "Action",
    "ActionResult",
    "ActionType",
    "DesiredState",
    "Ensure",
    "EnsureKind",
    "Inventory",
    "PackageRecord",
    "QualifiedTarget",
    "resolve",
]
