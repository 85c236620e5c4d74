"""Package operators for executing installation and removal actions."""

from condastate.operators.conda import CondaOperator

__all__ = ["CondaOperator"]
