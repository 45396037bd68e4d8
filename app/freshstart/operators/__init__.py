"""Operators for the external tools freshstart drives."""

from freshstart.operators.base import Operator
from freshstart.operators.git import GitOperator
from freshstart.operators.winget import WingetOperator, build_outcome_table

__all__ = ["GitOperator", "Operator", "WingetOperator", "build_outcome_table"]
