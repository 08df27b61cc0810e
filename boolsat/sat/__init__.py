# coding: utf-8
from .config import SearchConfig, SearchResult, SearchStats
from .dpll import DPLLSolver, get_initial_assignments, get_solution
from .selection import (
    OccurrenceSelector,
    RandomSelector,
    SelectNextVariable,
    VariableSelector,
    first_unassigned,
)

# Export
__all__ = [
    "DPLLSolver",
    "OccurrenceSelector",
    "RandomSelector",
    "SearchConfig",
    "SearchResult",
    "SearchStats",
    "SelectNextVariable",
    "VariableSelector",
    "first_unassigned",
    "get_initial_assignments",
    "get_solution",
]
