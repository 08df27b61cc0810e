# coding: utf-8
"""
Boolean satisfiability over And/Or/Not expressions.

    >>> from boolsat import and_, or_, not_, xor, get_solution
    >>> get_solution(and_(not_("b"), or_("a", "b")))
    {'b': False, 'a': True}
"""
import logging
import os

from .expr import And, Not, Or, and_, expr_size, iff, implies, is_variable, not_, or_, xor
from .variables import get_variables, variable_occurrences
from .evaluate import evaluate
from .allsat import brute_force_all_solutions, iter_assignments, iter_solutions
from .sat import (
    DPLLSolver,
    OccurrenceSelector,
    RandomSelector,
    SearchConfig,
    VariableSelector,
    first_unassigned,
    get_solution,
)
from .utils.exceptions import (
    BoolSatException,
    MalformedExpressionError,
    StrategyContractError,
    UnassignedVariableError,
)
from .utils.types import SolverResult, Value

# Debug flag - can be set via environment variable BOOLSAT_DEBUG
BOOLSAT_DEBUG = os.environ.get("BOOLSAT_DEBUG", "False").lower() in ("true", "1", "yes")
if BOOLSAT_DEBUG:
    logging.getLogger(__name__).setLevel(logging.DEBUG)

__all__ = [
    "And",
    "Or",
    "Not",
    "and_",
    "or_",
    "not_",
    "implies",
    "xor",
    "iff",
    "is_variable",
    "expr_size",
    "get_variables",
    "variable_occurrences",
    "evaluate",
    "brute_force_all_solutions",
    "iter_assignments",
    "iter_solutions",
    "DPLLSolver",
    "SearchConfig",
    "VariableSelector",
    "OccurrenceSelector",
    "RandomSelector",
    "first_unassigned",
    "get_solution",
    "SolverResult",
    "Value",
    "BoolSatException",
    "MalformedExpressionError",
    "UnassignedVariableError",
    "StrategyContractError",
]
