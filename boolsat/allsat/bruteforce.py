# coding: utf-8
"""
Brute-force enumeration of satisfying assignments.

Every one of the 2^n total assignments over the extracted variables is
checked, so this is only usable for small variable counts. It serves as
the reference oracle for the other solvers.
"""
import itertools
import logging
from typing import Dict, Iterator, List, Optional, Sequence

from boolsat.evaluate import evaluate
from boolsat.expr import Expr
from boolsat.variables import get_variables

from .base import AllSATSolver, Model

logger = logging.getLogger(__name__)


def iter_assignments(variables: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """
    Yield all complete assignments over `variables`.

    The k-th assignment (k = 0 .. 2^n - 1) binds variables[i] to the i-th
    bit of k, most significant bit first.
    """
    for bits in itertools.product((False, True), repeat=len(variables)):
        yield dict(zip(variables, bits))


def iter_solutions(expr: Expr) -> Iterator[Dict[str, bool]]:
    """Yield the satisfying assignments of `expr` in enumeration order."""
    variables = get_variables(expr)
    logger.debug("Enumerating 2^%d assignments of %s", len(variables), expr)
    for assignment in iter_assignments(variables):
        if evaluate(expr, assignment):
            yield assignment


def brute_force_all_solutions(expr: Expr) -> List[Dict[str, bool]]:
    """Generate a list of all solutions that satisfy `expr`."""
    return list(iter_solutions(expr))


class BruteForceAllSATSolver(AllSATSolver):
    """AllSAT by exhaustive enumeration of the truth table."""

    def solve(self, expr: Expr, model_limit: Optional[int] = None) -> List[Model]:
        self._reset_model_storage()
        for model in iter_solutions(expr):
            if self._add_model(model, model_limit):
                break
        return self._models
