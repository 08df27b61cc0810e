# coding: utf-8
"""
Backtracking search for one satisfying assignment.

Variables are decided one at a time in the order picked by a pluggable
selection strategy, trying the strategy's preferred value first and the
opposite value on failure. A branch is only judged once all its variables
are assigned: there is no unit propagation, clause learning or conflict
analysis, so the strategy is the only lever on the number of explored nodes.

Each recursive call gets its own copy of the partial assignment; sibling
branches never see each other's bindings.
"""

import logging
from typing import Dict, Mapping, Optional, Union

from boolsat.evaluate import evaluate
from boolsat.expr import Expr
from boolsat.utils.exceptions import SearchBudgetExceeded, StrategyContractError
from boolsat.utils.stopwatch import Stopwatch
from boolsat.utils.types import SolverResult, Value
from boolsat.variables import get_variables

from .config import SearchConfig, SearchResult, SearchStats
from .selection import SelectNextVariable, first_unassigned

logger = logging.getLogger(__name__)

PartialAssignment = Dict[str, Value]


def get_initial_assignments(
    expr: Expr, initial_assignments: Optional[Mapping[str, Union[Value, bool]]] = None
) -> PartialAssignment:
    """Every variable of `expr` as UNSET, overridden by `initial_assignments`."""
    assignments = {var: Value.UNSET for var in get_variables(expr)}
    for var, value in (initial_assignments or {}).items():
        assignments[var] = Value.coerce(value)
    return assignments


class DPLLSolver:
    """Exhaustive binary backtracking search with a pluggable branching order."""

    def __init__(
        self,
        select_next_var: Optional[SelectNextVariable] = None,
        config: Optional[SearchConfig] = None,
    ) -> None:
        self.select_next_var = select_next_var or first_unassigned
        self.cfg = config or SearchConfig()
        self.stats = SearchStats()
        self._expr: Optional[Expr] = None
        self._variables = []

    def solve(
        self,
        expr: Expr,
        initial_assignments: Optional[Mapping[str, Union[Value, bool]]] = None,
    ) -> SearchResult:
        """
        Search for a model of `expr`.

        Args:
            expr: the expression to satisfy
            initial_assignments: variables fixed before the search starts

        Returns:
            SearchResult with SAT and a complete model, UNSAT, or UNKNOWN when
            the decision budget ran out
        """
        self._expr = expr
        self._variables = get_variables(expr)
        self.stats = SearchStats()
        assignments = get_initial_assignments(expr, initial_assignments)
        logger.debug("Searching %d variables of %s", len(self._variables), expr)

        stopwatch = Stopwatch()
        stopwatch.start()
        try:
            solution = self._search(assignments)
        except SearchBudgetExceeded:
            self.stats.runtime_sec = stopwatch.stop()
            logger.info("Decision budget of %d exhausted after %d nodes",
                        self.cfg.max_decisions, self.stats.nodes)
            return SearchResult(SolverResult.UNKNOWN, None, self.stats)
        self.stats.runtime_sec = stopwatch.stop()

        if solution is None:
            logger.info("UNSAT after %d nodes (%d backtracks)",
                        self.stats.nodes, self.stats.backtracks)
            return SearchResult(SolverResult.UNSAT, None, self.stats)
        logger.info("SAT after %d nodes (%d backtracks)",
                    self.stats.nodes, self.stats.backtracks)
        model = {var: value.to_bool() for var, value in solution.items()
                 if value is not Value.UNSET}
        return SearchResult(SolverResult.SAT, model, self.stats)

    def _search(self, assignments: PartialAssignment) -> Optional[PartialAssignment]:
        self.stats.nodes += 1
        next_var = self.select_next_var(self._variables, assignments)
        if next_var is None:
            if self.cfg.validate_strategy:
                self._check_complete(assignments)
            self.stats.leaves += 1
            return assignments if evaluate(self._expr, assignments) else None

        if self.cfg.validate_strategy:
            self._check_choice(next_var, assignments)
        unassigned_var, check_true_first = next_var

        for value in (check_true_first, not check_true_first):
            self._decide()
            logger.debug("Decide %s=%s", unassigned_var, value)
            new_assignments = dict(assignments)
            new_assignments[unassigned_var] = Value.from_bool(value)
            solution = self._search(new_assignments)
            if solution is not None:
                return solution

        self.stats.backtracks += 1
        logger.debug("Backtrack on %s", unassigned_var)
        return None

    def _decide(self) -> None:
        max_decisions = self.cfg.max_decisions
        if max_decisions is not None and self.stats.decisions >= max_decisions:
            raise SearchBudgetExceeded(f"more than {max_decisions} decisions")
        self.stats.decisions += 1

    def _check_complete(self, assignments: PartialAssignment) -> None:
        unset = [var for var in self._variables if assignments[var] is Value.UNSET]
        if unset:
            raise StrategyContractError(
                f"Strategy stopped while {', '.join(unset)} still unassigned"
            )

    def _check_choice(self, next_var, assignments: PartialAssignment) -> None:
        try:
            var, _ = next_var
        except (TypeError, ValueError):
            raise StrategyContractError(
                f"Strategy must return None or (variable, bool), got {next_var!r}"
            ) from None
        if var not in self._variables:
            raise StrategyContractError(f"Strategy picked unknown variable {var!r}")
        if assignments[var] is not Value.UNSET:
            raise StrategyContractError(f"Strategy picked assigned variable {var!r}")


def get_solution(
    expr: Expr,
    initial_assignments: Optional[Mapping[str, Union[Value, bool]]] = None,
    select_next_var: SelectNextVariable = first_unassigned,
) -> Optional[Dict[str, bool]]:
    """
    Find one solution that satisfies `expr`.

    Args:
        expr: the expression to satisfy
        initial_assignments: variables fixed before the search starts
        select_next_var: branching strategy, see boolsat.sat.selection

    Returns:
        Dict[str, bool]: a satisfying complete assignment
        None: no solution
    """
    return DPLLSolver(select_next_var).solve(expr, initial_assignments).model
