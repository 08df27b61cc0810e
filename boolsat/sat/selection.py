# coding: utf-8
"""
Variable selection strategies for the backtracking solver.

A strategy is any callable

    select(variables, assignments) -> None | (variable, try_true_first)

called once per search node with the full variable list (first-occurrence
order) and the current partial assignment. It returns None only when no
variable is UNSET, otherwise an UNSET variable and the value to try first.
The choice affects how many nodes are explored, never the answer.

Plain functions work, and so do objects that keep state between calls
(see VariableSelector).
"""
import random
from abc import ABC, abstractmethod
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from boolsat.expr import Expr
from boolsat.utils.types import Value
from boolsat.variables import variable_occurrences

NextVariable = Optional[Tuple[str, bool]]
SelectNextVariable = Callable[[Sequence[str], Mapping[str, Value]], NextVariable]


def first_unassigned(variables: Sequence[str], assignments: Mapping[str, Value]) -> NextVariable:
    """Default strategy: the first UNSET variable, trying False first."""
    for var in variables:
        if assignments[var] is Value.UNSET:
            return var, False
    return None


class VariableSelector(ABC):
    """Base class for strategies that carry state across calls."""

    @abstractmethod
    def select(self, variables: Sequence[str], assignments: Mapping[str, Value]) -> NextVariable:
        """Pick the next variable to branch on."""

    def __call__(self, variables: Sequence[str], assignments: Mapping[str, Value]) -> NextVariable:
        return self.select(variables, assignments)


class OccurrenceSelector(VariableSelector):
    """
    Branch on the most frequent UNSET variable first.

    Occurrence counts of the expression are computed once at construction.
    The preferred value is the variable's dominant polarity: a variable that
    mostly occurs positively is tried True first. Ties keep the
    first-occurrence order.
    """

    def __init__(self, expr: Expr) -> None:
        occurrences = variable_occurrences(expr)
        self.scores: Dict[str, int] = {var: pos + neg for var, (pos, neg) in occurrences.items()}
        self.polarities: Dict[str, bool] = {
            var: pos >= neg for var, (pos, neg) in occurrences.items()
        }

    def select(self, variables: Sequence[str], assignments: Mapping[str, Value]) -> NextVariable:
        best = None
        best_score = -1
        for var in variables:
            if assignments[var] is not Value.UNSET:
                continue
            score = self.scores.get(var, 0)
            if score > best_score:
                best, best_score = var, score
        if best is None:
            return None
        return best, self.polarities.get(best, False)


class RandomSelector(VariableSelector):
    """Uniformly random UNSET variable and polarity."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def select(self, variables: Sequence[str], assignments: Mapping[str, Value]) -> NextVariable:
        unset = [var for var in variables if assignments[var] is Value.UNSET]
        if not unset:
            return None
        return self.rng.choice(unset), self.rng.random() < 0.5
