"""
Z3-based AllSAT solver implementation.

Models are enumerated by adding a blocking clause after each one, so the
order in which they come out is up to z3.
"""

from typing import List, Optional

from z3 import Or, Solver, is_true, sat

from boolsat.expr import Expr
from boolsat.translator.expr2z3 import to_z3

from .base import AllSATSolver, Model


class Z3AllSATSolver(AllSATSolver):
    """AllSAT through z3 with blocking clauses."""

    def solve(self, expr: Expr, model_limit: Optional[int] = None) -> List[Model]:
        z3_vars = {}
        solver = Solver()
        solver.add(to_z3(expr, z3_vars))
        keys = list(z3_vars.items())
        self._reset_model_storage()

        while solver.check() == sat:
            z3_model = solver.model()
            model = {
                name: is_true(z3_model.eval(var, model_completion=True))
                for name, var in keys
            }
            if self._add_model(model, model_limit):
                break
            if not keys:
                # the only model over zero variables is the empty one
                break

            # Create blocking clause to exclude the current model
            solver.add(Or([var != z3_model.eval(var, model_completion=True)
                           for _, var in keys]))

        return self._models
