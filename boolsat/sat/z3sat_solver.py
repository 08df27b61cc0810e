# coding: utf-8
"""
Checking Boolean expressions with Z3's SAT engine.

Used as an independent oracle for the backtracking solver.
"""
from typing import Dict, List, Optional

import z3

from boolsat.expr import Expr
from boolsat.translator.expr2z3 import to_z3
from boolsat.utils.types import SolverResult


class Z3SATSolver:
    """Z3 SAT solver wrapper."""

    def __init__(self, logic="QF_FD"):
        self.name2z3var: Dict[str, z3.BoolRef] = {}
        self.solver = z3.SolverFor(logic)

    def add_expr(self, expr: Expr) -> None:
        """Assert `expr`; variables with the same name are shared."""
        self.solver.add(to_z3(expr, self.name2z3var))

    def get_z3var(self, name: str) -> z3.BoolRef:
        """
        Given a variable name, return its corresponding Z3 Boolean var
        """
        if name in self.name2z3var:
            return self.name2z3var[name]
        raise ValueError(f"{name} not in the var list!")

    def check_sat_assuming(self, assumptions: Optional[Dict[str, bool]] = None) -> SolverResult:
        """Check satisfiability, optionally with some variables fixed."""
        literals: List[z3.BoolRef] = []
        for name, value in (assumptions or {}).items():
            var = self.name2z3var.get(name, z3.Bool(name))
            literals.append(var if value else z3.Not(var))
        res = self.solver.check(literals)
        if res == z3.sat:
            return SolverResult.SAT
        if res == z3.unsat:
            return SolverResult.UNSAT
        return SolverResult.UNKNOWN

    def get_model(self) -> Dict[str, bool]:
        """Model of the last SAT check, over every asserted variable."""
        model = self.solver.model()
        return {
            name: z3.is_true(model.eval(var, model_completion=True))
            for name, var in self.name2z3var.items()
        }
