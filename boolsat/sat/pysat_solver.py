# coding: utf-8
"""
Checking Boolean expressions with PySAT through a Tseitin encoding.
"""
import logging
from typing import Dict, List, Optional

from pysat.solvers import Solver

from boolsat.expr import Expr
from boolsat.translator.expr2cnf import CNFEncoding, to_cnf

logger = logging.getLogger(__name__)


class PySATSolver:
    """PySAT-backed checker for one expression."""

    def __init__(self, solver: str = "g4"):
        self.solver_name = solver
        self.encoding: Optional[CNFEncoding] = None
        self._model: Optional[List[int]] = None

    def add_expr(self, expr: Expr) -> None:
        self.encoding = to_cnf(expr)
        logger.debug("Encoded %d variables into %d clauses over %d ids",
                     len(self.encoding.var_ids), len(self.encoding.clauses),
                     self.encoding.top_id)

    def _assumptions(self, assumptions: Optional[Dict[str, bool]]) -> List[int]:
        lits = []
        for name, value in (assumptions or {}).items():
            # variables outside the expression cannot constrain it
            if name in self.encoding.var_ids:
                var_id = self.encoding.var_ids[name]
                lits.append(var_id if value else -var_id)
        return lits

    def check_sat(self, assumptions: Optional[Dict[str, bool]] = None) -> bool:
        """Check satisfiability, optionally with some variables fixed."""
        if self.encoding is None:
            raise ValueError("No expression loaded")
        with Solver(name=self.solver_name, bootstrap_with=self.encoding.clauses) as s:
            ret = s.solve(assumptions=self._assumptions(assumptions))
            self._model = s.get_model() if ret else None
        return ret

    def get_model(self) -> Optional[Dict[str, bool]]:
        """Model of the last SAT check over the expression's variables."""
        if self._model is None:
            return None
        return self.encoding.decode(self._model)

    def sample_models(self, to_enum: int) -> List[Dict[str, bool]]:
        """
        Enumerate up to `to_enum` distinct models of the expression.
        Tseitin gate values are functionally determined, so distinct models
        of the encoding are distinct on the original variables.
        """
        if self.encoding is None:
            raise ValueError("No expression loaded")
        results = []
        with Solver(name=self.solver_name, bootstrap_with=self.encoding.clauses) as s:
            for i, model in enumerate(s.enum_models(), 1):
                results.append(self.encoding.decode(model))
                if i == to_enum:
                    break
        return results
