"""
Tseitin encoding of Boolean expressions into numeric (DIMACS-style) clauses.

The original variables get the ids 1..n in first-occurrence order, every
And/Or gate gets a fresh id above n. Negation never needs a gate, it just
flips the sign of its operand's literal. The result is equisatisfiable
with the input and its models, restricted to 1..n, are exactly the models
of the input.
"""
from dataclasses import dataclass, field
from typing import Dict, List

from boolsat.expr import And, Expr, Not, Or, is_variable
from boolsat.utils.exceptions import MalformedExpressionError
from boolsat.variables import get_variables


@dataclass
class CNFEncoding:
    """Clauses plus the mapping back to variable names."""

    clauses: List[List[int]] = field(default_factory=list)
    var_ids: Dict[str, int] = field(default_factory=dict)
    top_id: int = 0

    def decode(self, model: List[int]) -> Dict[str, bool]:
        """Turn a signed-literal model into {name: value}."""
        true_lits = set(model)
        return {name: var_id in true_lits for name, var_id in self.var_ids.items()}

    def to_dimacs(self) -> str:
        lines = [f"c {var_id} {name}" for name, var_id in self.var_ids.items()]
        lines.append(f"p cnf {self.top_id} {len(self.clauses)}")
        lines.extend(" ".join(str(lit) for lit in clause) + " 0" for clause in self.clauses)
        return "\n".join(lines)


def to_cnf(expr: Expr) -> CNFEncoding:
    """Encode `expr` as CNF clauses asserting it is true."""
    enc = CNFEncoding()
    for var_id, name in enumerate(get_variables(expr), start=1):
        enc.var_ids[name] = var_id
    enc.top_id = len(enc.var_ids)
    root = _encode(expr, enc)
    enc.clauses.append([root])
    return enc


def _fresh(enc: CNFEncoding) -> int:
    enc.top_id += 1
    return enc.top_id


def _encode(expr: Expr, enc: CNFEncoding) -> int:
    if is_variable(expr):
        return enc.var_ids[expr]
    if isinstance(expr, Not):
        return -_encode(expr.operand, enc)
    if isinstance(expr, And):
        lits = [_encode(op, enc) for op in expr.operands]
        gate = _fresh(enc)
        # gate <-> l1 & ... & lk
        for lit in lits:
            enc.clauses.append([-gate, lit])
        enc.clauses.append([gate] + [-lit for lit in lits])
        return gate
    if isinstance(expr, Or):
        lits = [_encode(op, enc) for op in expr.operands]
        gate = _fresh(enc)
        # gate <-> l1 | ... | lk
        enc.clauses.append([-gate] + lits)
        for lit in lits:
            enc.clauses.append([gate, -lit])
        return gate
    raise MalformedExpressionError(expr)
