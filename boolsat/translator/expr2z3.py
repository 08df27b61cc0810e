"""
Translate Boolean expressions into z3 formulas.
"""
from typing import Dict, Optional

import z3

from boolsat.expr import And, Expr, Not, Or, is_variable
from boolsat.utils.exceptions import MalformedExpressionError
from boolsat.variables import get_variables


def to_z3(expr: Expr, z3_vars: Optional[Dict[str, z3.BoolRef]] = None) -> z3.BoolRef:
    """
    Build the z3 counterpart of `expr`.

    Args:
        expr: the expression to translate
        z3_vars: name -> z3.Bool cache, filled in first-occurrence order.
            Pass the same dict to share variables between several formulas.
    """
    if z3_vars is None:
        z3_vars = {}
    for name in get_variables(expr):
        if name not in z3_vars:
            z3_vars[name] = z3.Bool(name)
    return _translate(expr, z3_vars)


def _translate(expr: Expr, z3_vars: Dict[str, z3.BoolRef]) -> z3.BoolRef:
    if is_variable(expr):
        return z3_vars[expr]
    if isinstance(expr, Not):
        return z3.Not(_translate(expr.operand, z3_vars))
    if isinstance(expr, (And, Or)):
        operands = [_translate(op, z3_vars) for op in expr.operands]
        if not operands:
            return z3.BoolVal(isinstance(expr, And))
        if len(operands) == 1:
            return operands[0]
        return z3.And(operands) if isinstance(expr, And) else z3.Or(operands)
    raise MalformedExpressionError(expr)
