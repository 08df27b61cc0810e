# coding: utf-8
"""
Collecting the variables of an expression.

The order of ``get_variables`` is observable: it fixes the default branching
order of the backtracking solver and the bit positions used by the
brute-force enumerator.
"""
from typing import Dict, List, Tuple

from boolsat.expr import And, Expr, Not, Or, is_variable
from boolsat.utils.exceptions import MalformedExpressionError


def get_variables(expr: Expr) -> List[str]:
    """
    Distinct variables of `expr` in first-occurrence order.

    Pre-order, left-to-right descent. Later occurrences of a variable
    that has already been seen are ignored.
    """
    seen: Dict[str, None] = {}
    _collect(expr, seen)
    return list(seen)


def _collect(expr: Expr, seen: Dict[str, None]) -> None:
    if is_variable(expr):
        seen.setdefault(expr, None)
    elif isinstance(expr, (And, Or)):
        for sub_expr in expr.operands:
            _collect(sub_expr, seen)
    elif isinstance(expr, Not):
        _collect(expr.operand, seen)
    else:
        raise MalformedExpressionError(expr)


def variable_occurrences(expr: Expr) -> Dict[str, Tuple[int, int]]:
    """
    Count positive and negative occurrences of every variable.

    A variable under an odd number of negations counts as negative.
    Keys follow the ``get_variables`` order.

    :return: {variable: (positive, negative)}
    """
    counts: Dict[str, List[int]] = {}

    def visit(node: Expr, positive: bool) -> None:
        if is_variable(node):
            pos_neg = counts.setdefault(node, [0, 0])
            pos_neg[0 if positive else 1] += 1
        elif isinstance(node, (And, Or)):
            for sub_expr in node.operands:
                visit(sub_expr, positive)
        elif isinstance(node, Not):
            visit(node.operand, not positive)
        else:
            raise MalformedExpressionError(node)

    visit(expr, True)
    return {var: (pos, neg) for var, (pos, neg) in counts.items()}
