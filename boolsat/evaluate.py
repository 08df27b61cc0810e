# coding: utf-8
"""
Evaluating an expression under a complete assignment.
"""
from typing import Mapping, Union

from boolsat.expr import And, Expr, Not, Or, is_variable
from boolsat.utils.exceptions import MalformedExpressionError, UnassignedVariableError
from boolsat.utils.types import Value

Assignment = Mapping[str, Union[Value, bool]]


def evaluate(expr: Expr, assignment: Assignment) -> bool:
    """
    Truth value of `expr` under `assignment`.

    Every variable reachable from `expr` must be bound to a concrete value,
    either a bool or Value.TRUE / Value.FALSE.

    :raises UnassignedVariableError: a reachable variable is missing or UNSET
    :raises MalformedExpressionError: a node is not a variable, And, Or or Not
    """
    if is_variable(expr):
        return truth_value(expr, assignment)
    if isinstance(expr, And):
        return all(evaluate(sub_expr, assignment) for sub_expr in expr.operands)
    if isinstance(expr, Or):
        return any(evaluate(sub_expr, assignment) for sub_expr in expr.operands)
    if isinstance(expr, Not):
        return not evaluate(expr.operand, assignment)
    raise MalformedExpressionError(expr)


def truth_value(variable: str, assignment: Assignment) -> bool:
    """Look up the concrete value of a single variable."""
    try:
        value = assignment[variable]
    except KeyError:
        raise UnassignedVariableError(variable) from None
    if isinstance(value, Value):
        if value is Value.UNSET:
            raise UnassignedVariableError(variable)
        return value is Value.TRUE
    return bool(value)
