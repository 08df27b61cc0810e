# coding: utf-8
"""
Boolean expressions over named variables.

An expression is either a variable (a plain ``str``) or one of three
immutable node kinds:
  - And: true iff every operand is true (vacuously true when empty)
  - Or: true iff some operand is true (vacuously false when empty)
  - Not: true iff its operand is false

Implication, exclusive-or and biconditional are rewrites into these three,
they never introduce a new node kind.
"""
from dataclasses import dataclass
from typing import Tuple, Union

Variable = str


def is_variable(x) -> bool:
    """Variables are plain strings."""
    return isinstance(x, str)


def _check_operand(operand) -> None:
    if not isinstance(operand, (str, And, Or, Not)):
        raise TypeError(
            f"Operand must be a variable name or a Boolean expression, got {operand!r}"
        )


def _check_operands(node) -> None:
    # lists are frozen into tuples so nodes stay hashable
    if isinstance(node.operands, list):
        object.__setattr__(node, "operands", tuple(node.operands))
    elif not isinstance(node.operands, tuple):
        raise TypeError(f"Operands must be a tuple, got {node.operands!r}")
    for operand in node.operands:
        _check_operand(operand)


@dataclass(frozen=True)
class And:
    """Conjunction node."""

    operands: Tuple["Expr", ...] = ()

    def __post_init__(self) -> None:
        _check_operands(self)

    def __str__(self) -> str:
        if not self.operands:
            return "True"
        return f"({' & '.join(str(op) for op in self.operands)})"


@dataclass(frozen=True)
class Or:
    """Disjunction node."""

    operands: Tuple["Expr", ...] = ()

    def __post_init__(self) -> None:
        _check_operands(self)

    def __str__(self) -> str:
        if not self.operands:
            return "False"
        return f"({' | '.join(str(op) for op in self.operands)})"


@dataclass(frozen=True)
class Not:
    """Negation node."""

    operand: "Expr"

    def __post_init__(self) -> None:
        _check_operand(self.operand)

    def __str__(self) -> str:
        return f"~{self.operand}"


BooleanExpr = Union[And, Or, Not]
Expr = Union[Variable, BooleanExpr]


# All variables or subexpressions must be true.
def and_(*operands: Expr) -> And:
    return And(tuple(operands))


# At least one variable or subexpression must be true.
def or_(*operands: Expr) -> Or:
    return Or(tuple(operands))


def not_(operand: Expr) -> Not:
    return Not(operand)


def implies(a: Expr, b: Expr) -> Or:
    """If `a` is true then `b` must also be true."""
    return or_(not_(a), b)


def xor(a: Expr, b: Expr) -> Or:
    """
    Exactly one of `a` and `b` is true.

    Both operands are duplicated, so nested xors double in size per level.
    """
    return or_(and_(a, not_(b)), and_(not_(a), b))


def iff(a: Expr, b: Expr) -> And:
    """`a` and `b` have the same truth value."""
    return and_(implies(a, b), implies(b, a))


def expr_size(expr: Expr) -> int:
    """Number of nodes in the expression tree, variable leaves included."""
    if is_variable(expr):
        return 1
    if isinstance(expr, Not):
        return 1 + expr_size(expr.operand)
    return 1 + sum(expr_size(op) for op in expr.operands)
