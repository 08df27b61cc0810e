# coding: utf-8
"""
Public subclasses of different Exceptions
"""


class BoolSatException(Exception):
    """Base class for boolsat exceptions"""

    pass


class MalformedExpressionError(BoolSatException, TypeError):
    """Raised when an object that is neither a variable nor an And/Or/Not node
    shows up where an expression is expected."""

    def __init__(self, node):
        self.node = node
        super().__init__(f"Invalid BooleanExpr: {node!r}")


class UnassignedVariableError(BoolSatException, ValueError):
    """Raised when a variable is evaluated without a concrete truth value."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Variable {variable!r} has no truth value")


class StrategyContractError(BoolSatException):
    """A variable selection strategy returned an illegal choice."""

    pass


class SearchBudgetExceeded(BoolSatException):
    """Flag for a search that ran out of decisions"""

    pass
