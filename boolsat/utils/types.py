# coding: utf-8
"""
Shared enumerations for truth values and solver outcomes.
"""

from enum import Enum


class SolverResult(Enum):
    """Outcome of a satisfiability check."""

    SAT = 0
    UNSAT = 1
    UNKNOWN = 2


class Value(Enum):
    """Tri-state truth value of a variable during search."""

    UNSET = -1
    FALSE = 0
    TRUE = 1

    @classmethod
    def from_bool(cls, value: bool) -> "Value":
        return cls.TRUE if value else cls.FALSE

    @classmethod
    def coerce(cls, value) -> "Value":
        """Accept either a Value or a plain bool."""
        if isinstance(value, Value):
            return value
        if isinstance(value, bool):
            return cls.from_bool(value)
        raise TypeError(f"Expected bool or Value, got {value!r}")

    def to_bool(self) -> bool:
        """Concrete truth value. UNSET has none."""
        if self is Value.UNSET:
            raise ValueError("UNSET has no truth value")
        return self is Value.TRUE
