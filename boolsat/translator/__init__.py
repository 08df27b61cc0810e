"""
Translators from Boolean expressions to other solver formats:

- `expr2z3`: expressions to z3 formulas
- `expr2cnf`: Tseitin encoding into numeric clauses (PySAT, DIMACS)
"""

from . import expr2cnf
from . import expr2z3

__all__ = [
    "expr2cnf",
    "expr2z3",
]
