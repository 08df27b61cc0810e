# coding: utf-8
from .base import AllSATSolver
from .bruteforce import (
    BruteForceAllSATSolver,
    brute_force_all_solutions,
    iter_assignments,
    iter_solutions,
)
from .z3_solver import Z3AllSATSolver

__all__ = [
    "AllSATSolver",
    "BruteForceAllSATSolver",
    "Z3AllSATSolver",
    "brute_force_all_solutions",
    "iter_assignments",
    "iter_solutions",
]
