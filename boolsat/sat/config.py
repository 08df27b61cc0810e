# coding: utf-8
"""Configuration and result records for the backtracking search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from boolsat.utils.types import SolverResult


@dataclass
class SearchConfig:
    """Configuration for DPLLSolver."""

    # check every strategy answer and fail fast on illegal ones
    validate_strategy: bool = True
    # give up with UNKNOWN after this many branching decisions
    max_decisions: Optional[int] = None


@dataclass
class SearchStats:
    """Counters of one search."""

    nodes: int = 0
    decisions: int = 0
    leaves: int = 0
    backtracks: int = 0
    runtime_sec: float = 0.0


@dataclass
class SearchResult:
    """Result from running the backtracking search."""

    result: SolverResult
    model: Optional[Dict[str, bool]] = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def is_sat(self) -> bool:
        return self.result == SolverResult.SAT
