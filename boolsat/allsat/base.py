"""
Base classes for AllSAT solvers.

This module provides the abstract base class for all AllSAT solver implementations.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from boolsat.expr import Expr

Model = Dict[str, bool]


class AllSATSolver(ABC):
    """
    Abstract base class for AllSAT solvers.

    This class defines the interface that all AllSAT solver implementations must follow.
    """

    def __init__(self) -> None:
        """Initialize the AllSAT solver with common state."""
        self._models: List[Model] = []
        self._model_count: int = 0
        self._model_limit_reached: bool = False

    @abstractmethod
    def solve(self, expr: Expr, model_limit: Optional[int] = None) -> List[Model]:
        """
        Enumerate the satisfying models of the given expression.

        Args:
            expr: The Boolean expression to solve
            model_limit: Maximum number of models to generate (None: all of them)

        Returns:
            List of models satisfying the expression
        """

    def _reset_model_storage(self) -> None:
        """Reset model storage before solving."""
        self._models = []
        self._model_count = 0
        self._model_limit_reached = False

    def _add_model(self, model: Model, model_limit: Optional[int]) -> bool:
        """
        Add a model to the storage and check if limit is reached.

        Args:
            model: The model to add
            model_limit: Maximum number of models to generate

        Returns:
            True if model limit has been reached, False otherwise
        """
        self._model_count += 1
        self._models.append(model)

        if model_limit is not None and self._model_count >= model_limit:
            self._model_limit_reached = True
            return True
        return False

    def get_model_count(self) -> int:
        """
        Get the number of models found in the last solve call.

        Returns:
            int: The number of models
        """
        return self._model_count

    @property
    def models(self) -> List[Model]:
        """
        Get all models found in the last solve call.

        Returns:
            List of models
        """
        return self._models

    @property
    def model_limit_reached(self) -> bool:
        return self._model_limit_reached

    def print_models(self) -> None:
        """Print all models found in the last solve call."""
        if not self._models:
            print("No models found.")
            return

        for i, model in enumerate(self._models):
            assignment = ", ".join(f"{var}={int(val)}" for var, val in model.items())
            print(f"Model {i + 1}: {assignment}")

        if self._model_limit_reached:
            print(
                f"Model limit reached. Found {self._model_count} models "
                f"(there may be more)."
            )
        else:
            print(f"Total number of models: {self._model_count}")
