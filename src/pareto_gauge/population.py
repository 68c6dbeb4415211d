"""Population data structures for evaluated search points.

This module provides the containers that tie search points to the objective
vectors an objective function produced for them:

- Population: A struct-of-arrays representation of multiple individuals
- Individual: A read-only view of a single individual

Both classes are immutable (frozen dataclasses) to enforce functional style.
Iterating a Population yields Individuals, so a population can be handed to
any sorting or indicator function together with ``attribute_extractor()``.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from pareto_gauge.errors import DimensionMismatch


@dataclass(frozen=True)
class Individual:
    """Read-only view of a single individual in a population.

    Attributes:
        x: Decision variables for this individual, shape (n_vars,).
        objectives: Objective values for this individual, shape (n_obj,).
    """

    x: np.ndarray
    objectives: np.ndarray


@dataclass(frozen=True)
class Population:
    """Immutable struct-of-arrays representation of an evaluated population.

    Attributes:
        x: Decision variables for all individuals, shape (n, n_vars).
        objectives: Objective values, shape (n, n_obj).

    Example:
        >>> x = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        >>> obj = np.array([[0.5, 0.5], [0.3, 0.7], [0.4, 0.6]])
        >>> pop = Population(x=x, objectives=obj)
        >>> len(pop), pop.n_vars, pop.n_obj
        (3, 2, 2)
    """

    x: np.ndarray
    objectives: np.ndarray

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            TypeError: If x or objectives is not a numpy array.
            ValueError: If an array is not 2D.
            DimensionMismatch: If x and objectives disagree on the number of individuals.
        """
        for name in ("x", "objectives"):
            value = getattr(self, name)
            if not isinstance(value, np.ndarray):
                raise TypeError(f"{name} must be a numpy array, got {type(value).__name__}")
            if value.ndim != 2:
                raise ValueError(f"{name} must be 2D, got shape {value.shape}")
        if self.objectives.shape[0] != self.x.shape[0]:
            raise DimensionMismatch(
                f"objectives has {self.objectives.shape[0]} individuals, expected {self.x.shape[0]} to match x"
            )

        object.__setattr__(self, "x", self.x.copy())
        object.__setattr__(self, "objectives", self.objectives.astype(np.float64, copy=True))

    def __len__(self) -> int:
        return self.x.shape[0]

    def __getitem__(self, idx: int) -> Individual:
        """Get a read-only view of a single individual (negative indices allowed).

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
        """
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")
        n = len(self)
        if not -n <= idx < n:
            raise IndexError(f"index {idx} is out of bounds for population with {n} individuals")
        return Individual(x=self.x[idx], objectives=self.objectives[idx])

    def __iter__(self) -> Iterator[Individual]:
        for i in range(len(self)):
            yield Individual(x=self.x[i], objectives=self.objectives[i])

    @property
    def n_vars(self) -> int:
        return self.x.shape[1]

    @property
    def n_obj(self) -> int:
        return self.objectives.shape[1]

    def subset(self, indices: np.ndarray) -> "Population":
        """Return a new Population holding only the given rows."""
        return Population(x=self.x[indices], objectives=self.objectives[indices])
