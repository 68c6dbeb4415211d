"""Result type for non-dominated sorting.

This module provides SortResult, which bundles the objective matrix that was
sorted with the rank of every row, plus rank_population to build one.

SortResult is immutable (frozen dataclass) to enforce functional style.
All numpy arrays are copied on construction to ensure immutability.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from pareto_gauge.extractors import identity, objective_matrix
from pareto_gauge.primitives import fronts_from_ranks, non_dominated_sort
from pareto_gauge.protocols import FitnessExtractor


@dataclass(frozen=True)
class SortResult:
    """Objective vectors together with their non-dominated ranks.

    Attributes:
        objectives: Objective values, shape (n, n_obj), in original order.
        rank: Pareto rank for each row, shape (n,). Rank 0 indicates the
            non-dominated rows.

    Example:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0], [0.0, 0.0]])
        >>> result = SortResult(objectives=objs, rank=np.array([1, 2, 0]))
        >>> result.n_fronts
        3
        >>> result.pareto_front
        array([[0., 0.]])
    """

    objectives: np.ndarray
    rank: np.ndarray

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            TypeError: If objectives or rank are not numpy arrays.
            ValueError: If array shapes are inconsistent.
        """
        if not isinstance(self.objectives, np.ndarray):
            raise TypeError(f"objectives must be a numpy array, got {type(self.objectives).__name__}")
        if self.objectives.ndim != 2:
            raise ValueError(f"objectives must be 2D, got shape {self.objectives.shape}")

        if not isinstance(self.rank, np.ndarray):
            raise TypeError(f"rank must be a numpy array, got {type(self.rank).__name__}")
        if self.rank.ndim != 1:
            raise ValueError(f"rank must be 1D, got shape {self.rank.shape}")
        if self.rank.shape[0] != self.objectives.shape[0]:
            raise ValueError(
                f"rank has {self.rank.shape[0]} elements, expected {self.objectives.shape[0]} to match objectives"
            )
        if not np.issubdtype(self.rank.dtype, np.integer):
            raise ValueError(f"rank must have integer dtype, got {self.rank.dtype}")

        object.__setattr__(self, "objectives", self.objectives.copy())
        object.__setattr__(self, "rank", self.rank.copy())

    def __len__(self) -> int:
        return self.rank.shape[0]

    @property
    def n_fronts(self) -> int:
        """Number of distinct fronts (0 for an empty population)."""
        return int(self.rank.max()) + 1 if len(self) else 0

    @property
    def fronts(self) -> list[np.ndarray]:
        """Indices of each front, in ascending original-index order."""
        return fronts_from_ranks(self.rank)

    def front(self, k: int) -> np.ndarray:
        """Return the objective rows of front ``k``.

        Raises:
            IndexError: If k is not a valid front index.
        """
        if k < 0 or k >= self.n_fronts:
            raise IndexError(f"front {k} is out of bounds for result with {self.n_fronts} fronts")
        return self.objectives[self.rank == k]

    @property
    def pareto_front(self) -> np.ndarray:
        """Objective rows of the non-dominated (rank-0) individuals."""
        return self.objectives[self.rank == 0]


def rank_population(
    population: Iterable[Any] | np.ndarray,
    *,
    extractor: FitnessExtractor = identity,
    tolerance: float = 0.0,
    maximize: bool = False,
    n_jobs: int | None = None,
) -> SortResult:
    """Extract, sort and package a population in one step.

    Accepts the same arguments as non_dominated_sort.

    Example:
        >>> result = rank_population([[1.0, 2.0], [2.0, 1.0], [3.0, 3.0]])
        >>> result.rank
        array([0, 0, 1])
    """
    objectives = objective_matrix(population, extractor)
    rank = non_dominated_sort(objectives, tolerance=tolerance, maximize=maximize, n_jobs=n_jobs)
    return SortResult(objectives=objectives, rank=rank)
