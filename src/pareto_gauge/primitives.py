"""Pareto dominance and fast non-dominated sorting.

This module provides the core pure functions for comparing objective vectors:
- Dominance: outcome of comparing two vectors
- compare: scalar Pareto dominance relation
- dominates: boolean shortcut over compare
- dominance_matrix: vectorized pairwise dominance (optionally parallel)
- non_dominated_sort: Deb's fast non-dominated sorting algorithm
- fronts_from_ranks: group element indices by rank

All functions assume minimization unless called with ``maximize=True``.
Components are compared with exact ``<`` / ``==`` unless an explicit
``tolerance`` is given.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pareto_gauge.errors import DimensionMismatch
from pareto_gauge.extractors import identity, objective_matrix
from pareto_gauge.protocols import FitnessExtractor

logger = logging.getLogger(__name__)


class Dominance(Enum):
    """Outcome of comparing vector a against vector b."""

    DOMINATES = "dominates"
    DOMINATED = "dominated"
    NON_DOMINATED = "non-dominated"
    EQUAL = "equal"


def _check_tolerance(tolerance: float) -> None:
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")


def compare(a: ArrayLike, b: ArrayLike, *, tolerance: float = 0.0, maximize: bool = False) -> Dominance:
    """Compare two objective vectors under Pareto dominance.

    a dominates b if and only if:
      - a is at least as good as b in ALL objectives (exact ``<=``)
      - a is better than b by more than ``tolerance`` in AT LEAST ONE objective

    The tolerance only raises the bar for "strictly better", so tolerant
    dominance implies exact dominance and stays acyclic. Vectors whose
    components all differ by at most ``tolerance`` compare EQUAL.

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).
        tolerance: Non-negative tie threshold. 0.0 means exact comparison.
        maximize: Treat larger values as better.

    Returns:
        The relation of a to b.

    Raises:
        DimensionMismatch: If a and b are not 1-D vectors of equal length.
        ValueError: If tolerance is negative or the vectors are empty.

    Examples:
        >>> compare([1.0, 2.0], [2.0, 3.0])
        <Dominance.DOMINATES: 'dominates'>
        >>> compare([1.0, 3.0], [2.0, 2.0])
        <Dominance.NON_DOMINATED: 'non-dominated'>
        >>> compare([1.0, 2.0], [1.0, 2.0])
        <Dominance.EQUAL: 'equal'>
    """
    _check_tolerance(tolerance)
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim != 1 or b.ndim != 1 or a.shape != b.shape:
        raise DimensionMismatch(f"cannot compare vectors of shape {a.shape} and {b.shape}")
    if a.shape[0] == 0:
        raise ValueError("objective vectors must have at least one objective")

    diff = b - a if maximize else a - b

    if np.all(np.abs(diff) <= tolerance):
        return Dominance.EQUAL
    if np.all(diff <= 0) and np.any(diff < -tolerance):
        return Dominance.DOMINATES
    if np.all(diff >= 0) and np.any(diff > tolerance):
        return Dominance.DOMINATED
    return Dominance.NON_DOMINATED


def dominates(a: ArrayLike, b: ArrayLike, *, tolerance: float = 0.0, maximize: bool = False) -> bool:
    """Check if solution a Pareto-dominates solution b.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([2.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 2.0]), np.array([1.0, 2.0]))
        False
    """
    return compare(a, b, tolerance=tolerance, maximize=maximize) is Dominance.DOMINATES


def _dominance_rows(rows: np.ndarray, objectives: np.ndarray, tolerance: float) -> np.ndarray:
    # rows (k, n_obj) against objectives (n, n_obj) -> (k, n)
    diff = rows[:, np.newaxis, :] - objectives[np.newaxis, :, :]
    no_worse = np.all(diff <= 0, axis=2)
    better_somewhere = np.any(diff < -tolerance, axis=2)
    return no_worse & better_somewhere


def dominance_matrix(
    objectives: np.ndarray,
    *,
    tolerance: float = 0.0,
    maximize: bool = False,
    n_jobs: int | None = None,
) -> np.ndarray:
    """Compute pairwise dominance for all individuals.

    Uses broadcasting to compute whether individual i dominates individual j
    for all pairs (i, j). Equal vectors do not dominate each other, so the
    diagonal is always False.

    With ``n_jobs`` set to anything other than None or 1, the rows are split
    into blocks that joblib evaluates in parallel. Each block owns a disjoint
    set of source rows, so the result is identical to the sequential one.

    Args:
        objectives: Objective values for all individuals. Shape (n, n_obj).
        tolerance: Margin a component must beat to count as better (see compare).
        maximize: Treat larger values as better.
        n_jobs: Number of joblib workers, -1 for all cores, None for sequential.

    Returns:
        Boolean array of shape (n, n) where result[i, j] = True iff
        individual i dominates individual j.

    Examples:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 2.0]])
        >>> dom = dominance_matrix(objs)
        >>> bool(dom[0, 1]), bool(dom[1, 0])
        (True, False)
    """
    _check_tolerance(tolerance)
    if objectives.ndim != 2:
        raise DimensionMismatch(f"objectives must be 2D, got shape {objectives.shape}")
    if n_jobs is not None and (n_jobs == 0 or n_jobs < -1):
        raise ValueError(f"n_jobs must be positive or -1, got {n_jobs}")

    signed = -objectives if maximize else objectives
    n = signed.shape[0]

    if n_jobs is None or n_jobs == 1 or n < 2:
        return _dominance_rows(signed, signed, tolerance)

    from joblib import Parallel, cpu_count, delayed

    n_blocks = min(n, cpu_count() if n_jobs == -1 else n_jobs)
    blocks = np.array_split(np.arange(n), n_blocks)
    parts: list[np.ndarray] = Parallel(n_jobs=n_jobs)(  # type: ignore[assignment]
        delayed(_dominance_rows)(signed[block], signed, tolerance) for block in blocks
    )
    return np.vstack(parts)


def non_dominated_sort(
    population: Iterable[Any] | np.ndarray,
    *,
    extractor: FitnessExtractor = identity,
    tolerance: float = 0.0,
    maximize: bool = False,
    n_jobs: int | None = None,
) -> np.ndarray:
    """Assign each individual to a Pareto front using Deb's fast algorithm.

    Phase one builds, from the pairwise dominance matrix, the number of
    individuals dominating each individual and the set each individual
    dominates. Phase two peels fronts: the zero-count individuals form front
    0; removing a front decrements the counts of everything its members
    dominate, and whatever reaches zero forms the next front.

    Time complexity: O(M * N^2) where M = number of objectives, N = population size.

    Args:
        population: Objective matrix of shape (n, n_obj), or any sequence of
            elements understood by ``extractor``.
        extractor: Maps an element to its objective vector.
        tolerance: Margin a component must beat to count as better (see compare).
        maximize: Treat larger values as better.
        n_jobs: Parallelize the pairwise phase with joblib (see dominance_matrix).

    Returns:
        Integer array of shape (n,) where rank[i] is the front index for
        individual i. Rank 0 = non-dominated (first front), rank 1 = second
        front, etc.

    Raises:
        DimensionMismatch: If the extracted vectors differ in length.

    Examples:
        >>> non_dominated_sort(np.array([[1.0, 1.0], [2.0, 2.0], [0.0, 0.0]]))
        array([1, 2, 0])
    """
    objectives = objective_matrix(population, extractor)
    n = objectives.shape[0]

    if n == 0:
        return np.array([], dtype=np.int64)

    dom = dominance_matrix(objectives, tolerance=tolerance, maximize=maximize, n_jobs=n_jobs)

    # domination_count[i] = number of individuals that dominate i
    domination_count = dom.sum(axis=0).astype(np.int64)
    dominated_sets = [np.flatnonzero(dom[i]) for i in range(n)]

    ranks = np.full(n, -1, dtype=np.int64)
    front = np.flatnonzero(domination_count == 0)
    current_rank = 0

    while front.size > 0:
        ranks[front] = current_rank
        next_front: list[int] = []
        for p in front:
            for q in dominated_sets[p]:
                domination_count[q] -= 1
                if domination_count[q] == 0:
                    next_front.append(int(q))
        front = np.array(sorted(next_front), dtype=np.int64)
        current_rank += 1

    logger.debug("Sorted %d individuals into %d fronts", n, current_rank)
    return ranks


def fronts_from_ranks(ranks: np.ndarray) -> list[np.ndarray]:
    """Group individual indices by rank.

    Args:
        ranks: Rank per individual, as returned by non_dominated_sort.

    Returns:
        List where entry k holds the indices of rank-k individuals in
        ascending order. Empty list for empty input.

    Examples:
        >>> fronts_from_ranks(np.array([1, 0, 1, 2]))
        [array([1]), array([0, 2]), array([3])]
    """
    ranks = np.asarray(ranks)
    if ranks.size == 0:
        return []
    return [np.flatnonzero(ranks == k) for k in range(int(ranks.max()) + 1)]
