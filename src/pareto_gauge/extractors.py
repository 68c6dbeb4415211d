"""Fitness extractors and objective-matrix construction.

This module provides the stock FitnessExtractor implementations and the
single function every algorithm uses to turn a population into a validated
``(n, n_obj)`` float matrix:

- identity: elements already are objective vectors
- attribute_extractor: elements expose their objectives as an attribute
- item_extractor: elements are mappings holding their objectives under a key
- objective_matrix: extract, validate and stack a whole population
"""

from collections.abc import Hashable, Iterable
from typing import Any

import numpy as np

from pareto_gauge.errors import DimensionMismatch
from pareto_gauge.protocols import FitnessExtractor


def identity(element: Any) -> Any:
    """Return the element unchanged (elements are objective vectors)."""
    return element


def attribute_extractor(name: str = "objectives") -> FitnessExtractor:
    """Create an extractor reading the objective vector from an attribute.

    Args:
        name: Attribute holding the objective values (default: "objectives").

    Returns:
        A FitnessExtractor.

    Example:
        >>> pop = Population(x=np.zeros((2, 3)), objectives=np.array([[1.0, 2.0], [2.0, 1.0]]))
        >>> non_dominated_sort(list(pop), extractor=attribute_extractor())
        array([0, 0])
    """

    def extract(element: Any) -> Any:
        try:
            return getattr(element, name)
        except AttributeError:
            raise TypeError(f"{type(element).__name__} has no attribute '{name}'") from None

    return extract


def item_extractor(key: Hashable) -> FitnessExtractor:
    """Create an extractor reading the objective vector from ``element[key]``."""

    def extract(element: Any) -> Any:
        return element[key]

    return extract


def _as_vector(value: Any) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64)
    if vector.ndim != 1:
        raise DimensionMismatch(f"objective vector must be 1D, got shape {vector.shape}")
    return vector


def objective_matrix(elements: Iterable[Any] | np.ndarray, extractor: FitnessExtractor = identity) -> np.ndarray:
    """Extract the objective vectors of a population into a fresh matrix.

    Args:
        elements: Population or front. Either a 2-D array (one row per
            element) or any iterable of elements understood by ``extractor``.
        extractor: Maps an element to its objective vector.

    Returns:
        Float64 array of shape (n, n_obj). Always a copy; the input is never
        modified. An empty iterable gives shape (0, 0).

    Raises:
        DimensionMismatch: If an extracted vector is not 1-D or its length
            differs from the first vector's.
        ValueError: If vectors have no components or contain NaN.

    Examples:
        >>> objective_matrix([[1, 2], [3, 4]])
        array([[1., 2.],
               [3., 4.]])
        >>> objective_matrix([[1, 2], [3, 4, 5]])
        Traceback (most recent call last):
        ...
        pareto_gauge.errors.DimensionMismatch: objective vector 1 has 3 objectives, expected 2
    """
    if isinstance(elements, np.ndarray) and extractor is identity:
        if elements.size == 0 and elements.ndim != 2:
            return np.zeros((0, 0), dtype=np.float64)
        if elements.ndim != 2:
            raise DimensionMismatch(f"objectives must be 2D, got shape {elements.shape}")
        matrix = np.array(elements, dtype=np.float64, copy=True)
    else:
        vectors: list[np.ndarray] = []
        for i, element in enumerate(elements):
            vector = _as_vector(extractor(element))
            if vectors and vector.shape[0] != vectors[0].shape[0]:
                raise DimensionMismatch(
                    f"objective vector {i} has {vector.shape[0]} objectives, expected {vectors[0].shape[0]}"
                )
            vectors.append(vector)
        if not vectors:
            return np.zeros((0, 0), dtype=np.float64)
        matrix = np.stack(vectors)

    if matrix.shape[0] > 0 and matrix.shape[1] == 0:
        raise ValueError("objective vectors must have at least one objective")
    if np.isnan(matrix).any():
        raise ValueError("objective vectors must not contain NaN")
    return matrix
