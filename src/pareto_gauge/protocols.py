"""Protocol definitions for mapping population elements to objective vectors.

Dominance checks, non-dominated sorting and quality indicators all work on
plain objective vectors. Populations coming out of an optimizer rarely look
like that: an individual usually carries its decision variables, some
bookkeeping and, somewhere, its objective values. A FitnessExtractor is the
single capability that bridges the two worlds.

Example usage:
    ```python
    def objectives_of(individual) -> np.ndarray:
        return individual.fitness

    ranks = non_dominated_sort(individuals, extractor=objectives_of)
    eps = additive_epsilon(individuals, reference_front, extractor=objectives_of,
                           reference_extractor=identity)
    ```
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike


@runtime_checkable
class FitnessExtractor(Protocol):
    """Protocol for element -> objective vector mappings.

    Implementations must be pure: the same element always yields the same
    vector, and the element is never modified. Any callable with a matching
    signature qualifies (plain function, lambda, closure or an object with
    ``__call__``).

    Parameters:
        element: One member of a population or front.

    Returns:
        The objective values of the element as a 1-D array-like of floats.

    Example:
        ```python
        def fitness_of(record: dict) -> np.ndarray:
            return np.asarray(record["F"], dtype=float)
        ```
    """

    def __call__(self, element: Any) -> ArrayLike | np.ndarray:
        """Return the objective vector of ``element``."""
        ...
