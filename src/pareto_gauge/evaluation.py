"""Batch evaluation helpers.

This module provides the lift functions that turn a per-point function
(objective function, loss, extractor) into one that maps over every row of
a matrix of search points.
"""

from collections.abc import Callable

import numpy as np


def lift(fn: Callable[[np.ndarray], np.ndarray]) -> Callable[[np.ndarray], np.ndarray]:
    """Lift a per-point function to work on a matrix of points.

    Args:
        fn: Function that operates on a single search point.
            Signature: (n_vars,) -> (n_out,)

    Returns:
        A function that operates on all points.
        Signature: (n, n_vars) -> (n, n_out)

    Example:
        >>> evaluate = lift(lambda x: np.array([x.sum(), x.prod()]))
        >>> evaluate(np.array([[1.0, 2.0], [3.0, 4.0]]))
        array([[ 3.,  2.],
               [ 7., 12.]])
    """

    def lifted(x: np.ndarray) -> np.ndarray:
        return np.stack([np.asarray(fn(x[i])) for i in range(x.shape[0])])

    return lifted


def lift_parallel(fn: Callable[[np.ndarray], np.ndarray], n_workers: int) -> Callable[[np.ndarray], np.ndarray]:
    """Lift a per-point function to work on a matrix of points with joblib workers.

    Args:
        fn: Function that operates on a single search point.
            Must be picklable for multiprocessing.
        n_workers: Number of parallel workers. Use -1 for all CPU cores.

    Returns:
        A function that operates on all points in parallel.
        Signature: (n, n_vars) -> (n, n_out)

    Raises:
        ValueError: If n_workers is 0 or below -1.
    """
    if n_workers == 0 or n_workers < -1:
        raise ValueError(f"n_workers must be positive or -1, got {n_workers}")

    from joblib import Parallel, delayed

    def lifted(x: np.ndarray) -> np.ndarray:
        results: list[np.ndarray] = Parallel(n_jobs=n_workers)(  # type: ignore[assignment]
            delayed(fn)(x[i]) for i in range(x.shape[0])
        )
        return np.stack([np.asarray(r) for r in results])

    return lifted
