"""Quality indicators comparing a candidate front with a reference front.

The additive epsilon indicator is the smallest shift eps such that, after
moving every candidate point by eps toward the ideal, each reference point is
weakly dominated by at least one candidate point:

    eps = max over r in R of ( min over c in C of ( max over k of (c_k - r_k) ) )

Lower is better. The value is not floored at zero: a negative result means
the candidate beats the whole reference front by a margin.

References:
    Zitzler, E., Thiele, L., Laumanns, M., Fonseca, C. M., & da Fonseca, V. G.
    (2003). Performance assessment of multiobjective optimizers: An analysis
    and review. IEEE Transactions on Evolutionary Computation, 7(2), 117-132.
"""

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from pareto_gauge.errors import DimensionMismatch, EmptyFront
from pareto_gauge.extractors import identity, objective_matrix
from pareto_gauge.protocols import FitnessExtractor

logger = logging.getLogger(__name__)


def _front_matrices(
    candidate: Iterable[Any] | np.ndarray,
    reference: Iterable[Any] | np.ndarray,
    extractor: FitnessExtractor,
    reference_extractor: FitnessExtractor | None,
) -> tuple[np.ndarray, np.ndarray]:
    cand = objective_matrix(candidate, extractor)
    ref = objective_matrix(reference, extractor if reference_extractor is None else reference_extractor)

    if cand.shape[0] == 0:
        raise EmptyFront("candidate front is empty")
    if ref.shape[0] == 0:
        raise EmptyFront("reference front is empty")
    if cand.shape[1] != ref.shape[1]:
        raise DimensionMismatch(
            f"candidate front has {cand.shape[1]} objectives, reference front has {ref.shape[1]}"
        )
    return cand, ref


def epsilon_contributions(
    candidate: Iterable[Any] | np.ndarray,
    reference: Iterable[Any] | np.ndarray,
    *,
    extractor: FitnessExtractor = identity,
    reference_extractor: FitnessExtractor | None = None,
    maximize: bool = False,
) -> np.ndarray:
    """Compute the shift each reference point needs on its own.

    For every reference point r this is the smallest additive shift that lets
    the single best candidate point weakly dominate r.

    Args:
        candidate: Candidate front, shape (n_c, n_obj) or elements for ``extractor``.
        reference: Reference front, shape (n_r, n_obj) or elements for
            ``reference_extractor``.
        extractor: Maps candidate elements to objective vectors.
        reference_extractor: Maps reference elements to objective vectors.
            Defaults to ``extractor``.
        maximize: Treat larger values as better.

    Returns:
        Float64 array of shape (n_r,).

    Raises:
        EmptyFront: If either front has no points.
        DimensionMismatch: If the fronts differ in objective count.

    Examples:
        >>> epsilon_contributions([[1.0, 1.0]], [[1.0, 5.0], [5.0, 1.0]])
        array([0., 0.])
    """
    cand, ref = _front_matrices(candidate, reference, extractor, reference_extractor)

    # gaps[r, c, k] = c_k - r_k  (r_k - c_k when maximizing)
    gaps = cand[np.newaxis, :, :] - ref[:, np.newaxis, :]
    if maximize:
        gaps = -gaps

    return gaps.max(axis=2).min(axis=1)


def additive_epsilon(
    candidate: Iterable[Any] | np.ndarray,
    reference: Iterable[Any] | np.ndarray,
    *,
    extractor: FitnessExtractor = identity,
    reference_extractor: FitnessExtractor | None = None,
    maximize: bool = False,
) -> float:
    """Compute the additive epsilon indicator of a candidate front.

    Accepts the same arguments as epsilon_contributions; the indicator is
    driven by the worst-served reference point.

    Returns:
        The indicator value. 0.0 when the candidate exactly covers the
        reference; negative when it over-performs.

    Examples:
        >>> additive_epsilon([[2.0, 2.0]], [[1.0, 1.0]])
        1.0
        >>> additive_epsilon([[1.0, 1.0]], [[1.0, 5.0], [5.0, 1.0]])
        0.0
    """
    contributions = epsilon_contributions(
        candidate,
        reference,
        extractor=extractor,
        reference_extractor=reference_extractor,
        maximize=maximize,
    )
    value = float(contributions.max())
    logger.debug("Additive epsilon over %d reference points: %r", contributions.shape[0], value)
    return value
