"""DTLZ benchmark functions (scalable in variables and objectives).

References:
    Deb, K., Thiele, L., Laumanns, M., & Zitzler, E. (2002). Scalable
    multi-objective optimization test problems. Proceedings of the 2002
    Congress on Evolutionary Computation, 825-830.
"""

import numpy as np

from pareto_gauge.objectives.base import MultiObjectiveFunction


class DTLZ4(MultiObjectiveFunction):
    """DTLZ4: spherical Pareto front with a biased density of solutions.

    The position variables x_0 .. x_{m-2} are raised to the power ``alpha``
    before entering the trigonometric terms, which crowds solutions toward
    the f_m axis. The distance function is

        g = sum over the last k = n - m + 1 variables of (x_i - 0.5)^2

    and the Pareto-optimal front (g = 0) satisfies sum(f_i^2) = 1.

    Args:
        n_variables: Search space dimension (must be >= n_objectives).
        n_objectives: Number of objectives.
        alpha: Exponent applied to the position variables.
    """

    name = "DTLZ4"
    has_scalable_objectives = True

    def __init__(self, n_variables: int = 11, n_objectives: int = 2, alpha: float = 10.0) -> None:
        super().__init__(n_variables, n_objectives)
        self.alpha = alpha

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        m = self.n_objectives
        k = x.shape[0] - m + 1
        if k < 1:
            raise ValueError(f"DTLZ4 needs at least {m} variables for {m} objectives, got {x.shape[0]}")

        g = np.sum((x[-k:] - 0.5) ** 2)
        theta = np.power(x[: m - 1], self.alpha) * (np.pi / 2.0)

        value = np.empty(m, dtype=np.float64)
        for i in range(m):
            f = 1.0 + g
            f *= np.prod(np.cos(theta[: m - i - 1]))
            if i > 0:
                f *= np.sin(theta[m - i - 1])
            value[i] = f
        return value
