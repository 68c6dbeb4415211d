"""ZDT benchmark functions.

The ZDT (Zitzler-Deb-Thiele) test suite is a standard benchmark for
multi-objective evolutionary algorithms. All problems have:
- n decision variables in [0, 1]
- 2 objectives to minimize
- Known Pareto-optimal fronts (x_i = 0 for i > 0)

References:
    Zitzler, E., Deb, K., & Thiele, L. (2000). Comparison of multiobjective
    evolutionary algorithms: Empirical results. Evolutionary computation, 8(2), 173-195.
"""

from abc import abstractmethod

import numpy as np

from pareto_gauge.objectives.base import MultiObjectiveFunction


class _ZDT(MultiObjectiveFunction):
    def __init__(self, n_variables: int = 30) -> None:
        if n_variables < 2:
            raise ValueError(f"{self.name} needs at least 2 variables, got {n_variables}")
        super().__init__(n_variables, n_objectives=2)

    @abstractmethod
    def _h(self, f1: float, g: float) -> float:
        """Shape function of the second objective."""

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        n = x.shape[0]
        f1 = x[0]
        g = 1 + 9 * np.sum(x[1:]) / (n - 1)
        return np.array([f1, g * self._h(f1, g)])


class ZDT1(_ZDT):
    """ZDT1: convex front, f2 = 1 - sqrt(f1) at g = 1."""

    name = "ZDT1"

    def _h(self, f1: float, g: float) -> float:
        return 1 - np.sqrt(f1 / g)


class ZDT2(_ZDT):
    """ZDT2: concave front, f2 = 1 - f1^2 at g = 1."""

    name = "ZDT2"

    def _h(self, f1: float, g: float) -> float:
        return 1 - (f1 / g) ** 2


class ZDT3(_ZDT):
    """ZDT3: discontinuous front made of several convex pieces."""

    name = "ZDT3"

    def _h(self, f1: float, g: float) -> float:
        return 1 - np.sqrt(f1 / g) - (f1 / g) * np.sin(10 * np.pi * f1)
