"""Bi-objective benchmark function of Fonseca and Fleming.

References:
    Fonseca, C. M., & Fleming, P. J. (1998). Multiobjective optimization and
    multiple constraint handling with evolutionary algorithms - Part II:
    Application example. IEEE Transactions on Systems, Man, and Cybernetics,
    Part A: Systems and Humans, 28(1), 38-47.
"""

import numpy as np

from pareto_gauge.objectives.base import MultiObjectiveFunction


class Fonseca(MultiObjectiveFunction):
    """Fonseca-Fleming: two objectives, concave front, box [-4, 4]^n.

    f1 = 1 - exp(-sum (x_i - 1/sqrt(n))^2)
    f2 = 1 - exp(-sum (x_i + 1/sqrt(n))^2)
    """

    name = "Fonseca"
    low = -4.0
    high = 4.0

    def __init__(self, n_variables: int = 3) -> None:
        super().__init__(n_variables, n_objectives=2)

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        d = 1.0 / np.sqrt(x.shape[0])
        return np.array(
            [
                1.0 - np.exp(-np.sum((x - d) ** 2)),
                1.0 - np.exp(-np.sum((x + d) ** 2)),
            ]
        )
