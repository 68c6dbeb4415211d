"""Base classes for benchmark objective functions.

Objective functions are producers: they map a search point (a real vector
inside a box) to an objective vector that the sorting and indicator code
consumes. Each function knows its name, how many objectives and variables it
has, which of those counts can be changed, and how often it was evaluated.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from pareto_gauge.errors import DimensionMismatch
from pareto_gauge.evaluation import lift, lift_parallel


@dataclass(frozen=True)
class BoxConstraint:
    """Axis-aligned box ``lower <= x <= upper`` bounding the search space.

    Attributes:
        lower: Lower bound per variable, shape (n_vars,).
        upper: Upper bound per variable, shape (n_vars,).
    """

    lower: np.ndarray
    upper: np.ndarray

    def __post_init__(self) -> None:
        lower = np.asarray(self.lower, dtype=np.float64)
        upper = np.asarray(self.upper, dtype=np.float64)
        if lower.ndim != 1 or lower.shape != upper.shape:
            raise DimensionMismatch(f"bounds must be 1D of equal length, got {lower.shape} and {upper.shape}")
        if np.any(lower > upper):
            raise ValueError("lower bound exceeds upper bound")
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    @classmethod
    def uniform(cls, n_vars: int, low: float, high: float) -> "BoxConstraint":
        """Create a box with the same bounds on every variable."""
        return cls(lower=np.full(n_vars, low), upper=np.full(n_vars, high))

    @property
    def dimensions(self) -> int:
        return self.lower.shape[0]

    def is_feasible(self, x: np.ndarray) -> bool:
        x = np.asarray(x, dtype=np.float64)
        return x.shape == self.lower.shape and bool(np.all((x >= self.lower) & (x <= self.upper)))

    def closest_feasible(self, x: np.ndarray) -> np.ndarray:
        return np.clip(x, self.lower, self.upper)

    def sample(self, rng: np.random.Generator, n: int) -> np.ndarray:
        """Draw n points uniformly from the box. Shape (n, n_vars)."""
        return rng.uniform(self.lower, self.upper, size=(n, self.dimensions))


class MultiObjectiveFunction(ABC):
    """Base class for multi-objective benchmark functions.

    Subclasses set ``name`` and the box bounds (``low``/``high``) and
    implement ``_evaluate``. Scalable functions flip the
    ``has_scalable_objectives`` / ``has_scalable_dimensionality`` flags.
    """

    name: str = ""
    low: float = 0.0
    high: float = 1.0
    has_scalable_objectives: bool = False
    has_scalable_dimensionality: bool = True

    def __init__(self, n_variables: int, n_objectives: int = 2) -> None:
        if n_objectives < 1:
            raise ValueError(f"n_objectives must be positive, got {n_objectives}")
        self._n_objectives = n_objectives
        self.n_variables = n_variables
        self.evaluations = 0

    @property
    def n_objectives(self) -> int:
        return self._n_objectives

    @n_objectives.setter
    def n_objectives(self, value: int) -> None:
        if not self.has_scalable_objectives:
            raise ValueError(f"{self.name} has a fixed number of objectives ({self._n_objectives})")
        if value < 1:
            raise ValueError(f"n_objectives must be positive, got {value}")
        self._n_objectives = value

    @property
    def n_variables(self) -> int:
        return self.bounds.dimensions

    @n_variables.setter
    def n_variables(self, value: int) -> None:
        if hasattr(self, "bounds") and not self.has_scalable_dimensionality:
            raise ValueError(f"{self.name} has a fixed number of variables ({self.n_variables})")
        if value < 1:
            raise ValueError(f"n_variables must be positive, got {value}")
        self.bounds = BoxConstraint.uniform(value, self.low, self.high)

    @abstractmethod
    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        """Map one validated search point to its objective vector."""

    def _check_point(self, x: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        if x.shape != (self.n_variables,):
            raise DimensionMismatch(f"{self.name} expects {self.n_variables} variables, got shape {x.shape}")
        return x

    def __call__(self, x: np.ndarray) -> np.ndarray:
        """Evaluate one search point. Shape (n_vars,) -> (n_obj,)."""
        x = self._check_point(x)
        self.evaluations += 1
        return self._evaluate(x)

    def evaluate_population(self, x: np.ndarray, n_jobs: int | None = None) -> np.ndarray:
        """Evaluate every row of x. Shape (n, n_vars) -> (n, n_obj).

        Evaluations are counted here, in the calling process, so the counter
        stays correct when the points are evaluated by joblib workers.
        """
        x = np.asarray(x, dtype=np.float64)
        if x.ndim != 2 or x.shape[1] != self.n_variables:
            raise DimensionMismatch(f"{self.name} expects shape (n, {self.n_variables}), got {x.shape}")
        if x.shape[0] == 0:
            return np.zeros((0, self.n_objectives), dtype=np.float64)
        evaluate = lift(self._evaluate) if n_jobs is None or n_jobs == 1 else lift_parallel(self._evaluate, n_jobs)
        values = evaluate(x)
        self.evaluations += x.shape[0]
        return values

    def reset_evaluations(self) -> None:
        self.evaluations = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_variables={self.n_variables}, n_objectives={self.n_objectives})"
