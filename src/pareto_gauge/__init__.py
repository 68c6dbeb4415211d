"""pareto-gauge: Pareto dominance, non-dominated sorting and front indicators.

A numpy implementation of the building blocks used to evaluate the output of
multi-objective optimizers: comparing objective vectors, ranking populations
into non-dominated fronts and scoring a candidate front against a reference
front with the additive epsilon indicator.

Example (ranking a population):
    >>> import numpy as np
    >>> from pareto_gauge import non_dominated_sort
    >>> non_dominated_sort(np.array([[1.0, 1.0], [2.0, 2.0], [0.0, 0.0]]))
    array([1, 2, 0])

Example (scoring a front):
    >>> from pareto_gauge import additive_epsilon
    >>> additive_epsilon([[2.0, 2.0]], [[1.0, 1.0]])
    1.0
"""

from pareto_gauge.errors import DimensionMismatch, EmptyFront, MalformedInput, ParetoGaugeError
from pareto_gauge.evaluation import lift, lift_parallel
from pareto_gauge.extractors import attribute_extractor, identity, item_extractor, objective_matrix
from pareto_gauge.indicators import additive_epsilon, epsilon_contributions
from pareto_gauge.io import ReadOptions, format_vectors, parse_vectors, read_vectors, read_vectors_file
from pareto_gauge.population import Individual, Population
from pareto_gauge.primitives import (
    Dominance,
    compare,
    dominance_matrix,
    dominates,
    fronts_from_ranks,
    non_dominated_sort,
)
from pareto_gauge.protocols import FitnessExtractor
from pareto_gauge.registry import Registry, list_losses, list_problems, register_builtins
from pareto_gauge.results import SortResult, rank_population

__all__ = [
    # Dominance and sorting
    "Dominance",
    "compare",
    "dominates",
    "dominance_matrix",
    "non_dominated_sort",
    "fronts_from_ranks",
    "rank_population",
    "SortResult",
    # Indicators
    "additive_epsilon",
    "epsilon_contributions",
    # Fitness extraction
    "FitnessExtractor",
    "identity",
    "attribute_extractor",
    "item_extractor",
    "objective_matrix",
    # Data structures
    "Population",
    "Individual",
    # Vector I/O
    "ReadOptions",
    "parse_vectors",
    "read_vectors",
    "read_vectors_file",
    "format_vectors",
    # Batch evaluation
    "lift",
    "lift_parallel",
    # Registry system
    "Registry",
    "register_builtins",
    "list_problems",
    "list_losses",
    # Errors
    "ParetoGaugeError",
    "DimensionMismatch",
    "EmptyFront",
    "MalformedInput",
]
