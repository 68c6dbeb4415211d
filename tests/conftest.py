"""Shared test fixtures for pareto-gauge tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- Small objective matrices with known dominance structure
- Isolated registries populated with the bundled benchmarks
"""

import numpy as np
import pytest

from pareto_gauge.registry import Registry, register_builtins


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_2d_objectives() -> np.ndarray:
    """Simple 2D objectives with clear dominance hierarchy.

    Resulting fronts (minimization):
        Front 0: [1,1]
        Front 1: [2,2], [1,3], [3,1]
        Front 2: [3,3]
    """
    return np.array(
        [
            [1.0, 1.0],  # 0: dominates all (front 0)
            [2.0, 2.0],  # 1: dominated by 0 only (front 1)
            [3.0, 3.0],  # 2: dominated by 0, 1, 3, 4 (front 2)
            [1.0, 3.0],  # 3: dominated by 0 only (front 1)
            [3.0, 1.0],  # 4: dominated by 0 only (front 1)
        ]
    )


@pytest.fixture
def pareto_front_2d() -> np.ndarray:
    """A front where no point dominates another."""
    return np.array(
        [
            [1.0, 4.0],
            [2.0, 3.0],
            [3.0, 2.0],
            [4.0, 1.0],
        ]
    )


@pytest.fixture
def all_dominated_chain() -> np.ndarray:
    """Linear dominance chain: [1,1] > [2,2] > [3,3] > [4,4]."""
    return np.array(
        [
            [1.0, 1.0],
            [2.0, 2.0],
            [3.0, 3.0],
            [4.0, 4.0],
        ]
    )


@pytest.fixture
def random_population(rng: np.random.Generator) -> np.ndarray:
    """60 random 3-objective vectors on a coarse grid, so ties and duplicates occur."""
    return rng.integers(0, 5, size=(60, 3)).astype(np.float64)


@pytest.fixture
def builtin_registries() -> tuple[Registry, Registry]:
    """Fresh problem and loss registries holding the bundled entries."""
    problems = Registry("objective function")
    losses = Registry("loss")
    register_builtins(problems, losses)
    return problems, losses
