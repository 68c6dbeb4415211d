"""Tests for Population and Individual."""

import numpy as np
import pytest

from pareto_gauge import DimensionMismatch
from pareto_gauge.population import Individual, Population


@pytest.fixture
def pop() -> Population:
    x = np.array([[0.1, 0.2], [0.3, 0.4], [0.5, 0.6]])
    objectives = np.array([[1.0, 3.0], [2.0, 2.0], [3.0, 1.0]])
    return Population(x=x, objectives=objectives)


class TestPopulation:
    """Tests for Population construction and access."""

    def test_sizes(self, pop: Population) -> None:
        """Length and dimensions come from the arrays."""
        assert len(pop) == 3
        assert pop.n_vars == 2
        assert pop.n_obj == 2

    def test_arrays_are_copied(self) -> None:
        """The population owns its data."""
        x = np.zeros((1, 2))
        objectives = np.ones((1, 2))
        pop = Population(x=x, objectives=objectives)
        x[0, 0] = 5.0
        objectives[0, 0] = 5.0
        assert pop.x[0, 0] == 0.0
        assert pop.objectives[0, 0] == 1.0

    def test_row_count_mismatch(self) -> None:
        """x and objectives must describe the same individuals."""
        with pytest.raises(DimensionMismatch, match="objectives has 2 individuals, expected 1"):
            Population(x=np.zeros((1, 2)), objectives=np.zeros((2, 2)))

    def test_requires_numpy(self) -> None:
        """Lists are rejected."""
        with pytest.raises(TypeError, match="x must be a numpy array"):
            Population(x=[[1.0]], objectives=np.zeros((1, 1)))  # type: ignore[arg-type]

    def test_requires_2d(self) -> None:
        """1D arrays are rejected."""
        with pytest.raises(ValueError, match="objectives must be 2D"):
            Population(x=np.zeros((2, 1)), objectives=np.zeros(2))

    def test_getitem(self, pop: Population) -> None:
        """Indexing returns an Individual view, negative indices included."""
        ind = pop[-1]
        assert isinstance(ind, Individual)
        np.testing.assert_array_equal(ind.x, [0.5, 0.6])
        np.testing.assert_array_equal(ind.objectives, [3.0, 1.0])

    def test_getitem_out_of_bounds(self, pop: Population) -> None:
        """Out of range indices raise IndexError."""
        with pytest.raises(IndexError, match="index 3 is out of bounds"):
            pop[3]

    def test_getitem_requires_int(self, pop: Population) -> None:
        """Slices are not supported by __getitem__."""
        with pytest.raises(TypeError, match="indices must be integers"):
            pop[0:2]  # type: ignore[index]

    def test_iteration(self, pop: Population) -> None:
        """Iteration yields every individual in order."""
        objectives = [ind.objectives.tolist() for ind in pop]
        assert objectives == [[1.0, 3.0], [2.0, 2.0], [3.0, 1.0]]

    def test_subset(self, pop: Population) -> None:
        """subset keeps the selected rows only."""
        sub = pop.subset(np.array([0, 2]))
        assert len(sub) == 2
        np.testing.assert_array_equal(sub.objectives, [[1.0, 3.0], [3.0, 1.0]])
