"""Tests for benchmark objective functions and losses."""

import numpy as np
import pytest

from pareto_gauge import DimensionMismatch, non_dominated_sort
from pareto_gauge.objectives import (
    DTLZ4,
    ZDT1,
    ZDT2,
    ZDT3,
    AbsoluteLoss,
    BoxConstraint,
    Fonseca,
    MultiObjectiveFunction,
)
from pareto_gauge.objectives.zdt import _ZDT

# =============================================================================
# TestBoxConstraint
# =============================================================================


class TestBoxConstraint:
    """Tests for BoxConstraint."""

    def test_uniform(self) -> None:
        """Same bounds on every variable."""
        box = BoxConstraint.uniform(3, -1.0, 2.0)
        assert box.dimensions == 3
        np.testing.assert_array_equal(box.lower, [-1.0, -1.0, -1.0])
        np.testing.assert_array_equal(box.upper, [2.0, 2.0, 2.0])

    def test_is_feasible(self) -> None:
        """Points on the boundary are feasible, outside points are not."""
        box = BoxConstraint.uniform(2, 0.0, 1.0)
        assert box.is_feasible(np.array([0.0, 1.0]))
        assert not box.is_feasible(np.array([0.5, 1.1]))
        assert not box.is_feasible(np.array([0.5]))

    def test_closest_feasible(self) -> None:
        """Projection clips each variable."""
        box = BoxConstraint.uniform(2, 0.0, 1.0)
        np.testing.assert_array_equal(box.closest_feasible(np.array([-0.5, 2.0])), [0.0, 1.0])

    def test_sample_inside_box(self, rng: np.random.Generator) -> None:
        """Samples respect the bounds."""
        box = BoxConstraint.uniform(4, -4.0, 4.0)
        x = box.sample(rng, 50)
        assert x.shape == (50, 4)
        assert all(box.is_feasible(row) for row in x)

    def test_inverted_bounds(self) -> None:
        """lower > upper is rejected."""
        with pytest.raises(ValueError, match="lower bound exceeds upper bound"):
            BoxConstraint(lower=np.array([1.0]), upper=np.array([0.0]))

    def test_mismatched_bounds(self) -> None:
        """lower and upper must have the same length."""
        with pytest.raises(DimensionMismatch):
            BoxConstraint(lower=np.zeros(2), upper=np.ones(3))


# =============================================================================
# TestMultiObjectiveFunction (via concrete benchmarks)
# =============================================================================


class TestFunctionInterface:
    """Tests for the shared objective function behaviour."""

    def test_counts_evaluations(self) -> None:
        """Every call is counted, batch evaluations by row."""
        f = ZDT1(n_variables=5)
        f(np.zeros(5))
        f.evaluate_population(np.zeros((4, 5)))
        assert f.evaluations == 5
        f.reset_evaluations()
        assert f.evaluations == 0

    def test_parallel_evaluation_counts_in_caller(self, rng: np.random.Generator) -> None:
        """Counting works when joblib workers do the evaluating."""
        f = Fonseca(n_variables=3)
        x = f.bounds.sample(rng, 6)
        values = f.evaluate_population(x, n_jobs=2)
        np.testing.assert_allclose(values, f.evaluate_population(x))
        assert f.evaluations == 12

    def test_wrong_point_size(self) -> None:
        """A point of the wrong dimension is rejected."""
        with pytest.raises(DimensionMismatch, match="expects 5 variables"):
            ZDT1(n_variables=5)(np.zeros(4))

    def test_wrong_population_shape(self) -> None:
        """A batch of the wrong width is rejected."""
        with pytest.raises(DimensionMismatch):
            ZDT1(n_variables=5).evaluate_population(np.zeros((3, 4)))

    def test_empty_population(self) -> None:
        """No points, no objective vectors."""
        assert ZDT2(n_variables=3).evaluate_population(np.zeros((0, 3))).shape == (0, 2)

    def test_rescale_variables(self) -> None:
        """Changing the dimension rebuilds the box."""
        f = Fonseca()
        f.n_variables = 7
        assert f.bounds.dimensions == 7
        np.testing.assert_array_equal(f.bounds.lower, np.full(7, -4.0))

    def test_fixed_objectives(self) -> None:
        """Only scalable functions accept a new objective count."""
        with pytest.raises(ValueError, match="fixed number of objectives"):
            ZDT1().n_objectives = 3

    def test_flags(self) -> None:
        """Scalability flags match the benchmark definitions."""
        assert DTLZ4().has_scalable_objectives
        assert DTLZ4().has_scalable_dimensionality
        assert not Fonseca().has_scalable_objectives

    def test_missing_evaluate_fails_on_construction(self) -> None:
        """A subclass without _evaluate cannot be instantiated."""

        class Incomplete(MultiObjectiveFunction):
            name = "Incomplete"

        with pytest.raises(TypeError, match="abstract"):
            Incomplete(n_variables=2)

    def test_zdt_without_shape_function_fails_on_construction(self) -> None:
        """A ZDT variant must provide its shape function."""

        class NoShape(_ZDT):
            name = "NoShape"

        with pytest.raises(TypeError, match="abstract"):
            NoShape(n_variables=4)

    def test_names(self) -> None:
        """Each benchmark reports its name."""
        assert [f.name for f in (DTLZ4(), Fonseca(), ZDT1(), ZDT2(), ZDT3())] == [
            "DTLZ4",
            "Fonseca",
            "ZDT1",
            "ZDT2",
            "ZDT3",
        ]


# =============================================================================
# TestDTLZ4
# =============================================================================


class TestDTLZ4:
    """Tests for DTLZ4."""

    def test_defaults(self) -> None:
        """Two objectives, eleven variables in [0, 1]."""
        f = DTLZ4()
        assert f.n_objectives == 2
        assert f.n_variables == 11
        np.testing.assert_array_equal(f.bounds.upper, np.ones(11))

    def test_optimal_points_on_unit_sphere(self, rng: np.random.Generator) -> None:
        """With distance variables at 0.5 the point lies on the unit sphere."""
        f = DTLZ4(n_variables=7, n_objectives=3)
        for _ in range(10):
            x = np.full(7, 0.5)
            x[:2] = rng.uniform(0, 1, size=2)
            values = f(x)
            assert values.shape == (3,)
            np.testing.assert_allclose(np.sum(values**2), 1.0)

    def test_known_value(self) -> None:
        """x = 0 puts all weight on the first objective; g = k * 0.25 with k = 3."""
        f = DTLZ4(n_variables=4, n_objectives=2)
        values = f(np.zeros(4))
        np.testing.assert_allclose(values, [1.75, 0.0], atol=1e-12)

    def test_scale_objectives(self) -> None:
        """The objective count can be changed after construction."""
        f = DTLZ4(n_variables=6)
        f.n_objectives = 4
        assert f(np.full(6, 0.5)).shape == (4,)

    def test_too_few_variables(self) -> None:
        """There must be at least one distance variable."""
        f = DTLZ4(n_variables=2, n_objectives=2)
        f.n_objectives = 3
        with pytest.raises(ValueError, match="needs at least 3 variables"):
            f(np.full(2, 0.5))


# =============================================================================
# TestFonseca
# =============================================================================


class TestFonseca:
    """Tests for the Fonseca-Fleming function."""

    def test_defaults(self) -> None:
        """Three variables in [-4, 4], two objectives."""
        f = Fonseca()
        assert f.n_variables == 3
        assert f.n_objectives == 2
        np.testing.assert_array_equal(f.bounds.lower, np.full(3, -4.0))

    def test_extreme_optimum(self) -> None:
        """x_i = 1/sqrt(n) zeroes the first objective."""
        n = 4
        values = Fonseca(n_variables=n)(np.full(n, 1.0 / np.sqrt(n)))
        assert values[0] == pytest.approx(0.0)
        assert values[1] == pytest.approx(1.0 - np.exp(-4.0))

    def test_symmetry(self) -> None:
        """Negating x swaps the objectives."""
        f = Fonseca(n_variables=3)
        x = np.array([0.3, -1.2, 2.0])
        np.testing.assert_allclose(f(-x), f(x)[::-1])


# =============================================================================
# TestZDT
# =============================================================================


class TestZDT:
    """Tests for ZDT1-3."""

    def test_zdt1_front(self) -> None:
        """On the optimal front f2 = 1 - sqrt(f1)."""
        x = np.zeros(30)
        x[0] = 0.25
        np.testing.assert_allclose(ZDT1()(x), [0.25, 0.5])

    def test_zdt2_front(self) -> None:
        """On the optimal front f2 = 1 - f1^2."""
        x = np.zeros(10)
        x[0] = 0.5
        np.testing.assert_allclose(ZDT2(n_variables=10)(x), [0.5, 0.75])

    def test_zdt3_front(self) -> None:
        """On the optimal front f2 = 1 - sqrt(f1) - f1 sin(10 pi f1)."""
        x = np.zeros(10)
        x[0] = 0.05
        expected = 1 - np.sqrt(0.05) - 0.05 * np.sin(10 * np.pi * 0.05)
        np.testing.assert_allclose(ZDT3(n_variables=10)(x), [0.05, expected])

    def test_too_few_variables(self) -> None:
        """ZDT needs a distance variable."""
        with pytest.raises(ValueError, match="at least 2 variables"):
            ZDT1(n_variables=1)

    @pytest.mark.parametrize("name, cls", [("zdt1", ZDT1), ("zdt2", ZDT2), ("zdt3", ZDT3)])
    def test_agrees_with_pymoo(self, name: str, cls: type, rng: np.random.Generator) -> None:
        """Objective values match pymoo's implementation."""
        problems = pytest.importorskip("pymoo.problems")
        reference = problems.get_problem(name, n_var=12)
        f = cls(n_variables=12)
        x = f.bounds.sample(rng, 20)
        expected = reference.evaluate(x, return_values_of=["F"])
        np.testing.assert_allclose(f.evaluate_population(x), expected, rtol=1e-10, atol=1e-12)

    def test_sampled_fronts_rank(self, rng: np.random.Generator) -> None:
        """Sampled ZDT1 vectors can be ranked directly."""
        f = ZDT1(n_variables=5)
        objectives = f.evaluate_population(f.bounds.sample(rng, 40))
        ranks = non_dominated_sort(objectives)
        assert ranks.shape == (40,)
        assert ranks.min() == 0


# =============================================================================
# TestAbsoluteLoss
# =============================================================================


class TestAbsoluteLoss:
    """Tests for AbsoluteLoss."""

    def test_scalar_outputs(self) -> None:
        """One-dimensional outputs give |label - prediction| summed."""
        loss = AbsoluteLoss()
        assert loss(np.array([[1.0], [2.0]]), np.array([[3.0], [1.0]])) == 3.0

    def test_vector_outputs_use_norm(self) -> None:
        """Each row contributes its Euclidean distance."""
        loss = AbsoluteLoss()
        assert loss(np.array([[0.0, 0.0], [1.0, 1.0]]), np.array([[3.0, 4.0], [1.0, 1.0]])) == 5.0

    def test_single_row(self) -> None:
        """A 1-D label/prediction pair is one row."""
        assert AbsoluteLoss()(np.array([0.0, 0.0]), np.array([0.0, 2.0])) == 2.0

    def test_shape_mismatch(self) -> None:
        """Labels and predictions must align."""
        with pytest.raises(DimensionMismatch):
            AbsoluteLoss()(np.zeros((2, 2)), np.zeros((3, 2)))

    def test_name(self) -> None:
        """The loss reports its name."""
        assert AbsoluteLoss().name == "AbsoluteLoss"
