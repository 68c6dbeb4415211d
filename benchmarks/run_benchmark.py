"""Benchmark runner comparing pareto-gauge and Pymoo non-dominated sorting.

Sampled objective vectors of ZDT1, Fonseca and DTLZ4 are ranked with the
sequential and the joblib-parallel pareto-gauge sort, and with Pymoo's
NonDominatedSorting. Every run checks that all three agree on the ranks.

Usage:
    uv run python benchmarks/run_benchmark.py
"""

import json
import logging
import time
from collections import defaultdict
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import numpy as np
from pymoo.util.nds.non_dominated_sorting import NonDominatedSorting

from pareto_gauge import additive_epsilon, non_dominated_sort
from pareto_gauge.registry import problems, register_builtins

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
POP_SIZES = [100, 500, 2000]
PROBLEMS = {
    "zdt1": {"n_variables": 30},
    "fonseca": {"n_variables": 3},
    "dtlz4": {"n_variables": 12, "n_objectives": 3},
}
N_JOBS = 4
N_RUNS = 5
SEEDS = list(range(N_RUNS))


def sample_objectives(problem_name: str, pop_size: int, seed: int) -> np.ndarray:
    """Evaluate a registered problem on uniformly sampled points.

    Args:
        problem_name: Registered objective function name.
        pop_size: Number of points.
        seed: Random seed for reproducibility.

    Returns:
        Objective matrix of shape (pop_size, n_obj).
    """
    function = problems.get(problem_name, **PROBLEMS[problem_name])
    rng = np.random.default_rng(seed)
    return function.evaluate_population(function.bounds.sample(rng, pop_size))


def run_sequential(objectives: np.ndarray) -> np.ndarray:
    return non_dominated_sort(objectives)


def run_parallel(objectives: np.ndarray) -> np.ndarray:
    return non_dominated_sort(objectives, n_jobs=N_JOBS)


def run_pymoo(objectives: np.ndarray) -> np.ndarray:
    _, rank = NonDominatedSorting().do(objectives, return_rank=True)
    return np.asarray(rank, dtype=np.int64)


def timed(runner: Callable[[np.ndarray], np.ndarray], objectives: np.ndarray) -> tuple[np.ndarray, float]:
    start_time = time.perf_counter()
    ranks = runner(objectives)
    return ranks, time.perf_counter() - start_time


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    timestamp = datetime.now(UTC).isoformat()

    metadata = {
        "timestamp": timestamp,
        "parameters": {
            "pop_sizes": POP_SIZES,
            "problems": PROBLEMS,
            "n_jobs": N_JOBS,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
    }

    runners = [
        ("sequential", run_sequential),
        ("joblib", run_parallel),
        ("pymoo", run_pymoo),
    ]

    results = []
    total_runs = len(PROBLEMS) * len(POP_SIZES) * N_RUNS
    current_run = 0

    for problem_name in PROBLEMS:
        for pop_size in POP_SIZES:
            for seed in SEEDS:
                current_run += 1
                logger.info(
                    "Running [%d/%d]: %s with %d points (seed=%d)",
                    current_run,
                    total_runs,
                    problem_name.upper(),
                    pop_size,
                    seed,
                )
                objectives = sample_objectives(problem_name, pop_size, seed)

                reference_ranks = None
                for library_name, runner in runners:
                    ranks, elapsed = timed(runner, objectives)
                    if reference_ranks is None:
                        reference_ranks = ranks
                    elif not np.array_equal(ranks, reference_ranks):
                        raise RuntimeError(f"{library_name} ranks disagree on {problem_name} (seed={seed})")

                    results.append(
                        {
                            "library": library_name,
                            "problem": problem_name.upper(),
                            "pop_size": pop_size,
                            "seed": seed,
                            "n_fronts": int(ranks.max()) + 1,
                            "time_seconds": elapsed,
                        }
                    )

                # Quality of the first front against the whole sample: 0 by construction.
                front = objectives[reference_ranks == 0]
                eps = additive_epsilon(front, objectives)
                logger.info("  Fronts: %d, eps(front, sample) = %.3g", int(reference_ranks.max()) + 1, eps)

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a table of mean sort times per problem and population size.

    Args:
        results: The benchmark results dictionary.
    """
    data = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        data[(r["problem"], r["pop_size"])][r["library"]].append(r["time_seconds"])

    libraries = ["sequential", "joblib", "pymoo"]

    print("\n" + "=" * 70)
    print("BENCHMARK SUMMARY (mean seconds per sort)")
    print("=" * 70)
    print(f"\nParameters: n_jobs={N_JOBS}, runs={N_RUNS}")
    print()

    header = f"{'Problem':<10}{'Points':>8}"
    for lib in libraries:
        header += f"{lib:>15}"
    print(header)
    print("-" * 63)

    for problem, pop_size in sorted(data.keys()):
        row = f"{problem:<10}{pop_size:>8}"
        for lib in libraries:
            times = data[(problem, pop_size)][lib]
            row += f"{np.mean(times):>15.4f}" if times else f"{'N/A':>15}"
        print(row)

    print("-" * 63)
    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting non-dominated sorting benchmark")
    register_builtins()

    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info("Results saved to %s", output_path)

    print_summary(results)


if __name__ == "__main__":
    main()
