"""Command line interface for pareto-gauge.

Usage:
    pareto-gauge epsilon reference.txt -n 2 < candidate.txt
    pareto-gauge rank -n 3 < population.txt
    pareto-gauge sample dtlz4 --points 200 --objectives 3 --seed 1 --non-dominated
    pareto-gauge problems

Vectors are read one per line; see ``pareto_gauge.io`` for the exact rules.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

import numpy as np

from pareto_gauge.errors import ParetoGaugeError
from pareto_gauge.extractors import attribute_extractor
from pareto_gauge.indicators import additive_epsilon
from pareto_gauge.io import ReadOptions, format_vectors, read_vectors, read_vectors_file
from pareto_gauge.population import Population
from pareto_gauge.primitives import non_dominated_sort
from pareto_gauge.registry import losses, problems, register_builtins
from pareto_gauge.results import rank_population

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {raw}")
    return value


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {raw}")
    return value


def _non_negative_float(raw: str) -> float:
    value = float(raw)
    if not value >= 0.0:
        raise argparse.ArgumentTypeError(f"must be a non-negative number, got {raw}")
    return value


def _read_options(args: argparse.Namespace) -> ReadOptions:
    return ReadOptions(n_objectives=args.objectives, separator=args.separator, header_lines=args.header_lines)


def _cmd_epsilon(args: argparse.Namespace) -> int:
    options = _read_options(args)
    reference = read_vectors_file(args.reference, options)
    candidate = read_vectors(sys.stdin, options)
    logger.info("Read %d candidate and %d reference vectors", candidate.shape[0], reference.shape[0])
    value = additive_epsilon(candidate, reference, maximize=args.maximize)
    print(repr(value))
    return 0


def _cmd_rank(args: argparse.Namespace) -> int:
    population = read_vectors(sys.stdin, _read_options(args))
    ranks = non_dominated_sort(population, tolerance=args.tolerance, maximize=args.maximize, n_jobs=args.n_jobs)
    for rank in ranks:
        print(int(rank))
    return 0


def _cmd_sample(args: argparse.Namespace) -> int:
    kwargs = {}
    if args.variables is not None:
        kwargs["n_variables"] = args.variables
    if args.objectives is not None:
        kwargs["n_objectives"] = args.objectives
    function = problems.get(args.problem, **kwargs)

    rng = np.random.default_rng(args.seed)
    x = function.bounds.sample(rng, args.points)
    pop = Population(x=x, objectives=function.evaluate_population(x, n_jobs=args.n_jobs))
    logger.info("Evaluated %s on %d points", function, function.evaluations)

    if args.non_dominated:
        result = rank_population(pop, extractor=attribute_extractor("objectives"))
        pop = pop.subset(result.fronts[0])
        logger.info("Kept %d non-dominated points", len(pop))

    sys.stdout.write(format_vectors(pop.objectives, args.separator))
    return 0


def _cmd_problems(args: argparse.Namespace) -> int:
    for name in problems.list():
        print(f"problem {name}")
    for name in losses.list():
        print(f"loss {name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pareto-gauge", description="Compare and rank multi-objective fronts.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    sub = parser.add_subparsers(dest="command", required=True)

    reading = argparse.ArgumentParser(add_help=False)
    reading.add_argument(
        "-n", "--objectives", type=_positive_int, required=True, help="Number of objectives per vector."
    )
    reading.add_argument("-s", "--separator", default=" ", help="Field separator (default: single space).")
    reading.add_argument(
        "--header-lines", type=_non_negative_int, default=0, help="Lines to skip before the data starts."
    )
    reading.add_argument("--maximize", action="store_true", help="Larger objective values are better.")

    eps = sub.add_parser(
        "epsilon", parents=[reading], help="Additive epsilon indicator of the front on stdin against a reference."
    )
    eps.add_argument("reference", help="Path of the reference front file.")
    eps.set_defaults(handler=_cmd_epsilon)

    rank = sub.add_parser("rank", parents=[reading], help="Non-dominated rank of every vector on stdin.")
    rank.add_argument(
        "--tolerance", type=_non_negative_float, default=0.0, help="Margin an objective must beat to count as better."
    )
    rank.add_argument("--n-jobs", type=int, default=None, help="Parallel workers for the pairwise phase.")
    rank.set_defaults(handler=_cmd_rank)

    sample = sub.add_parser("sample", help="Evaluate a benchmark function on random points.")
    sample.add_argument("problem", help="Registered objective function name (see 'problems').")
    sample.add_argument("--points", type=_positive_int, required=True, help="Number of random search points.")
    sample.add_argument("--variables", type=_positive_int, default=None, help="Search space dimension.")
    sample.add_argument("--objectives", type=_positive_int, default=None, help="Objectives (scalable functions).")
    sample.add_argument("--seed", type=int, default=None, help="Random seed.")
    sample.add_argument("--n-jobs", type=int, default=None, help="Parallel evaluation workers.")
    sample.add_argument("--non-dominated", action="store_true", help="Only print the rank-0 vectors.")
    sample.add_argument("-s", "--separator", default=" ", help="Field separator (default: single space).")
    sample.set_defaults(handler=_cmd_sample)

    problems_cmd = sub.add_parser("problems", help="List registered objective functions and losses.")
    problems_cmd.set_defaults(handler=_cmd_problems)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    register_builtins()

    try:
        return args.handler(args)
    except (ParetoGaugeError, KeyError, TypeError, ValueError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        logger.error("%s: %s", type(exc).__name__, message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
