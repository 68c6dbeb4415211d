"""Benchmark objective functions and losses that produce vectors to evaluate."""

from pareto_gauge.objectives.base import BoxConstraint, MultiObjectiveFunction
from pareto_gauge.objectives.dtlz import DTLZ4
from pareto_gauge.objectives.fonseca import Fonseca
from pareto_gauge.objectives.loss import AbsoluteLoss
from pareto_gauge.objectives.zdt import ZDT1, ZDT2, ZDT3

__all__ = [
    "BoxConstraint",
    "MultiObjectiveFunction",
    "DTLZ4",
    "Fonseca",
    "ZDT1",
    "ZDT2",
    "ZDT3",
    "AbsoluteLoss",
]
