"""Exception types raised by pareto-gauge.

All domain errors derive from ParetoGaugeError. The concrete kinds also
derive from ValueError, so callers that already guard against bad input
with ``except ValueError`` keep working.
"""


class ParetoGaugeError(Exception):
    """Base class for all pareto-gauge errors."""


class DimensionMismatch(ParetoGaugeError, ValueError):
    """Two objective vectors (or a vector and a front) differ in objective count."""


class EmptyFront(ParetoGaugeError, ValueError):
    """An indicator was asked to compare against a front with no points."""


class MalformedInput(ParetoGaugeError, ValueError):
    """A vector stream could not be read at all."""
