"""Reading and writing objective vectors as delimited text.

Each retained line holds one vector. The reader is lenient about individual
lines (blank, short and non-numeric lines are skipped) but strict about the
stream itself: if the stream cannot be read at all, MalformedInput is raised.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import numpy as np

from pareto_gauge.errors import MalformedInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadOptions:
    """How to parse a vector stream.

    Attributes:
        n_objectives: Number of values taken from each line. Required, positive.
        separator: Field separator. Repeated separators count as one.
        header_lines: Number of leading lines to skip before data begins.
    """

    n_objectives: int
    separator: str = " "
    header_lines: int = 0

    def __post_init__(self) -> None:
        if self.n_objectives < 1:
            raise ValueError(f"n_objectives must be positive, got {self.n_objectives}")
        if self.header_lines < 0:
            raise ValueError(f"header_lines must be non-negative, got {self.header_lines}")
        if not self.separator:
            raise ValueError("separator must not be empty")


def _parse_line(line: str, options: ReadOptions) -> np.ndarray | None:
    tokens = [t for t in line.strip().split(options.separator) if t.strip()]
    if len(tokens) < options.n_objectives:
        return None
    try:
        vector = np.array([float(t) for t in tokens[: options.n_objectives]], dtype=np.float64)
    except ValueError:
        vector = None
    if vector is None or np.isnan(vector).any():
        logger.warning("Skipping non-numeric line: %r", line.rstrip("\n"))
        return None
    return vector


def parse_vectors(lines: Iterable[str], options: ReadOptions) -> np.ndarray:
    """Parse text lines into an objective matrix.

    Args:
        lines: Text lines (with or without trailing newlines).
        options: Parsing options.

    Returns:
        Float64 array of shape (n, options.n_objectives), possibly with n = 0.

    Example:
        >>> parse_vectors(["f1 f2", "1 2", "", "3", "4 5 6"], ReadOptions(2, header_lines=1))
        array([[1., 2.],
               [4., 5.]])
    """
    vectors: list[np.ndarray] = []
    skipped = 0
    for lineno, line in enumerate(lines):
        if lineno < options.header_lines:
            continue
        if not line.strip():
            continue
        vector = _parse_line(line, options)
        if vector is None:
            skipped += 1
            continue
        vectors.append(vector)

    if skipped:
        logger.debug("Skipped %d short or malformed lines", skipped)
    if not vectors:
        return np.zeros((0, options.n_objectives), dtype=np.float64)
    return np.stack(vectors)


def read_vectors(stream: TextIO, options: ReadOptions) -> np.ndarray:
    """Read an objective matrix from a text stream.

    Raises:
        MalformedInput: If the stream cannot be read or decoded.
    """
    try:
        lines = stream.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInput(f"cannot read vectors: {exc}") from exc
    return parse_vectors(lines, options)


def read_vectors_file(path: str | Path, options: ReadOptions) -> np.ndarray:
    """Read an objective matrix from a file.

    Raises:
        MalformedInput: If the file is missing, unreadable or not text.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            vectors = read_vectors(fh, options)
    except OSError as exc:
        raise MalformedInput(f"cannot read vectors from {path}: {exc}") from exc
    logger.debug("Read %d vectors from %s", vectors.shape[0], path)
    return vectors


def format_vectors(objectives: np.ndarray, separator: str = " ") -> str:
    """Render an objective matrix as text, one vector per line."""
    return "".join(separator.join(repr(float(v)) for v in row) + "\n" for row in objectives)
