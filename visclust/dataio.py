"""Reading two-column point files and converting between point lists and matrices."""

from __future__ import annotations

import logging
import re

import numpy as np

log = logging.getLogger(__name__)

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPACE = re.compile(r"\s*")


def _read_number(text, pos):
    """Skip whitespace and read the longest number prefix at `pos`; None if absent."""
    pos = _SPACE.match(text, pos).end()
    match = _NUMBER.match(text, pos)
    if match is None:
        return None
    return float(match.group()), match.end()


def parse_points(lines):
    """Parse the first two numbers of each line into (x, y) pairs.

    Lines that do not start with two whitespace-separated numbers are skipped
    with a warning; anything after the second number is ignored.
    """
    points = []
    for line in lines:
        line = line.rstrip("\n")
        first = _read_number(line, 0)
        second = _read_number(line, first[1]) if first else None
        if second is None:
            log.warning("could not parse data line: %r", line)
            continue
        points.append((first[0], second[0]))
    return points


def load_points(path):
    """Load (x, y) pairs from a whitespace-separated text file."""
    with open(path, encoding="utf-8") as handle:
        return parse_points(handle)


def to_matrix(points):
    """Convert a sequence of (x, y) pairs to an (n, 2) float array."""
    matrix = np.asarray(list(points), dtype=float)
    if matrix.size == 0:
        return np.zeros((0, 2))
    return matrix.reshape(-1, 2)


def from_matrix(matrix):
    """Convert the first two columns of a matrix to a list of (x, y) pairs."""
    array = np.asarray(matrix, dtype=float)
    if array.size == 0:
        return []
    return [(float(row[0]), float(row[1])) for row in array]