"""Exact k-nearest-neighbour search over a fixed set of points."""

from __future__ import annotations

import numpy as np


class KNN:
    """Brute-force nearest-neighbour queries against a data matrix."""

    def __init__(self, data):
        self.data = np.asarray(data, dtype=float)
        if self.data.ndim != 2:
            raise ValueError("Data must be a two-dimensional matrix.")
        if self.data.shape[0] == 0 or self.data.shape[1] == 0:
            raise ValueError("Data matrix is empty.")

    def query(self, point, k):
        """Return the indices and Euclidean distances of the k points nearest to `point`.

        Results are ordered by distance; ties keep the lower index first.
        """
        point = np.asarray(point, dtype=float).ravel()
        if point.shape[0] != self.data.shape[1]:
            raise ValueError("Query dimension mismatch.")
        if k < 0 or k > self.data.shape[0]:
            raise ValueError(
                f"k must be between 0 and {self.data.shape[0]}, got {k}."
            )
        squared = ((self.data - point) ** 2).sum(axis=1)
        order = np.argsort(squared, kind="stable")[:k]
        return order.tolist(), np.sqrt(squared[order]).tolist()

    def search(self, k):
        """Run `query` for every stored point; return (all_indices, all_distances)."""
        results = [self.query(row, k) for row in self.data]
        indices = [found for found, _ in results]
        distances = [dists for _, dists in results]
        return indices, distances