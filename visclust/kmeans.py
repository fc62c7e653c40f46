"""Lloyd's k-means with a recorded history of every iteration."""

from __future__ import annotations

import numpy as np


class KMeans:
    """k-means clustering started from k distinct randomly chosen data points."""

    def __init__(self, k, data, max_iter=20, tol=1e-6, rng=None):
        self.data = np.asarray(data, dtype=float)
        if self.data.ndim != 2:
            raise ValueError("Data must be a two-dimensional matrix.")
        n_points = self.data.shape[0]
        if k < 1:
            raise ValueError(f"k must be positive, got {k}.")
        if k > n_points:
            raise ValueError(f"k ({k}) exceeds the number of points ({n_points}).")
        self.k = k
        self.max_iter = max_iter
        self.tol = tol
        self._rng = np.random.default_rng(rng)
        start = self._rng.permutation(n_points)[:k]
        self._centers = self.data[start].copy()
        self.labels = [0] * n_points
        self.centers = self._centers.tolist()
        self.label_history = []
        self.center_history = []

    def distances(self):
        """Euclidean distance from every point to every center, shape (n, k)."""
        point_norms = (self.data**2).sum(axis=1)
        center_norms = (self._centers**2).sum(axis=1)
        squared = (
            point_norms[:, None] + center_norms[None, :] - 2.0 * self.data @ self._centers.T
        )
        return np.sqrt(np.maximum(squared, 0.0))

    def _step(self):
        """Reassign points and recompute centers; return True once converged."""
        labels = np.argmin(self.distances(), axis=1)
        self.labels = labels.tolist()
        counts = np.bincount(labels, minlength=self.k)
        new_centers = np.zeros_like(self._centers)
        np.add.at(new_centers, labels, self.data)
        filled = counts > 0
        new_centers[filled] /= counts[filled, None]
        if np.all(np.abs(new_centers - self._centers) < self.tol):
            return True
        self._centers = new_centers
        return False

    def _record(self):
        self.centers = self._centers.tolist()
        self.label_history.append(list(self.labels))
        self.center_history.append([list(c) for c in self.centers])

    def cost(self):
        """Sum of squared distances from each point to its assigned center."""
        assigned = self._centers[np.asarray(self.labels, dtype=int)]
        return float(((self.data - assigned) ** 2).sum())

    def fit(self):
        """Iterate until the centers stop moving or max_iter is reached."""
        self.label_history = []
        self.center_history = []
        self._record()
        for _ in range(self.max_iter):
            if self._step():
                break
            self._record()
        self.centers = self._centers.tolist()
        return self