"""Affinity propagation clustering with a per-iteration history."""

from __future__ import annotations

import logging

import numpy as np

log = logging.getLogger(__name__)

# Value that stands in for the excluded column when taking a row maximum.
_EXCLUDED = -1e9


class AffinityPropagation:
    """Affinity propagation on negative squared Euclidean similarity.

    With ``preference=None`` the self-similarity of every point is set to the
    median of the off-diagonal similarities. Labels are the indices of the
    exemplar points each point is assigned to.
    """

    def __init__(self, damping, tol, data, preference=None, max_iter=1000):
        self.damping = damping
        self.tol = tol
        self.data = np.asarray(data, dtype=float)
        if self.data.ndim != 2:
            raise ValueError("Data must be a two-dimensional matrix.")
        self.preference = preference
        self.max_iter = max_iter
        n_points = self.data.shape[0]
        self._resp = np.zeros((n_points, n_points))
        self._avail = np.zeros((n_points, n_points))
        self.center_indices = []
        self.centers = []
        self.labels = []
        self.center_history = []
        self.label_history = []
        self.n_iter = 0
        self.converged = False

    def similarity(self):
        """Negative squared distances, with the preference on the diagonal."""
        norms = (self.data**2).sum(axis=1)
        sim = -(norms[:, None] + norms[None, :] - 2.0 * self.data @ self.data.T)
        if self.preference is None:
            n_points = sim.shape[0]
            if n_points < 2:
                raise ValueError("A median preference needs at least two points.")
            off_diagonal = np.sort(sim[~np.eye(n_points, dtype=bool)])
            value = off_diagonal[off_diagonal.size // 2]
        else:
            value = self.preference
        np.fill_diagonal(sim, value)
        return sim

    def _new_responsibility(self, sim):
        combined = sim + self._avail
        rows = np.arange(combined.shape[0])
        best_index = np.argmax(combined, axis=1)
        best = combined[rows, best_index]
        masked = combined.copy()
        masked[rows, best_index] = -np.inf
        second = masked.max(axis=1)
        others = np.repeat(best[:, None], combined.shape[1], axis=1)
        others[rows, best_index] = second
        others = np.maximum(others, _EXCLUDED)
        return sim - others

    def _new_availability(self):
        resp = self._resp
        positive = np.maximum(resp, 0.0)
        self_resp = np.diag(resp)
        sums = positive.sum(axis=0) - np.maximum(self_resp, 0.0)
        avail = np.minimum(0.0, self_resp[None, :] + sums[None, :] - positive)
        np.fill_diagonal(avail, sums)
        return avail

    def _pick_centers(self):
        combined = self._resp + self._avail
        n_points = combined.shape[0]
        row_best = np.argmax(combined, axis=1)
        is_exemplar = (np.diag(combined) > 0) & np.isin(np.arange(n_points), row_best)
        self.center_indices = np.flatnonzero(is_exemplar).tolist()
        self.centers = self.data[self.center_indices].tolist()

    def _assign_labels(self):
        if not self.center_indices:
            return []
        combined = self._resp + self._avail
        candidates = np.asarray(self.center_indices)
        best = np.argmax(combined[:, candidates], axis=1)
        return candidates[best].tolist()

    def fit(self):
        """Run message passing until convergence or max_iter; return self."""
        sim = self.similarity()
        n_points = sim.shape[0]
        if n_points == 0:
            raise ValueError("No points to cluster.")
        self._resp = np.zeros((n_points, n_points))
        self._avail = np.zeros((n_points, n_points))
        self.center_history = []
        self.label_history = []
        self.n_iter = 0
        self.converged = False
        for iteration in range(self.max_iter):
            new_resp = self._new_responsibility(sim)
            r_diff = float(np.abs(new_resp - self._resp).max())
            self._resp = self.damping * self._resp + (1 - self.damping) * new_resp

            new_avail = self._new_availability()
            a_diff = float(np.abs(new_avail - self._avail).max())
            self._avail = self.damping * self._avail + (1 - self.damping) * new_avail

            self._pick_centers()
            self.center_history.append([list(c) for c in self.centers])
            self.label_history.append(self._assign_labels())
            self.n_iter = iteration + 1
            if r_diff < self.tol and a_diff < self.tol:
                self.converged = True
                log.info("Converged at iteration %d", iteration)
                break
        self._pick_centers()
        self.labels = self._assign_labels()
        return self