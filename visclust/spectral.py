"""Spectral clustering on a Gaussian affinity graph."""

from __future__ import annotations

from enum import Enum

import numpy as np

from visclust.kmeans import KMeans


class Norm(Enum):
    """Which graph Laplacian to use."""

    NONE = "none"
    RW = "rw"
    SYM = "sym"


class Spectral:
    """Embed points with Laplacian eigenvectors and cluster them with k-means."""

    def __init__(self, k, data, norm=Norm.NONE, sigma=1.0, rng=None):
        self.k = k
        self.data = np.asarray(data, dtype=float)
        if self.data.ndim != 2:
            raise ValueError("Data must be a two-dimensional matrix.")
        self.norm = Norm(norm)
        self.sigma = sigma
        self.rng = rng
        self.labels = []
        self.label_history = []

    def affinity(self):
        """Weights exp(-d / (2 sigma^2)) over Euclidean distance d, zero diagonal."""
        diffs = self.data[:, None, :] - self.data[None, :, :]
        dists = np.sqrt((diffs**2).sum(axis=2))
        weights = np.exp(-dists / (2 * self.sigma * self.sigma))
        np.fill_diagonal(weights, 0.0)
        return weights

    def laplacian(self, weights):
        """The Laplacian of `weights` selected by `norm`."""
        weights = np.asarray(weights, dtype=float)
        degree = weights.sum(axis=1)
        identity = np.eye(weights.shape[0])
        positive = degree > 0
        if self.norm is Norm.SYM:
            inv_sqrt = np.zeros_like(degree)
            inv_sqrt[positive] = 1.0 / np.sqrt(degree[positive])
            return identity - inv_sqrt[:, None] * weights * inv_sqrt[None, :]
        if self.norm is Norm.RW:
            inverse = np.zeros_like(degree)
            inverse[positive] = 1.0 / degree[positive]
            return identity - inverse[:, None] * weights
        return np.diag(degree) - weights

    def embedding(self, laplacian):
        """Eigenvectors of the next-smallest eigenvalues, skipping the smallest."""
        laplacian = np.asarray(laplacian, dtype=float)
        n_cols = laplacian.shape[1]
        effective_k = max(1, min(self.k, n_cols - 1))
        if n_cols < effective_k + 1:
            raise ValueError(f"Not enough eigenvectors for K={self.k}")
        _, vectors = np.linalg.eigh(laplacian)
        return vectors[:, 1 : effective_k + 1]

    def fit(self):
        """Cluster the embedded points; return self."""
        weights = self.affinity()
        embedded = self.embedding(self.laplacian(weights))
        model = KMeans(self.k, embedded, rng=self.rng).fit()
        self.labels = list(model.labels)
        self.label_history = [list(step) for step in model.label_history]
        return self