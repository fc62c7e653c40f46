"""Dirichlet-process Gaussian mixture clustering by collapsed Gibbs sampling."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from visclust.knn import KNN

log = logging.getLogger(__name__)

_CONVERGENCE_WINDOW = 3


class InitType(Enum):
    """How the initial cluster assignment is made."""

    SINGLE = "single"
    KNN = "knn"


@dataclass
class NiwParams:
    """Normal-inverse-Wishart prior: mean, precision scale, degrees of freedom, scale matrix."""

    mu0: np.ndarray
    kappa0: float
    nu0: int
    psi0: np.ndarray


def _standard_prior(dim):
    return NiwParams(np.zeros(dim), 0.0, dim, np.eye(dim))


def softmax(log_values):
    """Normalise log-weights into probabilities without overflow."""
    values = np.asarray(log_values, dtype=float).ravel()
    if values.size == 0:
        raise ValueError("Empty log values in softmax")
    exp_values = np.exp(values - values.max())
    return exp_values / exp_values.sum()


class ClusterStats:
    """Sufficient statistics and posterior predictive of one mixture component."""

    def __init__(self, dim, prior=None):
        self.dim = dim
        self.prior = prior if prior is not None else _standard_prior(dim)
        self.count = 0
        self.points = []
        self.total = np.zeros(dim)
        self.sq_total = np.zeros((dim, dim))
        self.mean = np.asarray(self.prior.mu0, dtype=float).copy()
        self.covariance = np.eye(dim)
        self.df = max(0, int(self.prior.nu0) - dim + 1)
        self._cache = None

    def add(self, point):
        """Add a point and refresh the posterior parameters."""
        point = np.asarray(point, dtype=float).ravel()
        self.count += 1
        self.total = self.total + point
        self.sq_total = self.sq_total + np.outer(point, point)
        self.points.append(point)
        self._update()

    def remove(self, point):
        """Remove one stored copy of `point`; return False if it is not held."""
        point = np.asarray(point, dtype=float).ravel()
        for index, stored in enumerate(self.points):
            if np.array_equal(stored, point):
                break
        else:
            return False
        self.count -= 1
        self.total = self.total - point
        self.sq_total = self.sq_total - np.outer(point, point)
        del self.points[index]
        self._update()
        return True

    def _update(self):
        n = len(self.points)
        if n <= 0:
            return
        prior = self.prior
        kappa = int(prior.kappa0 + n)
        nu = int(prior.nu0 + n)
        mu = self.total / n
        shift = mu - prior.mu0
        scatter = self.sq_total - np.outer(mu, mu) * n
        psi = prior.psi0 + scatter + np.outer(shift, shift) * (prior.kappa0 * n / kappa)
        self.mean = (prior.mu0 * prior.kappa0 + mu * n) / kappa
        self.covariance = psi * ((kappa + 1.0) / (kappa * (nu - self.dim + 1.0)))
        self.df = max(0, nu - self.dim + 1)
        self._cache = None

    def log_posterior_pdf(self, point):
        """Log density of `point` under the component's Student-t predictive."""
        if self._cache is None:
            with np.errstate(invalid="ignore", divide="ignore"):
                log_det = float(np.log(np.linalg.det(self.covariance)))
            self._cache = (log_det, np.linalg.inv(self.covariance))
        log_det, inverse = self._cache
        offset = np.asarray(point, dtype=float).ravel() - self.mean
        mahalanobis = float(offset @ inverse @ offset)
        df = float(self.df)
        dim = self.dim
        return (
            math.lgamma((df + dim) / 2.0)
            - math.lgamma(df / 2.0)
            - (dim / 2.0) * math.log(df * math.pi)
            - 0.5 * log_det
            - ((df + dim) / 2.0) * math.log1p(mahalanobis / df)
        )


class DPMM:
    """Dirichlet process mixture with concentration `alpha`.

    ``labels`` holds the component of every point, ``probs`` the probability
    with which each point's last assignment was drawn.
    """

    def __init__(
        self, alpha, data, max_iter=100, init_type=InitType.SINGLE, n_neighbors=0, rng=None
    ):
        self.alpha = alpha
        self.data = np.asarray(data, dtype=float)
        if self.data.ndim != 2:
            raise ValueError("Data must be a two-dimensional matrix.")
        self.max_iter = max_iter
        self.dim = self.data.shape[1]
        self.prior = _standard_prior(self.dim)
        self._rng = np.random.default_rng(rng)
        n_points = self.data.shape[0]
        self.labels = [0] * n_points
        self.probs = [0.0] * n_points
        self.label_history = []
        self.prob_history = []
        self.n_iter = 0
        self.converged = False
        self.clusters = []
        if InitType(init_type) is InitType.KNN:
            self._knn_init(n_neighbors)
        else:
            self._singleton_init()

    def _new_cluster(self):
        return ClusterStats(self.dim, self.prior)

    def _singleton_init(self):
        self.labels = list(range(self.data.shape[0]))
        self.clusters = []
        for row in self.data:
            cluster = self._new_cluster()
            cluster.add(row)
            self.clusters.append(cluster)

    def _knn_init(self, k):
        n_points = self.data.shape[0]
        indices, _ = KNN(self.data).search(k)
        labels = [-1] * n_points
        visited = [False] * n_points
        current = 0
        for i in range(n_points):
            if visited[i]:
                continue
            labels[i] = current
            visited[i] = True
            for neighbor in indices[i]:
                if not visited[neighbor]:
                    labels[neighbor] = current
                    visited[neighbor] = True
            current += 1
        log.info("Initialized with %d clusters.", current)
        self.labels = labels
        self.clusters = [self._new_cluster() for _ in range(current)]
        for label, row in zip(labels, self.data):
            self.clusters[label].add(row)

    def _remove(self, i):
        k = self.labels[i]
        if not 0 <= k < len(self.clusters):
            return
        self.clusters[k].remove(self.data[i])
        if self.clusters[k].count <= 0:
            del self.clusters[k]
            self.labels = [z - 1 if z > k else z for z in self.labels]

    def _sweep(self):
        n_points = self.data.shape[0]
        denominator = n_points + self.alpha - 1
        for i, point in enumerate(self.data):
            self._remove(i)
            log_weights = [
                math.log(cluster.count / denominator) + cluster.log_posterior_pdf(point)
                for cluster in self.clusters
            ]
            log_weights.append(
                math.log(self.alpha / denominator)
                + self._new_cluster().log_posterior_pdf(point)
            )
            probs = softmax(log_weights)
            choice = int(self._rng.choice(len(probs), p=probs))
            self.probs[i] = float(probs[choice])
            if choice == len(self.clusters):
                self.clusters.append(self._new_cluster())
            self.labels[i] = choice
            self.clusters[choice].add(point)

    def fit(self):
        """Sweep until the labels are unchanged three times running or max_iter; return self."""
        recent = []
        for iteration in range(self.max_iter):
            self._sweep()
            self.label_history.append(list(self.labels))
            self.prob_history.append(list(self.probs))
            self.n_iter = iteration + 1
            recent.append(list(self.labels))
            if len(recent) > _CONVERGENCE_WINDOW:
                recent.pop(0)
            if len(recent) >= _CONVERGENCE_WINDOW and all(
                step == recent[0] for step in recent
            ):
                self.converged = True
                log.info("Converged after %d iterations.", iteration)
                break
        return self