"""Run any of the clustering algorithms from one parameter set."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from visclust.affinity import AffinityPropagation
from visclust.agglomerative import Agglomerative
from visclust.dbscan import DBSCAN
from visclust.dpmm import DPMM, InitType
from visclust.kmeans import KMeans
from visclust.spectral import Norm, Spectral


class ClusterType(Enum):
    """The available clustering algorithms."""

    NONE = "none"
    K_MEANS = "k_means"
    DBSCAN = "dbscan"
    AGGLOMERATIVE = "agglomerative"
    DPMM = "dpmm"
    AFFINITY_PROPAGATION = "affinity_propagation"
    SPECTRAL = "spectral"


@dataclass
class ClusteringParams:
    """Settings for every algorithm; each one reads only the fields it needs.

    ``preference=None`` selects the median similarity for affinity propagation.
    ``seed`` makes the randomised algorithms reproducible.
    """

    cluster_type: ClusterType = ClusterType.NONE
    k: int = 3
    eps: float = 1.0
    min_pts: int = 1
    n_clusters: int = 1
    alpha: float = 1.0
    damping: float = 0.5
    preference: float | None = None
    tol: float = 1e-5
    max_iter: int = 100
    sigma: float = 1.0
    norm: Norm = Norm.NONE
    init_type: InitType = InitType.SINGLE
    n_neighbors: int = 0
    seed: int | None = None


@dataclass
class ClusteringResult:
    """Final state of a clustering run and the states it went through."""

    labels: list = field(default_factory=list)
    centers: list = field(default_factory=list)
    point_features: list = field(default_factory=list)
    probs: list = field(default_factory=list)
    roots: list = field(default_factory=list)
    label_history: list = field(default_factory=list)
    center_history: list = field(default_factory=list)
    point_feature_history: list = field(default_factory=list)
    prob_history: list = field(default_factory=list)
    root_history: list = field(default_factory=list)
    num_history: list = field(default_factory=list)


def _k_means(data, params):
    model = KMeans(params.k, data, params.max_iter, params.tol, rng=params.seed).fit()
    return ClusteringResult(
        labels=list(model.labels),
        centers=[list(c) for c in model.centers],
        label_history=model.label_history,
        center_history=model.center_history,
    )


def _dbscan(data, params):
    model = DBSCAN(params.eps, params.min_pts, data).fit()
    return ClusteringResult(
        labels=list(model.labels),
        point_features=list(model.point_features),
        label_history=model.label_history,
        point_feature_history=model.point_feature_history,
    )


def _agglomerative(data, params):
    model = Agglomerative(data, params.n_clusters).fit()
    return ClusteringResult(
        labels=list(model.labels),
        roots=list(model.roots),
        label_history=model.label_history,
        root_history=model.root_history,
        num_history=model.num_history,
    )


def _dpmm(data, params):
    model = DPMM(
        params.alpha,
        data,
        params.max_iter,
        params.init_type,
        params.n_neighbors,
        rng=params.seed,
    ).fit()
    return ClusteringResult(
        labels=list(model.labels),
        probs=list(model.probs),
        label_history=model.label_history,
        prob_history=model.prob_history,
    )


def _affinity(data, params):
    model = AffinityPropagation(
        params.damping, params.tol, data, params.preference, params.max_iter
    ).fit()
    return ClusteringResult(
        labels=list(model.labels),
        centers=[list(c) for c in model.centers],
        label_history=model.label_history,
        center_history=model.center_history,
    )


def _spectral(data, params):
    model = Spectral(params.k, data, params.norm, params.sigma, rng=params.seed).fit()
    return ClusteringResult(
        labels=list(model.labels),
        label_history=model.label_history,
    )


_RUNNERS = {
    ClusterType.K_MEANS: _k_means,
    ClusterType.DBSCAN: _dbscan,
    ClusterType.AGGLOMERATIVE: _agglomerative,
    ClusterType.DPMM: _dpmm,
    ClusterType.AFFINITY_PROPAGATION: _affinity,
    ClusterType.SPECTRAL: _spectral,
}


def run_clustering(data, params):
    """Cluster `data` with the algorithm named by `params`; NONE gives an empty result."""
    kind = ClusterType(params.cluster_type)
    runner = _RUNNERS.get(kind)
    if runner is None:
        return ClusteringResult()
    return runner(np.asarray(data, dtype=float), params)