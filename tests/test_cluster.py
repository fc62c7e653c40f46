import numpy as np
import pytest

from visclust.cluster import ClusteringParams, ClusteringResult, ClusterType, run_clustering
from visclust.dbscan import PointType

SAMPLE = np.array(
    [
        [5.0, 1.0],
        [5.0, 1.2],
        [5.1, 1.1],
        [4.9, 0.9],
        [15.0, 11.0],
        [15.1, 11.1],
        [15.2, 11.3],
        [14.9, 10.9],
        [1.0, 5.0],
        [1.1, 5.1],
        [0.9, 4.9],
    ]
)

GROUPS = {frozenset(range(0, 4)), frozenset(range(4, 8)), frozenset(range(8, 11))}


def _partition(labels):
    groups = {}
    for index, label in enumerate(labels):
        groups.setdefault(label, set()).add(index)
    return {frozenset(g) for g in groups.values()}


def test_none_gives_empty_result():
    result = run_clustering(SAMPLE, ClusteringParams())
    assert result == ClusteringResult()


def test_string_cluster_type_is_accepted():
    result = run_clustering(SAMPLE, ClusteringParams(cluster_type="dbscan"))
    assert _partition(result.labels) == GROUPS


def test_unknown_cluster_type_raises():
    with pytest.raises(ValueError):
        run_clustering(SAMPLE, ClusteringParams(cluster_type="nonsense"))


def test_dbscan_sample():
    params = ClusteringParams(cluster_type=ClusterType.DBSCAN, eps=1.0, min_pts=1)
    result = run_clustering(SAMPLE, params)
    assert result.labels == [0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2]
    assert result.point_features == [PointType.CORE] * 11
    assert len(result.label_history) == len(result.point_feature_history)
    assert result.label_history[-1] == result.labels
    assert result.centers == []


def test_k_means_centers_are_means_of_their_points():
    params = ClusteringParams(cluster_type=ClusterType.K_MEANS, k=3, max_iter=20, seed=7)
    result = run_clustering(SAMPLE, params)
    assert len(result.labels) == len(SAMPLE)
    assert set(result.labels) <= {0, 1, 2}
    assert len(result.label_history) == len(result.center_history)
    labels = np.asarray(result.labels)
    for label in set(result.labels):
        expected = SAMPLE[labels == label].mean(axis=0)
        assert result.centers[label] == pytest.approx(expected.tolist(), abs=1e-5)


def test_k_means_too_many_clusters_raises():
    params = ClusteringParams(cluster_type=ClusterType.K_MEANS, k=len(SAMPLE) + 1)
    with pytest.raises(ValueError):
        run_clustering(SAMPLE, params)


def test_agglomerative_three_clusters():
    params = ClusteringParams(cluster_type=ClusterType.AGGLOMERATIVE, n_clusters=3)
    result = run_clustering(SAMPLE, params)
    assert _partition(result.labels) == GROUPS
    assert result.num_history == list(range(len(SAMPLE) - 1, 0, -1))
    assert len(result.roots) == 1
    assert sorted(result.roots[0].ids) == list(range(len(SAMPLE)))
    assert len(result.root_history) == len(result.label_history) == len(result.num_history)


def test_affinity_labels_point_at_centers():
    params = ClusteringParams(
        cluster_type=ClusterType.AFFINITY_PROPAGATION, damping=0.5, tol=1e-5, max_iter=1000
    )
    result = run_clustering(SAMPLE, params)
    assert len(result.labels) == len(SAMPLE)
    assert len(result.center_history) == len(result.label_history)
    centers = [tuple(c) for c in result.centers]
    for label in result.labels:
        assert tuple(SAMPLE[label]) in centers


def test_dpmm_is_reproducible_with_seed():
    params = ClusteringParams(cluster_type=ClusterType.DPMM, alpha=1.0, max_iter=10, seed=3)
    first = run_clustering(SAMPLE, params)
    second = run_clustering(SAMPLE, params)
    assert first.labels == second.labels
    assert first.probs == second.probs
    assert len(first.labels) == len(SAMPLE)
    assert all(0.0 < p <= 1.0 for p in first.probs)
    assert 1 <= len(first.label_history) <= 10
    assert len(first.prob_history) == len(first.label_history)


def test_spectral_labels_in_range():
    params = ClusteringParams(cluster_type=ClusterType.SPECTRAL, k=3, seed=1)
    result = run_clustering(SAMPLE, params)
    assert len(result.labels) == len(SAMPLE)
    assert set(result.labels) <= {0, 1, 2}
    assert result.label_history
    assert result.center_history == []