import numpy as np

from visclust.dbscan import DBSCAN, PointType

POINTS = np.array(
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


def test_three_groups_found_in_order():
    model = DBSCAN(1.0, 1, POINTS).fit()
    assert model.labels == [0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2]
    assert all(f is PointType.CORE for f in model.point_features)


def test_isolated_point_is_noise():
    data = np.vstack([POINTS, [[100.0, 100.0]]])
    model = DBSCAN(1.0, 1, data).fit()
    assert model.point_features[-1] is PointType.NOISE
    assert model.labels[-1] == -1


def test_margin_points_join_reachable_core():
    model = DBSCAN(1.0, 2, [[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]]).fit()
    assert model.point_features == [PointType.MARGIN, PointType.CORE, PointType.MARGIN]
    assert model.labels == [0, 0, 0]


def test_margin_points_without_core_stay_unlabeled():
    model = DBSCAN(1.0, 2, [[0.0, 0.0], [1.0, 0.0]]).fit()
    assert model.point_features == [PointType.MARGIN, PointType.MARGIN]
    assert model.labels == [-1, -1]
    assert model.label_history == []


def test_history_records_each_assignment():
    model = DBSCAN(1.0, 1, POINTS).fit()
    assert len(model.label_history) == len(POINTS)
    assert model.label_history[-1] == model.labels
    assert len(model.point_feature_history) == len(model.label_history)
    labeled_counts = [sum(1 for x in step if x != -1) for step in model.label_history]
    assert labeled_counts == list(range(1, len(POINTS) + 1))


def test_neighbors_exclude_self_and_are_symmetric():
    model = DBSCAN(1.0, 1, POINTS).fit()
    for i, found in enumerate(model.neighbors):
        assert i not in found
        for j in found:
            assert i in model.neighbors[j]


def test_refit_gives_same_result():
    model = DBSCAN(1.0, 1, POINTS)
    first = list(model.fit().labels)
    assert model.fit().labels == first
    assert len(model.label_history) == len(POINTS)