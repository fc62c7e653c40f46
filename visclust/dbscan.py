"""Density-based clustering (DBSCAN) with a step-by-step label history."""

from __future__ import annotations

from collections import deque
from enum import Enum

import numpy as np


class PointType(Enum):
    """Role of a point in the density graph."""

    CORE = "core"
    MARGIN = "margin"
    NOISE = "noise"


class DBSCAN:
    """DBSCAN over Euclidean distance; unreached points keep the label -1."""

    def __init__(self, eps, min_pts, data):
        self.eps = eps
        self.min_pts = min_pts
        self.data = np.asarray(data, dtype=float)
        n_points = self.data.shape[0]
        self.labels = [-1] * n_points
        self.point_features = [PointType.NOISE] * n_points
        self.neighbors = [[] for _ in range(n_points)]
        self.label_history = []
        self.point_feature_history = []
        self._visited = [False] * n_points

    def _build_neighborhoods(self):
        diffs = self.data[:, None, :] - self.data[None, :, :]
        squared = (diffs**2).sum(axis=2)
        within = squared <= self.eps * self.eps
        np.fill_diagonal(within, False)
        self.neighbors = [np.flatnonzero(row).tolist() for row in within]
        features = []
        for found in self.neighbors:
            density = len(found)
            if density >= self.min_pts:
                features.append(PointType.CORE)
            elif density > 0:
                features.append(PointType.MARGIN)
            else:
                features.append(PointType.NOISE)
        self.point_features = features

    def _snapshot(self):
        self.label_history.append(list(self.labels))
        self.point_feature_history.append(list(self.point_features))

    def _expand(self, start, label):
        queue = deque([start])
        self._visited[start] = True
        self.labels[start] = label
        self._snapshot()
        while queue:
            current = queue.popleft()
            if self.point_features[current] is not PointType.CORE:
                continue
            for neighbor in self.neighbors[current]:
                if not self._visited[neighbor]:
                    self._visited[neighbor] = True
                    self.labels[neighbor] = label
                    self._snapshot()
                    queue.append(neighbor)

    def fit(self):
        """Label every point reachable from a core point; return self."""
        n_points = self.data.shape[0]
        self.labels = [-1] * n_points
        self._visited = [False] * n_points
        self.label_history = []
        self.point_feature_history = []
        self._build_neighborhoods()
        label = 0
        for index, feature in enumerate(self.point_features):
            if feature is PointType.CORE and not self._visited[index]:
                self._expand(index, label)
                label += 1
        return self