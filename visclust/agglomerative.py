"""Bottom-up hierarchical clustering with average linkage."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field

import numpy as np


@dataclass(eq=False)
class ClusterNode:
    """A node of the merge tree; leaves carry the index of one data point."""

    id: int
    height: int = 0
    left: ClusterNode | None = None
    right: ClusterNode | None = None
    ids: list[int] = field(default_factory=list)

    def __post_init__(self):
        if not self.ids:
            self.ids = [self.id]

    @property
    def is_leaf(self):
        return self.left is None and self.right is None


class Agglomerative:
    """Merge the closest pair of clusters until one remains.

    ``labels`` is the labelling at the moment ``n_clusters`` clusters were left;
    it stays empty if that count is never reached by a merge.
    """

    def __init__(self, data, n_clusters):
        self.data = np.asarray(data, dtype=float)
        if self.data.ndim != 2:
            raise ValueError("Data must be a two-dimensional matrix.")
        self.n_clusters = n_clusters
        self._reset()

    def _reset(self):
        n_points = self.data.shape[0]
        self._nodes = [ClusterNode(i) for i in range(n_points)]
        self._valid = [True] * n_points
        self.roots = list(self._nodes)
        self.labels = []
        self.label_history = []
        self.root_history = []
        self.num_history = []

    def _distances(self):
        diffs = self.data[:, None, :] - self.data[None, :, :]
        return np.sqrt((diffs**2).sum(axis=2))

    def _average_linkage(self, first, second):
        if not first.ids or not second.ids:
            return float("inf")
        return float(self._dists[np.ix_(first.ids, second.ids)].mean())

    def _current_labels(self):
        labels = [0] * self.data.shape[0]
        live = (node for node in self._nodes if self._valid[node.id])
        for label, node in enumerate(live):
            for index in node.ids:
                labels[index] = label
        return labels

    def fit(self):
        """Build the full merge tree, recording every intermediate state; return self."""
        self._reset()
        self._dists = self._distances()
        n_points = self.data.shape[0]
        order = itertools.count()
        heap = [
            (float(self._dists[i, j]), next(order), i, j)
            for i, j in itertools.combinations(range(n_points), 2)
        ]
        heapq.heapify(heap)
        remaining = n_points
        while heap:
            _, _, first_id, second_id = heapq.heappop(heap)
            if not (self._valid[first_id] and self._valid[second_id]):
                continue
            first = self._nodes[first_id]
            second = self._nodes[second_id]
            self.roots = [r for r in self.roots if r is not first and r is not second]
            self._valid[first_id] = False
            self._valid[second_id] = False

            merged = ClusterNode(
                len(self._nodes),
                max(first.height, second.height) + 1,
                first,
                second,
                first.ids + second.ids,
            )
            for node in self._nodes:
                if self._valid[node.id]:
                    distance = self._average_linkage(merged, node)
                    heapq.heappush(heap, (distance, next(order), merged.id, node.id))

            self.roots.append(merged)
            self._nodes.append(merged)
            self._valid.append(True)

            snapshot = self._current_labels()
            self.label_history.append(snapshot)
            self.root_history.append(list(self.roots))
            remaining -= 1
            self.num_history.append(remaining)
            if remaining == self.n_clusters:
                self.labels = snapshot
        return self