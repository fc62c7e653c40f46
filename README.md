# visclust

Six classic clustering algorithms for point sets. Each one records its
intermediate states, so you can replay a run step by step.

| Algorithm | Class |
| --- | --- |
| k-means | `visclust.kmeans.KMeans` |
| DBSCAN | `visclust.dbscan.DBSCAN` |
| agglomerative clustering, average linkage | `visclust.agglomerative.Agglomerative` |
| Dirichlet process Gaussian mixture, collapsed Gibbs sampling | `visclust.dpmm.DPMM` |
| affinity propagation | `visclust.affinity.AffinityPropagation` |
| spectral clustering | `visclust.spectral.Spectral` |

The package also provides:

- `visclust.knn.KNN`, a brute-force nearest-neighbour search.
- `visclust.dataio`, which reads point files and converts between point lists and matrices.
- `visclust.colors.color_for_label`, a fixed colour table for cluster labels.

## Installation

```
pip install .
```

The only runtime dependency is numpy. To install pytest for the tests as well, use `pip install .[test]`.

## Loading points

A data file holds one point per line, as an x and a y value separated by whitespace. Anything after the second number on a line is ignored. Lines that do not start with two numbers are skipped, and a warning is logged for each.

```python
from visclust.dataio import load_points, parse_points, to_matrix, from_matrix

points = load_points("blobs.data")      # list of (x, y) tuples
X = to_matrix(points)                   # numpy array of shape (n, 2)
points_again = from_matrix(X)           # back to a list of (x, y) tuples
more = parse_points(["1 2", "3.5 -4"])  # works on any iterable of lines
```

## Running an algorithm by name

`visclust.cluster.run_clustering(data, params)` takes the data and a `ClusteringParams`, and returns a `ClusteringResult`. Each algorithm reads only the fields of `ClusteringParams` it needs:

| Field | Default | Used by |
| --- | --- | --- |
| `k` | 3 | k-means, spectral |
| `eps`, `min_pts` | 1.0, 1 | DBSCAN |
| `n_clusters` | 1 | agglomerative |
| `alpha` | 1.0 | DPMM |
| `init_type` | `InitType.SINGLE` | DPMM |
| `n_neighbors` | 0 | DPMM |
| `damping` | 0.5 | affinity propagation |
| `preference` | `None` (median similarity) | affinity propagation |
| `tol` | 1e-5 | affinity propagation, k-means |
| `max_iter` | 100 | affinity propagation, k-means, DPMM |
| `sigma` | 1.0 | spectral |
| `norm` | `Norm.NONE` | spectral |
| `seed` | `None` | k-means, spectral, DPMM (makes them reproducible) |

```python
from visclust.cluster import ClusterType, ClusteringParams, run_clustering

params = ClusteringParams(cluster_type=ClusterType.DBSCAN, eps=1.0, min_pts=1)
result = run_clustering(X, params)
print(result.labels)
print(len(result.label_history), "recorded steps")
```

With `ClusterType.NONE`, the result is empty.

## Using an algorithm class directly

Every class has a `fit()` method that returns the instance:

```python
from visclust.kmeans import KMeans

km = KMeans(3, X, max_iter=20, tol=1e-6, rng=0).fit()
print(km.labels, km.centers, km.cost())
```

## What each result contains

- **k-means** starts from `k` distinct data points chosen at random. It gives `centers` and `center_history`.
- **DBSCAN** marks each point as `PointType.CORE`, `MARGIN` or `NOISE`. It records a snapshot every time a point receives a label. Points that no core point reaches keep the label `-1`.
- **Agglomerative** clustering merges pairs until one cluster remains. After each merge it records the tree roots (`ClusterNode`) and the number of clusters left. `labels` is the labelling at the moment `n_clusters` clusters remained. If no merge reaches that count, `labels` stays empty.
- **DPMM** gives `probs`: the probability with which each point's last assignment was drawn. It stops once the labels are unchanged for three sweeps in a row, or after `max_iter` sweeps. With `init_type=InitType.KNN`, the starting clusters come from `n_neighbors` nearest neighbours; otherwise each point starts in its own cluster.
- **Affinity propagation** works on negative squared distances. Its labels are the indices of the exemplar points, and it gives `centers` and `center_history`.
- **Spectral** clustering weights pairs with `exp(-d / (2 sigma^2))`. The `norm` setting chooses the plain, random-walk or symmetric Laplacian. It runs k-means on the eigenvectors that come after the smallest one.

## Colours

`color_for_label(label)` returns an `(r, g, b)` tuple:

- Label `-1` is grey.
- Label `-2` is black.
- Any other label selects a colour from a fixed table of 30 colours, cycling by the label's absolute value.

## Command line

```
visclust k_means
```

This runs k-means with three clusters on a built-in sample of eleven points. It prints one line per point in the form `x y: label`.

The algorithm argument is one of:

- `k_means`
- `dbscan`
- `agglomerative`
- `dpmm`
- `affinity_propagation`
- `spectral`

The options are:

| Option | Meaning |
| --- | --- |
| `--data FILE` | read the points from a file instead of the built-in sample |
| `-k` | number of clusters for k-means and spectral |
| `--eps`, `--min-pts` | DBSCAN settings |
| `--n-clusters` | agglomerative cluster count |
| `--alpha` | DPMM concentration |
| `--knn-init N` | start the DPMM from N nearest neighbours |
| `--damping`, `--preference` | affinity propagation settings |
| `--tol`, `--max-iter` | convergence settings |
| `--sigma`, `--norm {none,rw,sym}` | spectral settings |
| `--seed` | make randomised runs reproducible |

When `--tol` is not given, k-means uses 1e-6 and the other algorithms use 1e-5. When `--max-iter` is not given, k-means uses 20, affinity propagation uses 1000 and the others use 100.

Invalid settings are reported as usage errors. The command exits with status 1 in these cases:

- the file cannot be read
- no points were loaded
- the algorithm produced no labelling

## What it does not do

The package computes clusterings and their histories, but it does not draw them. It has no plotting, no interactive window and no animation player. Replaying `label_history` and the other histories is left to you.