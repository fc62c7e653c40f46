"""Command line entry point: cluster a set of 2-D points and print the labels."""

from __future__ import annotations

import argparse
import sys

from visclust.cluster import ClusteringParams, ClusterType, run_clustering
from visclust.dataio import load_points, to_matrix
from visclust.dpmm import InitType
from visclust.spectral import Norm

SAMPLE_POINTS = (
    (5.0, 1.0),
    (5.0, 1.2),
    (5.1, 1.1),
    (4.9, 0.9),
    (15.0, 11.0),
    (15.1, 11.1),
    (15.2, 11.3),
    (14.9, 10.9),
    (1.0, 5.0),
    (1.1, 5.1),
    (0.9, 4.9),
)

_DEFAULT_MAX_ITER = {
    ClusterType.K_MEANS: 20,
    ClusterType.DPMM: 100,
    ClusterType.AFFINITY_PROPAGATION: 1000,
}
_DEFAULT_TOL = {ClusterType.K_MEANS: 1e-6}


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="visclust", description="Cluster two-dimensional points."
    )
    parser.add_argument(
        "algorithm",
        choices=[kind.value for kind in ClusterType if kind is not ClusterType.NONE],
    )
    parser.add_argument("--data", help="whitespace-separated x y file; a sample set if omitted")
    parser.add_argument("-k", type=int, default=3, help="number of clusters (k-means, spectral)")
    parser.add_argument("--eps", type=float, default=1.0, help="DBSCAN neighbourhood radius")
    parser.add_argument("--min-pts", type=int, default=1, help="DBSCAN core point density")
    parser.add_argument("--n-clusters", type=int, default=1, help="agglomerative cluster count")
    parser.add_argument("--alpha", type=float, default=1.0, help="DPMM concentration")
    parser.add_argument("--damping", type=float, default=0.5, help="affinity propagation damping")
    parser.add_argument("--preference", type=float, default=None, help="default: median")
    parser.add_argument("--tol", type=float, default=None)
    parser.add_argument("--max-iter", type=int, default=None)
    parser.add_argument("--sigma", type=float, default=1.0, help="spectral kernel width")
    parser.add_argument("--norm", choices=[n.value for n in Norm], default=Norm.NONE.value)
    parser.add_argument(
        "--knn-init", type=int, default=None, metavar="N",
        help="initialise DPMM from N nearest neighbours",
    )
    parser.add_argument("--seed", type=int, default=None)
    return parser


def _validate(parser, args):
    checks = (
        (args.k > 0, "k must be positive"),
        (args.eps > 0, "eps must be positive"),
        (args.min_pts > 0, "min-pts must be positive"),
        (args.n_clusters > 0, "n-clusters must be positive"),
        (args.alpha > 0, "alpha must be positive"),
        (0 <= args.damping < 1, "damping must be in [0, 1)"),
        (args.sigma > 0, "sigma must be positive"),
        (args.knn_init is None or args.knn_init > 0, "knn-init must be positive"),
    )
    for ok, message in checks:
        if not ok:
            parser.error(message)


def main(argv=None):
    """Parse arguments, run the chosen algorithm and print one labelled point per line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _validate(parser, args)
    kind = ClusterType(args.algorithm)

    if args.data is None:
        points = list(SAMPLE_POINTS)
    else:
        try:
            points = load_points(args.data)
        except OSError as exc:
            print(f"cannot open file: {exc}", file=sys.stderr)
            return 1
    if not points:
        print("no data points loaded", file=sys.stderr)
        return 1
    if args.n_clusters > len(points):
        parser.error("n-clusters exceeds the number of points")

    params = ClusteringParams(
        cluster_type=kind,
        k=args.k,
        eps=args.eps,
        min_pts=args.min_pts,
        n_clusters=args.n_clusters,
        alpha=args.alpha,
        damping=args.damping,
        preference=args.preference,
        tol=args.tol if args.tol is not None else _DEFAULT_TOL.get(kind, 1e-5),
        max_iter=args.max_iter if args.max_iter is not None else _DEFAULT_MAX_ITER.get(kind, 100),
        sigma=args.sigma,
        norm=Norm(args.norm),
        init_type=InitType.KNN if args.knn_init is not None else InitType.SINGLE,
        n_neighbors=args.knn_init or 0,
        seed=args.seed,
    )
    try:
        result = run_clustering(to_matrix(points), params)
    except ValueError as exc:
        print(f"clustering failed: {exc}", file=sys.stderr)
        return 1
    if not result.labels:
        print("no labelling produced for these parameters", file=sys.stderr)
        return 1
    for (x, y), label in zip(points, result.labels):
        print(f"{x:g} {y:g}: {label}")
    return 0


if __name__ == "__main__":
    sys.exit(main())