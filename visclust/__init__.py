"""Clustering algorithms for point sets that record every step of a run, with point-file loading and label colours."""

__version__ = "0.1.0"