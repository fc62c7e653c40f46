[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visclust"
version = "0.1.0"
description = "Classic clustering algorithms on point sets, with a per-step history of every run"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "clustering",
    "k-means",
    "dbscan",
    "agglomerative",
    "affinity-propagation",
    "spectral-clustering",
    "dirichlet-process",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
visclust = "visclust.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["visclust"]

[tool.pytest.ini_options]
addopts = "-ra"
