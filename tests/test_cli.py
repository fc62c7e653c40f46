import pytest

from visclust.cli import SAMPLE_POINTS, main


def _labels(output):
    lines = output.strip().splitlines()
    return [int(line.rsplit(":", 1)[1]) for line in lines]


def test_dbscan_on_sample(capsys):
    assert main(["dbscan"]) == 0
    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert len(lines) == len(SAMPLE_POINTS)
    assert lines[0].startswith("5 1:")
    assert _labels(out) == [0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2]


def test_k_means_on_sample(capsys):
    assert main(["k_means", "--seed", "3"]) == 0
    labels = _labels(capsys.readouterr().out)
    assert len(labels) == len(SAMPLE_POINTS)
    assert set(labels) <= {0, 1, 2}


def test_dpmm_with_knn_init(capsys):
    assert main(["dpmm", "--seed", "5", "--max-iter", "5", "--knn-init", "2"]) == 0
    labels = _labels(capsys.readouterr().out)
    assert len(labels) == len(SAMPLE_POINTS)
    assert min(labels) >= 0


def test_agglomerative_from_file(tmp_path, capsys):
    path = tmp_path / "points.data"
    path.write_text("0 0\n0 0.1\n10 10\n10 10.1\n", encoding="utf-8")
    assert main(["agglomerative", "--data", str(path), "--n-clusters", "2"]) == 0
    labels = _labels(capsys.readouterr().out)
    assert labels[0] == labels[1]
    assert labels[2] == labels[3]
    assert labels[0] != labels[2]


def test_missing_file_fails(tmp_path, capsys):
    assert main(["dbscan", "--data", str(tmp_path / "absent.data")]) == 1
    assert "cannot open file" in capsys.readouterr().err


def test_empty_file_fails(tmp_path, capsys):
    path = tmp_path / "empty.data"
    path.write_text("", encoding="utf-8")
    assert main(["dbscan", "--data", str(path)]) == 1
    assert "no data points" in capsys.readouterr().err


def test_unreached_cluster_count_fails(capsys):
    assert main(["agglomerative", "--n-clusters", str(len(SAMPLE_POINTS))]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["dbscan", "--eps", "-1"],
        ["k_means", "-k", "0"],
        ["affinity_propagation", "--damping", "1"],
        ["agglomerative", "--n-clusters", "100"],
        ["unknown"],
    ],
)
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2