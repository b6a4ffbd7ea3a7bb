import matplotlib

matplotlib.use("Agg")

import pytest


TRAIN = [[0, 0], [1, 0], [0, 1], [10, 10], [11, 10], [10, 11]]
TRAIN_LABELS = [0, 0, 0, 1, 1, 1]
TEST = [[0.5, 0.5], [10.5, 10.5], [1, 1], [9, 9]]
TEST_LABELS = [0, 1, 1, 1]


def write_rows(path, rows):
    path.write_text("\n".join(" ".join(str(v) for v in row) for row in rows) + "\n")
    return str(path)


@pytest.fixture
def dataset_files(tmp_path):
    return {
        "train_data": write_rows(tmp_path / "train_data.txt", TRAIN),
        "train_labels": write_rows(tmp_path / "train_label.txt", [TRAIN_LABELS]),
        "test_data": write_rows(tmp_path / "test_data.txt", TEST),
        "test_labels": write_rows(tmp_path / "test_label.txt", [[l] for l in TEST_LABELS]),
        "output": str(tmp_path / "output.txt"),
    }
