from pathlib import Path
from typing import Optional, get_type_hints

import numpy as np
import pytest

from knn_classifier.inference import (
    FEATURE_SIZE,
    VARIANTS,
    KNNConfig,
    build_config,
    inference,
    main,
    parse_args,
)


def small_config(dataset_files, **kwargs):
    params = dict(feature_size=2, train_size=6, test_size=4,
                  train_data=dataset_files["train_data"],
                  train_labels=dataset_files["train_labels"],
                  test_data=dataset_files["test_data"],
                  test_labels=dataset_files["test_labels"],
                  output=dataset_files["output"])
    params.update(kwargs)
    return KNNConfig(**params)


class TestPipeline:

    def test_baseline(self, dataset_files, capsys):
        predictions, acc = inference(small_config(dataset_files))
        np.testing.assert_array_equal(predictions, [0, 1, 0, 1])
        assert acc == 75.0
        assert "Accuracy: 75.0%" in capsys.readouterr().out
        assert Path(dataset_files["output"]).read_text() == "0 1 0 1 "

    def test_normalized_manhattan(self, dataset_files):
        config = small_config(dataset_files, k=3, metric="manhattan", normalize=True)
        predictions, acc = inference(config)
        np.testing.assert_array_equal(predictions, [0, 1, 0, 1])
        assert acc == 75.0

    def test_k_larger_than_train_set(self, dataset_files):
        with pytest.raises(ValueError):
            inference(small_config(dataset_files, k=7))

    def test_plot_to_file(self, dataset_files, tmp_path):
        path = tmp_path / "confusion.png"
        inference(small_config(dataset_files, plot=True, plot_path=str(path)))
        assert path.exists()


class TestCommandLine:

    def test_presets(self):
        assert build_config(parse_args([])) == VARIANTS["baseline"]
        improved = build_config(parse_args(["--variant", "improved"]))
        assert (improved.k, improved.metric, improved.normalize) == (7, "manhattan", True)
        assert improved.output == "output2.txt"
        assert improved.feature_size == FEATURE_SIZE

    def test_overrides(self):
        config = build_config(parse_args(["--variant", "improved", "--k", "3",
                                          "--no-normalize", "--tie-break", "first"]))
        assert (config.k, config.metric, config.normalize) == (3, "manhattan", False)
        assert config.tie_break == "first"

    def test_main(self, dataset_files):
        status = main(["--train-data", dataset_files["train_data"],
                       "--train-labels", dataset_files["train_labels"],
                       "--test-data", dataset_files["test_data"],
                       "--test-labels", dataset_files["test_labels"],
                       "--output", dataset_files["output"],
                       "--feature-size", "2", "--train-size", "6", "--test-size", "4"])
        assert status == 0
        assert Path(dataset_files["output"]).read_text() == "0 1 0 1 "

    def test_main_strict_missing_files(self, tmp_path, capsys):
        status = main(["--strict", "--train-data", str(tmp_path / "nope.txt")])
        assert status == 1
        assert "[ERROR] Cannot load" in capsys.readouterr().out


class TestEdgeCases:

    def test_empty_test_set(self, dataset_files, tmp_path, capsys):
        empty = tmp_path / "empty.txt"
        empty.write_text("")
        config = small_config(dataset_files, test_size=0)
        config.test_data = config.test_labels = str(empty)
        predictions, acc = inference(config)
        assert len(predictions) == 0
        assert acc == 0
        assert "No samples to evaluate" in capsys.readouterr().out
        assert Path(dataset_files["output"]).read_text() == ""

    def test_bad_k_rejected_without_test_rows(self, dataset_files, tmp_path):
        empty = tmp_path / "empty.txt"
        empty.write_text("")
        config = small_config(dataset_files, k=7, test_size=0)
        config.test_data = config.test_labels = str(empty)
        with pytest.raises(ValueError, match="k must be between 1 and 6"):
            inference(config)

    def test_unwritable_output(self, dataset_files, tmp_path, capsys):
        status = main(["--train-data", dataset_files["train_data"],
                       "--train-labels", dataset_files["train_labels"],
                       "--test-data", dataset_files["test_data"],
                       "--test-labels", dataset_files["test_labels"],
                       "--output", str(tmp_path / "missing_dir" / "out.txt"),
                       "--feature-size", "2", "--train-size", "6", "--test-size", "4"])
        assert status == 1
        assert "[ERROR]" in capsys.readouterr().out

    def test_plot_path_is_optional(self):
        assert get_type_hints(KNNConfig)["plot_path"] == Optional[str]
