import argparse
import sys
from dataclasses import dataclass, replace
from typing import Optional

from .knn_utils import DISTANCES, TIE_BREAKS, check_k, get_distance, predict_all
from .metrics import accuracy, display_metrics, plot_confusion_matrix
from .utils import load_dataset, normalize_features, write_labels

# ============== CONFIGURATION ==============
TRAIN_DATA = "train_data.txt"
TRAIN_LABELS = "train_label.txt"
TEST_DATA = "test_data.txt"
TEST_LABELS = "test_label.txt"
FEATURE_SIZE = 61
TRAIN_SIZE = 200
TEST_SIZE = 200


@dataclass
class KNNConfig:
    k: int = 1
    metric: str = "euclidean"
    normalize: bool = False
    output: str = "output1.txt"
    tie_break: str = "lowest"
    train_data: str = TRAIN_DATA
    train_labels: str = TRAIN_LABELS
    test_data: str = TEST_DATA
    test_labels: str = TEST_LABELS
    feature_size: int = FEATURE_SIZE
    train_size: int = TRAIN_SIZE
    test_size: int = TEST_SIZE
    strict: bool = False
    plot: bool = False
    plot_path: Optional[str] = None


VARIANTS = {
    "baseline": KNNConfig(k=1, metric="euclidean", normalize=False, output="output1.txt"),
    "improved": KNNConfig(k=7, metric="manhattan", normalize=True, output="output2.txt"),
}


def inference(config):
    """
    Run the kNN pipeline described by config.
    Returns (predictions, accuracy in percent).
    """
    distance = get_distance(config.metric)

    # ============== 1. Load data ==============
    data = load_dataset(config.train_data, config.train_labels,
                        config.test_data, config.test_labels,
                        config.feature_size, config.train_size, config.test_size,
                        strict=config.strict)
    print(f"Data loaded: train={data.train.shape}, test={data.test.shape}")
    print(f"k={config.k}, metric={config.metric}, normalize={config.normalize}\n")

    # ============== 2. Normalization ==============
    # each split uses its own column statistics
    if config.normalize:
        normalize_features(data.train)
        normalize_features(data.test)

    # ============== 3. Prediction ==============
    check_k(config.k, len(data.train))
    predictions = predict_all(data.test, data.train, data.train_labels,
                              k=config.k, distance=distance, tie_break=config.tie_break)

    # ============== 4. Metrics ==============
    _, _, acc = accuracy(data.test_labels, predictions)
    acc_pct = acc * 100
    print(f"Accuracy: {acc_pct}%")
    conf, classes = display_metrics(data.test_labels, predictions)
    if config.plot and classes:
        plot_confusion_matrix(conf, classes, config.plot_path)

    # ============== 5. Output ==============
    write_labels(predictions, config.output)
    print(f"Predictions written to {config.output}")
    return predictions, acc_pct


def build_config(args):
    overrides = {
        "k": args.k,
        "metric": args.metric,
        "normalize": args.normalize,
        "tie_break": args.tie_break,
        "output": args.output,
        "train_data": args.train_data,
        "train_labels": args.train_labels,
        "test_data": args.test_data,
        "test_labels": args.test_labels,
        "feature_size": args.feature_size,
        "train_size": args.train_size,
        "test_size": args.test_size,
        "plot_path": args.plot_path,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    return replace(VARIANTS[args.variant], strict=args.strict,
                   plot=args.plot or args.plot_path is not None, **overrides)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="k-nearest neighbours classification")
    parser.add_argument("--variant", choices=sorted(VARIANTS), default="baseline",
                        help="Preset configuration")
    parser.add_argument("--k", type=int, help="Number of neighbours")
    parser.add_argument("--metric", choices=sorted(DISTANCES), help="Distance metric")
    parser.add_argument("--normalize", action=argparse.BooleanOptionalAction, default=None,
                        help="Z-score normalize train and test separately")
    parser.add_argument("--tie-break", choices=TIE_BREAKS, help="Vote tie-break policy")
    parser.add_argument("--train-data")
    parser.add_argument("--train-labels")
    parser.add_argument("--test-data")
    parser.add_argument("--test-labels")
    parser.add_argument("--output", help="Predicted labels file")
    parser.add_argument("--feature-size", type=int)
    parser.add_argument("--train-size", type=int)
    parser.add_argument("--test-size", type=int)
    parser.add_argument("--strict", action="store_true",
                        help="Fail on missing or short input files")
    parser.add_argument("--plot", action="store_true", help="Show the confusion matrix")
    parser.add_argument("--plot-path", help="Save the confusion matrix plot instead of showing it")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = build_config(args)
    try:
        inference(config)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
