import numpy as np
from collections import namedtuple


DataSet = namedtuple("DataSet", ["train", "train_labels", "test", "test_labels"])


class DataLoadError(OSError):
    """Raised by the loaders in strict mode when a file is missing or short."""


# 1- Loading Functions

def _read_tokens(path, strict=False):
    try:
        with open(path, "r") as f:
            return f.read().split()
    except OSError as e:
        if strict:
            raise DataLoadError(f"Cannot load {path}: {e}") from e
        print(f"[ERROR] Cannot load {path}")
        return []


def _fill(target, tokens, cast, path, strict):
    count = 0
    for token in tokens[:target.size]:
        try:
            target.flat[count] = cast(token)
        except ValueError:
            break
        count += 1

    if count < target.size:
        message = f"{path}: read {count} values (expected {target.size})"
        if strict:
            raise DataLoadError(message)
        print(f"[WARNING] {message}")
    return target


def load_matrix(path, rows, cols, strict=False):
    """Read rows*cols whitespace separated reals in row-major order.

    Missing trailing entries stay at 0.0 unless strict is set.
    """
    data = np.zeros((rows, cols), dtype=float)
    tokens = _read_tokens(path, strict)
    return _fill(data, tokens, float, path, strict)


def load_labels(path, n, strict=False):
    """Read up to n integer labels; missing entries stay at 0."""
    labels = np.zeros(n, dtype=int)
    tokens = _read_tokens(path, strict)
    return _fill(labels, tokens, int, path, strict)


def load_dataset(train_data, train_labels, test_data, test_labels,
                 feature_size, train_size, test_size, strict=False):
    return DataSet(
        train=load_matrix(train_data, train_size, feature_size, strict),
        train_labels=load_labels(train_labels, train_size, strict),
        test=load_matrix(test_data, test_size, feature_size, strict),
        test_labels=load_labels(test_labels, test_size, strict),
    )


# 2- Normalization Functions

def normalize_features(X):
    """Z-score normalization, in place. Returns X, mean_vals, std_vals.

    Uses the population moment formula sqrt(E[x^2] - E[x]^2). A constant
    column gives std 0 and the column turns into nan/inf.
    """
    if not np.issubdtype(X.dtype, np.floating):
        raise TypeError(f"normalize_features needs a float matrix, got {X.dtype}")
    n = X.shape[0]
    mean_vals = np.sum(X, axis=0) / n
    with np.errstate(invalid="ignore"):
        std_vals = np.sqrt(np.sum(X ** 2, axis=0) / n - mean_vals ** 2)

    flat = np.where(~(std_vals > 0))[0]
    if len(flat) > 0:
        print(f"[WARNING] {len(flat)} column(s) with zero variance: {flat.tolist()}")

    with np.errstate(divide="ignore", invalid="ignore"):
        X -= mean_vals
        X /= std_vals
    return X, mean_vals, std_vals


# 3- Data Management Functions

def write_labels(labels, filename):
    # one trailing space per label, no newline
    with open(filename, "w") as f:
        f.write("".join(f"{int(label)} " for label in labels))
