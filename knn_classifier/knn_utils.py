import numpy as np
from collections import Counter

TIE_BREAKS = ("lowest", "first")

# 1- Distance Calculation

def euclidean_distance(vector1, vector2):
    assert len(vector1) == len(vector2), "feature vectors must have the same length"
    return np.sqrt(np.sum((np.asarray(vector1) - np.asarray(vector2)) ** 2))


def manhattan_distance(vector1, vector2):
    assert len(vector1) == len(vector2), "feature vectors must have the same length"
    return np.sum(np.abs(np.asarray(vector1) - np.asarray(vector2)))


DISTANCES = {
    "euclidean": euclidean_distance,
    "manhattan": manhattan_distance,
}


def get_distance(name):
    if name not in DISTANCES:
        raise ValueError(f"Unknown distance metric: {name}")
    return DISTANCES[name]


# 2- Neighbour Selection

def check_k(k, n):
    if not isinstance(k, (int, np.integer)) or isinstance(k, bool):
        raise ValueError(f"k must be an integer, got {k!r}")
    if k < 1 or k > n:
        raise ValueError(f"k must be between 1 and {n}, got {k}")


def select_neighbors(query, X_train, k, distance=euclidean_distance):
    """Indices of the k training rows closest to query.

    Keeps k slots seeded with rows 0..k-1. Every later row replaces the
    farthest slot (first one on ties) only if it is strictly closer, so the
    result is in slot order, not sorted by distance.
    """
    n = len(X_train)
    check_k(k, n)

    neighbors = np.arange(k)
    distances = np.array([distance(query, X_train[i]) for i in range(k)], dtype=float)

    for i in range(k, n):
        current = distance(query, X_train[i])
        worst = np.argmax(distances)
        if current < distances[worst]:
            neighbors[worst] = i
            distances[worst] = current

    return neighbors


# 3- Vote

def vote(labels, tie_break="lowest"):
    """Majority label. 'lowest' settles ties on the smallest label value,
    'first' on the label met first in neighbour order."""
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie-break policy: {tie_break}")

    tally = Counter(int(label) for label in labels)
    if tie_break == "first":
        return tally.most_common(1)[0][0]

    best_label, best_count = None, 0
    for label, count in tally.items():
        if count > best_count or (count == best_count and label < best_label):
            best_label, best_count = label, count
    return best_label


# 4- KNN Prediction

def predict_knn(new_features, X_train, y_train, k=1, distance=euclidean_distance,
                tie_break="lowest"):
    nearest = select_neighbors(new_features, X_train, k, distance)
    return vote([y_train[i] for i in nearest], tie_break)


def predict_all(X_test, X_train, y_train, k=1, distance=euclidean_distance,
                tie_break="lowest"):
    predictions = np.zeros(len(X_test), dtype=int)

    print(f"[KNN] Predicting {len(X_test)} samples...")
    for i in range(len(X_test)):
        predictions[i] = predict_knn(X_test[i], X_train, y_train, k, distance, tie_break)

        if (i + 1) % 100 == 0 or i == len(X_test) - 1:
            print(f"[KNN] Processed {i + 1}/{len(X_test)} samples")
    return predictions
