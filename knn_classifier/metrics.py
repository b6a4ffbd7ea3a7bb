import numpy as np
import matplotlib.pyplot as plt

# 1- Accuracy
def accuracy(true_labels, predicted_labels):
    correct = sum(1 for t, p in zip(true_labels, predicted_labels) if t == p)
    total = len(true_labels)
    acc = correct / total if total > 0 else 0
    return correct, total, acc

# 2- Confusion matrix (rows = true, cols = predicted)
def confusion_matrix(true_labels, predicted_labels, classes=None):
    if classes is None:
        classes = sorted(set(int(t) for t in true_labels) | set(int(p) for p in predicted_labels))
    index = {c: i for i, c in enumerate(classes)}
    matrix = np.zeros((len(classes), len(classes)), dtype=int)
    for t, p in zip(true_labels, predicted_labels):
        matrix[index[int(t)]][index[int(p)]] += 1
    return matrix, classes

# 3- Precision per class
def precision_per_class(conf_matrix):
    num_classes = conf_matrix.shape[0]
    precisions = []
    for c in range(num_classes):
        tp = conf_matrix[c][c]
        fp = np.sum(conf_matrix[:, c]) - tp
        precision = tp / (tp + fp) if (tp + fp) > 0 else 0
        precisions.append(precision)
    return precisions

# 4- Recall per class
def recall_per_class(conf_matrix):
    num_classes = conf_matrix.shape[0]
    recalls = []
    for c in range(num_classes):
        tp = conf_matrix[c][c]
        fn = np.sum(conf_matrix[c, :]) - tp
        recall = tp / (tp + fn) if (tp + fn) > 0 else 0
        recalls.append(recall)
    return recalls

# 5- Display all metrics
def display_metrics(true_labels, predicted_labels):
    correct, total, acc = accuracy(true_labels, predicted_labels)
    print(f"\n{'='*50}")
    print(f"METRICS")
    print(f"{'='*50}")
    print(f"Correct: {correct}/{total}")

    conf, classes = confusion_matrix(true_labels, predicted_labels)
    if not classes:
        print(f"No samples to evaluate")
        print(f"{'='*50}")
        return conf, classes

    width = max(len(str(c)) for c in classes) + 1
    print(f"\nConfusion Matrix:")
    print(" " * (width + 3) + " ".join(f"{c:>{width}}" for c in classes))
    print(" " * (width + 2) + "-" * ((width + 1) * len(classes)))
    for i, c in enumerate(classes):
        row = " ".join(f"{conf[i][j]:>{width}d}" for j in range(len(classes)))
        print(f"{c:>{width}} | {row}")

    precisions = precision_per_class(conf)
    recalls = recall_per_class(conf)
    print(f"\nPrecision / Recall per class:")
    for c, p, r in zip(classes, precisions, recalls):
        print(f"  Label {c}: {p*100:.1f}% / {r*100:.1f}%")

    print(f"{'='*50}")
    return conf, classes

# 6- Plot
def plot_confusion_matrix(conf, classes, path=None):
    """Draw the confusion matrix; saved to path if given, shown otherwise."""
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.imshow(conf, cmap="Blues")
    ax.set_xticks(range(len(classes)))
    ax.set_xticklabels([str(c) for c in classes])
    ax.set_yticks(range(len(classes)))
    ax.set_yticklabels([str(c) for c in classes])
    ax.set_xlabel("Predicted")
    ax.set_ylabel("True")
    for i in range(len(classes)):
        for j in range(len(classes)):
            ax.text(j, i, str(conf[i][j]), ha="center", va="center")
    ax.set_title("Confusion Matrix")

    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    else:
        plt.show()
