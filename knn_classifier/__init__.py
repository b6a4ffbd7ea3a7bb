from .knn_utils import euclidean_distance, manhattan_distance, predict_knn, select_neighbors, vote
from .utils import DataSet, load_labels, load_matrix, normalize_features, write_labels
