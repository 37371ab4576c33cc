"""
Raw channel-wise Euclidean distance between colors.

Channel differences are taken in int32 so that uint8 subtraction cannot
wrap around before squaring.
"""

import numpy as np
from sklearn.utils import gen_batches

from .models import ColorPoint


# Upper bound on int32 elements held by one (rows, k, 4) difference block
MAX_BATCH_ELEMENTS = 2 ** 22


def batch_size(n_centers: int) -> int:
    """Rows per distance block, shrinking as the number of centers grows."""
    return max(1, MAX_BATCH_ELEMENTS // (max(1, n_centers) * 4))


def distance(a: ColorPoint, b: ColorPoint) -> float:
    """
    Euclidean norm over the four channel differences.

    Example:
        >>> distance(ColorPoint(0, 0, 0, 0), ColorPoint(3, 4, 0, 0))
        5.0
    """
    diff = a.as_array().astype(np.int32) - b.as_array().astype(np.int32)
    return float(np.sqrt(np.sum(diff * diff)))


def center_distances(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Distance from every point to every center.

    Args:
        points: Point array, shape (N, 4), uint8
        centers: Center array, shape (k, 4), uint8

    Returns:
        distances: Float array of shape (N, k)
    """
    diff = points[:, None, :].astype(np.int32) - centers[None, :, :].astype(np.int32)
    squared = np.sum(diff * diff, axis=2)
    return np.sqrt(squared.astype(np.float64))


def nearest_centers(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Index of the nearest center for each point.

    Ties go to the lowest center index (first minimum wins).

    Args:
        points: Point array, shape (N, 4)
        centers: Center array, shape (k, 4)

    Returns:
        labels: Integer array of shape (N,); -1 everywhere if k = 0,
                empty if there are no points
    """
    labels = np.full(len(points), -1, dtype=np.intp)
    if len(centers) == 0 or len(points) == 0:
        return labels

    for batch in gen_batches(len(points), batch_size(len(centers))):
        labels[batch] = np.argmin(center_distances(points[batch], centers), axis=1)

    return labels
