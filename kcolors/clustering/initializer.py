"""
Initial center sampling.

Each of the k centers is an independent uniform draw from the point
sequence, with replacement across draws. Duplicate centers are kept.
Member lists start empty; points join clusters only through assignment.
"""

import logging
from typing import List, Sequence, Union

import numpy as np
from sklearn.utils import check_random_state

from .errors import EmptyInputError
from .models import Cluster, ColorPoint, PointsLike, as_point_array

logger = logging.getLogger(__name__)


def initialize_clusters(
    points: PointsLike,
    n_clusters: int,
    random_state: Union[None, int, np.random.RandomState] = None
) -> List[Cluster]:
    """
    Sample k seed centers from the point sequence.

    Args:
        points: Point sequence, (N, 4) array or sequence of ColorPoints
        n_clusters: Number of clusters k (>= 0)
        random_state: None, an int seed or a RandomState instance

    Returns:
        clusters: k clusters with seed centers and empty member lists

    Raises:
        EmptyInputError: If the point sequence is empty (for any k)
        ValueError: If n_clusters is negative

    Example:
        >>> clusters = initialize_clusters(pixels, 5, random_state=42)
        >>> [c.center for c in clusters]
    """
    points = as_point_array(points)

    if len(points) == 0:
        raise EmptyInputError()
    if n_clusters < 0:
        raise ValueError(f"n_clusters must be >= 0, got {n_clusters}")

    rng = check_random_state(random_state)
    indices = rng.randint(0, len(points), size=n_clusters)

    logger.debug("Sampled seed indices %s from %d points", indices.tolist(), len(points))

    return [Cluster(center=ColorPoint.from_array(points[i])) for i in indices]


def clusters_from_centers(centers: Sequence) -> List[Cluster]:
    """
    Build clusters around caller-chosen centers.

    Args:
        centers: ColorPoints or 4-tuples, one per cluster

    Returns:
        clusters: One cluster per center, member lists empty
    """
    return [
        Cluster(center=c if isinstance(c, ColorPoint) else ColorPoint.from_array(c))
        for c in centers
    ]
