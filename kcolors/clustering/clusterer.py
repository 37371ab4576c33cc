"""
Color Clustering Pipeline

Runs the three phases in strict order over one point sequence:
1. Sample k seed centers
2. Assign every point to its nearest (frozen) center, once
3. Replace each center with the mean color of its members

There is no refinement loop: centers are recomputed exactly
once, after the single assignment pass.
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..data_loader import extract_points
from .aggregator import CentroidAggregator
from .assignment import create_assignment_engine
from .config import ClusteringConfig
from .initializer import clusters_from_centers, initialize_clusters
from .models import ColorPoint, Partition, PointsLike, as_point_array

logger = logging.getLogger(__name__)


class ColorClusterer:
    """
    Single-pass color clusterer for images.

    Example:
        >>> # For images
        >>> clusterer = ColorClusterer(ClusteringConfig(n_clusters=5))
        >>> clusterer.fit_image(image)  # image shape: (H, W, 4) or (H, W, 3)
        >>> clusterer.centers

        >>> # For point arrays
        >>> clusterer.fit(pixels)  # (N, 4) uint8
        >>> clusterer.counts
    """

    def __init__(self, config: Optional[ClusteringConfig] = None):
        """
        Initialize the clusterer.

        Args:
            config: Configuration parameters. If None, uses defaults.
        """
        self.config = config or ClusteringConfig()
        self._partition: Optional[Partition] = None

    def fit(self, points: PointsLike) -> 'ColorClusterer':
        """
        Cluster a point sequence using randomly sampled seed centers.

        Args:
            points: (N, 4) uint8 array or sequence of ColorPoints

        Returns:
            self: For method chaining

        Raises:
            EmptyInputError: If there are no points
        """
        points = as_point_array(points)
        clusters = initialize_clusters(points, self.config.n_clusters, self.config.random_state)
        return self._run(points, clusters)

    def fit_with_centers(self, points: PointsLike, centers: Sequence) -> 'ColorClusterer':
        """
        Cluster a point sequence around caller-chosen seed centers.

        The number of centers overrides config.n_clusters.

        Args:
            points: (N, 4) uint8 array or sequence of ColorPoints
            centers: Seed centers, ColorPoints or 4-tuples

        Returns:
            self: For method chaining
        """
        return self._run(as_point_array(points), clusters_from_centers(centers))

    def fit_image(self, image: np.ndarray) -> 'ColorClusterer':
        """
        Cluster the pixels of a decoded image.

        Args:
            image: uint8 image of shape (H, W, 4) or (H, W, 3)

        Returns:
            self: For method chaining
        """
        return self.fit(extract_points(image))

    def _run(self, points: np.ndarray, clusters) -> 'ColorClusterer':
        engine = create_assignment_engine(self.config)
        partition = engine.assign(points, clusters)

        # assign() returns only after every worker has finished
        CentroidAggregator().aggregate(partition)

        logger.info(
            "Clustered %d points into %d clusters (%s)",
            len(points), len(partition), self.config.mode
        )

        self._partition = partition
        return self

    def _require_fitted(self) -> Partition:
        if self._partition is None:
            raise RuntimeError("Must call fit() or fit_image() before accessing results")
        return self._partition

    @property
    def partition(self) -> Partition:
        return self._require_fitted()

    @property
    def centers(self) -> List[ColorPoint]:
        """Aggregated cluster centers, one per cluster."""
        return self._require_fitted().centers

    @property
    def counts(self) -> List[int]:
        """Member count per cluster."""
        return self._require_fitted().counts

    @property
    def labels(self) -> np.ndarray:
        """Cluster index per input point, shape (N,)."""
        return self._require_fitted().labels


def cluster_colors(
    points: PointsLike,
    n_clusters: int,
    mode: str = 'sequential',
    n_workers: Optional[int] = None,
    strategy: str = 'merge',
    random_state: Optional[int] = None
) -> Partition:
    """
    One-call clustering of a point sequence.

    Args:
        points: (N, 4) uint8 array or sequence of ColorPoints
        n_clusters: Number of clusters k
        mode: 'sequential' or 'parallel'
        n_workers: Worker threads for parallel mode
        strategy: 'merge' or 'lock' for parallel mode
        random_state: Seed for center sampling

    Returns:
        partition: k clusters with aggregated centers

    Raises:
        EmptyInputError: If there are no points
    """
    config = ClusteringConfig(
        n_clusters=n_clusters,
        mode=mode,
        n_workers=n_workers,
        strategy=strategy,
        random_state=random_state
    )
    return ColorClusterer(config).fit(points).partition


def cluster_images_batch(
    images: Dict[str, np.ndarray],
    config: Optional[ClusteringConfig] = None
) -> Dict[str, ColorClusterer]:
    """
    Cluster a batch of images with a shared configuration.

    Args:
        images: {image_id: image array}, each (H, W, 4) or (H, W, 3) uint8
        config: Configuration applied to every image

    Returns:
        {image_id: fitted ColorClusterer}
    """
    results = {}

    for image_id, image in images.items():
        logger.debug("Clustering image '%s' with shape %s", image_id, image.shape)
        results[image_id] = ColorClusterer(config).fit_image(image)

    return results
