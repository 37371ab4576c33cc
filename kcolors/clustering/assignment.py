"""
Nearest-Center Assignment

One pass over the point sequence: every point is appended to the cluster
whose (frozen) center is closest. Centers are never recomputed here and the
pass is never repeated.

Two execution modes share the same choice of target cluster:
- SequentialAssignment: a single ordered sweep
- ParallelAssignment: contiguous slices on a thread pool, members published
  either by merging per-worker buckets ('merge') or by appending to the
  shared clusters under one lock ('lock')
"""

import logging
import os
import threading
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import numpy as np
from sklearn.utils import gen_even_slices

from .config import ClusteringConfig, STRATEGIES
from .distance import nearest_centers
from .models import Cluster, Partition, PointsLike, as_point_array

logger = logging.getLogger(__name__)


# ============================================================================
# Abstract Base Class (Interface)
# ============================================================================

class BaseAssignment(ABC):
    """
    Abstract base class for assignment engines.

    All implementations must:
    1. Read centers only, never overwrite them
    2. Place every point in exactly one cluster's member list
    3. Route each point to the nearest center, lower index on ties
    """

    def assign(self, points: PointsLike, clusters: List[Cluster]) -> Partition:
        """
        Assign every point to its nearest cluster center.

        Args:
            points: Point sequence, (N, 4) array or sequence of ColorPoints
            clusters: Initialized clusters with empty member lists

        Returns:
            partition: The same clusters with populated member lists,
                       plus the per-point labels

        Raises:
            ValueError: If a cluster already holds members
        """
        points = as_point_array(points)

        if not clusters:
            return Partition(clusters=[], labels=np.full(len(points), -1, dtype=np.intp))

        for idx, cluster in enumerate(clusters):
            if cluster.size:
                raise ValueError(
                    f"cluster {idx} already holds {cluster.size} members; "
                    "assignment expects empty member lists"
                )

        # Snapshot of the centers; read-only for the whole pass
        centers = np.array([cluster.center.as_tuple() for cluster in clusters], dtype=np.uint8)
        centers.setflags(write=False)

        labels = self._assign(points, centers, clusters)

        logger.debug("Assigned %d points to %d clusters", len(points), len(clusters))

        return Partition(clusters=list(clusters), labels=labels)

    @abstractmethod
    def _assign(self, points: np.ndarray, centers: np.ndarray, clusters: List[Cluster]) -> np.ndarray:
        """Populate member lists and return per-point labels."""
        pass


# ============================================================================
# Sequential
# ============================================================================

class SequentialAssignment(BaseAssignment):
    """
    Single-threaded assignment.

    Member lists keep input order, so repeated runs over the same centers
    and point order give identical partitions.
    """

    def _assign(self, points, centers, clusters):
        labels = nearest_centers(points, centers)
        for idx, cluster in enumerate(clusters):
            cluster.extend(points[labels == idx])
        return labels


# ============================================================================
# Parallel
# ============================================================================

class ParallelAssignment(BaseAssignment):
    """
    Data-parallel assignment over a thread pool.

    The point array is split into n_workers contiguous slices. Each worker
    computes nearest-center labels for its slice and writes them into a
    disjoint region of the shared label array. Only publishing members to
    the shared clusters needs coordination:

    - 'merge': workers return k local buckets, merged in slice order once
      every worker has finished
    - 'lock': workers append their buckets to the shared clusters while
      holding a single lock over the whole collection

    Example:
        >>> engine = ParallelAssignment(n_workers=4, strategy='merge')
        >>> partition = engine.assign(pixels, clusters)
    """

    def __init__(self, n_workers: Optional[int] = None, strategy: str = 'merge'):
        """
        Initialize parallel assignment.

        Args:
            n_workers: Worker threads (None = CPU count)
            strategy: 'merge' or 'lock'
        """
        if n_workers is None:
            n_workers = os.cpu_count() or 1
        if n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {n_workers}")
        if strategy not in STRATEGIES:
            raise ValueError(f"strategy must be one of {STRATEGIES}, got '{strategy}'")

        self.n_workers = n_workers
        self.strategy = strategy
        self._lock = threading.Lock()

    def _assign(self, points, centers, clusters):
        labels = np.full(len(points), -1, dtype=np.intp)
        if len(points) == 0:
            return labels

        slices = list(gen_even_slices(len(points), self.n_workers))

        logger.debug(
            "Parallel assignment: %d points over %d slices (%s)",
            len(points), len(slices), self.strategy
        )

        with ThreadPoolExecutor(max_workers=self.n_workers) as executor:
            futures = [
                executor.submit(self._run_slice, points, batch, centers, labels, clusters)
                for batch in slices
            ]

        # Executor shutdown waits for every worker; result() re-raises failures
        results = [future.result() for future in futures]

        if self.strategy == 'merge':
            for buckets in results:
                for cluster, bucket in zip(clusters, buckets):
                    cluster.extend(bucket)

        return labels

    def _run_slice(self, points, batch, centers, labels, clusters):
        block = points[batch]
        local_labels = nearest_centers(block, centers)
        labels[batch] = local_labels

        buckets = [block[local_labels == idx] for idx in range(len(centers))]

        if self.strategy == 'lock':
            with self._lock:
                for cluster, bucket in zip(clusters, buckets):
                    cluster.extend(bucket)
            return None

        return buckets


def create_assignment_engine(config: ClusteringConfig) -> BaseAssignment:
    """
    Build the assignment engine selected by the configuration.

    Args:
        config: Clustering configuration

    Returns:
        engine: SequentialAssignment or ParallelAssignment
    """
    if config.mode == 'parallel':
        return ParallelAssignment(n_workers=config.n_workers, strategy=config.strategy)
    return SequentialAssignment()
