"""
Centroid aggregation.

Replaces each cluster's center with the channel-wise floor mean of its
members. Runs only after assignment has completed.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from .models import Cluster, ColorPoint, Partition

logger = logging.getLogger(__name__)


def mean_color(members: np.ndarray) -> ColorPoint:
    """
    Channel-wise integer mean of a non-empty (M, 4) member array.

    Sums are taken in uint64 and divided with floor division, so the result
    always stays within [0, 255].

    Raises:
        ValueError: If members is empty
    """
    if len(members) == 0:
        raise ValueError("mean_color requires at least one member")
    sums = members.sum(axis=0, dtype=np.uint64)
    return ColorPoint.from_array(sums // np.uint64(len(members)))


class CentroidAggregator:
    """
    Recompute cluster centers from assigned members.

    A cluster without members keeps its seed center and stays in the
    output with a count of 0.

    Example:
        >>> partition = SequentialAssignment().assign(pixels, clusters)
        >>> CentroidAggregator().aggregate(partition)
        >>> partition.centers
    """

    def __init__(self, n_workers: Optional[int] = None):
        """
        Args:
            n_workers: Threads used to aggregate clusters concurrently.
                       None or 1 aggregates in a plain loop.
        """
        if n_workers is not None and n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {n_workers}")
        self.n_workers = n_workers

    def aggregate(self, partition: Partition) -> Partition:
        """
        Overwrite every non-empty cluster's center with its mean color.

        Args:
            partition: Completed assignment pass

        Returns:
            partition: The same partition, centers updated in place
        """
        if self.n_workers and self.n_workers > 1 and len(partition) > 1:
            with ThreadPoolExecutor(max_workers=self.n_workers) as executor:
                list(executor.map(self._recompute, range(len(partition)), partition.clusters))
        else:
            for idx, cluster in enumerate(partition.clusters):
                self._recompute(idx, cluster)

        return partition

    def _recompute(self, idx: int, cluster: Cluster):
        if cluster.size == 0:
            logger.debug("Cluster %d has no members; keeping center %s", idx, cluster.center)
            return
        cluster.center = mean_color(cluster.members)
