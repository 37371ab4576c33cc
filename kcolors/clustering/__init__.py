"""
Color clustering module.

Seed sampling, single-pass nearest-center assignment (sequential and
parallel) and per-cluster color aggregation.
"""

from .models import ColorPoint, Cluster, Partition, as_point_array
from .errors import EmptyInputError
from .config import ClusteringConfig
from .distance import distance, center_distances, nearest_centers
from .initializer import initialize_clusters, clusters_from_centers
from .assignment import (
    BaseAssignment,
    SequentialAssignment,
    ParallelAssignment,
    create_assignment_engine
)
from .aggregator import CentroidAggregator, mean_color
from .clusterer import ColorClusterer, cluster_colors, cluster_images_batch

__all__ = [
    # Data model
    'ColorPoint',
    'Cluster',
    'Partition',
    'as_point_array',
    'EmptyInputError',
    'ClusteringConfig',
    # Distance
    'distance',
    'center_distances',
    'nearest_centers',
    # Phases
    'initialize_clusters',
    'clusters_from_centers',
    'BaseAssignment',
    'SequentialAssignment',
    'ParallelAssignment',
    'create_assignment_engine',
    'CentroidAggregator',
    'mean_color',
    # Pipeline
    'ColorClusterer',
    'cluster_colors',
    'cluster_images_batch',
]
