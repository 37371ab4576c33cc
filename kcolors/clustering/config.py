"""
Clustering Configuration

Parameters for one initialize / assign / aggregate run.
"""

from dataclasses import dataclass
from typing import Optional


MODES = ('sequential', 'parallel')
STRATEGIES = ('merge', 'lock')


@dataclass
class ClusteringConfig:
    """
    Configuration for single-pass color clustering.

    Attributes:
        n_clusters: Number of clusters (k). 0 yields an empty partition.
        mode: Assignment execution mode ('sequential' or 'parallel')
        n_workers: Worker threads for parallel mode (None = CPU count)
        strategy: How parallel workers publish members ('merge' or 'lock')
        random_state: Seed for initial center sampling
    """
    n_clusters: int = 5
    """Number of clusters (k parameter)."""

    mode: str = 'sequential'
    """'sequential' runs one ordered pass, 'parallel' fans out over threads."""

    n_workers: Optional[int] = None
    """Worker threads for parallel assignment. None uses os.cpu_count()."""

    strategy: str = 'merge'
    """'merge': per-worker buckets merged after all workers finish.
    'lock': workers append to the shared clusters under one lock."""

    random_state: Optional[int] = None
    """Random seed for reproducible center sampling."""

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.n_clusters < 0:
            raise ValueError(f"n_clusters must be >= 0, got {self.n_clusters}")
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got '{self.mode}'")
        if self.n_workers is not None and self.n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {self.n_workers}")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"strategy must be one of {STRATEGIES}, got '{self.strategy}'")
