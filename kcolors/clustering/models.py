"""
Data model for single-pass color clustering.

ColorPoint is the atomic value being clustered, Cluster pairs a center with
the members routed to it, and Partition is the full output of one
assignment pass.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple, Union
import numpy as np


N_CHANNELS = 4

PointsLike = Union[np.ndarray, Sequence['ColorPoint'], Sequence[Tuple[int, int, int, int]]]


# ============================================================================
# Color values
# ============================================================================

@dataclass(frozen=True)
class ColorPoint:
    """
    Immutable 4-channel color value with 8-bit unsigned channels.

    Example:
        >>> p = ColorPoint(255, 128, 0, 255)
        >>> p.as_tuple()
        (255, 128, 0, 255)
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        """Validate and normalize channel values."""
        for name in ('r', 'g', 'b', 'a'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"channel {name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be in [0, 255], got {value}")
            object.__setattr__(self, name, int(value))

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def as_array(self) -> np.ndarray:
        """Channels as a uint8 array of shape (4,)."""
        return np.array(self.as_tuple(), dtype=np.uint8)

    @classmethod
    def from_array(cls, values) -> 'ColorPoint':
        """Build a ColorPoint from any 4-element sequence or array."""
        if len(values) != N_CHANNELS:
            raise ValueError(f"expected {N_CHANNELS} channels, got {len(values)}")
        return cls(*(int(v) for v in values))


def as_point_array(points: PointsLike) -> np.ndarray:
    """
    Normalize a point sequence to a (N, 4) uint8 array.

    Accepts an integer array of shape (N, 4) or any sequence of ColorPoints
    or 4-tuples. Input order is preserved.

    Args:
        points: Point sequence to normalize

    Returns:
        points: Array of shape (N, 4), dtype uint8

    Raises:
        ValueError: If the shape is wrong or a channel is outside [0, 255]
    """
    if isinstance(points, np.ndarray):
        arr = points
    elif len(points) == 0:
        return np.empty((0, N_CHANNELS), dtype=np.uint8)
    else:
        arr = np.array([tuple(p) for p in points])

    if arr.size == 0:
        return np.empty((0, N_CHANNELS), dtype=np.uint8)

    if arr.ndim != 2 or arr.shape[1] != N_CHANNELS:
        raise ValueError(f"points must have shape (N, {N_CHANNELS}), got {arr.shape}")

    if arr.dtype == np.uint8:
        return arr

    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"points must hold integer channels, got dtype {arr.dtype}")
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError("point channels must be in [0, 255]")

    return arr.astype(np.uint8)


# ============================================================================
# Clusters
# ============================================================================

@dataclass
class Cluster:
    """
    A center plus the member points assigned to it.

    Members are appended as (M, 4) blocks and exposed as one ordered array.
    The center is only replaced by aggregation, after assignment is done.
    """
    center: ColorPoint
    _blocks: List[np.ndarray] = field(default_factory=list, repr=False)

    def extend(self, block: np.ndarray):
        """Append a block of member points, keeping their order."""
        block = np.asarray(block, dtype=np.uint8).reshape(-1, N_CHANNELS)
        if len(block):
            self._blocks.append(block)

    @property
    def members(self) -> np.ndarray:
        """Member points, shape (M, 4)."""
        if not self._blocks:
            return np.empty((0, N_CHANNELS), dtype=np.uint8)
        if len(self._blocks) > 1:
            self._blocks = [np.concatenate(self._blocks)]
        return self._blocks[0]

    @property
    def size(self) -> int:
        return sum(len(block) for block in self._blocks)

    def member_points(self) -> List[ColorPoint]:
        return [ColorPoint.from_array(row) for row in self.members]


@dataclass
class Partition:
    """
    Output of one assignment pass.

    Attributes:
        clusters: Exactly k clusters with pairwise disjoint members
        labels: Cluster index per input point, shape (N,).
                -1 where there is no cluster to point at (k = 0).
    """
    clusters: List[Cluster]
    labels: np.ndarray

    def __len__(self) -> int:
        return len(self.clusters)

    def __iter__(self) -> Iterator[Cluster]:
        return iter(self.clusters)

    def __getitem__(self, index: int) -> Cluster:
        return self.clusters[index]

    @property
    def centers(self) -> List[ColorPoint]:
        return [cluster.center for cluster in self.clusters]

    @property
    def counts(self) -> List[int]:
        return [cluster.size for cluster in self.clusters]

    @property
    def n_points(self) -> int:
        return int(len(self.labels))

    def palette(self) -> List[Tuple[ColorPoint, int]]:
        """(center, member count) pairs in cluster order."""
        return list(zip(self.centers, self.counts))

    def __str__(self) -> str:
        return f"Partition(k={len(self)}, points={self.n_points}, counts={self.counts})"
