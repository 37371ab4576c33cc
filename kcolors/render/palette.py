"""
Palette rendering.

Consumes only the centers (and counts) of a partition: hex strings, one
filled square per center painted down the left edge of the image, and a
posterized image where each pixel takes its cluster's center.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import cv2
import numpy as np
from PIL import Image

from ..clustering.models import ColorPoint, Partition

logger = logging.getLogger(__name__)


def to_hex(point: ColorPoint) -> str:
    """
    Format a color as '#rrggbbaa'.

    Example:
        >>> to_hex(ColorPoint(255, 128, 0, 255))
        '#ff8000ff'
    """
    return '#' + ''.join(f'{channel:02x}' for channel in point.as_tuple())


def format_palette(partition: Partition) -> List[str]:
    """One '#rrggbbaa count' line per cluster, in cluster order."""
    return [f"{to_hex(center)} {count}" for center, count in partition.palette()]


def draw_palette(image: np.ndarray, centers: Sequence[ColorPoint]) -> np.ndarray:
    """
    Paint one filled square per center along the left edge of the image.

    Squares have side H // k; square i has its top-left corner at
    (0, i * side).

    Args:
        image: RGBA image, shape (H, W, 4), uint8
        centers: Colors to paint, in cluster order

    Returns:
        painted: A painted copy of the image
    """
    if image.ndim != 3 or image.shape[2] != 4:
        raise ValueError(f"image must have shape (H, W, 4), got {image.shape}")

    painted = np.ascontiguousarray(image.copy())
    if not centers:
        return painted

    side = image.shape[0] // len(centers)
    if side == 0:
        logger.warning(
            "Image height %d is too small for %d palette squares; nothing drawn",
            image.shape[0], len(centers)
        )
        return painted

    for i, center in enumerate(centers):
        top = i * side
        cv2.rectangle(
            painted,
            (0, top),
            (side - 1, top + side - 1),
            color=center.as_tuple(),
            thickness=-1
        )

    return painted


def create_segmented_image(partition: Partition, image_shape: Tuple[int, int]) -> np.ndarray:
    """
    Create an image where each pixel is replaced by its cluster's center.

    Args:
        partition: Aggregated partition of the image's pixels
        image_shape: Original image dimensions (H, W)

    Returns:
        segmented: RGBA image with k colors, shape (H, W, 4)

    Raises:
        ValueError: If the partition has no clusters or does not match the shape
    """
    h, w = image_shape

    if len(partition) == 0:
        raise ValueError("Cannot build a segmented image from an empty partition")
    if partition.n_points != h * w:
        raise ValueError(
            f"Image shape {image_shape} doesn't match partition "
            f"({partition.n_points} points)"
        )

    centers = np.array([c.as_tuple() for c in partition.centers], dtype=np.uint8)
    return centers[partition.labels].reshape(h, w, 4)


def output_path(path: Union[str, Path]) -> Path:
    """Output file next to the input: '<input path>output.png'."""
    return Path(f"{path}output.png")


def save_image(image: np.ndarray, path: Union[str, Path]):
    """Save an RGBA array to disk; format follows the file extension."""
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
    logger.info("Saved %s", path)
