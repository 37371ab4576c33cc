"""
Output helpers for clustering results.

Hex formatting of centers, palette squares painted into the source image
and posterized (segmented) images.
"""

from .palette import (
    to_hex,
    format_palette,
    draw_palette,
    create_segmented_image,
    output_path,
    save_image
)

__all__ = [
    'to_hex',
    'format_palette',
    'draw_palette',
    'create_segmented_image',
    'output_path',
    'save_image',
]
