"""
Módulo de carga de imágenes para kcolors.

Decodifica imágenes a RGBA y extrae la secuencia de píxeles (N, 4) que
consume el motor de clustering.

Example:
    >>> from kcolors.data_loader import load_points
    >>> image, points = load_points('foto.png')
    >>> print(points.shape)  # (H*W, 4)
"""

from .image_loader import load_image, extract_points, load_points

__all__ = ['load_image', 'extract_points', 'load_points']
