"""
Cargador de imágenes para el clustering de colores.

Decodifica archivos de imagen con PIL, los convierte a RGBA y los aplana en
la secuencia de píxeles que consume el motor de clustering.
"""

import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def load_image(path: Union[str, Path]) -> np.ndarray:
    """
    Carga una imagen desde disco como array RGBA.

    Cualquier modo de PIL (L, RGB, P, RGBA, ...) se convierte a RGBA, de modo
    que cada píxel tenga siempre 4 canales de 8 bits.

    Args:
        path: Ruta al archivo de imagen.

    Returns:
        image: Array uint8 con shape (H, W, 4).

    Raises:
        FileNotFoundError: Si el archivo no existe.
        PIL.UnidentifiedImageError: Si PIL no reconoce el formato.
    """
    with Image.open(path) as img:
        logger.debug("Loaded %s (%s, %dx%d)", path, img.mode, img.width, img.height)
        return np.array(img.convert('RGBA'))


def extract_points(image: np.ndarray) -> np.ndarray:
    """
    Extrae los píxeles de una imagen como secuencia (N, 4).

    El orden es por filas (row-major), igual que al recorrer la imagen
    de arriba hacia abajo y de izquierda a derecha. Las imágenes RGB reciben
    un canal alpha opaco (255).

    Args:
        image: Imagen uint8 con shape (H, W, 4) o (H, W, 3).

    Returns:
        points: Array uint8 con shape (H*W, 4).

    Raises:
        ValueError: Si la imagen no tiene 3 o 4 canales.

    Example:
        >>> image = load_image('foto.png')
        >>> points = extract_points(image)
        >>> print(points.shape)  # (H*W, 4)
    """
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"image must have shape (H, W, 3) or (H, W, 4), got {image.shape}")

    h, w, c = image.shape
    points = image.reshape(-1, c).astype(np.uint8, copy=False)

    if c == 3:
        # Canal alpha opaco para imágenes RGB
        alpha = np.full((h * w, 1), 255, dtype=np.uint8)
        points = np.hstack([points, alpha])

    return points


def load_points(path: Union[str, Path]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Carga una imagen y su secuencia de píxeles en un solo paso.

    Args:
        path: Ruta al archivo de imagen.

    Returns:
        image: Array RGBA (H, W, 4).
        points: Array (H*W, 4) con los píxeles en orden row-major.
    """
    image = load_image(path)
    return image, extract_points(image)
