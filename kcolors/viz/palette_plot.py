"""
Utilidades de visualización para la paleta de colores.

Muestra los colores dominantes de un clustering y sus frecuencias.
"""

from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..clustering.models import Partition
from ..render.palette import to_hex


def plot_palette(
    partition: Partition,
    title: Optional[str] = None,
    figsize: Tuple[int, int] = (10, 4)
) -> plt.Figure:
    """
    Gráfico de barras con los colores dominantes y sus frecuencias.

    Cada barra se pinta con el centro de su cluster y su altura es el
    número de píxeles asignados. Los clusters vacíos aparecen con altura 0.

    Args:
        partition: Partición ya agregada.
        title: Título opcional de la figura.
        figsize: Tamaño de la figura (ancho, alto) en pulgadas.

    Returns:
        fig: Figura de matplotlib con una barra por cluster.

    Example:
        >>> partition = cluster_colors(points, 5, random_state=0)
        >>> fig = plot_palette(partition, title='Paleta')
        >>> plt.show()
    """
    fig, ax = plt.subplots(figsize=figsize)

    k = len(partition)
    colors = [np.array(c.as_tuple()) / 255.0 for c in partition.centers]

    ax.bar(range(k), partition.counts, color=colors, edgecolor='black')
    ax.set_xticks(range(k))
    ax.set_xticklabels([to_hex(c) for c in partition.centers], rotation=45, ha='right')
    ax.set_ylabel('Píxeles')

    if title:
        ax.set_title(title, fontsize=14, pad=10)

    plt.tight_layout()

    return fig
