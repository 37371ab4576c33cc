"""
Módulo de visualización para kcolors.

Proporciona gráficos de la paleta resultante del clustering.
"""

from .palette_plot import plot_palette

__all__ = ['plot_palette']
