"""
kcolors - Single-pass k-means color clustering for images.

Este paquete agrupa los píxeles de una imagen en k clusters por similitud de
color y reporta, por cluster, un color promedio representativo.
"""

__version__ = "0.1.0"
