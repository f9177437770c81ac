"""Quadtree art and shape mosaics generated from images."""

__version__ = "0.1.0"