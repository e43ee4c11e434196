"""Planar geometry helpers."""

from .centroid import ring_centroid

__all__ = ['ring_centroid']
