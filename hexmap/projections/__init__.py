"""Coordinate reprojection."""

from .reprojector import PyprojReprojector, reproject

__all__ = ['PyprojReprojector', 'reproject']
