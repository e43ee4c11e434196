"""Layer pipelines tying collaborators to the aggregation core."""

from .point_cache import RepresentativePointCache
from .hex_layer import HexLayerController

__all__ = ['RepresentativePointCache', 'HexLayerController']
