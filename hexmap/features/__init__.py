"""Feature normalization."""

from .normalizer import FeatureNormalizer

__all__ = ['FeatureNormalizer']
