"""Package exceptions for the hexagon layer pipeline."""

from typing import Optional


class HexMapError(Exception):
    """Base hexmap error."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class ConfigurationError(HexMapError):
    """Raised when configuration values are invalid."""
    pass


class FeatureSourceError(HexMapError):
    """Raised when the feature source fails to deliver a dataset."""
    pass
