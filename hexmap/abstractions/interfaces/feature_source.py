# hexmap/abstractions/interfaces/feature_source.py
"""Feature data source interface - NO IMPLEMENTATIONS!"""

from abc import ABC, abstractmethod
from typing import Sequence

from ..types import RawFeature


class IFeatureSource(ABC):
    """Asynchronous provider of the polygon feature collection."""

    @abstractmethod
    async def load_features(self) -> Sequence[RawFeature]:
        """Fetch and return the parsed features."""
        pass
