# hexmap/abstractions/interfaces/map_surface.py
"""Map display surface interfaces - NO IMPLEMENTATIONS!"""

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from ..types import LatLng, PolygonStyle, ViewportBounds

ViewListener = Callable[[], None]


class IDrawLayer(ABC):
    """Layer of coloured polygons owned by the map surface."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every polygon from the layer."""
        pass

    @abstractmethod
    def add_polygon(self, vertices: Sequence[LatLng], style: PolygonStyle) -> None:
        """Draw a polygon given as (lat, lng) vertices."""
        pass


class IMapSurface(ABC):
    """Pan/zoom map surface the hexagon layer draws onto."""

    @property
    @abstractmethod
    def layer(self) -> IDrawLayer:
        """Layer reserved for hexagons."""
        pass

    @abstractmethod
    def get_zoom(self) -> float:
        """Current zoom level."""
        pass

    @abstractmethod
    def get_bounds(self) -> ViewportBounds:
        """Currently visible geographic bounds."""
        pass

    @abstractmethod
    def add_view_listener(self, listener: ViewListener) -> None:
        """Call ``listener`` after every pan, zoom or resize."""
        pass

    @abstractmethod
    def remove_view_listener(self, listener: ViewListener) -> None:
        """Stop notifying ``listener``."""
        pass
