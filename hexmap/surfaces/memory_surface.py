"""Headless map surface for offline rendering and tests."""

import math
from typing import List, Optional, Sequence, Tuple

from ..abstractions.interfaces import IDrawLayer, IMapSurface, ViewListener
from ..abstractions.types import LatLng, PolygonStyle, ViewportBounds
from ..config import config
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)

TILE_SIZE = 256
MERCATOR_LAT_BOUND = 85.05112878


class InMemoryDrawLayer(IDrawLayer):
    """Draw layer that records polygons instead of painting them."""

    def __init__(self):
        self.polygons: List[Tuple[Tuple[LatLng, ...], PolygonStyle]] = []
        self.clear_count = 0

    def clear(self) -> None:
        self.polygons.clear()
        self.clear_count += 1

    def add_polygon(self, vertices: Sequence[LatLng], style: PolygonStyle) -> None:
        self.polygons.append((tuple(vertices), style))

    def __len__(self) -> int:
        return len(self.polygons)


def _lat_to_world_y(lat: float) -> float:
    """Latitude to normalised Web Mercator y in [0, 1], 0 at the north edge."""
    lat = max(-MERCATOR_LAT_BOUND, min(MERCATOR_LAT_BOUND, lat))
    sin_lat = math.sin(math.radians(lat))
    return 0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)


def _world_y_to_lat(y: float) -> float:
    return math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * y))))


def viewport_for_view(center: LatLng, zoom: float, width: int, height: int) -> ViewportBounds:
    """Geographic bounds seen by a ``width`` x ``height`` pixel viewport."""
    world_size = TILE_SIZE * (2 ** zoom)
    lat, lng = center

    half_width_deg = (width / 2.0) / world_size * 360.0
    center_y = _lat_to_world_y(lat)
    half_height = (height / 2.0) / world_size

    return ViewportBounds(
        south=_world_y_to_lat(min(1.0, center_y + half_height)),
        west=lng - half_width_deg,
        north=_world_y_to_lat(max(0.0, center_y - half_height)),
        east=lng + half_width_deg
    )


class InMemoryMapSurface(IMapSurface):
    """
    Map surface with a fixed pixel size whose view is moved by code.

    Bounds follow from centre, zoom and pixel size using Web Mercator tile
    math unless explicit bounds are set with ``set_view(bounds=...)``.
    Listeners fire synchronously after every view change.
    """

    def __init__(self,
                 center: Optional[LatLng] = None,
                 zoom: Optional[float] = None,
                 width: int = 1024,
                 height: int = 768):
        self.center: LatLng = tuple(center or config.get('map.center', (23.8859, 45.0792)))
        self.zoom = float(zoom if zoom is not None else config.get('map.zoom', 6))
        self.max_zoom = config.get('map.max_zoom', 18)
        self.width = width
        self.height = height
        self._explicit_bounds: Optional[ViewportBounds] = None
        self._layer = InMemoryDrawLayer()
        self._listeners: List[ViewListener] = []

    @property
    def layer(self) -> InMemoryDrawLayer:
        return self._layer

    def get_zoom(self) -> float:
        return self.zoom

    def get_bounds(self) -> ViewportBounds:
        if self._explicit_bounds is not None:
            return self._explicit_bounds
        return viewport_for_view(self.center, self.zoom, self.width, self.height)

    def add_view_listener(self, listener: ViewListener) -> None:
        self._listeners.append(listener)

    def remove_view_listener(self, listener: ViewListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def set_view(self,
                 center: Optional[LatLng] = None,
                 zoom: Optional[float] = None,
                 bounds: Optional[ViewportBounds] = None) -> None:
        """Pan and/or zoom, then notify listeners."""
        if center is not None:
            self.center = tuple(center)
        if zoom is not None:
            self.zoom = float(min(zoom, self.max_zoom))
        self._explicit_bounds = bounds
        self._notify()

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._notify()

    def _notify(self) -> None:
        logger.debug(f"View changed: center={self.center} zoom={self.zoom}")
        for listener in list(self._listeners):
            listener()
