"""Reduce polygon features to coloured representative points."""

from typing import Any, Iterator, List, Mapping, Optional, Sequence

from ..abstractions.interfaces import IReprojector
from ..abstractions.types import RawFeature, RepresentativePoint
from ..config import config
from ..geometry import ring_centroid
from ..infrastructure.logging import get_logger, log_operation

logger = get_logger(__name__)


class FeatureNormalizer:
    """
    Turn Polygon / MultiPolygon features into one RepresentativePoint per
    polygon: the centroid of its reprojected outer ring, coloured after the
    feature's colour attribute.

    Features without geometry, geometry types other than Polygon and
    MultiPolygon, and polygons with a missing or empty outer ring are
    skipped without error. Holes are ignored.
    """

    SUPPORTED_TYPES = ('Polygon', 'MultiPolygon')

    def __init__(self,
                 reprojector: IReprojector,
                 color_attribute: Optional[str] = None,
                 default_color: Optional[str] = None):
        """
        Args:
            reprojector: Converts projected ring vertices to (lat, lng)
            color_attribute: Property holding a hex colour without '#'
            default_color: Colour used when the attribute is missing
        """
        self.reprojector = reprojector
        self.color_attribute = color_attribute or config.get('features.color_attribute', 'COLOR_HEX')
        self.default_color = default_color or config.get('features.default_color', '#999999')

    def resolve_color(self, properties: Optional[Mapping[str, Any]]) -> str:
        """'#' + attribute value, or the default colour when absent/empty."""
        value = (properties or {}).get(self.color_attribute)
        if value:
            return f"#{value}"
        return self.default_color

    @log_operation("normalize_features", log_result_size=True)
    def normalize(self, features: Sequence[RawFeature]) -> List[RepresentativePoint]:
        """Representative points in feature order, polygon order within a feature."""
        points: List[RepresentativePoint] = []
        skipped = 0

        for feature in features:
            color = self.resolve_color(feature.properties)
            produced = 0

            for outer in self._outer_rings(feature.geometry):
                lat, lng = ring_centroid(self.reprojector.reproject_ring(outer))
                points.append(RepresentativePoint(lat=lat, lng=lng, color=color))
                produced += 1

            if produced == 0:
                skipped += 1

        logger.info(
            f"Normalized {len(features)} features into {len(points)} representative points",
            extra={'context': {'features': len(features),
                               'points': len(points),
                               'features_without_points': skipped}}
        )
        return points

    def _outer_rings(self, geometry: Optional[Mapping[str, Any]]) -> Iterator[Sequence[Sequence[float]]]:
        """Yield the non-empty outer ring of every polygon in the geometry."""
        if not geometry:
            return

        geom_type = geometry.get('type')
        if geom_type not in self.SUPPORTED_TYPES:
            logger.debug(f"Ignoring unsupported geometry type: {geom_type}")
            return

        coordinates = geometry.get('coordinates') or []
        polygons = [coordinates] if geom_type == 'Polygon' else coordinates

        for polygon in polygons:
            outer = polygon[0] if polygon else None
            if not outer:
                continue
            yield outer
