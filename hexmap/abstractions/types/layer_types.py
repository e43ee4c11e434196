# hexmap/abstractions/types/layer_types.py
"""Layer data model type definitions."""

from dataclasses import dataclass, field
from typing import Dict, Any, Hashable, Mapping, Optional, Tuple

# Internal coordinate order is always (lat, lng)
LatLng = Tuple[float, float]

# H3 cell ids are strings, but nothing beyond hashability is assumed
HexCell = Hashable

# Insertion order is conflict order: first insertion wins
CellColorMap = Dict[HexCell, str]


@dataclass(frozen=True)
class RepresentativePoint:
    """Centroid standing in for one polygon during grid aggregation."""
    lat: float
    lng: float
    color: str


@dataclass(frozen=True)
class RawFeature:
    """Already-parsed polygon feature in projected coordinates.

    ``geometry`` is a GeoJSON-like mapping with ``type`` and ``coordinates``
    keys, or ``None`` when the feature has no geometry.
    """
    geometry: Optional[Mapping[str, Any]]
    properties: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_geojson(cls, feature: Mapping[str, Any]) -> 'RawFeature':
        """Wrap a GeoJSON-like feature mapping."""
        return cls(
            geometry=feature.get('geometry'),
            properties=feature.get('properties') or {}
        )


@dataclass(frozen=True)
class PolygonStyle:
    """Stroke and fill style for one drawn hexagon."""
    fill_color: str
    color: str = '#222'
    weight: float = 1
    opacity: float = 0.8
    fill_opacity: float = 0.8

    @classmethod
    def from_config(cls, fill_color: str, style: Mapping[str, Any]) -> 'PolygonStyle':
        """Build a style from the ``style`` configuration section."""
        return cls(
            fill_color=fill_color,
            color=style.get('color', '#222'),
            weight=style.get('weight', 1),
            opacity=style.get('opacity', 0.8),
            fill_opacity=style.get('fill_opacity', 0.8)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'color': self.color,
            'weight': self.weight,
            'opacity': self.opacity,
            'fillColor': self.fill_color,
            'fillOpacity': self.fill_opacity
        }


@dataclass(frozen=True)
class DrawCommand:
    """Instruction to draw one hexagon on the map layer."""
    cell: HexCell
    vertices: Tuple[LatLng, ...]
    style: PolygonStyle

    @property
    def color(self) -> str:
        return self.style.fill_color
