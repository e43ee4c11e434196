"""Shared fixtures and collaborator fakes for hexmap tests."""

import asyncio
import math
from typing import List, Optional, Sequence

import pytest

from hexmap.abstractions.interfaces import IFeatureSource, IGridIndex, IReprojector
from hexmap.abstractions.types import RawFeature, RepresentativePoint, ViewportBounds


class IdentityReprojector(IReprojector):
    """Treats projected (x, y) as (lng, lat) so geometry stays readable."""

    def __init__(self):
        self.calls = 0

    def reproject(self, x, y):
        self.calls += 1
        return (float(y), float(x))

    def reproject_ring(self, ring):
        return [self.reproject(vertex[0], vertex[1]) for vertex in ring]


class SquareGridIndex(IGridIndex):
    """Square cells of ``1 / resolution`` degrees keyed by (resolution, row, col)."""

    def cell_for_point(self, lat, lng, resolution):
        size = 1.0 / resolution
        return (resolution, math.floor(lat / size), math.floor(lng / size))

    def boundary_for_cell(self, cell):
        resolution, row, col = cell
        size = 1.0 / resolution
        south, west = row * size, col * size
        north, east = south + size, west + size
        return [(west, south), (east, south), (east, north), (west, north)]


class StaticFeatureSource(IFeatureSource):
    """Feature source returning a fixed list after yielding to the loop."""

    def __init__(self, features: Sequence[RawFeature], failures: int = 0):
        self.features = list(features)
        self.failures = failures
        self.calls = 0

    async def load_features(self) -> List[RawFeature]:
        self.calls += 1
        await asyncio.sleep(0)
        if self.calls <= self.failures:
            raise ConnectionError("dataset unavailable")
        return self.features


def square_feature(lng: float, lat: float, half_size: float = 0.5,
                   color: Optional[str] = None) -> RawFeature:
    """Axis-aligned square polygon centred on (lng, lat) in source units."""
    ring = [
        [lng - half_size, lat - half_size],
        [lng + half_size, lat - half_size],
        [lng + half_size, lat + half_size],
        [lng - half_size, lat + half_size],
        [lng - half_size, lat - half_size],
    ]
    properties = {'COLOR_HEX': color} if color else {}
    return RawFeature(geometry={'type': 'Polygon', 'coordinates': [ring]},
                      properties=properties)


@pytest.fixture
def identity_reprojector():
    return IdentityReprojector()


@pytest.fixture
def square_grid():
    return SquareGridIndex()


@pytest.fixture
def make_square():
    return square_feature


@pytest.fixture
def make_source():
    return StaticFeatureSource


@pytest.fixture
def world_bounds():
    return ViewportBounds(south=-90, west=-180, north=90, east=180)


@pytest.fixture
def sample_points():
    return [
        RepresentativePoint(lat=0.25, lng=0.25, color='#FF0000'),
        RepresentativePoint(lat=0.75, lng=0.75, color='#00FF00'),
        RepresentativePoint(lat=5.5, lng=5.5, color='#0000FF'),
    ]
