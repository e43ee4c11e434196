"""Tests for the H3-backed grid index."""

import h3
import pytest

from hexmap.exceptions import HexMapError
from hexmap.grid_systems import H3GridIndex


class TestH3GridIndex:
    """Test H3GridIndex."""

    def test_cell_for_point(self):
        index = H3GridIndex()
        cell = index.cell_for_point(23.8859, 45.0792, 6)

        assert h3.is_valid_cell(cell)
        assert h3.get_resolution(cell) == 6
        assert cell == h3.latlng_to_cell(23.8859, 45.0792, 6)

    def test_boundary_is_lng_lat(self):
        """Boundary pairs are (lng, lat), GeoJSON order."""
        index = H3GridIndex()
        cell = index.cell_for_point(23.8859, 45.0792, 5)
        boundary = index.boundary_for_cell(cell)

        assert len(boundary) == 6
        for lng, lat in boundary:
            assert 44 < lng < 46
            assert 23 < lat < 25

    def test_nearby_points_share_coarse_cell(self):
        index = H3GridIndex()
        center_lat, center_lng = h3.cell_to_latlng(h3.latlng_to_cell(23.8859, 45.0792, 3))
        a = index.cell_for_point(center_lat, center_lng, 3)
        b = index.cell_for_point(center_lat + 0.01, center_lng + 0.01, 3)
        assert a == b

    def test_invalid_cell(self):
        with pytest.raises(HexMapError):
            H3GridIndex().boundary_for_cell('not-a-cell')
