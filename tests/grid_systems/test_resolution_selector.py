"""Tests for zoom to resolution selection."""

import pytest

from hexmap.exceptions import ConfigurationError
from hexmap.grid_systems import ResolutionSelector, resolution_for_zoom


class TestResolutionForZoom:
    """Test the fixed step table."""

    @pytest.mark.parametrize("zoom,expected", [
        (0, 3),
        (4, 3),
        (4.9, 3),
        (5, 5),
        (5.5, 6),
        (6, 6),
        (7, 7),
        (8, 8),
        (9, 8),
        (10, 9),
        (11, 9),
        (11.01, 10),
        (12, 10),
        (18, 10),
    ])
    def test_step_table(self, zoom, expected):
        assert resolution_for_zoom(zoom) == expected

    def test_negative_zoom_is_total(self):
        assert resolution_for_zoom(-3) == 3

    def test_monotonic(self):
        """Resolution never decreases as zoom increases."""
        zooms = [z / 4 for z in range(-4, 90)]
        resolutions = [resolution_for_zoom(z) for z in zooms]
        assert resolutions == sorted(resolutions)


class TestResolutionSelector:
    """Test configurable step tables."""

    def test_default_table_matches_function(self):
        selector = ResolutionSelector()
        for zoom in [0, 4, 4.9, 5, 6, 7, 9, 11, 12, 20]:
            assert selector.select(zoom) == resolution_for_zoom(zoom)

    def test_custom_table(self):
        selector = ResolutionSelector(steps=[[3, 2], [8, 6]], max_resolution=9)
        assert selector.select(1) == 2
        assert selector.select(5) == 6
        assert selector.select(12) == 9

    def test_descending_resolutions_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ResolutionSelector(steps=[[4, 8], [6, 5]], max_resolution=10)
        assert "must not decrease" in str(exc_info.value)

    def test_unsorted_zooms_rejected(self):
        with pytest.raises(ConfigurationError):
            ResolutionSelector(steps=[[6, 5], [4, 6]], max_resolution=10)

    def test_out_of_range_resolution_rejected(self):
        with pytest.raises(ConfigurationError):
            ResolutionSelector(steps=[[4, 3]], max_resolution=16)

    def test_malformed_step_rejected(self):
        with pytest.raises(ConfigurationError):
            ResolutionSelector(steps=[[4, 3, 1]])
