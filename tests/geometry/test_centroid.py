"""Tests for ring centroid calculation."""

import pytest

from hexmap.geometry import ring_centroid


class TestRingCentroid:
    """Test ring_centroid()."""

    def test_square(self):
        assert ring_centroid([(0, 0), (0, 2), (2, 2), (2, 0)]) == pytest.approx((1, 1))

    def test_closed_ring_matches_open_ring(self):
        open_ring = [(0, 0), (0, 2), (2, 2), (2, 0)]
        closed_ring = open_ring + [(0, 0)]
        assert ring_centroid(closed_ring) == pytest.approx(ring_centroid(open_ring))

    def test_winding_does_not_matter(self):
        ring = [(0, 0), (0, 2), (2, 2), (2, 0)]
        assert ring_centroid(list(reversed(ring))) == pytest.approx((1, 1))

    def test_area_weighted_not_vertex_mean(self):
        """Extra vertices along one edge do not pull the centroid."""
        ring = [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (4, 4), (4, 0)]
        lat, lng = ring_centroid(ring)
        assert lat == pytest.approx(2)
        assert lng == pytest.approx(2)

    def test_triangle(self):
        lat, lng = ring_centroid([(0, 0), (0, 3), (3, 0)])
        assert lat == pytest.approx(1)
        assert lng == pytest.approx(1)

    def test_collinear_falls_back_to_mean(self):
        """Zero signed area returns the arithmetic mean of all vertices."""
        ring = [(0, 0), (1, 1), (2, 2), (6, 6)]
        assert ring_centroid(ring) == (2.25, 2.25)

    def test_single_point(self):
        assert ring_centroid([(24.5, 45.25)]) == (24.5, 45.25)

    def test_two_points(self):
        assert ring_centroid([(0, 0), (2, 4)]) == (1.0, 2.0)

    def test_near_degenerate_ring_skips_fallback(self):
        """Fallback is exact-zero only; a tiny non-zero area uses the area formula."""
        # Only the last edge spans area; its triangle centroid sits at lng 13/3
        ring = [(0, 0), (0, 1), (0, 2), (0, 3), (1e-9, 10)]
        vertex_mean_lng = sum(lng for _, lng in ring) / len(ring)

        lat, lng = ring_centroid(ring)

        assert lng == pytest.approx(13 / 3)
        assert lng != pytest.approx(vertex_mean_lng)
        assert lat == pytest.approx(1e-9 / 3, abs=1e-12)
