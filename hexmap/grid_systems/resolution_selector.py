"""Zoom level to H3 resolution step function."""

from typing import Optional, Sequence, Tuple

from ..config import config
from ..exceptions import ConfigurationError

# (max zoom, resolution): first step whose max zoom is >= zoom wins
ZOOM_RESOLUTION_STEPS: Tuple[Tuple[float, int], ...] = (
    (4, 3),
    (5, 5),
    (6, 6),
    (7, 7),
    (9, 8),
    (11, 9),
)
MAX_RESOLUTION = 10

H3_MIN_RESOLUTION = 0
H3_MAX_RESOLUTION = 15


def resolution_for_zoom(zoom: float,
                        steps: Sequence[Tuple[float, int]] = ZOOM_RESOLUTION_STEPS,
                        max_resolution: int = MAX_RESOLUTION) -> int:
    """
    Map a continuous zoom level to a discrete H3 resolution.

    With the default table: zoom <= 4 -> 3, <= 5 -> 5, <= 6 -> 6, <= 7 -> 7,
    <= 9 -> 8, <= 11 -> 9, anything above -> 10.
    """
    for max_zoom, resolution in steps:
        if zoom <= max_zoom:
            return resolution
    return max_resolution


class ResolutionSelector:
    """Step table holder validated once at construction."""

    def __init__(self,
                 steps: Optional[Sequence[Sequence[float]]] = None,
                 max_resolution: Optional[int] = None):
        if steps is None:
            steps = config.get('resolution.zoom_steps', ZOOM_RESOLUTION_STEPS)
        if max_resolution is None:
            max_resolution = config.get('resolution.max_resolution', MAX_RESOLUTION)

        self.steps = self._validate(steps, max_resolution)
        self.max_resolution = int(max_resolution)

    @staticmethod
    def _validate(steps: Sequence[Sequence[float]], max_resolution: int) -> Tuple[Tuple[float, int], ...]:
        """Steps must be (zoom, resolution) pairs, both non-decreasing, within H3 range."""
        validated = []
        for step in steps:
            if len(step) != 2:
                raise ConfigurationError(f"Zoom step must be a (zoom, resolution) pair, got: {step}")
            validated.append((float(step[0]), int(step[1])))

        resolutions = [res for _, res in validated] + [int(max_resolution)]
        for res in resolutions:
            if not H3_MIN_RESOLUTION <= res <= H3_MAX_RESOLUTION:
                raise ConfigurationError(
                    f"H3 resolution must be within {H3_MIN_RESOLUTION}-{H3_MAX_RESOLUTION}, got: {res}"
                )

        zooms = [zoom for zoom, _ in validated]
        if zooms != sorted(zooms):
            raise ConfigurationError(f"Zoom thresholds must be ascending: {zooms}")
        if resolutions != sorted(resolutions):
            raise ConfigurationError(f"Resolutions must not decrease with zoom: {resolutions}")

        return tuple(validated)

    def select(self, zoom: float) -> int:
        return resolution_for_zoom(zoom, self.steps, self.max_resolution)
