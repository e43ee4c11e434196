"""Write-once cache of representative points for a loaded dataset."""

import asyncio
from typing import List, Optional

from ..abstractions.interfaces import IFeatureSource
from ..abstractions.types import RepresentativePoint
from ..exceptions import FeatureSourceError
from ..features import FeatureNormalizer
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


def _consume_result(task: asyncio.Task) -> None:
    # A load whose callers were all cancelled still has its failure retrieved
    if not task.cancelled():
        task.exception()


class RepresentativePointCache:
    """
    Loads and normalizes the feature collection at most once.

    Callers arriving while the first load is still running share the same
    in-flight task instead of starting another fetch. A failed load leaves
    the cache empty; the next ``get_or_load`` tries again. ``invalidate`` is
    the only way to drop loaded points.
    """

    def __init__(self, source: IFeatureSource, normalizer: FeatureNormalizer):
        self.source = source
        self.normalizer = normalizer
        self._points: Optional[List[RepresentativePoint]] = None
        self._inflight: Optional["asyncio.Task[List[RepresentativePoint]]"] = None
        self._generation = 0
        self.load_count = 0

    @property
    def is_loaded(self) -> bool:
        return self._points is not None

    @property
    def points(self) -> Optional[List[RepresentativePoint]]:
        return self._points

    async def get_or_load(self) -> List[RepresentativePoint]:
        """Cached points, loading them first if needed; empty list on failure."""
        if self._points is not None:
            return self._points

        if self._inflight is None:
            self._inflight = asyncio.get_running_loop().create_task(
                self._load(self._generation)
            )
            self._inflight.add_done_callback(_consume_result)

        try:
            # shield: a cancelled caller must not cancel the shared load
            return await asyncio.shield(self._inflight)
        except FeatureSourceError:
            return []

    def invalidate(self) -> None:
        """Drop cached points; an in-flight load finishing later is discarded."""
        self._generation += 1
        self._points = None
        self._inflight = None
        logger.info("Representative point cache invalidated")

    async def _load(self, generation: int) -> List[RepresentativePoint]:
        self.load_count += 1
        try:
            features = await self.source.load_features()
            points = self.normalizer.normalize(features)
        except Exception as e:
            logger.log_error_with_context(e, operation='load_features',
                                          attempt=self.load_count)
            raise FeatureSourceError("Failed to load feature collection", e) from e
        finally:
            if generation == self._generation:
                self._inflight = None

        if generation == self._generation:
            self._points = points
        return points
