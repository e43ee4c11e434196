"""Hexagon layer controller: wires the map surface to the aggregation pipeline."""

import asyncio
from typing import List, Optional, Sequence, Set

from ..abstractions.interfaces import IFeatureSource, IGridIndex, IMapSurface, IReprojector
from ..abstractions.types import DrawCommand, RepresentativePoint, ViewportBounds
from ..config import config
from ..features import FeatureNormalizer
from ..grid_systems import H3GridIndex, ResolutionSelector, aggregate
from ..infrastructure.logging import LoggingContext, get_logger
from ..projections import PyprojReprojector
from ..rendering import ViewportRenderer
from .point_cache import RepresentativePointCache

logger = get_logger(__name__)


class HexLayerController:
    """
    Keeps one hexagon layer on a map surface in sync with the current view.

    Every pan, zoom or resize triggers a full render pass: the cached
    representative points are aggregated at the resolution for the current
    zoom, culled to the visible bounds and drawn after clearing the layer.
    Passes keep no state between them, so repeated triggers are harmless.
    """

    def __init__(self,
                 surface: IMapSurface,
                 source: IFeatureSource,
                 grid_index: Optional[IGridIndex] = None,
                 reprojector: Optional[IReprojector] = None,
                 normalizer: Optional[FeatureNormalizer] = None,
                 selector: Optional[ResolutionSelector] = None,
                 renderer: Optional[ViewportRenderer] = None,
                 coalesce_view_changes: Optional[bool] = None):
        """
        Args:
            surface: Map surface providing zoom, bounds, events and the layer
            source: Feature collection provider, loaded once
            grid_index: Hex grid index (H3 by default)
            reprojector: Used to build the default normalizer
            normalizer: Overrides the default ``FeatureNormalizer``
            selector: Zoom to resolution step table
            renderer: Viewport renderer
            coalesce_view_changes: Skip scheduling a pass while one is pending
        """
        self.surface = surface
        self.grid_index = grid_index or H3GridIndex()
        self.selector = selector or ResolutionSelector()
        self.renderer = renderer or ViewportRenderer()

        if normalizer is None:
            normalizer = FeatureNormalizer(reprojector or PyprojReprojector())
        self.cache = RepresentativePointCache(source, normalizer)

        if coalesce_view_changes is None:
            coalesce_view_changes = config.get('rendering.coalesce_view_changes', False)
        self.coalesce_view_changes = coalesce_view_changes

        self.log_context = LoggingContext()
        self._attached = False
        self._pass_scheduled = False
        self._tasks: Set[asyncio.Task] = set()
        self.pass_count = 0

    def attach(self) -> asyncio.Task:
        """Start listening for view changes and schedule the first pass."""
        if not self._attached:
            self.surface.add_view_listener(self._on_view_changed)
            self._attached = True
            logger.info("Hexagon layer attached")
        return self._schedule_pass()

    def detach(self) -> None:
        """Stop listening for view changes and cancel pending passes."""
        if self._attached:
            self.surface.remove_view_listener(self._on_view_changed)
            self._attached = False
        for task in list(self._tasks):
            task.cancel()
        logger.info("Hexagon layer detached")

    def _on_view_changed(self) -> None:
        if self.coalesce_view_changes and self._pass_scheduled:
            logger.debug("Render pass already pending, view change coalesced")
            return
        self._schedule_pass()

    def _schedule_pass(self) -> asyncio.Task:
        self._pass_scheduled = True
        task = asyncio.get_running_loop().create_task(self.load_and_render())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_until_idle(self) -> None:
        """Wait for every scheduled render pass to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def load_and_render(self) -> List[DrawCommand]:
        """Ensure points are loaded, then run a render pass for the current view."""
        self._pass_scheduled = False
        points = await self.cache.get_or_load()

        zoom = self.surface.get_zoom()
        bounds = self.surface.get_bounds()
        commands = self.render_pass(points, zoom, bounds)

        ViewportRenderer.apply(commands, self.surface.layer)
        return commands

    async def reload(self) -> List[DrawCommand]:
        """Drop the cached points, fetch the dataset again and redraw."""
        self.cache.invalidate()
        return await self.load_and_render()

    def render_pass(self,
                    points: Sequence[RepresentativePoint],
                    zoom: float,
                    bounds: ViewportBounds) -> List[DrawCommand]:
        """Synchronous core of a pass: select resolution, aggregate, cull."""
        resolution = self.selector.select(zoom)
        self.pass_count += 1

        with self.log_context.stage('render_pass', zoom=zoom, resolution=resolution):
            with self.log_context.operation('aggregate', points=len(points)):
                cell_colors = aggregate(points, resolution, self.grid_index)
            with self.log_context.operation('cull', cells=len(cell_colors)):
                commands = self.renderer.render(
                    cell_colors, bounds, self.grid_index.boundary_for_cell
                )
            logger.debug(
                f"Pass {self.pass_count}: {len(points)} points -> "
                f"{len(cell_colors)} cells -> {len(commands)} drawn",
                extra={'context': {'resolution': resolution,
                                   'cells_drawn': len(commands)}}
            )

        return commands
