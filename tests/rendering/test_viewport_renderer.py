"""Tests for viewport culling and draw command generation."""

import pytest

from hexmap.abstractions.types import PolygonStyle, ViewportBounds
from hexmap.rendering import ViewportRenderer
from hexmap.surfaces import InMemoryDrawLayer


@pytest.fixture
def renderer():
    return ViewportRenderer(style={'color': '#222', 'weight': 1,
                                   'opacity': 0.8, 'fill_opacity': 0.8})


class TestRender:
    """Test ViewportRenderer.render()."""

    def test_cell_outside_viewport_culled(self, renderer, square_grid):
        cells = {(1, 10, 10): '#FF0000'}
        viewport = ViewportBounds(south=0, west=0, north=5, east=5)

        assert renderer.render(cells, viewport, square_grid.boundary_for_cell) == []

    def test_cell_inside_viewport_drawn_once(self, renderer, square_grid):
        cells = {(1, 2, 3): '#FF0000'}
        viewport = ViewportBounds(south=0, west=0, north=5, east=5)

        commands = renderer.render(cells, viewport, square_grid.boundary_for_cell)

        assert len(commands) == 1
        assert commands[0].cell == (1, 2, 3)
        assert commands[0].color == '#FF0000'

    def test_partially_visible_cell_drawn(self, renderer, square_grid):
        cells = {(1, 4, 4): '#FF0000'}
        viewport = ViewportBounds(south=0, west=0, north=4.5, east=4.5)
        assert len(renderer.render(cells, viewport, square_grid.boundary_for_cell)) == 1

    def test_touching_edge_counts_as_intersecting(self, renderer, square_grid):
        cells = {(1, 5, 0): '#FF0000'}
        viewport = ViewportBounds(south=0, west=0, north=5, east=5)
        assert len(renderer.render(cells, viewport, square_grid.boundary_for_cell)) == 1

    def test_vertices_converted_to_lat_lng(self, renderer, square_grid):
        cells = {(1, 2, 3): '#FF0000'}
        viewport = ViewportBounds(south=-90, west=-180, north=90, east=180)

        command = renderer.render(cells, viewport, square_grid.boundary_for_cell)[0]

        lats = {lat for lat, _ in command.vertices}
        lngs = {lng for _, lng in command.vertices}
        assert lats == {2.0, 3.0}
        assert lngs == {3.0, 4.0}

    def test_style(self, renderer, square_grid, world_bounds):
        command = renderer.render({(1, 0, 0): '#00FF00'}, world_bounds,
                                  square_grid.boundary_for_cell)[0]

        assert command.style == PolygonStyle(fill_color='#00FF00', color='#222',
                                             weight=1, opacity=0.8, fill_opacity=0.8)
        assert command.style.to_dict()['fillColor'] == '#00FF00'

    def test_empty_map(self, renderer, square_grid, world_bounds):
        assert renderer.render({}, world_bounds, square_grid.boundary_for_cell) == []

    def test_idempotent(self, renderer, square_grid, world_bounds):
        """Two renders of the same input give the same command set."""
        cells = {(1, 0, 0): '#FF0000', (1, 3, 3): '#00FF00', (2, 1, 7): '#0000FF'}

        first = renderer.render(cells, world_bounds, square_grid.boundary_for_cell)
        second = renderer.render(cells, world_bounds, square_grid.boundary_for_cell)

        assert set(first) == set(second)
        assert len(first) == 3


class TestApply:
    """Test ViewportRenderer.apply()."""

    def test_apply_replaces_layer_contents(self, renderer, square_grid, world_bounds):
        layer = InMemoryDrawLayer()
        commands = renderer.render({(1, 0, 0): '#FF0000', (1, 1, 1): '#00FF00'},
                                   world_bounds, square_grid.boundary_for_cell)

        assert ViewportRenderer.apply(commands, layer) == 2
        assert ViewportRenderer.apply(commands[:1], layer) == 1

        assert len(layer) == 1
        assert layer.clear_count == 2
        assert layer.polygons[0][1].fill_color == '#FF0000'
