"""Tests for render.commands module."""

import pytest

from contours.types import ContourResult
from render.commands import (
    Close,
    Line,
    Move,
    RenderedContour,
    polygon_commands,
    render,
    render_results,
    ring_commands,
)


class TestRingCommands:
    """Tests for ring_commands function."""

    def test_closed_ring(self):
        """Closed ring: move, lines, close."""
        ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)]
        assert ring_commands(ring) == [
            Move(0.0, 0.0),
            Line(1.0, 0.0),
            Line(1.0, 1.0),
            Line(0.0, 0.0),
            Close(),
        ]

    def test_open_ring_not_closed(self):
        """Open ring is left without a close command."""
        ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
        commands = ring_commands(ring)
        assert commands[-1] == Line(1.0, 1.0)
        assert Close() not in commands

    def test_close_within_tolerance(self):
        """Closing point within 1e-3 of the start still closes."""
        ring = [(0.0, 0.0), (1.0, 0.0), (0.0005, 0.0)]
        assert ring_commands(ring)[-1] == Close()

    def test_two_point_ring_not_closed(self):
        """Two coincident points are not a closed ring and get no close command."""
        assert ring_commands([(0.0, 2.0), (0.0, 2.0)]) == [Move(0.0, 2.0), Line(0.0, 2.0)]

    def test_single_point(self):
        """A single point draws nothing."""
        assert ring_commands([(1.0, 1.0)]) == []

    def test_empty(self):
        """An empty ring draws nothing."""
        assert ring_commands([]) == []


class TestPolygonCommands:
    """Tests for polygon_commands function."""

    def test_rings_concatenated(self):
        """Commands of all rings are concatenated."""
        outer = [(0.0, 0.0), (3.0, 0.0), (3.0, 3.0), (0.0, 0.0)]
        hole = [(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 1.0)]
        commands = polygon_commands([outer, hole])
        assert commands.count(Close()) == 2
        assert [c for c in commands if isinstance(c, Move)] == [
            Move(0.0, 0.0),
            Move(1.0, 1.0),
        ]


class TestRender:
    """Tests for render and render_results functions."""

    def test_render_levels(self, peak_grid):
        """One rendered contour per level, in order."""
        rendered = render(peak_grid, [2.5, 7.5])
        assert [r.value for r in rendered] == [2.5, 7.5]
        for r in rendered:
            assert isinstance(r.commands[0], Move)
            assert r.commands[-1] == Close()
            assert r.commands.count(Close()) == 1

    def test_render_no_smoothing(self, peak_grid):
        """Smoothing flag is passed through."""
        smooth = render(peak_grid, [4])[0]
        rough = render(peak_grid, [4], smoothing=False)[0]
        assert smooth.commands != rough.commands

    def test_render_empty_level(self, peak_grid):
        """A level without polygons renders no commands."""
        assert render(peak_grid, [100])[0].commands == []

    def test_render_results(self):
        """render_results works on precomputed results."""
        result = ContourResult(
            threshold=1.0,
            polygons=[[[(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (0.0, 0.0)]]],
        )
        (rendered,) = render_results([result])
        assert rendered.threshold == 1.0
        assert len(rendered.commands) == 5

    def test_path_property(self):
        """RenderedContour.path serializes its commands."""
        rendered = RenderedContour(
            threshold=1.0, commands=[Move(0, 0), Line(1, 0), Close()]
        )
        assert rendered.path == 'M0,0L1,0Z'

    @pytest.mark.parametrize('command', [Move(1.0, 2.0), Line(1.0, 2.0)])
    def test_commands_are_values(self, command):
        """Commands compare by value."""
        assert command == type(command)(1.0, 2.0)
