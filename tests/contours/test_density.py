"""Tests for contours.density module."""

import math

import numpy as np
import pytest

from contours.density import density_contours, estimate_density
from contours.rings import is_closed
from domain.models import DensitySettings


@pytest.fixture
def settings():
    return DensitySettings(width=40, height=20, cell_size=4, bandwidth=8, thresholds=3)


class TestEstimateDensity:
    """Tests for estimate_density function."""

    def test_shape(self, settings):
        """Grid has width // cell_size + 1 columns and height // cell_size + 1 rows."""
        grid = estimate_density([], settings)
        assert grid.shape == (6, 11)
        assert not grid.any()

    def test_peak_at_point(self, settings):
        """The densest cell is the one under the point."""
        grid = estimate_density([{'x': 20, 'y': 12}], settings)
        assert np.unravel_index(np.argmax(grid), grid.shape) == (3, 5)

    def test_kernel_normalization(self, settings):
        """A point sitting on a cell contributes 1 / (2π·bw²) there."""
        grid = estimate_density([(20, 12)], settings)
        bw = settings.bandwidth / settings.cell_size
        assert grid[3, 5] == pytest.approx(1.0 / (2.0 * math.pi * bw * bw))

    def test_weight_scales(self, settings):
        """Weights multiply the contribution."""
        single = estimate_density([(20, 12)], settings)
        double = estimate_density([(20, 12)], settings, weight=lambda d: 2.0)
        assert np.allclose(double, 2.0 * single)

    def test_custom_accessors(self, settings):
        """Accessors pick coordinates out of arbitrary records."""
        records = [{'lon': 20, 'lat': 12}]
        grid = estimate_density(
            records, settings, x=lambda d: d['lon'], y=lambda d: d['lat']
        )
        assert np.array_equal(grid, estimate_density([(20, 12)], settings))

    def test_radius_limits_influence(self, settings):
        """Cells beyond three bandwidths stay empty."""
        grid = estimate_density([(0, 0)], settings)
        # 3 * 8 / 4 = 6 cells of influence
        assert grid[0, 6] > 0
        assert grid[0, 8] == 0

    def test_point_far_outside(self, settings):
        """Points far outside the area leave the grid empty."""
        grid = estimate_density([(1000, 1000)], settings)
        assert not grid.any()

    def test_default_settings(self):
        """Default settings give a 241 x 126 grid."""
        assert estimate_density([]).shape == (126, 241)


class TestDensityContours:
    """Tests for density_contours function."""

    def test_cluster_ring_around_point(self, settings):
        """A cluster yields a closed ring around it in point space."""
        points = [(20, 12), (21, 12), (20, 11)]
        grid = estimate_density(points, settings)
        level = grid.max() / 2
        results = density_contours(points, settings.model_copy(update={'thresholds': [level]}))
        assert len(results) == 1
        assert len(results[0].polygons) == 1
        ring = results[0].polygons[0][0]
        assert is_closed(ring)
        xs = [p[0] for p in ring]
        ys = [p[1] for p in ring]
        assert min(xs) < 20 < max(xs)
        assert min(ys) < 12 < max(ys)

    def test_coordinates_scaled(self, settings):
        """Coordinates are in point space, bounded by the area."""
        results = density_contours([(20, 12), (8, 4)], settings)
        assert len(results) == 3
        for result in results:
            for polygon in result.polygons:
                for x, y in polygon[0]:
                    assert 0.0 <= x <= 40.0
                    assert 0.0 <= y <= 20.0

    def test_no_points(self, settings):
        """Without points every level is empty."""
        results = density_contours([], settings)
        assert len(results) == 3
        assert all(r.polygons == [] for r in results)
