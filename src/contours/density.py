"""
Density contours of scattered points.

Points are spread onto a regular grid with a Gaussian kernel
K(u) = exp(-u²/2) / (2π·bw²), the grid is contoured and the contour
coordinates are scaled back into point space.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import numpy as np

from contours.engine import compute
from contours.types import ContourResult
from domain.models import DensitySettings
from shared.constants import DENSITY_KERNEL_RADIUS_SIGMAS

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)


def _default_x(d: Any) -> float:
    if isinstance(d, Mapping):
        return d.get('x', 0)
    return d[0]


def _default_y(d: Any) -> float:
    if isinstance(d, Mapping):
        return d.get('y', 0)
    return d[1]


def _default_weight(_d: Any) -> float:
    return 1.0


def estimate_density(
    points: Iterable[Any],
    settings: DensitySettings | None = None,
    *,
    x: Callable[[Any], float] | None = None,
    y: Callable[[Any], float] | None = None,
    weight: Callable[[Any], float] | None = None,
) -> np.ndarray:
    """
    Kernel density grid of shape (grid_height, grid_width).

    Cell (i, j) sits at point-space position (j * cell_size, i * cell_size).
    Each point only touches cells within three bandwidths of it.
    """
    if settings is None:
        settings = DensitySettings()
    x_fn = x or _default_x
    y_fn = y or _default_y
    weight_fn = weight or _default_weight

    grid_w = settings.grid_width
    grid_h = settings.grid_height
    grid = np.zeros((grid_h, grid_w), dtype=np.float64)

    cell = settings.cell_size
    radius = math.ceil(settings.bandwidth * DENSITY_KERNEL_RADIUS_SIGMAS / cell)
    bw = settings.bandwidth / cell
    norm = 2.0 * math.pi * bw * bw

    count = 0
    for d in points:
        count += 1
        gx = float(x_fn(d)) / cell
        gy = float(y_fn(d)) / cell
        w = float(weight_fn(d))

        x0 = max(0, math.floor(gx) - radius)
        x1 = min(grid_w - 1, math.ceil(gx) + radius)
        y0 = max(0, math.floor(gy) - radius)
        y1 = min(grid_h - 1, math.ceil(gy) + radius)
        if x0 > x1 or y0 > y1:
            continue

        dx = np.arange(x0, x1 + 1, dtype=np.float64) - gx
        dy = np.arange(y0, y1 + 1, dtype=np.float64) - gy
        d2 = dy[:, np.newaxis] ** 2 + dx[np.newaxis, :] ** 2
        grid[y0 : y1 + 1, x0 : x1 + 1] += w * np.exp(-d2 / (2.0 * bw * bw)) / norm

    logger.debug(
        'Density of %d points on %dx%d grid (bandwidth %.3g cells)',
        count,
        grid_w,
        grid_h,
        bw,
    )
    return grid


def _scale_result(result: ContourResult, factor: float) -> ContourResult:
    polygons = [
        [[(px * factor, py * factor) for px, py in ring] for ring in polygon]
        for polygon in result.polygons
    ]
    return ContourResult(threshold=result.threshold, polygons=polygons)


def density_contours(
    points: Iterable[Any],
    settings: DensitySettings | None = None,
    *,
    x: Callable[[Any], float] | None = None,
    y: Callable[[Any], float] | None = None,
    weight: Callable[[Any], float] | None = None,
) -> list[ContourResult]:
    """Contours of the point density, in point-space coordinates."""
    if settings is None:
        settings = DensitySettings()
    grid = estimate_density(points, settings, x=x, y=y, weight=weight)
    results = compute(grid, settings.thresholds, smoothing=True)
    return [_scale_result(r, settings.cell_size) for r in results]
