"""
Contour generation over a grid of samples.

Pipeline per threshold: pad the grid, classify cells, interpolate crossings,
chain segments into rings and map the rings back into grid coordinates.
Thresholds are independent of each other and may be traced in parallel.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from contours.cases import build_segments
from contours.grid import Grid, PaddedGrid, normalize_grid, pad_grid, resolve_thresholds
from contours.mapping import rings_to_polygons
from contours.rings import assemble_rings
from contours.types import ContourResult
from shared.constants import CONTOUR_PARALLEL_WORKERS

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy as np

    from contours.types import Polygon
    from domain.models import ContourSettings

logger = logging.getLogger(__name__)


def _level_crosses_grid(grid: Grid, threshold: float) -> bool:
    # A level with every sample on one side has no isoline inside the grid;
    # the ring around the sentinel border is not reported.
    return grid.min < threshold <= grid.max


def trace_level(
    grid: Grid,
    padded: PaddedGrid,
    threshold: float,
    *,
    smoothing: bool = True,
) -> list[Polygon]:
    """Polygons of a single threshold, in grid coordinates."""
    if not _level_crosses_grid(grid, threshold):
        return []
    segments = build_segments(padded.values, threshold, smoothing=smoothing)
    rings = assemble_rings(segments)
    logger.debug(
        'Level %s: %d segments, %d rings', threshold, len(segments), len(rings)
    )
    return rings_to_polygons(rings, grid.width, grid.height)


def compute(
    grid: Sequence[Sequence[float]] | Sequence[float] | np.ndarray,
    thresholds: object,
    smoothing: bool = True,
    *,
    width: int | None = None,
    height: int | None = None,
    workers: int | None = None,
) -> list[ContourResult]:
    """
    Trace contours of ``grid`` at every resolved threshold.

    Args:
        grid: Nested rows (grid[y][x]) or a flat row-major sequence.
        thresholds: Explicit list of levels or a positive level count.
        smoothing: Interpolate crossings linearly; midpoints otherwise.
        width: Columns of a flat grid.
        height: Rows of a flat grid.
        workers: Upper bound on worker threads (None = default, 1 = sequential).

    Returns:
        One ContourResult per threshold, in the requested order.

    Raises:
        InvalidGridError: the samples don't form a rectangular grid.

    """
    normalized = normalize_grid(grid, width=width, height=height)
    levels = resolve_thresholds(thresholds, normalized)
    if not levels:
        return []

    padded = pad_grid(normalized)

    if workers is None:
        workers = CONTOUR_PARALLEL_WORKERS
    num_workers = min(workers, max(1, os.cpu_count() or 1), len(levels))

    def process_level(level: float) -> ContourResult:
        polygons = trace_level(normalized, padded, level, smoothing=smoothing)
        return ContourResult(threshold=level, polygons=polygons)

    if num_workers > 1 and len(levels) > 1:
        # map() keeps the order of levels
        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            results = list(executor.map(process_level, levels))
    else:
        results = [process_level(level) for level in levels]

    logger.debug(
        'Traced %d levels on %dx%d grid (%d workers)',
        len(levels),
        normalized.width,
        normalized.height,
        num_workers,
    )
    return results


def compute_with_settings(
    grid: Sequence[Sequence[float]] | Sequence[float] | np.ndarray,
    settings: ContourSettings,
) -> list[ContourResult]:
    return compute(
        grid,
        settings.thresholds,
        settings.smoothing,
        width=settings.width,
        height=settings.height,
        workers=settings.workers,
    )
