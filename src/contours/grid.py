"""
Grid normalization, threshold resolution and boundary padding.

A grid arrives either as nested rows or as a flat row-major sequence with
explicit dimensions. Both forms are reduced to a flat float array so the rest
of the pipeline only deals with one representation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Integral, Real
from typing import TYPE_CHECKING

import numpy as np

from shared.constants import MIN_GRID_SIZE, PAD_SENTINEL_OFFSET, PAD_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

MAX_GRID_NDIM = 2


class InvalidGridError(ValueError):
    """Raised when samples can't be arranged into a rectangular grid."""


@dataclass(frozen=True, eq=False)
class Grid:
    """Flat row-major samples with known dimensions."""

    values: np.ndarray
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < MIN_GRID_SIZE or self.height < MIN_GRID_SIZE:
            msg = f'Grid must be at least 1x1, got {self.width}x{self.height}'
            raise InvalidGridError(msg)
        if self.values.size != self.width * self.height:
            msg = (
                f'Grid of {self.width}x{self.height} needs '
                f'{self.width * self.height} samples, got {self.values.size}'
            )
            raise InvalidGridError(msg)

    def rows(self) -> np.ndarray:
        """Samples as a (height, width) array."""
        return self.values.reshape(self.height, self.width)

    @property
    def min(self) -> float:
        return float(self.values.min())

    @property
    def max(self) -> float:
        return float(self.values.max())


@dataclass(frozen=True, eq=False)
class PaddedGrid:
    """Grid wrapped in a one-cell sentinel border."""

    values: np.ndarray
    sentinel: float

    @property
    def width(self) -> int:
        return int(self.values.shape[1])

    @property
    def height(self) -> int:
        return int(self.values.shape[0])


def _is_row(item: object) -> bool:
    if isinstance(item, np.ndarray):
        return item.ndim > 0
    return isinstance(item, Sequence) and not isinstance(item, (str, bytes))


def _to_floats(samples: Iterable[object]) -> np.ndarray:
    floats: list[float] = []
    for sample in samples:
        if isinstance(sample, bool) or not isinstance(sample, Real):
            msg = f'Grid sample is not a number: {sample!r}'
            raise InvalidGridError(msg)
        floats.append(float(sample))
    return np.asarray(floats, dtype=np.float64)


def normalize_grid(
    grid: Sequence[Sequence[float]] | Sequence[float] | np.ndarray,
    *,
    width: int | None = None,
    height: int | None = None,
) -> Grid:
    """
    Reduce nested rows or a flat sequence to a :class:`Grid`.

    Args:
        grid: Nested rows (grid[y][x]) or a flat row-major sequence.
        width: Number of columns; required for flat input.
        height: Number of rows; required for flat input.

    Raises:
        InvalidGridError: rows of unequal length, dimensions that don't match
            the sample count, empty input or non-numeric samples.

    """
    if isinstance(grid, np.ndarray):
        if grid.ndim > MAX_GRID_NDIM:
            msg = f'Grid must be one- or two-dimensional, got {grid.ndim} axes'
            raise InvalidGridError(msg)
        grid = grid.tolist()

    if len(grid) == 0:
        msg = 'Grid is empty'
        raise InvalidGridError(msg)

    if _is_row(grid[0]):
        rows = list(grid)
        row_w = len(rows[0])
        for y, row in enumerate(rows):
            if not _is_row(row) or len(row) != row_w:
                msg = f'Row {y} does not have {row_w} samples'
                raise InvalidGridError(msg)
        if width is not None and width != row_w:
            msg = f'Declared width {width} does not match row length {row_w}'
            raise InvalidGridError(msg)
        if height is not None and height != len(rows):
            msg = f'Declared height {height} does not match row count {len(rows)}'
            raise InvalidGridError(msg)
        values = _to_floats(sample for row in rows for sample in row)
        return Grid(values=values, width=row_w, height=len(rows))

    if width is None or height is None:
        msg = 'Flat grid requires explicit width and height'
        raise InvalidGridError(msg)
    return Grid(values=_to_floats(grid), width=int(width), height=int(height))


def resolve_thresholds(thresholds: object, grid: Grid) -> list[float]:
    """
    Turn a thresholds argument into a concrete list of levels.

    An explicit numeric sequence is kept in the given order. A positive integer
    N yields N levels evenly spaced strictly inside the sample range. Anything
    else resolves to an empty list.
    """
    if isinstance(thresholds, bool):
        logger.debug('Thresholds %r are not usable, no levels', thresholds)
        return []

    if isinstance(thresholds, Integral):
        count = int(thresholds)
        if count <= 0:
            logger.debug('Non-positive threshold count %d, no levels', count)
            return []
        lo, hi = grid.min, grid.max
        step = (hi - lo) / (count + 1)
        return [lo + i * step for i in range(1, count + 1)]

    if isinstance(thresholds, np.ndarray):
        thresholds = thresholds.tolist()

    if _is_row(thresholds):
        levels = list(thresholds)  # type: ignore[call-overload]
        if all(isinstance(v, Real) and not isinstance(v, bool) for v in levels):
            return [float(v) for v in levels]

    logger.debug('Thresholds %r are not usable, no levels', thresholds)
    return []


def pad_grid(grid: Grid) -> PaddedGrid:
    """Surround the grid with a border well below every sample."""
    sentinel = grid.min - PAD_SENTINEL_OFFSET
    padded = np.pad(grid.rows(), PAD_WIDTH, mode='constant', constant_values=sentinel)
    return PaddedGrid(values=padded, sentinel=sentinel)
