from __future__ import annotations

from typing import TYPE_CHECKING

from shared.constants import PAD_WIDTH

if TYPE_CHECKING:
    from contours.types import Point, Polygon, Ring


def _clamp(value: float, min_value: float, max_value: float) -> float:
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def unpad_point(point: Point, width: int, height: int) -> Point:
    """
    Move a padded-grid point into the caller's grid and clamp it to the bounds.

    The clamp is applied after assembly, so contours hugging the outer edge
    come out flattened against it.
    """
    x, y = point
    return (
        _clamp(x - PAD_WIDTH, 0.0, float(width - 1)),
        _clamp(y - PAD_WIDTH, 0.0, float(height - 1)),
    )


def pad_point(point: Point) -> Point:
    """Inverse translation of :func:`unpad_point` (no clamping)."""
    x, y = point
    return x + PAD_WIDTH, y + PAD_WIDTH


def map_ring(ring: Ring, width: int, height: int) -> Ring:
    return [unpad_point(p, width, height) for p in ring]


def rings_to_polygons(rings: list[Ring], width: int, height: int) -> list[Polygon]:
    """Each ring becomes its own single-ring polygon in grid coordinates."""
    return [[map_ring(ring, width, height)] for ring in rings]
