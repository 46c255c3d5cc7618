from __future__ import annotations

from typing import TYPE_CHECKING

from shared.constants import (
    EDGE_MIDPOINT,
    MS_EDGE_BOTTOM,
    MS_EDGE_LEFT,
    MS_EDGE_RIGHT,
    MS_EDGE_TOP,
)

if TYPE_CHECKING:
    from contours.types import Point

Corners = tuple[float, float, float, float]


def crossing_fraction(
    va: float, vb: float, threshold: float, *, smoothing: bool = True
) -> float:
    """
    Fraction of the way from ``va`` to ``vb`` where the threshold is crossed.

    Equal values (and disabled smoothing) fall back to the edge midpoint.
    The result is not clamped.
    """
    if not smoothing or va == vb:
        return EDGE_MIDPOINT
    return (threshold - va) / (vb - va)


def edge_point(
    x: int,
    y: int,
    edge: int,
    corners: Corners,
    threshold: float,
    *,
    smoothing: bool = True,
) -> Point:
    """
    Crossing point on one edge of cell (x, y).

    ``corners`` are (top-left, top-right, bottom-right, bottom-left). Top and
    bottom edges vary in x, left and right edges vary in y.
    """
    v0, v1, v2, v3 = corners
    if edge == MS_EDGE_TOP:
        return x + crossing_fraction(v0, v1, threshold, smoothing=smoothing), float(y)
    if edge == MS_EDGE_RIGHT:
        return float(x + 1), y + crossing_fraction(v1, v2, threshold, smoothing=smoothing)
    if edge == MS_EDGE_BOTTOM:
        return x + crossing_fraction(v3, v2, threshold, smoothing=smoothing), float(y + 1)
    if edge == MS_EDGE_LEFT:
        return float(x), y + crossing_fraction(v0, v3, threshold, smoothing=smoothing)
    msg = f'Unknown cell edge: {edge}'
    raise ValueError(msg)
