"""Marching-squares cell classification."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from contours.interpolate import edge_point
from shared.constants import MS_EDGE_BOTTOM as B
from shared.constants import MS_EDGE_LEFT as L
from shared.constants import MS_EDGE_RIGHT as R
from shared.constants import MS_EDGE_TOP as T
from shared.constants import (
    MS_NO_CONTOUR_CASES,
    MS_WEIGHT_BL,
    MS_WEIGHT_BR,
    MS_WEIGHT_TL,
    MS_WEIGHT_TR,
)

if TYPE_CHECKING:
    from contours.types import Segment

# Edge pairs per case code. Every segment keeps the high side on the same hand,
# so segments of neighbouring cells chain head to tail. Saddles (5, 10) always
# join the two high corners through the cell.
CASE_TABLE = MappingProxyType(
    {
        0: (),
        1: ((L, B),),
        2: ((B, R),),
        3: ((L, R),),
        4: ((R, T),),
        5: ((L, T), (R, B)),
        6: ((B, T),),
        7: ((L, T),),
        8: ((T, L),),
        9: ((T, B),),
        10: ((T, R), (B, L)),
        11: ((T, R),),
        12: ((R, L),),
        13: ((R, B),),
        14: ((B, L),),
        15: (),
    }
)


def case_code(v0: float, v1: float, v2: float, v3: float, threshold: float) -> int:
    """4-bit code of one cell, corners in top-left/top-right/bottom-right/bottom-left order."""
    return (
        (MS_WEIGHT_TL if v0 >= threshold else 0)
        + (MS_WEIGHT_TR if v1 >= threshold else 0)
        + (MS_WEIGHT_BR if v2 >= threshold else 0)
        + (MS_WEIGHT_BL if v3 >= threshold else 0)
    )


def case_codes(values: np.ndarray, threshold: float) -> np.ndarray:
    """Case codes of every cell of a (h, w) array, shaped (h - 1, w - 1)."""
    above = values >= threshold
    return (
        MS_WEIGHT_TL * above[:-1, :-1]
        + MS_WEIGHT_TR * above[:-1, 1:]
        + MS_WEIGHT_BR * above[1:, 1:]
        + MS_WEIGHT_BL * above[1:, :-1]
    ).astype(np.uint8)


def build_segments(
    values: np.ndarray, threshold: float, *, smoothing: bool = True
) -> list[Segment]:
    """
    Crossing segments of every cell, row by row.

    Args:
        values: Padded sample array indexed [y, x].
        threshold: Contour level.
        smoothing: Interpolate crossings linearly instead of using midpoints.

    Returns:
        Segments in cell order (y outer, x inner), two per saddle cell.

    """
    segments: list[Segment] = []
    codes = case_codes(values, threshold)
    # argwhere walks row-major, so discovery order stays deterministic
    crossing = ~np.isin(codes, list(MS_NO_CONTOUR_CASES))
    for row, col in np.argwhere(crossing):
        y, x = int(row), int(col)
        code = int(codes[y, x])
        corners = (
            float(values[y, x]),
            float(values[y, x + 1]),
            float(values[y + 1, x + 1]),
            float(values[y + 1, x]),
        )
        for from_edge, to_edge in CASE_TABLE[code]:
            start = edge_point(x, y, from_edge, corners, threshold, smoothing=smoothing)
            end = edge_point(x, y, to_edge, corners, threshold, smoothing=smoothing)
            segments.append((start, end))
    return segments
