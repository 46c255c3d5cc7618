"""
Stitching of per-cell segments into rings.

Segment endpoints are interned in a :class:`PointArena`: coordinates are
snapped to a fine grid and every distinct snapped point gets an integer id.
Adjacency is kept as per-id lists of link indices, so chaining never compares
raw float tuples.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shared.constants import (
    MIN_CLOSED_RING_POINTS,
    RING_CLOSE_TOLERANCE,
    RING_POINT_QUANT_FACTOR,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from contours.types import Point, Ring, Segment

logger = logging.getLogger(__name__)


def points_close(a: Point, b: Point, tolerance: float = RING_CLOSE_TOLERANCE) -> bool:
    return abs(a[0] - b[0]) < tolerance and abs(a[1] - b[1]) < tolerance


def is_closed(ring: Ring, tolerance: float = RING_CLOSE_TOLERANCE) -> bool:
    """A ring is closed when it has more than two points and ends where it starts."""
    return len(ring) >= MIN_CLOSED_RING_POINTS and points_close(
        ring[0], ring[-1], tolerance
    )


class PointArena:
    """Owns the points of one assembly pass under integer ids."""

    def __init__(self, quant_factor: float = RING_POINT_QUANT_FACTOR) -> None:
        self._quant_factor = quant_factor
        self._ids: dict[tuple[int, int], int] = {}
        self.points: list[Point] = []

    def __len__(self) -> int:
        return len(self.points)

    def key(self, point: Point) -> tuple[int, int]:
        return (
            round(point[0] * self._quant_factor),
            round(point[1] * self._quant_factor),
        )

    def intern(self, point: Point) -> int:
        """Id of the point, registering it on first sight."""
        k = self.key(point)
        idx = self._ids.get(k)
        if idx is None:
            idx = len(self.points)
            self._ids[k] = idx
            self.points.append(point)
        return idx


class RingAssembler:
    """
    Chains directed segments into rings for a single threshold.

    Links are followed head to tail in discovery order. A ring closes once it
    returns to the id of its first point; if a chain runs out of continuations
    it is kept as is and counted as open unless it ends within the tolerance
    of its start.
    """

    def __init__(
        self,
        *,
        tolerance: float = RING_CLOSE_TOLERANCE,
        quant_factor: float = RING_POINT_QUANT_FACTOR,
    ) -> None:
        self.tolerance = tolerance
        self.arena = PointArena(quant_factor)
        self.links: list[tuple[int, int]] = []
        self.outgoing: list[list[int]] = []
        self.open_rings = 0
        self.dropped_links = 0

    def add_segments(self, segments: Iterable[Segment]) -> None:
        for start, end in segments:
            a = self.arena.intern(start)
            b = self.arena.intern(end)
            if a == b:
                # zero-length crossing at a corner equal to the threshold
                self.dropped_links += 1
                continue
            while len(self.outgoing) < len(self.arena):
                self.outgoing.append([])
            self.outgoing[a].append(len(self.links))
            self.links.append((a, b))

    def _take_link(self, point_id: int, used: list[bool]) -> int | None:
        bucket = self.outgoing[point_id]
        while bucket:
            li = bucket.pop(0)
            if not used[li]:
                used[li] = True
                return li
        return None

    def assemble(self) -> list[Ring]:
        points = self.arena.points
        used = [False] * len(self.links)
        rings: list[Ring] = []

        for si, (start, nxt) in enumerate(self.links):
            if used[si]:
                continue
            used[si] = True
            self.outgoing[start].remove(si)
            chain = [start, nxt]
            current = nxt
            # Замыкание по id точки: соседние пересечения у рамки бывают ближе 1e-3
            while current != start:
                li = self._take_link(current, used)
                if li is None:
                    if not (
                        len(chain) >= MIN_CLOSED_RING_POINTS
                        and points_close(points[current], points[start], self.tolerance)
                    ):
                        self.open_rings += 1
                        logger.debug(
                            'Open ring of %d points ending at %s',
                            len(chain),
                            points[current],
                        )
                    break
                current = self.links[li][1]
                chain.append(current)
            rings.append([points[i] for i in chain])

        return rings


def assemble_rings(
    segments: Iterable[Segment],
    *,
    tolerance: float = RING_CLOSE_TOLERANCE,
    quant_factor: float = RING_POINT_QUANT_FACTOR,
) -> list[Ring]:
    """Rings built from ``segments``, in discovery order."""
    assembler = RingAssembler(tolerance=tolerance, quant_factor=quant_factor)
    assembler.add_segments(segments)
    rings = assembler.assemble()
    logger.debug(
        'Assembled %d rings from %d links (%d open, %d zero-length dropped)',
        len(rings),
        len(assembler.links),
        assembler.open_rings,
        assembler.dropped_links,
    )
    return rings
