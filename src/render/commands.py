"""
Draw commands for contour rings.

Rings are turned into move/line/close sequences that an external path or
markup serializer can consume directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from contours.engine import compute
from contours.rings import is_closed
from render.draw import Close, DrawCommand, Line, Move
from render.path import to_path_data
from shared.constants import MIN_PATH_POINTS

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy as np

    from contours.types import ContourResult, Polygon, Ring


@dataclass(frozen=True)
class RenderedContour:
    """Draw commands of every polygon traced at one threshold."""

    threshold: float
    commands: list[DrawCommand]

    @property
    def value(self) -> float:
        return self.threshold

    @property
    def path(self) -> str:
        return to_path_data(self.commands)


def ring_commands(ring: Ring) -> list[DrawCommand]:
    """
    Move to the first point, line to the rest.

    Close is appended only for closed rings (three or more points ending on
    the first one); open rings stay open.
    """
    if len(ring) < MIN_PATH_POINTS:
        return []
    (x0, y0), rest = ring[0], ring[1:]
    commands: list[DrawCommand] = [Move(x0, y0)]
    commands.extend(Line(x, y) for x, y in rest)
    if is_closed(ring):
        commands.append(Close())
    return commands


def polygon_commands(polygon: Polygon) -> list[DrawCommand]:
    commands: list[DrawCommand] = []
    for ring in polygon:
        commands.extend(ring_commands(ring))
    return commands


def render_results(results: Sequence[ContourResult]) -> list[RenderedContour]:
    rendered = []
    for result in results:
        commands: list[DrawCommand] = []
        for polygon in result.polygons:
            commands.extend(polygon_commands(polygon))
        rendered.append(RenderedContour(threshold=result.threshold, commands=commands))
    return rendered


def render(
    grid: Sequence[Sequence[float]] | Sequence[float] | np.ndarray,
    thresholds: object,
    smoothing: bool = True,
    *,
    width: int | None = None,
    height: int | None = None,
    workers: int | None = None,
) -> list[RenderedContour]:
    """Contours of ``grid`` as draw commands, one entry per threshold."""
    results = compute(
        grid, thresholds, smoothing, width=width, height=height, workers=workers
    )
    return render_results(results)
