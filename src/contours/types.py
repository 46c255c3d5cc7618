from __future__ import annotations

from dataclasses import dataclass
from typing import Any

Point = tuple[float, float]
Segment = tuple[Point, Point]
Ring = list[Point]
Polygon = list[Ring]


@dataclass(frozen=True)
class ContourResult:
    """Contour polygons traced at one threshold."""

    threshold: float
    polygons: list[Polygon]

    @property
    def value(self) -> float:
        return self.threshold

    def to_geojson(self) -> dict[str, Any]:
        """GeoJSON-style MultiPolygon with the threshold stored as ``value``."""
        return {
            'type': 'MultiPolygon',
            'value': self.threshold,
            'coordinates': [
                [[[x, y] for x, y in ring] for ring in polygon]
                for polygon in self.polygons
            ],
        }
