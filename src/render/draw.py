"""Draw command primitives shared by the renderer and the path serializer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    x: float
    y: float


@dataclass(frozen=True)
class Line:
    x: float
    y: float


@dataclass(frozen=True)
class Close:
    pass


DrawCommand = Move | Line | Close
