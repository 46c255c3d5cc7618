"""
Marching-squares contour generation.

Re-exports the public API so callers can write ``from contours import compute``.
"""
from __future__ import annotations

from .density import density_contours as density_contours
from .density import estimate_density as estimate_density
from .engine import compute as compute
from .engine import compute_with_settings as compute_with_settings
from .grid import InvalidGridError as InvalidGridError
from .types import ContourResult as ContourResult
