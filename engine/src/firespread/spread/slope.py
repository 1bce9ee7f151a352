"""Terrain slope factor for fire spread.

Uphill slopes accelerate spread by up to +50% (at a vertical face). The
sine form lets downhill slopes damp the spread slightly instead of
modelling a separate downslope regime.
"""

from __future__ import annotations

import math

from numba import jit

MAX_SLOPE_EFFECT = 0.5


@jit(nopython=True, cache=True)
def calculate_slope_factor(slope_degrees: float) -> float:
    """Calculate the slope multiplier on rate of spread.

    SF = 1 + sin(slope) * 0.5

    Args:
        slope_degrees: Terrain slope (degrees). Positive = uphill,
            negative = downhill, 0 = flat.

    Returns:
        Slope factor multiplier (0.5 to 1.5)
    """
    return 1.0 + math.sin(math.radians(slope_degrees)) * MAX_SLOPE_EFFECT
