"""Simplified rate-of-spread (ROS) calculator.

Follows the structure of Rothermel (1972): reaction intensity scaled by a
propagating flux ratio and divided by a fuel-particle heat sink term, with
multiplicative wind and slope factors. The coefficients are deliberately
coarse; this is an illustrative estimate for dashboard display, not a
certified fire behaviour model.

Reference:
    Rothermel, R.C. (1972). A mathematical model for predicting fire spread
    in wildland fuels. USDA Forest Service Research Paper INT-115.
"""

from __future__ import annotations

import logging

from numba import jit

from firespread.fuel.constants import FuelModel
from firespread.spread.slope import calculate_slope_factor

logger = logging.getLogger(__name__)

# Fuel moisture at 0% relative humidity
MAX_FUEL_MOISTURE = 0.15
WIND_FACTOR_PER_MPS = 0.2
PROPAGATING_FLUX_RATIO = 0.1
SAV_SCALE = 1000.0

MIN_ROS_KMH = 0.1
MAX_ROS_KMH = 30.0


@jit(nopython=True, cache=True)
def calculate_fuel_moisture(humidity_pct: float) -> float:
    """Derive the fuel moisture fraction from relative humidity.

    moisture = (100 - RH) / 100 * 0.15

    Args:
        humidity_pct: Relative humidity (%)

    Returns:
        Fuel moisture fraction (0.0 at 100% RH, 0.15 at 0% RH)
    """
    return (100.0 - humidity_pct) / 100.0 * MAX_FUEL_MOISTURE


@jit(nopython=True, cache=True)
def calculate_wind_factor(wind_speed_kmh: float) -> float:
    """Linear wind acceleration: 1 + 0.2 per m/s of wind."""
    wind_speed_mps = wind_speed_kmh * 1000.0 / 3600.0
    return 1.0 + wind_speed_mps * WIND_FACTOR_PER_MPS


@jit(nopython=True, cache=True)
def calculate_reaction_intensity(
    fuel_load: float,
    heat_content: float,
    moisture: float,
    moisture_extinction: float,
) -> float:
    """Energy release rate, damped linearly as moisture nears extinction.

    IR = w0 * h * (1 - M / Mx)

    Args:
        fuel_load: Fuel load (kg/m2)
        heat_content: Heat content (kJ/kg)
        moisture: Fuel moisture fraction
        moisture_extinction: Moisture of extinction fraction

    Returns:
        Reaction intensity (kJ/m2, relative units)
    """
    return fuel_load * heat_content * (1.0 - moisture / moisture_extinction)


@jit(nopython=True, cache=True)
def clamp_rate_of_spread(ros_kmh: float) -> float:
    """Clamp a spread rate to the plausible 0.1-30 km/h band."""
    return max(MIN_ROS_KMH, min(ros_kmh, MAX_ROS_KMH))


def compute_rate_of_spread(
    fuel: FuelModel,
    wind_speed_kmh: float,
    humidity_pct: float,
    slope_degrees: float = 0.0,
) -> float:
    """Calculate the head fire rate of spread.

    Args:
        fuel: Fuel model parameters
        wind_speed_kmh: Wind speed (km/h)
        humidity_pct: Relative humidity (%)
        slope_degrees: Terrain slope (degrees, 0 for flat)

    Returns:
        Rate of spread in km/h. Exactly 0.0 when fuel moisture exceeds the
        moisture of extinction, otherwise within [0.1, 30].
    """
    moisture = calculate_fuel_moisture(float(humidity_pct))
    if moisture > fuel.moisture_extinction:
        logger.debug(
            "Fuel moisture %.3f above extinction %.3f for %s: no spread",
            moisture,
            fuel.moisture_extinction,
            fuel.name,
        )
        return 0.0

    wind_factor = calculate_wind_factor(float(wind_speed_kmh))
    slope_factor = calculate_slope_factor(float(slope_degrees))
    reaction_intensity = calculate_reaction_intensity(
        fuel.fuel_load, fuel.heat_content, moisture, fuel.moisture_extinction
    )

    ros_mps = (
        reaction_intensity
        * PROPAGATING_FLUX_RATIO
        / (fuel.surface_area_to_volume_ratio * SAV_SCALE)
        * wind_factor
        * slope_factor
    )
    ros_kmh = clamp_rate_of_spread(ros_mps * 3.6)

    logger.debug(
        "ROS %s: moisture=%.3f wind_factor=%.3f slope_factor=%.3f -> %.4f km/h",
        fuel.name,
        moisture,
        wind_factor,
        slope_factor,
        ros_kmh,
    )
    return ros_kmh
