"""Fuel model catalog for the simplified rate-of-spread calculation.

Every module that needs fuel parameters imports from this file. Values are
Rothermel-inspired approximations for broad vegetation classes, not the
standard 13/40 fuel model sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FuelType(str, Enum):
    """Vegetation class keys accepted as ``fuelMap``."""

    GRASS = "grass"
    SHRUB = "shrub"
    FOREST = "forest"
    FLAT = "flat"


@dataclass(frozen=True)
class FuelModel:
    """Physical constants for a single vegetation class.

    Attributes:
        name: Catalog key (e.g., "forest")
        fuel_load: Oven-dry fuel load (kg/m2)
        heat_content: Low heat of combustion (kJ/kg)
        surface_area_to_volume_ratio: Fuel particle SAV ratio (1/m)
        moisture_extinction: Fuel moisture fraction above which the fire
            cannot sustain spread (0-1)
    """

    name: str
    fuel_load: float
    heat_content: float
    surface_area_to_volume_ratio: float
    moisture_extinction: float


# Fuel type used for anything not in the catalog. Lowest intensity class.
DEFAULT_FUEL_TYPE = FuelType.FLAT

FUEL_MODELS: dict[FuelType, FuelModel] = {
    FuelType.GRASS: FuelModel(
        name="grass", fuel_load=0.5, heat_content=18000.0,
        surface_area_to_volume_ratio=5000.0, moisture_extinction=0.12,
    ),
    FuelType.SHRUB: FuelModel(
        name="shrub", fuel_load=1.5, heat_content=19000.0,
        surface_area_to_volume_ratio=2000.0, moisture_extinction=0.20,
    ),
    FuelType.FOREST: FuelModel(
        name="forest", fuel_load=3.0, heat_content=20000.0,
        surface_area_to_volume_ratio=1000.0, moisture_extinction=0.25,
    ),
    # Flat terrain with no mapped vegetation burns like grass
    FuelType.FLAT: FuelModel(
        name="flat", fuel_load=0.5, heat_content=18000.0,
        surface_area_to_volume_ratio=5000.0, moisture_extinction=0.12,
    ),
}


def resolve_fuel_type(name: FuelType | str | None) -> FuelType:
    """Resolve a fuel name to a catalog key.

    Matching is exact. Unknown or missing names resolve to ``flat``.

    Args:
        name: FuelType enum or string key (e.g., "forest")

    Returns:
        FuelType present in FUEL_MODELS
    """
    if isinstance(name, FuelType):
        return name
    try:
        return FuelType(name)
    except ValueError:
        return DEFAULT_FUEL_TYPE


def lookup_fuel(name: FuelType | str | None) -> FuelModel:
    """Look up the fuel model for a vegetation class.

    Never raises: an unrecognised name degrades to the ``flat`` model so a
    bad request yields a conservative estimate instead of an error.
    """
    return FUEL_MODELS[resolve_fuel_type(name)]
