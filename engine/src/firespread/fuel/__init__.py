"""Fuel model catalog and rate-of-spread calculator."""

from firespread.fuel.calculator import compute_rate_of_spread
from firespread.fuel.constants import FUEL_MODELS, FuelModel, FuelType, lookup_fuel

__all__ = ["compute_rate_of_spread", "FUEL_MODELS", "FuelModel", "FuelType", "lookup_fuel"]
