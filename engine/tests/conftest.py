"""Shared test fixtures for firespread engine tests."""

import pytest

from firespread.fuel.constants import FuelType
from firespread.types import LatLng, SimulationInput, Wind


@pytest.fixture
def perth():
    """Ignition point in the Perth metro area."""
    return LatLng(lat=-31.95, lng=115.86)


@pytest.fixture
def forest_input(perth):
    """Forest fire with a 20 km/h westerly-bearing wind on a gentle slope.

    40% humidity -> fuel moisture 0.09, below forest extinction (0.25).
    """
    return SimulationInput(
        ignition_point=perth,
        fuel_map="forest",
        wind=Wind(speed=20.0, direction=270.0),
        humidity=40.0,
        terrain_slope=5.0,
    )


@pytest.fixture
def dry_grass_input(perth):
    """Grass at 0% humidity: moisture 0.15 exceeds grass extinction (0.12)."""
    return SimulationInput(
        ignition_point=perth,
        fuel_map="grass",
        wind=Wind(speed=30.0, direction=90.0),
        humidity=0.0,
    )


@pytest.fixture
def all_fuel_types():
    """Every catalog fuel type."""
    return list(FuelType)
