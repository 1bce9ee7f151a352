"""Tests for the fuel model catalog.

Validates catalog contents and the graceful fallback for unknown fuels.
"""

import pytest

from firespread.fuel.constants import (
    DEFAULT_FUEL_TYPE,
    FUEL_MODELS,
    FuelModel,
    FuelType,
    lookup_fuel,
    resolve_fuel_type,
)


class TestFuelModels:
    """Validate fuel model definitions."""

    def test_all_fuel_types_defined(self, all_fuel_types):
        """Every FuelType enum member must have a FuelModel entry."""
        assert len(FUEL_MODELS) == 4
        for fuel_type in all_fuel_types:
            assert isinstance(FUEL_MODELS[fuel_type], FuelModel)
            assert FUEL_MODELS[fuel_type].name == fuel_type.value

    @pytest.mark.parametrize("fuel_type", list(FuelType))
    def test_parameters_positive(self, fuel_type):
        """Load, heat content and SAV ratio must be positive."""
        model = FUEL_MODELS[fuel_type]
        assert model.fuel_load > 0.0
        assert model.heat_content > 0.0
        assert model.surface_area_to_volume_ratio > 0.0

    @pytest.mark.parametrize("fuel_type", list(FuelType))
    def test_moisture_extinction_is_fraction(self, fuel_type):
        assert 0.0 < FUEL_MODELS[fuel_type].moisture_extinction < 1.0

    def test_known_values(self):
        """Spot-check catalog constants."""
        grass = FUEL_MODELS[FuelType.GRASS]
        assert grass.moisture_extinction == 0.12
        forest = FUEL_MODELS[FuelType.FOREST]
        assert forest.fuel_load == 3.0
        assert forest.heat_content == 20000.0
        assert forest.surface_area_to_volume_ratio == 1000.0
        assert forest.moisture_extinction == 0.25
        assert FUEL_MODELS[FuelType.SHRUB].moisture_extinction == 0.20

    def test_flat_matches_grass(self):
        """Flat terrain uses grass-equivalent parameters."""
        flat = FUEL_MODELS[FuelType.FLAT]
        grass = FUEL_MODELS[FuelType.GRASS]
        assert flat.fuel_load == grass.fuel_load
        assert flat.heat_content == grass.heat_content
        assert flat.surface_area_to_volume_ratio == grass.surface_area_to_volume_ratio
        assert flat.moisture_extinction == grass.moisture_extinction

    def test_models_are_frozen(self):
        """FuelModel should be immutable."""
        with pytest.raises(AttributeError):
            FUEL_MODELS[FuelType.FOREST].fuel_load = 99.0  # type: ignore[misc]


class TestLookupFuel:
    """Test fuel lookup and fallback."""

    def test_lookup_by_string(self):
        assert lookup_fuel("forest") is FUEL_MODELS[FuelType.FOREST]

    def test_lookup_by_enum(self):
        assert lookup_fuel(FuelType.SHRUB) is FUEL_MODELS[FuelType.SHRUB]

    def test_unknown_falls_back_to_flat(self):
        """Unrecognised names degrade to the flat model instead of raising."""
        assert lookup_fuel("swamp") is FUEL_MODELS[FuelType.FLAT]

    def test_none_falls_back_to_flat(self):
        assert lookup_fuel(None) is FUEL_MODELS[DEFAULT_FUEL_TYPE]

    def test_match_is_exact(self):
        """Keys are case sensitive."""
        assert resolve_fuel_type("Forest") == FuelType.FLAT

    def test_resolve_known(self):
        assert resolve_fuel_type("grass") == FuelType.GRASS
