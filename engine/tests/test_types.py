"""Tests for shared types and request mapping defaults."""

import pytest

from firespread.types import (
    DEFAULT_IGNITION_LAT,
    DEFAULT_IGNITION_LNG,
    LatLng,
    PredictionStep,
    SimulationInput,
    Wind,
)


@pytest.fixture
def request_body():
    return {
        "ignitionPoint": {"lat": -33.87, "lng": 151.21},
        "fuelMap": "shrub",
        "wind": {"speed": 35, "direction": 45},
        "humidity": 25,
        "terrainSlope": -4,
    }


class TestFromMapping:
    """Test SimulationInput.from_mapping."""

    def test_full_body(self, request_body):
        sim = SimulationInput.from_mapping(request_body)
        assert sim == SimulationInput(
            ignition_point=LatLng(lat=-33.87, lng=151.21),
            fuel_map="shrub",
            wind=Wind(speed=35.0, direction=45.0),
            humidity=25.0,
            terrain_slope=-4.0,
        )

    def test_missing_slope_is_flat(self, request_body):
        del request_body["terrainSlope"]
        assert SimulationInput.from_mapping(request_body).terrain_slope == 0.0

    def test_null_slope_is_flat(self, request_body):
        request_body["terrainSlope"] = None
        assert SimulationInput.from_mapping(request_body).terrain_slope == 0.0

    def test_missing_fuel_is_flat(self, request_body):
        del request_body["fuelMap"]
        assert SimulationInput.from_mapping(request_body).fuel_map == "flat"

    def test_missing_wind_components(self, request_body):
        request_body["wind"] = {}
        assert SimulationInput.from_mapping(request_body).wind == Wind(0.0, 0.0)

    def test_missing_coordinates_use_default(self, request_body):
        request_body["ignitionPoint"] = {}
        point = SimulationInput.from_mapping(request_body).ignition_point
        assert point == LatLng(DEFAULT_IGNITION_LAT, DEFAULT_IGNITION_LNG)

    def test_zero_coordinates_kept(self, request_body):
        """Equator / prime meridian are real coordinates, not missing ones."""
        request_body["ignitionPoint"] = {"lat": 0.0, "lng": 0.0}
        assert SimulationInput.from_mapping(request_body).ignition_point == LatLng(0.0, 0.0)

    def test_zero_humidity_accepted(self, request_body):
        request_body["humidity"] = 0
        assert SimulationInput.from_mapping(request_body).humidity == 0.0

    @pytest.mark.parametrize("key", ["ignitionPoint", "wind", "humidity"])
    def test_missing_required_raises(self, request_body, key):
        del request_body[key]
        with pytest.raises(ValueError, match=key):
            SimulationInput.from_mapping(request_body)

    def test_source_not_mutated(self, request_body):
        snapshot = {k: (dict(v) if isinstance(v, dict) else v) for k, v in request_body.items()}
        SimulationInput.from_mapping(request_body)
        assert request_body == snapshot


class TestPredictionStep:
    def test_labels(self):
        step = PredictionStep(
            elapsed_minutes=10,
            rate_of_spread=1.5,
            spread_distance_km=0.26,
            perimeter=[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)],
            area_ha=1.0,
        )
        assert step.label == "10m"
        assert step.radius_label == "0.3 km"
        assert not step.is_degenerate
        assert step.properties == {}

    def test_degenerate(self):
        step = PredictionStep(
            elapsed_minutes=5,
            rate_of_spread=0.0,
            spread_distance_km=0.0,
            perimeter=[(115.86, -31.95)] * 5,
            area_ha=0.0,
        )
        assert step.is_degenerate

    def test_frozen(self):
        with pytest.raises(AttributeError):
            LatLng(0.0, 0.0).lat = 1.0  # type: ignore[misc]
