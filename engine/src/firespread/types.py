"""Shared dataclasses and type definitions for firespread."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from firespread.spread.perimeter import is_degenerate_ring

# Perth CBD, used when a caller sends an ignition point without coordinates.
DEFAULT_IGNITION_LAT = -31.95
DEFAULT_IGNITION_LNG = 115.86
DEFAULT_FUEL = "flat"


@dataclass(frozen=True)
class LatLng:
    """Geographic coordinate in decimal degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class Wind:
    """Wind conditions driving the spread."""

    speed: float = 0.0  # km/h
    direction: float = 0.0  # degrees, compass bearing the fire spreads toward


@dataclass(frozen=True)
class SimulationInput:
    """Per-request parameters for a fire spread prediction."""

    ignition_point: LatLng
    fuel_map: str
    wind: Wind
    humidity: float  # percent (0-100)
    terrain_slope: float = 0.0  # degrees, positive = uphill

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SimulationInput:
        """Build an input from the camelCase request shape.

        Optional fields (``fuelMap``, ``terrainSlope``, wind components and
        ignition coordinates) fall back to defaults instead of failing.

        Args:
            data: Mapping with ``ignitionPoint``, ``fuelMap``, ``wind``,
                ``humidity`` and optionally ``terrainSlope``.

        Returns:
            SimulationInput

        Raises:
            ValueError: If ``ignitionPoint``, ``wind`` or ``humidity`` is absent.
        """
        missing = [
            key for key in ("ignitionPoint", "wind", "humidity")
            if data.get(key) is None
        ]
        if missing:
            raise ValueError(f"Missing required parameters: {', '.join(missing)}")

        point = data["ignitionPoint"]
        wind = data["wind"]
        fuel = data.get("fuelMap")

        return cls(
            ignition_point=LatLng(
                lat=_coalesce(point.get("lat"), DEFAULT_IGNITION_LAT),
                lng=_coalesce(point.get("lng"), DEFAULT_IGNITION_LNG),
            ),
            fuel_map=str(fuel) if fuel is not None else DEFAULT_FUEL,
            wind=Wind(
                speed=_coalesce(wind.get("speed"), 0.0),
                direction=_coalesce(wind.get("direction"), 0.0),
            ),
            humidity=float(data["humidity"]),
            terrain_slope=_coalesce(data.get("terrainSlope"), 0.0),
        )


@dataclass(frozen=True)
class PredictionStep:
    """Fire perimeter snapshot at one elapsed-time checkpoint."""

    elapsed_minutes: int
    rate_of_spread: float  # km/h
    spread_distance_km: float
    perimeter: list[tuple[float, float]]  # [(lng, lat), ...] closed ring
    area_ha: float
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return f"{self.elapsed_minutes}m"

    @property
    def radius_label(self) -> str:
        return f"{self.spread_distance_km:.1f} km"

    @property
    def is_degenerate(self) -> bool:
        """True when the ring has collapsed onto a single point."""
        return is_degenerate_ring(self.perimeter)


def _coalesce(value: Any, default: float) -> float:
    return float(value) if value is not None else default
