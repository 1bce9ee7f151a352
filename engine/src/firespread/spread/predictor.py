"""Fire spread prediction orchestrator.

The FireSpreadPredictor takes a SimulationInput (ignition point, fuel, wind,
humidity, slope), computes a single rate of spread and projects a fire
footprint at each elapsed-time checkpoint. Conditions are held constant over
the short prediction window, so ROS is calculated once per run.

Usage:
    predictor = FireSpreadPredictor(sim_input)
    for step in predictor.run():
        print(f"{step.label}: {step.radius_label}")
"""

from __future__ import annotations

import logging
from typing import Any, Generator, Mapping, Sequence

from firespread.fuel.calculator import compute_rate_of_spread
from firespread.fuel.constants import lookup_fuel
from firespread.spread.ellipse import calculate_spread_distance, project_perimeter
from firespread.spread.perimeter import calculate_centroid, calculate_ring_area_ha
from firespread.types import PredictionStep, SimulationInput

logger = logging.getLogger(__name__)

CHECKPOINT_MINUTES: tuple[int, ...] = (5, 10, 15)


class FireSpreadPredictor:
    """Stateless fire footprint prediction over fixed checkpoints.

    The predictor runs as a generator, yielding one PredictionStep per
    checkpoint in ascending time order.

    Attributes:
        sim_input: Conditions for this prediction
        checkpoints: Elapsed times (minutes), sorted ascending
    """

    def __init__(
        self,
        sim_input: SimulationInput,
        checkpoints: Sequence[int] = CHECKPOINT_MINUTES,
    ):
        self.sim_input = sim_input
        self.checkpoints = tuple(sorted(checkpoints))

    def run(self) -> Generator[PredictionStep, None, None]:
        """Run the prediction, yielding a step per checkpoint."""
        sim = self.sim_input
        fuel = lookup_fuel(sim.fuel_map)

        logger.info(
            "Running fire spread model: ignition=(%.4f, %.4f), fuel=%s, "
            "wind=%.1f km/h @ %.0f deg, humidity=%.0f%%, slope=%.1f deg",
            sim.ignition_point.lat,
            sim.ignition_point.lng,
            fuel.name,
            sim.wind.speed,
            sim.wind.direction,
            sim.humidity,
            sim.terrain_slope,
        )

        ros_kmh = compute_rate_of_spread(
            fuel, sim.wind.speed, sim.humidity, sim.terrain_slope
        )
        if ros_kmh == 0.0:
            logger.info("Fuel too moist to burn (%s): perimeters stay at ignition", fuel.name)

        for minutes in self.checkpoints:
            yield self._create_step(minutes, ros_kmh)

    def _create_step(self, minutes: int, ros_kmh: float) -> PredictionStep:
        sim = self.sim_input
        distance_km = calculate_spread_distance(ros_kmh, minutes)
        ring = project_perimeter(sim.ignition_point, ros_kmh, minutes, sim.wind.direction)
        area_ha = calculate_ring_area_ha(ring)
        centroid_lng, centroid_lat = calculate_centroid(ring)

        properties = {
            "time_to_impact": f"0-{minutes}m",
            "windSpeed": sim.wind.speed,
            "windDirection": sim.wind.direction,
            "humidity": sim.humidity,
            "terrain": sim.fuel_map,
            "terrainSlope": sim.terrain_slope,
            "estimatedRadius": f"{distance_km:.1f} km",
            "estimatedRadiusKm": distance_km,
            "rateOfSpread": f"{ros_kmh:.2f} km/h",
            "rateOfSpreadKmh": ros_kmh,
            "areaHa": area_ha,
            "centroid": [centroid_lng, centroid_lat],
        }

        return PredictionStep(
            elapsed_minutes=minutes,
            rate_of_spread=ros_kmh,
            spread_distance_km=distance_km,
            perimeter=ring,
            area_ha=area_ha,
            properties=properties,
        )


def run_fire_spread_model(
    sim_input: SimulationInput | Mapping[str, Any],
) -> list[PredictionStep]:
    """Predict the fire footprint at 5, 10 and 15 minutes.

    Args:
        sim_input: SimulationInput, or a camelCase request mapping accepted
            by ``SimulationInput.from_mapping``

    Returns:
        PredictionSteps in ascending elapsed-time order
    """
    if not isinstance(sim_input, SimulationInput):
        sim_input = SimulationInput.from_mapping(sim_input)
    return list(FireSpreadPredictor(sim_input).run())
