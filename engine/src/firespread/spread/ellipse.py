"""Wind-biased fire footprint geometry.

Turns a scalar rate of spread into a four-corner approximation of a fire
ellipse around the ignition point. The footprint is a warped quadrilateral:
major/minor axes are stretched along the latitude and longitude axes and the
whole shape is shifted downwind by half the spread distance.

Distances use a flat-earth approximation (111 km per degree of latitude,
cosine-corrected for longitude). Adequate at metro scale; not geodesic.
"""

from __future__ import annotations

import math

from firespread.types import LatLng

KM_PER_DEGREE_LAT = 111.0
WIND_BIAS_FACTOR = 0.5
# Flat-earth scaling breaks down at the poles
MAX_LATITUDE = 85.0


def calculate_spread_distance(rate_of_spread_kmh: float, elapsed_minutes: float) -> float:
    """Distance covered by the head fire after ``elapsed_minutes`` (km)."""
    return rate_of_spread_kmh * elapsed_minutes / 60.0


def km_to_degrees(distance_km: float, latitude: float) -> tuple[float, float]:
    """Convert an isotropic distance to local degree offsets.

    Args:
        distance_km: Distance (km)
        latitude: Latitude at which the offset applies (degrees)

    Returns:
        (lat_degrees, lng_degrees). Latitudes beyond +/-85 use the 85 degree
        longitude scale so the offsets stay finite near the poles.
    """
    clamped = max(-MAX_LATITUDE, min(latitude, MAX_LATITUDE))
    km_per_degree_lng = KM_PER_DEGREE_LAT * math.cos(math.radians(clamped))
    return distance_km / KM_PER_DEGREE_LAT, distance_km / km_per_degree_lng


def calculate_wind_bias(
    lat_spread: float, lng_spread: float, wind_direction: float
) -> tuple[float, float]:
    """Downwind shift of the footprint centre.

    Args:
        lat_spread: Spread distance in degrees latitude
        lng_spread: Spread distance in degrees longitude
        wind_direction: Compass bearing the fire spreads toward
            (0 = N, 90 = E, 180 = S, 270 = W)

    Returns:
        (lat_bias, lng_bias) in degrees
    """
    theta = math.radians(wind_direction)
    return (
        lat_spread * WIND_BIAS_FACTOR * math.cos(theta),
        lng_spread * WIND_BIAS_FACTOR * math.sin(theta),
    )


def _clamp_lat(lat: float) -> float:
    return max(-90.0, min(lat, 90.0))


def project_perimeter(
    ignition: LatLng,
    rate_of_spread_kmh: float,
    elapsed_minutes: float,
    wind_direction: float,
) -> list[tuple[float, float]]:
    """Generate the fire footprint ring after ``elapsed_minutes``.

    Args:
        ignition: Ignition point
        rate_of_spread_kmh: Head fire ROS (km/h)
        elapsed_minutes: Time since ignition (minutes)
        wind_direction: Compass bearing the fire spreads toward (degrees)

    Returns:
        Five (lng, lat) tuples forming a closed ring (GeoJSON order).
        With zero ROS or zero time every point equals the ignition point.
    """
    distance_km = calculate_spread_distance(rate_of_spread_kmh, elapsed_minutes)
    lat_spread, lng_spread = km_to_degrees(distance_km, ignition.lat)
    lat_bias, lng_bias = calculate_wind_bias(lat_spread, lng_spread, wind_direction)

    major_lat = lat_spread * (1.0 + WIND_BIAS_FACTOR)
    minor_lat = lat_spread * (1.0 - WIND_BIAS_FACTOR)
    major_lng = lng_spread * (1.0 + WIND_BIAS_FACTOR)
    minor_lng = lng_spread * (1.0 - WIND_BIAS_FACTOR)

    lat = ignition.lat + lat_bias
    lng = ignition.lng + lng_bias

    corners = [
        (lng - minor_lng, _clamp_lat(lat - major_lat)),
        (lng + major_lng, _clamp_lat(lat - minor_lat)),
        (lng + minor_lng, _clamp_lat(lat + major_lat)),
        (lng - major_lng, _clamp_lat(lat + minor_lat)),
    ]
    # Close the ring
    corners.append(corners[0])
    return corners
