"""Fire perimeter ring utilities.

Rings are lists of (lng, lat) tuples in GeoJSON order. Provides closure
checks, area, centroid and GeoJSON Feature export.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

Ring = Sequence[tuple[float, float]]

KM_PER_DEGREE = 111.0


def is_closed_ring(ring: Ring) -> bool:
    """True when the ring has points and its first and last points match."""
    return len(ring) > 0 and tuple(ring[0]) == tuple(ring[-1])


def close_ring(ring: Ring) -> list[tuple[float, float]]:
    """Return a copy of ``ring`` with the first point repeated at the end."""
    coords = [tuple(p) for p in ring]
    if coords and coords[0] != coords[-1]:
        coords.append(coords[0])
    return coords


def is_degenerate_ring(ring: Ring) -> bool:
    """True when every point of the ring is the same coordinate.

    Happens when nothing burns (zero ROS) or at zero elapsed time. Such rings
    have zero area and are not valid polygons for most renderers.
    """
    return len({tuple(p) for p in ring}) <= 1


def calculate_ring_area_ha(ring: Ring) -> float:
    """Calculate ring area in hectares using the Shoelace formula.

    Projects to local kilometres around the mean latitude with the same
    111 km/degree approximation used to build the perimeter.

    Args:
        ring: (lng, lat) points, closed or open

    Returns:
        Area in hectares
    """
    coords = list(ring)
    if is_closed_ring(coords):
        coords = coords[:-1]
    if len(coords) < 3:
        return 0.0

    mean_lat = sum(lat for _, lat in coords) / len(coords)
    km_per_deg_lng = KM_PER_DEGREE * math.cos(math.radians(mean_lat))

    n = len(coords)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        xi = coords[i][0] * km_per_deg_lng
        yi = coords[i][1] * KM_PER_DEGREE
        xj = coords[j][0] * km_per_deg_lng
        yj = coords[j][1] * KM_PER_DEGREE
        area += xi * yj - xj * yi

    area_km2 = abs(area) / 2.0
    return area_km2 * 100.0  # km2 to hectares


def calculate_centroid(ring: Ring) -> tuple[float, float]:
    """Vertex centroid of a ring as (lng, lat), ignoring the closing point."""
    coords = list(ring)
    if is_closed_ring(coords) and len(coords) > 1:
        coords = coords[:-1]
    if not coords:
        return 0.0, 0.0
    lng = sum(p[0] for p in coords) / len(coords)
    lat = sum(p[1] for p in coords) / len(coords)
    return lng, lat


def ring_to_geojson(ring: Ring, properties: dict[str, Any] | None = None) -> dict:
    """Convert a ring to a GeoJSON Feature with Polygon geometry.

    Args:
        ring: (lng, lat) points
        properties: Optional properties dict for the Feature

    Returns:
        GeoJSON Feature dict. Coordinates are [lng, lat] per RFC 7946.
    """
    if not ring:
        return {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": []},
            "properties": properties or {},
        }

    coords = [[lng, lat] for lng, lat in close_ring(ring)]
    return {
        "type": "Feature",
        "geometry": {
            "type": "Polygon",
            "coordinates": [coords],
        },
        "properties": properties or {},
    }


def to_feature_collection(features: list[dict]) -> dict:
    """Wrap GeoJSON Features in a FeatureCollection."""
    return {"type": "FeatureCollection", "features": list(features)}
