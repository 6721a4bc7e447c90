# flyover/trajectory/utils/calculations.py
from typing import Sequence

from .coordinates import bearing_deg, distance_km, points_coincide

def calculate_path_distance(points: Sequence) -> float:
    """Calculates the total geographic length of a dense path in kilometres."""
    distance = 0.0
    for i in range(len(points) - 1):
        distance += distance_km(points[i], points[i + 1])
    return distance

def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t

def zoom_for_altitude(flight_zoom: float, altitude: float, altitude_zoom_factor: float) -> float:
    """Higher altitude trades directly against zoom: the camera pulls out."""
    return flight_zoom - altitude * altitude_zoom_factor

def ease_out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)

def clamp_unit(t: float) -> float:
    return max(0.0, min(1.0, t))

def departure_bearing(points: Sequence) -> float:
    """Bearing from the first point toward the first distinct point after it."""
    for point in points[1:]:
        if not points_coincide(points[0], point):
            return bearing_deg(points[0], point)
    return 0.0

def arrival_bearing(points: Sequence) -> float:
    """Bearing the path arrives at its last point with."""
    last = points[-1] if points else None
    for point in reversed(points[:-1]):
        if not points_coincide(point, last):
            return bearing_deg(point, last)
    return 0.0
