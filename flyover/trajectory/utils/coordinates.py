# flyover/trajectory/utils/coordinates.py
"""
Core coordinate geometry. Logging is omitted here as these are high-frequency,
low-level functions called for every dense path point and every frame.

Point arguments are anything exposing `latitude` and `longitude` attributes
(Waypoint, PathPoint, ViewState).
"""
import math
from typing import Tuple

from ...constants import FlightConstants

def destination_point(lat: float, lon: float, bearing: float, distance: float) -> Tuple[float, float]:
    """(lat, lon) reached by travelling `distance` km from (lat, lon) on initial `bearing`."""
    phi = math.radians(lat)
    theta = math.radians(bearing)
    delta = distance / FlightConstants.EARTH_RADIUS_KM

    dest_phi = math.asin(math.sin(phi) * math.cos(delta) + math.cos(phi) * math.sin(delta) * math.cos(theta))
    dest_lambda = math.radians(lon) + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi),
        math.cos(delta) - math.sin(phi) * math.sin(dest_phi),
    )
    return math.degrees(dest_phi), math.degrees(dest_lambda)

def normalize_angle_deg(angle: float) -> float:
    """Maps any angle into [0, 360)."""
    normalized = angle % 360.0
    # -1e-17 % 360 rounds up to 360.0
    return 0.0 if normalized == 360.0 else normalized

def distance_km(a, b) -> float:
    """Haversine great-circle distance between two points in kilometres."""
    phi_a, phi_b = math.radians(a.latitude), math.radians(b.latitude)
    half_dphi = (phi_b - phi_a) / 2
    half_dlambda = math.radians(b.longitude - a.longitude) / 2
    h = math.sin(half_dphi) ** 2 + math.cos(phi_a) * math.cos(phi_b) * math.sin(half_dlambda) ** 2
    return 2 * FlightConstants.EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, h)))

def bearing_deg(a, b) -> float:
    """Initial bearing from a to b in [0, 360). Undefined when a == b; callers must avoid it."""
    phi_a, phi_b = math.radians(a.latitude), math.radians(b.latitude)
    dlambda = math.radians(b.longitude - a.longitude)
    y = math.sin(dlambda) * math.cos(phi_b)
    x = math.cos(phi_a) * math.sin(phi_b) - math.sin(phi_a) * math.cos(phi_b) * math.cos(dlambda)
    return normalize_angle_deg(math.degrees(math.atan2(y, x)))

def interpolate_angle_deg(start: float, end: float, t: float) -> float:
    """
    Rotates from `start` toward `end` by fraction `t`, always along the
    shorter arc, so 350 -> 10 passes through 0 rather than 180.
    """
    start = normalize_angle_deg(start)
    end = normalize_angle_deg(end)
    diff = end - start
    if diff > 180:
        diff -= 360
    elif diff <= -180:
        diff += 360
    return normalize_angle_deg(start + diff * t)

def points_coincide(a, b) -> bool:
    return a.latitude == b.latitude and a.longitude == b.longitude
