# flyover/trajectory/utils/smoothing.py
import logging
import math
from typing import List, Optional, Sequence

import numpy as np
from scipy.interpolate import CubicHermiteSpline

from ..data_models import PathPoint, Waypoint
from ...constants import FlightConstants
from .calculations import lerp
from .coordinates import destination_point, distance_km, points_coincide

logger = logging.getLogger(__name__)

def drop_degenerate_segments(waypoints: Sequence[Waypoint]) -> List[Waypoint]:
    """Removes zero-length segments: a waypoint repeating its predecessor's coordinates is skipped."""
    kept: List[Waypoint] = []
    for wp in waypoints:
        if kept and points_coincide(kept[-1], wp):
            logger.warning(f"Skipping zero-length segment at waypoint {wp.sequence_index} "
                           f"({wp.latitude:.5f}, {wp.longitude:.5f}).")
            continue
        kept.append(wp)
    return kept

def _segment_spline(points: Sequence[Waypoint], i: int) -> CubicHermiteSpline:
    """
    Hermite curve for segment i -> i+1 on t in [0, 1]. Tangents reach back to
    the previous waypoint and forward to the one after next, falling back to
    the segment's own endpoints at either end of the route.
    """
    start, end = points[i], points[i + 1]
    control1 = points[i - 1] if i > 0 else start
    control2 = points[i + 2] if i < len(points) - 2 else end

    y = np.array([[start.longitude, start.latitude],
                  [end.longitude, end.latitude]])
    dydx = np.array([[end.longitude - control1.longitude, end.latitude - control1.latitude],
                     [control2.longitude - start.longitude, control2.latitude - start.latitude]])
    return CubicHermiteSpline([0.0, 1.0], y, dydx)

def build_flight_path(waypoints: Sequence[Waypoint], resolution: int) -> List[PathPoint]:
    """
    Densifies the route into (N-1) * resolution + 1 points. Every segment
    starts with its waypoint verbatim and the route ends on the last
    waypoint verbatim. Altitude is interpolated linearly so it never
    overshoots the user's setting.
    """
    if len(waypoints) < FlightConstants.MIN_FLIGHT_WAYPOINTS:
        return [PathPoint.from_waypoint(wp, wp.sequence_index) for wp in waypoints]

    ts = np.arange(1, resolution) / resolution
    flight_points: List[PathPoint] = []
    for i in range(len(waypoints) - 1):
        start, end = waypoints[i], waypoints[i + 1]
        flight_points.append(PathPoint.from_waypoint(start, start.sequence_index))
        if len(ts) == 0:
            continue

        coords = _segment_spline(waypoints, i)(ts)
        altitudes = start.altitude + (end.altitude - start.altitude) * ts
        for (lon, lat), alt in zip(coords, altitudes):
            flight_points.append(PathPoint(float(lon), float(lat), float(alt), start.sequence_index))

    final = waypoints[-1]
    flight_points.append(PathPoint.from_waypoint(final, final.sequence_index))
    return flight_points

def orbit_radius_km(center_altitude: float, radius_km: float, adaptive: bool) -> float:
    """Wider orbits at higher altitude. The 1 + alt/100 scaling is a tuned constant."""
    if not adaptive:
        return radius_km
    scale = 1 + center_altitude / FlightConstants.ADAPTIVE_RADIUS_ALTITUDE_DIVISOR
    return max(FlightConstants.MIN_ORBIT_RADIUS_KM, radius_km * scale)

def build_orbit_path(
    center: PathPoint,
    start_bearing: float,
    radius_km: float,
    num_points: int,
    adaptive_radius: bool = True,
    transition_fraction: float = 0.25,
    start_point: Optional[PathPoint] = None,
) -> List[PathPoint]:
    """
    One full clockwise loop of num_points + 1 points around `center`, starting
    at `start_bearing`. When `start_point` is given the radius eases from the
    start point's distance to the target radius over the first
    `transition_fraction` of the loop, and altitude follows a sine envelope
    back to the center altitude.
    """
    final_radius = orbit_radius_km(center.altitude, radius_km, adaptive_radius)
    initial_radius = distance_km(center, start_point) if start_point is not None else final_radius
    start_altitude = start_point.altitude if start_point is not None else center.altitude

    orbit_points: List[PathPoint] = []
    for i in range(num_points + 1):
        progress = i / num_points
        angle = start_bearing + progress * 360.0

        if transition_fraction > 0 and progress < transition_fraction:
            radius = lerp(initial_radius, final_radius, progress / transition_fraction)
        else:
            radius = final_radius

        lat, lon = destination_point(center.latitude, center.longitude, angle, radius)
        altitude = center.altitude + (center.altitude - start_altitude) * math.sin(progress * math.pi)
        orbit_points.append(PathPoint(lon, lat, altitude, center.source_index))

    return orbit_points
