# flyover/trajectory/utils/__init__.py
"""
Geodetic helpers and curve construction used by the TrajectoryBuilder.
"""

from .coordinates import distance_km, bearing_deg, interpolate_angle_deg, destination_point
