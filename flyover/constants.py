# flyover/constants.py

class FlightConstants:
    EARTH_RADIUS_KM: float = 6371.0
    MS_PER_SECOND: float = 1000.0

    # A flight needs at least a start and an end waypoint.
    MIN_FLIGHT_WAYPOINTS = 2

    # Waypoint altitude is a normalized slider value, not metres.
    MIN_ALTITUDE = 0.0
    MAX_ALTITUDE = 1.0

    # Orbit radius scaling: R * (1 + altitude / divisor), floored at the minimum.
    # Empirically tuned for the export composition; treat as a tunable.
    ADAPTIVE_RADIUS_ALTITUDE_DIVISOR = 100.0
    MIN_ORBIT_RADIUS_KM = 0.1

    # Bearing smoothing is halved while orbiting.
    ORBIT_SMOOTHING_SCALE = 0.5
