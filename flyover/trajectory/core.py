# flyover/trajectory/core.py
import logging
from typing import Optional, Sequence, Tuple

from .data_models import Trajectory, Waypoint
from .timing import PhaseTimer
from .utils.calculations import arrival_bearing
from .utils.smoothing import build_flight_path, build_orbit_path, drop_degenerate_segments
from ..config import FlightConfig
from ..constants import FlightConstants
from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)

class TrajectoryBuilder:
    """Turns an ordered waypoint list into a flight path plus a terminal orbit."""

    def __init__(self, config: Optional[FlightConfig] = None):
        self.config = config or FlightConfig()
        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    def build(self, waypoints: Sequence[Waypoint]) -> Trajectory:
        """
        Builds the trajectory. Fewer than two usable waypoints yield a
        single-point flight path with no orbit; callers that need a flight
        should use build_for_flight() instead.
        """
        route = drop_degenerate_segments(list(waypoints))
        if not route:
            return Trajectory(flight_path=())

        flight_path = build_flight_path(route, self.config.flight_resolution)
        if len(route) < FlightConstants.MIN_FLIGHT_WAYPOINTS:
            logger.info("Single waypoint route: no flight, orbit generation skipped.")
            return Trajectory(flight_path=tuple(flight_path), waypoint_indices=(0,))

        last_point = flight_path[-1]
        orbit_path = build_orbit_path(
            center=last_point,
            start_bearing=arrival_bearing(flight_path),
            radius_km=self.config.orbit_radius_km,
            num_points=self.config.orbit_resolution,
            adaptive_radius=self.config.adaptive_orbit_radius,
            transition_fraction=self.config.orbit_transition_fraction,
            start_point=last_point,
        )
        logger.info(f"Trajectory built: {len(route)} waypoints -> {len(flight_path)} flight points, "
                    f"{len(orbit_path)} orbit points.")
        # Every segment contributes exactly `resolution` points before the next waypoint.
        waypoint_indices = tuple(i * self.config.flight_resolution for i in range(len(route)))
        return Trajectory(flight_path=tuple(flight_path), orbit_path=tuple(orbit_path),
                          waypoint_indices=waypoint_indices)

    def build_for_flight(self, waypoints: Sequence[Waypoint]) -> Trajectory:
        """Like build(), but fails fast when the waypoints cannot produce a flight."""
        if len(waypoints) < FlightConstants.MIN_FLIGHT_WAYPOINTS:
            raise InvalidInputError(
                f"A flight needs at least {FlightConstants.MIN_FLIGHT_WAYPOINTS} waypoints, got {len(waypoints)}")
        trajectory = self.build(waypoints)
        if not trajectory.has_flight:
            raise InvalidInputError("All waypoints share the same coordinates; nothing to fly")
        return trajectory

    def plan(self, waypoints: Sequence[Waypoint]) -> Tuple[Trajectory, PhaseTimer]:
        """Trajectory and its phase timer for one flight session."""
        trajectory = self.build_for_flight(waypoints)
        return trajectory, PhaseTimer.from_trajectory(trajectory, self.config)
