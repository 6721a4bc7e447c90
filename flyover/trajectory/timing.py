# flyover/trajectory/timing.py
"""
Converts physical path length into animation time and classifies elapsed
time into the Align -> Flight -> Orbit -> Done phase sequence.
"""
from typing import List, Optional

from .data_models import Phase, PhaseSample, PhaseSchedule, Trajectory
from .utils.calculations import calculate_path_distance, clamp_unit
from ..config import FlightConfig
from ..constants import FlightConstants

class PhaseTimer:
    """Pure phase classifier over one immutable PhaseSchedule."""

    def __init__(self, schedule: PhaseSchedule, trajectory: Optional[Trajectory] = None):
        self.schedule = schedule
        self.trajectory = trajectory

    @classmethod
    def from_trajectory(cls, trajectory: Trajectory, config: FlightConfig) -> "PhaseTimer":
        return cls(compute_schedule(trajectory, config), trajectory)

    def classify(self, elapsed_ms: float) -> PhaseSample:
        """
        Phases are contiguous and strictly ordered: Align on [0, a),
        Flight on [a, a+f], Orbit on (a+f, a+f+o], Done afterwards.
        Zero-length phases never match.
        """
        s = self.schedule
        elapsed_ms = max(0.0, elapsed_ms)

        if elapsed_ms < s.align_duration_ms:
            return PhaseSample(Phase.ALIGN, elapsed_ms / s.align_duration_ms)

        flight_time = elapsed_ms - s.align_duration_ms
        if s.flight_duration_ms > 0 and flight_time <= s.flight_duration_ms:
            return PhaseSample(Phase.FLIGHT, clamp_unit(flight_time / s.flight_duration_ms))

        orbit_time = flight_time - s.flight_duration_ms
        if s.orbit_duration_ms > 0 and orbit_time <= s.orbit_duration_ms:
            return PhaseSample(Phase.ORBIT, clamp_unit(orbit_time / s.orbit_duration_ms))

        return PhaseSample(Phase.DONE, 1.0)

    @staticmethod
    def flight_progress(sample: PhaseSample) -> float:
        """Progress for the UI: 0 while aligning, pinned at 1.0 once orbiting."""
        if sample.phase == Phase.ALIGN:
            return 0.0
        if sample.phase == Phase.FLIGHT:
            return sample.local_t
        return 1.0

    def waypoint_progress_marks(self) -> List[float]:
        """
        Flight progress at which each waypoint is passed, for the altitude
        timeline. The sampler walks the dense path at a constant index rate,
        so a waypoint is reached at its point index over the path length.
        A trajectory assembled without waypoint indices only marks its ends.
        """
        if self.trajectory is None or not self.trajectory.has_flight:
            return []
        last_index = len(self.trajectory.flight_path) - 1
        indices = self.trajectory.waypoint_indices or (0, last_index)
        return [index / last_index for index in indices]

def compute_schedule(trajectory: Trajectory, config: FlightConfig) -> PhaseSchedule:
    """Durations from path lengths: flight at full speed, orbit at speed * orbit_speed_factor."""
    flight_km = calculate_path_distance(trajectory.flight_path)
    orbit_km = calculate_path_distance(trajectory.orbit_path)
    speed = config.flight_speed_km_per_second
    orbit_speed = speed * config.orbit_speed_factor

    return PhaseSchedule(
        align_duration_ms=float(config.align_duration_ms),
        flight_duration_ms=flight_km / speed * FlightConstants.MS_PER_SECOND,
        orbit_duration_ms=orbit_km / orbit_speed * FlightConstants.MS_PER_SECOND,
        flight_length_km=flight_km,
        orbit_length_km=orbit_km,
    )
