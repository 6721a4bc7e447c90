# flyover/trajectory/sampler.py
"""
The per-frame camera function shared by the live preview and the
frame-exact renderer. `sample` is pure apart from the BearingState it is
handed, so the same inputs replayed in the same order always produce the
same view states.
"""
import math
from typing import Optional, Sequence, Tuple

from .data_models import BearingState, Phase, PathPoint, Trajectory, ViewState
from .utils.calculations import departure_bearing, lerp, zoom_for_altitude
from .utils.coordinates import bearing_deg, interpolate_angle_deg, points_coincide
from ..config import FlightConfig
from ..constants import FlightConstants

def _path_for(phase: Phase, trajectory: Trajectory) -> Tuple[PathPoint, ...]:
    return trajectory.orbit_path if phase == Phase.ORBIT else trajectory.flight_path

def locate_on_path(path: Sequence[PathPoint], local_t: float) -> Tuple[PathPoint, PathPoint, float]:
    """
    Segment of the dense path under `local_t`: index floor(t * (len-1))
    clamped to len-2, plus the fraction travelled along that segment.
    """
    scaled = local_t * (len(path) - 1)
    index = min(math.floor(scaled), len(path) - 2)
    return path[index], path[index + 1], scaled - index

def target_bearing(phase: Phase, local_t: float, trajectory: Trajectory) -> float:
    """
    Unsmoothed heading for one instant. Pure, so it can be computed for
    frames in any order. NaN when the two path points under `local_t`
    share a position, meaning "keep the current bearing".
    """
    if phase == Phase.ALIGN:
        return align_target(trajectory)
    current, nxt, _ = locate_on_path(_path_for(phase, trajectory), local_t)
    if points_coincide(current, nxt):
        return math.nan
    return bearing_deg(current, nxt)

def align_target(trajectory: Trajectory) -> float:
    """Heading of the first waypoint-to-waypoint segment, falling back to the first dense step."""
    path = trajectory.flight_path
    if len(trajectory.waypoint_indices) >= 2:
        return bearing_deg(path[0], path[trajectory.waypoint_indices[1]])
    return departure_bearing(path)

def smoothing_factor(phase: Phase, config: FlightConfig) -> float:
    """Orbit rotation is deliberately calmer than transit."""
    if phase == Phase.ORBIT:
        return config.rotation_smoothness * FlightConstants.ORBIT_SMOOTHING_SCALE
    return config.rotation_smoothness

def align_view(local_t: float, trajectory: Trajectory, config: FlightConfig, bearing_state: BearingState,
               target: float) -> ViewState:
    """Stationary over the first waypoint while zoom, pitch and heading ramp to flight values."""
    origin = trajectory.flight_path[0]
    target_zoom = zoom_for_altitude(config.flight_zoom, origin.altitude, config.altitude_zoom_factor)
    bearing = interpolate_angle_deg(0.0, target, local_t)
    bearing_state.value = bearing
    return ViewState(
        longitude=origin.longitude,
        latitude=origin.latitude,
        zoom=lerp(config.initial_zoom, target_zoom, local_t),
        pitch=lerp(0.0, config.pitch, local_t),
        bearing=bearing,
    )

def apply_smoothing(phase: Phase, target: float, config: FlightConfig, bearing_state: BearingState) -> float:
    """Moves the accumulator one step toward `target` and returns the new bearing."""
    if math.isnan(target):
        return bearing_state.value
    bearing_state.value = interpolate_angle_deg(bearing_state.value, target, smoothing_factor(phase, config))
    return bearing_state.value

def sample(phase: Phase, local_t: float, trajectory: Trajectory, config: FlightConfig,
           bearing_state: BearingState, target: Optional[float] = None) -> ViewState:
    """
    Camera view for `local_t` within `phase`.

    ALIGN holds position on the first waypoint and ramps zoom, pitch and
    bearing. FLIGHT and ORBIT blend between neighbouring dense points and
    ease the bearing toward the path heading. DONE has no view of its own:
    callers level the camera out with the relevel routine instead.

    `target` lets a caller pass a heading precomputed with target_bearing();
    the result is identical to letting sample() compute it.
    """
    if phase == Phase.DONE:
        raise ValueError("DONE has no sampled view; relevel from the last view instead")
    if not trajectory.has_flight:
        raise ValueError("Trajectory has no flight path to sample")
    if phase == Phase.ORBIT and not trajectory.has_orbit:
        raise ValueError("Trajectory has no orbit path to sample")

    if target is None:
        target = target_bearing(phase, local_t, trajectory)
    if phase == Phase.ALIGN:
        return align_view(local_t, trajectory, config, bearing_state, target)

    current, nxt, segment_t = locate_on_path(_path_for(phase, trajectory), local_t)
    altitude = lerp(current.altitude, nxt.altitude, segment_t)

    return ViewState(
        longitude=lerp(current.longitude, nxt.longitude, segment_t),
        latitude=lerp(current.latitude, nxt.latitude, segment_t),
        zoom=zoom_for_altitude(config.flight_zoom, altitude, config.altitude_zoom_factor),
        pitch=config.pitch,
        bearing=apply_smoothing(phase, target, config, bearing_state),
    )
