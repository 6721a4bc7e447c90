# flyover/trajectory/__init__.py
"""
Initializes the trajectory module, defining its public API.

Everything in here is pure: building a trajectory, timing it and sampling
it never touches a clock or a map surface.
"""
# Core logic classes
from .core import TrajectoryBuilder
from .timing import PhaseTimer, compute_schedule
from .sampler import sample, target_bearing

# Public data models from data_models.py
from .data_models import (
    Waypoint, PathPoint, Trajectory, PhaseSchedule, ViewState, BearingState, Phase, PhaseSample
)

# Expose key geometry functions as part of the public API
from .utils.coordinates import distance_km, bearing_deg, interpolate_angle_deg
