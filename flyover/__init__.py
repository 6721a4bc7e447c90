# flyover/__init__.py
"""
flyover - Camera flight trajectories over a map from a handful of waypoints,
for live preview and frame-exact video export.
"""

from .config import FlightConfig
from .exceptions import FlyoverError, InvalidInputError, ConfigurationError, RenderingSurfaceError
from .trajectory import (
    TrajectoryBuilder, PhaseTimer, Waypoint, PathPoint, Trajectory, PhaseSchedule,
    ViewState, BearingState, Phase, PhaseSample, sample
)
from .drivers import InteractiveDriver, FrameExactDriver, DriverStatus, MapSurface

__all__ = [
    'FlightConfig',
    'FlyoverError',
    'InvalidInputError',
    'ConfigurationError',
    'RenderingSurfaceError',
    'TrajectoryBuilder',
    'PhaseTimer',
    'Waypoint',
    'PathPoint',
    'Trajectory',
    'PhaseSchedule',
    'ViewState',
    'BearingState',
    'Phase',
    'PhaseSample',
    'sample',
    'InteractiveDriver',
    'FrameExactDriver',
    'DriverStatus',
    'MapSurface',
]
