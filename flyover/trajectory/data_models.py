# flyover/trajectory/data_models.py
"""
Defines the core data structures shared by the trajectory builder, the
sampler and both playback drivers. Everything except BearingState is
immutable once built.
"""
from dataclasses import dataclass, asdict
from enum import IntEnum
from typing import Any, Dict, Mapping, Optional, Tuple

from ..constants import FlightConstants
from ..exceptions import InvalidInputError

@dataclass(frozen=True)
class Waypoint:
    """A user-placed point on the route."""
    longitude: float
    latitude: float
    altitude: float = 0.0
    sequence_index: int = 1
    label: Optional[str] = None

    def __post_init__(self):
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidInputError(f"Longitude out of range: {self.longitude}")
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidInputError(f"Latitude out of range: {self.latitude}")
        if not FlightConstants.MIN_ALTITUDE <= self.altitude <= FlightConstants.MAX_ALTITUDE:
            raise InvalidInputError(f"Altitude must be within [0, 1], got {self.altitude}")
        if self.sequence_index < 1:
            raise InvalidInputError(f"Sequence index must be >= 1, got {self.sequence_index}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Waypoint":
        """Accepts the editor's point shape ({longitude, latitude, altitude, index})."""
        try:
            return cls(
                longitude=float(data["longitude"]),
                latitude=float(data["latitude"]),
                altitude=float(data.get("altitude", 0.0)),
                sequence_index=int(data.get("sequence_index", data.get("index", 1))),
                label=data.get("label"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Malformed waypoint {dict(data)!r}: {e}") from e

@dataclass(frozen=True)
class PathPoint:
    """A point on the dense interpolated curve."""
    longitude: float
    latitude: float
    altitude: float
    source_index: int

    @classmethod
    def from_waypoint(cls, waypoint: Waypoint, source_index: int) -> "PathPoint":
        return cls(waypoint.longitude, waypoint.latitude, waypoint.altitude, source_index)

@dataclass(frozen=True)
class Trajectory:
    """
    The flight path through all waypoints plus the orbit around the last one.
    `waypoint_indices` holds the flight_path index of every route waypoint
    kept after degenerate segments were dropped.
    """
    flight_path: Tuple[PathPoint, ...]
    orbit_path: Tuple[PathPoint, ...] = ()
    waypoint_indices: Tuple[int, ...] = ()

    @property
    def has_flight(self) -> bool:
        return len(self.flight_path) >= 2

    @property
    def has_orbit(self) -> bool:
        return len(self.orbit_path) >= 2

    def to_geojson(self) -> Dict[str, Any]:
        """FeatureCollection with the flight (and orbit) as LineStrings for a map overlay."""
        features = []
        if self.flight_path:
            features.append(_line_feature("flight-path", self.flight_path))
        if self.orbit_path:
            features.append(_line_feature("orbit-path", self.orbit_path))
        return {"type": "FeatureCollection", "features": features}

def _line_feature(name: str, points: Tuple[PathPoint, ...]) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "properties": {"name": name},
        "geometry": {
            "type": "LineString",
            "coordinates": [[p.longitude, p.latitude] for p in points],
        },
    }

@dataclass(frozen=True)
class PhaseSchedule:
    """Phase durations derived from path lengths. Immutable for one session."""
    align_duration_ms: float
    flight_duration_ms: float
    orbit_duration_ms: float
    flight_length_km: float = 0.0
    orbit_length_km: float = 0.0

    @property
    def total_duration_ms(self) -> float:
        return self.align_duration_ms + self.flight_duration_ms + self.orbit_duration_ms

@dataclass(frozen=True)
class ViewState:
    """Camera parameters for one instant. The engine's sole output."""
    longitude: float
    latitude: float
    zoom: float
    pitch: float
    bearing: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def as_tuple(self) -> Tuple[float, float, float, float, float]:
        return (self.longitude, self.latitude, self.zoom, self.pitch, self.bearing)

@dataclass
class BearingState:
    """
    Smoothed camera bearing carried from one sample to the next.
    Owned by exactly one drive session; never share an instance.
    """
    value: float = 0.0

    def reset(self) -> None:
        self.value = 0.0

class Phase(IntEnum):
    ALIGN = 0
    FLIGHT = 1
    ORBIT = 2
    DONE = 3

@dataclass(frozen=True)
class PhaseSample:
    phase: Phase
    local_t: float
