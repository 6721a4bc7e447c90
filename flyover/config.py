# flyover/config.py
"""
Camera flight configuration. Defaults reproduce the export composition:
an 8 second alignment, 0.185 km/s transit and a quarter-speed orbit.
"""
import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Tuple

from .exceptions import ConfigurationError

# Editor-side option names mapped onto config fields.
_CAMEL_CASE_ALIASES = {
    "initialZoom": "initial_zoom",
    "flightZoom": "flight_zoom",
    "flightSpeedKmPerSecond": "flight_speed_km_per_second",
    "orbitSpeedFactor": "orbit_speed_factor",
    "alignDurationMs": "align_duration_ms",
    "orbitRadiusKm": "orbit_radius_km",
    "rotationSmoothness": "rotation_smoothness",
    "orbitTransitionFraction": "orbit_transition_fraction",
    "adaptiveOrbitRadius": "adaptive_orbit_radius",
    "altitudeZoomFactor": "altitude_zoom_factor",
    "relevelDurationMs": "relevel_duration_ms",
}

def _is_count(value: Any) -> bool:
    """Positive integer, excluding bools and integral-valued floats."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value >= 1

@dataclass(frozen=True)
class FlightConfig:
    """Tunable parameters for one flight session."""
    initial_zoom: float = 1.0
    flight_zoom: float = 16.0
    pitch: float = 60.0
    flight_speed_km_per_second: float = 0.185
    orbit_speed_factor: float = 0.25
    align_duration_ms: float = 8000.0
    orbit_radius_km: float = 0.5
    resolution: Tuple[int, int] = (500, 500)
    rotation_smoothness: float = 0.1
    orbit_transition_fraction: float = 0.25
    adaptive_orbit_radius: bool = True
    altitude_zoom_factor: float = 3.0
    relevel_duration_ms: float = 1000.0

    def __post_init__(self):
        self.validate()

    @property
    def flight_resolution(self) -> int:
        return self.resolution[0]

    @property
    def orbit_resolution(self) -> int:
        return self.resolution[1]

    def validate(self) -> None:
        """Raises ConfigurationError on the first invalid field."""
        if self.flight_speed_km_per_second <= 0:
            raise ConfigurationError("flight_speed_km_per_second", "Flight speed must be positive")
        if self.orbit_speed_factor <= 0:
            raise ConfigurationError("orbit_speed_factor", "Orbit speed factor must be positive")
        if self.align_duration_ms < 0:
            raise ConfigurationError("align_duration_ms", "Duration cannot be negative")
        if self.relevel_duration_ms < 0:
            raise ConfigurationError("relevel_duration_ms", "Duration cannot be negative")
        if self.orbit_radius_km <= 0:
            raise ConfigurationError("orbit_radius_km", "Orbit radius must be positive")
        if len(self.resolution) != 2:
            raise ConfigurationError("resolution", "Resolution must be a (flight, orbit) pair")
        flight_res, orbit_res = self.resolution
        if not _is_count(flight_res):
            raise ConfigurationError("resolution", "Flight resolution must be a positive integer")
        if not _is_count(orbit_res):
            raise ConfigurationError("resolution", "Orbit resolution must be a positive integer")
        if not 0 < self.rotation_smoothness <= 1:
            raise ConfigurationError("rotation_smoothness", "Smoothing must be in (0, 1]")
        if not 0 <= self.orbit_transition_fraction <= 1:
            raise ConfigurationError("orbit_transition_fraction", "Fraction must be in [0, 1]")

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "FlightConfig":
        """Builds a config from snake_case or editor camelCase option names."""
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(key, "Unknown configuration option")
            kwargs[name] = tuple(value) if name == "resolution" else value
        return cls(**kwargs)

    def with_overrides(self, **changes) -> "FlightConfig":
        return replace(self, **changes)
