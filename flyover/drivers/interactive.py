# flyover/drivers/interactive.py
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Protocol, Sequence

from ..config import FlightConfig
from ..exceptions import InvalidInputError, RenderingSurfaceError
from ..trajectory.core import TrajectoryBuilder
from ..trajectory.data_models import BearingState, Phase, Trajectory, ViewState, Waypoint
from ..trajectory.sampler import sample
from ..trajectory.timing import PhaseTimer
from ..trajectory.utils.calculations import clamp_unit, ease_out_quad

logger = logging.getLogger(__name__)

class MapSurface(Protocol):
    """The live map. Receives one camera state per tick."""
    def set_view(self, view_state: ViewState) -> None: ...

class DriverStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    RELEVELING = "releveling"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"

def relevel_view(last_view: ViewState, progress: float) -> ViewState:
    """Eases pitch back to 0 while holding position, zoom and bearing."""
    eased = ease_out_quad(clamp_unit(progress))
    return ViewState(
        longitude=last_view.longitude,
        latitude=last_view.latitude,
        zoom=last_view.zoom,
        pitch=last_view.pitch * (1 - eased),
        bearing=last_view.bearing,
    )

@dataclass
class _Session:
    """Everything scoped to one start() call."""
    trajectory: Trajectory
    timer: PhaseTimer
    start_ms: float
    bearing_state: BearingState = field(default_factory=BearingState)
    relevel_start_ms: Optional[float] = None
    relevel_anchor: Optional[ViewState] = None

class InteractiveDriver:
    """
    Live preview driver. The host calls tick() from its per-frame callback;
    each tick samples the trajectory at the current wall-clock offset and
    pushes one ViewState to the map surface.
    """

    def __init__(
        self,
        surface: MapSurface,
        config: Optional[FlightConfig] = None,
        on_progress: Optional[Callable[[float], None]] = None,
        on_complete: Optional[Callable[[], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.surface = surface
        self.config = config or FlightConfig()
        self.builder = TrajectoryBuilder(self.config)
        self.on_progress = on_progress
        self.on_complete = on_complete
        self.on_cancel = on_cancel
        self._clock = clock
        self._session: Optional[_Session] = None
        self._status = DriverStatus.IDLE
        self._last_view: Optional[ViewState] = None

    @property
    def status(self) -> DriverStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status in (DriverStatus.RUNNING, DriverStatus.RELEVELING)

    @property
    def last_view(self) -> Optional[ViewState]:
        return self._last_view

    @property
    def trajectory(self) -> Optional[Trajectory]:
        return self._session.trajectory if self._session else None

    @property
    def timer(self) -> Optional[PhaseTimer]:
        return self._session.timer if self._session else None

    def _now_ms(self) -> float:
        return self._clock() * 1000.0

    def start(self, waypoints: Sequence[Waypoint]) -> None:
        """
        Validates the route, resets all session state and shows the level
        starting view. Raises InvalidInputError before anything is drawn.
        """
        trajectory, timer = self.builder.plan(waypoints)
        if self.is_active:
            logger.info("Restarting an active flight; previous session discarded.")

        self._session = _Session(trajectory=trajectory, timer=timer, start_ms=self._now_ms())
        self._status = DriverStatus.RUNNING
        logger.info(f"Flight started: {timer.schedule.total_duration_ms / 1000:.1f}s "
                    f"({timer.schedule.flight_length_km:.2f} km flight, "
                    f"{timer.schedule.orbit_length_km:.2f} km orbit).")

        initial = sample(Phase.ALIGN, 0.0, trajectory, self.config, self._session.bearing_state)
        self._push(initial)

    def tick(self) -> bool:
        """Advances one frame. Returns False once the flight is no longer active."""
        if self._status == DriverStatus.RUNNING:
            session = self._session
            phase_sample = session.timer.classify(self._now_ms() - session.start_ms)
            if phase_sample.phase != Phase.DONE:
                view = sample(phase_sample.phase, phase_sample.local_t, session.trajectory,
                              self.config, session.bearing_state)
                self._push(view)
                self._report_progress(PhaseTimer.flight_progress(phase_sample))
                return True

            logger.debug("Flight phases complete, levelling camera.")
            session.relevel_start_ms = self._now_ms()
            session.relevel_anchor = self._last_view
            self._status = DriverStatus.RELEVELING

        if self._status == DriverStatus.RELEVELING:
            return self._tick_relevel()

        return False

    def _tick_relevel(self) -> bool:
        session = self._session
        duration = self.config.relevel_duration_ms
        elapsed = self._now_ms() - session.relevel_start_ms
        progress = 1.0 if duration <= 0 else clamp_unit(elapsed / duration)

        self._push(relevel_view(session.relevel_anchor, progress))
        self._report_progress(1.0)
        if progress < 1.0:
            return True

        self._status = DriverStatus.COMPLETED
        logger.info("Flight completed.")
        if self.on_complete:
            self.on_complete()
        return False

    def cancel(self) -> None:
        """Stops ticking where the camera is. Calling it again is a no-op."""
        if not self.is_active:
            logger.debug(f"Cancel ignored; driver is {self._status.value}.")
            return
        self._status = DriverStatus.CANCELLED
        logger.info("Flight cancelled.")
        if self.on_cancel:
            self.on_cancel()

    def run(self, fps: float = 60.0, sleep: Callable[[float], None] = time.sleep) -> DriverStatus:
        """Cooperative loop for hosts without their own frame callback."""
        if fps <= 0:
            raise InvalidInputError(f"fps must be positive, got {fps}")
        interval = 1.0 / fps
        while self.tick():
            sleep(interval)
        return self._status

    def _push(self, view: ViewState) -> None:
        try:
            self.surface.set_view(view)
        except Exception as e:
            self._status = DriverStatus.FAILED
            logger.error(f"Map surface rejected view state: {e}")
            raise RenderingSurfaceError(f"Map surface failure: {e}") from e
        self._last_view = view

    def _report_progress(self, progress: float) -> None:
        if self.on_progress:
            self.on_progress(progress)
