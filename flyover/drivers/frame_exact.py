# flyover/drivers/frame_exact.py
"""
Deterministic frame-indexed renderer for video export. Progress comes from
the frame index alone, so re-rendering the same waypoints with the same
config yields exactly the same sequence of view states.
"""
import logging
import math
from typing import Iterator, List, Optional, Sequence

import numpy as np

from .interactive import relevel_view
from ..config import FlightConfig
from ..exceptions import InvalidInputError
from ..trajectory.core import TrajectoryBuilder
from ..trajectory.data_models import BearingState, Phase, PhaseSample, ViewState, Waypoint
from ..trajectory.sampler import sample, target_bearing

logger = logging.getLogger(__name__)

class FrameExactDriver:
    """Precomputes one ViewState per frame at a fixed frame rate."""

    def __init__(
        self,
        waypoints: Sequence[Waypoint],
        fps: float,
        config: Optional[FlightConfig] = None,
        trailing_hold_frames: int = 0,
    ):
        if fps <= 0:
            raise InvalidInputError(f"fps must be positive, got {fps}")
        if trailing_hold_frames < 0:
            raise InvalidInputError(f"trailing_hold_frames cannot be negative, got {trailing_hold_frames}")

        self.fps = fps
        self.config = config or FlightConfig()
        self.trailing_hold_frames = trailing_hold_frames
        self.trajectory, self.timer = TrajectoryBuilder(self.config).plan(waypoints)
        self.total_frames = math.ceil(self.timer.schedule.total_duration_ms / 1000 * fps)

        # Lazily filled by frame(); always extended in increasing frame order.
        self._frames: List[ViewState] = []
        self._frame_iter: Optional[Iterator[ViewState]] = None

        logger.info(f"Frame-exact render prepared: {self.total_frames} frames at {fps} fps "
                    f"(+{trailing_hold_frames} hold).")

    @property
    def frame_count(self) -> int:
        return self.total_frames + self.trailing_hold_frames

    def elapsed_ms(self, frame_index: int) -> float:
        return frame_index / self.fps * 1000

    def phase_at(self, frame_index: int) -> PhaseSample:
        return self.timer.classify(self.elapsed_ms(frame_index))

    def iter_frames(self) -> Iterator[ViewState]:
        """Frames in increasing order, with one bearing accumulator for the pass."""
        bearing_state = BearingState()
        last_view = None
        for i in range(self.total_frames):
            phase_sample = self.phase_at(i)
            if phase_sample.phase == Phase.DONE:
                break
            last_view = sample(phase_sample.phase, phase_sample.local_t, self.trajectory,
                               self.config, bearing_state)
            yield last_view
        yield from self._hold_frames(last_view)

    def target_bearings(self) -> np.ndarray:
        """
        Unsmoothed heading per frame. Each entry depends only on its frame
        index, so this pass can be split across workers; NaN marks frames
        whose heading is carried over from the previous frame.
        """
        return np.array([
            target_bearing(s.phase, s.local_t, self.trajectory)
            for s in (self.phase_at(i) for i in range(self.total_frames))
        ], dtype=float)

    def render(self) -> List[ViewState]:
        """
        Two-pass render: per-frame targets first, then the order-dependent
        smoothing pass. Produces the same frames as iter_frames().
        """
        targets = self.target_bearings()
        bearing_state = BearingState()
        frames: List[ViewState] = []
        for i in range(self.total_frames):
            phase_sample = self.phase_at(i)
            if phase_sample.phase == Phase.DONE:
                break
            frames.append(sample(phase_sample.phase, phase_sample.local_t, self.trajectory,
                                 self.config, bearing_state, target=float(targets[i])))
        frames.extend(self._hold_frames(frames[-1] if frames else None))
        logger.info(f"Rendered {len(frames)} frames.")
        return frames

    def frame(self, frame_index: int) -> ViewState:
        """View state for one frame, computing any earlier frames first."""
        if not 0 <= frame_index < self.frame_count:
            raise IndexError(f"Frame {frame_index} outside 0..{self.frame_count - 1}")
        if self._frame_iter is None:
            self._frame_iter = self.iter_frames()
        while len(self._frames) <= frame_index:
            view = next(self._frame_iter, None)
            if view is None:
                raise IndexError(f"Frame {frame_index} lies past the end of the flight "
                                 f"({len(self._frames)} frames produced)")
            self._frames.append(view)
        return self._frames[frame_index]

    def as_array(self) -> np.ndarray:
        """(frames, 5) float array of lon, lat, zoom, pitch, bearing for export."""
        return np.array([view.as_tuple() for view in self.render()], dtype=np.float64).reshape(-1, 5)

    def _hold_frames(self, last_view: Optional[ViewState]) -> Iterator[ViewState]:
        if last_view is None:
            return
        for k in range(self.trailing_hold_frames):
            yield relevel_view(last_view, (k + 1) / self.trailing_hold_frames)
