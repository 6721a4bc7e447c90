#!/usr/bin/env python3
"""
Renders a three-waypoint flyover frame by frame, prints a per-phase summary
and writes the trajectory and camera track to interactive HTML views.
"""
from pathlib import Path

import numpy as np

from flyover import FlightConfig, FrameExactDriver, Phase, Waypoint
from flyover.trajectory.visualization import TrajectoryVisualizer

# --- MISSION PARAMETERS ---
SCENARIO_NAME = "Reykjanes coastline flyover"
FPS = 30
OUTPUT_DIR = Path(__file__).resolve().parent / "output"
WAYPOINTS = [
    Waypoint(longitude=-22.605, latitude=64.050, altitude=0.2, sequence_index=1, label="Keflavik"),
    Waypoint(longitude=-22.560, latitude=64.075, altitude=0.7, sequence_index=2, label="Headland"),
    Waypoint(longitude=-22.480, latitude=64.040, altitude=0.4, sequence_index=3, label="Harbour"),
]

def run_render():
    print(f"--- {SCENARIO_NAME} ---")
    driver = FrameExactDriver(WAYPOINTS, fps=FPS, config=FlightConfig(), trailing_hold_frames=FPS)
    schedule = driver.timer.schedule
    print(f"Flight: {schedule.flight_length_km:.2f} km in {schedule.flight_duration_ms / 1000:.1f}s")
    print(f"Orbit:  {schedule.orbit_length_km:.2f} km in {schedule.orbit_duration_ms / 1000:.1f}s")

    frames = driver.render()
    array = np.array([f.as_tuple() for f in frames])
    print(f"\n{len(frames)} frames at {FPS} fps ({len(frames) / FPS:.1f}s of video)")

    phases = [driver.phase_at(i).phase for i in range(driver.total_frames)]
    for phase in (Phase.ALIGN, Phase.FLIGHT, Phase.ORBIT):
        rows = array[[i for i, p in enumerate(phases) if p == phase]]
        print(f"  {phase.name:<7} {len(rows):>5} frames | zoom {rows[:, 2].min():5.2f}-{rows[:, 2].max():5.2f} "
              f"| pitch {rows[:, 3].min():4.1f}-{rows[:, 3].max():4.1f}")

    marks = ", ".join(f"{m:.2f}" for m in driver.timer.waypoint_progress_marks())
    print(f"Waypoint progress marks: {marks}")

    OUTPUT_DIR.mkdir(exist_ok=True)
    visualizer = TrajectoryVisualizer()
    visualizer.save_map(visualizer.create_map(driver.trajectory, WAYPOINTS, views=frames),
                        str(OUTPUT_DIR / "flyover_map.html"))
    visualizer.save_3d_plot(visualizer.create_3d_plot(driver.trajectory), str(OUTPUT_DIR / "flyover_3d.html"))

if __name__ == "__main__":
    run_render()
