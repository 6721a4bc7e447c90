#!/usr/bin/env python3
"""
Drives the live preview against a console "map" that prints every tenth
camera state. Press Ctrl+C to cancel the flight mid-way.
"""
import logging

from flyover import FlightConfig, InteractiveDriver, ViewState, Waypoint

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

class ConsoleMap:
    """Stands in for a map widget."""
    def __init__(self):
        self.frames = 0

    def set_view(self, view_state: ViewState) -> None:
        if self.frames % 10 == 0:
            v = view_state
            print(f"[{self.frames:>5}] lon={v.longitude:9.5f} lat={v.latitude:8.5f} "
                  f"zoom={v.zoom:5.2f} pitch={v.pitch:4.1f} bearing={v.bearing:6.1f}")
        self.frames += 1

def main():
    # Short route and fast transit so the preview finishes in well under a minute.
    config = FlightConfig(flight_speed_km_per_second=1.0, align_duration_ms=2000)
    waypoints = [
        Waypoint(longitude=2.2945, latitude=48.8584, altitude=0.3, sequence_index=1),
        Waypoint(longitude=2.3200, latitude=48.8650, altitude=0.6, sequence_index=2),
        Waypoint(longitude=2.3499, latitude=48.8530, altitude=0.2, sequence_index=3),
    ]
    driver = InteractiveDriver(
        ConsoleMap(),
        config=config,
        on_complete=lambda: print("Flight complete."),
        on_cancel=lambda: print("Flight cancelled."),
    )
    driver.start(waypoints)
    try:
        status = driver.run(fps=30)
    except KeyboardInterrupt:
        driver.cancel()
        status = driver.status
    print(f"Final status: {status.value}")

if __name__ == "__main__":
    main()
