# flyover/trajectory/tests/test_smoothing.py

import unittest

from flyover.config import FlightConfig
from flyover.exceptions import InvalidInputError
from flyover.trajectory.core import TrajectoryBuilder
from flyover.trajectory.data_models import PathPoint, Waypoint
from flyover.trajectory.utils.calculations import arrival_bearing
from flyover.trajectory.utils.coordinates import bearing_deg, distance_km
from flyover.trajectory.utils.smoothing import (
    build_flight_path, build_orbit_path, drop_degenerate_segments, orbit_radius_km
)

ROUTES = {
    "straight": [
        Waypoint(longitude=0.0, latitude=0.0, altitude=0.0, sequence_index=1),
        Waypoint(longitude=1.0, latitude=0.0, altitude=0.0, sequence_index=2),
    ],
    "zigzag": [
        Waypoint(longitude=-22.60, latitude=64.05, altitude=0.2, sequence_index=1),
        Waypoint(longitude=-22.55, latitude=64.08, altitude=0.9, sequence_index=2),
        Waypoint(longitude=-22.50, latitude=64.04, altitude=0.1, sequence_index=3),
        Waypoint(longitude=-22.41, latitude=64.07, altitude=0.5, sequence_index=4),
    ],
    "hairpin": [
        Waypoint(longitude=10.0, latitude=45.0, altitude=0.3, sequence_index=1),
        Waypoint(longitude=10.02, latitude=45.01, altitude=0.3, sequence_index=2),
        Waypoint(longitude=10.0, latitude=45.02, altitude=0.7, sequence_index=3),
    ],
}

def angular_gap(a, b):
    return abs((a - b + 180) % 360 - 180)

class TestFlightPath(unittest.TestCase):
    def test_endpoints_reproduce_waypoints_exactly(self):
        for name, route in ROUTES.items():
            with self.subTest(route=name):
                path = build_flight_path(route, resolution=50)
                first, last = route[0], route[-1]
                self.assertEqual((path[0].longitude, path[0].latitude, path[0].altitude),
                                 (first.longitude, first.latitude, first.altitude))
                self.assertEqual((path[-1].longitude, path[-1].latitude, path[-1].altitude),
                                 (last.longitude, last.latitude, last.altitude))

    def test_point_count(self):
        path = build_flight_path(ROUTES["zigzag"], resolution=20)
        self.assertEqual(len(path), 3 * 20 + 1)

    def test_interior_waypoints_appear_verbatim(self):
        route = ROUTES["zigzag"]
        path = build_flight_path(route, resolution=10)
        for i, wp in enumerate(route):
            self.assertEqual(path[i * 10], PathPoint.from_waypoint(wp, wp.sequence_index))

    def test_straight_route_is_linear(self):
        path = build_flight_path(ROUTES["straight"], resolution=8)
        for j, point in enumerate(path):
            self.assertAlmostEqual(point.longitude, j / 8, places=12)
            self.assertAlmostEqual(point.latitude, 0.0, places=12)

    def test_altitude_never_overshoots(self):
        route = ROUTES["zigzag"]
        path = build_flight_path(route, resolution=25)
        for i in range(len(route) - 1):
            low = min(route[i].altitude, route[i + 1].altitude)
            high = max(route[i].altitude, route[i + 1].altitude)
            for point in path[i * 25:(i + 1) * 25 + 1]:
                self.assertGreaterEqual(point.altitude, low - 1e-12)
                self.assertLessEqual(point.altitude, high + 1e-12)

    def test_source_index_tracks_segment(self):
        path = build_flight_path(ROUTES["zigzag"], resolution=5)
        self.assertEqual([p.source_index for p in path[:6]], [1, 1, 1, 1, 1, 2])
        self.assertEqual(path[-1].source_index, 4)

    def test_single_waypoint_returns_itself(self):
        wp = ROUTES["straight"][0]
        self.assertEqual(build_flight_path([wp], resolution=10), [PathPoint.from_waypoint(wp, 1)])

class TestDegenerateSegments(unittest.TestCase):
    def test_repeated_waypoint_is_skipped(self):
        a, b = ROUTES["straight"]
        duplicate = Waypoint(longitude=a.longitude, latitude=a.latitude, altitude=0.5, sequence_index=2)
        with self.assertLogs('flyover.trajectory.utils.smoothing', level='WARNING'):
            kept = drop_degenerate_segments([a, duplicate, b])
        self.assertEqual(kept, [a, b])

    def test_builder_skips_zero_length_segment(self):
        a, b = ROUTES["straight"]
        builder = TrajectoryBuilder(FlightConfig(resolution=(10, 40)))
        trajectory = builder.build([a, a, b])
        self.assertEqual(len(trajectory.flight_path), 11)

    def test_all_identical_points_cannot_fly(self):
        a = ROUTES["straight"][0]
        builder = TrajectoryBuilder(FlightConfig(resolution=(10, 40)))
        self.assertFalse(builder.build([a, a]).has_flight)
        with self.assertRaises(InvalidInputError):
            builder.build_for_flight([a, a])

class TestOrbitPath(unittest.TestCase):
    def test_adaptive_radius(self):
        self.assertAlmostEqual(orbit_radius_km(1.0, 0.5, adaptive=True), 0.505)
        self.assertEqual(orbit_radius_km(1.0, 0.5, adaptive=False), 0.5)
        self.assertEqual(orbit_radius_km(0.0, 0.05, adaptive=True), 0.1)

    def test_radius_eases_out_from_start_point(self):
        center = PathPoint(longitude=1.0, latitude=0.0, altitude=0.0, source_index=2)
        orbit = build_orbit_path(center, start_bearing=90.0, radius_km=0.5, num_points=100,
                                 transition_fraction=0.25, start_point=center)
        self.assertEqual(len(orbit), 101)
        self.assertAlmostEqual(distance_km(center, orbit[0]), 0.0, places=9)
        self.assertAlmostEqual(distance_km(center, orbit[10]), 0.2, places=6)
        for point in orbit[25:]:
            self.assertAlmostEqual(distance_km(center, point), 0.5, places=6)

    def test_full_loop_without_transition(self):
        center = PathPoint(longitude=5.0, latitude=50.0, altitude=0.4, source_index=3)
        orbit = build_orbit_path(center, start_bearing=30.0, radius_km=0.5, num_points=120,
                                 adaptive_radius=False, transition_fraction=0.0)
        self.assertLess(angular_gap(bearing_deg(center, orbit[0]), 30.0), 1e-6)
        self.assertLess(angular_gap(bearing_deg(center, orbit[30]), 120.0), 1e-6)
        self.assertAlmostEqual(orbit[0].latitude, orbit[-1].latitude, places=9)
        self.assertAlmostEqual(orbit[0].longitude, orbit[-1].longitude, places=9)
        self.assertTrue(all(p.altitude == 0.4 for p in orbit))

    def test_altitude_envelope_returns_to_center(self):
        center = PathPoint(longitude=5.0, latitude=50.0, altitude=0.6, source_index=3)
        start = PathPoint(longitude=5.001, latitude=50.0, altitude=0.2, source_index=2)
        orbit = build_orbit_path(center, 90.0, 0.5, 100, start_point=start)
        self.assertAlmostEqual(orbit[0].altitude, 0.6)
        self.assertAlmostEqual(orbit[50].altitude, 1.0)
        self.assertAlmostEqual(orbit[-1].altitude, 0.6)

class TestTrajectoryBuilder(unittest.TestCase):
    def test_orbit_continues_flight_heading(self):
        builder = TrajectoryBuilder(FlightConfig(resolution=(200, 500)))
        for name, route in ROUTES.items():
            with self.subTest(route=name):
                trajectory = builder.build(route)
                flight, orbit = trajectory.flight_path, trajectory.orbit_path
                flight_heading = bearing_deg(flight[-2], flight[-1])
                orbit_heading = bearing_deg(orbit[0], orbit[1])
                self.assertLess(angular_gap(flight_heading, orbit_heading), 1.0)

    def test_orbit_starts_where_flight_ends(self):
        trajectory = TrajectoryBuilder(FlightConfig(resolution=(50, 100))).build(ROUTES["zigzag"])
        self.assertAlmostEqual(distance_km(trajectory.flight_path[-1], trajectory.orbit_path[0]), 0.0, places=9)
        self.assertEqual(len(trajectory.orbit_path), 101)

    def test_arrival_bearing_of_straight_route(self):
        trajectory = TrajectoryBuilder(FlightConfig(resolution=(10, 20))).build(ROUTES["straight"])
        self.assertAlmostEqual(arrival_bearing(trajectory.flight_path), 90.0, places=6)

    def test_single_waypoint_has_no_orbit(self):
        trajectory = TrajectoryBuilder().build(ROUTES["straight"][:1])
        self.assertEqual(len(trajectory.flight_path), 1)
        self.assertEqual(trajectory.orbit_path, ())
        self.assertFalse(trajectory.has_flight)

    def test_flight_requires_two_waypoints(self):
        with self.assertRaises(InvalidInputError):
            TrajectoryBuilder().build_for_flight(ROUTES["straight"][:1])

    def test_geojson_overlay(self):
        trajectory = TrajectoryBuilder(FlightConfig(resolution=(10, 20))).build(ROUTES["straight"])
        geojson = trajectory.to_geojson()
        self.assertEqual(geojson["type"], "FeatureCollection")
        names = [f["properties"]["name"] for f in geojson["features"]]
        self.assertEqual(names, ["flight-path", "orbit-path"])
        line = geojson["features"][0]["geometry"]
        self.assertEqual(line["type"], "LineString")
        self.assertEqual(line["coordinates"][0], [0.0, 0.0])
        self.assertEqual(line["coordinates"][-1], [1.0, 0.0])
        self.assertEqual(len(line["coordinates"]), 11)

if __name__ == '__main__':
    unittest.main()
