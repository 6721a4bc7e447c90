# flyover/tests/test_config.py

import unittest

from flyover.config import FlightConfig
from flyover.exceptions import ConfigurationError, FlyoverError

class TestFlightConfig(unittest.TestCase):
    def test_defaults(self):
        config = FlightConfig()
        self.assertEqual(config.flight_speed_km_per_second, 0.185)
        self.assertEqual(config.orbit_speed_factor, 0.25)
        self.assertEqual(config.align_duration_ms, 8000.0)
        self.assertEqual(config.flight_resolution, 500)
        self.assertEqual(config.orbit_resolution, 500)
        self.assertEqual(config.rotation_smoothness, 0.1)

    def test_from_editor_options(self):
        config = FlightConfig.from_dict({
            "flightSpeedKmPerSecond": 0.3,
            "orbitRadiusKm": 1.2,
            "resolution": [100, 200],
            "pitch": 45,
        })
        self.assertEqual(config.flight_speed_km_per_second, 0.3)
        self.assertEqual(config.orbit_radius_km, 1.2)
        self.assertEqual(config.resolution, (100, 200))
        self.assertEqual(config.pitch, 45)

    def test_unknown_option(self):
        with self.assertRaises(ConfigurationError) as ctx:
            FlightConfig.from_dict({"warpSpeed": 9})
        self.assertEqual(ctx.exception.config_name, "warpSpeed")
        self.assertIn("warpSpeed", str(ctx.exception))

    def test_invalid_values(self):
        cases = {
            "flight_speed_km_per_second": 0,
            "orbit_speed_factor": -1,
            "align_duration_ms": -5,
            "relevel_duration_ms": -1,
            "orbit_radius_km": 0,
            "resolution": (0, 10),
            "rotation_smoothness": 0,
            "orbit_transition_fraction": 1.5,
        }
        for name, value in cases.items():
            with self.subTest(field=name):
                with self.assertRaises(ConfigurationError) as ctx:
                    FlightConfig(**{name: value})
                self.assertEqual(ctx.exception.config_name, name)
                self.assertIsInstance(ctx.exception, FlyoverError)

    def test_resolution_must_be_whole_numbers(self):
        for resolution in [(10, 20.0), (10.0, 20), (True, 20), (10, "20")]:
            with self.subTest(resolution=resolution):
                with self.assertRaises(ConfigurationError) as ctx:
                    FlightConfig(resolution=resolution)
                self.assertEqual(ctx.exception.config_name, "resolution")

    def test_json_float_resolution_rejected(self):
        with self.assertRaises(ConfigurationError):
            FlightConfig.from_dict({"resolution": [10, 20.0]})

    def test_overrides_are_validated(self):
        config = FlightConfig()
        faster = config.with_overrides(flight_speed_km_per_second=0.5)
        self.assertEqual(faster.flight_speed_km_per_second, 0.5)
        self.assertEqual(config.flight_speed_km_per_second, 0.185)
        with self.assertRaises(ConfigurationError):
            config.with_overrides(resolution=(10,))

if __name__ == '__main__':
    unittest.main()
