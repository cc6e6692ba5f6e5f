import dataclasses
import unittest

from impactsim.parameters import (
    DEFAULT_ASTEROID, AsteroidParameters, AsteroidType, ImpactLocation,
    asteroid_from_small_body, density_for_type, density_from_spectral_type
)


class TestAsteroidParameters(unittest.TestCase):
    def test_type_default_densities(self):
        self.assertEqual(density_for_type(AsteroidType.IRON), 7800.0)
        self.assertEqual(density_for_type("stone"), 2600.0)
        self.assertEqual(density_for_type("comet"), 500.0)

    def test_unknown_type_rejected(self):
        with self.assertRaises(ValueError):
            density_for_type("plasma")

    def test_string_type_is_coerced(self):
        asteroid = AsteroidParameters("iron", 100.0, 20000.0, 45.0, 7800.0)
        self.assertIs(asteroid.type, AsteroidType.IRON)

    def test_from_type(self):
        asteroid = AsteroidParameters.from_type("comet", diameter=1000.0, speed=50000.0)
        self.assertEqual(asteroid.density, 500.0)
        self.assertEqual(asteroid.angle, 45.0)

    def test_with_type_switches_density(self):
        asteroid = DEFAULT_ASTEROID.with_type(AsteroidType.STONE)
        self.assertIs(asteroid.type, AsteroidType.STONE)
        self.assertEqual(asteroid.density, 2600.0)
        self.assertEqual(asteroid.diameter, DEFAULT_ASTEROID.diameter)
        # The original is untouched
        self.assertEqual(DEFAULT_ASTEROID.density, 7800.0)

    def test_default_asteroid(self):
        self.assertIs(DEFAULT_ASTEROID.type, AsteroidType.IRON)
        self.assertEqual(DEFAULT_ASTEROID.diameter, 457.0)
        self.assertEqual(DEFAULT_ASTEROID.speed, 17000.0)
        self.assertEqual(DEFAULT_ASTEROID.angle, 45.0)

    def test_parameters_are_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_ASTEROID.diameter = 1.0
        location = ImpactLocation(0.0, 0.0, 10.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            location.latitude = 5.0

    def test_to_dict(self):
        self.assertEqual(DEFAULT_ASTEROID.to_dict()["type"], "iron")
        location = ImpactLocation(1.0, 2.0, 3.0, "Somewhere")
        self.assertEqual(location.to_dict()["populationDensity"], 3.0)
        self.assertEqual(location.to_dict()["cityName"], "Somewhere")


class TestSpectralDensity(unittest.TestCase):
    def test_known_classes(self):
        self.assertEqual(density_from_spectral_type("S"), 3000.0)
        self.assertEqual(density_from_spectral_type("Sq"), 3000.0)
        self.assertEqual(density_from_spectral_type(" c "), 1400.0)
        self.assertEqual(density_from_spectral_type("D"), 1500.0)
        self.assertEqual(density_from_spectral_type("M"), 7800.0)
        self.assertEqual(density_from_spectral_type("Xe"), 3500.0)

    def test_fallback(self):
        self.assertEqual(density_from_spectral_type(None), 2600.0)
        self.assertEqual(density_from_spectral_type("   "), 2600.0)
        self.assertEqual(density_from_spectral_type("Z"), 2600.0)

    def test_asteroid_from_small_body(self):
        asteroid = asteroid_from_small_body(490.0, "B", speed=12700.0, angle=30.0)
        self.assertIs(asteroid.type, AsteroidType.STONE)
        self.assertEqual(asteroid.density, 1400.0)
        self.assertEqual(asteroid.diameter, 490.0)


if __name__ == '__main__':
    unittest.main()
