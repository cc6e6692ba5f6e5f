import math
import unittest

from impactsim.tsunami import (
    calculate_source_radius, classify_wave_height, estimate_tsunami, wave_height_at_distance
)


class TestTsunamiEstimator(unittest.TestCase):
    def test_source_radius_floor(self):
        self.assertEqual(calculate_source_radius(10.0), 50.0)
        self.assertAlmostEqual(calculate_source_radius(2000.0), 600.0)

    def test_estimate_matches_formulas(self):
        energy = 1e18
        crater_diameter = 2000.0
        results = estimate_tsunami(energy, crater_diameter)

        radius = 600.0
        expected_h0 = math.sqrt((2 * 2e-4 * energy) / (1000 * 9.81 * math.pi * radius ** 2))
        self.assertAlmostEqual(results.source_wave_height, expected_h0, places=9)
        self.assertAlmostEqual(results.wave_height_at_100km, expected_h0 * radius / 100000, places=12)
        self.assertAlmostEqual(results.potential_runup, 2.5 * results.wave_height_at_100km, places=12)
        self.assertAlmostEqual(results.affected_coastline_radius, expected_h0 * radius, places=6)

    def test_affected_radius_is_where_height_drops_to_one_meter(self):
        results = estimate_tsunami(5e19, 8000.0)
        radius = calculate_source_radius(8000.0)
        height = wave_height_at_distance(results.source_wave_height, radius,
                                         results.affected_coastline_radius)
        self.assertAlmostEqual(height, 1.0, places=9)

    def test_tiny_impact_uses_minimum_cavity(self):
        results = estimate_tsunami(1e10, 1.0)
        expected_h0 = math.sqrt((2 * 2e-4 * 1e10) / (1000 * 9.81 * math.pi * 50.0 ** 2))
        self.assertAlmostEqual(results.source_wave_height, expected_h0, places=12)

    def test_zero_energy(self):
        results = estimate_tsunami(0.0, 0.0)
        self.assertEqual(results.source_wave_height, 0.0)
        self.assertEqual(results.affected_coastline_radius, 0.0)

    def test_wave_height_at_distance(self):
        self.assertEqual(wave_height_at_distance(10.0, 500.0, 100.0), 10.0)
        self.assertAlmostEqual(wave_height_at_distance(10.0, 500.0, 1000.0), 5.0)

    def test_classify_wave_height(self):
        self.assertEqual(classify_wave_height(150.0), ">100m")
        self.assertEqual(classify_wave_height(10.0), ">10m")
        self.assertEqual(classify_wave_height(1.5), ">1m")
        self.assertEqual(classify_wave_height(0.5), "<1m")

    def test_to_dict_keys(self):
        data = estimate_tsunami(1e18, 2000.0).to_dict()
        self.assertEqual(
            set(data),
            {"sourceWaveHeight", "waveHeightAt100km", "potentialRunup", "affectedCoastlineRadius"},
        )


if __name__ == '__main__':
    unittest.main()
