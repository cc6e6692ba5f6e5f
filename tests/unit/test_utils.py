import math
import unittest

from impactsim import utils


class TestUtils(unittest.TestCase):
    def test_km_to_m(self):
        self.assertEqual(utils.km_to_m(12.5), 12500.0)
        self.assertEqual(utils.m_to_km(12500.0), 12.5)

    def test_convert_energy_j_to_mt(self):
        one_mt = 4.184e15
        self.assertAlmostEqual(utils.convert_energy_j_to_mt(one_mt), 1.0, places=9)

    def test_convert_energy_to_tons_and_kilotons(self):
        self.assertAlmostEqual(utils.convert_energy_j_to_tons(4.184e12), 1000.0, places=9)
        self.assertAlmostEqual(utils.convert_energy_j_to_kt(4.184e12), 1.0, places=9)

    def test_kpa_to_pa(self):
        self.assertEqual(utils.kpa_to_pa(20), 20000.0)

    def test_normalize_longitude(self):
        self.assertEqual(utils.normalize_longitude(190), -170)
        self.assertEqual(utils.normalize_longitude(-190), 170)
        self.assertEqual(utils.normalize_longitude(540), 180)
        self.assertEqual(utils.normalize_longitude(180), 180)
        self.assertEqual(utils.normalize_longitude(-180), -180)
        self.assertEqual(utils.normalize_longitude(-74.006), -74.006)
        self.assertEqual(utils.normalize_longitude(900), 180)
        self.assertEqual(utils.normalize_longitude(-900), -180)

    def test_normalize_huge_longitude(self):
        # 360000135 = 135 + 360 * 1e6
        self.assertEqual(utils.normalize_longitude(360000135.0), 135.0)
        for lon in (1e12, -1e12, 1e20, -1e20, 1.7e308):
            with self.subTest(lon=lon):
                normalized = utils.normalize_longitude(lon)
                self.assertGreaterEqual(normalized, -180)
                self.assertLessEqual(normalized, 180)

    def test_normalize_non_finite_longitude(self):
        self.assertTrue(math.isnan(utils.normalize_longitude(math.inf)))
        self.assertTrue(math.isnan(utils.normalize_longitude(math.nan)))

    def test_real_pow(self):
        self.assertAlmostEqual(utils.real_pow(8.0, 1 / 3), 2.0, places=12)
        self.assertTrue(math.isnan(utils.real_pow(-8.0, 1 / 3)))
        self.assertEqual(utils.real_pow(-2.0, 3), -8.0)
        self.assertEqual(utils.real_pow(0.0, -0.22), math.inf)
        self.assertTrue(math.isnan(utils.real_pow(math.nan, 2)))

    def test_real_sqrt(self):
        self.assertEqual(utils.real_sqrt(16.0), 4.0)
        self.assertTrue(math.isnan(utils.real_sqrt(-1.0)))

    def test_real_log10(self):
        self.assertEqual(utils.real_log10(1000.0), 3.0)
        self.assertEqual(utils.real_log10(0.0), -math.inf)
        self.assertTrue(math.isnan(utils.real_log10(-5.0)))


if __name__ == '__main__':
    unittest.main()
