import unittest

from impactsim import geography
from impactsim.geography import (
    CITY_POPULATION_DENSITY, build_impact_location, get_population_density,
    is_likely_ocean, placeholder_city_name
)


class TestIsLikelyOcean(unittest.TestCase):
    def test_mid_pacific_is_ocean(self):
        self.assertTrue(is_likely_ocean(0.0, -150.0))

    def test_named_city_forces_land(self):
        self.assertFalse(is_likely_ocean(0.0, -150.0, "Atlantis"))
        self.assertFalse(is_likely_ocean(40.7128, -74.006, "New York"))

    def test_placeholder_name_uses_geometry(self):
        self.assertTrue(is_likely_ocean(0.0, -150.0, "Location (0.00°, -150.00°)"))
        self.assertFalse(is_likely_ocean(40.7128, -74.006, "Location (40.71°, -74.01°)"))

    def test_empty_city_name_uses_geometry(self):
        self.assertTrue(is_likely_ocean(0.0, -150.0, ""))

    def test_continents_are_land(self):
        cases = {
            "North America": (40.7128, -74.006),
            "South America": (-15.0, -55.0),
            "Africa": (10.0, 20.0),
            "Eurasia north": (55.0, 37.0),
            "Middle East / South Asia": (20.0, 80.0),
            "Australia": (-25.0, 135.0),
            "Antarctica": (-75.0, 0.0),
        }
        for name, (lat, lon) in cases.items():
            with self.subTest(region=name):
                self.assertFalse(is_likely_ocean(lat, lon))

    def test_open_oceans(self):
        for lat, lon in [(30.0, -40.0), (-20.0, 75.0), (-40.0, -120.0)]:
            with self.subTest(lat=lat, lon=lon):
                self.assertTrue(is_likely_ocean(lat, lon))

    def test_longitude_is_normalized(self):
        self.assertTrue(is_likely_ocean(0.0, 210.0))     # -150
        self.assertFalse(is_likely_ocean(-25.0, 495.0))  # 135, Australia

    def test_huge_longitude_returns(self):
        self.assertFalse(is_likely_ocean(-25.0, 360000135.0))  # 135, Australia
        self.assertIsInstance(is_likely_ocean(0.0, 1e20), bool)
        self.assertIsInstance(is_likely_ocean(0.0, -1e20), bool)

    def test_non_finite_longitude_is_ocean(self):
        self.assertTrue(is_likely_ocean(0.0, float("inf")))
        self.assertIsNone(geography.find_land_box(0.0, float("nan")))

    def test_box_edges_are_land(self):
        self.assertFalse(is_likely_ocean(83.0, -100.0))
        self.assertTrue(is_likely_ocean(83.5, -100.0))

    def test_find_land_box(self):
        self.assertEqual(geography.find_land_box(-25.0, 135.0), "Australia")
        self.assertIsNone(geography.find_land_box(0.0, -150.0))


class TestPopulationDensity(unittest.TestCase):
    def test_city_match(self):
        self.assertEqual(get_population_density(40.7128, -74.006), (10947, "New York"))
        self.assertEqual(get_population_density(51.6, -0.2).city_name, "London")
        self.assertEqual(get_population_density(-33.9, 151.2).density, 433)

    def test_outside_city_radius_falls_back(self):
        # One degree of latitude is 111 km, past the 100 km catchment
        estimate = get_population_density(41.7128, -74.006)
        self.assertIsNone(estimate.city_name)
        self.assertEqual(estimate.density, CITY_POPULATION_DENSITY["Default Suburban"])

    def test_latitude_bands(self):
        self.assertEqual(get_population_density(0.0, -150.0), (3000, None))
        self.assertEqual(get_population_density(-29.9, -150.0).density, 3000)
        self.assertEqual(get_population_density(30.0, -150.0).density, 1000)
        self.assertEqual(get_population_density(45.0, -150.0).density, 1000)
        self.assertEqual(get_population_density(60.0, -150.0).density, 50)
        self.assertEqual(get_population_density(-70.0, 0.0).density, 50)

    def test_density_table_is_read_only(self):
        with self.assertRaises(TypeError):
            CITY_POPULATION_DENSITY["Atlantis"] = 1
        self.assertEqual(len(CITY_POPULATION_DENSITY), 23)


class TestBuildImpactLocation(unittest.TestCase):
    def test_fills_density_and_city(self):
        location = build_impact_location(40.7128, -74.006)
        self.assertEqual(location.population_density, 10947)
        self.assertEqual(location.city_name, "New York")

    def test_explicit_values_win(self):
        location = build_impact_location(40.7128, -74.006, "Manhattan", 5)
        self.assertEqual(location.population_density, 5)
        self.assertEqual(location.city_name, "Manhattan")

    def test_open_ocean_has_no_city(self):
        location = build_impact_location(0.0, -150.0)
        self.assertIsNone(location.city_name)
        self.assertEqual(location.population_density, 3000)

    def test_placeholder_city_name(self):
        self.assertEqual(placeholder_city_name(1.5, -2.25), "Location (1.50°, -2.25°)")


if __name__ == '__main__':
    unittest.main()
