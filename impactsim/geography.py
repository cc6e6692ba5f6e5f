"""
Coarse geography lookups for impact sites.

Two questions are answered here without any map data:

- Is the impact point likely in the ocean? Answered with a handful of
  rectangular continent boxes.
- What population density should casualty estimates use? Answered by
  matching a short list of major cities, falling back to a latitude band.
"""

import logging
import math
from collections import namedtuple
from types import MappingProxyType

from shapely.geometry import Point, box

from impactsim.parameters import ImpactLocation
from impactsim.utils import KM_PER_DEGREE, normalize_longitude

logger = logging.getLogger(__name__)

# Unnamed map clicks are labelled "Location (lat°, lon°)"; such names are not
# evidence of a nearby city.
PLACEHOLDER_CITY_PREFIX = "Location ("

# Population density for major cities (people per km²)
CITY_POPULATION_DENSITY = MappingProxyType({
    "New York": 10947,
    "London": 5701,
    "Tokyo": 6224,
    "Paris": 20169,
    "Mumbai": 20482,
    "Delhi": 11297,
    "Beijing": 1311,
    "Los Angeles": 3198,
    "São Paulo": 7899,
    "Mexico City": 6000,
    "Cairo": 19376,
    "Lagos": 13211,
    "Manila": 15300,
    "Dhaka": 23234,
    "Jakarta": 15342,
    "Karachi": 24000,
    "Istanbul": 2987,
    "Moscow": 4875,
    "Buenos Aires": 14308,
    "Sydney": 433,
    "Default Rural": 50,
    "Default Urban": 3000,
    "Default Suburban": 1000,
})

City = namedtuple("City", ["name", "lat", "lon", "density"])

# Checked in order; the first city within CITY_MATCH_RADIUS_KM wins.
MAJOR_CITIES = tuple(
    City(name, lat, lon, CITY_POPULATION_DENSITY[name])
    for name, lat, lon in (
        ("New York", 40.7128, -74.006),
        ("London", 51.5074, -0.1278),
        ("Tokyo", 35.6762, 139.6503),
        ("Paris", 48.8566, 2.3522),
        ("Sydney", -33.8688, 151.2093),
    )
)
CITY_MATCH_RADIUS_KM = 100.0

# Very coarse continent boxes: (name, lat_min, lat_max, lon_min, lon_max)
CONTINENT_BOXES = (
    ("North America", 5, 83, -170, -52),          # includes part of Greenland
    ("South America", -56, 13, -82, -35),
    ("Africa", -35, 37, -20, 52),
    ("Eurasia north", 35, 72, -10, 180),          # Europe + Asia
    ("Middle East / South Asia", 5, 35, 25, 150),
    ("Equatorial overlap guard", -12, 5, 40, 120),
    ("Australia", -45, -10, 110, 155),
    ("Antarctica", -90, -60, -180, 180),
)

# shapely boxes are (minx, miny, maxx, maxy) = (lon_min, lat_min, lon_max, lat_max)
LAND_BOXES = tuple(
    (name, box(lon_min, lat_min, lon_max, lat_max))
    for name, lat_min, lat_max, lon_min, lon_max in CONTINENT_BOXES
)

PopulationEstimate = namedtuple("PopulationEstimate", ["density", "city_name"])


def is_placeholder_city_name(city_name):
    return city_name.startswith(PLACEHOLDER_CITY_PREFIX)


def placeholder_city_name(lat, lon):
    """Generic label for an unnamed map location."""
    return f"{PLACEHOLDER_CITY_PREFIX}{lat:.2f}°, {lon:.2f}°)"


def find_land_box(lat, lon):
    """
    Return the name of the first continent box containing the point, or None.

    Box edges count as land. Longitude is normalized into [-180, 180] first;
    a point with a NaN coordinate lies in no box.
    """
    lon = normalize_longitude(lon)
    if math.isnan(lon) or math.isnan(lat):
        return None
    point = Point(lon, lat)
    for name, land_box in LAND_BOXES:
        if land_box.covers(point):
            return name
    return None


def is_likely_ocean(lat, lon, city_name=None):
    """
    Decide whether an impact point is likely in the ocean.

    A real city name forces a land result regardless of coordinates. Otherwise
    the point is ocean when it lies outside every continent box.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees (any range, normalized internally)
        city_name: Optional place name from the caller

    Returns:
        bool: True for a likely ocean impact
    """
    if city_name and not is_placeholder_city_name(city_name):
        logger.debug("Treating %s as land (named city)", city_name)
        return False

    land_box = find_land_box(lat, lon)
    if land_box is not None:
        logger.debug("(%s, %s) falls inside land box %s", lat, lon, land_box)
        return False
    return True


def distance_to_city_km(lat, lon, city):
    """Equirectangular distance in km, scaled by the cosine of ``lat``."""
    d_lat = (lat - city.lat) * KM_PER_DEGREE
    d_lon = (lon - city.lon) * KM_PER_DEGREE * math.cos(math.radians(lat))
    return math.sqrt(d_lat ** 2 + d_lon ** 2)


def get_population_density(lat, lon):
    """
    Estimate population density around a point.

    Returns the density of the first listed major city within 100 km. With no
    city match, a latitude band decides: tropical/temperate regions
    (|lat| < 30) use the urban default, mid latitudes (|lat| < 60) the
    suburban default and polar regions the rural default.

    Returns:
        PopulationEstimate: (density in people/km², city name or None)
    """
    for city in MAJOR_CITIES:
        if distance_to_city_km(lat, lon, city) < CITY_MATCH_RADIUS_KM:
            return PopulationEstimate(city.density, city.name)

    abs_lat = abs(lat)
    if abs_lat < 30:
        return PopulationEstimate(CITY_POPULATION_DENSITY["Default Urban"], None)
    elif abs_lat < 60:
        return PopulationEstimate(CITY_POPULATION_DENSITY["Default Suburban"], None)
    else:
        return PopulationEstimate(CITY_POPULATION_DENSITY["Default Rural"], None)


def build_impact_location(lat, lon, city_name=None, population_density=None):
    """
    Assemble an ImpactLocation, filling gaps from the city lookup.

    A missing density comes from ``get_population_density``; a missing city
    name comes from the matched city, if any.
    """
    estimate = get_population_density(lat, lon)
    if population_density is None:
        population_density = estimate.density
    if city_name is None:
        city_name = estimate.city_name
    return ImpactLocation(
        latitude=lat,
        longitude=lon,
        population_density=population_density,
        city_name=city_name,
    )
