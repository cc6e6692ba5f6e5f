"""
Input records for the impact engine: asteroid parameters and impact location.

The asteroid ``type`` is a tag that selects a default density; it carries no
behavior of its own. Densities coming from a small-body catalog are derived
from the spectral class instead.
"""

import enum
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Optional


class AsteroidType(str, enum.Enum):
    IRON = "iron"
    STONE = "stone"
    COMET = "comet"


# Default bulk densities (kg/m³)
ASTEROID_TYPE_DENSITY = MappingProxyType({
    AsteroidType.IRON: 7800.0,
    AsteroidType.STONE: 2600.0,
    AsteroidType.COMET: 500.0,   # ice and rock
})

# Bulk density by leading letter of the SMASS/Tholen spectral class (kg/m³)
SPECTRAL_DENSITY = MappingProxyType({
    "S": 3000.0,
    "Q": 3000.0,
    "V": 3000.0,
    "C": 1400.0,
    "B": 1400.0,
    "G": 1400.0,
    "F": 1400.0,
    "D": 1500.0,
    "P": 1500.0,
    "M": 7800.0,
    "X": 3500.0,
})
FALLBACK_SPECTRAL_DENSITY = 2600.0


def density_for_type(asteroid_type):
    """Default density for an asteroid type given as enum member or string."""
    return ASTEROID_TYPE_DENSITY[AsteroidType(asteroid_type)]


def density_from_spectral_type(spectral_type):
    """
    Estimate bulk density from a spectral classification string.

    Only the first letter matters ("Sq" and "S" are both S-complex). Missing,
    blank or unknown classes fall back to 2600 kg/m³.
    """
    if not spectral_type or not spectral_type.strip():
        return FALLBACK_SPECTRAL_DENSITY
    key = spectral_type.strip().upper()[0]
    return SPECTRAL_DENSITY.get(key, FALLBACK_SPECTRAL_DENSITY)


@dataclass(frozen=True)
class AsteroidParameters:
    """
    Physical parameters of the impactor.

    Attributes:
        type: Composition tag (iron, stone, comet)
        diameter: Diameter in meters
        speed: Impact velocity in m/s
        angle: Impact angle from horizontal in degrees; reported but not used
            to attenuate energy
        density: Bulk density in kg/m³
    """
    type: AsteroidType
    diameter: float
    speed: float
    angle: float
    density: float

    def __post_init__(self):
        object.__setattr__(self, "type", AsteroidType(self.type))

    @classmethod
    def from_type(cls, asteroid_type, diameter, speed, angle=45.0):
        """Build parameters using the default density of ``asteroid_type``."""
        return cls(
            type=AsteroidType(asteroid_type),
            diameter=diameter,
            speed=speed,
            angle=angle,
            density=density_for_type(asteroid_type),
        )

    def with_type(self, asteroid_type):
        """Copy with a new type; density follows the new type's default."""
        return replace(
            self,
            type=AsteroidType(asteroid_type),
            density=density_for_type(asteroid_type),
        )

    def to_dict(self):
        return {
            "type": self.type.value,
            "diameter": self.diameter,
            "speed": self.speed,
            "angle": self.angle,
            "density": self.density,
        }


@dataclass(frozen=True)
class ImpactLocation:
    latitude: float
    longitude: float
    population_density: float
    city_name: Optional[str] = None

    def to_dict(self):
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "populationDensity": self.population_density,
            "cityName": self.city_name,
        }


# 1500 ft at 38,000 mph
DEFAULT_ASTEROID = AsteroidParameters(
    type=AsteroidType.IRON,
    diameter=457.0,
    speed=17000.0,
    angle=45.0,
    density=ASTEROID_TYPE_DENSITY[AsteroidType.IRON],
)


def asteroid_from_small_body(diameter_m, spectral_type, speed, angle):
    """
    Seed impactor parameters from a small-body catalog row.

    Catalog bodies are tagged as stone; the density comes from the spectral
    class rather than the stone default.
    """
    return AsteroidParameters(
        type=AsteroidType.STONE,
        diameter=diameter_m,
        speed=speed,
        angle=angle,
        density=density_from_spectral_type(spectral_type),
    )
