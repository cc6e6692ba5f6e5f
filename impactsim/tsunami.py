"""
Simplified tsunami estimates for ocean impacts.

The scaling is deliberately crude and gives order-of-magnitude numbers only:

1. A fixed fraction of the impact kinetic energy couples into water
   displacement.
2. The transient water cavity radius is ~0.6 of the crater radius, floored
   at 50 m.
3. The source wave height follows from the potential energy of a raised
   disc of water, PE ~ rho * g * pi * R^2 * H^2 / 2.
4. Deep-water height decays as 1/r away from the source.
5. Coastal run-up is a flat multiple of the deep-water height.
"""

import math
from dataclasses import dataclass

from impactsim.thresholds import get_wave_height_category
from impactsim.utils import (
    CAVITY_RADIUS_FACTOR, GRAVITY, MIN_CAVITY_RADIUS, RUNUP_FACTOR,
    WATER_COUPLING, WATER_DENSITY, km_to_m, real_sqrt
)

REFERENCE_DISTANCE_M = km_to_m(100)

# Deep-water height (m) that bounds the affected coastline radius
AFFECTED_WAVE_HEIGHT_M = 1.0


@dataclass(frozen=True)
class TsunamiResults:
    source_wave_height: float         # m, initial amplitude near impact
    wave_height_at_100km: float       # m, propagated deep-water height
    potential_runup: float            # m, rough coastal run-up
    affected_coastline_radius: float  # m, radius where deep-water height > 1 m

    def to_dict(self):
        return {
            "sourceWaveHeight": self.source_wave_height,
            "waveHeightAt100km": self.wave_height_at_100km,
            "potentialRunup": self.potential_runup,
            "affectedCoastlineRadius": self.affected_coastline_radius,
        }


def calculate_source_radius(crater_diameter):
    """Water cavity radius (m) for a crater diameter, never below 50 m."""
    return max(CAVITY_RADIUS_FACTOR * (crater_diameter / 2.0), MIN_CAVITY_RADIUS)


def wave_height_at_distance(source_wave_height, source_radius, distance_m):
    """
    Deep-water wave height at a distance from the impact.

    Inside the source cavity the source height applies; beyond it the height
    falls off as source_radius / distance.
    """
    if distance_m <= source_radius:
        return source_wave_height
    return source_wave_height * (source_radius / distance_m)


def estimate_tsunami(impact_energy, crater_diameter):
    """
    Estimate tsunami wave metrics from impact energy and crater size.

    Args:
        impact_energy: Impact kinetic energy in Joules
        crater_diameter: Crater diameter in meters

    Returns:
        TsunamiResults: source height, height at 100 km, run-up and the radius
        at which the deep-water height drops to 1 m
    """
    source_radius = calculate_source_radius(crater_diameter)
    wave_energy = WATER_COUPLING * impact_energy
    source_wave_height = real_sqrt(
        (2 * wave_energy) / (WATER_DENSITY * GRAVITY * math.pi * source_radius * source_radius)
    )
    # Fixed reference distance: 1/r decay regardless of the cavity size
    wave_height_at_100km = source_wave_height * (source_radius / REFERENCE_DISTANCE_M)
    potential_runup = RUNUP_FACTOR * wave_height_at_100km
    # H(r) = H0 * R / r = 1 m  =>  r = H0 * R / 1 m
    affected_coastline_radius = (source_wave_height * source_radius) / AFFECTED_WAVE_HEIGHT_M

    return TsunamiResults(
        source_wave_height=source_wave_height,
        wave_height_at_100km=wave_height_at_100km,
        potential_runup=potential_runup,
        affected_coastline_radius=affected_coastline_radius,
    )


def classify_wave_height(height_m):
    return get_wave_height_category(height_m)
