"""
Impact Effects Simulator - Results Processing Module

This module orchestrates the impact simulation pipeline and formats results
for presentation. It coordinates the physics formulas, the earthquake
comparison, the ocean check and the tsunami estimate to produce one
immutable results record per call.

Key Functions:
- run_simulation(): Runs the pipeline and returns a SimulationResults record
- estimate_casualties(): Applies population density and mortality rates to damage zones
- run_simulation_full(): Runs the pipeline and also renders a human-readable report
- format_distance(), format_tnt(), format_speed(), format_wind(): Display helpers

The pipeline is pure: identical inputs always give identical outputs, nothing
is cached between calls and degenerate numeric inputs come back as NaN or
infinite values in the record instead of raising.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from impactsim.earthquakes import EarthquakeComparison, compare_magnitude
from impactsim.geography import is_likely_ocean
from impactsim.models import ImpactPhysics
from impactsim.thresholds import (
    OVERPRESSURE_LIGHT_KPA, OVERPRESSURE_MODERATE_KPA, OVERPRESSURE_SEVERE_KPA,
    SEVERITY_LIGHT, SEVERITY_MODERATE, SEVERITY_SEVERE, SEVERITY_TOTAL,
    TNT_YIELD_UNITS, get_mortality_rate
)
from impactsim.tsunami import TsunamiResults, classify_wave_height, estimate_tsunami
from impactsim.utils import convert_energy_j_to_mt, m_to_km

logger = logging.getLogger(__name__)

ZONE_CRATER = "crater"
ZONE_FIREBALL = "fireball"
ZONE_RADIATION = "radiation"
ZONE_SHOCKWAVE = "shockwave"
ZONE_SEISMIC = "seismic"


@dataclass(frozen=True)
class DamageZone:
    type: str
    radius: float     # meters
    severity: str
    description: str
    casualties: int = 0

    def to_dict(self):
        return {
            "type": self.type,
            "radius": self.radius,
            "severity": self.severity,
            "casualties": self.casualties,
            "description": self.description,
        }


@dataclass(frozen=True)
class SimulationResults:
    impact_energy: float           # J
    mass_kg: float
    crater_diameter: float         # m
    crater_depth: float            # m
    fireball_radius: float         # m
    thermal_radius: float          # m
    shockwave_radius: float        # m, same value as shockwave_radius_20kpa
    shockwave_radius_50kpa: float  # m, severe damage
    shockwave_radius_20kpa: float  # m, moderate damage
    shockwave_radius_5kpa: float   # m, light damage
    peak_wind_speed_50kpa: float   # m/s
    seismic_magnitude: float
    tnt_equivalent: float          # tons of TNT
    damage_zones: Tuple[DamageZone, ...]
    earthquake_comparison: EarthquakeComparison
    impact_speed: float            # m/s
    impact_angle: float            # degrees
    tsunami: Optional[TsunamiResults] = None

    def to_dict(self):
        return {
            "impactEnergy": self.impact_energy,
            "massKg": self.mass_kg,
            "craterDiameter": self.crater_diameter,
            "craterDepth": self.crater_depth,
            "fireballRadius": self.fireball_radius,
            "thermalRadius": self.thermal_radius,
            "shockwaveRadius": self.shockwave_radius,
            "shockwaveRadius50kPa": self.shockwave_radius_50kpa,
            "shockwaveRadius20kPa": self.shockwave_radius_20kpa,
            "shockwaveRadius5kPa": self.shockwave_radius_5kpa,
            "peakWindSpeed50kPa": self.peak_wind_speed_50kpa,
            "seismicMagnitude": self.seismic_magnitude,
            "tntEquivalent": self.tnt_equivalent,
            "damageZones": [zone.to_dict() for zone in self.damage_zones],
            "earthquakeComparison": self.earthquake_comparison.to_dict(),
            "impactSpeed": self.impact_speed,
            "impactAngle": self.impact_angle,
            "tsunami": self.tsunami.to_dict() if self.tsunami else None,
        }


def round_half_up(value):
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def calculate_zone_casualties(population_density, radius_m, severity):
    """
    Casualties inside a circular zone.

    casualties = round(density × π × (radius_km)² × mortality_rate). A
    non-finite radius gives zero so the count stays a non-negative integer.
    """
    area_km2 = math.pi * m_to_km(radius_m) ** 2
    casualties = population_density * area_km2 * get_mortality_rate(severity)
    if not math.isfinite(casualties) or casualties <= 0:
        return 0
    return round_half_up(casualties)


def estimate_casualties(population_density, damage_zones):
    """Return copies of ``damage_zones`` with casualties filled in."""
    return tuple(
        replace(zone, casualties=calculate_zone_casualties(population_density, zone.radius, zone.severity))
        for zone in damage_zones
    )


def build_damage_zones(crater_diameter, fireball_radius, thermal_radius,
                       shockwave_radius, seismic_radius):
    """The five fixed damage zones, innermost effect first."""
    return (
        DamageZone(ZONE_CRATER, crater_diameter / 2.0, SEVERITY_TOTAL,
                   "Complete annihilation - vaporized"),
        DamageZone(ZONE_FIREBALL, fireball_radius, SEVERITY_TOTAL,
                   "Fireball - everything incinerated"),
        DamageZone(ZONE_RADIATION, thermal_radius, SEVERITY_SEVERE,
                   "Thermal burns / intense radiant heat"),
        DamageZone(ZONE_SHOCKWAVE, shockwave_radius, SEVERITY_MODERATE,
                   "Shockwave overpressure structural damage (~20 kPa)"),
        DamageZone(ZONE_SEISMIC, seismic_radius, SEVERITY_LIGHT,
                   "Seismic damage - windows broken, minor structural damage"),
    )


def run_simulation(asteroid, location):
    """
    Run the impact effects pipeline for one asteroid and impact location.

    Steps:
    1. Mass and kinetic energy
    2. Fireball, thermal and overpressure radii
    3. Crater diameter and depth
    4. Seismic magnitude and historical earthquake comparison
    5. Ocean check and, for ocean impacts only, tsunami estimate
    6. TNT equivalent, peak wind speed and damage zone casualties

    Args:
        asteroid: AsteroidParameters
        location: ImpactLocation

    Returns:
        SimulationResults: the complete, immutable result record. ``tsunami``
        is set if and only if the location is classified as ocean.
    """
    logger.debug("Running simulation: asteroid=%s location=%s", asteroid, location)
    physics = ImpactPhysics(asteroid)

    mass, energy, _ = physics.calculate_impact_energy()

    fireball_radius = physics.calculate_fireball_radius(energy)
    thermal_radius = physics.calculate_thermal_radius(fireball_radius)

    shockwave_radius_20kpa = physics.radius_at_overpressure(energy, OVERPRESSURE_MODERATE_KPA)
    shockwave_radius_50kpa = physics.radius_at_overpressure(energy, OVERPRESSURE_SEVERE_KPA)
    shockwave_radius_5kpa = physics.radius_at_overpressure(energy, OVERPRESSURE_LIGHT_KPA)
    peak_wind_speed_50kpa = physics.wind_speed_at_overpressure(OVERPRESSURE_SEVERE_KPA)

    crater_diameter = physics.calculate_crater_diameter()
    crater_depth = physics.calculate_crater_depth(crater_diameter)

    seismic_magnitude = physics.calculate_seismic_magnitude(energy)
    earthquake_comparison = compare_magnitude(seismic_magnitude)

    tsunami = None
    if is_likely_ocean(location.latitude, location.longitude, location.city_name):
        logger.debug("Ocean impact at (%s, %s); estimating tsunami",
                     location.latitude, location.longitude)
        tsunami = estimate_tsunami(energy, crater_diameter)

    tnt_equivalent = physics.calculate_tnt_equivalent(energy)

    damage_zones = estimate_casualties(
        location.population_density,
        build_damage_zones(
            crater_diameter,
            fireball_radius,
            thermal_radius,
            shockwave_radius_20kpa,
            physics.calculate_seismic_zone_radius(shockwave_radius_20kpa),
        ),
    )

    return SimulationResults(
        impact_energy=energy,
        mass_kg=mass,
        crater_diameter=crater_diameter,
        crater_depth=crater_depth,
        fireball_radius=fireball_radius,
        thermal_radius=thermal_radius,
        shockwave_radius=shockwave_radius_20kpa,
        shockwave_radius_50kpa=shockwave_radius_50kpa,
        shockwave_radius_20kpa=shockwave_radius_20kpa,
        shockwave_radius_5kpa=shockwave_radius_5kpa,
        peak_wind_speed_50kpa=peak_wind_speed_50kpa,
        seismic_magnitude=seismic_magnitude,
        tnt_equivalent=tnt_equivalent,
        damage_zones=damage_zones,
        earthquake_comparison=earthquake_comparison,
        impact_speed=asteroid.speed,
        impact_angle=asteroid.angle,
        tsunami=tsunami,
    )


# Display helpers
def format_distance(meters):
    if meters < 1000:
        return f"{meters:.0f} m"
    return f"{m_to_km(meters):.1f} km"


def format_speed(mps):
    return f"{m_to_km(mps):.2f} km/s"


def format_wind(mps):
    return f"{mps * 3.6:.0f} km/h"


def format_tnt(tons):
    for unit, scale in TNT_YIELD_UNITS:
        if tons >= scale:
            return f"{tons / scale:.2f} {unit}"
    return f"{tons:.0f} t"


def format_results_text(asteroid, location, results):
    """Render a SimulationResults record as a plain-text report."""
    place = location.city_name or f"{location.latitude:.4f}°, {location.longitude:.4f}°"
    text = "Impact Scenario:\n"
    text += f"Asteroid type: {asteroid.type.value.capitalize()}\n"
    text += f"Diameter: {format_distance(asteroid.diameter)}, density: {asteroid.density:.0f} kg/m³\n"
    text += f"Impact speed: {format_speed(results.impact_speed)}, angle: {results.impact_angle:.0f}°\n"
    text += f"Location: {place} ({location.population_density:,.0f} people/km²)\n\n"

    text += "Energy:\n"
    text += f"Mass: {results.mass_kg:.2e} kg\n"
    text += f"Kinetic energy: {results.impact_energy:.2e} J ({convert_energy_j_to_mt(results.impact_energy):.2f} MT)\n"
    text += f"TNT equivalent: {format_tnt(results.tnt_equivalent)}\n\n"

    text += "Crater:\n"
    text += f"Crater diameter: {format_distance(results.crater_diameter)}\n"
    text += f"Crater depth: {format_distance(results.crater_depth)}\n\n"

    text += "Fireball & Blast:\n"
    text += f"Fireball radius: {format_distance(results.fireball_radius)}\n"
    text += f"Thermal radius: {format_distance(results.thermal_radius)}\n"
    text += f"Severe damage radius (50 kPa): {format_distance(results.shockwave_radius_50kpa)}\n"
    text += f"Moderate damage radius (20 kPa): {format_distance(results.shockwave_radius_20kpa)}\n"
    text += f"Light damage radius (5 kPa): {format_distance(results.shockwave_radius_5kpa)}\n"
    text += f"Peak wind at 50 kPa: {format_wind(results.peak_wind_speed_50kpa)}\n\n"

    comparison = results.earthquake_comparison
    text += "Seismic Effects:\n"
    text += f"Seismic magnitude: {results.seismic_magnitude:.1f} ({comparison.classification})\n"
    if comparison.relative_text:
        text += f"{comparison.relative_text}\n"
    text += "\n"

    if results.tsunami:
        tsunami = results.tsunami
        text += "Tsunami (ocean impact):\n"
        text += f"Source wave height: {tsunami.source_wave_height:.2f} m\n"
        text += f"Wave height at 100 km: {tsunami.wave_height_at_100km:.2f} m ({classify_wave_height(tsunami.wave_height_at_100km)})\n"
        text += f"Potential run-up: {tsunami.potential_runup:.2f} m\n"
        text += f"Coastline affected within: {format_distance(tsunami.affected_coastline_radius)}\n\n"
    else:
        text += "Land impact: no tsunami generated.\n\n"

    text += "Damage Zones:\n"
    total_casualties = 0
    for zone in results.damage_zones:
        text += f"{zone.type.capitalize()} ({zone.severity}): {format_distance(zone.radius)} - {zone.casualties:,} casualties\n"
        total_casualties += zone.casualties
    text += f"Estimated casualties (all zones): {total_casualties:,}\n"
    return text


def run_simulation_full(asteroid, location):
    """
    Execute the simulation and package it for presentation.

    Returns:
        tuple: (formatted_text_results, structured_data_results)
            - formatted_text_results: Human-readable simulation report
            - structured_data_results: camelCase dictionary for APIs/visualization,
              with the inputs echoed under "input_parameters"
    """
    results = run_simulation(asteroid, location)
    results_data = results.to_dict()
    results_data["input_parameters"] = {
        "asteroid": asteroid.to_dict(),
        "location": location.to_dict(),
    }
    return format_results_text(asteroid, location, results), results_data
