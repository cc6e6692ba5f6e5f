"""
Impact Effects Simulator - Core Physics Models

This module contains the ImpactPhysics class with the closed-form formulas
that turn an impactor's size, speed and density into energy, crater, blast,
thermal and seismic estimates. All results are order-of-magnitude
educational estimates.

The impact angle is carried on the parameters but no formula here projects
velocity onto it: energy, crater size and blast radii are angle-independent.
"""

import math

from impactsim.utils import (
    AIR_DENSITY, CRATER_DEPTH_RATIO, CRATER_SCALING_K, FIREBALL_K, GRAVITY,
    SEISMIC_EFFICIENCY, SEISMIC_ZONE_FACTOR, TARGET_DENSITY, THERMAL_RADIUS_FACTOR,
    convert_energy_j_to_kt, convert_energy_j_to_mt, convert_energy_j_to_tons,
    kpa_to_pa, real_log10, real_pow, real_sqrt
)


class ImpactPhysics:
    """
    Impact effect formulas for a single impactor.
    """

    def __init__(self, asteroid):
        self.diameter = asteroid.diameter
        self.speed = asteroid.speed
        self.density = asteroid.density

    # Mass and Energy Calculations
    # Products instead of ``**`` so huge inputs overflow to inf rather than raising
    def calculate_mass(self):
        """Mass of a uniform sphere: m = (4/3)·π·(D/2)³·ρ."""
        radius = self.diameter / 2.0
        volume = (4.0 / 3.0) * math.pi * (radius * radius * radius)
        return volume * self.density

    def calculate_kinetic_energy(self, mass):
        """Kinetic energy at impact: E = ½·m·v²."""
        return 0.5 * mass * (self.speed * self.speed)

    def calculate_impact_energy(self):
        """Return (mass_kg, energy_j, energy_mt) for this impactor."""
        mass = self.calculate_mass()
        energy = self.calculate_kinetic_energy(mass)
        return mass, energy, convert_energy_j_to_mt(energy)

    @staticmethod
    def calculate_tnt_equivalent(impact_energy):
        """TNT equivalent in tons (1 ton = 4.184e9 J)."""
        return convert_energy_j_to_tons(impact_energy)

    @staticmethod
    def calculate_tnt_kilotons(impact_energy):
        return convert_energy_j_to_kt(impact_energy)

    # Fireball and Thermal Calculations
    @staticmethod
    def calculate_fireball_radius(impact_energy):
        """Fireball radius R_f = k·E^(1/3), with 1 Mt giving about 1.5 km."""
        return FIREBALL_K * real_pow(impact_energy, 1 / 3)

    @staticmethod
    def calculate_thermal_radius(fireball_radius):
        return THERMAL_RADIUS_FACTOR * fireball_radius

    # Blast Calculations
    @staticmethod
    def radius_at_overpressure(impact_energy, overpressure_kpa):
        """
        Distance at which the blast wave falls to a given overpressure.

        Inverts ΔP = 1.8·√ρ_air·E^(1/3) / R^(3/2) for R:

            R = (1.8·√ρ_air·E^(1/3) / ΔP)^(2/3)

        Args:
            impact_energy: Impact energy in Joules
            overpressure_kpa: Target overpressure in kPa

        Returns:
            float: Radius in meters
        """
        delta_p = kpa_to_pa(overpressure_kpa)
        term = (1.8 * math.sqrt(AIR_DENSITY) * real_pow(impact_energy, 1 / 3)) / delta_p
        return real_pow(term, 2 / 3)

    @staticmethod
    def wind_speed_at_overpressure(overpressure_kpa):
        """Peak wind speed behind the shock front: v = √(2·ΔP/ρ_air), in m/s."""
        delta_p = kpa_to_pa(overpressure_kpa)
        return real_sqrt((2 * delta_p) / AIR_DENSITY)

    # Crater Calculations
    def calculate_crater_diameter(self, target_density=TARGET_DENSITY, g=GRAVITY):
        """
        Crater diameter from projectile scaling.

        Dc = k·(ρ_i/ρ_t)^(1/3)·D^0.78·v^0.44·g^-0.22 with k = 1.6 and the target
        defaulting to continental crust.
        """
        density_ratio = real_pow(self.density / target_density, 1 / 3)
        return (
            CRATER_SCALING_K
            * density_ratio
            * real_pow(self.diameter, 0.78)
            * real_pow(self.speed, 0.44)
            * real_pow(g, -0.22)
        )

    @staticmethod
    def calculate_crater_depth(crater_diameter):
        return CRATER_DEPTH_RATIO * crater_diameter

    # Seismic Calculations
    @staticmethod
    def calculate_seismic_magnitude(impact_energy, efficiency=SEISMIC_EFFICIENCY):
        """
        Seismic magnitude generated by the impact.

        M = (2/3)·log10(η·E) - 3.2 with coupling efficiency η (1e-4 to 1e-3).
        Zero energy gives -inf and negative energy gives NaN.
        """
        return (2 / 3) * real_log10(efficiency * impact_energy) - 3.2

    @staticmethod
    def calculate_seismic_zone_radius(shockwave_radius):
        """Seismic damage radius, a heuristic multiple of the 20 kPa radius."""
        return SEISMIC_ZONE_FACTOR * shockwave_radius
