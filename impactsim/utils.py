"""
Impact Effects Simulator - Utility Functions and Constants Module

This module provides the physical constants and helper functions used throughout
the impact effects engine. It includes:

1. Physical and atmospheric constants for impact calculations
2. Unit conversion utilities (distance, energy)
3. Longitude normalization for geographic lookups
4. Real-valued power, square root and logarithm helpers

The helpers in section 4 propagate NaN (and -inf for log10(0)) instead of
raising, so that degenerate inputs flow through the engine as data rather
than as exceptions.
"""

import math

# =============================================================================
# PHYSICAL AND ATMOSPHERIC CONSTANTS
# =============================================================================

# Earth's gravitational acceleration (m/s²) - used for crater scaling and wave energy
GRAVITY = 9.81

# Sea level air density (kg/m³) - reference density for overpressure and wind
AIR_DENSITY = 1.225

# Target rock density (kg/m³) - continental crust for crater scaling
TARGET_DENSITY = 2600.0

# Water density (kg/m³) - used for tsunami source wave estimation
WATER_DENSITY = 1000.0

# Crater scaling coefficient (dimensionless) - empirical mid-range value
CRATER_SCALING_K = 1.6

# Final crater depth as a fraction of crater diameter
CRATER_DEPTH_RATIO = 0.2

# Fireball coefficient (m / J^(1/3)) - calibrated so 1 Mt TNT gives ~1.5 km
FIREBALL_K = 0.00925

# Thermal radius as a multiple of fireball radius
THERMAL_RADIUS_FACTOR = 1.2

# Seismic coupling efficiency - mid-range of the 1e-4 to 1e-3 band
SEISMIC_EFFICIENCY = 5e-4

# Seismic damage zone radius as a multiple of the 20 kPa shockwave radius
SEISMIC_ZONE_FACTOR = 2.0

# Fraction of impact kinetic energy coupled into water wave potential energy
WATER_COUPLING = 2e-4

# Minimum water cavity radius (m) used for tsunami source estimates
MIN_CAVITY_RADIUS = 50.0

# Water cavity radius as a fraction of crater radius
CAVITY_RADIUS_FACTOR = 0.6

# Coastal run-up amplification over deep-water wave height
RUNUP_FACTOR = 2.5

# Kilometers per degree of latitude (flat-Earth approximation)
KM_PER_DEGREE = 111.0

# =============================================================================
# ENERGY CONVERSION CONSTANTS
# =============================================================================

JOULES_PER_TON_TNT = 4.184e9
JOULES_PER_KILOTON_TNT = 4.184e12
JOULES_PER_MEGATON_TNT = 4.184e15

# =============================================================================
# UNIT CONVERSION UTILITIES
# =============================================================================

def km_to_m(km):
    """
    Convert kilometers to meters.

    Parameters
    ----------
    km : float
        Distance in kilometers

    Returns
    -------
    float
        Distance in meters
    """
    return km * 1000.0

def m_to_km(m):
    """
    Convert meters to kilometers.

    Parameters
    ----------
    m : float
        Distance in meters

    Returns
    -------
    float
        Distance in kilometers
    """
    return m / 1000.0

def convert_energy_j_to_tons(energy_j):
    """Convert energy from Joules to tons of TNT equivalent."""
    return energy_j / JOULES_PER_TON_TNT

def convert_energy_j_to_kt(energy_j):
    """Convert energy from Joules to kilotons of TNT equivalent."""
    return energy_j / JOULES_PER_KILOTON_TNT

def convert_energy_j_to_mt(energy_j):
    """
    Convert energy from Joules to Megatons of TNT equivalent.

    Uses the standard conversion factor where 1 MT TNT = 4.184 × 10^15 Joules.

    Parameters
    ----------
    energy_j : float
        Energy in Joules

    Returns
    -------
    float
        Energy in Megatons TNT equivalent
    """
    return energy_j / JOULES_PER_MEGATON_TNT

def kpa_to_pa(pressure_kpa):
    return pressure_kpa * 1000.0

# =============================================================================
# GEOGRAPHIC HELPERS
# =============================================================================

def normalize_longitude(lon):
    """
    Wrap a longitude into the [-180, 180] range.

    Values already inside the range are returned unchanged, so both -180 and
    180 are preserved as given. Larger values wrap into (-180, 180] and
    smaller ones into [-180, 180). Non-finite input gives NaN.
    """
    if not math.isfinite(lon):
        return math.nan
    if -180 <= lon <= 180:
        return lon
    if lon > 180:
        return 180 - ((180 - lon) % 360)
    return ((lon + 180) % 360) - 180

# =============================================================================
# REAL-VALUED MATH HELPERS
# =============================================================================

def real_pow(base, exponent):
    """
    Raise base to exponent, returning NaN where the real result is undefined.

    Python returns a complex number for a negative base with a fractional
    exponent and ``math.pow`` raises instead; impact formulas need a plain
    float in both cases.

    Parameters
    ----------
    base : float
        Base value
    exponent : float
        Exponent value

    Returns
    -------
    float
        base ** exponent, or NaN for a negative base with non-integer exponent
    """
    if math.isnan(base) or math.isnan(exponent):
        return math.nan
    if base < 0 and not float(exponent).is_integer():
        return math.nan
    try:
        return float(base ** exponent)
    except (OverflowError, ZeroDivisionError):
        return math.inf

def real_sqrt(value):
    """Square root that yields NaN for negative input."""
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)

def real_log10(value):
    """
    Base-10 logarithm following IEEE semantics.

    Returns -inf for zero and NaN for negative or NaN input instead of
    raising ``ValueError``.
    """
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return math.log10(value)
