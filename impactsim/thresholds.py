"""
Damage thresholds, severity tiers and classification bands for impact effects.
"""
from types import MappingProxyType

# ==========================================
# Airblast / Overpressure (kPa)
# ==========================================
OVERPRESSURE_SEVERE_KPA = 50.0    # heavy structural damage
OVERPRESSURE_MODERATE_KPA = 20.0  # typical window / wall failure
OVERPRESSURE_LIGHT_KPA = 5.0      # light damage

# ==========================================
# Damage zone severity (mortality fraction)
# ==========================================
SEVERITY_TOTAL = "total"
SEVERITY_SEVERE = "severe"
SEVERITY_MODERATE = "moderate"
SEVERITY_LIGHT = "light"

MORTALITY_RATES = MappingProxyType({
    SEVERITY_TOTAL: 0.95,
    SEVERITY_SEVERE: 0.75,
    SEVERITY_MODERATE: 0.25,
    SEVERITY_LIGHT: 0.05,
})

def get_mortality_rate(severity):
    """Mortality fraction for a severity tier; unknown tiers kill nobody."""
    return MORTALITY_RATES.get(severity, 0.0)

# ==========================================
# Seismic (USGS magnitude classes)
# ==========================================
# Upper bounds are exclusive; anything at or above the last bound is "Great".
def get_magnitude_bands():
    return [
        ("Micro", 2.0),
        ("Minor", 4.0),
        ("Light", 5.0),
        ("Moderate", 6.0),
        ("Strong", 7.0),
        ("Major", 8.0),
    ]

GREATEST_MAGNITUDE_CLASS = "Great"

# Magnitudes within this distance of a catalog entry read as "comparable"
COMPARABLE_MAGNITUDE_DELTA = 0.05

# ==========================================
# Tsunami (Amplitude in m)
# ==========================================
def get_tsunami_amplitude_thresholds():
    return [
        (">100m", 100.0),
        (">10m", 10.0),
        (">1m", 1.0),
    ]

# ==========================================
# TNT yield display units (tons)
# ==========================================
TNT_YIELD_UNITS = [
    ("Gt", 1e9),
    ("Mt", 1e6),
    ("kt", 1e3),
]

# ==========================================
# Helpers
# ==========================================
def get_wave_height_category(height_m):
    for category_name, threshold in get_tsunami_amplitude_thresholds():
        if height_m >= threshold:
            return category_name
    return "<1m"
