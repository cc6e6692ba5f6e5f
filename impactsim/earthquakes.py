"""
Earthquake comparison utilities for impact-generated seismic magnitude.

Provides USGS-style magnitude classes and a curated catalog of notable
historical earthquakes used to put an impact's seismic magnitude in context.
The catalog is embedded rather than fetched so comparisons work offline and
always give the same answer.
"""

from dataclasses import dataclass
from typing import Optional

from impactsim.thresholds import (
    COMPARABLE_MAGNITUDE_DELTA, GREATEST_MAGNITUDE_CLASS, get_magnitude_bands
)


@dataclass(frozen=True)
class NotableEarthquake:
    name: str
    year: int
    magnitude: float  # moment magnitude (Mw)
    summary: str
    location: Optional[str] = None
    source_url: Optional[str] = None

    def label(self):
        return f"{self.year} {self.name} (M{self.magnitude:.1f})"

    def to_dict(self):
        return {
            "name": self.name,
            "year": self.year,
            "magnitude": self.magnitude,
            "location": self.location,
            "summary": self.summary,
            "sourceUrl": self.source_url,
        }


@dataclass(frozen=True)
class EarthquakeBracket:
    lower: Optional[NotableEarthquake] = None
    upper: Optional[NotableEarthquake] = None

    def to_dict(self):
        return {
            "lower": self.lower.to_dict() if self.lower else None,
            "upper": self.upper.to_dict() if self.upper else None,
        }


@dataclass(frozen=True)
class EarthquakeComparison:
    classification: str
    nearest: Optional[NotableEarthquake]
    bracket: EarthquakeBracket
    relative_text: str
    exceeds_recorded: bool

    def to_dict(self):
        return {
            "classification": self.classification,
            "nearest": self.nearest.to_dict() if self.nearest else None,
            "bracket": self.bracket.to_dict(),
            "relativeText": self.relative_text,
            "exceedsRecorded": self.exceeds_recorded,
        }


_USGS_EVENT_URL = "https://earthquake.usgs.gov/earthquakes/eventpage/"

_CATALOG_ENTRIES = [
    NotableEarthquake(
        name="Northridge", year=1994, magnitude=6.7,
        location="California, USA",
        summary="Severe urban damage; strong ground acceleration; modern building code test case.",
        source_url=_USGS_EVENT_URL + "ci3144585/executive",
    ),
    NotableEarthquake(
        name="Kobe (Great Hanshin)", year=1995, magnitude=6.9,
        location="Japan",
        summary="Extensive structural collapse; catalyst for seismic retrofit reforms.",
        source_url=_USGS_EVENT_URL + "usp0006rew/executive",
    ),
    NotableEarthquake(
        name="Loma Prieta", year=1989, magnitude=6.9,
        location="California, USA",
        summary="Bay Area damage; freeway and bridge failures; broadcast live on TV.",
        source_url=_USGS_EVENT_URL + "nc216859/executive",
    ),
    NotableEarthquake(
        name="Haiti", year=2010, magnitude=7.0,
        location="Haiti",
        summary="Devastating impact due to vulnerable infrastructure; high casualty count.",
        source_url=_USGS_EVENT_URL + "usp000h60h/executive",
    ),
    NotableEarthquake(
        name="Turkey–Syria", year=2023, magnitude=7.8,
        location="Türkiye / Syria border region",
        summary="Multiple mainshocks; widespread regional devastation.",
        source_url=_USGS_EVENT_URL + "us6000jllz/executive",
    ),
    NotableEarthquake(
        name="San Francisco", year=1906, magnitude=7.9,
        location="California, USA",
        summary="Fire and rupture destruction; benchmark strike-slip event.",
        source_url=_USGS_EVENT_URL + "official19060418131201130_12/executive",
    ),
    NotableEarthquake(
        name="Sichuan (Wenchuan)", year=2008, magnitude=7.9,
        location="China",
        summary="Mountainous landslides, infrastructure collapse, high casualties.",
        source_url=_USGS_EVENT_URL + "usp000g650/executive",
    ),
    NotableEarthquake(
        name="Great Alaska (Prince William Sound)", year=1964, magnitude=9.2,
        location="Alaska, USA",
        summary="Massive subduction event; generated Pacific-wide tsunami.",
        source_url=_USGS_EVENT_URL + "official19640328033616130_30/executive",
    ),
    NotableEarthquake(
        name="Tohoku", year=2011, magnitude=9.1,
        location="Japan",
        summary="Megathrust rupture + tsunami; nuclear accident cascade.",
        source_url=_USGS_EVENT_URL + "official20110311054624120_30/executive",
    ),
    NotableEarthquake(
        name="Sumatra–Andaman", year=2004, magnitude=9.1,
        location="Indian Ocean",
        summary="Indian Ocean tsunami; multi-plate rupture over ~1300 km.",
        source_url=_USGS_EVENT_URL + "official20041226005853450_30/executive",
    ),
    NotableEarthquake(
        name="Valdivia (Great Chilean)", year=1960, magnitude=9.5,
        location="Chile",
        summary="Largest instrumentally recorded earthquake; Pacific-wide tsunami.",
        source_url=_USGS_EVENT_URL + "official19600522191120_30",
    ),
]

# Sorted ascending by magnitude once; the sort is stable so equal magnitudes
# keep their listed order. Every lookup below relies on this ordering.
NOTABLE_EARTHQUAKES = tuple(sorted(_CATALOG_ENTRIES, key=lambda eq: eq.magnitude))

EXCEEDS_RECORDED_TEXT = (
    "Larger than any instrumentally recorded tectonic earthquake "
    "(impact-generated energy is extreme)."
)


def classify_magnitude(magnitude):
    """Map a magnitude to its USGS class (Micro ... Great)."""
    for band_name, upper_bound in get_magnitude_bands():
        if magnitude < upper_bound:
            return band_name
    return GREATEST_MAGNITUDE_CLASS


def largest_recorded(catalog=NOTABLE_EARTHQUAKES):
    return catalog[-1] if catalog else None


def find_bracket(magnitude, catalog=NOTABLE_EARTHQUAKES):
    """
    Find the catalog entries surrounding ``magnitude``.

    ``lower`` is the last entry with magnitude <= m and ``upper`` the first
    entry with magnitude >= m; an exact match makes them the same entry.
    """
    lower = None
    upper = None
    for eq in catalog:
        if eq.magnitude <= magnitude:
            lower = eq
        if eq.magnitude >= magnitude:
            upper = eq
            break
    return EarthquakeBracket(lower=lower, upper=upper)


def _pick_nearest(magnitude, bracket):
    lower, upper = bracket.lower, bracket.upper
    if lower and upper:
        d_lower = abs(magnitude - lower.magnitude)
        d_upper = abs(upper.magnitude - magnitude)
        return lower if d_lower <= d_upper else upper
    return lower or upper


def _relative_text(magnitude, bracket, nearest):
    lower, upper = bracket.lower, bracket.upper
    if lower and upper and lower is not upper:
        return f"Between the {lower.label()} and the {upper.label()}"
    if nearest is None:
        return ""
    if abs(nearest.magnitude - magnitude) < COMPARABLE_MAGNITUDE_DELTA:
        return f"Comparable to the {nearest.year} {nearest.name} earthquake (M{nearest.magnitude:.1f})"
    if nearest.magnitude < magnitude:
        return f"Slightly larger than the {nearest.label()}"
    return f"Slightly smaller than the {nearest.label()}"


def compare_magnitude(magnitude, catalog=NOTABLE_EARTHQUAKES):
    """
    Compare a seismic magnitude against the historical catalog.

    Args:
        magnitude: Moment magnitude to compare
        catalog: Magnitude-ascending sequence of NotableEarthquake entries

    Returns:
        EarthquakeComparison: classification, nearest entry (ties favor the
        lower one), bracketing entries and a human-readable description.
        Magnitudes above the largest entry are flagged ``exceeds_recorded``.
    """
    classification = classify_magnitude(magnitude)
    largest = largest_recorded(catalog)

    if largest is not None and magnitude > largest.magnitude:
        return EarthquakeComparison(
            classification=classification,
            nearest=largest,
            bracket=EarthquakeBracket(lower=largest),
            relative_text=EXCEEDS_RECORDED_TEXT,
            exceeds_recorded=True,
        )

    bracket = find_bracket(magnitude, catalog)
    nearest = _pick_nearest(magnitude, bracket)
    return EarthquakeComparison(
        classification=classification,
        nearest=nearest,
        bracket=bracket,
        relative_text=_relative_text(magnitude, bracket, nearest),
        exceeds_recorded=False,
    )
