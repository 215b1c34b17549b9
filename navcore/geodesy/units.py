"""Unit conversions and two-unit display helpers (nm/km, knots/km/h)."""

import math
from dataclasses import dataclass

from navcore.geodesy.constants import MINUTES_PER_DEGREE, NM_TO_KM


@dataclass(frozen=True)
class FormattedQuantity:
    """A value shown in its nautical unit and its metric equivalent."""
    nautical: str
    metric: str
    display: str


def nm_to_km(nm: float) -> float:
    """Convert nautical miles to kilometers."""
    return nm * NM_TO_KM


def km_to_nm(km: float) -> float:
    """Convert kilometers to nautical miles."""
    return km / NM_TO_KM


def knots_to_kmh(knots: float) -> float:
    """Convert knots to km/h."""
    return knots * NM_TO_KM


def kmh_to_knots(kmh: float) -> float:
    """Convert km/h to knots."""
    return kmh / NM_TO_KM


def format_distance(nm: float) -> FormattedQuantity:
    """Format distance with both units, e.g. "12.3 nm (22.8 km)"."""
    km = nm_to_km(nm)
    return FormattedQuantity(
        nautical=f"{nm:.1f}",
        metric=f"{km:.1f}",
        display=f"{nm:.1f} nm ({km:.1f} km)",
    )


def format_speed(knots: float) -> FormattedQuantity:
    """Format speed with both units, e.g. "10.0 knots (18.5 km/h)"."""
    kmh = knots_to_kmh(knots)
    return FormattedQuantity(
        nautical=f"{knots:.1f}",
        metric=f"{kmh:.1f}",
        display=f"{knots:.1f} knots ({kmh:.1f} km/h)",
    )


def lat_difference_minutes(lat1: float, lat2: float) -> float:
    """Latitude difference in minutes of arc (equal to nm)."""
    return abs(lat2 - lat1) * MINUTES_PER_DEGREE


def departure_nm(lon1: float, lon2: float, latitude: float) -> float:
    """
    East-west distance along a parallel, accounting for meridian convergence.

    Uses the shorter way round when the two longitudes straddle the
    antimeridian.
    """
    dlon = abs(lon2 - lon1) % 360.0
    if dlon > 180.0:
        dlon = 360.0 - dlon
    return dlon * MINUTES_PER_DEGREE * math.cos(math.radians(latitude))
