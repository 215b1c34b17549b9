"""
Coordinate representation and display formatting.

Latitude/longitude values are carried as decimal degrees in an immutable
``Coordinate``. Degree-minute-hemisphere triples exist for display and
for reading learner answers only; every computation uses decimal degrees.
"""

import logging
import math
from dataclasses import dataclass

from navcore.geodesy.constants import MINUTES_PER_DEGREE

logger = logging.getLogger(__name__)


COMPASS_POINTS = [
    'N', 'NNE', 'NE', 'ENE', 'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW', 'W', 'WNW', 'NW', 'NNW',
]

_COMPASS_WORDS = {'N': 'north', 'E': 'east', 'S': 'south', 'W': 'west'}

HEMISPHERES = {
    'lat': ('N', 'S'),
    'lon': ('E', 'W'),
}


def clamp_latitude(lat: float) -> float:
    """Clamp latitude into [-90, 90]."""
    if lat > 90.0:
        logger.debug(f"Latitude {lat} clamped to 90")
        return 90.0
    if lat < -90.0:
        logger.debug(f"Latitude {lat} clamped to -90")
        return -90.0
    return lat


def normalize_longitude(lon: float) -> float:
    """Wrap longitude into (-180, 180]."""
    if -180.0 < lon <= 180.0:
        return lon
    wrapped = (lon + 180.0) % 360.0 - 180.0
    if wrapped == -180.0:
        wrapped = 180.0
    return wrapped


def normalize_bearing(bearing: float) -> float:
    """Wrap a bearing into [0, 360)."""
    result = bearing % 360.0
    # -1e-17 % 360 rounds up to 360.0
    if result >= 360.0:
        return 0.0
    return result


@dataclass(frozen=True)
class Coordinate:
    """
    A position on the sphere in decimal degrees.

    Latitude is clamped to [-90, 90] and longitude wrapped into (-180, 180]
    on construction, so every Coordinate in the engine is already normalized.
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError(
                f"Coordinate requires finite values, got ({self.latitude}, {self.longitude})"
            )
        object.__setattr__(self, 'latitude', clamp_latitude(float(self.latitude)))
        object.__setattr__(self, 'longitude', normalize_longitude(float(self.longitude)))

    @property
    def lat_rad(self) -> float:
        return math.radians(self.latitude)

    @property
    def lon_rad(self) -> float:
        return math.radians(self.longitude)

    def as_tuple(self):
        """Return (lat, lon)."""
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return format_coordinates(self.latitude, self.longitude)


@dataclass(frozen=True)
class DegreeMinute:
    """Degrees, decimal minutes and hemisphere letter (display form)."""
    degrees: int
    minutes: float
    hemisphere: str

    def to_decimal(self) -> float:
        return to_decimal(self.degrees, self.minutes, self.hemisphere)


def to_decimal(degrees: float, minutes: float, hemisphere: str) -> float:
    """
    Convert degrees and minutes to decimal degrees.

    Args:
        degrees: Whole degrees (sign is ignored; the hemisphere decides)
        minutes: Decimal minutes, expected in [0, 60) but not enforced
        hemisphere: One of N, S, E, W (case-insensitive)

    Returns:
        Decimal degrees, negative for S and W

    Raises:
        ValueError: If the hemisphere letter is not N, S, E or W
    """
    letter = hemisphere.strip().upper()
    if letter not in ('N', 'S', 'E', 'W'):
        raise ValueError(f"Unknown hemisphere '{hemisphere}', expected N, S, E or W")

    decimal = abs(degrees) + minutes / MINUTES_PER_DEGREE
    return -decimal if letter in ('S', 'W') else decimal


def to_degree_minute(decimal: float, axis: str = 'lat') -> DegreeMinute:
    """
    Convert decimal degrees to degrees and minutes.

    Minutes are rounded to two decimals. A value that rounds up to 60'
    carries into the degrees so minutes always stay below 60.

    Args:
        decimal: Decimal degrees
        axis: 'lat' for N/S hemispheres, 'lon' for E/W

    Returns:
        DegreeMinute with a non-negative degree count
    """
    if axis not in HEMISPHERES:
        raise ValueError(f"Unknown axis '{axis}', expected 'lat' or 'lon'")
    positive, negative = HEMISPHERES[axis]

    abs_decimal = abs(decimal)
    degrees = int(math.floor(abs_decimal))
    minutes = round((abs_decimal - degrees) * MINUTES_PER_DEGREE, 2)
    if minutes >= MINUTES_PER_DEGREE:
        degrees += 1
        minutes = 0.0

    return DegreeMinute(
        degrees=degrees,
        minutes=minutes,
        hemisphere=negative if decimal < 0 else positive,
    )


def _format_axis(decimal: float, axis: str) -> str:
    dm = to_degree_minute(decimal, axis)
    degrees = dm.degrees
    # Display precision is one decimal, so 59.96' must carry as well
    minutes = round(dm.minutes, 1)
    if minutes >= MINUTES_PER_DEGREE:
        degrees += 1
        minutes = 0.0
    return f"{degrees}°{minutes:.1f}'{dm.hemisphere}"


def format_latitude(lat: float) -> str:
    """Format latitude as string (e.g., "45°30.0'N")."""
    return _format_axis(lat, 'lat')


def format_longitude(lon: float) -> str:
    """Format longitude as string (e.g., "10°15.0'W")."""
    return _format_axis(lon, 'lon')


def format_coordinates(lat: float, lon: float) -> str:
    """Format a position as "lat, lon"."""
    return f"{format_latitude(lat)}, {format_longitude(lon)}"


def bearing_to_compass(bearing: float) -> str:
    """Get 16-point compass name from bearing."""
    index = int(math.floor(normalize_bearing(bearing) / 22.5 + 0.5)) % 16
    return COMPASS_POINTS[index]


def compass_to_bearing(name: str) -> float:
    """
    Convert a compass point to its bearing in degrees.

    Accepts abbreviations ("NE", "ssw") and the spelled-out forms used by
    challenge data ("south", "northeast", "north-northeast").
    """
    key = name.strip().replace('-', '').replace(' ', '').replace('_', '')
    for index, point in enumerate(COMPASS_POINTS):
        spelled = ''.join(_COMPASS_WORDS[letter] for letter in point)
        if key.upper() == point or key.lower() == spelled:
            return index * 22.5
    raise ValueError(f"Unknown compass point '{name}'")
