"""
Rhumb line (loxodrome) calculations.

A rhumb line keeps a constant compass bearing and plots as a straight line
on a Mercator chart. The math works in isometric latitude
psi = ln(tan(pi/4 + phi/2)), in which the loxodrome is linear.

Antimeridian crossing and pole overshoot are handled by the separate
helpers ``wrap_longitude_delta`` and ``reflect_over_pole``.
"""

import logging
import math
from typing import List, Optional

import numpy as np

from navcore.config import settings
from navcore.geodesy.constants import (
    EARTH_RADIUS_NM,
    POLE_EPSILON,
    POLE_LAT_MARGIN_RAD,
    RHUMB_EPSILON,
)
from navcore.geodesy.coordinates import Coordinate, normalize_bearing

logger = logging.getLogger(__name__)

HALF_PI = math.pi / 2


def isometric_latitude(lat_rad: float) -> float:
    """Mercator isometric latitude, finite even at the poles."""
    lat_rad = min(HALF_PI - POLE_LAT_MARGIN_RAD, max(-HALF_PI + POLE_LAT_MARGIN_RAD, lat_rad))
    return math.log(math.tan(math.pi / 4 + lat_rad / 2))


def isometric_latitude_difference(lat1_rad: float, lat2_rad: float) -> float:
    """Stretched latitude difference (delta psi) from lat1 to lat2."""
    return isometric_latitude(lat2_rad) - isometric_latitude(lat1_rad)


def wrap_longitude_delta(dlon_rad: float) -> float:
    """Take the shorter way round when a longitude difference exceeds 180 degrees."""
    if abs(dlon_rad) > math.pi:
        logger.debug(f"Longitude difference {math.degrees(dlon_rad):.4f} crosses antimeridian")
        return dlon_rad - 2 * math.pi if dlon_rad > 0 else dlon_rad + 2 * math.pi
    return dlon_rad


def reflect_over_pole(lat_rad: float) -> float:
    """Fold a latitude that overshot a pole back onto the far meridian side."""
    if lat_rad > HALF_PI:
        logger.debug(f"Rhumb line passed the north pole (lat {math.degrees(lat_rad):.4f})")
        return math.pi - lat_rad
    if lat_rad < -HALF_PI:
        logger.debug(f"Rhumb line passed the south pole (lat {math.degrees(lat_rad):.4f})")
        return -math.pi - lat_rad
    return lat_rad


def _stretch_ratio(dphi: float, dpsi: float, lat_rad: float) -> float:
    """
    Ratio q = delta phi / delta psi.

    On an east-west course delta psi vanishes and q tends to cos(lat).
    """
    if abs(dpsi) > RHUMB_EPSILON:
        return dphi / dpsi
    return math.cos(lat_rad)


def distance(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate rhumb line distance between two points.

    Returns:
        Distance in nautical miles along the line of constant bearing
    """
    dphi = b.lat_rad - a.lat_rad
    dpsi = isometric_latitude_difference(a.lat_rad, b.lat_rad)
    q = _stretch_ratio(dphi, dpsi, a.lat_rad)
    dlon = wrap_longitude_delta(math.radians(b.longitude - a.longitude))

    return EARTH_RADIUS_NM * math.sqrt(dphi * dphi + q * q * dlon * dlon)


def bearing(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate rhumb line bearing (constant heading) from a to b.

    Returns:
        Bearing in degrees (0-360); 0.0 when the points coincide
    """
    if a == b:
        return 0.0

    dpsi = isometric_latitude_difference(a.lat_rad, b.lat_rad)
    dlon = wrap_longitude_delta(math.radians(b.longitude - a.longitude))

    return normalize_bearing(math.degrees(math.atan2(dlon, dpsi)))


def destination(start: Coordinate, bearing: float, distance_nm: float) -> Coordinate:
    """
    Calculate destination using rhumb line (constant heading).

    Args:
        start: Departure point
        bearing: Constant true course in degrees
        distance_nm: Distance run in nautical miles

    Returns:
        Destination with longitude wrapped into (-180, 180]
    """
    lat = start.lat_rad
    theta = math.radians(bearing)
    delta = distance_nm / EARTH_RADIUS_NM

    dphi = delta * math.cos(theta)
    lat2 = reflect_over_pole(lat + dphi)

    dpsi = isometric_latitude_difference(lat, lat2)
    q = _stretch_ratio(dphi, dpsi, lat)
    if abs(q) < POLE_EPSILON:
        logger.debug(f"Stretch ratio {q:.3e} clamped near the pole at lat {start.latitude}")
        q = math.copysign(POLE_EPSILON, q)

    dlon = delta * math.sin(theta) / q

    return Coordinate(math.degrees(lat2), math.degrees(start.lon_rad + dlon))


def path_points(
    a: Coordinate,
    b: Coordinate,
    num_points: Optional[int] = None,
) -> List[Coordinate]:
    """
    Sample the rhumb line from a to b for chart drawing.

    Points are spaced evenly by distance along the loxodrome, so on a
    Mercator chart they fall on the straight line between a and b.
    """
    if num_points is None:
        num_points = settings.path_points
    if num_points < 1:
        raise ValueError(f"num_points must be at least 1, got {num_points}")

    total_nm = distance(a, b)
    course = bearing(a, b)
    return [
        destination(a, course, float(f) * total_nm)
        for f in np.linspace(0.0, 1.0, num_points + 1)
    ]
