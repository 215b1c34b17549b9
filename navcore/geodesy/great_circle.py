"""
Great circle (orthodrome) calculations on a spherical Earth.

Solves the inverse problem (haversine distance, initial bearing), the
direct problem (destination from bearing and distance) and interpolation
along the minor arc. Distances are in nautical miles with R = 3440.065 nm.
"""

import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from navcore.config import settings
from navcore.geodesy.constants import EARTH_RADIUS_NM
from navcore.geodesy.coordinates import Coordinate, normalize_bearing

logger = logging.getLogger(__name__)

# sin(d) below this with the endpoints opposed means no unique arc exists
ANTIPODAL_EPSILON = 1e-9


def distance(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate great circle distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in nautical miles
    """
    dlat = b.lat_rad - a.lat_rad
    dlon = math.radians(b.longitude - a.longitude)

    h = (math.sin(dlat / 2) ** 2
         + math.cos(a.lat_rad) * math.cos(b.lat_rad) * math.sin(dlon / 2) ** 2)
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = min(1.0, max(0.0, h))

    return EARTH_RADIUS_NM * 2 * math.asin(math.sqrt(h))


def initial_bearing(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate initial bearing from point a to point b.

    Returns:
        Bearing in degrees (0-360); 0.0 when the points coincide
    """
    if a == b:
        return 0.0

    dlon = math.radians(b.longitude - a.longitude)
    x = math.sin(dlon) * math.cos(b.lat_rad)
    y = (math.cos(a.lat_rad) * math.sin(b.lat_rad)
         - math.sin(a.lat_rad) * math.cos(b.lat_rad) * math.cos(dlon))

    return normalize_bearing(math.degrees(math.atan2(x, y)))


def destination(start: Coordinate, bearing: float, distance_nm: float) -> Coordinate:
    """
    Calculate destination point given start, bearing and distance.

    Args:
        start: Departure point
        bearing: Initial true bearing in degrees
        distance_nm: Distance along the great circle in nautical miles

    Returns:
        Destination with longitude normalized into (-180, 180]
    """
    lat = start.lat_rad
    theta = math.radians(bearing)
    delta = distance_nm / EARTH_RADIUS_NM

    sin_lat2 = (math.sin(lat) * math.cos(delta)
                + math.cos(lat) * math.sin(delta) * math.cos(theta))
    lat2 = math.asin(min(1.0, max(-1.0, sin_lat2)))

    lon2 = start.lon_rad + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat),
        math.cos(delta) - math.sin(lat) * math.sin(lat2),
    )

    return Coordinate(math.degrees(lat2), math.degrees(lon2))


def _unit_vector(p: Coordinate) -> Tuple[float, float, float]:
    cos_lat = math.cos(p.lat_rad)
    return (cos_lat * math.cos(p.lon_rad), cos_lat * math.sin(p.lon_rad), math.sin(p.lat_rad))


def interpolate(a: Coordinate, b: Coordinate, t: float) -> Coordinate:
    """
    Interpolate a point along the great circle from a to b.

    Args:
        a: Start of the arc (t = 0)
        b: End of the arc (t = 1)
        t: Fraction of the arc, clamped to [0, 1]

    Returns:
        Point on the minor arc. Identical endpoints return ``a``. Antipodal
        endpoints have no unique arc, so the meridian heading north from
        ``a`` is followed instead.
    """
    t = min(1.0, max(0.0, t))
    if a == b:
        return a

    ax, ay, az = _unit_vector(a)
    bx, by, bz = _unit_vector(b)

    # |a x b| and a . b keep sin(d) accurate near d = pi, where haversine does not
    sin_d = math.sqrt((ay * bz - az * by) ** 2
                      + (az * bx - ax * bz) ** 2
                      + (ax * by - ay * bx) ** 2)
    cos_d = ax * bx + ay * by + az * bz
    d = math.atan2(sin_d, cos_d)

    if d == 0:
        return a

    if sin_d < ANTIPODAL_EPSILON and cos_d < 0:
        logger.debug(f"Antipodal endpoints {a} / {b}, interpolating along meridian")
        return destination(a, 0.0, t * d * EARTH_RADIUS_NM)

    fa = math.sin((1 - t) * d) / sin_d
    fb = math.sin(t * d) / sin_d

    x = fa * ax + fb * bx
    y = fa * ay + fb * by
    z = fa * az + fb * bz

    lat = math.atan2(z, math.sqrt(x * x + y * y))
    lon = math.atan2(y, x)

    return Coordinate(math.degrees(lat), math.degrees(lon))


def midpoint(a: Coordinate, b: Coordinate) -> Coordinate:
    """Point halfway along the great circle from a to b."""
    return interpolate(a, b, 0.5)


def path_points(
    a: Coordinate,
    b: Coordinate,
    num_points: Optional[int] = None,
) -> List[Coordinate]:
    """
    Sample the great circle from a to b for chart drawing.

    Args:
        a: Start point
        b: End point
        num_points: Number of segments (defaults to settings.path_points)

    Returns:
        num_points + 1 coordinates, starting at a and ending at b
    """
    if num_points is None:
        num_points = settings.path_points
    if num_points < 1:
        raise ValueError(f"num_points must be at least 1, got {num_points}")

    return [interpolate(a, b, float(f)) for f in np.linspace(0.0, 1.0, num_points + 1)]
