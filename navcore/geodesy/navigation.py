"""
Mode-selectable navigation API.

Routes distance, bearing, destination and path sampling to the great
circle or rhumb line solver so callers can switch between the two with a
single ``NavigationMode`` argument.
"""

from enum import Enum
from typing import List, Optional, Union

from navcore.geodesy import great_circle, rhumb_line
from navcore.geodesy.coordinates import Coordinate


class NavigationMode(Enum):
    """Path type between two points."""
    GREAT_CIRCLE = "great_circle"
    RHUMB = "rhumb"


ModeLike = Union[NavigationMode, str]

_SOLVERS = {
    NavigationMode.GREAT_CIRCLE: great_circle,
    NavigationMode.RHUMB: rhumb_line,
}


def resolve_mode(mode: ModeLike) -> NavigationMode:
    """Accept a NavigationMode or its string value."""
    if isinstance(mode, NavigationMode):
        return mode
    try:
        return NavigationMode(str(mode).lower())
    except ValueError:
        valid = ", ".join(m.value for m in NavigationMode)
        raise ValueError(f"Unknown navigation mode '{mode}', expected one of: {valid}") from None


def distance(a: Coordinate, b: Coordinate, mode: ModeLike = NavigationMode.GREAT_CIRCLE) -> float:
    """Distance from a to b in nautical miles."""
    return _SOLVERS[resolve_mode(mode)].distance(a, b)


def bearing(a: Coordinate, b: Coordinate, mode: ModeLike = NavigationMode.GREAT_CIRCLE) -> float:
    """Initial (great circle) or constant (rhumb) bearing from a to b."""
    resolved = resolve_mode(mode)
    if resolved is NavigationMode.GREAT_CIRCLE:
        return great_circle.initial_bearing(a, b)
    return rhumb_line.bearing(a, b)


def destination(
    start: Coordinate,
    bearing: float,
    distance_nm: float,
    mode: ModeLike = NavigationMode.GREAT_CIRCLE,
) -> Coordinate:
    """Point reached from start after distance_nm on the given bearing."""
    return _SOLVERS[resolve_mode(mode)].destination(start, bearing, distance_nm)


def path_points(
    a: Coordinate,
    b: Coordinate,
    mode: ModeLike = NavigationMode.GREAT_CIRCLE,
    num_points: Optional[int] = None,
) -> List[Coordinate]:
    """Evenly spaced points from a to b for drawing the path."""
    return _SOLVERS[resolve_mode(mode)].path_points(a, b, num_points)
