"""
Dead reckoning with wind and current drift.

A journey leg is the vessel's own run (heading, speed, time) plus any
number of drift vectors. Each vector is reduced to north/east components
in nautical miles, the components are summed, and the total is applied to
the start position using 1' of latitude = 1 nm and a cos(latitude)
shrink for longitude.

Every drift vector's ``direction`` is the bearing the displacement points
TOWARD. Wind is usually quoted by the direction it blows FROM; convert it
with ``wind_drift`` before building a leg.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from navcore.geodesy import rhumb_line
from navcore.geodesy.constants import MINUTES_PER_DEGREE, POLE_EPSILON
from navcore.geodesy.coordinates import Coordinate, normalize_bearing

logger = logging.getLogger(__name__)


def _check_non_negative(name: str, value: float):
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite value >= 0, got {value}")


@dataclass(frozen=True)
class Displacement:
    """Net movement split into north and east components (nm)."""
    north_nm: float = 0.0
    east_nm: float = 0.0

    def __add__(self, other: "Displacement") -> "Displacement":
        return Displacement(self.north_nm + other.north_nm, self.east_nm + other.east_nm)

    @property
    def distance_nm(self) -> float:
        """Distance made good."""
        return math.hypot(self.north_nm, self.east_nm)

    @property
    def bearing(self) -> float:
        """Course made good in degrees (0-360)."""
        if self.north_nm == 0 and self.east_nm == 0:
            return 0.0
        return normalize_bearing(math.degrees(math.atan2(self.east_nm, self.north_nm)))


@dataclass(frozen=True)
class DriftVector:
    """Movement of speed_kts for duration_hours toward ``direction``."""
    direction: float  # degrees true, direction the flow moves toward
    speed_kts: float
    duration_hours: float

    def __post_init__(self):
        _check_non_negative("speed_kts", self.speed_kts)
        _check_non_negative("duration_hours", self.duration_hours)

    @property
    def distance_nm(self) -> float:
        return self.speed_kts * self.duration_hours

    def displacement(self) -> Displacement:
        """North/east components of this vector."""
        theta = math.radians(self.direction)
        return Displacement(
            north_nm=self.distance_nm * math.cos(theta),
            east_nm=self.distance_nm * math.sin(theta),
        )


@dataclass(frozen=True)
class JourneyLeg:
    """A vessel run from ``start`` plus the drift acting on it."""
    start: Coordinate
    heading: float
    speed_kts: float
    duration_hours: float
    drift: Tuple[DriftVector, ...] = field(default_factory=tuple)

    def __post_init__(self):
        _check_non_negative("speed_kts", self.speed_kts)
        _check_non_negative("duration_hours", self.duration_hours)
        object.__setattr__(self, 'drift', tuple(self.drift))

    @property
    def distance_traveled_nm(self) -> float:
        """Distance run through the water, the denominator used for grading."""
        return self.speed_kts * self.duration_hours

    def motion_vector(self) -> DriftVector:
        """The vessel's own run expressed as a vector."""
        return DriftVector(self.heading, self.speed_kts, self.duration_hours)

    def vectors(self) -> Tuple[DriftVector, ...]:
        return (self.motion_vector(),) + self.drift


def wind_drift(from_direction: float, leeway_kts: float, duration_hours: float) -> DriftVector:
    """
    Drift caused by wind quoted by the direction it blows FROM.

    Wind from 270 pushes the vessel toward 090.
    """
    return DriftVector(normalize_bearing(from_direction + 180.0), leeway_kts, duration_hours)


def current_set(set_direction: float, rate_kts: float, duration_hours: float) -> DriftVector:
    """Drift caused by a current, quoted by its set (direction it flows toward)."""
    return DriftVector(normalize_bearing(set_direction), rate_kts, duration_hours)


def compose(vectors: Iterable[DriftVector]) -> Displacement:
    """Sum the north/east components of all vectors."""
    total = Displacement()
    for vector in vectors:
        total = total + vector.displacement()
    return total


def offset_position(base: Coordinate, displacement: Displacement) -> Coordinate:
    """
    Move a position by a north/east displacement.

    Near the poles cos(latitude) approaches zero and the longitude change
    diverges; the divisor is floored at POLE_EPSILON so the result stays
    finite, but such positions are not meaningful.
    """
    dlat = displacement.north_nm / MINUTES_PER_DEGREE

    cos_lat = math.cos(base.lat_rad)
    if cos_lat < POLE_EPSILON:
        logger.debug(f"cos(lat) clamped at latitude {base.latitude}, longitude change is degenerate")
        cos_lat = POLE_EPSILON
    dlon = displacement.east_nm / (MINUTES_PER_DEGREE * cos_lat)

    return Coordinate(base.latitude + dlat, base.longitude + dlon)


def apply_drift(base: Coordinate, vectors: Iterable[DriftVector]) -> Coordinate:
    """Position reached from base after all vectors are applied."""
    return offset_position(base, compose(vectors))


def leg_displacement(leg: JourneyLeg) -> Displacement:
    """Total north/east movement over a leg, vessel run plus drift."""
    return compose(leg.vectors())


def resolve_leg(leg: JourneyLeg) -> Coordinate:
    """Dead reckoning position at the end of a leg."""
    result = apply_drift(leg.start, leg.vectors())
    logger.debug(
        f"Resolved leg from {leg.start} heading {leg.heading:.1f} at {leg.speed_kts} kts "
        f"for {leg.duration_hours} h with {len(leg.drift)} drift vector(s): {result}"
    )
    return result


def resolve_leg_rhumb(leg: JourneyLeg) -> Coordinate:
    """
    End of a leg sailed as a rhumb line along the course made good.

    Without drift this is a plain rhumb destination at the leg heading,
    which is how time trial answers are checked.
    """
    if not leg.drift:
        return rhumb_line.destination(leg.start, leg.heading, leg.distance_traveled_nm)
    made_good = leg_displacement(leg)
    return rhumb_line.destination(leg.start, made_good.bearing, made_good.distance_nm)
