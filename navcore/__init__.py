"""Geodesy and dead reckoning engine for navigation training."""

from .geodesy import (
    Coordinate,
    DegreeMinute,
    NavigationMode,
    to_decimal,
    to_degree_minute,
    format_latitude,
    format_longitude,
    distance,
    bearing,
    destination,
)
from .reckoning import DriftVector, JourneyLeg, resolve_leg
from .scoring import ErrorReport, compute_error, score_tier, grade_answer

__all__ = [
    "Coordinate",
    "DegreeMinute",
    "NavigationMode",
    "to_decimal",
    "to_degree_minute",
    "format_latitude",
    "format_longitude",
    "distance",
    "bearing",
    "destination",
    "DriftVector",
    "JourneyLeg",
    "resolve_leg",
    "ErrorReport",
    "compute_error",
    "score_tier",
    "grade_answer",
]
