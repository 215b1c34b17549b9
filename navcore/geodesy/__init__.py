"""Coordinate model and great circle / rhumb line solvers."""

from .coordinates import (
    Coordinate,
    DegreeMinute,
    to_decimal,
    to_degree_minute,
    format_latitude,
    format_longitude,
    format_coordinates,
    bearing_to_compass,
    compass_to_bearing,
)
from .navigation import NavigationMode, distance, bearing, destination, path_points

__all__ = [
    "Coordinate",
    "DegreeMinute",
    "to_decimal",
    "to_degree_minute",
    "format_latitude",
    "format_longitude",
    "format_coordinates",
    "bearing_to_compass",
    "compass_to_bearing",
    "NavigationMode",
    "distance",
    "bearing",
    "destination",
    "path_points",
]
