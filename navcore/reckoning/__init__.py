"""Dead reckoning: vessel motion composed with wind and current drift."""

from .drift import (
    Displacement,
    DriftVector,
    JourneyLeg,
    wind_drift,
    current_set,
    compose,
    apply_drift,
    leg_displacement,
    resolve_leg,
    resolve_leg_rhumb,
)

__all__ = [
    "Displacement",
    "DriftVector",
    "JourneyLeg",
    "wind_drift",
    "current_set",
    "compose",
    "apply_drift",
    "leg_displacement",
    "resolve_leg",
    "resolve_leg_rhumb",
]
