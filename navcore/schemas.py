"""
Input schemas for callers of the engine.

Exercise definitions and learner answers arrive from the UI layer as
loosely typed data. These models validate bounds once at the boundary
and convert into the engine's immutable value types.
"""

from typing import List, Literal, Union

from pydantic import BaseModel, Field, field_validator

from navcore.geodesy.coordinates import Coordinate, compass_to_bearing, to_decimal
from navcore.reckoning.drift import DriftVector, JourneyLeg, current_set, wind_drift


def _direction_to_bearing(value: Union[float, str]) -> float:
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return compass_to_bearing(value)
    return value


class PositionModel(BaseModel):
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lon)


class DegreeMinuteModel(BaseModel):
    """Degrees, minutes and hemisphere as typed into an answer form."""
    degrees: int = Field(..., ge=0, le=180)
    minutes: float = Field(0.0, ge=0, lt=60, allow_inf_nan=False)
    hemisphere: Literal["N", "S", "E", "W"]

    @field_validator("hemisphere", mode="before")
    @classmethod
    def upper_hemisphere(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    def to_decimal(self) -> float:
        return to_decimal(self.degrees, self.minutes, self.hemisphere)


class AnswerModel(BaseModel):
    """A learner's position answer in degree-minute form."""
    latitude: DegreeMinuteModel
    longitude: DegreeMinuteModel

    @field_validator("latitude")
    @classmethod
    def latitude_hemisphere(cls, v: DegreeMinuteModel) -> DegreeMinuteModel:
        if v.hemisphere not in ("N", "S"):
            raise ValueError("latitude hemisphere must be N or S")
        if v.degrees + v.minutes / 60 > 90:
            raise ValueError("latitude cannot exceed 90 degrees")
        return v

    @field_validator("longitude")
    @classmethod
    def longitude_hemisphere(cls, v: DegreeMinuteModel) -> DegreeMinuteModel:
        if v.hemisphere not in ("E", "W"):
            raise ValueError("longitude hemisphere must be E or W")
        return v

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.latitude.to_decimal(), self.longitude.to_decimal())


class DriftVectorModel(BaseModel):
    """Wind or current drift.

    ``direction`` may be degrees or a compass point ("south", "NE").
    With convention "from" (how wind is reported) it is reversed before use.
    """
    direction: float = Field(..., allow_inf_nan=False)
    speed_kts: float = Field(..., ge=0, allow_inf_nan=False)
    duration_hours: float = Field(..., ge=0, allow_inf_nan=False)
    convention: Literal["toward", "from"] = "toward"

    @field_validator("direction", mode="before")
    @classmethod
    def compass_direction(cls, v):
        return _direction_to_bearing(v)

    def to_drift_vector(self) -> DriftVector:
        if self.convention == "from":
            return wind_drift(self.direction, self.speed_kts, self.duration_hours)
        return current_set(self.direction, self.speed_kts, self.duration_hours)


class JourneyLegModel(BaseModel):
    """A dead reckoning exercise: start, heading, speed, time and drift."""
    start: PositionModel
    heading_deg: float = Field(..., ge=0, le=360, allow_inf_nan=False)
    speed_kts: float = Field(..., ge=0, allow_inf_nan=False)
    duration_hours: float = Field(..., ge=0, allow_inf_nan=False)
    drift: List[DriftVectorModel] = Field(default_factory=list)

    @field_validator("heading_deg", mode="before")
    @classmethod
    def compass_heading(cls, v):
        return _direction_to_bearing(v)

    def to_leg(self) -> JourneyLeg:
        return JourneyLeg(
            start=self.start.to_coordinate(),
            heading=self.heading_deg,
            speed_kts=self.speed_kts,
            duration_hours=self.duration_hours,
            drift=tuple(d.to_drift_vector() for d in self.drift),
        )
