"""Pydantic request/response schemas for the engine boundary."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, Field, ValidationError

from gsp_calculator.errors import InvalidInputError

# Physical input envelope accepted from callers.
SPEED_RANGE = (2.0, 200.0)
SPIN_RANGE = (200.0, 12000.0)
VLA_RANGE = (4.0, 50.0)


class TrajectoryLookupRequest(BaseModel):
    ball_speed: float = Field(
        ..., ge=SPEED_RANGE[0], le=SPEED_RANGE[1], allow_inf_nan=False,
        description="Ball speed in mph",
    )
    spin: float = Field(
        ..., ge=SPIN_RANGE[0], le=SPIN_RANGE[1], allow_inf_nan=False,
        description="Back spin in rpm",
    )
    vla: float = Field(
        ..., ge=VLA_RANGE[0], le=VLA_RANGE[1], allow_inf_nan=False,
        description="Vertical launch angle in degrees",
    )


class OptimalTrajectoryRequest(BaseModel):
    ball_speed: float = Field(
        ..., ge=SPEED_RANGE[0], le=SPEED_RANGE[1], allow_inf_nan=False,
        description="Ball speed in mph",
    )
    max_vla: float | None = Field(
        None, ge=VLA_RANGE[0], le=VLA_RANGE[1], allow_inf_nan=False,
        description="Preferred launch-angle cap in degrees",
    )


class CalculateCarryRequest(TrajectoryLookupRequest):
    material: str
    up_down_lie: float = Field(0.0, allow_inf_nan=False)
    right_left_lie: float = Field(0.0, allow_inf_nan=False)
    elevation: float = Field(0.0, allow_inf_nan=False, description="Metres, positive = uphill")
    altitude: float = Field(0.0, ge=0, allow_inf_nan=False, description="Feet above sea level")


class SuggestShotRequest(BaseModel):
    target_carry: float = Field(..., gt=0, allow_inf_nan=False, description="Metres")
    material: str
    up_down_lie: float = Field(0.0, allow_inf_nan=False)
    right_left_lie: float = Field(0.0, allow_inf_nan=False)
    elevation: float = Field(0.0, allow_inf_nan=False)
    altitude: float = Field(0.0, ge=0, allow_inf_nan=False)


class AnalyzeClubRequest(BaseModel):
    club: str
    material: str
    up_down_lie: float = Field(0.0, allow_inf_nan=False)
    right_left_lie: float = Field(0.0, allow_inf_nan=False)
    elevation: float = Field(0.0, allow_inf_nan=False)
    altitude: float = Field(0.0, ge=0, allow_inf_nan=False)
    increments: int = Field(5, ge=2, le=100)


class CalculateCarryResponse(BaseModel):
    material: str
    raw_speed: float
    raw_spin: float
    raw_vla: float
    carry_raw: float
    carry_modified: float
    env_carry: float
    offline_deviation: float
    speed_modified: float
    spin_modified: float
    vla_modified: float
    speed_penalty: float
    spin_penalty: float
    vla_penalty: float


class ShotSuggestion(BaseModel):
    club_name: str
    ball_speed: float
    """Penalised ball speed."""
    raw_ball_speed: float
    spin: float
    raw_spin: float
    vla: float
    """Penalised, lie-modified VLA."""
    raw_vla: float
    raw_carry: float
    estimated_carry: float
    offline_aim_adjustment: float
    """Metres; positive = aim right, negative = aim left."""


class ShotIncrement(BaseModel):
    power: float
    """Fraction of the club's speed range, 0..1."""
    ball_speed: float
    spin: float
    vla: float
    raw_carry: float
    estimated_carry: float
    env_carry: float
    offline_deviation: float
    speed_penalty: float
    spin_penalty: float
    vla_penalty: float


class ClubAnalysis(BaseModel):
    request: AnalyzeClubRequest
    results: list[ShotIncrement | None]


RequestT = TypeVar("RequestT", bound=BaseModel)


def validate_request(model: type[RequestT], **values) -> RequestT:
    """Build *model* from *values*, translating validation failures.

    Raises:
        InvalidInputError: If any value is missing, non-numeric or out of range.
    """
    try:
        return model(**values)
    except ValidationError as exc:
        raise InvalidInputError(str(exc)) from exc
