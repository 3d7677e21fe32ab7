"""Shot data models used inside the engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ShotRequest:
    """Raw launch parameters plus the conditions the ball is struck in."""

    material: str
    """Ground material key (see :mod:`gsp_calculator.penalty.materials`)."""

    speed: float
    """Ball speed, mph."""

    spin: float
    """Back spin, rpm."""

    vla: float
    """Vertical launch angle, degrees."""

    up_down_lie: float = 0.0
    """Degrees; positive = ball above feet / uphill lie."""

    right_left_lie: float = 0.0
    """Degrees; positive pushes the ball right."""

    elevation: float = 0.0
    """Target height relative to the ball, metres (positive = uphill)."""

    altitude: float = 0.0
    """Course altitude above sea level, feet."""


@dataclass
class ShotResult:
    """Resolved shot: penalised launch, carry and lateral deviation.

    ``adjusted_vla`` already includes the up/down lie modification.
    """

    request: ShotRequest
    adjusted_speed: float
    adjusted_spin: float
    adjusted_vla: float

    carry: float
    """Carry interpolated from the trajectory store, metres."""

    env_carry: float
    """``carry`` after elevation and altitude, metres."""

    offline_deviation: float
    """Lateral deviation at landing, metres (positive = right)."""

    speed_penalty: float
    spin_penalty: float
    vla_penalty: float
