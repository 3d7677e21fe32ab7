"""Material penalty model.

Maps ideal launch conditions onto effective ones: every axis (speed, spin,
VLA) gets a multiplier equal to the product of a speed-indexed and a
VLA-indexed table value for the ball's material.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from gsp_calculator.penalty.materials import IDENTITY_MATERIALS, get_material
from gsp_calculator.penalty.tables import (
    LEGACY,
    SPEED_LAST_BUCKET,
    SPEED_MAX,
    SPEED_STEP,
    VLA_LAST_BUCKET,
    VLA_MAX,
    VLA_STEP,
    PenaltyTables,
)


def _lerp(start: float, end: float, amount: float) -> float:
    return start + (end - start) * amount


def _table_value(
    table: tuple[float, ...],
    offset: int,
    value: float,
    step: float,
    upper: float,
    last_bucket: int,
) -> float:
    """Piecewise-linear lookup of *value* in the segment starting at *offset*.

    *value* is clamped to ``[0, upper]``; past the last interior bucket the
    last segment entry is returned without extrapolation.
    """
    value = min(max(value, 0.0), upper)
    index = math.floor(value / step)
    if index < last_bucket:
        return _lerp(
            table[index + offset],
            table[index + 1 + offset],
            (value % step) / step,
        )
    return table[last_bucket + offset]


@dataclass(frozen=True)
class PenaltyFactors:
    """Multipliers applied to raw speed, spin and VLA."""

    speed: float
    spin: float
    vla: float


IDENTITY = PenaltyFactors(speed=1.0, spin=1.0, vla=1.0)


class PenaltyModel:
    """Compute material penalties from a table revision.

    Args:
        tables: Table revision to read multipliers from.
    """

    def __init__(self, tables: PenaltyTables = LEGACY) -> None:
        self.tables = tables

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def penalty(self, material: str, speed: float, vla: float) -> PenaltyFactors:
        """Return all three multipliers for a shot struck from *material*.

        Raises:
            ConfigurationError: If *material* is unknown.
        """
        profile = get_material(material)
        if profile.name in IDENTITY_MATERIALS:
            return IDENTITY
        t = self.tables
        return PenaltyFactors(
            speed=self._by_speed(t.speed_to_speed, profile.speed_table_offset, speed)
            * self._by_vla(t.vla_to_speed, profile.vla_table_offset, vla),
            spin=self._by_speed(t.speed_to_spin, profile.speed_table_offset, speed)
            * self._by_vla(t.vla_to_spin, profile.vla_table_offset, vla),
            vla=self._by_speed(t.speed_to_vla, profile.speed_table_offset, speed)
            * self._by_vla(t.vla_to_vla, profile.vla_table_offset, vla),
        )

    def speed_penalty(self, material: str, speed: float, vla: float) -> float:
        """Shortcut for ``penalty(...).speed``."""
        return self.penalty(material, speed, vla).speed

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _by_speed(table: tuple[float, ...], offset: int, speed: float) -> float:
        return _table_value(table, offset, speed, SPEED_STEP, SPEED_MAX, SPEED_LAST_BUCKET)

    @staticmethod
    def _by_vla(table: tuple[float, ...], offset: int, vla: float) -> float:
        return _table_value(table, offset, vla, VLA_STEP, VLA_MAX, VLA_LAST_BUCKET)
