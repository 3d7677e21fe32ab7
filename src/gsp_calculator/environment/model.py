"""Combine altitude and elevation into an environment-adjusted carry."""

from __future__ import annotations

from gsp_calculator.environment.altitude import TUNED, AltitudeModifierStrategy
from gsp_calculator.environment.elevation import (
    MID_IRON_PROFILE,
    LaunchProfile,
    elevation_modifier,
)


class EnvironmentModel:
    """Apply (and invert) the altitude and elevation modifiers.

    Args:
        altitude_strategy: How carry scales with altitude.
    """

    def __init__(self, altitude_strategy: AltitudeModifierStrategy = TUNED) -> None:
        self.altitude_strategy = altitude_strategy

    def altitude_factor(self, altitude_ft: float) -> float:
        return self.altitude_strategy.factor(altitude_ft)

    def carry(
        self,
        carry: float,
        elevation: float,
        altitude_ft: float,
        profile: LaunchProfile = MID_IRON_PROFILE,
    ) -> float:
        """Carry the ball reaches after elevation and altitude are applied."""
        offset = elevation_modifier(carry, elevation, profile)
        return (carry + offset) * self.altitude_factor(altitude_ft)

    def needed_carry(
        self,
        target: float,
        elevation: float,
        altitude_ft: float,
        profile: LaunchProfile = MID_IRON_PROFILE,
    ) -> float:
        """Sea-level, flat-ground carry that plays as *target* on this hole.

        The elevation offset is evaluated at *target* rather than at the
        unknown base carry, so this is an approximate inverse of :meth:`carry`.
        """
        offset = elevation_modifier(target, elevation, profile)
        return (target - offset) / self.altitude_factor(altitude_ft)
