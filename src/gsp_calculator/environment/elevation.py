"""Elevation-difference carry offset.

Shots are classified into launch types by VLA and spin; each type reacts
differently to playing up or down hill.  The offset is additive (metres) and
negative for uphill targets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchProfile:
    """Launch conditions used to classify a shot."""

    speed: float
    spin: float
    vla: float


# Stand-in profile when the club is not known yet.
MID_IRON_PROFILE = LaunchProfile(speed=120.0, spin=5800.0, vla=18.0)


@dataclass(frozen=True)
class ElevationMultipliers:
    """Sensitivity per elevation band; higher means larger distance effect."""

    downhill_steep: float
    """Target more than 25 m below."""

    downhill_medium: float
    """15-25 m below."""

    downhill_mild: float
    """5-15 m below."""

    flat: float
    """Within ±5 m."""

    uphill_mild: float
    """5-15 m above."""

    uphill_medium: float
    """15-25 m above."""

    uphill_steep: float
    """More than 25 m above."""

    def for_elevation(self, elevation: float) -> float:
        """Return the multiplier of the band containing *elevation* (metres)."""
        if elevation <= -25:
            return self.downhill_steep
        if elevation <= -15:
            return self.downhill_medium
        if elevation <= -5:
            return self.downhill_mild
        if elevation <= 5:
            return self.flat
        if elevation <= 15:
            return self.uphill_mild
        if elevation <= 25:
            return self.uphill_medium
        return self.uphill_steep


@dataclass(frozen=True)
class LaunchType:
    name: str
    vla_range: tuple[float, float]
    spin_range: tuple[float, float]
    multipliers: ElevationMultipliers

    def matches(self, spin: float, vla: float) -> bool:
        return (
            self.vla_range[0] <= vla <= self.vla_range[1]
            and self.spin_range[0] <= spin <= self.spin_range[1]
        )


LAUNCH_TYPES: tuple[LaunchType, ...] = (
    LaunchType("Low Spin Driver", (0, 20), (0, 2000),
               ElevationMultipliers(1.5, 1.3, 1.2, 1.0, 1.2, 1.5, 1.8)),
    LaunchType("Medium Spin Driver", (0, 20), (2000, 2600),
               ElevationMultipliers(1.45, 1.35, 1.15, 1.0, 1.15, 1.45, 1.65)),
    LaunchType("High Spin Woods/Hybrids", (0, 22), (2600, 3500),
               ElevationMultipliers(1.4, 1.3, 1.15, 1.0, 1.2, 1.4, 1.6)),
    LaunchType("Low/Mid Irons", (8, 22), (3500, 5000),
               ElevationMultipliers(1.4, 1.15, 1.05, 1.0, 1.05, 1.15, 1.25)),
    LaunchType("Mid Irons", (14, 23), (4500, 5800),
               ElevationMultipliers(1.4, 1.1, 1.05, 1.0, 1.05, 1.15, 1.3)),
    LaunchType("Mid/High Irons", (14, 23), (5800, 7500),
               ElevationMultipliers(1.08, 1.05, 1.01, 1.0, 1.01, 1.07, 1.1)),
    LaunchType("High Irons", (16, 30), (6000, 9000),
               ElevationMultipliers(0.95, 0.98, 0.99, 1.0, 1.0, 1.1, 1.2)),
    LaunchType("Wedges", (21, 70), (9000, 10000),
               ElevationMultipliers(0.9, 0.95, 0.98, 1.0, 0.98, 0.95, 0.9)),
    LaunchType("High Loft Wedges", (22, 70), (10000, 99999),
               ElevationMultipliers(0.8, 0.9, 0.95, 1.0, 0.95, 0.9, 0.8)),
)

DEFAULT_LAUNCH_TYPE = LAUNCH_TYPES[4]  # Mid Irons


def classify_launch(spin: float, vla: float) -> LaunchType:
    """Return the first launch type whose ranges contain the shot."""
    for launch_type in LAUNCH_TYPES:
        if launch_type.matches(spin, vla):
            return launch_type
    return DEFAULT_LAUNCH_TYPE


def distance_scale(distance: float) -> float:
    """Damping for short shots: 0.7 at 0 m rising to 1.0 at 200 m and beyond."""
    return 0.7 + min(distance / 200.0, 1.0) * 0.3


def elevation_modifier(
    distance: float,
    elevation: float,
    profile: LaunchProfile = MID_IRON_PROFILE,
) -> float:
    """Metres to add to *distance* for a target *elevation* metres above the ball."""
    launch_type = classify_launch(profile.spin, profile.vla)
    multiplier = launch_type.multipliers.for_elevation(elevation)
    scale = distance_scale(distance)
    _logger.debug(
        "elevation %.1f m: launch type %s, multiplier %.2f, scale %.3f",
        elevation, launch_type.name, multiplier, scale,
    )
    return -elevation * multiplier * scale
