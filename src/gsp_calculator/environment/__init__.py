"""Lie, altitude and elevation modifiers."""

from gsp_calculator.environment.altitude import (
    ALTITUDE_STRATEGIES,
    ONE_PERCENT,
    TUNED,
    AltitudeModifierStrategy,
    get_altitude_strategy,
)
from gsp_calculator.environment.elevation import (
    LAUNCH_TYPES,
    MID_IRON_PROFILE,
    LaunchProfile,
    LaunchType,
    classify_launch,
    distance_scale,
    elevation_modifier,
)
from gsp_calculator.environment.lie import (
    OFFLINE_STRATEGIES,
    OfflineDeviationStrategy,
    SineOfflineDeviation,
    TangentOfflineDeviation,
    get_offline_strategy,
    modified_lie_hla,
    modified_lie_vla,
)
from gsp_calculator.environment.model import EnvironmentModel

__all__ = [
    "ALTITUDE_STRATEGIES",
    "AltitudeModifierStrategy",
    "EnvironmentModel",
    "LAUNCH_TYPES",
    "LaunchProfile",
    "LaunchType",
    "MID_IRON_PROFILE",
    "OFFLINE_STRATEGIES",
    "ONE_PERCENT",
    "OfflineDeviationStrategy",
    "SineOfflineDeviation",
    "TUNED",
    "TangentOfflineDeviation",
    "classify_launch",
    "distance_scale",
    "elevation_modifier",
    "get_altitude_strategy",
    "get_offline_strategy",
    "modified_lie_hla",
    "modified_lie_vla",
]
