"""Altitude carry scaling: thinner air, longer flight."""

from __future__ import annotations

from dataclasses import dataclass

from gsp_calculator.errors import ConfigurationError

_FEET_PER_STEP = 500.0


@dataclass(frozen=True)
class AltitudeModifierStrategy:
    """Linear carry gain of *coefficient* per 500 ft above sea level."""

    name: str
    coefficient: float

    def factor(self, altitude_ft: float) -> float:
        """Multiplier applied to carry at *altitude_ft*."""
        return 1.0 + (altitude_ft / _FEET_PER_STEP) * self.coefficient


TUNED = AltitudeModifierStrategy("tuned", 0.0075)
ONE_PERCENT = AltitudeModifierStrategy("one_percent", 0.01)

ALTITUDE_STRATEGIES: dict[str, AltitudeModifierStrategy] = {
    s.name: s for s in (TUNED, ONE_PERCENT)
}


def get_altitude_strategy(name: str) -> AltitudeModifierStrategy:
    """Return the altitude strategy registered as *name*.

    Raises:
        ConfigurationError: If no strategy has that name.
    """
    try:
        return ALTITUDE_STRATEGIES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown altitude strategy {name!r}; "
            f"expected one of {sorted(ALTITUDE_STRATEGIES)}"
        ) from None
