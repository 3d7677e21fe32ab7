"""Lie-angle modifiers.

An up/down lie tilts the launch angle; a right/left lie pushes the ball off
line.  Both effects fade as the launch angle rises, bucketed in 5 degree
steps.

Two offline-deviation formulas are in use and selectable by name:

* ``tangent`` — effective horizontal angle ``HLA_LIE[bucket] × lie`` projected
  over the carry with ``tan``, rounded to 0.1 m.
* ``sine`` — ``carry × sin(lie)`` scaled by a factor falling linearly from
  0.95 at 10° VLA to 0.4 at 45° VLA.

Positive lie (ball above/right) gives a positive deviation (right of target).
"""

from __future__ import annotations

import math
from typing import Protocol

from gsp_calculator.errors import ConfigurationError

VLA_LIE_FACTORS = (1.0, 1.0, 0.7, 0.6, 0.55, 0.5, 0.45, 0.4, 0.3, 0.2)
HLA_LIE_FACTORS = (0.5, 0.5, 0.45, 0.4, 0.35, 0.3, 0.2, 0.1, 0.1, 0.05)

_BUCKET_DEG = 5.0


def _lie_bucket(vla: float) -> int:
    return min(max(math.floor(vla / _BUCKET_DEG), 0), len(VLA_LIE_FACTORS) - 1)


def vla_lie_factor(vla: float) -> float:
    """Share of an up/down lie that transfers into launch angle at *vla*."""
    return VLA_LIE_FACTORS[_lie_bucket(vla)]


def hla_lie_factor(vla: float) -> float:
    """Share of a right/left lie that becomes horizontal launch angle at *vla*."""
    return HLA_LIE_FACTORS[_lie_bucket(vla)]


def modified_lie_vla(vla: float, lie_degrees: float = 0.0) -> float:
    """Return *vla* adjusted for an up/down lie of *lie_degrees*."""
    return vla + vla_lie_factor(vla) * lie_degrees


def modified_lie_hla(vla: float, lie_degrees: float = 0.0) -> float:
    """Return the horizontal launch angle produced by a right/left lie."""
    return hla_lie_factor(vla) * lie_degrees


class OfflineDeviationStrategy(Protocol):
    name: str

    def deviation(self, vla: float, lie_degrees: float, carry: float) -> float:
        """Lateral distance (m) from the target line at landing."""
        ...


class TangentOfflineDeviation:
    """Offline from an effective horizontal launch angle, rounded to 0.1 m."""

    name = "tangent"

    def deviation(self, vla: float, lie_degrees: float, carry: float) -> float:
        angle = math.radians(modified_lie_hla(vla, lie_degrees))
        return round(carry * math.tan(angle), 1)


class SineOfflineDeviation:
    """Offline from ``carry × sin(lie)`` damped by launch angle.

    Parameters
    ----------
    max_factor:
        Damping at low launch (<= *reference_vla*).
    min_factor:
        Floor of the damping for high launches.
    reference_vla:
        VLA where damping starts to fall.
    fade_span:
        Degrees over which damping falls by ``max_factor - min_factor``.
    """

    name = "sine"

    def __init__(
        self,
        max_factor: float = 0.95,
        min_factor: float = 0.4,
        reference_vla: float = 10.0,
        fade_span: float = 35.0,
    ) -> None:
        self._max = max_factor
        self._min = min_factor
        self._reference_vla = reference_vla
        self._slope = (max_factor - min_factor) / fade_span

    def damping(self, vla: float) -> float:
        raw = self._max - (vla - self._reference_vla) * self._slope
        return max(self._min, min(self._max, raw))

    def deviation(self, vla: float, lie_degrees: float, carry: float) -> float:
        return carry * math.sin(math.radians(lie_degrees)) * self.damping(vla)


OFFLINE_STRATEGIES: dict[str, type] = {
    SineOfflineDeviation.name: SineOfflineDeviation,
    TangentOfflineDeviation.name: TangentOfflineDeviation,
}


def get_offline_strategy(name: str) -> OfflineDeviationStrategy:
    """Instantiate the offline strategy registered as *name*.

    Raises:
        ConfigurationError: If no strategy has that name.
    """
    try:
        cls = OFFLINE_STRATEGIES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown offline deviation strategy {name!r}; "
            f"expected one of {sorted(OFFLINE_STRATEGIES)}"
        ) from None
    return cls()
