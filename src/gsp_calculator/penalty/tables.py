"""Shared piecewise-linear penalty tables.

Speed-indexed tables hold 16 samples per material segment (0..150 mph in
10 mph steps); VLA-indexed tables hold 10 samples per segment (0..45 degrees
in 5 degree steps).  A material selects its segment through the offsets in
:mod:`gsp_calculator.penalty.materials`.

Two revisions exist: ``legacy`` (the tuned default) and ``revised``, which
smooths the low-VLA segments and the sand speed ramp.
"""

from __future__ import annotations

from dataclasses import dataclass

from gsp_calculator.errors import ConfigurationError

SPEED_STEP = 10.0
SPEED_MAX = 150.0
SPEED_LAST_BUCKET = 15

VLA_STEP = 5.0
VLA_MAX = 45.0
VLA_LAST_BUCKET = 9


@dataclass(frozen=True)
class PenaltyTables:
    """One revision of the six multiplier tables."""

    name: str
    speed_to_speed: tuple[float, ...]
    speed_to_spin: tuple[float, ...]
    speed_to_vla: tuple[float, ...]
    vla_to_speed: tuple[float, ...]
    vla_to_spin: tuple[float, ...]
    vla_to_vla: tuple[float, ...]


_SPEED_TO_VLA = (1.0,) * 80

_VLA_TO_VLA = (
    1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
    1.0, 0.98, 0.98, 0.98, 0.98, 0.98, 0.98, 0.98, 0.98, 0.98,
    1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
    1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
    1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
)

LEGACY = PenaltyTables(
    name="legacy",
    speed_to_speed=(
        0.98, 0.98, 0.98, 0.97, 0.97, 0.96, 0.96, 0.95,
        0.95, 0.94, 0.94, 0.94, 0.94, 0.94, 0.94, 0.94,
        0.97, 0.94, 0.91, 0.88, 0.87, 0.86, 0.86, 0.86,
        0.86, 0.86, 0.86, 0.86, 0.86, 0.84, 0.82, 0.8,
        0.985, 0.985, 0.985, 0.985, 0.985, 0.985, 0.985, 0.985,
        0.985, 0.985, 0.985, 0.985, 0.985, 0.985, 0.985, 0.985,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 0.98, 0.96, 0.9, 0.6,
        0.7, 0.72, 0.75, 0.78, 0.83, 0.88, 0.9, 0.92,
        0.93, 0.93, 0.93, 0.93, 0.93, 0.93, 0.93, 0.93,
    ),
    speed_to_spin=(
        0.6, 0.63, 0.67, 0.7, 0.73, 0.77, 0.8, 0.85,
        0.85, 0.85, 0.85, 0.85, 0.85, 0.85, 0.85, 0.85,
        0.6, 0.61, 0.65, 0.69, 0.7, 0.74, 0.76, 0.76,
        0.76, 0.76, 0.76, 0.76, 0.76, 0.76, 0.76, 0.76,
        0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95,
        0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        0.5, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
    ),
    speed_to_vla=_SPEED_TO_VLA,
    vla_to_speed=(
        0.95, 0.95, 0.98, 1.0, 1.0, 1.0, 0.98, 0.98, 0.95, 0.9,
        0.91, 0.91, 0.91, 0.92, 0.92, 0.93, 0.94, 0.94, 0.94, 0.94,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.95, 0.95, 0.95,
    ),
    vla_to_spin=(
        0.9, 0.95, 0.95, 0.95, 0.9, 0.9, 0.9, 0.9, 0.9, 0.9,
        0.65, 0.68, 0.74, 0.74, 0.7, 0.7, 0.7, 0.7, 0.7, 0.7,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
    ),
    vla_to_vla=_VLA_TO_VLA,
)

REVISED = PenaltyTables(
    name="revised",
    speed_to_speed=(
        0.98, 0.98, 0.98, 0.97, 0.97, 0.96, 0.96, 0.95,
        0.95, 0.94, 0.94, 0.94, 0.94, 0.94, 0.94, 0.94,
        0.97, 0.94, 0.92, 0.9, 0.88, 0.86, 0.86, 0.86,
        0.86, 0.86, 0.86, 0.86, 0.86, 0.84, 0.82, 0.8,
        0.985, 0.985, 0.985, 0.985, 0.985, 0.985, 0.985, 0.985,
        0.985, 0.985, 0.985, 0.985, 0.985, 0.985, 0.985, 0.985,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        0.75, 0.78, 0.82, 0.84, 0.86, 0.88, 0.9, 0.92,
        0.93, 0.93, 0.93, 0.93, 0.93, 0.93, 0.93, 0.93,
    ),
    speed_to_spin=(
        0.6, 0.63, 0.67, 0.7, 0.73, 0.77, 0.8, 0.85,
        0.85, 0.85, 0.85, 0.85, 0.85, 0.85, 0.85, 0.85,
        0.6, 0.61, 0.65, 0.69, 0.7, 0.74, 0.76, 0.76,
        0.76, 0.76, 0.76, 0.76, 0.76, 0.76, 0.76, 0.76,
        0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95,
        0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95,
        0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95,
        0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95, 0.95,
        0.5, 0.525, 0.55, 0.6, 0.75, 0.825, 0.9, 0.975,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
    ),
    speed_to_vla=_SPEED_TO_VLA,
    vla_to_speed=(
        0.93, 0.935, 0.94, 0.945, 0.95, 0.955, 0.96, 0.965, 0.97, 0.98,
        0.9, 0.905, 0.91, 0.915, 0.92, 0.925, 0.93, 0.935, 0.94, 0.945,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.95, 0.95, 0.95,
    ),
    vla_to_spin=(
        0.9, 0.91, 0.915, 0.92, 0.925, 0.93, 0.935, 0.94, 0.945, 0.95,
        0.65, 0.68, 0.74, 0.74, 0.7, 0.7, 0.7, 0.7, 0.7, 0.7,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
    ),
    vla_to_vla=_VLA_TO_VLA,
)

TABLE_REVISIONS: dict[str, PenaltyTables] = {t.name: t for t in (LEGACY, REVISED)}


def get_penalty_tables(name: str) -> PenaltyTables:
    """Return the table revision registered as *name*.

    Raises:
        ConfigurationError: If no revision has that name.
    """
    try:
        return TABLE_REVISIONS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown penalty table revision {name!r}; "
            f"expected one of {sorted(TABLE_REVISIONS)}"
        ) from None
