"""Club catalog: nominal launch and carry envelope per club.

Ordered longest (Driver) to shortest (60° wedge); a lower index is a
stronger club.  Speeds in mph, spin in rpm, VLA in degrees, carry in metres.
"""

from __future__ import annotations

from dataclasses import dataclass

from gsp_calculator.errors import ConfigurationError


@dataclass(frozen=True)
class ClubEnvelope:
    name: str
    spin_min: float
    spin_max: float
    speed_min: float
    speed_max: float
    vla_min: float
    vla_max: float
    carry_min: float
    carry_max: float

    @property
    def avg_spin(self) -> float:
        return (self.spin_min + self.spin_max) / 2

    @property
    def avg_vla(self) -> float:
        return (self.vla_min + self.vla_max) / 2

    @property
    def carry_midpoint(self) -> float:
        return (self.carry_min + self.carry_max) / 2


CLUBS: tuple[ClubEnvelope, ...] = (
    ClubEnvelope("Driver", 1400, 3800, 153, 170, 11, 18, 225, 275),
    ClubEnvelope("3 Wood", 1800, 4200, 145, 157, 10, 15, 205, 235),
    ClubEnvelope("3 Hybrid", 2000, 4500, 134, 149, 12, 18, 185, 215),
    ClubEnvelope("3 Iron", 3500, 4800, 132, 143, 13, 18, 180, 205),
    ClubEnvelope("5 Iron", 4000, 5700, 128, 137, 15, 18, 165, 185),
    ClubEnvelope("6 Iron", 4600, 6500, 120, 133, 15, 21, 158, 175),
    ClubEnvelope("7 Iron", 5000, 7500, 116, 127, 16, 22, 145, 165),
    ClubEnvelope("8 Iron", 6300, 8500, 110, 120, 17, 23, 130, 149),
    ClubEnvelope("9 Iron", 7300, 9500, 102, 114, 20, 25, 118, 138),
    ClubEnvelope("PW", 8000, 10500, 95, 106, 21, 27, 105, 128),
    ClubEnvelope("48°", 8500, 10500, 93, 102, 23, 28, 98, 115),
    ClubEnvelope("50°", 8700, 11200, 86, 94, 24, 29, 90, 110),
    ClubEnvelope("54°", 9800, 11500, 50, 90, 27, 31, 50, 96),
    ClubEnvelope("60°", 9800, 12000, 30, 80, 27, 31, 30, 82),
)


def club_index(name: str) -> int:
    """Position of the club called *name* in :data:`CLUBS`.

    Raises:
        ConfigurationError: If no club has that name.
    """
    for i, club in enumerate(CLUBS):
        if club.name == name:
            return i
    raise ConfigurationError(
        f"Unknown club {name!r}; expected one of {[c.name for c in CLUBS]}"
    )


def get_club(name: str) -> ClubEnvelope:
    """Return the envelope of the club called *name* (exact match)."""
    return CLUBS[club_index(name)]
