"""Per-club carry profile across the club's speed range."""

from __future__ import annotations

import logging

from gsp_calculator.clubs.catalog import get_club
from gsp_calculator.errors import NoDataError
from gsp_calculator.shots.models import ShotRequest
from gsp_calculator.shots.resolver import ShotResolver
from gsp_calculator.shots.schemas import (
    AnalyzeClubRequest,
    ClubAnalysis,
    ShotIncrement,
    validate_request,
)
from gsp_calculator.trajectory.storage import TrajectoryStore

_logger = logging.getLogger(__name__)


class ClubAnalyzer:
    """Resolve a club at evenly spaced power levels.

    Parameters
    ----------
    store:
        Trajectory dataset.
    resolver:
        Shared resolver; a default one over *store* is built when omitted.
    """

    def __init__(self, store: TrajectoryStore, resolver: ShotResolver | None = None) -> None:
        self.store = store
        self.resolver = resolver or ShotResolver(store)

    def analyze(
        self,
        club: str,
        material: str,
        up_down_lie: float = 0.0,
        right_left_lie: float = 0.0,
        elevation: float = 0.0,
        altitude: float = 0.0,
        increments: int = 5,
    ) -> ClubAnalysis:
        """One :class:`ShotIncrement` per power step, ``None`` where no data.

        Power step *i* swings at ``speed_min + (speed_max - speed_min) * i / (increments - 1)``
        with the club's average spin and VLA.

        Raises:
            InvalidInputError: If *increments* < 2 or a condition is out of range.
            ConfigurationError: If *club* or *material* is unknown.
            NoDataError: If a resolved step has no unpenalised trajectory.
        """
        req = validate_request(
            AnalyzeClubRequest,
            club=club,
            material=material,
            up_down_lie=up_down_lie,
            right_left_lie=right_left_lie,
            elevation=elevation,
            altitude=altitude,
            increments=increments,
        )
        envelope = get_club(req.club)
        speed_span = envelope.speed_max - envelope.speed_min

        results: list[ShotIncrement | None] = []
        for i in range(req.increments):
            power = i / (req.increments - 1)
            speed = envelope.speed_min + speed_span * power
            result = self.resolver.resolve(
                ShotRequest(
                    material=req.material,
                    speed=speed,
                    spin=envelope.avg_spin,
                    vla=envelope.avg_vla,
                    up_down_lie=req.up_down_lie,
                    right_left_lie=req.right_left_lie,
                    elevation=req.elevation,
                    altitude=req.altitude,
                )
            )
            if result is None:
                results.append(None)
                continue

            raw = self.store.find_closest_trajectory(speed, envelope.avg_spin, envelope.avg_vla)
            if raw is None:
                raise NoDataError(f"No raw trajectory data for {envelope.name} at {speed:.1f} mph")
            results.append(
                ShotIncrement(
                    power=power,
                    ball_speed=result.adjusted_speed,
                    spin=result.adjusted_spin,
                    vla=result.adjusted_vla,
                    raw_carry=raw.carry,
                    estimated_carry=result.carry,
                    env_carry=result.env_carry,
                    offline_deviation=result.offline_deviation,
                    speed_penalty=result.speed_penalty,
                    spin_penalty=result.spin_penalty,
                    vla_penalty=result.vla_penalty,
                )
            )

        _logger.debug(
            "analyzed %s on %s: %d/%d increments resolved",
            envelope.name, req.material, sum(r is not None for r in results), len(results),
        )
        return ClubAnalysis(request=req, results=results)
