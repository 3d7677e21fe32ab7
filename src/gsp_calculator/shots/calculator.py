"""Direct carry calculation and trajectory lookup."""

from __future__ import annotations

from gsp_calculator.errors import NoDataError
from gsp_calculator.shots.models import ShotRequest
from gsp_calculator.shots.resolver import ShotResolver
from gsp_calculator.shots.schemas import (
    CalculateCarryRequest,
    CalculateCarryResponse,
    OptimalTrajectoryRequest,
    TrajectoryLookupRequest,
    validate_request,
)
from gsp_calculator.trajectory.models import TrajectoryMatch
from gsp_calculator.trajectory.storage import TrajectoryStore


class ShotCalculator:
    """Carry for a fully specified launch.

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

    def calculate_carry(
        self,
        ball_speed: float,
        spin: float,
        vla: float,
        material: str,
        up_down_lie: float = 0.0,
        right_left_lie: float = 0.0,
        elevation: float = 0.0,
        altitude: float = 0.0,
    ) -> CalculateCarryResponse:
        """Resolve the launch and report raw, penalised and environment carry.

        Raises:
            InvalidInputError: If a launch parameter is out of range.
            ConfigurationError: If *material* is unknown.
            NoDataError: If the penalised or the raw launch matches no stored
                trajectory.
        """
        req = validate_request(
            CalculateCarryRequest,
            ball_speed=ball_speed,
            spin=spin,
            vla=vla,
            material=material,
            up_down_lie=up_down_lie,
            right_left_lie=right_left_lie,
            elevation=elevation,
            altitude=altitude,
        )
        result = self.resolver.resolve(
            ShotRequest(
                material=req.material,
                speed=req.ball_speed,
                spin=req.spin,
                vla=req.vla,
                up_down_lie=req.up_down_lie,
                right_left_lie=req.right_left_lie,
                elevation=req.elevation,
                altitude=req.altitude,
            )
        )
        if result is None:
            raise NoDataError(
                f"No trajectory data for speed={req.ball_speed} spin={req.spin} "
                f"vla={req.vla} on {req.material}"
            )

        raw = self.store.find_closest_trajectory(req.ball_speed, req.spin, req.vla)
        if raw is None:
            raise NoDataError(
                f"No raw trajectory data for speed={req.ball_speed} spin={req.spin} vla={req.vla}"
            )
        return CalculateCarryResponse(
            material=req.material,
            raw_speed=req.ball_speed,
            raw_spin=req.spin,
            raw_vla=req.vla,
            carry_raw=raw.carry,
            carry_modified=result.carry,
            env_carry=result.env_carry,
            offline_deviation=result.offline_deviation,
            speed_modified=result.adjusted_speed,
            spin_modified=result.adjusted_spin,
            vla_modified=result.adjusted_vla,
            speed_penalty=result.speed_penalty,
            spin_penalty=result.spin_penalty,
            vla_penalty=result.vla_penalty,
        )

    def lookup_trajectory(self, ball_speed: float, spin: float, vla: float) -> TrajectoryMatch:
        """Closest stored trajectory for an unpenalised launch.

        Raises:
            InvalidInputError: If a launch parameter is out of range.
            NoDataError: If the store is empty.
        """
        req = validate_request(TrajectoryLookupRequest, ball_speed=ball_speed, spin=spin, vla=vla)
        match = self.store.find_closest_trajectory(req.ball_speed, req.spin, req.vla)
        if match is None:
            raise NoDataError("No trajectory data available")
        return match

    def optimal_trajectory(
        self, ball_speed: float, max_vla: float | None = None
    ) -> TrajectoryMatch:
        """Longest-carrying stored sample at *ball_speed*.

        Samples launched above *max_vla* only win when nothing under the cap
        was measured at that speed.

        Raises:
            InvalidInputError: If *ball_speed* or *max_vla* is out of range.
            NoDataError: If no sample lies within 0.1 mph of *ball_speed*.
        """
        req = validate_request(OptimalTrajectoryRequest, ball_speed=ball_speed, max_vla=max_vla)
        match = self.store.find_optimal_trajectory(req.ball_speed, req.max_vla)
        if match is None:
            raise NoDataError(f"No trajectory measured at {req.ball_speed} mph")
        return match
