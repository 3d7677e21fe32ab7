"""ShotResolver — launch parameters + conditions → carry and deviation.

The single evaluation primitive shared by direct carry calculation, the
suggestion search and the club analyzer.  No retries happen here.
"""

from __future__ import annotations

import logging

from gsp_calculator.environment.elevation import LaunchProfile
from gsp_calculator.environment.lie import (
    OfflineDeviationStrategy,
    SineOfflineDeviation,
    modified_lie_vla,
)
from gsp_calculator.environment.model import EnvironmentModel
from gsp_calculator.penalty.model import PenaltyModel
from gsp_calculator.shots.models import ShotRequest, ShotResult
from gsp_calculator.trajectory.storage import TrajectoryStore

_logger = logging.getLogger(__name__)


class ShotResolver:
    """Resolve one shot against the trajectory store.

    Parameters
    ----------
    store:
        Trajectory dataset to interpolate carry from.
    penalty_model:
        Material penalties; defaults to the legacy tables.
    environment:
        Altitude/elevation modifiers; defaults to the tuned altitude strategy.
    offline_strategy:
        Lateral deviation formula; defaults to :class:`SineOfflineDeviation`.
    """

    def __init__(
        self,
        store: TrajectoryStore,
        penalty_model: PenaltyModel | None = None,
        environment: EnvironmentModel | None = None,
        offline_strategy: OfflineDeviationStrategy | None = None,
    ) -> None:
        self.store = store
        self.penalty_model = penalty_model or PenaltyModel()
        self.environment = environment or EnvironmentModel()
        self.offline_strategy = offline_strategy or SineOfflineDeviation()

    def resolve(self, request: ShotRequest) -> ShotResult | None:
        """Return the resolved shot, or ``None`` when the store has no match.

        Raises:
            ConfigurationError: If ``request.material`` is unknown.
        """
        factors = self.penalty_model.penalty(request.material, request.speed, request.vla)
        adjusted_speed = request.speed * factors.speed
        adjusted_spin = request.spin * factors.spin
        modified_vla = modified_lie_vla(request.vla * factors.vla, request.up_down_lie)

        match = self.store.find_closest_trajectory(adjusted_speed, adjusted_spin, modified_vla)
        if match is None:
            _logger.debug(
                "no trajectory for %s: speed=%.1f spin=%.0f vla=%.1f",
                request.material, adjusted_speed, adjusted_spin, modified_vla,
            )
            return None

        profile = LaunchProfile(speed=adjusted_speed, spin=adjusted_spin, vla=modified_vla)
        env_carry = self.environment.carry(
            match.carry, request.elevation, request.altitude, profile
        )
        return ShotResult(
            request=request,
            adjusted_speed=adjusted_speed,
            adjusted_spin=adjusted_spin,
            adjusted_vla=modified_vla,
            carry=match.carry,
            env_carry=env_carry,
            offline_deviation=self.offline_deviation(
                modified_vla, request.right_left_lie, env_carry
            ),
            speed_penalty=factors.speed,
            spin_penalty=factors.spin,
            vla_penalty=factors.vla,
        )

    def offline_deviation(self, vla: float, lie_degrees: float, carry: float) -> float:
        """Lateral deviation for a right/left lie using the configured formula."""
        return self.offline_strategy.deviation(vla, lie_degrees, carry)
