"""ShotEngine — one object wiring the store, strategies and operations.

Strategy names from :class:`~gsp_calculator.config.EngineConfig` are resolved
here, so a misspelt name fails when the engine is built rather than on the
first request.
"""

from __future__ import annotations

import logging
import os

from gsp_calculator.config import EngineConfig, load_config
from gsp_calculator.environment.altitude import get_altitude_strategy
from gsp_calculator.environment.lie import get_offline_strategy
from gsp_calculator.environment.model import EnvironmentModel
from gsp_calculator.errors import ConfigurationError
from gsp_calculator.penalty.model import PenaltyModel
from gsp_calculator.penalty.tables import get_penalty_tables
from gsp_calculator.shots.analyzer import ClubAnalyzer
from gsp_calculator.shots.calculator import ShotCalculator
from gsp_calculator.shots.resolver import ShotResolver
from gsp_calculator.shots.schemas import CalculateCarryResponse, ClubAnalysis, ShotSuggestion
from gsp_calculator.shots.suggest import ShotSuggester, get_retry_policy
from gsp_calculator.trajectory.models import TrajectoryMatch
from gsp_calculator.trajectory.storage import TrajectoryStore

_logger = logging.getLogger(__name__)


class ShotEngine:
    """Facade over the calculator, suggester and analyzer.

    Args:
        store: Trajectory dataset shared by every operation.
        config: Strategy names; defaults to :class:`EngineConfig` defaults.

    Raises:
        ConfigurationError: If any configured strategy name is unknown.
    """

    def __init__(self, store: TrajectoryStore, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.store = store

        self.resolver = ShotResolver(
            store,
            penalty_model=PenaltyModel(get_penalty_tables(self.config.penalty_tables)),
            environment=EnvironmentModel(get_altitude_strategy(self.config.altitude_strategy)),
            offline_strategy=get_offline_strategy(self.config.offline_strategy),
        )
        self.calculator = ShotCalculator(store, self.resolver)
        self.suggester = ShotSuggester(
            store, self.resolver, retry_policy=get_retry_policy(self.config.retry_policy)
        )
        self.analyzer = ClubAnalyzer(store, self.resolver)
        _logger.debug("Shot engine ready: %s", self.config)

    @classmethod
    def from_config(cls, config: EngineConfig | None = None) -> ShotEngine:
        """Open the configured trajectory dataset and build an engine over it.

        Raises:
            ConfigurationError: If the dataset file does not exist.
        """
        config = config or load_config()
        if not os.path.isfile(config.db_path):
            raise ConfigurationError(f"Trajectory dataset not found: {config.db_path!r}")
        _logger.info("Opening trajectory store at %s", config.db_path)
        return cls(TrajectoryStore(config.db_path), config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

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
        return self.calculator.calculate_carry(
            ball_speed, spin, vla, material, up_down_lie, right_left_lie, elevation, altitude
        )

    def suggest_shot(
        self,
        target_carry: float,
        material: str,
        up_down_lie: float = 0.0,
        right_left_lie: float = 0.0,
        elevation: float = 0.0,
        altitude: float = 0.0,
    ) -> ShotSuggestion:
        return self.suggester.suggest(
            target_carry, material, up_down_lie, right_left_lie, elevation, altitude
        )

    def analyze_club(
        self,
        club: str,
        material: str,
        up_down_lie: float = 0.0,
        right_left_lie: float = 0.0,
        elevation: float = 0.0,
        altitude: float = 0.0,
        increments: int = 5,
    ) -> ClubAnalysis:
        return self.analyzer.analyze(
            club, material, up_down_lie, right_left_lie, elevation, altitude, increments
        )

    def lookup_trajectory(self, ball_speed: float, spin: float, vla: float) -> TrajectoryMatch:
        return self.calculator.lookup_trajectory(ball_speed, spin, vla)

    def optimal_trajectory(
        self, ball_speed: float, max_vla: float | None = None
    ) -> TrajectoryMatch:
        return self.calculator.optimal_trajectory(ball_speed, max_vla)

    def close(self) -> None:
        self.store.close()
