"""Shot resolution, carry calculation, suggestion search and club analysis.

Public API
----------
ShotEngine          - configured facade over every operation
ShotResolver        - launch + conditions -> carry and offline deviation
ShotCalculator      - calculate_carry / lookup_trajectory / optimal_trajectory
ShotSuggester       - target carry -> club and launch
ClubAnalyzer        - carry profile across a club's speed range
"""

from gsp_calculator.shots.analyzer import ClubAnalyzer
from gsp_calculator.shots.calculator import ShotCalculator
from gsp_calculator.shots.engine import ShotEngine
from gsp_calculator.shots.models import ShotRequest, ShotResult
from gsp_calculator.shots.resolver import ShotResolver
from gsp_calculator.shots.schemas import (
    AnalyzeClubRequest,
    CalculateCarryRequest,
    CalculateCarryResponse,
    ClubAnalysis,
    OptimalTrajectoryRequest,
    ShotIncrement,
    ShotSuggestion,
    SuggestShotRequest,
)
from gsp_calculator.shots.suggest import (
    ANY,
    RETRY_POLICIES,
    SIGNIFICANT,
    RetryPolicy,
    ShotSuggester,
    get_retry_policy,
)

__all__ = [
    "ANY",
    "AnalyzeClubRequest",
    "CalculateCarryRequest",
    "CalculateCarryResponse",
    "ClubAnalysis",
    "ClubAnalyzer",
    "OptimalTrajectoryRequest",
    "RETRY_POLICIES",
    "RetryPolicy",
    "SIGNIFICANT",
    "ShotCalculator",
    "ShotEngine",
    "ShotIncrement",
    "ShotRequest",
    "ShotResolver",
    "ShotResult",
    "ShotSuggester",
    "ShotSuggestion",
    "SuggestShotRequest",
    "get_retry_policy",
]
