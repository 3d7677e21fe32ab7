"""Shot suggestion: which club and launch reach a target carry.

Search outline
--------------
1. Guess a club from the penalty-adjusted carry envelopes.
2. Sample a handful of speeds for that club and keep the closest carry.
3. If still more than ``ACCEPTABLE_DIFF`` metres off, try the adjacent club
   in the direction of the miss and keep it when the retry policy accepts it.
4. Linearly correct the result so its estimated carry equals the target.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gsp_calculator.clubs.catalog import CLUBS, ClubEnvelope
from gsp_calculator.errors import (
    ConfigurationError,
    NoDataError,
    NoSuitableClubError,
    NoValidTrajectoryError,
)
from gsp_calculator.shots.models import ShotRequest, ShotResult
from gsp_calculator.shots.resolver import ShotResolver
from gsp_calculator.shots.schemas import ShotSuggestion, SuggestShotRequest, validate_request
from gsp_calculator.trajectory.storage import TrajectoryStore

_logger = logging.getLogger(__name__)

ENVELOPE_WIDENING = 0.10
ACCEPTABLE_DIFF = 5.0
PERFECT_MATCH = 2.5
PRUNE_RATIO = 1.5
NARROW_SPEED_WINDOW = 5.0
_WIDE_WINDOW_STEPS = (0.0, 0.33, 0.66, 1.0)


@dataclass(frozen=True)
class RetryPolicy:
    """When an adjacent club's result replaces the first guess."""

    name: str
    improvement_ratio: float

    def accepts(self, current_diff: float, candidate_diff: float) -> bool:
        return candidate_diff < current_diff * self.improvement_ratio


SIGNIFICANT = RetryPolicy("significant", 0.8)
ANY = RetryPolicy("any", 1.0)

RETRY_POLICIES: dict[str, RetryPolicy] = {p.name: p for p in (SIGNIFICANT, ANY)}


def get_retry_policy(name: str) -> RetryPolicy:
    """Return the retry policy registered as *name*.

    Raises:
        ConfigurationError: If no policy has that name.
    """
    try:
        return RETRY_POLICIES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown retry policy {name!r}; expected one of {sorted(RETRY_POLICIES)}"
        ) from None


def candidate_speeds(club: ClubEnvelope, target: float) -> list[float]:
    """Raw ball speeds to sample for *club* when aiming at *target* metres.

    The club's nominal speed range is stretched down for targets shorter
    than its carry midpoint and up for longer ones.
    """
    ratio = target / club.carry_midpoint
    low = club.speed_min * min(ratio, 1.0)
    high = club.speed_max * max(ratio, 1.0)
    span = high - low
    if span <= NARROW_SPEED_WINDOW:
        return [low, (low + high) / 2, high]
    return [low + span * step for step in _WIDE_WINDOW_STEPS]


class ShotSuggester:
    """Search the club catalog for a launch that carries a target distance.

    Parameters
    ----------
    store:
        Trajectory dataset; also queried directly for unpenalised carry.
    resolver:
        Shared resolver; its penalty and environment models drive the
        club guess too.
    retry_policy:
        Acceptance rule for the adjacent-club retry.
    clubs:
        Catalog to search, strongest first.
    """

    def __init__(
        self,
        store: TrajectoryStore,
        resolver: ShotResolver | None = None,
        retry_policy: RetryPolicy = SIGNIFICANT,
        clubs: tuple[ClubEnvelope, ...] = CLUBS,
    ) -> None:
        self.store = store
        self.resolver = resolver or ShotResolver(store)
        self.retry_policy = retry_policy
        self.clubs = clubs

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def suggest(
        self,
        target_carry: float,
        material: str,
        up_down_lie: float = 0.0,
        right_left_lie: float = 0.0,
        elevation: float = 0.0,
        altitude: float = 0.0,
    ) -> ShotSuggestion:
        """Suggest a club and launch whose estimated carry is *target_carry*.

        Raises:
            InvalidInputError: If an argument is out of range.
            ConfigurationError: If *material* is unknown.
            NoSuitableClubError: If no club envelope covers the target.
            NoValidTrajectoryError: If the guessed club resolves to no trajectory.
            NoDataError: If the unpenalised carry lookup finds nothing.
        """
        req = validate_request(
            SuggestShotRequest,
            target_carry=target_carry,
            material=material,
            up_down_lie=up_down_lie,
            right_left_lie=right_left_lie,
            elevation=elevation,
            altitude=altitude,
        )
        index = self.guess_club(req.target_carry, req.material, req.elevation, req.altitude)
        club = self.clubs[index]
        _logger.info("Guessed %s for %.1f m on %s", club.name, req.target_carry, req.material)

        best = self.try_club(club, req)
        best_diff = abs(best.estimated_carry - req.target_carry)

        if best_diff > ACCEPTABLE_DIFF:
            step = -1 if best.estimated_carry < req.target_carry else 1
            neighbour = index + step
            if 0 <= neighbour < len(self.clubs):
                best = self._retry(best, best_diff, self.clubs[neighbour], req)

        return self._finalize(best, req)

    def guess_club(
        self, target: float, material: str, elevation: float = 0.0, altitude: float = 0.0
    ) -> int:
        """Index of the club whose adjusted carry range best covers *target*.

        Raises:
            NoSuitableClubError: If the needed carry is outside every widened range.
        """
        needed = self.resolver.environment.needed_carry(target, elevation, altitude)
        penalty = self.resolver.penalty_model

        best_index: int | None = None
        best_distance = float("inf")
        for i, club in enumerate(self.clubs):
            low = club.carry_min * penalty.speed_penalty(material, club.speed_min, club.avg_vla)
            high = club.carry_max * penalty.speed_penalty(material, club.speed_max, club.avg_vla)
            if not low * (1 - ENVELOPE_WIDENING) <= needed <= high * (1 + ENVELOPE_WIDENING):
                continue
            distance = abs(needed - (low + high) / 2)
            if distance < best_distance:
                best_index, best_distance = i, distance

        if best_index is None:
            raise NoSuitableClubError(
                f"No suitable club found for {target} m (needed carry {needed:.1f} m)"
            )
        return best_index

    def try_club(self, club: ClubEnvelope, req: SuggestShotRequest) -> ShotSuggestion:
        """Best sampled launch for *club*, before the final correction.

        Raises:
            NoValidTrajectoryError: If no sampled speed resolves.
            NoDataError: If the unpenalised carry lookup finds nothing.
        """
        target = req.target_carry
        best: ShotResult | None = None
        best_diff = float("inf")

        for speed in candidate_speeds(club, target):
            result = self.resolver.resolve(
                ShotRequest(
                    material=req.material,
                    speed=speed,
                    spin=club.avg_spin,
                    vla=club.avg_vla,
                    up_down_lie=req.up_down_lie,
                    right_left_lie=req.right_left_lie,
                    elevation=req.elevation,
                    altitude=req.altitude,
                )
            )
            if result is None:
                continue
            diff = abs(target - result.env_carry)
            if diff < best_diff:
                best, best_diff = result, diff
                if diff <= PERFECT_MATCH:
                    break
            elif diff > best_diff * PRUNE_RATIO:
                # Carry grows with speed; later samples only get further off.
                break

        if best is None:
            raise NoValidTrajectoryError(f"No valid trajectories found for club {club.name}")

        raw = self.store.find_closest_trajectory(best.request.speed, club.avg_spin, club.avg_vla)
        if raw is None:
            raise NoDataError(f"No raw trajectory data for club {club.name}")

        _logger.debug(
            "%s: speed %.1f -> %.1f m (%.1f m off)",
            club.name, best.request.speed, best.env_carry, best_diff,
        )
        return ShotSuggestion(
            club_name=club.name,
            ball_speed=best.adjusted_speed,
            raw_ball_speed=best.request.speed,
            spin=best.adjusted_spin,
            raw_spin=club.avg_spin,
            vla=best.adjusted_vla,
            raw_vla=club.avg_vla,
            raw_carry=raw.carry,
            estimated_carry=best.env_carry,
            offline_aim_adjustment=-best.offline_deviation,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _retry(
        self,
        best: ShotSuggestion,
        best_diff: float,
        club: ClubEnvelope,
        req: SuggestShotRequest,
    ) -> ShotSuggestion:
        try:
            candidate = self.try_club(club, req)
        except NoDataError as exc:
            _logger.info("Retry with %s found no data (%s); keeping %s", club.name, exc, best.club_name)
            return best

        candidate_diff = abs(candidate.estimated_carry - req.target_carry)
        if self.retry_policy.accepts(best_diff, candidate_diff):
            _logger.info(
                "Switching %s -> %s (%.1f m -> %.1f m off)",
                best.club_name, club.name, best_diff, candidate_diff,
            )
            return candidate
        _logger.info(
            "Keeping %s; %s is %.1f m off", best.club_name, club.name, candidate_diff
        )
        return best

    def _finalize(self, best: ShotSuggestion, req: SuggestShotRequest) -> ShotSuggestion:
        target = req.target_carry
        raw_carry = best.raw_carry
        carry_diff = target - best.estimated_carry
        if carry_diff != 0:
            speed_ratio = best.ball_speed / best.raw_ball_speed
            raw_carry += carry_diff / speed_ratio

        offline = self.resolver.offline_deviation(best.vla, req.right_left_lie, target)
        return best.model_copy(
            update={
                "raw_carry": raw_carry,
                "estimated_carry": target,
                "offline_aim_adjustment": -offline,
            }
        )
