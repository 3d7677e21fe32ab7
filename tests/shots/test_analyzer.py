"""Tests for ClubAnalyzer."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from gsp_calculator.errors import ConfigurationError, InvalidInputError, NoDataError
from gsp_calculator.shots.analyzer import ClubAnalyzer
from gsp_calculator.trajectory.models import TrajectoryMatch


@pytest.fixture
def analyzer(grid_store):
    return ClubAnalyzer(grid_store)


def test_increments_span_club_speed_range(analyzer):
    analysis = analyzer.analyze("7 Iron", "fairway", increments=3)
    assert [r.power for r in analysis.results] == [0.0, 0.5, 1.0]
    assert [r.ball_speed for r in analysis.results] == pytest.approx([116.0, 121.5, 127.0])
    assert [r.env_carry for r in analysis.results] == pytest.approx([145.0, 151.875, 158.75])


def test_increment_uses_average_spin_and_vla(analyzer):
    first = analyzer.analyze("7 Iron", "fairway", increments=2).results[0]
    assert first.spin == 6250.0
    assert first.vla == 19.0
    assert first.raw_carry == pytest.approx(145.0)
    assert first.estimated_carry == pytest.approx(145.0)


def test_request_is_echoed(analyzer):
    analysis = analyzer.analyze("PW", "rough", elevation=5.0, increments=4)
    assert analysis.request.club == "PW"
    assert analysis.request.increments == 4
    assert len(analysis.results) == 4


def test_penalties_reported_per_increment(analyzer):
    analysis = analyzer.analyze("7 Iron", "rough", increments=2)
    for increment in analysis.results:
        assert increment.speed_penalty < 1.0
        assert increment.ball_speed < 130.0
        assert increment.env_carry < increment.raw_carry


def test_empty_store_yields_no_data_increments(empty_store):
    analysis = ClubAnalyzer(empty_store).analyze("Driver", "fairway", increments=3)
    assert analysis.results == [None, None, None]


def test_unknown_club_raises(analyzer):
    with pytest.raises(ConfigurationError):
        analyzer.analyze("Putter", "fairway")


def test_single_increment_is_rejected(analyzer):
    with pytest.raises(InvalidInputError):
        analyzer.analyze("7 Iron", "fairway", increments=1)


def test_raw_lookup_miss_raises_no_data(analyzer):
    penalised = TrajectoryMatch(
        ball_speed=116.0, vla=19.0, back_spin=6250.0, carry=145.0,
        offline=0.0, hla=0.0, spin_axis=0.0,
    )
    with patch.object(
        analyzer.store, "find_closest_trajectory", side_effect=[penalised, None]
    ):
        with pytest.raises(NoDataError, match="7 Iron"):
            analyzer.analyze("7 Iron", "fairway", increments=2)
