"""Tests for the club catalog."""

from __future__ import annotations

import pytest

from gsp_calculator.clubs import CLUBS, club_index, get_club
from gsp_calculator.errors import ConfigurationError


def test_catalog_order_is_longest_first():
    names = [c.name for c in CLUBS]
    assert names[0] == "Driver"
    assert names[-1] == "60°"
    assert len(names) == 14


def test_carry_midpoints_decrease_down_the_bag():
    midpoints = [c.carry_midpoint for c in CLUBS]
    assert midpoints == sorted(midpoints, reverse=True)


def test_envelope_averages():
    seven = get_club("7 Iron")
    assert seven.avg_spin == 6250.0
    assert seven.avg_vla == 19.0
    assert seven.carry_midpoint == 155.0


def test_club_index():
    assert club_index("Driver") == 0
    assert club_index("7 Iron") == 6


@pytest.mark.parametrize("name", ["7 iron", "Putter", ""])
def test_unknown_club_raises(name):
    with pytest.raises(ConfigurationError):
        get_club(name)
