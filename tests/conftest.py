"""Shared fixtures: an in-memory trajectory store over a synthetic grid."""

from __future__ import annotations

import pytest

from gsp_calculator.trajectory.models import TrajectorySample
from gsp_calculator.trajectory.storage import TrajectoryStore

GRID_SPINS = (2000.0, 4000.0, 6000.0, 8000.0, 10000.0)
GRID_VLAS = (10.0, 15.0, 20.0, 25.0, 30.0)
GRID_SPEEDS = tuple(float(s) for s in range(20, 190, 10))

# Carry in metres per mph of ball speed, identical in every bucket.
CARRY_PER_MPH = 1.25


def grid_samples() -> list[TrajectorySample]:
    return [
        TrajectorySample(
            ball_speed=speed, vla=vla, back_spin=spin, carry=speed * CARRY_PER_MPH
        )
        for spin in GRID_SPINS
        for vla in GRID_VLAS
        for speed in GRID_SPEEDS
    ]


@pytest.fixture
def empty_store():
    s = TrajectoryStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def grid_store():
    """Store where carry = 1.25 x speed whatever the spin and VLA."""
    s = TrajectoryStore(":memory:")
    s.save_samples(grid_samples())
    yield s
    s.close()
