"""Measured trajectory dataset.

Public API
----------
TrajectorySample    - one measured ball flight
TrajectoryMatch     - closest-trajectory query result
TrajectoryStore     - SQLite-backed nearest-match lookup
"""

from gsp_calculator.trajectory.models import TrajectoryMatch, TrajectorySample
from gsp_calculator.trajectory.storage import TrajectoryStore

__all__ = ["TrajectoryMatch", "TrajectorySample", "TrajectoryStore"]
