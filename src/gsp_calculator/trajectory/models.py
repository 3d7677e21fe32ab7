"""Trajectory data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class TrajectorySample:
    """One measured ball flight from the precomputed dataset."""

    ball_speed: float
    """Ball speed at launch, mph."""

    vla: float
    """Vertical launch angle, degrees."""

    back_spin: float
    """Back spin, rpm."""

    carry: float
    """Carry distance, metres."""

    offline: float = 0.0
    """Lateral distance at landing, metres (positive = right)."""

    hla: float = 0.0
    """Horizontal launch angle, degrees."""

    spin_axis: float = 0.0
    """Spin axis tilt, degrees."""

    def as_row(self) -> tuple:
        """Column order of the ``trajectories`` table."""
        return (
            self.ball_speed,
            self.vla,
            self.hla,
            self.back_spin,
            self.spin_axis,
            self.carry,
            self.offline,
        )


@dataclass
class TrajectoryMatch:
    """Result of a closest-trajectory query.

    ``ball_speed`` and ``carry`` reflect the queried speed when interpolation
    took place; the remaining fields come from the matched sample unchanged.
    """

    ball_speed: float
    vla: float
    back_spin: float
    carry: float
    offline: float
    hla: float
    spin_axis: float

    @classmethod
    def from_row(cls, row: Mapping) -> TrajectoryMatch:
        """Create a :class:`TrajectoryMatch` from a ``trajectories`` row.

        ``Offline``, ``HLA`` and ``SpinAxis`` are optional; trimmed datasets
        that dropped them read as 0.
        """
        columns = set(row.keys())

        def optional(name: str) -> float:
            if name not in columns or row[name] is None:
                return 0.0
            return float(row[name])

        return cls(
            ball_speed=float(row["BallSpeed"]),
            vla=float(row["VLA"]),
            back_spin=float(row["BackSpin"]),
            carry=float(row["Carry"]),
            offline=optional("Offline"),
            hla=optional("HLA"),
            spin_axis=optional("SpinAxis"),
        )
