"""TrajectoryStore — read-mostly SQLite store of measured ball flights.

Schema notes:
  - Column names follow the exported launch-monitor CSVs (``BallSpeed``,
    ``VLA``, ``HLA``, ``BackSpin``, ``SpinAxis``, ``Carry``, ``Offline``) so
    existing datasets open unchanged.  ``Offline``, ``HLA`` and ``SpinAxis``
    may be missing from trimmed datasets and then read as 0.
  - ``idx_trajectories_bucket`` covers the bucket search and both speed
    bracket queries.
  - One connection per store, shared between threads behind a lock; request
    handling never writes.
"""

from __future__ import annotations

import contextlib
import logging
import sqlite3
import threading
from collections.abc import Iterable

from gsp_calculator.errors import ConfigurationError
from gsp_calculator.trajectory.models import TrajectoryMatch, TrajectorySample

_logger = logging.getLogger(__name__)

# Weights putting spin (rpm) and VLA (degrees) on a comparable scale.
SPIN_WEIGHT = 200.0
VLA_WEIGHT = 2.0

_DDL = """
CREATE TABLE IF NOT EXISTS trajectories (
    BallSpeed REAL NOT NULL,
    VLA       REAL NOT NULL,
    HLA       REAL NOT NULL DEFAULT 0,
    BackSpin  REAL NOT NULL,
    SpinAxis  REAL NOT NULL DEFAULT 0,
    Carry     REAL NOT NULL,
    Offline   REAL NOT NULL DEFAULT 0
);

CREATE INDEX IF NOT EXISTS idx_trajectories_bucket
    ON trajectories (BackSpin, VLA, BallSpeed);
"""

_INSERT_SAMPLE = """
INSERT INTO trajectories (BallSpeed, VLA, HLA, BackSpin, SpinAxis, Carry, Offline)
VALUES (?, ?, ?, ?, ?, ?, ?)
"""

_SELECT_BUCKET = f"""
SELECT   BackSpin, VLA
FROM     trajectories
GROUP BY BackSpin, VLA
ORDER BY ABS(BackSpin - :spin) / {SPIN_WEIGHT} + ABS(VLA - :vla) / {VLA_WEIGHT},
         BackSpin,
         VLA
LIMIT    1
"""

_SELECT_BELOW = """
SELECT *
FROM   trajectories
WHERE  BackSpin = :spin AND VLA = :vla AND BallSpeed <= :speed
ORDER  BY BallSpeed DESC
LIMIT  1
"""

_SELECT_ABOVE = """
SELECT *
FROM   trajectories
WHERE  BackSpin = :spin AND VLA = :vla AND BallSpeed >= :speed
ORDER  BY BallSpeed ASC
LIMIT  1
"""

_SELECT_OPTIMAL = """
SELECT *,
       CASE WHEN :max_vla IS NOT NULL AND VLA > :max_vla THEN 1 ELSE 0 END AS over_cap
FROM   trajectories
WHERE  ABS(BallSpeed - :speed) < 0.1
ORDER  BY over_cap ASC, Carry DESC
LIMIT  1
"""


def _lerp(start: float, end: float, amount: float) -> float:
    if start == end:
        return start
    return start + (end - start) * max(0.0, min(1.0, amount))


class TrajectoryStore:
    """Answers nearest-match queries over a SQLite trajectory dataset.

    Parameters
    ----------
    db_path:
        Path to the SQLite file.  Pass ``":memory:"`` for in-process testing.

    Raises:
        ConfigurationError: If *db_path* cannot be opened as a trajectory
            dataset (missing directory, not a SQLite file).
    """

    def __init__(self, db_path: str = "data/trajectories.db") -> None:
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            for stmt in _DDL.strip().split(";"):
                stmt = stmt.strip()
                if stmt:
                    self._conn.execute(stmt)
            self._conn.commit()
        except sqlite3.Error as exc:
            raise ConfigurationError(
                f"Cannot open trajectory dataset {db_path!r}: {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def save_samples(self, samples: Iterable[TrajectorySample]) -> int:
        """Bulk-insert *samples* and return how many were written."""
        rows = [s.as_row() for s in samples]
        with self._lock:
            self._conn.executemany(_INSERT_SAMPLE, rows)
            self._conn.commit()
        return len(rows)

    def count(self) -> int:
        """Number of stored samples."""
        with self._lock:
            return self._conn.execute("SELECT COUNT(*) FROM trajectories").fetchone()[0]

    def find_closest_trajectory(
        self, ball_speed: float, spin: float, vla: float
    ) -> TrajectoryMatch | None:
        """Return the best match for the launch, carry interpolated on speed.

        The ``(BackSpin, VLA)`` bucket nearest to *spin* / *vla* is chosen
        first; within it the samples bracketing *ball_speed* are linearly
        interpolated.  With only one side of the bracket present that sample
        is returned as-is.

        Returns ``None`` when the store holds no samples.
        """
        with self._lock:
            bucket = self._conn.execute(
                _SELECT_BUCKET, {"spin": spin, "vla": vla}
            ).fetchone()
            if bucket is None:
                _logger.debug("no trajectory bucket for spin=%.0f vla=%.1f", spin, vla)
                return None
            params = {"spin": bucket["BackSpin"], "vla": bucket["VLA"], "speed": ball_speed}
            below = self._conn.execute(_SELECT_BELOW, params).fetchone()
            above = self._conn.execute(_SELECT_ABOVE, params).fetchone()

        if below is None or above is None:
            row = below if below is not None else above
            if row is None:
                return None
            return TrajectoryMatch.from_row(row)

        below_speed = float(below["BallSpeed"])
        span = float(above["BallSpeed"]) - below_speed
        if span <= 0:
            carry = float(below["Carry"])
        else:
            carry = _lerp(
                float(below["Carry"]),
                float(above["Carry"]),
                (ball_speed - below_speed) / span,
            )

        match = TrajectoryMatch.from_row(below)
        match.ball_speed = ball_speed
        match.carry = carry
        _logger.debug(
            "closest trajectory for speed=%.1f spin=%.0f vla=%.1f -> carry %.1f",
            ball_speed, spin, vla, carry,
        )
        return match

    def find_optimal_trajectory(
        self, ball_speed: float, max_vla: float | None = None
    ) -> TrajectoryMatch | None:
        """Return the longest-carrying sample at *ball_speed* (±0.1).

        Samples launched above *max_vla* are only returned when nothing
        under the cap exists at that speed.
        """
        with self._lock:
            row = self._conn.execute(
                _SELECT_OPTIMAL, {"speed": ball_speed, "max_vla": max_vla}
            ).fetchone()
        return TrajectoryMatch.from_row(row) if row is not None else None

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __del__(self) -> None:
        with contextlib.suppress(Exception):
            self._conn.close()
