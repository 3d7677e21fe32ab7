"""Tests for TrajectoryStore."""

from __future__ import annotations

import sqlite3

import pytest

from gsp_calculator.errors import ConfigurationError
from gsp_calculator.trajectory.models import TrajectorySample
from gsp_calculator.trajectory.storage import TrajectoryStore


def make_sample(**overrides) -> TrajectorySample:
    defaults = dict(ball_speed=100.0, vla=20.0, back_spin=6000.0, carry=120.0)
    defaults.update(overrides)
    return TrajectorySample(**defaults)


@pytest.fixture
def store():
    s = TrajectoryStore(":memory:")
    yield s
    s.close()


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def test_save_samples_returns_written_count(store):
    written = store.save_samples([make_sample(), make_sample(ball_speed=110.0)])
    assert written == 2
    assert store.count() == 2


def test_samples_persist_across_connections(tmp_path):
    db_path = str(tmp_path / "trajectories.db")
    first = TrajectoryStore(db_path)
    first.save_samples([make_sample()])
    first.close()

    second = TrajectoryStore(db_path)
    try:
        assert second.count() == 1
        match = second.find_closest_trajectory(100.0, 6000.0, 20.0)
        assert match.carry == pytest.approx(120.0)
    finally:
        second.close()


# ---------------------------------------------------------------------------
# Closest trajectory: speed interpolation
# ---------------------------------------------------------------------------

def test_empty_store_returns_none(store):
    assert store.find_closest_trajectory(100.0, 6000.0, 20.0) is None


def test_interpolates_carry_between_bracketing_speeds(store):
    store.save_samples([
        make_sample(ball_speed=100.0, carry=120.0),
        make_sample(ball_speed=110.0, carry=135.0),
    ])
    match = store.find_closest_trajectory(105.0, 6000.0, 20.0)
    assert match.ball_speed == pytest.approx(105.0)
    assert match.carry == pytest.approx(127.5)
    assert match.back_spin == 6000.0
    assert match.vla == 20.0


def test_exact_speed_returns_sample_carry(store):
    store.save_samples([
        make_sample(ball_speed=100.0, carry=120.0),
        make_sample(ball_speed=110.0, carry=135.0),
    ])
    assert store.find_closest_trajectory(110.0, 6000.0, 20.0).carry == pytest.approx(135.0)


def test_speed_above_dataset_returns_fastest_sample_unchanged(store):
    store.save_samples([
        make_sample(ball_speed=100.0, carry=120.0),
        make_sample(ball_speed=110.0, carry=135.0, offline=1.5),
    ])
    match = store.find_closest_trajectory(150.0, 6000.0, 20.0)
    assert match.ball_speed == 110.0
    assert match.carry == 135.0
    assert match.offline == 1.5


def test_speed_below_dataset_returns_slowest_sample_unchanged(store):
    store.save_samples([
        make_sample(ball_speed=100.0, carry=120.0),
        make_sample(ball_speed=110.0, carry=135.0),
    ])
    match = store.find_closest_trajectory(40.0, 6000.0, 20.0)
    assert match.ball_speed == 100.0
    assert match.carry == 120.0


# ---------------------------------------------------------------------------
# Closest trajectory: bucket selection
# ---------------------------------------------------------------------------

def test_bucket_score_weights_spin_and_vla(store):
    # spin 6100 scores 100/200 = 0.5, VLA 22 scores 2/2 = 1.0
    store.save_samples([
        make_sample(back_spin=6100.0, vla=20.0, carry=111.0),
        make_sample(back_spin=6000.0, vla=22.0, carry=222.0),
    ])
    match = store.find_closest_trajectory(100.0, 6000.0, 20.0)
    assert match.back_spin == 6100.0
    assert match.carry == 111.0


def test_bucket_tie_prefers_lower_spin(store):
    # both buckets score 3.75 for spin 5500 / VLA 17.5
    store.save_samples([
        make_sample(back_spin=6000.0, vla=15.0, carry=222.0),
        make_sample(back_spin=5000.0, vla=20.0, carry=111.0),
    ])
    match = store.find_closest_trajectory(100.0, 5500.0, 17.5)
    assert match.back_spin == 5000.0


def test_interpolation_stays_inside_chosen_bucket(store):
    store.save_samples([
        make_sample(back_spin=6000.0, ball_speed=100.0, carry=120.0),
        make_sample(back_spin=6000.0, ball_speed=120.0, carry=140.0),
        make_sample(back_spin=9000.0, ball_speed=110.0, carry=500.0),
    ])
    match = store.find_closest_trajectory(110.0, 6000.0, 20.0)
    assert match.carry == pytest.approx(130.0)


def test_grid_store_is_linear_in_speed(grid_store):
    match = grid_store.find_closest_trajectory(121.5, 6250.0, 19.0)
    assert match.carry == pytest.approx(121.5 * 1.25)
    assert match.back_spin == 6000.0
    assert match.vla == 20.0


# ---------------------------------------------------------------------------
# Optimal trajectory
# ---------------------------------------------------------------------------

@pytest.fixture
def optimal_store(store):
    store.save_samples([
        make_sample(ball_speed=100.0, vla=15.0, carry=130.0),
        make_sample(ball_speed=100.0, vla=30.0, carry=140.0),
        make_sample(ball_speed=120.0, vla=15.0, carry=170.0),
    ])
    return store


def test_optimal_returns_longest_carry_at_speed(optimal_store):
    match = optimal_store.find_optimal_trajectory(100.0)
    assert match.carry == 140.0
    assert match.vla == 30.0


def test_optimal_respects_vla_cap(optimal_store):
    match = optimal_store.find_optimal_trajectory(100.0, max_vla=20.0)
    assert match.vla == 15.0


def test_optimal_falls_back_when_everything_is_over_cap(optimal_store):
    match = optimal_store.find_optimal_trajectory(100.0, max_vla=10.0)
    assert match.carry == 140.0


def test_optimal_speed_tolerance(optimal_store):
    assert optimal_store.find_optimal_trajectory(100.05) is not None
    assert optimal_store.find_optimal_trajectory(110.0) is None


def test_carry_is_non_decreasing_with_speed(grid_store):
    carries = [
        grid_store.find_closest_trajectory(speed / 2, 6250.0, 19.0).carry
        for speed in range(40, 360, 7)
    ]
    assert carries == sorted(carries)


def test_carry_is_monotonic_across_brackets_of_one_bucket(store):
    store.save_samples([
        make_sample(ball_speed=100.0, carry=120.0),
        make_sample(ball_speed=110.0, carry=135.0),
        make_sample(ball_speed=120.0, carry=142.0),
    ])
    speeds = [95.0 + 0.5 * i for i in range(61)]  # 95 .. 125 mph
    carries = [store.find_closest_trajectory(s, 6000.0, 20.0).carry for s in speeds]

    assert all(a <= b for a, b in zip(carries, carries[1:]))
    for speed, expected in ((100.0, 120.0), (110.0, 135.0), (120.0, 142.0)):
        assert carries[speeds.index(speed)] == pytest.approx(expected)
    assert carries[speeds.index(115.0)] == pytest.approx(138.5)


# ---------------------------------------------------------------------------
# Trimmed datasets
# ---------------------------------------------------------------------------

def _trimmed_dataset(path, columns: str, rows: list[tuple]) -> str:
    conn = sqlite3.connect(path)
    conn.execute(f"CREATE TABLE trajectories ({columns})")
    placeholders = ", ".join("?" for _ in rows[0])
    conn.executemany(f"INSERT INTO trajectories VALUES ({placeholders})", rows)
    conn.commit()
    conn.close()
    return str(path)


def test_six_column_dataset_reads_spin_axis_as_zero(tmp_path):
    db_path = _trimmed_dataset(
        tmp_path / "six.db",
        "BallSpeed REAL, VLA REAL, BackSpin REAL, Carry REAL, Offline REAL, HLA REAL",
        [(100.0, 20.0, 6000.0, 120.0, 1.5, 0.5), (110.0, 20.0, 6000.0, 135.0, 2.0, 0.5)],
    )
    store = TrajectoryStore(db_path)
    try:
        match = store.find_closest_trajectory(105.0, 6000.0, 20.0)
        assert match.carry == pytest.approx(127.5)
        assert match.offline == 1.5
        assert match.hla == 0.5
        assert match.spin_axis == 0.0
    finally:
        store.close()


def test_core_column_dataset_serves_every_query(tmp_path):
    db_path = _trimmed_dataset(
        tmp_path / "core.db",
        "BallSpeed REAL, VLA REAL, BackSpin REAL, Carry REAL",
        [(100.0, 15.0, 6000.0, 130.0), (100.0, 30.0, 6000.0, 140.0)],
    )
    store = TrajectoryStore(db_path)
    try:
        closest = store.find_closest_trajectory(100.0, 6000.0, 16.0)
        assert (closest.carry, closest.offline, closest.hla) == (130.0, 0.0, 0.0)
        assert store.find_optimal_trajectory(100.0, max_vla=20.0).vla == 15.0
    finally:
        store.close()


# ---------------------------------------------------------------------------
# Opening errors
# ---------------------------------------------------------------------------

def test_missing_parent_directory_raises_configuration_error(tmp_path):
    db_path = str(tmp_path / "missing" / "trajectories.db")
    with pytest.raises(ConfigurationError, match="missing"):
        TrajectoryStore(db_path)


def test_non_sqlite_file_raises_configuration_error(tmp_path):
    db_path = tmp_path / "notes.db"
    db_path.write_text("BallSpeed,VLA,BackSpin,Carry\n" * 200)
    with pytest.raises(ConfigurationError, match="notes.db"):
        TrajectoryStore(str(db_path))
