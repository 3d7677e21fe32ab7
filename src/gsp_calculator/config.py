"""Engine configuration loaded from the environment (and an optional ``.env``).

Variables
---------
GSP_TRAJECTORY_DB       SQLite trajectory dataset path.
GSP_OFFLINE_STRATEGY    ``sine`` (default) or ``tangent``.
GSP_ALTITUDE_STRATEGY   ``tuned`` (default) or ``one_percent``.
GSP_RETRY_POLICY        ``significant`` (default) or ``any``.
GSP_PENALTY_TABLES      ``legacy`` (default) or ``revised``.

Names are only checked when a :class:`~gsp_calculator.shots.engine.ShotEngine`
is built from the config.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DB_PATH = "data/trajectories.db"


@dataclass(frozen=True)
class EngineConfig:
    """Names of the strategies the engine is assembled from."""

    db_path: str = DEFAULT_DB_PATH
    offline_strategy: str = "sine"
    altitude_strategy: str = "tuned"
    retry_policy: str = "significant"
    penalty_tables: str = "legacy"


def load_config(env_file: str | None = None) -> EngineConfig:
    """Build an :class:`EngineConfig` from environment variables.

    Values already present in the process environment win over ``.env``.
    """
    load_dotenv(env_file)
    defaults = EngineConfig()
    return EngineConfig(
        db_path=os.environ.get("GSP_TRAJECTORY_DB", defaults.db_path),
        offline_strategy=os.environ.get("GSP_OFFLINE_STRATEGY", defaults.offline_strategy),
        altitude_strategy=os.environ.get("GSP_ALTITUDE_STRATEGY", defaults.altitude_strategy),
        retry_policy=os.environ.get("GSP_RETRY_POLICY", defaults.retry_policy),
        penalty_tables=os.environ.get("GSP_PENALTY_TABLES", defaults.penalty_tables),
    )
