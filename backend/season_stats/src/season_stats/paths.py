from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Base directories used across modules for data.
# __file__ is backend/season_stats/src/season_stats/paths.py -> parents[4] is the repo root.
PROJECT_ROOT = Path(__file__).resolve().parents[4]
DATA_DIR = PROJECT_ROOT / "data"

DEFAULT_SEASON = "2025"


def season_root(season: Optional[str] = None, override: Optional[str] = None) -> Path:
    """
    Resolve the directory holding one subdirectory per team.

    Precedence: explicit override, SEASON_ROOT env var, then data/<season>.
    """
    if override:
        return Path(override).expanduser()
    env_root = os.getenv("SEASON_ROOT")
    if env_root:
        return Path(env_root).expanduser()
    return DATA_DIR / (season or os.getenv("SEASON") or DEFAULT_SEASON)
