import os
from pathlib import Path
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

from season_stats.paths import DEFAULT_SEASON, season_root
from season_stats.queries import DEFAULT_TEAM

# Load environment variables from a local .env file if present.
# Prefer the backend/.env file so running from the repo root still picks up settings.
# __file__ is backend/app/core/config.py -> parents[2] is backend/
BACKEND_ENV = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(BACKEND_ENV)


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean from the environment with sensible defaults."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: List[str] | None = None) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default or []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _cors_origins() -> List[str]:
    """
    CORS_ORIGINS env override, otherwise permissive (*) so browser-based tool
    clients can call the API directly.
    """
    env_origins = _env_list("CORS_ORIGINS", [])
    merged = env_origins or ["*"]

    seen = set()
    deduped = []
    for origin in merged:
        if origin in seen:
            continue
        seen.add(origin)
        deduped.append(origin)
    return deduped


@dataclass
class Settings:
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Season Stats API"))
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", False))
    cors_origins: List[str] = field(default_factory=_cors_origins)
    season: str = field(default_factory=lambda: os.getenv("SEASON", DEFAULT_SEASON))
    season_root: Path = field(default_factory=lambda: season_root(os.getenv("SEASON", DEFAULT_SEASON)))
    default_team: str = field(default_factory=lambda: os.getenv("DEFAULT_TEAM", DEFAULT_TEAM).upper())
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance sourced from environment variables."""
    return Settings()
