import logging

from fastapi import Request

from app.core.config import get_settings
from season_stats.dataset import SeasonDataset, load_season

settings = get_settings()
logger = logging.getLogger(__name__)


def init_dataset() -> SeasonDataset:
    """Load the season once; called during startup."""
    logger.info("Loading season data from %s", settings.season_root)
    return load_season(settings.season_root)


def get_dataset(request: Request) -> SeasonDataset:
    """Return the dataset loaded at startup for dependency injection."""
    dataset = getattr(request.app.state, "dataset", None)
    if dataset is None:
        # Lifespan not run (e.g. bare TestClient); queries degrade to empty results.
        return SeasonDataset()
    return dataset
