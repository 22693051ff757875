"""
Season stats query engine.

Loads per-team batting/pitching CSV exports into an immutable dataset and
answers player lookups, leaderboards and team listings over it.
"""

from .dataset import SeasonDataset, load_season  # noqa: F401
from .queries import Qualifier, get_player_stats, leaderboard, teams  # noqa: F401
