"""
In-memory season index.

`load_season` scans `<root>/<TEAM>/batting.csv` and `<root>/<TEAM>/pitching.csv`
once; the resulting `SeasonDataset` is never mutated afterwards and is passed
explicitly to the query functions.
"""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence

from season_stats.loaders import load_batting_csv, load_pitching_csv
from season_stats.rows import BattingRow, PitchingRow, Row

logger = logging.getLogger(__name__)

BATTING_FILE = "batting.csv"
PITCHING_FILE = "pitching.csv"


@dataclass(frozen=True)
class SeasonDataset:
    batting: Mapping[str, tuple[BattingRow, ...]] = field(default_factory=dict)
    pitching: Mapping[str, tuple[PitchingRow, ...]] = field(default_factory=dict)
    root: Optional[Path] = None

    def _index(self, category: str) -> Mapping[str, tuple[Row, ...]]:
        if category == "batting":
            return self.batting
        if category == "pitching":
            return self.pitching
        return {}

    def rows_for_team(self, category: str, team: Optional[str]) -> tuple[Row, ...]:
        return self._index(category).get(str(team or "").strip().upper(), ())

    def all_rows(self, category: str) -> tuple[Row, ...]:
        league: list[Row] = []
        for rows in self._index(category).values():
            league.extend(rows)
        return tuple(league)

    def rows(self, category: str, scope: str, team: Optional[str]) -> tuple[Row, ...]:
        if scope == "league":
            return self.all_rows(category)
        return self.rows_for_team(category, team)

    def known_teams(self) -> list[str]:
        return sorted(set(self.batting).union(self.pitching))


def build_dataset(
    batting: Mapping[str, Sequence[BattingRow]],
    pitching: Mapping[str, Sequence[PitchingRow]],
    root: Optional[Path] = None,
) -> SeasonDataset:
    """Freeze per-team row lists into a SeasonDataset, keeping insertion order."""
    return SeasonDataset(
        batting=MappingProxyType({team.upper(): tuple(rows) for team, rows in batting.items()}),
        pitching=MappingProxyType({team.upper(): tuple(rows) for team, rows in pitching.items()}),
        root=root,
    )


def _load_team_file(path: Path, team: str, loader: Callable[[Path, str], list]) -> Optional[list]:
    try:
        return loader(path, team)
    except FileNotFoundError:
        logger.debug("No %s for %s; skipping", path.name, team)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.warning("Could not read %s for %s: %s", path, team, exc)
    return None


def load_season(root: Path) -> SeasonDataset:
    root = Path(root)
    batting: dict[str, list[BattingRow]] = {}
    pitching: dict[str, list[PitchingRow]] = {}
    if not root.is_dir():
        logger.warning("Season root %s not found; serving an empty dataset", root)
        return build_dataset(batting, pitching, root=root)

    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if not entry.is_dir():
            continue
        team = entry.name.upper()
        if team in batting or team in pitching:
            logger.warning("Duplicate team directory %s for %s; skipping", entry, team)
            continue
        bat_rows = _load_team_file(entry / BATTING_FILE, team, load_batting_csv)
        if bat_rows is not None:
            batting[team] = bat_rows
        pit_rows = _load_team_file(entry / PITCHING_FILE, team, load_pitching_csv)
        if pit_rows is not None:
            pitching[team] = pit_rows

    dataset = build_dataset(batting, pitching, root=root)
    logger.info(
        "Loaded season %s: %d teams, %d batting rows, %d pitching rows",
        root,
        len(dataset.known_teams()),
        len(dataset.all_rows("batting")),
        len(dataset.all_rows("pitching")),
    )
    return dataset
