"""
Load one team's batting or pitching export into typed rows.

Exports are Baseball-Reference style CSVs: a header row of stat abbreviations
("OPS+", "W-L%", "Player-additional"), one row per player, and a trailing
"Team Totals" aggregate that is dropped here.
"""
from __future__ import annotations

import csv
import io
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterator, Optional

from season_stats.fields import (
    is_team_total,
    parse_innings_pitched,
    parse_number,
    parse_percentage,
    parse_player_id,
    parse_player_markers,
    parse_text,
)
from season_stats.positions import parse_row_positions
from season_stats.rows import BattingRow, PitchingRow

BATTING_KEY_MAP = {
    "Rk": "rk",
    "Player": "player_raw",
    "Age": "age",
    "Pos": "pos_raw",
    "WAR": "war",
    "G": "g",
    "PA": "pa",
    "AB": "ab",
    "R": "r",
    "H": "h",
    "2B": "_2b",
    "3B": "_3b",
    "HR": "hr",
    "RBI": "rbi",
    "SB": "sb",
    "CS": "cs",
    "BB": "bb",
    "SO": "so",
    "BA": "ba",
    "OBP": "obp",
    "SLG": "slg",
    "OPS": "ops",
    "OPS+": "ops_plus",
    "rOBA": "roba",
    "Rbat+": "rbat_plus",
    "TB": "tb",
    "GIDP": "gidp",
    "HBP": "hbp",
    "SH": "sh",
    "SF": "sf",
    "IBB": "ibb",
    "Awards": "awards",
    "Player-additional": "player_id",
}

PITCHING_KEY_MAP = {
    "Rk": "rk",
    "Player": "player_raw",
    "Age": "age",
    "Pos": "pos_raw",
    "WAR": "war",
    "W": "w",
    "L": "l",
    "W-L%": "wl_pct",
    "ERA": "era",
    "G": "g",
    "GS": "gs",
    "GF": "gf",
    "CG": "cg",
    "SHO": "sho",
    "SV": "sv",
    "IP": "ip_csv",
    "H": "h",
    "R": "r",
    "ER": "er",
    "HR": "hr",
    "BB": "bb",
    "IBB": "ibb",
    "SO": "so",
    "HBP": "hbp",
    "BK": "bk",
    "WP": "wp",
    "BF": "bf",
    "ERA+": "era_plus",
    "FIP": "fip",
    "WHIP": "whip",
    "H9": "h9",
    "HR9": "hr9",
    "BB9": "bb9",
    "SO9": "so9",
    "SO/BB": "so_per_bb",
    "Awards": "awards",
    "Player-additional": "player_id",
}

BATTING_COUNTS = (
    "rk", "age", "war", "g", "pa", "ab", "r", "h", "_2b", "_3b", "hr", "rbi", "sb", "cs",
    "bb", "so", "ops_plus", "rbat_plus", "tb", "gidp", "hbp", "sh", "sf", "ibb",
)
BATTING_RATES = ("ba", "obp", "slg", "ops", "roba")

PITCHING_COUNTS = (
    "rk", "age", "war", "w", "l", "era", "g", "gs", "gf", "cg", "sho", "sv", "h", "r",
    "er", "hr", "bb", "ibb", "so", "hbp", "bk", "wp", "bf", "era_plus", "fip", "whip",
    "h9", "hr9", "bb9", "so9", "so_per_bb",
)
PITCHING_RATES = ("wl_pct",)

# Canonical keys consumed by the row builders; anything else is kept in extras.
_CORE_KEYS = {"player_raw", "pos_raw", "player_id", "awards", "ip_csv"}


def _iter_remapped(text: str, key_map: dict[str, str]) -> Iterator[dict[str, Optional[str]]]:
    """Yield one {canonical_key: raw_text} dict per data row, skipping team totals."""
    reader = csv.reader(io.StringIO(text))
    header: Optional[list[str]] = None
    for record in reader:
        if not record or all(not cell.strip() for cell in record):
            continue
        if header is None:
            header = [key_map.get(cell.strip(), cell.strip()) for cell in record]
            continue
        mapped: dict[str, Optional[str]] = {}
        # Short rows leave trailing keys absent; surplus cells have no header and are dropped.
        for key, cell in zip(header, record):
            mapped[key] = cell.strip()
        raw_player = mapped.get("player_raw") or ""
        if not raw_player or is_team_total(raw_player):
            continue
        yield mapped


def _extras(mapped: dict[str, Optional[str]], known: tuple[str, ...]) -> MappingProxyType:
    skip = _CORE_KEYS.union(known)
    return MappingProxyType(
        {key: value for key, value in mapped.items() if key and key not in skip and value}
    )


def _numbers(mapped: dict[str, Optional[str]], keys: tuple[str, ...], parse: Callable) -> dict:
    return {key: parse(mapped.get(key)) for key in keys}


def parse_batting(text: str, team: str) -> list[BattingRow]:
    team = team.upper()
    rows: list[BattingRow] = []
    for mapped in _iter_remapped(text, BATTING_KEY_MAP):
        player = parse_player_markers(mapped["player_raw"])
        pos_raw = parse_text(mapped.get("pos_raw"))
        rows.append(
            BattingRow(
                team=team,
                player_raw=mapped["player_raw"] or "",
                player_name=player.name,
                bats=player.bats,
                player_id=parse_player_id(mapped.get("player_id")),
                pos_raw=pos_raw,
                positions=parse_row_positions(pos_raw),
                awards=parse_text(mapped.get("awards")),
                extras=_extras(mapped, BATTING_COUNTS + BATTING_RATES),
                **_numbers(mapped, BATTING_COUNTS, parse_number),
                **_numbers(mapped, BATTING_RATES, parse_percentage),
            )
        )
    return rows


def parse_pitching(text: str, team: str) -> list[PitchingRow]:
    team = team.upper()
    rows: list[PitchingRow] = []
    for mapped in _iter_remapped(text, PITCHING_KEY_MAP):
        player = parse_player_markers(mapped["player_raw"])
        innings = parse_innings_pitched(mapped.get("ip_csv"))
        rows.append(
            PitchingRow(
                team=team,
                player_raw=mapped["player_raw"] or "",
                player_name=player.name,
                bats=player.bats,
                player_id=parse_player_id(mapped.get("player_id")),
                pos_raw=parse_text(mapped.get("pos_raw")),
                ip_outs=innings.outs if innings else None,
                ip=innings.innings if innings else None,
                awards=parse_text(mapped.get("awards")),
                extras=_extras(mapped, PITCHING_COUNTS + PITCHING_RATES),
                **_numbers(mapped, PITCHING_COUNTS, parse_number),
                **_numbers(mapped, PITCHING_RATES, parse_percentage),
            )
        )
    return rows


def _read_text(path: Path) -> str:
    # utf-8-sig drops the BOM some spreadsheet exports prepend.
    return Path(path).read_text(encoding="utf-8-sig")


def load_batting_csv(path: Path, team: str) -> list[BattingRow]:
    return parse_batting(_read_text(path), team)


def load_pitching_csv(path: Path, team: str) -> list[PitchingRow]:
    return parse_pitching(_read_text(path), team)
