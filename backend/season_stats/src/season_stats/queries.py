"""
Query functions behind the `get_player_stats`, `leaderboard` and `teams` tools.

Each function is a pure function of its arguments and an immutable
`SeasonDataset`. None of them raise for caller input: unknown teams, players
and metrics produce empty rows, and approximate resolutions come back as
`warnings` next to the rows.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from season_stats.dataset import SeasonDataset
from season_stats.fields import parse_number
from season_stats.metrics import resolve_columns, resolve_metric
from season_stats.positions import UTILITY_NOTE, parse_position_query, position_matches
from season_stats.rows import Row

DEFAULT_TEAM = "NYM"
MAX_LIMIT = 25


@dataclass(frozen=True)
class Qualifier:
    min_pa: Optional[float] = None
    min_ip: Optional[float] = None


def _result(rows: List[Dict[str, Any]], warnings: Sequence[str] = ()) -> Dict[str, Any]:
    output: Dict[str, Any] = {"rows": rows}
    unique = list(dict.fromkeys(w for w in warnings if w))
    if unique:
        output["warnings"] = unique
    return output


def _stringify(value: Any) -> str:
    """Render a cell the way filter values arrive over the wire."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (tuple, list)):
        return ",".join(str(v) for v in value)
    return str(value)


def _rank_value(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    parsed = parse_number(str(value))
    return None if parsed is None else float(parsed)


def get_player_stats(
    dataset: SeasonDataset,
    *,
    table: str,
    player: str,
    columns: Sequence[str],
    scope: str = "team",
    team: str = DEFAULT_TEAM,
    filters: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    fields, notes = resolve_columns(columns)
    wanted = (player or "").strip().lower()
    resolved_filters: list[tuple[str, str]] = []
    for key, value in (filters or {}).items():
        resolved = resolve_metric(key)
        if resolved.note:
            notes.append(resolved.note)
        resolved_filters.append((resolved.field, str(value)))

    rows: List[Dict[str, Any]] = []
    for row in dataset.rows(table, scope, team):
        if row.player_name.lower() != wanted:
            continue
        if any(_stringify(row.get(key)) != value for key, value in resolved_filters):
            continue
        projected = {name: row.get(name) for name in fields}
        if scope == "league":
            projected = {"team": row.team, **projected}
        rows.append(projected)
    return _result(rows, notes)


def _qualifies(row: Row, table: str, qualifier: Optional[Qualifier]) -> bool:
    if qualifier is None:
        return True
    if table == "batting" and qualifier.min_pa:
        return (row.get("pa") or 0) >= qualifier.min_pa
    if table == "pitching" and qualifier.min_ip:
        return (row.get("ip") or 0) >= qualifier.min_ip
    return True


def leaderboard(
    dataset: SeasonDataset,
    *,
    table: str,
    metric: str,
    direction: str,
    limit: int,
    team: str = DEFAULT_TEAM,
    scope: str = "team",
    qualifier: Optional[Qualifier] = None,
    position: Optional[str] = None,
) -> Dict[str, Any]:
    resolved = resolve_metric(metric)
    key = resolved.field
    warnings = [resolved.note] if resolved.note else []

    position_query = parse_position_query(position) if table == "batting" else None
    if position_query is not None and position_query.is_utility_group:
        warnings.append(UTILITY_NOTE)

    ranked: list[tuple[float, Row]] = []
    for row in dataset.rows(table, scope, team):
        if not _qualifies(row, table, qualifier):
            continue
        if position_query is not None and not position_matches(row.positions, row.pos_raw, position_query):
            continue
        value = _rank_value(row.get(key))
        if value is None:
            continue
        ranked.append((value, row))

    # list.sort is stable even with reverse=True, so ties keep dataset order.
    ranked.sort(key=lambda item: item[0], reverse=direction == "desc")

    rows: List[Dict[str, Any]] = []
    for _, row in ranked[: max(limit, 0)]:
        out: Dict[str, Any] = {"team": row.team, "player": row.player_name, key: row.get(key)}
        if table == "batting":
            out["PA"] = row.get("pa")
            out["pos"] = "/".join(row.positions)
        else:
            out["IP"] = row.get("ip")
        rows.append(out)
    return _result(rows, warnings)


def teams(dataset: SeasonDataset) -> Dict[str, List[str]]:
    return {"teams": dataset.known_teams()}
