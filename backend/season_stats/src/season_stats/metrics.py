"""
Metric alias resolution.

Callers name stats loosely: raw export headers ("OPS+", "SO/BB"),
lowercase or punctuated variants ("ops+", "k/bb"), or plain phrases
("most valuable"). `resolve_metric` maps any of these to a canonical row field.

Lookup order: exact alias, upper-cased alias, normalized phrase, then the
token itself (assumed already canonical). Exact-first keeps case-sensitive
headers such as "rOBA" distinct from unrelated lowercase collisions.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from season_stats.loaders import BATTING_KEY_MAP, PITCHING_KEY_MAP


@dataclass(frozen=True)
class MetricResolution:
    field: str
    note: Optional[str] = None


_SOURCE_ONLY = {"player_raw", "ip_csv"}


def _header_aliases() -> dict[str, str]:
    aliases: dict[str, str] = {}
    for key_map in (BATTING_KEY_MAP, PITCHING_KEY_MAP):
        for header, field in key_map.items():
            if field in _SOURCE_ONLY:
                continue
            aliases.setdefault(header, field)
            aliases.setdefault(header.upper(), field)
    return aliases


METRIC_ALIASES: dict[str, str] = {
    **_header_aliases(),
    # batting
    "ops+": "ops_plus",
    "OPS_plus": "ops_plus",
    "ops": "ops",
    "rbat+": "rbat_plus",
    # pitching
    "w-l%": "wl_pct",
    "wl%": "wl_pct",
    "WL%": "wl_pct",
    "era+": "era_plus",
    "K/BB": "so_per_bb",
    "k/bb": "so_per_bb",
    "K9": "so9",
    "K/9": "so9",
    "SO/9": "so9",
    "BB/9": "bb9",
    "HR/9": "hr9",
    "H/9": "h9",
    "IP": "ip",
    "ip_csv": "ip",
    "OUTS": "ip_outs",
    # identity
    "Player": "player_name",
    "PLAYER": "player_name",
    "NAME": "player_name",
    "TEAM": "team",
    "TM": "team",
    "BATS": "bats",
    "POSITION": "pos_raw",
}

# Metrics absent from the export, redirected to the closest available column.
PROXY_ALIASES: dict[str, tuple[str, str]] = {
    "wRC+": ("rbat_plus", "wRC+ is not in the source data; using Rbat+ (rbat_plus) as a proxy."),
    "WRC+": ("rbat_plus", "wRC+ is not in the source data; using Rbat+ (rbat_plus) as a proxy."),
    "wOBA": ("roba", "wOBA is not in the source data; using rOBA (roba) as a proxy."),
    "WOBA": ("roba", "wOBA is not in the source data; using rOBA (roba) as a proxy."),
    "xFIP": ("fip", "xFIP is not in the source data; using FIP (fip) as a proxy."),
    "XFIP": ("fip", "xFIP is not in the source data; using FIP (fip) as a proxy."),
    "ERA-": ("era_plus", "ERA- is not in the source data; using ERA+ (era_plus) as a proxy, where higher is better."),
    "K%": ("so9", "K% is not in the source data; using SO9 (so9) as a proxy."),
    "SO%": ("so9", "SO% is not in the source data; using SO9 (so9) as a proxy."),
    "BB%": ("bb9", "BB% is not in the source data; using BB9 (bb9) as a proxy."),
}

_VALUE_NOTE = "Interpreted '{token}' as WAR (war), the overall value metric in this data."

VALUE_PHRASES: frozenset[str] = frozenset(
    {
        "best",
        "the best",
        "best player",
        "best players",
        "most valuable",
        "most valuable player",
        "mvp",
        "value",
        "overall value",
        "overall",
        "wins above replacement",
        "wins above repl",
    }
)
VALUE_FIELD = "war"


def _phrase_key(token: str) -> str:
    return re.sub(r"\s+", " ", token.strip().lower())


def _lookup(token: str) -> Optional[MetricResolution]:
    if token in PROXY_ALIASES:
        field, note = PROXY_ALIASES[token]
        return MetricResolution(field, note)
    if token in METRIC_ALIASES:
        return MetricResolution(METRIC_ALIASES[token])
    return None


def resolve_metric(token: str) -> MetricResolution:
    """Map a loose metric token to a canonical field; never raises."""
    token = "" if token is None else str(token)
    found = _lookup(token) or _lookup(token.upper())
    if found is not None:
        return found
    phrase = _phrase_key(token)
    if phrase in VALUE_PHRASES:
        return MetricResolution(VALUE_FIELD, _VALUE_NOTE.format(token=token.strip()))
    return MetricResolution(token.strip())


def resolve_columns(tokens: Iterable[str]) -> tuple[list[str], list[str]]:
    """Resolve a column list, returning fields in caller order and unique notes."""
    fields: list[str] = []
    notes: list[str] = []
    for token in tokens:
        resolved = resolve_metric(token)
        fields.append(resolved.field)
        if resolved.note and resolved.note not in notes:
            notes.append(resolved.note)
    return fields, notes
