"""
Typed season rows.

Dynamic lookups by field name (alias-driven column selection, filters,
leaderboard keys) go through `get`, which only consults the explicit accessor
tables below plus any pass-through source columns kept in `extras`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from types import MappingProxyType
from typing import Any, Callable, Literal, Mapping, Optional, Union

from season_stats.fields import Number

Category = Literal["batting", "pitching"]
CATEGORIES: tuple[str, ...] = ("batting", "pitching")


@dataclass(frozen=True)
class BattingRow:
    team: str
    player_raw: str
    player_name: str
    bats: Optional[str] = None
    player_id: Optional[str] = None
    pos_raw: Optional[str] = None
    positions: tuple[str, ...] = ()
    rk: Optional[Number] = None
    age: Optional[Number] = None
    war: Optional[Number] = None
    g: Optional[Number] = None
    pa: Optional[Number] = None
    ab: Optional[Number] = None
    r: Optional[Number] = None
    h: Optional[Number] = None
    _2b: Optional[Number] = None
    _3b: Optional[Number] = None
    hr: Optional[Number] = None
    rbi: Optional[Number] = None
    sb: Optional[Number] = None
    cs: Optional[Number] = None
    bb: Optional[Number] = None
    so: Optional[Number] = None
    ba: Optional[Number] = None
    obp: Optional[Number] = None
    slg: Optional[Number] = None
    ops: Optional[Number] = None
    ops_plus: Optional[Number] = None
    roba: Optional[Number] = None
    rbat_plus: Optional[Number] = None
    tb: Optional[Number] = None
    gidp: Optional[Number] = None
    hbp: Optional[Number] = None
    sh: Optional[Number] = None
    sf: Optional[Number] = None
    ibb: Optional[Number] = None
    awards: Optional[str] = None
    extras: Mapping[str, str] = field(default_factory=dict, compare=False, repr=False)

    def get(self, name: str) -> Any:
        return _lookup(self, BATTING_ACCESSORS, name)


@dataclass(frozen=True)
class PitchingRow:
    team: str
    player_raw: str
    player_name: str
    bats: Optional[str] = None
    player_id: Optional[str] = None
    pos_raw: Optional[str] = None
    rk: Optional[Number] = None
    age: Optional[Number] = None
    war: Optional[Number] = None
    w: Optional[Number] = None
    l: Optional[Number] = None
    wl_pct: Optional[Number] = None
    era: Optional[Number] = None
    g: Optional[Number] = None
    gs: Optional[Number] = None
    gf: Optional[Number] = None
    cg: Optional[Number] = None
    sho: Optional[Number] = None
    sv: Optional[Number] = None
    ip_outs: Optional[int] = None
    ip: Optional[float] = None
    h: Optional[Number] = None
    r: Optional[Number] = None
    er: Optional[Number] = None
    hr: Optional[Number] = None
    bb: Optional[Number] = None
    ibb: Optional[Number] = None
    so: Optional[Number] = None
    hbp: Optional[Number] = None
    bk: Optional[Number] = None
    wp: Optional[Number] = None
    bf: Optional[Number] = None
    era_plus: Optional[Number] = None
    fip: Optional[Number] = None
    whip: Optional[Number] = None
    h9: Optional[Number] = None
    hr9: Optional[Number] = None
    bb9: Optional[Number] = None
    so9: Optional[Number] = None
    so_per_bb: Optional[Number] = None
    awards: Optional[str] = None
    extras: Mapping[str, str] = field(default_factory=dict, compare=False, repr=False)

    def get(self, name: str) -> Any:
        return _lookup(self, PITCHING_ACCESSORS, name)


Row = Union[BattingRow, PitchingRow]

BATTING_FIELDS: tuple[str, ...] = (
    "team", "player_raw", "player_name", "bats", "player_id", "pos_raw", "positions",
    "rk", "age", "war", "g", "pa", "ab", "r", "h", "_2b", "_3b", "hr", "rbi", "sb", "cs",
    "bb", "so", "ba", "obp", "slg", "ops", "ops_plus", "roba", "rbat_plus", "tb", "gidp",
    "hbp", "sh", "sf", "ibb", "awards",
)

PITCHING_FIELDS: tuple[str, ...] = (
    "team", "player_raw", "player_name", "bats", "player_id", "pos_raw",
    "rk", "age", "war", "w", "l", "wl_pct", "era", "g", "gs", "gf", "cg", "sho", "sv",
    "ip_outs", "ip", "h", "r", "er", "hr", "bb", "ibb", "so", "hbp", "bk", "wp", "bf",
    "era_plus", "fip", "whip", "h9", "hr9", "bb9", "so9", "so_per_bb", "awards",
)

BATTING_ACCESSORS: Mapping[str, Callable[[Any], Any]] = MappingProxyType(
    {name: attrgetter(name) for name in BATTING_FIELDS}
)
PITCHING_ACCESSORS: Mapping[str, Callable[[Any], Any]] = MappingProxyType(
    {name: attrgetter(name) for name in PITCHING_FIELDS}
)


def _lookup(row: Row, accessors: Mapping[str, Callable[[Any], Any]], name: str) -> Any:
    accessor = accessors.get(name)
    if accessor is not None:
        return accessor(row)
    return row.extras.get(name)


def fields_for(category: str) -> tuple[str, ...]:
    if category == "batting":
        return BATTING_FIELDS
    if category == "pitching":
        return PITCHING_FIELDS
    return ()
