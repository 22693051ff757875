"""
Position parsing for season rows and free-form position queries.

Row strings use scorekeeping numbers with an optional leading `*` for the
primary position, e.g. "*4/DH3" or "*8H/79D". Queries accept abbreviations,
full words or group terms such as "outfield".
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

POSITION_ORDER: tuple[str, ...] = ("P", "C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH", "UT")
INFIELD: frozenset[str] = frozenset({"1B", "2B", "3B", "SS"})
OUTFIELD: frozenset[str] = frozenset({"LF", "CF", "RF"})

UTILITY_NOTE = (
    "Utility filter is a heuristic: it matches players listed as UT or who "
    "played at least two infield positions."
)

_POS_MAP = {
    "1": "P",
    "P": "P",
    "2": "C",
    "C": "C",
    "3": "1B",
    "1B": "1B",
    "4": "2B",
    "2B": "2B",
    "5": "3B",
    "3B": "3B",
    "6": "SS",
    "SS": "SS",
    "7": "LF",
    "LF": "LF",
    "8": "CF",
    "CF": "CF",
    "9": "RF",
    "RF": "RF",
    "D": "DH",
    "DH": "DH",
    "UT": "UT",
}

# Longest tokens first so "2B" is not read as catcher-then-noise.
_TOKEN_RE = re.compile(r"DH|UT|1B|2B|3B|SS|LF|CF|RF|[1-9]|[DCP]")

_QUERY_SYNONYMS = {
    "p": "P",
    "pitcher": "P",
    "c": "C",
    "catcher": "C",
    "1b": "1B",
    "first": "1B",
    "firstbase": "1B",
    "firstbaseman": "1B",
    "2b": "2B",
    "second": "2B",
    "secondbase": "2B",
    "secondbaseman": "2B",
    "3b": "3B",
    "third": "3B",
    "thirdbase": "3B",
    "thirdbaseman": "3B",
    "hotcorner": "3B",
    "ss": "SS",
    "short": "SS",
    "shortstop": "SS",
    "lf": "LF",
    "left": "LF",
    "leftfield": "LF",
    "leftfielder": "LF",
    "cf": "CF",
    "center": "CF",
    "centerfield": "CF",
    "centerfielder": "CF",
    "centre": "CF",
    "centrefield": "CF",
    "rf": "RF",
    "right": "RF",
    "rightfield": "RF",
    "rightfielder": "RF",
    "dh": "DH",
    "designatedhitter": "DH",
}
_OUTFIELD_TERMS = frozenset({"of", "outfield", "outfielder", "outfielders"})
_INFIELD_TERMS = frozenset({"if", "infield", "infielder", "infielders"})
_UTILITY_TERMS = frozenset(
    {"ut", "util", "utility", "utilityplayer", "utilityman", "utilityinfielder", "superutility"}
)


@dataclass(frozen=True)
class PositionQuery:
    targets: frozenset[str] = frozenset()
    is_outfield_group: bool = False
    is_utility_group: bool = False


def _ordered(tokens: Iterable[str]) -> tuple[str, ...]:
    seen = set(tokens)
    return tuple(pos for pos in POSITION_ORDER if pos in seen)


def parse_row_positions(pos_raw: Optional[str]) -> tuple[str, ...]:
    if not pos_raw:
        return ()
    text = pos_raw.upper().replace("*", "")
    found = {_POS_MAP[tok] for tok in _TOKEN_RE.findall(text)}
    if "UT" in text:
        found.add("UT")
    return _ordered(found)


def _normalize_term(term: str) -> str:
    return re.sub(r"[\s_\-.]+", "", term.strip().lower())


def parse_position_query(term: Optional[str]) -> PositionQuery:
    if term is None or not term.strip():
        return PositionQuery()
    key = _normalize_term(term)
    if key in _OUTFIELD_TERMS:
        return PositionQuery(targets=OUTFIELD, is_outfield_group=True)
    if key in _INFIELD_TERMS:
        return PositionQuery(targets=INFIELD)
    if key in _UTILITY_TERMS:
        return PositionQuery(targets=frozenset({"UT"}), is_utility_group=True)
    if key in _QUERY_SYNONYMS:
        return PositionQuery(targets=frozenset({_QUERY_SYNONYMS[key]}))
    return PositionQuery(targets=frozenset({term.strip().upper()}))


def position_matches(positions: Iterable[str], pos_raw: Optional[str], query: PositionQuery) -> bool:
    """Row predicate for a parsed query. An empty query matches every row."""
    if query.is_utility_group:
        if "UT" in (pos_raw or "").upper():
            return True
        return len(INFIELD.intersection(positions)) >= 2
    if not query.targets:
        return True
    return not query.targets.isdisjoint(positions)
