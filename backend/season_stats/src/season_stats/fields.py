"""
Cell-level normalization for season stat exports.

Every parser here fails soft: empty or garbled text becomes None rather than
raising, so a single bad cell never drops a row.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]

MISSING_PLAYER_ID = "-9999"
TEAM_TOTALS = "team totals"


@dataclass(frozen=True)
class PlayerName:
    name: str
    bats: Optional[str] = None


@dataclass(frozen=True)
class InningsPitched:
    outs: int
    innings: float


def parse_number(raw: Optional[str]) -> Optional[Number]:
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_percentage(raw: Optional[str]) -> Optional[Number]:
    """Rates arrive as decimal fractions (.249); they are kept as given."""
    return parse_number(raw)


def parse_text(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def parse_player_id(raw: Optional[str]) -> Optional[str]:
    text = parse_text(raw)
    if text is None or text == MISSING_PLAYER_ID:
        return None
    return text


def parse_player_markers(raw: Optional[str]) -> PlayerName:
    """
    Split handedness markers off a player cell.

    "Juan Soto*" -> ("Juan Soto", "L"), "Starling Marte#" -> ("Starling Marte", "S").
    """
    text = (raw or "").strip()
    if "*" in text:
        bats = "L"
    elif "#" in text:
        bats = "S"
    else:
        bats = None
    name = text.replace("*", "").replace("#", "").strip()
    return PlayerName(name=name, bats=bats)


def is_team_total(raw: Optional[str]) -> bool:
    return TEAM_TOTALS in (raw or "").lower()


def outs_to_innings(outs: int) -> float:
    return round(outs / 3, 3)


def parse_innings_pitched(raw: Optional[str]) -> Optional[InningsPitched]:
    """
    Convert box-score innings notation to outs.

    The tenths digit counts outs, not tenths: 168.1 is 168 1/3 innings and
    168.2 is 168 2/3. Any other fraction (5.5, 7.6) is snapped to the
    nearest third instead of rejecting the row.
    """
    value = parse_number(raw)
    if value is None:
        return None
    whole = math.trunc(value)
    remainder = value - whole
    frac = round(remainder, 1)
    if frac == 0.1:
        partial = 1
    elif frac == 0.2:
        partial = 2
    elif frac == 0.0:
        partial = 0
    else:
        # half-thirds round up
        partial = math.floor(remainder * 3 + 0.5)
    outs = whole * 3 + partial
    return InningsPitched(outs=outs, innings=outs_to_innings(outs))
