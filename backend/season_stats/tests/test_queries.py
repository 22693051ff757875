from __future__ import annotations

from pathlib import Path

import pytest

from season_stats.dataset import build_dataset, load_season
from season_stats.positions import INFIELD, OUTFIELD, UTILITY_NOTE, parse_row_positions
from season_stats.queries import Qualifier, get_player_stats, leaderboard, teams
from season_stats.rows import BattingRow, PitchingRow

FIXTURES = Path(__file__).resolve().parent / "fixtures" / "season"


@pytest.fixture(scope="module")
def dataset():
    return load_season(FIXTURES)


def _positions(dataset, team, player):
    for row in dataset.rows_for_team("batting", team):
        if row.player_name == player:
            return set(row.positions)
    raise AssertionError(player)


def test_player_stats_team_scope(dataset) -> None:
    result = get_player_stats(dataset, table="batting", team="NYM", player="juan soto", columns=["HR", "OPS+", "ba"])
    assert result == {"rows": [{"hr": 40, "ops_plus": 160, "ba": pytest.approx(0.276)}]}


def test_player_stats_league_scope_prefixes_team(dataset) -> None:
    result = get_player_stats(
        dataset, table="batting", scope="league", player="Pete Alonso", columns=["hr", "rbi"]
    )
    assert result["rows"] == [
        {"team": "ATL", "hr": 4, "rbi": 12},
        {"team": "NYM", "hr": 38, "rbi": 120},
    ]
    assert "warnings" not in result


def test_player_stats_is_exact_not_substring(dataset) -> None:
    result = get_player_stats(dataset, table="batting", team="NYM", player="Soto", columns=["hr"])
    assert result == {"rows": []}


def test_player_stats_filters_compare_stringified_values(dataset) -> None:
    kwargs = dict(table="batting", scope="league", player="Pete Alonso", columns=["PA"])
    assert get_player_stats(dataset, filters={"team": "NYM"}, **kwargs)["rows"] == [{"team": "NYM", "pa": 680}]
    assert get_player_stats(dataset, filters={"HR": "4"}, **kwargs)["rows"] == [{"team": "ATL", "pa": 80}]
    assert get_player_stats(dataset, filters={"war": "3.5"}, **kwargs)["rows"] == [{"team": "NYM", "pa": 680}]
    assert get_player_stats(dataset, filters={"hr": "999"}, **kwargs)["rows"] == []


def test_player_stats_pitching_columns(dataset) -> None:
    result = get_player_stats(dataset, table="pitching", team="NYM", player="Kodai Senga", columns=["IP", "ip_outs", "K/BB"])
    assert result["rows"] == [{"ip": 168.667, "ip_outs": 506, "so_per_bb": 3.45}]


def test_player_stats_emits_unique_notes(dataset) -> None:
    result = get_player_stats(dataset, table="batting", team="NYM", player="Juan Soto", columns=["wOBA", "woba", "best"])
    assert result["rows"] == [{"roba": pytest.approx(0.405), "war": 6.0}]
    assert len(result["warnings"]) == 2


def test_player_stats_unknown_inputs_are_empty(dataset) -> None:
    assert get_player_stats(dataset, table="batting", team="XXX", player="Juan Soto", columns=["hr"]) == {"rows": []}
    assert get_player_stats(dataset, table="fielding", team="NYM", player="Juan Soto", columns=["hr"]) == {"rows": []}
    unknown_column = get_player_stats(dataset, table="batting", team="NYM", player="Juan Soto", columns=["mystery"])
    assert unknown_column == {"rows": [{"mystery": None}]}


def test_leaderboard_ops_plus_with_pa_qualifier(dataset) -> None:
    result = leaderboard(
        dataset,
        table="batting",
        metric="OPS+",
        direction="desc",
        limit=5,
        qualifier=Qualifier(min_pa=400),
    )
    rows = result["rows"]
    assert len(rows) == 5
    assert [r["player"] for r in rows] == ["Juan Soto", "Pete Alonso", "Francisco Lindor", "Brandon Nimmo", "Mark Vientos"]
    assert all(r["PA"] >= 400 for r in rows)
    values = [r["ops_plus"] for r in rows]
    assert values == sorted(values, reverse=True)
    assert rows[0] == {"team": "NYM", "player": "Juan Soto", "ops_plus": 160, "PA": 700, "pos": "RF/DH"}
    assert "warnings" not in result


def test_leaderboard_ties_keep_dataset_order(dataset) -> None:
    # Nimmo and Vientos both have OPS+ 120; Nimmo appears first in the file.
    desc = leaderboard(dataset, table="batting", metric="ops_plus", direction="desc", limit=25)["rows"]
    asc = leaderboard(dataset, table="batting", metric="ops_plus", direction="asc", limit=25)["rows"]
    tied_desc = [r["player"] for r in desc if r["ops_plus"] == 120]
    tied_asc = [r["player"] for r in asc if r["ops_plus"] == 120]
    assert tied_desc == ["Brandon Nimmo", "Mark Vientos"]
    assert tied_asc == ["Brandon Nimmo", "Mark Vientos"]


def test_leaderboard_skips_null_metric_values(dataset) -> None:
    rows = leaderboard(dataset, table="batting", metric="OPS+", direction="asc", limit=25)["rows"]
    names = [r["player"] for r in rows]
    assert "Jose Iglesias" not in names
    assert "Luis Torrens" not in names
    assert all(r["ops_plus"] is not None for r in rows)


def test_leaderboard_position_filters(dataset) -> None:
    second = leaderboard(dataset, table="batting", scope="league", metric="HR", direction="desc", limit=25, position="2B")
    assert [r["player"] for r in second["rows"]] == ["Ozzie Albies", "Jeff McNeil"]
    for row in second["rows"]:
        assert "2B" in _positions(dataset, row["team"], row["player"])

    outfield = leaderboard(dataset, table="batting", metric="HR", direction="desc", limit=25, position="OF")
    assert [r["player"] for r in outfield["rows"]] == ["Juan Soto", "Brandon Nimmo", "Jeff McNeil", "Tyrone Taylor"]
    for row in outfield["rows"]:
        assert _positions(dataset, "NYM", row["player"]) & OUTFIELD


def test_leaderboard_utility_heuristic_adds_note(dataset) -> None:
    result = leaderboard(dataset, table="batting", metric="PA", direction="desc", limit=25, position="utility")
    assert [r["player"] for r in result["rows"]] == ["Mark Vientos", "Jose Iglesias"]
    assert result["warnings"] == [UTILITY_NOTE]
    vientos = result["rows"][0]
    assert len(set(parse_row_positions("*5/3D")) & INFIELD) >= 2
    assert vientos["pos"] == "1B/3B/DH"


def test_leaderboard_pitching_ip_qualifier_and_asc(dataset) -> None:
    result = leaderboard(
        dataset, table="pitching", metric="ERA", direction="asc", limit=10, qualifier=Qualifier(min_ip=100)
    )
    assert result["rows"] == [
        {"team": "NYM", "player": "Kodai Senga", "era": 2.98, "IP": 168.667},
        {"team": "NYM", "player": "Sean Manaea", "era": 3.4, "IP": 168.333},
        {"team": "NYM", "player": "David Peterson", "era": 3.6, "IP": 150.0},
    ]


def test_leaderboard_qualifiers_apply_per_table(dataset) -> None:
    # A PA threshold means nothing to pitchers and the position filter is batting-only.
    result = leaderboard(
        dataset, table="pitching", metric="SO/BB", direction="desc", limit=3,
        qualifier=Qualifier(min_pa=10_000), position="2B",
    )
    assert [r["player"] for r in result["rows"]] == ["Edwin Diaz", "Sean Manaea", "Kodai Senga"]


def test_leaderboard_alias_note_and_limit(dataset) -> None:
    result = leaderboard(dataset, table="batting", scope="league", metric="most valuable", direction="desc", limit=3)
    assert [r["player"] for r in result["rows"]] == ["Juan Soto", "Francisco Lindor", "Matt Olson"]
    assert set(result["rows"][0]) == {"team", "player", "war", "PA", "pos"}
    assert len(result["warnings"]) == 1


def test_leaderboard_unknown_metric_or_team_is_empty(dataset) -> None:
    assert leaderboard(dataset, table="batting", metric="mystery", direction="desc", limit=5) == {"rows": []}
    assert leaderboard(dataset, table="batting", team="ZZZ", metric="HR", direction="desc", limit=5) == {"rows": []}


def test_leaderboard_ranks_numeric_passthrough_columns(dataset) -> None:
    rows = leaderboard(dataset, table="batting", metric="oWAR", direction="desc", limit=2)["rows"]
    assert [(r["player"], r["oWAR"]) for r in rows] == [("Francisco Lindor", "5.5"), ("Juan Soto", "5.1")]


def test_teams_sorted_union(dataset) -> None:
    assert teams(dataset) == {"teams": ["ATL", "NYM", "SEA"]}


def test_queries_work_on_synthetic_dataset() -> None:
    synthetic = build_dataset(
        batting={"bos": [BattingRow(team="BOS", player_raw="A", player_name="A", pa=10, hr=3)]},
        pitching={"NYY": [PitchingRow(team="NYY", player_raw="B", player_name="B", ip_outs=3, ip=1.0)]},
    )
    assert teams(synthetic) == {"teams": ["BOS", "NYY"]}
    board = leaderboard(synthetic, table="batting", team="bos", metric="hr", direction="desc", limit=1)
    assert board["rows"] == [{"team": "BOS", "player": "A", "hr": 3, "PA": 10, "pos": ""}]
