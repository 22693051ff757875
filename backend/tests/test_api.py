from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.data import get_dataset
from app.main import app
from season_stats.dataset import load_season
from season_stats.positions import UTILITY_NOTE

SEASON_FIXTURES = Path(__file__).resolve().parents[1] / "season_stats" / "tests" / "fixtures" / "season"


@pytest.fixture(name="dataset", scope="module")
def dataset_fixture():
    return load_season(SEASON_FIXTURES)


@pytest.fixture(name="client")
def client_fixture(dataset):
    app.dependency_overrides[get_dataset] = lambda: dataset
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.pop(get_dataset, None)


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_list_tools_describes_three_tools(client: TestClient):
    resp = client.get("/api/tools")
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 3
    names = [item["name"] for item in data["items"]]
    assert names == ["get_player_stats", "leaderboard", "teams"]
    leaderboard_schema = data["items"][1]["input_schema"]
    assert set(leaderboard_schema["required"]) == {"table", "metric", "direction", "limit"}


def test_teams(client: TestClient):
    resp = client.get("/api/tools/teams")
    assert resp.status_code == 200
    assert resp.json() == {"teams": ["ATL", "NYM", "SEA"]}

    resp_post = client.post("/api/tools/teams")
    assert resp_post.status_code == 200
    assert resp_post.json() == resp.json()


def test_get_player_stats_defaults_to_team_scope(client: TestClient):
    resp = client.post(
        "/api/tools/get_player_stats",
        json={"table": "batting", "player": "Pete Alonso", "columns": ["HR", "RBI"]},
    )
    assert resp.status_code == 200
    assert resp.json() == {"rows": [{"hr": 38, "rbi": 120}], "warnings": None}


def test_get_player_stats_league_scope(client: TestClient):
    resp = client.post(
        "/api/tools/get_player_stats",
        json={
            "table": "batting",
            "scope": "league",
            "player": "Pete Alonso",
            "columns": ["hr", "rbi"],
        },
    )
    assert resp.status_code == 200
    rows = resp.json()["rows"]
    assert rows == [
        {"team": "ATL", "hr": 4, "rbi": 12},
        {"team": "NYM", "hr": 38, "rbi": 120},
    ]


def test_get_player_stats_with_filters_and_nulls(client: TestClient):
    resp = client.post(
        "/api/tools/get_player_stats",
        json={
            "table": "batting",
            "team": "nym",
            "player": "jose iglesias",
            "columns": ["OPS+", "Player-additional", "PA"],
            "filters": {"Pos": "UT"},
        },
    )
    assert resp.status_code == 200
    assert resp.json()["rows"] == [{"ops_plus": None, "player_id": None, "pa": 150}]


def test_leaderboard_with_qualifier_alias(client: TestClient):
    resp = client.post(
        "/api/tools/leaderboard",
        json={
            "table": "batting",
            "metric": "OPS+",
            "direction": "desc",
            "limit": 5,
            "qualifier": {"minPA": 400},
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["rows"]) == 5
    assert all(row["PA"] >= 400 for row in data["rows"])
    values = [row["ops_plus"] for row in data["rows"]]
    assert values == sorted(values, reverse=True)
    assert data["warnings"] is None


def test_leaderboard_pitching_league(client: TestClient):
    resp = client.post(
        "/api/tools/leaderboard",
        json={
            "table": "pitching",
            "scope": "league",
            "metric": "SO/BB",
            "direction": "desc",
            "limit": 2,
            "qualifier": {"minIP": 150},
        },
    )
    assert resp.status_code == 200
    assert resp.json()["rows"] == [
        {"team": "SEA", "player": "George Kirby", "so_per_bb": 6.8, "IP": 180.667},
        {"team": "SEA", "player": "Logan Gilbert", "so_per_bb": 5.25, "IP": 190.0},
    ]


def test_leaderboard_utility_position_warns(client: TestClient):
    resp = client.post(
        "/api/tools/leaderboard",
        json={"table": "batting", "metric": "PA", "direction": "desc", "limit": 10, "position": "UT"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert [row["player"] for row in data["rows"]] == ["Mark Vientos", "Jose Iglesias"]
    assert data["warnings"] == [UTILITY_NOTE]


@pytest.mark.parametrize(
    "payload",
    [
        {"table": "batting", "metric": "HR", "direction": "desc", "limit": 26},
        {"table": "batting", "metric": "HR", "direction": "desc", "limit": 0},
        {"table": "batting", "metric": "HR", "limit": 5},
        {"table": "fielding", "metric": "HR", "direction": "desc", "limit": 5},
        {"table": "batting", "team": "NEWYORK", "metric": "HR", "direction": "desc", "limit": 5},
    ],
)
def test_leaderboard_validation_errors(client: TestClient, payload):
    resp = client.post("/api/tools/leaderboard", json=payload)
    assert resp.status_code == 422


def test_get_player_stats_requires_columns(client: TestClient):
    resp = client.post(
        "/api/tools/get_player_stats",
        json={"table": "batting", "player": "Juan Soto", "columns": []},
    )
    assert resp.status_code == 422


def test_unknown_player_is_empty_not_error(client: TestClient):
    resp = client.post(
        "/api/tools/get_player_stats",
        json={"table": "pitching", "team": "SEA", "player": "Nobody", "columns": ["ERA"]},
    )
    assert resp.status_code == 200
    assert resp.json() == {"rows": [], "warnings": None}
