from typing import Any, Dict, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.data import get_dataset
from app.schemas import (
    LeaderboardRequest,
    PlayerStatsRequest,
    TeamsResponse,
    ToolDescriptor,
    ToolResponse,
    ToolsResponse,
)
from season_stats import queries
from season_stats.dataset import SeasonDataset

router = APIRouter()


class _NoArguments(BaseModel):
    pass


TOOLS: list[tuple[str, str, Type[BaseModel]]] = [
    ("get_player_stats", "Return a subset of batting or pitching columns for one player", PlayerStatsRequest),
    ("leaderboard", "Top-N by a metric with optional qualifier and position filter", LeaderboardRequest),
    ("teams", "List teams discovered in the loaded season", _NoArguments),
]


def _serialize_result(result: Dict[str, Any]) -> ToolResponse:
    return ToolResponse(rows=result["rows"], warnings=result.get("warnings"))


def _qualifier(request: LeaderboardRequest) -> queries.Qualifier | None:
    if request.qualifier is None:
        return None
    return queries.Qualifier(min_pa=request.qualifier.min_pa, min_ip=request.qualifier.min_ip)


@router.get("/tools", response_model=ToolsResponse, tags=["tools"])
def list_tools() -> ToolsResponse:
    """Describe the callable tools and their argument schemas."""
    items = [
        ToolDescriptor(name=name, description=description, input_schema=model.model_json_schema())
        for name, description, model in TOOLS
    ]
    return ToolsResponse(items=items, count=len(items))


@router.post("/tools/get_player_stats", response_model=ToolResponse, tags=["tools"])
def get_player_stats(
    request: PlayerStatsRequest,
    dataset: SeasonDataset = Depends(get_dataset),
) -> ToolResponse:
    result = queries.get_player_stats(
        dataset,
        table=request.table,
        scope=request.scope,
        team=request.team,
        player=request.player,
        columns=request.columns,
        filters=request.filters,
    )
    return _serialize_result(result)


@router.post("/tools/leaderboard", response_model=ToolResponse, tags=["tools"])
def leaderboard(
    request: LeaderboardRequest,
    dataset: SeasonDataset = Depends(get_dataset),
) -> ToolResponse:
    result = queries.leaderboard(
        dataset,
        table=request.table,
        team=request.team,
        scope=request.scope,
        metric=request.metric,
        direction=request.direction,
        limit=request.limit,
        qualifier=_qualifier(request),
        position=request.position,
    )
    return _serialize_result(result)


def _teams(dataset: SeasonDataset) -> TeamsResponse:
    return TeamsResponse(teams=queries.teams(dataset)["teams"])


@router.get("/tools/teams", response_model=TeamsResponse, tags=["tools"])
def list_teams(dataset: SeasonDataset = Depends(get_dataset)) -> TeamsResponse:
    return _teams(dataset)


@router.post("/tools/teams", response_model=TeamsResponse, tags=["tools"])
def call_teams(dataset: SeasonDataset = Depends(get_dataset)) -> TeamsResponse:
    """POST variant so every tool can be invoked the same way."""
    return _teams(dataset)
