from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import get_settings
from season_stats.queries import MAX_LIMIT

settings = get_settings()

Table = Literal["batting", "pitching"]
Scope = Literal["team", "league"]


class Qualifier(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    min_pa: Optional[float] = Field(default=None, alias="minPA", ge=0, description="Minimum plate appearances (batting)")
    min_ip: Optional[float] = Field(default=None, alias="minIP", ge=0, description="Minimum innings pitched (pitching)")


class PlayerStatsRequest(BaseModel):
    table: Table
    scope: Scope = "team"
    team: str = Field(default=settings.default_team, min_length=2, max_length=3, description="Team code")
    player: str = Field(min_length=1, description="Player name, case-insensitive exact match")
    columns: List[str] = Field(min_length=1, description='Columns or aliases, e.g. "HR", "OPS+"')
    filters: Optional[Dict[str, str]] = Field(default=None, description="Exact-match field filters")


class LeaderboardRequest(BaseModel):
    table: Table
    team: str = Field(default=settings.default_team, min_length=2, max_length=3, description="Team code")
    scope: Scope = "team"
    metric: str = Field(min_length=1, description='e.g. "OPS+", "ops_plus", "FIP", "SO/BB"')
    direction: Literal["asc", "desc"]
    limit: int = Field(ge=1, le=MAX_LIMIT)
    qualifier: Optional[Qualifier] = None
    position: Optional[str] = Field(default=None, description='Batting only, e.g. "2B", "OF", "utility"')


class ToolResponse(BaseModel):
    rows: List[Dict[str, Any]]
    warnings: Optional[List[str]] = None


class TeamsResponse(BaseModel):
    teams: List[str]


class ToolDescriptor(BaseModel):
    name: str
    description: str
    input_schema: Dict[str, Any]


class ToolsResponse(BaseModel):
    items: List[ToolDescriptor]
    count: int
