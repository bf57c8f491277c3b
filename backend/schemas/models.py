from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Dict, Optional


class TeamType(str, Enum):
    HOME = "Home"
    AWAY = "Away"


class ActionRecord(BaseModel):
    """One play-by-play event. Only the fields the service reads are kept."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    team_tricode: Optional[str] = Field(None, alias="teamTricode")
    player_name: Optional[str] = Field(None, alias="playerName")
    action_type: Optional[str] = Field(None, alias="actionType")
    sub_type: Optional[str] = Field(None, alias="subType")
    shot_result: Optional[str] = Field(None, alias="shotResult")
    score_home: Optional[int] = Field(None, alias="scoreHome")
    score_away: Optional[int] = Field(None, alias="scoreAway")
    points_total: Optional[int] = Field(None, alias="pointsTotal")

    # The live feed sends scores as strings, sometimes blank
    @field_validator("score_home", "score_away", "points_total", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PlayByPlayGame(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    game_id: Optional[str] = Field(None, alias="gameId")
    actions: Optional[List[Optional[ActionRecord]]] = None


class PlayByPlayFeed(BaseModel):
    model_config = ConfigDict(extra="ignore")

    game: Optional[PlayByPlayGame] = None


class FinalScore(BaseModel):
    home: Optional[int] = None
    away: Optional[int] = None


class RatioPair(BaseModel):
    contribution: float
    points_share: float


class PlayerStats(BaseModel):
    """Per-player tallies for one game, built from that player's actions."""
    player_name: str
    exists: bool = False
    team_tricode: Optional[str] = None
    goals: int = 0
    points: int = 0
    steals: int = 0
    blocks: int = 0
    rebounds: int = 0
    turnovers: int = 0
    fouls: int = 0


class PlayersByTeamResponse(BaseModel):
    game_id: str
    teams: Dict[str, List[str]]


class PlayerActionsResponse(BaseModel):
    game_id: str
    player_name: str
    actions: List[str]


class PlayerResultsResponse(BaseModel):
    game_id: str
    player_name: str
    team_tricode: Optional[str] = None
    points: int
    goals: int
    steals: int
    blocks: int
    rebounds: int
    turnovers: int
    fouls: int
    contribution_ratio: float
    points_share_ratio: float
    summary: str


class GameResultsResponse(BaseModel):
    game_id: str
    winner: TeamType
    home_score: int
    away_score: int
    summary: str
