"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum

from scorebook.engine.events import BallEvent


# Enums
class MatchFormatEnum(str, Enum):
    T10 = "T10"
    T20 = "T20"
    ODI = "ODI"


class PlayerRoleEnum(str, Enum):
    BATSMAN = "Batsman"
    BOWLER = "Bowler"
    ALL_ROUNDER = "All-Rounder"
    WICKET_KEEPER = "Wicket-Keeper"


class TossDecisionEnum(str, Enum):
    BAT = "bat"
    BOWL = "bowl"


class StatsRoleEnum(str, Enum):
    BATSMAN = "batsman"
    BOWLER = "bowler"


# Scorebook Schemas
class ScorebookResponse(BaseModel):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


# Tournament Schemas
class TournamentCreate(BaseModel):
    name: str
    organizer: str = ""
    format: MatchFormatEnum = MatchFormatEnum.T20
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    logo_url: Optional[str] = None


class TournamentResponse(BaseModel):
    id: str
    scorebook_id: str
    name: str
    organizer: str
    format: MatchFormatEnum
    start_date: str
    end_date: str
    location: str
    logo_url: Optional[str] = None
    team_ids: list[str] = []
    match_ids: list[str] = []


# Team Schemas
class PlayerCreate(BaseModel):
    name: str
    role: PlayerRoleEnum = PlayerRoleEnum.BATSMAN
    jersey_number: Optional[int] = None
    photo_url: Optional[str] = None


class PlayerResponse(BaseModel):
    id: str
    name: str
    role: PlayerRoleEnum
    jersey_number: Optional[int] = None
    photo_url: Optional[str] = None


class TeamCreate(BaseModel):
    name: str
    logo_url: Optional[str] = None
    captain_id: Optional[str] = None
    wicket_keeper_id: Optional[str] = None


class TeamUpdate(BaseModel):
    name: Optional[str] = None
    logo_url: Optional[str] = None
    captain_id: Optional[str] = None
    wicket_keeper_id: Optional[str] = None


class TeamResponse(BaseModel):
    id: str
    tournament_id: str
    name: str
    logo_url: Optional[str] = None
    captain_id: Optional[str] = None
    wicket_keeper_id: Optional[str] = None
    players: list[PlayerResponse] = []


# Match Schemas
class MatchCreate(BaseModel):
    team_a_id: str
    team_b_id: str
    toss_winner_id: str
    decision: TossDecisionEnum


class BallRequest(BaseModel):
    event: BallEvent


class PlayersRequest(BaseModel):
    striker_id: str
    non_striker_id: str
    bowler_id: str


class StatsEditRequest(BaseModel):
    player_id: str
    role: StatsRoleEnum
    runs: Optional[int] = None
    balls: Optional[int] = None
    overs: Optional[int] = None
    wickets: Optional[int] = None


# Scoreboard Schemas
class BallSlotResponse(BaseModel):
    label: str
    kind: str

    class Config:
        from_attributes = True


class BatsmanLineResponse(BaseModel):
    name: str
    runs: int = 0
    balls: int = 0
    on_strike: bool = False
    text: str

    class Config:
        from_attributes = True


class BowlerLineResponse(BaseModel):
    name: str
    overs: int = 0
    balls: int = 0
    runs: int = 0
    wickets: int = 0
    figures: str
    text: str

    class Config:
        from_attributes = True


class ScoreboardResponse(BaseModel):
    match_id: str
    status: str
    theme: str
    is_elite: bool
    current_innings: int
    team_a_name: Optional[str] = None
    team_b_name: Optional[str] = None
    team_a_logo: Optional[str] = None
    team_b_logo: Optional[str] = None
    batting_team_name: Optional[str] = None
    bowling_team_name: Optional[str] = None
    score_line: str
    overs_line: str
    crr: str
    target: Optional[int] = None
    target_line: Optional[str] = None
    recap_line: Optional[str] = None
    striker: Optional[BatsmanLineResponse] = None
    non_striker: Optional[BatsmanLineResponse] = None
    bowler: Optional[BowlerLineResponse] = None
    over_slots: list[Optional[BallSlotResponse]]
    sticker: Optional[str] = None

    class Config:
        from_attributes = True


class MatchStateResponse(BaseModel):
    match: dict
    scoreboard: ScoreboardResponse
