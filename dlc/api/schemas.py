"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from dlc.engine.match import Grade, Innings


# Match Schemas
class MatchCreate(BaseModel):
    length: str  # overs notation, e.g. "50" or "45.3"
    grade: Grade = Grade.ICC_FULL_MEMBER
    g_50: Optional[float] = Field(default=None, gt=0)  # overrides the grade's G50
    team_1: str = "Team 1"
    team_2: str = "Team 2"


class MatchBrief(BaseModel):
    id: int
    team_1: str
    team_2: str
    created_at: datetime
    length: str
    g_50: float

    class Config:
        from_attributes = True


class InterruptionCreate(BaseModel):
    wickets: int
    overs_left: str
    overs_lost: str
    innings: Innings


class InterruptionResponse(BaseModel):
    sequence: int
    wickets: int
    overs_left: str
    overs_lost: str
    innings: Innings
    resource_loss: float


class MatchResponse(MatchBrief):
    interruptions: list[InterruptionResponse] = []


class TargetResponse(BaseModel):
    match_id: int
    first_innings_total: int
    revised_target: int


class ResourceResponse(BaseModel):
    overs: str
    wickets: int
    resources: float


class DeleteResponse(BaseModel):
    deleted: int
