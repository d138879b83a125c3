"""
Match API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from dlc.database import get_db
from dlc.engine.match_store import MatchStore
from dlc.engine.overs import Overs
from dlc.engine.table import DUCKWORTH_LEWIS_TABLE, WICKETS
from dlc.errors import DuckworthLewisError, MatchNotFound
from dlc.models.match import Match
from dlc.validators.interruption_validator import InterruptionValidator
from dlc.api.schemas import (
    MatchCreate, MatchBrief, MatchResponse, InterruptionCreate, InterruptionResponse,
    TargetResponse, ResourceResponse, DeleteResponse
)

router = APIRouter(prefix="/matches", tags=["Matches"])
resources_router = APIRouter(tags=["Resources"])


def _parse_overs(value: str) -> Overs:
    try:
        return Overs.parse(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


def _get_match(store: MatchStore, match_id: int) -> Match:
    try:
        return store.get(match_id)
    except MatchNotFound:
        raise HTTPException(status_code=404, detail="Match not found")


def _match_response(match: Match) -> MatchResponse:
    game = match.to_game()
    interruptions = [
        InterruptionResponse(
            sequence=row.sequence,
            wickets=row.wickets,
            overs_left=row.overs_left,
            overs_lost=row.overs_lost,
            innings=row.innings,
            resource_loss=round(interruption.resource_loss(), 3),
        )
        for row, interruption in zip(match.interruptions, game.interruptions)
    ]
    return MatchResponse(
        id=match.id,
        team_1=match.team_1,
        team_2=match.team_2,
        created_at=match.created_at,
        length=match.length,
        g_50=match.g_50,
        interruptions=interruptions,
    )


@router.post("", response_model=MatchResponse)
def create_match(request: MatchCreate, db: Session = Depends(get_db)):
    """Create a match from its length and the teams' grade (or an explicit G50)"""
    length = _parse_overs(request.length)

    validation = InterruptionValidator.validate_length(length)
    if not validation["valid"]:
        raise HTTPException(status_code=400, detail=validation["errors"])

    match = MatchStore(db).create(
        length,
        grade=request.grade,
        g_50=request.g_50,
        team_1=request.team_1,
        team_2=request.team_2,
    )
    return _match_response(match)


@router.get("", response_model=list[MatchBrief])
def list_matches(db: Session = Depends(get_db)):
    return MatchStore(db).list()


@router.get("/{match_id}", response_model=MatchResponse)
def get_match(match_id: int, db: Session = Depends(get_db)):
    return _match_response(_get_match(MatchStore(db), match_id))


@router.delete("/{match_id}", response_model=DeleteResponse)
def delete_match(match_id: int, db: Session = Depends(get_db)):
    store = MatchStore(db)
    _get_match(store, match_id)
    return DeleteResponse(deleted=store.delete([match_id]))


@router.post("/{match_id}/interruptions", response_model=MatchResponse)
def add_interruption(match_id: int, request: InterruptionCreate, db: Session = Depends(get_db)):
    """Record a stoppage; overs left are as at suspension, before this deduction"""
    store = MatchStore(db)
    match = _get_match(store, match_id)
    overs_left = _parse_overs(request.overs_left)
    overs_lost = _parse_overs(request.overs_lost)

    validation = InterruptionValidator.validate(match.to_game(), request.wickets, overs_left, overs_lost)
    if not validation["valid"]:
        raise HTTPException(status_code=400, detail=validation["errors"])

    try:
        store.record_interruption(match, request.wickets, overs_left, overs_lost, request.innings)
    except DuckworthLewisError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return _match_response(match)


@router.get("/{match_id}/target", response_model=TargetResponse)
def get_target(match_id: int, first_innings_total: int = Query(..., ge=0), db: Session = Depends(get_db)):
    """Revised target for team 2; 0 while no interruptions have been recorded"""
    store = MatchStore(db)
    match = _get_match(store, match_id)
    try:
        target = store.revised_target(match, first_innings_total)
    except DuckworthLewisError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return TargetResponse(match_id=match.id, first_innings_total=first_innings_total, revised_target=target)


@resources_router.get("/resources", response_model=ResourceResponse)
def get_resources(overs: str, wickets: int = Query(0, ge=0, le=WICKETS)):
    """Resources remaining from the Standard Edition table"""
    overs_remaining = _parse_overs(overs)
    return ResourceResponse(
        overs=str(overs_remaining),
        wickets=wickets,
        resources=round(DUCKWORTH_LEWIS_TABLE.resources_remaining(overs_remaining, wickets), 3),
    )
