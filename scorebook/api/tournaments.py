"""
Tournament endpoints
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from scorebook.database import get_db
from scorebook.engine.state import MatchFormat
from scorebook.models import Tournament
from scorebook.repository import new_id
from scorebook.api.scorebooks import get_scorebook_or_404
from scorebook.api.schemas import TournamentCreate, TournamentResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scorebooks/{scorebook_id}/tournaments", tags=["Tournaments"])


def get_tournament_or_404(scorebook_id: str, tournament_id: str, db: Session) -> Tournament:
    tournament = db.get(Tournament, tournament_id)
    if not tournament or tournament.scorebook_id != scorebook_id:
        raise HTTPException(status_code=404, detail="Tournament not found")
    return tournament


def _tournament_response(tournament: Tournament) -> TournamentResponse:
    return TournamentResponse(
        id=tournament.id,
        scorebook_id=tournament.scorebook_id,
        name=tournament.name,
        organizer=tournament.organizer,
        format=tournament.format.value,
        start_date=tournament.start_date,
        end_date=tournament.end_date,
        location=tournament.location,
        logo_url=tournament.logo_url,
        team_ids=[t.id for t in tournament.teams],
        match_ids=[f.id for f in tournament.fixtures],
    )


@router.post("", response_model=TournamentResponse)
def create_tournament(scorebook_id: str, request: TournamentCreate, db: Session = Depends(get_db)):
    get_scorebook_or_404(scorebook_id, db)
    tournament = Tournament(
        id=new_id("tourn"),
        scorebook_id=scorebook_id,
        name=request.name,
        organizer=request.organizer,
        format=MatchFormat(request.format.value),
        start_date=request.start_date,
        end_date=request.end_date,
        location=request.location,
        logo_url=request.logo_url,
    )
    db.add(tournament)
    db.commit()
    logger.info("Created tournament %s (%s) in %s", tournament.id, tournament.format.value, scorebook_id)
    return _tournament_response(tournament)


@router.get("", response_model=List[TournamentResponse])
def list_tournaments(scorebook_id: str, db: Session = Depends(get_db)):
    scorebook = get_scorebook_or_404(scorebook_id, db)
    return [_tournament_response(t) for t in scorebook.tournaments]


@router.get("/{tournament_id}", response_model=TournamentResponse)
def get_tournament(scorebook_id: str, tournament_id: str, db: Session = Depends(get_db)):
    return _tournament_response(get_tournament_or_404(scorebook_id, tournament_id, db))


@router.delete("/{tournament_id}")
def delete_tournament(scorebook_id: str, tournament_id: str, db: Session = Depends(get_db)):
    """Delete a tournament along with all of its teams and matches"""
    tournament = get_tournament_or_404(scorebook_id, tournament_id, db)
    teams, fixtures = len(tournament.teams), len(tournament.fixtures)
    db.delete(tournament)
    db.commit()
    logger.info("Deleted tournament %s with %d teams and %d matches", tournament_id, teams, fixtures)
    return {"deleted": tournament_id, "teams": teams, "matches": fixtures}
