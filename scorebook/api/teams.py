"""
Team and squad endpoints
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from scorebook.database import get_db
from scorebook.models import Team, Player, PlayerRole
from scorebook.repository import new_id
from scorebook.api.tournaments import get_tournament_or_404
from scorebook.api.schemas import (
    TeamCreate, TeamUpdate, TeamResponse, PlayerCreate, PlayerResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scorebooks/{scorebook_id}", tags=["Teams"])


def get_team_or_404(scorebook_id: str, team_id: str, db: Session) -> Team:
    team = db.get(Team, team_id)
    if not team or team.tournament.scorebook_id != scorebook_id:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


def _team_response(team: Team) -> TeamResponse:
    return TeamResponse(
        id=team.id,
        tournament_id=team.tournament_id,
        name=team.name,
        logo_url=team.logo_url,
        captain_id=team.captain_id,
        wicket_keeper_id=team.wicket_keeper_id,
        players=[
            PlayerResponse(
                id=p.id,
                name=p.name,
                role=p.role.value,
                jersey_number=p.jersey_number,
                photo_url=p.photo_url,
            )
            for p in team.players
        ],
    )


@router.post("/tournaments/{tournament_id}/teams", response_model=TeamResponse)
def create_team(scorebook_id: str, tournament_id: str, request: TeamCreate, db: Session = Depends(get_db)):
    get_tournament_or_404(scorebook_id, tournament_id, db)
    team = Team(
        id=new_id("team"),
        tournament_id=tournament_id,
        name=request.name,
        logo_url=request.logo_url,
        captain_id=request.captain_id,
        wicket_keeper_id=request.wicket_keeper_id,
    )
    db.add(team)
    db.commit()
    logger.info("Created team %s (%s)", team.id, team.name)
    return _team_response(team)


@router.get("/teams/{team_id}", response_model=TeamResponse)
def get_team(scorebook_id: str, team_id: str, db: Session = Depends(get_db)):
    return _team_response(get_team_or_404(scorebook_id, team_id, db))


@router.patch("/teams/{team_id}", response_model=TeamResponse)
def update_team(scorebook_id: str, team_id: str, request: TeamUpdate, db: Session = Depends(get_db)):
    team = get_team_or_404(scorebook_id, team_id, db)
    for name, value in request.model_dump(exclude_unset=True).items():
        setattr(team, name, value)
    db.commit()
    return _team_response(team)


@router.post("/teams/{team_id}/players", response_model=TeamResponse)
def add_player(scorebook_id: str, team_id: str, request: PlayerCreate, db: Session = Depends(get_db)):
    team = get_team_or_404(scorebook_id, team_id, db)
    player = Player(
        id=new_id("player"),
        team_id=team.id,
        name=request.name,
        role=PlayerRole(request.role.value),
        jersey_number=request.jersey_number,
        photo_url=request.photo_url,
        created_order=team.squad_size,
    )
    db.add(player)
    db.commit()
    db.refresh(team)
    return _team_response(team)
