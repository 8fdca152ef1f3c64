"""
Operator scoring endpoints.

Every action follows the same path: load the stored match, run one engine
transition, save the result, and answer with the fresh scoreboard.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Callable, List, Optional

from scorebook.config import settings
from scorebook.database import get_db
from scorebook.engine import scoring
from scorebook.engine.projector import project
from scorebook.engine.state import Match, MatchStatus
from scorebook.repository import MatchRepository, MatchNotFoundError, new_id
from scorebook.api.tournaments import get_tournament_or_404
from scorebook.api.schemas import (
    MatchCreate, MatchStateResponse, BallRequest, PlayersRequest,
    StatsEditRequest, ScoreboardResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scorebooks/{scorebook_id}", tags=["Matches"])


def load_match(scorebook_id: str, match_id: str, repo: MatchRepository) -> Match:
    try:
        if repo.scorebook_for(match_id) != scorebook_id:
            raise MatchNotFoundError(match_id)
        return repo.load(match_id)
    except MatchNotFoundError:
        raise HTTPException(status_code=404, detail="Match not found")


def scoreboard(match: Match, repo: MatchRepository, theme: Optional[str] = None) -> ScoreboardResponse:
    display = project(match, repo.team_lookup(), theme or settings.DEFAULT_THEME)
    return ScoreboardResponse.model_validate(display, from_attributes=True)


def _state_response(match: Match, repo: MatchRepository) -> MatchStateResponse:
    return MatchStateResponse(match=match.to_dict(), scoreboard=scoreboard(match, repo))


def _transition(
    scorebook_id: str,
    match_id: str,
    db: Session,
    action: str,
    step: Callable[[Match, MatchRepository], Match],
) -> MatchStateResponse:
    repo = MatchRepository(db)
    match = load_match(scorebook_id, match_id, repo)
    updated = step(match, repo)
    if updated is match:
        logger.info("Match %s: %s ignored (status=%s)", match_id, action, match.status.value)
    else:
        repo.save(match_id, updated)
        innings = updated.innings
        logger.info(
            "Match %s: %s -> %d/%d (%s) [%s]",
            match_id, action, innings.score, innings.wickets, innings.overs_display, updated.status.value,
        )
    return _state_response(updated, repo)


@router.post("/tournaments/{tournament_id}/matches", response_model=MatchStateResponse)
def create_match(scorebook_id: str, tournament_id: str, request: MatchCreate, db: Session = Depends(get_db)):
    """Create a fixture from the toss. The first innings starts empty."""
    tournament = get_tournament_or_404(scorebook_id, tournament_id, db)
    team_ids = {t.id for t in tournament.teams}
    if request.team_a_id == request.team_b_id:
        raise HTTPException(status_code=400, detail="A team cannot play itself")
    if request.team_a_id not in team_ids or request.team_b_id not in team_ids:
        raise HTTPException(status_code=400, detail="Both teams must belong to the tournament")
    if request.toss_winner_id not in (request.team_a_id, request.team_b_id):
        raise HTTPException(status_code=400, detail="Toss winner must be one of the two teams")

    match = scoring.create_match(
        new_id("match"),
        tournament_id,
        request.team_a_id,
        request.team_b_id,
        request.toss_winner_id,
        request.decision.value,
    )
    repo = MatchRepository(db)
    repo.create(match)
    return _state_response(match, repo)


@router.get("/tournaments/{tournament_id}/matches", response_model=List[MatchStateResponse])
def list_matches(scorebook_id: str, tournament_id: str, db: Session = Depends(get_db)):
    get_tournament_or_404(scorebook_id, tournament_id, db)
    repo = MatchRepository(db)
    return [_state_response(m, repo) for m in repo.list_for_tournament(tournament_id)]


@router.get("/matches/{match_id}", response_model=MatchStateResponse)
def get_match(scorebook_id: str, match_id: str, db: Session = Depends(get_db)):
    repo = MatchRepository(db)
    return _state_response(load_match(scorebook_id, match_id, repo), repo)


@router.post("/matches/{match_id}/start", response_model=MatchStateResponse)
def start_match(scorebook_id: str, match_id: str, db: Session = Depends(get_db)):
    """Go live. The batting pair and bowler must already be assigned."""

    def step(match: Match, _) -> Match:
        if not (match.striker_id and match.non_striker_id and match.bowler_id):
            raise HTTPException(status_code=400, detail="Assign striker, non-striker and bowler before starting")
        return scoring.start_match(match)

    return _transition(scorebook_id, match_id, db, "start", step)


@router.post("/matches/{match_id}/end", response_model=MatchStateResponse)
def end_match(scorebook_id: str, match_id: str, db: Session = Depends(get_db)):
    return _transition(scorebook_id, match_id, db, "end", lambda m, _: scoring.end_match(m))


@router.post("/matches/{match_id}/pause", response_model=MatchStateResponse)
def pause_match(scorebook_id: str, match_id: str, db: Session = Depends(get_db)):
    return _transition(scorebook_id, match_id, db, "pause", lambda m, _: scoring.pause_match(m))


@router.post("/matches/{match_id}/resume", response_model=MatchStateResponse)
def resume_match(scorebook_id: str, match_id: str, db: Session = Depends(get_db)):
    return _transition(scorebook_id, match_id, db, "resume", lambda m, _: scoring.resume_match(m))


@router.post("/matches/{match_id}/players", response_model=MatchStateResponse)
def set_players(scorebook_id: str, match_id: str, request: PlayersRequest, db: Session = Depends(get_db)):
    """Assign striker, non-striker and bowler. Starts an upcoming match."""
    if not (request.striker_id and request.non_striker_id and request.bowler_id):
        raise HTTPException(status_code=400, detail="Striker, non-striker and bowler are all required")
    if request.striker_id == request.non_striker_id:
        raise HTTPException(status_code=400, detail="Striker and non-striker must be different players")

    def step(match: Match, _) -> Match:
        if match.status == MatchStatus.FINISHED:
            return match
        return scoring.set_players(match, request.striker_id, request.non_striker_id, request.bowler_id)

    return _transition(scorebook_id, match_id, db, "players", step)


@router.post("/matches/{match_id}/ball", response_model=MatchStateResponse)
def score_ball(scorebook_id: str, match_id: str, request: BallRequest, db: Session = Depends(get_db)):
    def step(match: Match, repo: MatchRepository) -> Match:
        return scoring.apply_ball(match, request.event, repo.format_for(match_id))

    return _transition(scorebook_id, match_id, db, f"ball {request.event.value}", step)


@router.post("/matches/{match_id}/undo", response_model=MatchStateResponse)
def undo_ball(scorebook_id: str, match_id: str, db: Session = Depends(get_db)):
    return _transition(scorebook_id, match_id, db, "undo", lambda m, _: scoring.undo_last_ball(m))


@router.post("/matches/{match_id}/change-innings", response_model=MatchStateResponse)
def change_innings(scorebook_id: str, match_id: str, db: Session = Depends(get_db)):
    repo = MatchRepository(db)
    match = load_match(scorebook_id, match_id, repo)
    if match.status != MatchStatus.LIVE or match.current_innings != 1:
        raise HTTPException(status_code=400, detail="Innings can only be changed during a live first innings")
    return _transition(scorebook_id, match_id, db, "change-innings", lambda m, _: scoring.change_innings(m))


@router.post("/matches/{match_id}/stats", response_model=MatchStateResponse)
def edit_stats(scorebook_id: str, match_id: str, request: StatsEditRequest, db: Session = Depends(get_db)):
    """Correct a player's figures in the current innings by hand"""
    fields = request.model_dump(exclude={"player_id", "role"}, exclude_none=True)

    def step(match: Match, _) -> Match:
        return scoring.edit_player_stats(match, request.player_id, request.role.value, **fields)

    return _transition(scorebook_id, match_id, db, f"stats {request.player_id}", step)


@router.delete("/matches/{match_id}")
def delete_match(scorebook_id: str, match_id: str, db: Session = Depends(get_db)):
    repo = MatchRepository(db)
    load_match(scorebook_id, match_id, repo)
    repo.delete(match_id)
    logger.info("Deleted match %s", match_id)
    return {"deleted": match_id}
