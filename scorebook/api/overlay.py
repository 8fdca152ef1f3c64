"""
Public overlay feed. Read-only; any number of viewers can poll it.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from scorebook.database import get_db
from scorebook.repository import MatchRepository
from scorebook.api.matches import load_match, scoreboard
from scorebook.api.schemas import ScoreboardResponse

router = APIRouter(prefix="/overlay", tags=["Overlay"])


@router.get("/{scorebook_id}/{match_id}", response_model=ScoreboardResponse)
def get_overlay(scorebook_id: str, match_id: str, theme: Optional[str] = None, db: Session = Depends(get_db)):
    repo = MatchRepository(db)
    return scoreboard(load_match(scorebook_id, match_id, repo), repo, theme)
