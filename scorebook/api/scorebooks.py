"""
Scorebook endpoints. A scorebook id is the scorer's login.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from scorebook.database import get_db
from scorebook.models import Scorebook
from scorebook.repository import new_id
from scorebook.api.schemas import ScorebookResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scorebooks", tags=["Scorebooks"])


def get_scorebook_or_404(scorebook_id: str, db: Session) -> Scorebook:
    scorebook = db.get(Scorebook, scorebook_id)
    if not scorebook:
        raise HTTPException(status_code=404, detail="Scorebook not found")
    return scorebook


@router.post("", response_model=ScorebookResponse)
def create_scorebook(db: Session = Depends(get_db)):
    """Create an empty scorebook and return its login id"""
    scorebook = Scorebook(id=new_id("sb"))
    db.add(scorebook)
    db.commit()
    logger.info("Created scorebook %s", scorebook.id)
    return scorebook


@router.get("/{scorebook_id}", response_model=ScorebookResponse)
def get_scorebook(scorebook_id: str, db: Session = Depends(get_db)):
    return get_scorebook_or_404(scorebook_id, db)
