"""
Storage side of the scoring flow: load a Match, hand it to the engine,
save what comes back. The engine never touches this module.
"""
import logging
import time
import uuid
from typing import Optional, List

from sqlalchemy.orm import Session

from scorebook.engine.state import Match, MatchFormat
from scorebook.models import Fixture, Team

logger = logging.getLogger(__name__)


class MatchNotFoundError(LookupError):
    pass


def new_id(prefix: str) -> str:
    """Ids shaped "<prefix>_<millis><4 hex>"; the suffix keeps ids made in the same millisecond apart"""
    return f"{prefix}_{int(time.time() * 1000)}{uuid.uuid4().hex[:4]}"


class MatchRepository:
    """load/save of engine Match values backed by the fixtures table"""

    def __init__(self, db: Session):
        self.db = db

    def _fixture(self, match_id: str) -> Fixture:
        fixture = self.db.get(Fixture, match_id)
        if fixture is None:
            raise MatchNotFoundError(match_id)
        return fixture

    def load(self, match_id: str) -> Match:
        return self._fixture(match_id).state

    def save(self, match_id: str, match: Match):
        fixture = self._fixture(match_id)
        fixture.state = match
        self.db.commit()
        logger.debug("Saved match %s (%s)", match_id, match.status.value)

    def create(self, match: Match) -> Fixture:
        fixture = Fixture(id=match.id, tournament_id=match.tournament_id)
        fixture.state = match
        self.db.add(fixture)
        self.db.commit()
        logger.info("Created match %s in tournament %s", match.id, match.tournament_id)
        return fixture

    def delete(self, match_id: str):
        self.db.delete(self._fixture(match_id))
        self.db.commit()

    def list_for_tournament(self, tournament_id: str) -> List[Match]:
        fixtures = self.db.query(Fixture).filter_by(tournament_id=tournament_id).all()
        return [f.state for f in fixtures]

    def format_for(self, match_id: str) -> Optional[MatchFormat]:
        return self._fixture(match_id).match_format

    def scorebook_for(self, match_id: str) -> Optional[str]:
        tournament = self._fixture(match_id).tournament
        return tournament.scorebook_id if tournament else None

    def team_lookup(self):
        """Callable team_id -> Team for the projector"""
        def lookup(team_id: str) -> Optional[Team]:
            if not team_id:
                return None
            return self.db.get(Team, team_id)
        return lookup
