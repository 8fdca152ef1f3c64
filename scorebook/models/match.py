import json
from typing import Optional
from sqlalchemy import String, ForeignKey, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from scorebook.database import Base
from scorebook.engine.state import Match, MatchFormat


class Fixture(Base):
    """
    Stored fixture. The whole scoring state lives in state_json as the
    engine's Match document; the columns here are only for lookup.
    """
    __tablename__ = "fixtures"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tournament_id: Mapped[str] = mapped_column(ForeignKey("tournaments.id", ondelete="CASCADE"))
    tournament: Mapped["Tournament"] = relationship("Tournament", back_populates="fixtures")

    status: Mapped[str] = mapped_column(String(10), default="upcoming")
    state_json: Mapped[str] = mapped_column(Text)  # JSON Match
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def state(self) -> Match:
        """Deserialize the engine Match from JSON."""
        return Match.from_dict(json.loads(self.state_json))

    @state.setter
    def state(self, match: Match):
        self.state_json = json.dumps(match.to_dict())
        self.status = match.status.value

    @property
    def match_format(self) -> Optional[MatchFormat]:
        return self.tournament.format if self.tournament else None

    def __repr__(self):
        return f"<Fixture {self.id} [{self.status}]>"
