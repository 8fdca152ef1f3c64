from typing import Optional, List
from sqlalchemy import String, ForeignKey, Enum, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from scorebook.database import Base
from scorebook.engine.state import MatchFormat


class Tournament(Base):
    __tablename__ = "tournaments"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    scorebook_id: Mapped[str] = mapped_column(ForeignKey("scorebooks.id", ondelete="CASCADE"))
    scorebook: Mapped["Scorebook"] = relationship("Scorebook", back_populates="tournaments")

    name: Mapped[str] = mapped_column(String(100))
    organizer: Mapped[str] = mapped_column(String(100), default="")
    format: Mapped[MatchFormat] = mapped_column(Enum(MatchFormat), default=MatchFormat.T20)
    start_date: Mapped[str] = mapped_column(String(10), default="")  # ISO date
    end_date: Mapped[str] = mapped_column(String(10), default="")
    location: Mapped[str] = mapped_column(String(100), default="")
    logo_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Deleting a tournament takes its teams and fixtures with it
    teams: Mapped[List["Team"]] = relationship(
        "Team", back_populates="tournament", cascade="all, delete-orphan"
    )
    fixtures: Mapped[List["Fixture"]] = relationship(
        "Fixture", back_populates="tournament", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Tournament {self.name} ({self.format.value})>"
