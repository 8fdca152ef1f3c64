from typing import Optional, List
from sqlalchemy import String, Integer, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
import enum
from scorebook.database import Base


class PlayerRole(enum.Enum):
    BATSMAN = "Batsman"
    BOWLER = "Bowler"
    ALL_ROUNDER = "All-Rounder"
    WICKET_KEEPER = "Wicket-Keeper"


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tournament_id: Mapped[str] = mapped_column(ForeignKey("tournaments.id", ondelete="CASCADE"))
    tournament: Mapped["Tournament"] = relationship("Tournament", back_populates="teams")

    name: Mapped[str] = mapped_column(String(100))
    logo_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    captain_id: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    wicket_keeper_id: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)

    players: Mapped[List["Player"]] = relationship(
        "Player", back_populates="team", cascade="all, delete-orphan", order_by="Player.created_order"
    )

    @property
    def squad_size(self) -> int:
        return len(self.players)

    def __repr__(self):
        return f"<Team {self.name}>"


class Player(Base):
    __tablename__ = "players"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    team_id: Mapped[str] = mapped_column(ForeignKey("teams.id", ondelete="CASCADE"))
    team: Mapped["Team"] = relationship("Team", back_populates="players")

    name: Mapped[str] = mapped_column(String(100))
    role: Mapped[PlayerRole] = mapped_column(Enum(PlayerRole), default=PlayerRole.BATSMAN)
    jersey_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    photo_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    created_order: Mapped[int] = mapped_column(Integer, default=0)

    def __repr__(self):
        return f"<Player {self.name} ({self.role.value})>"
