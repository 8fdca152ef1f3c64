from typing import List
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from scorebook.database import Base


class Scorebook(Base):
    """
    A scorer's workspace, addressed by its login id (e.g. "sb_1718000000000").
    Owns every tournament, team and fixture the scorer creates.
    """
    __tablename__ = "scorebooks"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    tournaments: Mapped[List["Tournament"]] = relationship(
        "Tournament", back_populates="scorebook", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Scorebook {self.id}>"
