from scorebook.models.scorebook import Scorebook
from scorebook.models.tournament import Tournament
from scorebook.models.team import Team, Player, PlayerRole
from scorebook.models.match import Fixture

__all__ = [
    "Scorebook",
    "Tournament",
    "Team",
    "Player",
    "PlayerRole",
    "Fixture",
]
