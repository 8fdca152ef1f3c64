"""
HTTP surface for the operator console and the broadcast overlay
"""
from scorebook.api.scorebooks import router as scorebooks_router
from scorebook.api.tournaments import router as tournaments_router
from scorebook.api.teams import router as teams_router
from scorebook.api.matches import router as matches_router
from scorebook.api.overlay import router as overlay_router

__all__ = [
    "scorebooks_router",
    "tournaments_router",
    "teams_router",
    "matches_router",
    "overlay_router",
]
