"""
Scorebook - Live Cricket Scoring API
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scorebook.config import settings, configure_logging
from scorebook.database import init_db
from scorebook.api import (
    scorebooks_router, tournaments_router, teams_router, matches_router, overlay_router,
)

configure_logging()

# Initialize FastAPI app
app = FastAPI(
    title="Scorebook",
    description="Ball-by-ball cricket scoring with a live broadcast overlay",
    version="0.1.0",
)

default_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
default_origins.extend(settings.cors_origins)

# CORS middleware for the operator console and overlay pages
app.add_middleware(
    CORSMiddleware,
    allow_origins=default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(scorebooks_router, prefix="/api")
app.include_router(tournaments_router, prefix="/api")
app.include_router(teams_router, prefix="/api")
app.include_router(matches_router, prefix="/api")
app.include_router(overlay_router, prefix="/api")


@app.on_event("startup")
def startup_event():
    """Initialize database on startup"""
    init_db()


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "Scorebook API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
