from scorebook.engine.events import BallEvent, parse_event
from scorebook.engine.scoring import ScoringEngine, apply_ball, undo_last_ball
from scorebook.engine.projector import project, DisplayModel

__all__ = ["BallEvent", "parse_event", "ScoringEngine", "apply_ball", "undo_last_ball", "project", "DisplayModel"]
