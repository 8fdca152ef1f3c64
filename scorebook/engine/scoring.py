"""
Ball-by-ball scoring engine.

Every function takes a Match and returns a new Match; the caller's copy is
never touched. Nothing here reads or writes storage: the caller loads the
match, runs the transition and saves whatever comes back.
"""
import copy
import logging
from typing import Optional, List, Tuple

from scorebook.engine.events import BallEvent, classify, is_charged_to_bowler
from scorebook.engine.state import (
    Match, Innings, Ball, BatsmanStats, BowlerStats,
    MatchFormat, MatchStatus, overs_cap,
)

logger = logging.getLogger(__name__)

BALLS_PER_OVER = 6
ALL_OUT = 10
ODD_RUNS = (1, 3, 5)


def _batsman(innings: Innings, player_id: str) -> BatsmanStats:
    return innings.batsman_stats.setdefault(player_id, BatsmanStats())


def _bowler(innings: Innings, player_id: str) -> BowlerStats:
    return innings.bowler_stats.setdefault(player_id, BowlerStats())


def _step_back(overs: int, balls: int) -> Tuple[int, int]:
    """Remove one legal ball from an overs.balls cursor, borrowing from overs."""
    if balls <= 0:
        return overs - 1, BALLS_PER_OVER - 1
    return overs, balls - 1


def _tally(innings: Innings, ball: Ball) -> bool:
    """
    Add one recorded delivery to the innings counters and player figures.
    Returns True when the delivery completed an over.
    """
    event = BallEvent(ball.event)

    innings.score += ball.runs
    if ball.is_wicket:
        innings.wickets += 1
    if ball.is_legal:
        innings.balls += 1

    if ball.batsman_id:
        batsman = _batsman(innings, ball.batsman_id)
        batsman.runs += event.bat_runs
        if ball.is_legal:
            batsman.balls += 1  # leg-byes count as a ball faced

    if ball.bowler_id:
        bowler = _bowler(innings, ball.bowler_id)
        if is_charged_to_bowler(event):
            bowler.runs += ball.runs
        if ball.is_wicket:
            bowler.wickets += 1
        if ball.is_legal:
            bowler.balls += 1
            if bowler.balls == BALLS_PER_OVER:
                bowler.overs += 1
                bowler.balls = 0

    if innings.balls == BALLS_PER_OVER:
        innings.overs += 1
        innings.balls = 0
        return True
    return False


def _swap_strike(match: Match):
    match.striker_id, match.non_striker_id = match.non_striker_id, match.striker_id


def _start_second_innings(match: Match):
    first = match.innings1
    match.innings2 = Innings(
        batting_team_id=first.bowling_team_id,
        bowling_team_id=first.batting_team_id,
        target=first.score + 1,
    )
    match.current_innings = 2
    match.striker_id = ""
    match.non_striker_id = ""
    match.bowler_id = ""
    match.current_over = []
    logger.info(
        "Match %s: innings 1 closed at %d/%d (%s), target %d",
        match.id, first.score, first.wickets, first.overs_display, match.innings2.target,
    )


def _finish(match: Match, reason: str):
    match.status = MatchStatus.FINISHED
    logger.info("Match %s finished: %s", match.id, reason)


def _drop_unused_stats(innings: Innings, ball: Ball):
    """Forget figures that only the removed ball had created."""
    if ball.batsman_id and not any(b.batsman_id == ball.batsman_id for b in innings.timeline):
        innings.batsman_stats.pop(ball.batsman_id, None)
    if ball.bowler_id and not any(b.bowler_id == ball.bowler_id for b in innings.timeline):
        innings.bowler_stats.pop(ball.bowler_id, None)


def _displayed_over(innings: Innings) -> List[Ball]:
    """
    Legal balls of the over the scoreboard should show: the one just
    completed when sitting on an over boundary, otherwise the one in progress.
    """
    if innings.balls == 0 and innings.overs > 0:
        over_number = innings.overs - 1
    else:
        over_number = innings.overs
    return [b for b in innings.timeline if b.is_legal and b.over_number == over_number]


class ScoringEngine:
    """
    Applies operator ball events to a live match.
    The match format only decides how many overs an innings lasts.
    """

    def __init__(self, match_format: Optional[MatchFormat] = None):
        self.match_format = match_format
        self.max_overs = overs_cap(match_format)

    def apply_ball(self, match: Match, event: BallEvent) -> Match:
        """
        Score one delivery. Non-live matches come back unchanged.
        Missing striker or bowler only skips that player's figures.
        """
        if not match.is_live or match.innings is None:
            return match

        event = BallEvent(event)
        delivery = classify(event)
        match = copy.deepcopy(match)
        innings = match.innings

        ball = Ball(
            event=event.value,
            runs=delivery.runs,
            is_wicket=delivery.is_wicket,
            is_extra=delivery.is_extra,
            over_number=innings.overs,
            ball_number=innings.balls + 1 if delivery.is_legal else innings.balls,
            batsman_id=match.striker_id,
            bowler_id=match.bowler_id,
        )
        innings.timeline.append(ball)
        over_complete = _tally(innings, ball)

        if delivery.is_legal:
            match.current_over.append(ball)
            if delivery.runs in ODD_RUNS:
                _swap_strike(match)

        if over_complete:
            match.current_over = []
            _swap_strike(match)

        self._check_innings_end(match, innings)
        return match

    def _check_innings_end(self, match: Match, innings: Innings):
        if innings.wickets >= ALL_OUT or innings.overs >= self.max_overs:
            if match.current_innings == 1:
                _start_second_innings(match)
            else:
                _finish(match, f"innings 2 closed at {innings.score}/{innings.wickets}")

        chase = match.innings2
        if chase is not None and chase.target is not None and chase.score >= chase.target:
            if match.status != MatchStatus.FINISHED:
                _finish(match, f"target {chase.target} reached")

    def undo_last_ball(self, match: Match) -> Match:
        """
        Take back the most recent delivery of the current innings.

        The striker returns to whoever faced the undone ball. The non-striker
        is left alone, and an innings change or finished match is not reverted.
        """
        innings = match.innings
        if innings is None or not innings.timeline:
            return match

        match = copy.deepcopy(match)
        innings = match.innings
        last = innings.timeline.pop()
        event = BallEvent(last.event)

        innings.score -= last.runs
        if last.is_wicket:
            innings.wickets -= 1

        batsman = innings.batsman_stats.get(last.batsman_id) if last.batsman_id else None
        if batsman:
            batsman.runs -= event.bat_runs
            if last.is_legal:
                batsman.balls -= 1

        bowler = innings.bowler_stats.get(last.bowler_id) if last.bowler_id else None
        if bowler:
            if is_charged_to_bowler(event):
                bowler.runs -= last.runs
            if last.is_wicket:
                bowler.wickets -= 1
            if last.is_legal:
                bowler.overs, bowler.balls = _step_back(bowler.overs, bowler.balls)

        if last.is_legal:
            innings.overs, innings.balls = _step_back(innings.overs, innings.balls)
        _drop_unused_stats(innings, last)

        match.current_over = _displayed_over(innings)
        match.striker_id = last.batsman_id
        logger.debug("Match %s: undid %s at %d.%d", match.id, last.event, last.over_number, last.ball_number)
        return match


def apply_ball(match: Match, event: BallEvent, match_format: Optional[MatchFormat] = None) -> Match:
    return ScoringEngine(match_format).apply_ball(match, event)


def undo_last_ball(match: Match) -> Match:
    return ScoringEngine().undo_last_ball(match)


def fold_innings(innings: Innings) -> Innings:
    """
    Rebuild an innings' counters and player figures from its timeline alone.
    A consistent innings folds back to itself.
    """
    rebuilt = Innings(
        batting_team_id=innings.batting_team_id,
        bowling_team_id=innings.bowling_team_id,
        target=innings.target,
    )
    for ball in innings.timeline:
        rebuilt.timeline.append(ball)
        _tally(rebuilt, ball)
    return rebuilt


# Operator actions around the ball-by-ball flow

def create_match(
    match_id: str,
    tournament_id: str,
    team_a_id: str,
    team_b_id: str,
    toss_winner_id: str,
    decision: str,
) -> Match:
    """New fixture with an empty first innings, batting side decided by the toss"""
    a_bats = (
        (toss_winner_id == team_a_id and decision == "bat")
        or (toss_winner_id == team_b_id and decision == "bowl")
    )
    batting_team_id = team_a_id if a_bats else team_b_id
    bowling_team_id = team_b_id if a_bats else team_a_id
    return Match(
        id=match_id,
        tournament_id=tournament_id,
        team_a_id=team_a_id,
        team_b_id=team_b_id,
        toss_winner_id=toss_winner_id,
        decision=decision,
        innings1=Innings(batting_team_id=batting_team_id, bowling_team_id=bowling_team_id),
    )


def _with_status(match: Match, status: MatchStatus) -> Match:
    match = copy.deepcopy(match)
    match.status = status
    return match


def start_match(match: Match) -> Match:
    return _with_status(match, MatchStatus.LIVE)


def end_match(match: Match) -> Match:
    return _with_status(match, MatchStatus.FINISHED)


def pause_match(match: Match) -> Match:
    if match.status != MatchStatus.LIVE:
        return match
    return _with_status(match, MatchStatus.PAUSED)


def resume_match(match: Match) -> Match:
    if match.status != MatchStatus.PAUSED:
        return match
    return _with_status(match, MatchStatus.LIVE)


def set_players(match: Match, striker_id: str, non_striker_id: str, bowler_id: str) -> Match:
    """Assign the batting pair and bowler. An upcoming match goes live."""
    match = copy.deepcopy(match)
    match.striker_id = striker_id
    match.non_striker_id = non_striker_id
    match.bowler_id = bowler_id
    if match.status == MatchStatus.UPCOMING:
        match.status = MatchStatus.LIVE
    return match


def change_innings(match: Match) -> Match:
    """Close the first innings by hand (declaration, rain, operator call)."""
    if not match.is_live or match.current_innings != 1:
        return match
    match = copy.deepcopy(match)
    _start_second_innings(match)
    return match


BATSMAN_FIELDS = ("runs", "balls")
BOWLER_FIELDS = ("overs", "balls", "runs", "wickets")


def edit_player_stats(match: Match, player_id: str, role: str, **fields) -> Match:
    """
    Overwrite a player's figures in the current innings.
    role is "batsman" or "bowler"; unknown fields are ignored.
    """
    innings = match.innings
    if innings is None or not player_id:
        return match
    if role not in ("batsman", "bowler"):
        raise ValueError(f"Unknown player role {role!r}")

    match = copy.deepcopy(match)
    innings = match.innings
    if role == "batsman":
        stats, allowed = _batsman(innings, player_id), BATSMAN_FIELDS
    else:
        stats, allowed = _bowler(innings, player_id), BOWLER_FIELDS

    for name, value in fields.items():
        if name in allowed and value is not None:
            setattr(stats, name, int(value))
    return match
