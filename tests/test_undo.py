"""
Tests for taking back the last ball.
"""
import pytest

from scorebook.engine.events import BallEvent
from scorebook.engine.scoring import (
    ScoringEngine, apply_ball, undo_last_ball, create_match, set_players, fold_innings,
)
from scorebook.engine.state import MatchFormat, MatchStatus

ALL_EVENTS = [e.value for e in BallEvent]


def create_live_match():
    match = create_match("m1", "t1", "teamA", "teamB", "teamA", "bat")
    return set_players(match, "bat1", "bat2", "bowl1")


def play(match, *codes):
    engine = ScoringEngine(MatchFormat.T20)
    for code in codes:
        match = engine.apply_ball(match, BallEvent(code))
    return match


def snapshot(match):
    innings = match.innings
    return (
        innings.score,
        innings.wickets,
        innings.overs,
        innings.balls,
        {pid: (s.runs, s.balls) for pid, s in innings.batsman_stats.items()},
        {pid: (s.overs, s.balls, s.runs, s.wickets) for pid, s in innings.bowler_stats.items()},
    )


class TestUndoInvertsApply:
    """undo(apply(m, e)) gives back the counters and figures of m"""

    @pytest.mark.parametrize("code", ALL_EVENTS)
    def test_mid_over(self, code):
        before = play(create_live_match(), "1", "2", "WD")
        after = undo_last_ball(apply_ball(before, BallEvent(code), MatchFormat.T20))
        assert snapshot(after) == snapshot(before)
        assert after.innings.timeline == before.innings.timeline

    @pytest.mark.parametrize("code", ALL_EVENTS)
    def test_on_fifth_ball(self, code):
        before = play(create_live_match(), "0", "0", "0", "0", "0", "0", "2", "0", "0", "0", "0")
        after = undo_last_ball(apply_ball(before, BallEvent(code), MatchFormat.T20))
        assert snapshot(after) == snapshot(before)

    def test_across_over_boundary_borrows_from_overs(self):
        before = play(create_live_match(), "4", "0", "0", "0", "0")
        ended = play(before, "1")
        assert (ended.innings.overs, ended.innings.balls) == (1, 0)

        undone = undo_last_ball(ended)
        assert (undone.innings.overs, undone.innings.balls) == (0, 5)
        bowler = undone.innings.bowler_stats["bowl1"]
        assert (bowler.overs, bowler.balls) == (0, 5)
        assert snapshot(undone) == snapshot(before)

    @pytest.mark.parametrize("code", ALL_EVENTS)
    def test_first_ball_of_innings(self, code):
        before = create_live_match()
        after = undo_last_ball(apply_ball(before, BallEvent(code), MatchFormat.T20))
        assert snapshot(after) == snapshot(before)
        assert after.innings.batsman_stats == {}
        assert after.innings.bowler_stats == {}

    def test_new_bowler_entry_dropped_on_undo(self):
        before = play(create_live_match(), "0", "0", "0", "0", "0", "0")
        before = set_players(before, before.striker_id, before.non_striker_id, "bowl2")
        after = undo_last_ball(play(before, "1"))
        assert set(after.innings.bowler_stats) == {"bowl1"}
        assert set(after.innings.batsman_stats) == set(before.innings.batsman_stats)

    def test_undo_does_not_mutate_input(self):
        match = play(create_live_match(), "4")
        undo_last_ball(match)
        assert match.innings.score == 4
        assert len(match.innings.timeline) == 1

    def test_repeated_undo_back_to_start(self):
        match = play(create_live_match(), "1", "WD", "4", "LB", "W", "0", "6", "NB")
        for _ in range(8):
            match = undo_last_ball(match)
        innings = match.innings
        assert (innings.score, innings.wickets, innings.overs, innings.balls) == (0, 0, 0, 0)
        assert innings.timeline == []
        assert innings.batsman_stats == {}
        assert innings.bowler_stats == {}

    def test_counters_agree_with_fold_after_undo(self):
        match = play(create_live_match(), "1", "WD", "4", "LB", "NB", "W", "6", "0", "3")
        match = undo_last_ball(undo_last_ball(match))
        folded = fold_innings(match.innings)
        assert snapshot(match) == (
            folded.score, folded.wickets, folded.overs, folded.balls,
            {pid: (s.runs, s.balls) for pid, s in folded.batsman_stats.items()},
            {pid: (s.overs, s.balls, s.runs, s.wickets) for pid, s in folded.bowler_stats.items()},
        )


class TestUndoDisplayAndStrike:
    """Current over and striker after undo"""

    def test_empty_timeline_is_noop(self):
        match = create_live_match()
        assert undo_last_ball(match) is match

    def test_current_over_rebuilt_for_in_progress_over(self):
        match = play(create_live_match(), *["0"] * 6, "4", "WD", "2", "6")
        match = undo_last_ball(match)
        assert [b.event for b in match.current_over] == ["4", "2"]

    def test_current_over_shows_completed_over_on_boundary(self):
        match = play(create_live_match(), "4", "0", "0", "1", "0", "2", "6")
        assert [b.event for b in match.current_over] == ["6"]
        match = undo_last_ball(match)
        assert (match.innings.overs, match.innings.balls) == (1, 0)
        assert [b.event for b in match.current_over] == ["4", "0", "0", "1", "0", "2"]

    def test_striker_restored_to_batsman_of_undone_ball(self):
        match = play(create_live_match(), "1")
        assert match.striker_id == "bat2"
        match = undo_last_ball(match)
        assert match.striker_id == "bat1"

    def test_non_striker_not_restored(self):
        match = play(create_live_match(), "1")
        match = undo_last_ball(match)
        # bat1 is back on strike, the non-striker is left as it was after the ball
        assert (match.striker_id, match.non_striker_id) == ("bat1", "bat1")

    def test_bowler_not_charged_on_leg_bye_undo(self):
        match = play(create_live_match(), "4", "LB")
        match = undo_last_ball(match)
        bowler = match.innings.bowler_stats["bowl1"]
        assert (bowler.runs, bowler.balls) == (4, 1)
        assert match.innings.batsman_stats["bat1"].balls == 1


class TestUndoDoesNotRevertTransitions:
    """An innings change or a finished match stays as it is"""

    def test_undo_after_innings_transition(self):
        match = play(create_live_match(), *["W"] * 10)
        assert match.current_innings == 2
        undone = undo_last_ball(match)
        assert undone is match
        assert undone.current_innings == 2
        assert undone.innings1.wickets == 10

    def test_undo_after_chase_keeps_finished(self):
        match = play(create_live_match(), "1", *["W"] * 10)
        match = set_players(match, "bat3", "bat4", "bowl3")
        match = play(match, "4")
        assert match.status == MatchStatus.FINISHED
        undone = undo_last_ball(match)
        assert undone.innings2.score == 0
        assert undone.status == MatchStatus.FINISHED
