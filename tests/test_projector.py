"""
Tests for the scoreboard projection.
"""
from dataclasses import dataclass, field
from typing import Optional

import pytest

from scorebook.engine.events import BallEvent
from scorebook.engine.projector import project, current_run_rate, over_slots, DEFAULT_THEME
from scorebook.engine.scoring import ScoringEngine, create_match, set_players
from scorebook.engine.state import Innings, MatchFormat


@dataclass
class FakePlayer:
    id: str
    name: str


@dataclass
class FakeTeam:
    id: str
    name: str
    logo_url: Optional[str] = None
    players: list = field(default_factory=list)


TEAMS = {
    "teamA": FakeTeam("teamA", "Harbour Hawks", "https://example.com/hawks.png", [
        FakePlayer("bat1", "Mehta"), FakePlayer("bat2", "Cole"), FakePlayer("bowlA", "Nair"),
    ]),
    "teamB": FakeTeam("teamB", "Valley Vipers", None, [
        FakePlayer("bowl1", "Reid"), FakePlayer("bat3", "Shah"), FakePlayer("bat4", "Grant"),
    ]),
}


def lookup(team_id):
    return TEAMS.get(team_id)


def create_live_match():
    match = create_match("m1", "t1", "teamA", "teamB", "teamA", "bat")
    return set_players(match, "bat1", "bat2", "bowl1")


def play(match, *codes):
    engine = ScoringEngine(MatchFormat.T20)
    for code in codes:
        match = engine.apply_ball(match, BallEvent(code))
    return match


class TestRunRate:
    """Current run rate formatting"""

    def test_no_balls_bowled(self):
        assert current_run_rate(Innings("A", "B")) == "0.00"

    def test_only_extras_bowled(self):
        assert current_run_rate(Innings("A", "B", score=2)) == "0.00"

    def test_partial_over(self):
        assert current_run_rate(Innings("A", "B", score=10, overs=1, balls=3)) == "6.67"

    def test_whole_overs(self):
        assert current_run_rate(Innings("A", "B", score=45, overs=5)) == "9.00"

    def test_missing_innings(self):
        assert current_run_rate(None) == "0.00"


class TestOverSlots:
    """Six-slot over display"""

    def test_empty_over_is_all_placeholders(self):
        assert over_slots([]) == [None] * 6

    def test_slots_are_labelled(self):
        match = play(create_live_match(), "1", "4", "W", "LB")
        slots = project(match, lookup).over_slots
        assert len(slots) == 6
        assert [(s.label, s.kind) for s in slots[:4]] == [
            ("1", "default"), ("4", "boundary"), ("W", "wicket"), ("LB", "extra"),
        ]
        assert slots[4:] == [None, None]

    def test_illegal_deliveries_are_not_slotted(self):
        match = play(create_live_match(), "WD", "NB", "2")
        slots = project(match, lookup).over_slots
        assert slots[0].label == "2"
        assert slots[1] is None


class TestProjectFirstInnings:
    """Projection while the first innings is in play"""

    def test_score_and_players(self):
        match = play(create_live_match(), "4", "1", "2", "WD")
        view = project(match, lookup)
        assert view.score_line == "8-0"
        assert view.overs_line == "0.3"
        assert view.crr == "16.00"
        assert view.batting_team_name == "Harbour Hawks"
        assert view.bowling_team_name == "Valley Vipers"
        assert view.team_a_logo == "https://example.com/hawks.png"
        # single rotated the strike: Cole is facing
        assert view.striker.name == "Cole"
        assert view.striker.on_strike
        assert (view.striker.runs, view.striker.balls) == (2, 1)
        assert view.striker.text == "Cole* 2 (1)"
        assert view.non_striker.name == "Mehta"
        assert (view.non_striker.runs, view.non_striker.balls) == (5, 2)
        assert view.bowler.name == "Reid"
        assert view.bowler.figures == "0-8"
        assert view.bowler.text == "Reid 0-8 (0.3)"

    def test_first_innings_framing(self):
        view = project(play(create_live_match(), "6"), lookup)
        assert view.target is None
        assert view.target_line == "First Innings"
        assert view.recap_line == "CRR: 36.00"

    def test_unassigned_players_use_placeholder(self):
        match = create_match("m1", "t1", "teamA", "teamB", "teamA", "bat")
        view = project(match, lookup)
        assert view.striker.name == "..."
        assert (view.striker.runs, view.striker.balls) == (0, 0)
        assert view.bowler.name == "..."
        assert view.bowler.figures == "0-0"

    def test_default_theme(self):
        view = project(create_live_match(), lookup)
        assert view.theme == DEFAULT_THEME
        assert not view.is_elite

    def test_elite_theme(self):
        view = project(create_live_match(), lookup, theme="elite-apex")
        assert view.is_elite

    def test_unknown_teams_do_not_fail(self):
        view = project(play(create_live_match(), "4"), lambda team_id: None)
        assert view.team_a_name is None
        assert view.batting_team_name is None
        assert view.striker.name == "..."
        assert view.score_line == "4-0"


class TestProjectSecondInnings:
    """Target and recap in the chase"""

    def test_target_and_recap(self):
        match = play(create_live_match(), "6", "4", *["W"] * 10)
        match = set_players(match, "bat3", "bat4", "bowlA")
        match = play(match, "2")
        view = project(match, lookup)
        assert view.current_innings == 2
        assert view.target == 11
        assert view.target_line == "Target: 11"
        assert view.recap_line == "Harbour Hawks 10-10"
        assert view.batting_team_name == "Valley Vipers"
        assert view.striker.name == "Shah"
        assert view.bowler.name == "Nair"


class TestSticker:
    """Big-moment sticker for boundaries and wickets"""

    @pytest.mark.parametrize("code, sticker", [("4", "4"), ("6", "6"), ("W", "OUT!"), ("1", None), ("LB", None)])
    def test_sticker_follows_last_ball(self, code, sticker):
        view = project(play(create_live_match(), code), lookup)
        assert view.sticker == sticker

    def test_no_sticker_at_start_of_over(self):
        match = play(create_live_match(), "0", "0", "0", "0", "0", "6")
        assert project(match, lookup).sticker is None
