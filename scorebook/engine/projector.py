"""
Read-only scoreboard values for the operator preview and the public overlay.
Recomputed from the match on every read; nothing here is cached or stored.
"""
from dataclasses import dataclass, field
from typing import Optional, List, Callable, Protocol, Sequence

from scorebook.engine.state import Match, Innings, Ball, BatsmanStats, BowlerStats

DEFAULT_THEME = "midnight-pro"
PLACEHOLDER_NAME = "..."
OVER_SLOTS = 6


class PlayerView(Protocol):
    id: str
    name: str


class TeamView(Protocol):
    id: str
    name: str
    logo_url: Optional[str]
    players: Sequence[PlayerView]


TeamLookup = Callable[[str], Optional[TeamView]]


@dataclass
class BallSlot:
    label: str
    kind: str  # wicket, boundary, extra, default


@dataclass
class BatsmanLine:
    name: str
    runs: int = 0
    balls: int = 0
    on_strike: bool = False

    @property
    def text(self) -> str:
        marker = "*" if self.on_strike else ""
        return f"{self.name}{marker} {self.runs} ({self.balls})"


@dataclass
class BowlerLine:
    name: str
    overs: int = 0
    balls: int = 0
    runs: int = 0
    wickets: int = 0

    @property
    def figures(self) -> str:
        return f"{self.wickets}-{self.runs}"

    @property
    def text(self) -> str:
        return f"{self.name} {self.figures} ({self.overs}.{self.balls})"


@dataclass
class DisplayModel:
    """Everything a scoreboard surface needs to draw one frame"""
    match_id: str
    status: str
    theme: str
    is_elite: bool
    current_innings: int
    team_a_name: Optional[str] = None
    team_b_name: Optional[str] = None
    team_a_logo: Optional[str] = None
    team_b_logo: Optional[str] = None
    batting_team_name: Optional[str] = None
    bowling_team_name: Optional[str] = None
    score_line: str = "0-0"
    overs_line: str = "0.0"
    crr: str = "0.00"
    target: Optional[int] = None
    target_line: Optional[str] = None
    recap_line: Optional[str] = None
    striker: Optional[BatsmanLine] = None
    non_striker: Optional[BatsmanLine] = None
    bowler: Optional[BowlerLine] = None
    over_slots: List[Optional[BallSlot]] = field(default_factory=list)
    sticker: Optional[str] = None


def current_run_rate(innings: Optional[Innings]) -> str:
    """Runs per over to two decimals, "0.00" before the first legal ball."""
    if innings is None:
        return "0.00"
    overs = innings.overs + innings.balls / 6
    if overs <= 0:
        return "0.00"
    return f"{innings.score / overs:.2f}"


def ball_slot(ball: Ball) -> BallSlot:
    if ball.event == "W":
        return BallSlot(label="W", kind="wicket")
    if ball.event in ("4", "6"):
        return BallSlot(label=ball.event, kind="boundary")
    if ball.event in ("WD", "NB", "LB"):
        return BallSlot(label=ball.event, kind="extra")
    return BallSlot(label=str(int(ball.event)), kind="default")


def over_slots(current_over: List[Ball]) -> List[Optional[BallSlot]]:
    """Six slots: balls bowled this over, then None for the ones to come."""
    slots: List[Optional[BallSlot]] = [ball_slot(b) for b in current_over[-OVER_SLOTS:]]
    slots.extend([None] * (OVER_SLOTS - len(slots)))
    return slots


def sticker_for(current_over: List[Ball]) -> Optional[str]:
    if not current_over:
        return None
    last = current_over[-1].event
    if last == "W":
        return "OUT!"
    if last in ("4", "6"):
        return last
    return None


def _player_name(team: Optional[TeamView], player_id: str) -> str:
    if team is None or not player_id:
        return PLACEHOLDER_NAME
    for player in team.players:
        if player.id == player_id:
            return player.name
    return PLACEHOLDER_NAME


def _batsman_line(innings: Innings, team: Optional[TeamView], player_id: str, on_strike: bool) -> BatsmanLine:
    stats = innings.batsman_stats.get(player_id) or BatsmanStats()
    return BatsmanLine(
        name=_player_name(team, player_id),
        runs=stats.runs,
        balls=stats.balls,
        on_strike=on_strike,
    )


def _bowler_line(innings: Innings, team: Optional[TeamView], player_id: str) -> BowlerLine:
    stats = innings.bowler_stats.get(player_id) or BowlerStats()
    return BowlerLine(
        name=_player_name(team, player_id),
        overs=stats.overs,
        balls=stats.balls,
        runs=stats.runs,
        wickets=stats.wickets,
    )


def project(match: Match, team_lookup: TeamLookup, theme: Optional[str] = None) -> DisplayModel:
    """Build the scoreboard view for a match. Unknown teams leave names unset."""
    theme = theme or DEFAULT_THEME
    innings = match.innings
    team_a = team_lookup(match.team_a_id)
    team_b = team_lookup(match.team_b_id)

    model = DisplayModel(
        match_id=match.id,
        status=match.status.value,
        theme=theme,
        is_elite=theme.startswith("elite-"),
        current_innings=match.current_innings,
        team_a_name=team_a.name if team_a else None,
        team_b_name=team_b.name if team_b else None,
        team_a_logo=team_a.logo_url if team_a else None,
        team_b_logo=team_b.logo_url if team_b else None,
        over_slots=over_slots(match.current_over),
        sticker=sticker_for(match.current_over),
    )
    if innings is None:
        return model

    batting = team_lookup(innings.batting_team_id)
    bowling = team_lookup(innings.bowling_team_id)
    model.batting_team_name = batting.name if batting else None
    model.bowling_team_name = bowling.name if bowling else None

    model.score_line = f"{innings.score}-{innings.wickets}"
    model.overs_line = innings.overs_display
    model.crr = current_run_rate(innings)

    model.striker = _batsman_line(innings, batting, match.striker_id, on_strike=True)
    model.non_striker = _batsman_line(innings, batting, match.non_striker_id, on_strike=False)
    model.bowler = _bowler_line(innings, bowling, match.bowler_id)

    if match.current_innings == 2:
        first = match.innings1
        first_team = team_lookup(first.batting_team_id)
        first_name = first_team.name if first_team else PLACEHOLDER_NAME
        model.target = innings.target
        model.target_line = f"Target: {innings.target}"
        model.recap_line = f"{first_name} {first.score}-{first.wickets}"
    else:
        model.target_line = "First Innings"
        model.recap_line = f"CRR: {model.crr}"
    return model
