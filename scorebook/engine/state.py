"""
Match state dataclasses for the scoring engine.
Match, Innings, Ball and per-player stats with serialization support.

The persisted document keeps the camelCase keys the overlay clients read.
"""
import enum
from dataclasses import dataclass, field
from typing import Optional, Dict, List


class MatchFormat(enum.Enum):
    T10 = "T10"
    T20 = "T20"
    ODI = "ODI"


class MatchStatus(enum.Enum):
    UPCOMING = "upcoming"
    LIVE = "live"
    PAUSED = "paused"
    FINISHED = "finished"


OVERS_CAP = {
    MatchFormat.T10: 10,
    MatchFormat.T20: 20,
    MatchFormat.ODI: 50,
}


def overs_cap(match_format: Optional[MatchFormat]) -> int:
    """Overs per innings for a format. Unknown formats play 50 overs."""
    return OVERS_CAP.get(match_format, 50)


@dataclass
class BatsmanStats:
    runs: int = 0
    balls: int = 0

    def to_dict(self) -> dict:
        return {"runs": self.runs, "balls": self.balls}

    @classmethod
    def from_dict(cls, d: dict) -> "BatsmanStats":
        return cls(runs=d.get("runs", 0), balls=d.get("balls", 0))


@dataclass
class BowlerStats:
    overs: int = 0
    balls: int = 0  # 0-5, rolls into overs
    runs: int = 0
    wickets: int = 0

    @property
    def overs_display(self) -> str:
        return f"{self.overs}.{self.balls}"

    def to_dict(self) -> dict:
        return {
            "overs": self.overs,
            "balls": self.balls,
            "runs": self.runs,
            "wickets": self.wickets,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "BowlerStats":
        return cls(
            overs=d.get("overs", 0),
            balls=d.get("balls", 0),
            runs=d.get("runs", 0),
            wickets=d.get("wickets", 0),
        )


@dataclass(frozen=True)
class Ball:
    """A single recorded delivery. Never edited, only popped by undo."""
    event: str
    runs: int
    is_wicket: bool
    is_extra: bool
    over_number: int
    ball_number: int
    batsman_id: str = ""
    bowler_id: str = ""

    @property
    def is_legal(self) -> bool:
        return self.event not in ("WD", "NB")

    def to_dict(self) -> dict:
        return {
            "event": self.event,
            "runs": self.runs,
            "isWicket": self.is_wicket,
            "isExtra": self.is_extra,
            "overNumber": self.over_number,
            "ballNumber": self.ball_number,
            "batsmanId": self.batsman_id,
            "bowlerId": self.bowler_id,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Ball":
        return cls(
            event=d["event"],
            runs=d.get("runs", 0),
            is_wicket=d.get("isWicket", False),
            is_extra=d.get("isExtra", False),
            over_number=d.get("overNumber", 0),
            ball_number=d.get("ballNumber", 0),
            batsman_id=d.get("batsmanId", ""),
            bowler_id=d.get("bowlerId", ""),
        )


@dataclass
class Innings:
    """One team's batting effort. The timeline is the source of truth."""
    batting_team_id: str
    bowling_team_id: str
    score: int = 0
    wickets: int = 0
    overs: int = 0
    balls: int = 0  # legal balls in the current over, 0-5
    timeline: List[Ball] = field(default_factory=list)
    batsman_stats: Dict[str, BatsmanStats] = field(default_factory=dict)
    bowler_stats: Dict[str, BowlerStats] = field(default_factory=dict)
    target: Optional[int] = None

    @property
    def overs_display(self) -> str:
        return f"{self.overs}.{self.balls}"

    def to_dict(self) -> dict:
        d = {
            "battingTeamId": self.batting_team_id,
            "bowlingTeamId": self.bowling_team_id,
            "score": self.score,
            "wickets": self.wickets,
            "overs": self.overs,
            "balls": self.balls,
            "timeline": [b.to_dict() for b in self.timeline],
            "batsmanStats": {pid: s.to_dict() for pid, s in self.batsman_stats.items()},
            "bowlerStats": {pid: s.to_dict() for pid, s in self.bowler_stats.items()},
        }
        if self.target is not None:
            d["target"] = self.target
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Innings":
        return cls(
            batting_team_id=d["battingTeamId"],
            bowling_team_id=d["bowlingTeamId"],
            score=d.get("score", 0),
            wickets=d.get("wickets", 0),
            overs=d.get("overs", 0),
            balls=d.get("balls", 0),
            timeline=[Ball.from_dict(b) for b in d.get("timeline") or []],
            batsman_stats={
                pid: BatsmanStats.from_dict(s) for pid, s in (d.get("batsmanStats") or {}).items()
            },
            bowler_stats={
                pid: BowlerStats.from_dict(s) for pid, s in (d.get("bowlerStats") or {}).items()
            },
            target=d.get("target"),
        )


@dataclass
class Match:
    """
    One fixture between two teams.
    innings2 exists only once current_innings has moved to 2.
    Active player ids are empty strings when unassigned.
    """
    id: str
    team_a_id: str
    team_b_id: str
    innings1: Innings
    tournament_id: str = ""
    status: MatchStatus = MatchStatus.UPCOMING
    toss_winner_id: str = ""
    decision: str = "bat"  # "bat" or "bowl"
    innings2: Optional[Innings] = None
    current_innings: int = 1
    striker_id: str = ""
    non_striker_id: str = ""
    bowler_id: str = ""
    current_over: List[Ball] = field(default_factory=list)

    @property
    def innings(self) -> Optional[Innings]:
        """The innings currently in play."""
        return self.innings1 if self.current_innings == 1 else self.innings2

    @property
    def is_live(self) -> bool:
        return self.status == MatchStatus.LIVE

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "tournamentId": self.tournament_id,
            "teamAId": self.team_a_id,
            "teamBId": self.team_b_id,
            "status": self.status.value,
            "tossWinnerId": self.toss_winner_id,
            "decision": self.decision,
            "innings1": self.innings1.to_dict(),
            "currentInnings": self.current_innings,
            "strikerId": self.striker_id,
            "nonStrikerId": self.non_striker_id,
            "bowlerId": self.bowler_id,
            "currentOver": [b.to_dict() for b in self.current_over],
        }
        if self.innings2 is not None:
            d["innings2"] = self.innings2.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Match":
        innings2 = d.get("innings2")
        return cls(
            id=d["id"],
            tournament_id=d.get("tournamentId", ""),
            team_a_id=d["teamAId"],
            team_b_id=d["teamBId"],
            status=MatchStatus(d.get("status", MatchStatus.UPCOMING.value)),
            toss_winner_id=d.get("tossWinnerId", ""),
            decision=d.get("decision", "bat"),
            innings1=Innings.from_dict(d["innings1"]),
            innings2=Innings.from_dict(innings2) if innings2 else None,
            current_innings=d.get("currentInnings", 1),
            striker_id=d.get("strikerId", ""),
            non_striker_id=d.get("nonStrikerId", ""),
            bowler_id=d.get("bowlerId", ""),
            current_over=[Ball.from_dict(b) for b in d.get("currentOver") or []],
        )

    def __repr__(self):
        innings = self.innings
        score = f"{innings.score}/{innings.wickets} ({innings.overs_display})" if innings else "-"
        return f"<Match {self.id} [{self.status.value}] inn{self.current_innings} {score}>"
