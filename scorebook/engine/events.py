"""
Ball event vocabulary and classification.
The operator console sends one of these eleven codes per delivery.
"""
import enum
from dataclasses import dataclass
from typing import Dict, Union


class BallEvent(str, enum.Enum):
    DOT = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    WICKET = "W"
    WIDE = "WD"
    NO_BALL = "NB"
    LEG_BYE = "LB"

    @property
    def is_numeral(self) -> bool:
        return self.value.isdigit()

    @property
    def bat_runs(self) -> int:
        """Runs credited to the striker. Extras and wickets give none."""
        return int(self.value) if self.is_numeral else 0


@dataclass(frozen=True)
class Delivery:
    """How a single event moves the scoreboard"""
    runs: int = 0
    is_wicket: bool = False
    is_extra: bool = False
    is_legal: bool = True


DELIVERIES: Dict[BallEvent, Delivery] = {
    BallEvent.DOT: Delivery(runs=0),
    BallEvent.ONE: Delivery(runs=1),
    BallEvent.TWO: Delivery(runs=2),
    BallEvent.THREE: Delivery(runs=3),
    BallEvent.FOUR: Delivery(runs=4),
    BallEvent.FIVE: Delivery(runs=5),
    BallEvent.SIX: Delivery(runs=6),
    BallEvent.WICKET: Delivery(is_wicket=True),
    BallEvent.WIDE: Delivery(runs=1, is_extra=True, is_legal=False),
    BallEvent.NO_BALL: Delivery(runs=1, is_extra=True, is_legal=False),
    # Leg-bye is a legal ball; the run is an extra, not charged to the bowler
    BallEvent.LEG_BYE: Delivery(runs=1, is_extra=True),
}

_missing = set(BallEvent) - set(DELIVERIES)
if _missing:
    raise RuntimeError(f"No delivery rule for events: {sorted(e.value for e in _missing)}")


def classify(event: BallEvent) -> Delivery:
    return DELIVERIES[event]


def parse_event(code: Union[str, BallEvent]) -> BallEvent:
    """
    Validate a raw event code at the input boundary.
    Raises ValueError for anything outside the vocabulary.
    """
    if isinstance(code, BallEvent):
        return code
    try:
        return BallEvent(str(code).strip().upper())
    except ValueError:
        valid = ", ".join(e.value for e in BallEvent)
        raise ValueError(f"Unknown ball event {code!r}. Expected one of: {valid}") from None


def is_charged_to_bowler(event: BallEvent) -> bool:
    return event != BallEvent.LEG_BYE
