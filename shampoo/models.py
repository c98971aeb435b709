# shampoo/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from shampoo.config import (
    STARTING_DAYS_SINCE_WASH,
    STARTING_HEALTH,
    TOTAL_DAYS,
    WAIT_RECOVERY,
    WASH_COST,
)


class Action(str, Enum):
    WASH = "wash"
    WAIT = "wait"

    @property
    def label(self) -> str:
        return "SHAMPOOING" if self is Action.WASH else "WAIT"


class EventId(str, Enum):
    MEETING = "MEETING"
    DATE = "DATE"
    PARTY = "PARTY"
    CHILL = "CHILL"
    WORKOUT = "WORKOUT"


class ChaosId(str, Enum):
    RAIN = "RAIN"
    HUMIDITY = "HUMIDITY"
    NONE = "NONE"


@dataclass(frozen=True)
class HairCycleEntry:
    """How good hair looks N days after a wash (score is 0..10)."""
    score: int
    description: str
    badge: str


@dataclass(frozen=True)
class EventDefinition:
    """A scheduled activity. The multiplier scales the day's hair quality."""
    id: EventId
    name: str
    multiplier: float
    description: str
    icon: str


@dataclass(frozen=True)
class ChaosOutcome:
    id: ChaosId
    probability: float
    message: str
    icon: str


@dataclass(frozen=True)
class GameConfiguration:
    total_days: int = TOTAL_DAYS
    starting_health: int = STARTING_HEALTH
    wash_cost: int = WASH_COST
    wait_recovery: int = WAIT_RECOVERY
    starting_days_since_wash: int = STARTING_DAYS_SINCE_WASH

    def __post_init__(self) -> None:
        # One Meeting and one Date are always scheduled.
        if self.total_days < 2:
            raise ValueError("total_days must be at least 2")
        if self.starting_health <= 0:
            raise ValueError("starting_health must be positive")
        if self.starting_days_since_wash < 0:
            raise ValueError("starting_days_since_wash must be non-negative")


DEFAULT_CONFIG = GameConfiguration()


@dataclass(frozen=True)
class TurnRecord:
    """One played day. Health and days-since-wash are the post-action values."""
    day: int
    event: EventDefinition
    action: Action
    action_label: str
    score: int
    health_after: int
    days_since_wash_after: int
    chaos: ChaosOutcome


@dataclass(frozen=True)
class TerminalReason:
    """Why a session ended: "hair_fried" (health ran out) or "completed"."""
    kind: str
    message: str
    day: int


@dataclass(frozen=True)
class TurnOutcome:
    """
    What one submitted action produced:
      record only          -> an ordinary day
      record + terminal    -> the last day was played
      terminal only        -> a fatal wash, nothing was scored
    """
    record: Optional[TurnRecord] = None
    terminal: Optional[TerminalReason] = None


@dataclass(frozen=True)
class SolverResult:
    best_score: int
    best_path: Tuple[int, ...]  # per day, 1 = wash, 0 = wait


@dataclass
class GameState:
    """
    One play-through. Keep this as a 'data bag': submit_action in
    game.py is the only thing that mutates it.
    """
    config: GameConfiguration
    rng_seed: int

    current_day: int
    hair_health: int
    days_since_wash: int
    total_score: int

    schedule: Tuple[EventDefinition, ...]
    history: List[TurnRecord] = field(default_factory=list)

    game_over: bool = False
    terminal: Optional[TerminalReason] = None

    # Filled in once, when the session ends
    solver_result: Optional[SolverResult] = None


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to the presentation layer."""
    current_day: int
    total_days: int
    hair_health: int
    days_since_wash: int
    total_score: int
    current_event: Optional[EventDefinition]
    schedule: Tuple[EventDefinition, ...]
    history: Tuple[TurnRecord, ...]
    game_over: bool
    terminal: Optional[TerminalReason]

    hair: HairCycleEntry
    look_percent: float
    overall_quality: int
    health_band: str


@dataclass(frozen=True)
class GameResult:
    final_score: int
    solver_result: SolverResult
    player_path: Tuple[int, ...]
    score_history: Tuple[int, ...]
    days_played: int
    terminal: Optional[TerminalReason]
