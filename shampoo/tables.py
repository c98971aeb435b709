# shampoo/tables.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple, Union

from shampoo.config import (
    CHAOS_HUMIDITY_CHANCE,
    CHAOS_NONE_CHANCE,
    CHAOS_RAIN_CHANCE,
    HAIR_CYCLE_MAX_DAYS,
)
from shampoo.models import (
    ChaosId,
    ChaosOutcome,
    EventDefinition,
    EventId,
    HairCycleEntry,
)


# --- Hair cycle (days since wash -> look) ---
HAIR_CYCLE: Mapping[int, HairCycleEntry] = MappingProxyType({
    0: HairCycleEntry(score=9, description="Fresh and Clean ✨", badge="Shampoo Day"),
    1: HairCycleEntry(score=10, description="Perfect balance", badge="Peak (Day 1)"),
    2: HairCycleEntry(score=7, description="Lived-in texture", badge="Good (Day 2)"),
    3: HairCycleEntry(score=3, description="Visibly dirty", badge="Greasy (Day 3)"),
    4: HairCycleEntry(score=1, description="Oil slick", badge="Gross (Day 4+)"),
})


def hair_quality(days_since_wash: int) -> HairCycleEntry:
    """Look up the hair entry; every day past the last bucket reuses it."""
    return HAIR_CYCLE[min(days_since_wash, HAIR_CYCLE_MAX_DAYS)]


# --- Event catalog ---
EVENTS: Tuple[EventDefinition, ...] = (
    EventDefinition(
        id=EventId.MEETING,
        name="Client Meeting",
        multiplier=3.0,
        description="High stakes professional. Needs Day 0 or 1.",
        icon="💼",
    ),
    EventDefinition(
        id=EventId.DATE,
        name="Hot Date",
        multiplier=2.5,
        description="High stakes romantic. Needs Day 1 or 2.",
        icon="❤️",
    ),
    EventDefinition(
        id=EventId.PARTY,
        name="Social Party",
        multiplier=1.5,
        description="Medium stakes. Flexible.",
        icon="🎉",
    ),
    EventDefinition(
        id=EventId.CHILL,
        name="WFH / Chill",
        multiplier=1.0,
        description="Low stakes. Maintenance day.",
        icon="🏠",
    ),
    EventDefinition(
        id=EventId.WORKOUT,
        name="Gym / Run",
        multiplier=0.5,
        description="Dirty hair bonus (+15pt) if Day 3+.",
        icon="💪",
    ),
)

_EVENTS_BY_ID: Mapping[EventId, EventDefinition] = MappingProxyType(
    {e.id: e for e in EVENTS})


# --- Chaos catalog (order matters: rolls walk it cumulatively) ---
CHAOS_TYPES: Tuple[ChaosOutcome, ...] = (
    ChaosOutcome(
        id=ChaosId.RAIN,
        probability=CHAOS_RAIN_CHANCE,
        message="Sudden downpour! Perfect hair ruined.",
        icon="🌧️",
    ),
    ChaosOutcome(
        id=ChaosId.HUMIDITY,
        probability=CHAOS_HUMIDITY_CHANCE,
        message="High humidity! It puffed up.",
        icon="🌫️",
    ),
    ChaosOutcome(
        id=ChaosId.NONE,
        probability=CHAOS_NONE_CHANCE,
        message="",
        icon="",
    ),
)

_CHAOS_BY_ID: Mapping[ChaosId, ChaosOutcome] = MappingProxyType(
    {c.id: c for c in CHAOS_TYPES})

NO_CHAOS = _CHAOS_BY_ID[ChaosId.NONE]


def get_event(event_id: Union[EventId, str]) -> EventDefinition:
    try:
        return _EVENTS_BY_ID[EventId(event_id)]
    except ValueError as e:
        raise KeyError(f"Unknown event: {event_id}") from e


def get_chaos(chaos_id: Union[ChaosId, str]) -> ChaosOutcome:
    try:
        return _CHAOS_BY_ID[ChaosId(chaos_id)]
    except ValueError as e:
        raise KeyError(f"Unknown chaos outcome: {chaos_id}") from e
