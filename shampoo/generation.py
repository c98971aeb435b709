# shampoo/generation.py
from __future__ import annotations

import random
from typing import List, Tuple

from shampoo.models import EventDefinition, EventId, GameConfiguration
from shampoo.tables import EVENTS, get_event


def random_event(rng: random.Random) -> EventDefinition:
    return rng.choice(EVENTS)


def generate_schedule(rng: random.Random, config: GameConfiguration) -> Tuple[EventDefinition, ...]:
    """
    Build the day-by-day events for one game:
      - exactly one MEETING and one DATE are always in
      - the other days are drawn uniformly (repeats allowed)
    Then shuffle so the guaranteed events land anywhere.
    """
    schedule: List[EventDefinition] = [
        get_event(EventId.MEETING),
        get_event(EventId.DATE),
    ]
    for _ in range(config.total_days - 2):
        schedule.append(random_event(rng))

    rng.shuffle(schedule)
    return tuple(schedule)
