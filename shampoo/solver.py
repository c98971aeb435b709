# shampoo/solver.py
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from shampoo.models import (
    DEFAULT_CONFIG,
    Action,
    EventDefinition,
    GameConfiguration,
    SolverResult,
)
from shampoo.scoring import calculate_score
from shampoo.simulation import apply_action, is_dead
from shampoo.tables import NO_CHAOS


def mask_to_path(mask: int, days: int) -> Tuple[int, ...]:
    """Day 0 is the most significant bit: 0b10...0 means wash on day 0 only."""
    return tuple((mask >> (days - 1 - day)) & 1 for day in range(days))


def score_path(
    schedule: Sequence[EventDefinition],
    path: Sequence[int],
    config: GameConfiguration = DEFAULT_CONFIG,
) -> Optional[int]:
    """
    Replay one wash/wait sequence with no chaos.
    Returns the total, or None if the hair fries along the way.
    """
    health = config.starting_health
    days_since_wash = config.starting_days_since_wash
    total = 0

    for event, bit in zip(schedule, path):
        action = Action.WASH if bit else Action.WAIT
        health, days_since_wash = apply_action(
            health=health,
            days_since_wash=days_since_wash,
            action=action,
            config=config,
        )
        if is_dead(health):
            return None
        total += calculate_score(days_since_wash, health, event, NO_CHAOS)

    return total


def solve(
    schedule: Sequence[EventDefinition],
    config: GameConfiguration = DEFAULT_CONFIG,
) -> SolverResult:
    """
    Exhaustive search over all 2^N wash/wait sequences for a fixed schedule.

    Chaos is assumed to be NONE every day, so this is the best score a player
    could reach without bad luck, not an oracle over the real rolls. Sequences
    that fry the hair are discarded. Ties keep the first mask found.
    If nothing survives, best_score is -1 with an empty path.
    """
    days = len(schedule)
    best_score = -1
    best_path: Tuple[int, ...] = ()

    for mask in range(1 << days):
        path = mask_to_path(mask, days)
        total = score_path(schedule, path, config)
        if total is not None and total > best_score:
            best_score = total
            best_path = path

    return SolverResult(best_score=best_score, best_path=best_path)
