# shampoo/simulation.py
from __future__ import annotations

import random
from typing import Tuple

from shampoo.config import MAX_HEALTH, RNG_STRIDE
from shampoo.models import Action, ChaosOutcome, GameConfiguration
from shampoo.tables import CHAOS_TYPES


def apply_action(
    *,
    health: int,
    days_since_wash: int,
    action: Action,
    config: GameConfiguration,
) -> Tuple[int, int]:
    """
    One day's health / hair-cycle transition, shared by live play and the solver:
      wash -> costs health, cycle restarts at day 0
      wait -> recovers health (never above MAX_HEALTH), cycle moves on a day
    The returned health may be <= 0; the caller decides what death means.
    """
    if action is Action.WASH:
        return health - config.wash_cost, 0
    return min(MAX_HEALTH, health + config.wait_recovery), days_since_wash + 1


def is_dead(health: int) -> bool:
    return health <= 0


def roll_chaos(rng: random.Random) -> ChaosOutcome:
    """Weighted draw: with the default table, r < 0.1 rain, r < 0.2 humidity, else none."""
    r = rng.random()
    threshold = 0.0
    for chaos in CHAOS_TYPES:
        threshold += chaos.probability
        if r < threshold:
            return chaos
    # Float slack past the last threshold
    return CHAOS_TYPES[-1]


def turn_rng(seed: int, day: int) -> random.Random:
    # One stream per (seed, day) so a seeded game replays exactly.
    return random.Random(seed + (day + 1) * RNG_STRIDE)
