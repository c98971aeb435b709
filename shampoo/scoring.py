# shampoo/scoring.py
from __future__ import annotations

import math

from shampoo.config import (
    FRIED_HEALTH,
    FRIED_QUALITY_CAP,
    FRIZZ_HEALTH,
    FRIZZ_QUALITY_CAP,
    HUMIDITY_PENALTY,
    RAIN_PEAK_QUALITY,
    WORKOUT_DIRTY_BONUS,
    WORKOUT_DIRTY_DAYS,
)
from shampoo.models import ChaosId, ChaosOutcome, EventDefinition, EventId
from shampoo.tables import hair_quality


def round_half_up(x: float) -> int:
    # round() would send 16.5 to 16
    return int(math.floor(x + 0.5))


def calculate_score(
    days_since_wash: int,
    health: int,
    event: EventDefinition,
    chaos: ChaosOutcome,
) -> int:
    """
    Score one day. Pure: the live game and the solver both call this.

      quality = hair curve, capped by damaged health
      rain on a peak day / humidity on a fresh wash override that
      score   = quality * event multiplier (+ workout bonus on dirty hair)
    """
    quality = hair_quality(days_since_wash).score

    # Health penalties
    if health < FRIED_HEALTH:
        quality = min(quality, FRIED_QUALITY_CAP)
    elif health < FRIZZ_HEALTH:
        quality = min(quality, FRIZZ_QUALITY_CAP)

    # Chaos modifiers (rain replaces the capped value outright)
    if chaos.id == ChaosId.RAIN and days_since_wash == 1:
        quality = RAIN_PEAK_QUALITY
    elif chaos.id == ChaosId.HUMIDITY and days_since_wash == 0:
        quality = max(0, quality - HUMIDITY_PENALTY)

    raw_points = quality * event.multiplier

    if event.id == EventId.WORKOUT and days_since_wash >= WORKOUT_DIRTY_DAYS:
        raw_points += WORKOUT_DIRTY_BONUS

    return round_half_up(raw_points)
