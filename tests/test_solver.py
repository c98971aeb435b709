"""Tests for the retrospective solver."""

from shampoo.models import DEFAULT_CONFIG, EventId, GameConfiguration
from shampoo.solver import mask_to_path, score_path, solve
from shampoo.tables import get_event


def test_mask_day_zero_is_most_significant_bit():
    assert mask_to_path(0b1000000000, 10) == (1,) + (0,) * 9
    assert mask_to_path(1, 10) == (0,) * 9 + (1,)
    assert mask_to_path(0b01, 2) == (0, 1)


def test_best_score_is_max_over_surviving_paths(mixed_schedule):
    result = solve(mixed_schedule)

    totals = []
    for mask in range(1024):
        total = score_path(mixed_schedule, mask_to_path(mask, 10))
        if total is not None:
            assert result.best_score >= total
            totals.append(total)

    assert result.best_score == max(totals)
    assert len(result.best_path) == 10
    assert score_path(mixed_schedule, result.best_path) == result.best_score


def test_fried_paths_are_discarded(chill):
    schedule = (chill,) * 10
    assert score_path(schedule, (1,) * 10) is None
    # Six washes leave 10 health, still alive
    assert score_path(schedule, (1,) * 6 + (0,) * 4) is not None


def test_wait_only_all_chill_path(chill):
    # Days since wash runs 3, 4, 5, ... -> 3 then 1 every day
    assert score_path((chill,) * 10, (0,) * 10) == 12


def test_two_day_workout_prefers_dirty_hair():
    workout = get_event(EventId.WORKOUT)
    config = GameConfiguration(total_days=2)
    result = solve((workout, workout), config)
    # 3 * 0.5 + 15 -> 17, then 1 * 0.5 + 15 -> 16
    assert result.best_score == 33
    assert result.best_path == (0, 0)


def test_ties_keep_first_mask(chill):
    # Wait-then-wash and wash-then-wait both score 19; mask 0b01 comes first.
    config = GameConfiguration(total_days=2, starting_days_since_wash=0)
    result = solve((chill, chill), config)
    assert result.best_score == 19
    assert result.best_path == (0, 1)


def test_solver_beats_wait_only(mixed_schedule):
    result = solve(mixed_schedule, DEFAULT_CONFIG)
    assert result.best_score >= score_path(mixed_schedule, (0,) * 10)
