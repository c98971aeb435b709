# shampoo/game.py
from __future__ import annotations

import random
from typing import Optional, Union

from loguru import logger

from shampoo.config import HEALTH_GOOD, HEALTH_WARN, SEED_MAX
from shampoo.errors import GameNotFinishedError, GameOverError, InvalidActionError
from shampoo.models import (
    DEFAULT_CONFIG,
    Action,
    ChaosId,
    ChaosOutcome,
    GameConfiguration,
    GameResult,
    GameSnapshot,
    GameState,
    TerminalReason,
    TurnOutcome,
    TurnRecord,
)
from shampoo.generation import generate_schedule
from shampoo.scoring import calculate_score, round_half_up
from shampoo.simulation import apply_action, is_dead, roll_chaos, turn_rng
from shampoo.solver import solve
from shampoo.tables import hair_quality

FRIED_MESSAGE = "Hair Fried! Game Over."
COMPLETED_MESSAGE = "Schedule complete."


def parse_action(value: Union[Action, str]) -> Action:
    if isinstance(value, Action):
        return value
    if isinstance(value, str):
        try:
            return Action(value.strip().lower())
        except ValueError:
            pass
    raise InvalidActionError(value)


def init_game(
    config: GameConfiguration = DEFAULT_CONFIG,
    seed: Optional[int] = None,
) -> GameState:
    """Fresh session: starting health/cycle and a newly generated schedule."""
    if seed is None:
        seed = random.randrange(SEED_MAX)
    rng = random.Random(seed)

    state = GameState(
        config=config,
        rng_seed=seed,
        current_day=0,
        hair_health=config.starting_health,
        days_since_wash=config.starting_days_since_wash,
        total_score=0,
        schedule=generate_schedule(rng, config),
    )
    logger.info(
        "New game seed={} schedule={}",
        seed,
        [e.id.value for e in state.schedule],
    )
    return state


def _end_game(state: GameState, terminal: TerminalReason) -> None:
    state.game_over = True
    state.terminal = terminal
    state.solver_result = solve(state.schedule, state.config)
    logger.info(
        "Game over ({}) on day {}: score={} best={}",
        terminal.kind,
        terminal.day,
        state.total_score,
        state.solver_result.best_score,
    )


def submit_action(
    state: GameState,
    action: Union[Action, str],
    chaos: Optional[ChaosOutcome] = None,
) -> TurnOutcome:
    """
    Play one day. The only thing that mutates a GameState.

    Order matters: the action is applied and death is checked before chaos is
    rolled or anything is scored, so a fatal wash earns nothing and leaves no
    history entry. Pass `chaos` to force the day's outcome; otherwise it is
    rolled from the session's per-day RNG stream.
    """
    action = parse_action(action)
    if state.game_over:
        raise GameOverError(f"Game already over on day {state.current_day}")

    day = state.current_day
    health, days_since_wash = apply_action(
        health=state.hair_health,
        days_since_wash=state.days_since_wash,
        action=action,
        config=state.config,
    )
    state.hair_health = health
    state.days_since_wash = days_since_wash

    if is_dead(health):
        terminal = TerminalReason(kind="hair_fried", message=FRIED_MESSAGE, day=day)
        _end_game(state, terminal)
        return TurnOutcome(terminal=terminal)

    if chaos is None:
        chaos = roll_chaos(turn_rng(state.rng_seed, day))

    event = state.schedule[day]
    points = calculate_score(days_since_wash, health, event, chaos)
    state.total_score += points

    record = TurnRecord(
        day=day,
        event=event,
        action=action,
        action_label=action.label,
        score=points,
        health_after=health,
        days_since_wash_after=days_since_wash,
        chaos=chaos,
    )
    state.history.append(record)
    state.current_day += 1

    logger.debug(
        "Day {} {}: {} chaos={} +{} (health={}, dsw={})",
        day,
        event.id.value,
        action.label,
        chaos.id.value,
        points,
        health,
        days_since_wash,
    )

    if state.current_day >= state.config.total_days:
        terminal = TerminalReason(kind="completed", message=COMPLETED_MESSAGE, day=day)
        _end_game(state, terminal)
        return TurnOutcome(record=record, terminal=terminal)

    return TurnOutcome(record=record)


def health_band(health: int) -> str:
    if health > HEALTH_GOOD:
        return "good"
    if health > HEALTH_WARN:
        return "warn"
    return "bad"


def get_snapshot(state: GameState) -> GameSnapshot:
    hair = hair_quality(state.days_since_wash)
    look_percent = hair.score / 10 * 100
    current_event = None
    if not state.game_over and state.current_day < len(state.schedule):
        current_event = state.schedule[state.current_day]

    return GameSnapshot(
        current_day=state.current_day,
        total_days=state.config.total_days,
        hair_health=state.hair_health,
        days_since_wash=state.days_since_wash,
        total_score=state.total_score,
        current_event=current_event,
        schedule=state.schedule,
        history=tuple(state.history),
        game_over=state.game_over,
        terminal=state.terminal,
        hair=hair,
        look_percent=look_percent,
        overall_quality=round_half_up((state.hair_health + look_percent) / 2),
        health_band=health_band(state.hair_health),
    )


def on_game_end(state: GameState) -> GameResult:
    """Final score next to the best chaos-free score for the same schedule."""
    if not state.game_over or state.solver_result is None:
        raise GameNotFinishedError(
            f"Game still active on day {state.current_day} of {state.config.total_days}")

    return GameResult(
        final_score=state.total_score,
        solver_result=state.solver_result,
        player_path=tuple(1 if tr.action is Action.WASH else 0 for tr in state.history),
        score_history=tuple(tr.score for tr in state.history),
        days_played=len(state.history),
        terminal=state.terminal,
    )


def had_chaos(record: TurnRecord) -> bool:
    """True when the day's chaos should be shown to the player."""
    return record.chaos.id != ChaosId.NONE
