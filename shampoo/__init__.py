from shampoo.errors import GameError, GameNotFinishedError, GameOverError, InvalidActionError
from shampoo.game import get_snapshot, init_game, on_game_end, submit_action
from shampoo.models import DEFAULT_CONFIG, Action, GameConfiguration
from shampoo.solver import solve

__all__ = [
    "Action",
    "DEFAULT_CONFIG",
    "GameConfiguration",
    "GameError",
    "GameNotFinishedError",
    "GameOverError",
    "InvalidActionError",
    "get_snapshot",
    "init_game",
    "on_game_end",
    "solve",
    "submit_action",
]
