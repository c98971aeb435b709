"""Error types for the game core.

Running out of hair health is a normal outcome and is reported as a
TerminalReason, not raised. These exceptions are for callers that break the
session's preconditions.
"""


class GameError(Exception):
    """Base exception for game errors."""

    pass


class InvalidActionError(GameError, ValueError):
    """Raised when an action is neither wash nor wait.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown action: {value!r} (expected 'wash' or 'wait')")


class GameOverError(GameError):
    """Raised when an action is submitted after the session has ended."""

    pass


class GameNotFinishedError(GameError):
    """Raised when end-of-game results are requested mid-session."""

    pass
