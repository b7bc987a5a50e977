"""
Game State Enumerations

Defines the countdown states and buzz types used throughout the application.
"""

from enum import Enum
from typing import Tuple


# buzzer patterns (delay, duration, delay, ...) in milliseconds
CORRECT_BUZZ_PATTERN = (100, 100, 100, 100, 100, 100)
PANIC_BUZZ_PATTERN = (0, 200)
GAME_OVER_BUZZ_PATTERN = (0, 2000)
NO_BUZZ_PATTERN = (0,)


class CountdownState(Enum):
    """Countdown state enumeration."""
    RUNNING = "running"
    FINISHED = "finished"


class BuzzType(Enum):
    """Symbolic vibration requests emitted for the UI to play back."""
    CORRECT = "correct"
    GAME_OVER = "game_over"
    COUNTDOWN_PANIC = "countdown_panic"
    NO_BUZZ = "no_buzz"

    @property
    def pattern(self) -> Tuple[int, ...]:
        """Vibration pattern as alternating delay/duration milliseconds."""
        return _BUZZ_PATTERNS[self]


_BUZZ_PATTERNS = {
    BuzzType.CORRECT: CORRECT_BUZZ_PATTERN,
    BuzzType.GAME_OVER: GAME_OVER_BUZZ_PATTERN,
    BuzzType.COUNTDOWN_PANIC: PANIC_BUZZ_PATTERN,
    BuzzType.NO_BUZZ: NO_BUZZ_PATTERN,
}
