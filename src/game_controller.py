"""
Game Controller for the Guess The Word game

Drives a single game session from start to countdown zero: keeps the current
word, the score and the remaining time, and raises the one-shot events the UI
reacts to (buzz requests and the game-finished signal).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence
import logging
import random
import threading

from src.config.game_settings import GameSettings, get_game_settings
from src.core.game_states import BuzzType, CountdownState
from src.core.observable import Observable
from src.core.vocabulary import DEFAULT_WORDS
from src.services.countdown_timer import create_countdown
from src.services.scheduler_service import ThreadingScheduler
from src.utils.time_format import format_elapsed_time
from src.word_queue import WordQueue

logger = logging.getLogger(__name__)

# This is when the game is over
DONE = 0
# This is the number of milliseconds in a second
ONE_SECOND = 1000


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of the controller state at one moment."""
    word: str
    score: int
    remaining_time: int
    remaining_time_string: str
    game_finished: bool
    buzz_event: BuzzType
    countdown_state: CountdownState

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'word': self.word,
            'score': self.score,
            'remaining_time': self.remaining_time,
            'remaining_time_string': self.remaining_time_string,
            'game_finished': self.game_finished,
            'buzz_event': self.buzz_event.value,
            'buzz_pattern': list(self.buzz_event.pattern),
            'countdown_state': self.countdown_state.value
        }


class GameController(Observable):
    """Owns the word queue, score and countdown of one game session."""

    def __init__(self, vocabulary: Optional[Sequence[str]] = None,
                 settings: Optional[GameSettings] = None,
                 scheduler=None, rng: Optional[random.Random] = None):
        """
        Create the session and start its countdown.

        Args:
            vocabulary: Words to play, defaults to the built-in vocabulary
            settings: Game settings, defaults to the global settings
            scheduler: Drives the countdown ticks, defaults to a thread per timer
            rng: Random source for the word order
        """
        super().__init__()
        self.settings = settings or get_game_settings()
        self._lock = threading.RLock()
        self._closed = False

        self._word_queue = WordQueue(DEFAULT_WORDS if vocabulary is None else vocabulary, rng)

        self._score = 0
        self._word = self._word_queue.next_word()
        self._game_finished = False
        self._buzz_event = BuzzType.NO_BUZZ
        self._remaining_time = self.settings.countdown_time_seconds
        self._countdown_state = CountdownState.RUNNING

        self._timer = create_countdown(
            self.settings,
            on_tick=self._on_tick,
            on_finish=self._on_finish,
            scheduler=scheduler or ThreadingScheduler(),
            lock=self._lock
        )
        self._timer.start()
        logger.info("GameController created")

    # Observable state

    @property
    def word(self) -> str:
        return self._word

    @property
    def score(self) -> int:
        return self._score

    @property
    def remaining_time(self) -> int:
        """Whole seconds left on the countdown."""
        return self._remaining_time

    @property
    def remaining_time_string(self) -> str:
        return format_elapsed_time(self._remaining_time)

    @property
    def game_finished(self) -> bool:
        return self._game_finished

    @property
    def buzz_event(self) -> BuzzType:
        return self._buzz_event

    @property
    def countdown_state(self) -> CountdownState:
        return self._countdown_state

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def words_remaining(self) -> int:
        """Words left before the queue gets reshuffled."""
        return len(self._word_queue)

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(
                word=self._word,
                score=self._score,
                remaining_time=self._remaining_time,
                remaining_time_string=self.remaining_time_string,
                game_finished=self._game_finished,
                buzz_event=self._buzz_event,
                countdown_state=self._countdown_state
            )

    # Button presses

    def on_correct_guess(self) -> None:
        """Count a correctly guessed word and move on."""
        with self._lock:
            if not self._accepts_input('on_correct_guess'):
                return
            self._set_score(self._score + 1)
            self._buzz(BuzzType.CORRECT)
            self.advance_word()

    def on_skip(self) -> None:
        """Skip the current word at the cost of one point."""
        with self._lock:
            if not self._accepts_input('on_skip'):
                return
            self._set_score(self._score - 1)
            self.advance_word()

    def advance_word(self) -> str:
        """
        Move to the next word in the queue.

        Returns:
            The new current word
        """
        with self._lock:
            self._word = self._word_queue.next_word()
            self._publish('word', self._word)
            return self._word

    # One-shot acknowledgements

    def acknowledge_game_finished(self) -> None:
        """Called once the UI has left the game screen."""
        with self._lock:
            self._game_finished = False
            self._publish('game_finished', False)

    def acknowledge_buzz(self) -> None:
        """Called once the UI has played the requested vibration."""
        with self._lock:
            self._buzz_event = BuzzType.NO_BUZZ
            self._publish('buzz_event', BuzzType.NO_BUZZ)

    # Teardown

    def close(self) -> None:
        """Cancel the countdown. Nothing is published after this returns."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._timer.cancel()
        logger.info(f"GameController destroyed with score {self._score}")

    def __enter__(self) -> 'GameController':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    # Countdown callbacks, invoked under self._lock by the timer

    def _on_tick(self, millis_until_finished: int) -> None:
        remaining = millis_until_finished // ONE_SECOND
        # zero is published only by _on_finish
        if remaining == DONE:
            return
        self._set_remaining_time(remaining)
        logger.debug(f"Countdown tick: {remaining}s left")

        # during the panic period the panic buzzer sounds on every tick
        if remaining <= self.settings.panic_threshold_seconds:
            self._buzz(BuzzType.COUNTDOWN_PANIC)

    def _on_finish(self) -> None:
        self._set_remaining_time(DONE)
        self._buzz(BuzzType.GAME_OVER)

        self._countdown_state = CountdownState.FINISHED
        self._publish('countdown_state', CountdownState.FINISHED)

        # signal game over, the UI transitions to the score screen
        self._game_finished = True
        self._publish('game_finished', True)
        logger.info(f"Game finished with score {self._score}")

    # Helpers

    def _accepts_input(self, action: str) -> bool:
        if self._closed:
            logger.debug(f"Ignoring {action}: controller closed")
            return False
        if self._countdown_state == CountdownState.FINISHED:
            logger.debug(f"Ignoring {action}: game already finished")
            return False
        return True

    def _set_score(self, score: int) -> None:
        self._score = score
        self._publish('score', score)

    def _set_remaining_time(self, remaining: int) -> None:
        self._remaining_time = remaining
        self._publish('remaining_time', remaining)
        self._publish('remaining_time_string', format_elapsed_time(remaining))

    def _buzz(self, buzz_type: BuzzType) -> None:
        if not self.settings.buzz_enabled:
            return
        self._buzz_event = buzz_type
        self._publish('buzz_event', buzz_type)

    def _publish(self, property_name: str, value: Any) -> None:
        if self._closed:
            return
        self._notify(property_name, value)
