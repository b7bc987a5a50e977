"""
Score Controller for the Guess The Word game

Holds the final score of a finished game for the score screen and the
one-shot "play again" request.
"""

from dataclasses import dataclass
from typing import Any, Dict
import logging

from src.core.observable import Observable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreSnapshot:
    score: int
    play_again: bool

    def to_dict(self) -> Dict[str, Any]:
        return {'score': self.score, 'play_again': self.play_again}


class ScoreController(Observable):
    """State holder for the score screen."""

    def __init__(self, final_score: int):
        super().__init__()
        self._score = final_score
        self._play_again = False
        logger.info(f"Final Score is: {final_score}")

    @property
    def score(self) -> int:
        return self._score

    @property
    def play_again(self) -> bool:
        return self._play_again

    def request_play_again(self) -> None:
        """Set when the player presses the play again button."""
        self._play_again = True
        self._notify('play_again', True)

    def acknowledge_play_again(self) -> None:
        """Called once the UI has started the new game."""
        self._play_again = False
        self._notify('play_again', False)

    def snapshot(self) -> ScoreSnapshot:
        return ScoreSnapshot(score=self._score, play_again=self._play_again)
