"""
Word Queue for the Guess The Word game

Keeps the shuffled words still to be played. The front of the queue is the
next word to guess; a drained queue is refilled from the same vocabulary.
"""

import logging
import random
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class WordQueue:
    """Shuffled, self-refilling queue of words."""

    def __init__(self, vocabulary: Sequence[str], rng: Optional[random.Random] = None):
        """
        Initialize the queue and shuffle it for the first time.

        Args:
            vocabulary: Fixed list of words the queue is (re)filled from
            rng: Random source, pass a seeded one for reproducible order

        Raises:
            ValueError: If the vocabulary is empty
        """
        if not vocabulary:
            raise ValueError("Vocabulary cannot be empty")

        self._vocabulary = tuple(vocabulary)
        self._rng = rng or random.Random()
        self._words: List[str] = []
        self._last_word: Optional[str] = None
        self.refill_count = 0
        self.reset()

    @property
    def vocabulary(self) -> tuple:
        return self._vocabulary

    def reset(self) -> None:
        """Refill the queue with the whole vocabulary in random order."""
        words = list(self._vocabulary)
        self._rng.shuffle(words)

        # Don't repeat the word that was just played across a refill
        if len(words) > 1 and words[0] == self._last_word:
            words.append(words.pop(0))

        self._words = words
        self.refill_count += 1
        logger.debug(f"Word queue refilled with {len(words)} words")

    def next_word(self) -> str:
        """Remove and return the word at the front, refilling first if drained."""
        if not self._words:
            # start anew - same words, shuffled
            self.reset()

        self._last_word = self._words.pop(0)
        return self._last_word

    def peek(self) -> Optional[str]:
        return self._words[0] if self._words else None

    def __len__(self) -> int:
        return len(self._words)
