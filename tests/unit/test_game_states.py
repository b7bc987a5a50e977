"""
Unit tests for countdown states and buzz patterns.
"""

from src.core.game_states import BuzzType, CountdownState


class TestBuzzType:

    def test_patterns(self):
        assert BuzzType.CORRECT.pattern == (100, 100, 100, 100, 100, 100)
        assert BuzzType.COUNTDOWN_PANIC.pattern == (0, 200)
        assert BuzzType.GAME_OVER.pattern == (0, 2000)
        assert BuzzType.NO_BUZZ.pattern == (0,)

    def test_every_buzz_type_has_pattern(self):
        for buzz_type in BuzzType:
            assert len(buzz_type.pattern) >= 1

    def test_values_are_stable(self):
        assert BuzzType.COUNTDOWN_PANIC.value == "countdown_panic"
        assert CountdownState.RUNNING.value == "running"
        assert CountdownState.FINISHED.value == "finished"
