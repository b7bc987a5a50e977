"""
Unit tests for GameStatePresenter.
"""

from src.core.game_states import BuzzType, CountdownState
from src.game_controller import GameController
from src.score_controller import ScoreController
from src.services.game_state_presenter import GameStatePresenter
from tests.helpers.manual_scheduler import ManualScheduler


class TestGameStatePresenter:

    def setup_method(self):
        self.presenter = GameStatePresenter()

    def test_serialize_buzz_type(self):
        assert self.presenter.serialize_value(BuzzType.GAME_OVER) == {
            'type': 'game_over', 'pattern': [0, 2000]
        }

    def test_serialize_countdown_state(self):
        assert self.presenter.serialize_value(CountdownState.FINISHED) == 'finished'

    def test_serialize_plain_values(self):
        assert self.presenter.serialize_value(3) == 3
        assert self.presenter.serialize_value("00:03") == "00:03"
        assert self.presenter.serialize_value(True) is True

    def test_game_change_contains_full_state(self, make_settings):
        controller = GameController(["cat", "dog"], make_settings(countdown_time_seconds=4), ManualScheduler())
        controller.on_correct_guess()

        payload = self.presenter.create_game_change('buzz_event', BuzzType.CORRECT, controller)

        assert payload['property'] == 'buzz_event'
        assert payload['value'] == {'type': 'correct', 'pattern': [100] * 6}
        assert payload['state']['score'] == 1
        assert payload['state']['remaining_time'] == 4
        assert payload['state']['buzz_event'] == 'correct'

    def test_score_payloads(self):
        score = ScoreController(4)

        assert self.presenter.create_score_state(score) == {'score': 4, 'play_again': False}
        assert self.presenter.create_score_change('play_again', True, score) == {
            'property': 'play_again',
            'value': True,
            'state': {'score': 4, 'play_again': False}
        }
