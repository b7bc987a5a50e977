"""
Unit tests for SessionService.
"""

from unittest.mock import Mock
import pytest

from src.content_manager import ContentManager
from src.score_controller import ScoreController
from src.services.session_service import SessionService
from tests.helpers.manual_scheduler import ManualScheduler


class TestSessionService:

    def setup_method(self):
        self.content_manager = ContentManager(None)
        self.content_manager.load()
        self.scheduler = ManualScheduler()

    def create_service(self, make_settings):
        settings = make_settings(countdown_time_seconds=2, panic_threshold_seconds=0)
        return SessionService(self.content_manager, settings, self.scheduler)

    def test_start_game(self, make_settings):
        service = self.create_service(make_settings)
        game = service.start_game('sid-1')

        assert service.get_game('sid-1') is game
        assert service.get_session('sid-1').game_controller is game
        assert service.get_score('sid-1') is None
        assert service.has_session('sid-1')
        assert service.get_sessions_count() == 1
        assert game.remaining_time == 2

    def test_start_game_without_words(self, make_settings):
        service = SessionService(ContentManager(None), make_settings(), self.scheduler)
        with pytest.raises(RuntimeError):
            service.start_game('sid-1')
        assert not service.has_session('sid-1')

    def test_restart_closes_previous_game(self, make_settings):
        service = self.create_service(make_settings)
        first = service.start_game('sid-1')
        second = service.start_game('sid-1')

        assert first.is_closed
        assert not second.is_closed
        assert service.get_sessions_count() == 1

    def test_sessions_are_independent(self, make_settings):
        service = self.create_service(make_settings)
        one = service.start_game('sid-1')
        two = service.start_game('sid-2')

        one.on_correct_guess()
        assert one.score == 1
        assert two.score == 0

    def test_complete_game_hands_over_score(self, make_settings):
        service = self.create_service(make_settings)
        game = service.start_game('sid-1')
        listener = Mock()
        service.add_subscription('sid-1', game.subscribe(listener))
        game.on_correct_guess()
        game.on_correct_guess()
        self.scheduler.tick(2)

        score = service.complete_game('sid-1')

        assert isinstance(score, ScoreController)
        assert score.score == 2
        assert game.game_finished is False
        assert game.is_closed
        assert game.listener_count == 0
        assert service.get_game('sid-1') is None
        assert service.get_score('sid-1') is score

    def test_complete_game_without_game(self, make_settings):
        service = self.create_service(make_settings)
        assert service.complete_game('sid-1') is None

    def test_complete_play_again(self, make_settings):
        service = self.create_service(make_settings)
        service.start_game('sid-1')
        self.scheduler.tick(2)
        score = service.complete_game('sid-1')
        score.request_play_again()

        assert service.complete_play_again('sid-1') is True
        assert score.play_again is False
        assert service.get_score('sid-1') is None
        assert not service.has_session('sid-1')
        assert service.get_sessions_count() == 0
        assert service.complete_play_again('sid-1') is False

    def test_start_game_after_play_again(self, make_settings):
        service = self.create_service(make_settings)
        service.start_game('sid-1')
        self.scheduler.tick(2)
        service.complete_game('sid-1')
        service.complete_play_again('sid-1')

        game = service.start_game('sid-1')
        assert service.get_game('sid-1') is game
        assert service.get_sessions_count() == 1

    def test_remove_session_closes_game(self, make_settings):
        service = self.create_service(make_settings)
        game = service.start_game('sid-1')

        removed = service.remove_session('sid-1')

        assert removed.socket_id == 'sid-1'
        assert game.is_closed
        assert self.scheduler.active_tasks == []
        assert service.remove_session('sid-1') is None

    def test_close_all(self, make_settings):
        service = self.create_service(make_settings)
        games = [service.start_game(f'sid-{i}') for i in range(3)]

        service.close_all()

        assert service.get_sessions_count() == 0
        assert all(game.is_closed for game in games)
