"""
API Routes Unit Tests

Tests for the API routes in src/routes/api.py.
"""

from unittest.mock import Mock
from flask import Flask

from src.routes.api import create_api_blueprint


class TestHealthRoute:

    def setup_method(self):
        self.session_service = Mock()
        self.session_service.get_sessions_count.return_value = 2
        self.content_manager = Mock()
        self.content_manager.get_word_count.return_value = 21

        self.app = Flask(__name__)
        self.app.register_blueprint(create_api_blueprint({
            'session_service': self.session_service,
            'content_manager': self.content_manager
        }))
        self.client = self.app.test_client()

    def test_blueprint_name(self):
        assert create_api_blueprint({'session_service': Mock(), 'content_manager': Mock()}).name == 'api'

    def test_health(self):
        response = self.client.get('/api/health')

        assert response.status_code == 200
        assert response.get_json() == {'status': 'ok', 'active_sessions': 2, 'word_count': 21}

    def test_health_through_app(self, app):
        response = app.test_client().get('/api/health')

        assert response.status_code == 200
        assert response.get_json()['word_count'] == 21
