"""
Global pytest configuration and fixtures.
Provides configuration, scheduler and application fixtures for the tests.
"""

import pytest
import os

from config_factory import AppConfig, Environment, reset_config
from container import reset_container
from src.config.game_settings import GameSettings, reset_game_settings
from tests.helpers.manual_scheduler import ManualScheduler

# Ensure testing environment
os.environ['TESTING'] = '1'


@pytest.fixture(scope="function", autouse=True)
def reset_globals():
    """Reset global configuration, settings and container around each test."""
    reset_config()
    reset_game_settings()
    reset_container()
    yield
    reset_config()
    reset_game_settings()
    reset_container()


@pytest.fixture
def manual_scheduler():
    """Scheduler whose countdown ticks are fired by the test."""
    return ManualScheduler()


@pytest.fixture
def make_settings():
    """Build GameSettings from AppConfig overrides."""
    def factory(**overrides):
        overrides.setdefault('environment', Environment.TESTING)
        return GameSettings(AppConfig(**overrides))
    return factory


@pytest.fixture
def test_config():
    """Application config suited for the Socket.IO test client."""
    return AppConfig(
        environment=Environment.TESTING,
        async_mode='threading',
        countdown_time_seconds=3,
        tick_interval_ms=1000,
        panic_threshold_seconds=1
    )


@pytest.fixture
def app_and_socketio(test_config, manual_scheduler):
    """Create the application with the manual scheduler driving countdowns."""
    from app import create_app
    app, socketio = create_app(test_config, scheduler=manual_scheduler)
    yield app, socketio
    app.extensions['guesstheword_cleanup']()


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def socketio(app_and_socketio):
    return app_and_socketio[1]


@pytest.fixture
def socket_client(app, socketio):
    """Connected Socket.IO test client."""
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
