"""
Unit tests for the dependency injection container.
"""

import pytest
from unittest.mock import Mock

from container import (
    CircularDependencyError, ServiceContainer, ServiceLifecycle, ServiceNotFoundError,
    configure_container, get_container, reset_container
)
from config_factory import AppConfig
from src.services.scheduler_service import SocketIOScheduler
from tests.helpers.manual_scheduler import ManualScheduler
from tests.helpers.socket_mocks import create_mock_socketio


class TestServiceContainer:

    def setup_method(self):
        self.container = ServiceContainer()

    def test_register_and_get_singleton(self):
        self.container.register('Thing', dict)
        assert self.container.get('Thing') is self.container.get('Thing')

    def test_transient_lifecycle(self):
        self.container.register('Thing', dict, lifecycle=ServiceLifecycle.TRANSIENT)
        assert self.container.get('Thing') is not self.container.get('Thing')

    def test_duplicate_registration(self):
        self.container.register('Thing', dict)
        with pytest.raises(ValueError, match="already registered"):
            self.container.register('Thing', dict)

    def test_factory_must_be_callable(self):
        with pytest.raises(ValueError, match="must be callable"):
            self.container.register('Thing', 42)

    def test_dependencies_are_injected(self):
        self.container.set_external_dependency('socketio', 'sio')
        self.container.register('Pair', lambda sio, suffix: (sio, suffix),
                                dependencies=['socketio'], config={'suffix': '!'})

        assert self.container.get('Pair') == ('sio', '!')

    def test_unknown_service(self):
        with pytest.raises(ServiceNotFoundError):
            self.container.get('Missing')

    def test_circular_dependency(self):
        self.container.register('A', lambda b: b, dependencies=['B'])
        self.container.register('B', lambda a: a, dependencies=['A'])

        with pytest.raises(CircularDependencyError):
            self.container.get('A')

    def test_validate_dependencies(self):
        self.container.register('A', lambda b: b, dependencies=['B'])
        assert self.container.validate_dependencies() == {'A': ['B']}

    def test_clear(self):
        self.container.register('Thing', dict)
        self.container.set_config({'x': 1})
        self.container.clear()

        assert self.container.get_service_names() == []
        assert self.container.get_config('x') is None


class TestConfigureContainer:

    def test_wires_application_services(self):
        socketio = create_mock_socketio()
        container = configure_container(socketio=socketio, config={
            'app_config': AppConfig(countdown_time_seconds=11),
            'words_file': ''
        })

        assert container.validate_dependencies() == {}
        assert isinstance(container.get('Scheduler'), SocketIOScheduler)
        assert container.get('GameSettings').countdown_time_seconds == 11
        assert container.get('ContentManager').yaml_file_path is None

        session_service = container.get('SessionService')
        assert session_service.scheduler is container.get('Scheduler')
        assert container.get('BroadcastService').socketio is socketio

    def test_injected_scheduler_is_used(self):
        scheduler = ManualScheduler()
        container = configure_container(socketio=create_mock_socketio(), scheduler=scheduler)

        assert container.get('Scheduler') is scheduler
        assert container.get('SessionService').scheduler is scheduler

    def test_words_file_passed_to_content_manager(self):
        container = configure_container(socketio=Mock(), config={'words_file': '/tmp/custom.yaml'})
        assert container.get('ContentManager').yaml_file_path == '/tmp/custom.yaml'

    def test_reset_container(self):
        first = get_container()
        reset_container()
        assert get_container() is not first
