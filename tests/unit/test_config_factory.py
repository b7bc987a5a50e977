"""
Unit tests for the configuration factory.
"""

import os
import pytest
from unittest.mock import patch

from config_factory import (
    AppConfig, ConfigError, ConfigurationFactory, Environment,
    get_config, load_config, load_config_from_dict, override_config
)


class TestAppConfig:
    """Test AppConfig defaults and validation."""

    def test_defaults(self):
        config = AppConfig()

        assert config.countdown_time_seconds == 20
        assert config.tick_interval_ms == 1000
        assert config.panic_threshold_seconds == 5
        assert config.buzz_enabled is True
        assert config.words_file == 'words.yaml'
        assert config.async_mode == 'eventlet'
        assert config.is_development

    @pytest.mark.parametrize("overrides", [
        {'port': 0},
        {'port': 70000},
        {'async_mode': 'asyncio'},
        {'countdown_time_seconds': 0},
        {'countdown_time_seconds': 3601},
        {'tick_interval_ms': 5},
        {'tick_interval_ms': 60001},
        {'panic_threshold_seconds': -1},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigError):
            AppConfig(**overrides)

    def test_production_requires_secret(self):
        with pytest.raises(ConfigError, match="SECRET_KEY"):
            AppConfig(environment=Environment.PRODUCTION)

        config = AppConfig(environment=Environment.PRODUCTION, secret_key='s3cret')
        assert config.is_production

    def test_zero_panic_threshold_allowed(self):
        assert AppConfig(panic_threshold_seconds=0).panic_threshold_seconds == 0

    def test_empty_words_file_allowed(self):
        assert AppConfig(words_file='').words_file == ''


class TestConfigurationFactory:
    """Test loading, overriding and exporting configuration."""

    def setup_method(self):
        self.factory = ConfigurationFactory()
        self.factory.reset()

    def test_singleton(self):
        assert ConfigurationFactory() is self.factory

    def test_get_config_before_load(self):
        with pytest.raises(ConfigError, match="not loaded"):
            get_config()

    def test_load_from_environment(self):
        env = {
            'FLASK_ENV': 'testing',
            'COUNTDOWN_TIME_SECONDS': '60',
            'TICK_INTERVAL_MS': '500',
            'PANIC_THRESHOLD_SECONDS': '10',
            'BUZZ_ENABLED': 'false',
            'WORDS_FILE': 'custom.yaml',
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config()

        assert config.environment == Environment.TESTING
        assert config.countdown_time_seconds == 60
        assert config.tick_interval_ms == 500
        assert config.panic_threshold_seconds == 10
        assert config.buzz_enabled is False
        assert config.words_file == 'custom.yaml'
        assert get_config() is config

    def test_invalid_integer_falls_back_to_default(self):
        with patch.dict(os.environ, {'COUNTDOWN_TIME_SECONDS': 'soon'}, clear=True):
            config = load_config()
        assert config.countdown_time_seconds == 20

    def test_env_prefix(self):
        with patch.dict(os.environ, {'GTW_COUNTDOWN_TIME_SECONDS': '45'}, clear=True):
            config = load_config('GTW_')
        assert config.countdown_time_seconds == 45

    def test_production_from_environment(self):
        with patch.dict(os.environ, {'FLASK_ENV': 'production', 'SECRET_KEY': 'abc'}, clear=True):
            config = load_config()
        assert config.is_production
        assert config.debug is False

    def test_load_from_dict(self):
        config = load_config_from_dict({'environment': 'testing', 'countdown_time_seconds': 5})
        assert config.environment == Environment.TESTING
        assert config.countdown_time_seconds == 5

    def test_use_config(self):
        config = AppConfig(countdown_time_seconds=9)
        self.factory.use_config(config)
        assert get_config() is config

    def test_override_revalidates(self):
        load_config_from_dict({})
        override_config('countdown_time_seconds', 30)
        assert get_config().countdown_time_seconds == 30

        with pytest.raises(ConfigError):
            override_config('tick_interval_ms', 1)

    def test_to_dict_and_flask_config(self):
        load_config_from_dict({'environment': 'testing', 'buzz_enabled': False})

        config_dict = self.factory.to_dict()
        assert config_dict['environment'] == 'testing'
        assert config_dict['buzz_enabled'] is False

        flask_config = self.factory.get_flask_config()
        assert flask_config['BUZZ_ENABLED'] is False
        assert flask_config['COUNTDOWN_TIME_SECONDS'] == 20
        assert 'SECRET_KEY' in flask_config

    def test_export_before_load(self):
        with pytest.raises(ConfigError):
            self.factory.to_dict()
        with pytest.raises(ConfigError):
            self.factory.get_flask_config()


class TestTickAlignment:
    """The countdown must end exactly on a tick."""

    def test_interval_not_dividing_countdown_rejected(self):
        with pytest.raises(ConfigError, match="does not divide"):
            AppConfig(countdown_time_seconds=3, tick_interval_ms=700)

    def test_interval_longer_than_countdown_rejected(self):
        with pytest.raises(ConfigError, match="does not divide"):
            AppConfig(countdown_time_seconds=2, tick_interval_ms=60000)

    def test_dividing_interval_accepted(self):
        assert AppConfig(countdown_time_seconds=3, tick_interval_ms=500).tick_interval_ms == 500
