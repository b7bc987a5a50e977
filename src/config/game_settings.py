"""
Game Settings Configuration Module

Provides centralized access to game-specific configuration values,
replacing hardcoded constants throughout the codebase.
"""

import logging
from config_factory import AppConfig, ConfigError, get_config

logger = logging.getLogger(__name__)

# Fallback defaults used when no configuration has been loaded
DEFAULT_COUNTDOWN_TIME_SECONDS = 20
DEFAULT_TICK_INTERVAL_MS = 1000
DEFAULT_PANIC_THRESHOLD_SECONDS = 5


class GameSettings:
    """Centralized game settings management."""

    def __init__(self, app_config: AppConfig = None):
        """
        Initialize game settings.

        Args:
            app_config: Application configuration instance from config_factory
        """
        self._config = app_config
        if app_config is None:
            try:
                self._config = get_config()
            except ConfigError as e:
                logger.warning(f"Could not load configuration: {e}, using defaults")
                self._config = None

    @property
    def countdown_time_seconds(self) -> int:
        """Total duration of one game in seconds."""
        if self._config is None:
            return DEFAULT_COUNTDOWN_TIME_SECONDS

        return self._config.countdown_time_seconds

    @property
    def countdown_time_ms(self) -> int:
        return self.countdown_time_seconds * 1000

    @property
    def tick_interval_ms(self) -> int:
        """
        Get the countdown tick interval.

        Returns:
            Milliseconds between two countdown ticks
        """
        if self._config is None:
            return DEFAULT_TICK_INTERVAL_MS

        return self._config.tick_interval_ms

    @property
    def panic_threshold_seconds(self) -> int:
        """
        Get the start of the panic period.

        Returns:
            Remaining seconds at or below which the panic buzz sounds
        """
        if self._config is None:
            return DEFAULT_PANIC_THRESHOLD_SECONDS

        return self._config.panic_threshold_seconds

    @property
    def buzz_enabled(self) -> bool:
        """Whether buzz events are emitted at all."""
        if self._config is None:
            return True

        return self._config.buzz_enabled

    @property
    def words_file(self) -> str:
        if self._config is None:
            return 'words.yaml'

        return self._config.words_file


# Global instance for easy access
_game_settings_instance = None


def get_game_settings(app_config=None) -> GameSettings:
    """
    Get or create the global game settings instance.

    Args:
        app_config: Optional app config to use

    Returns:
        GameSettings instance
    """
    global _game_settings_instance

    if _game_settings_instance is None or app_config is not None:
        _game_settings_instance = GameSettings(app_config)

    return _game_settings_instance


def reset_game_settings():
    """Reset the global game settings instance (mainly for testing)."""
    global _game_settings_instance
    _game_settings_instance = None
