"""
Game Action Handler

This module handles Socket.IO events for the buttons of the game screen,
including correct guesses, skips and buzz acknowledgements.
"""

import logging

from src.core.errors import ErrorCode, ValidationError
from src.services.error_response_factory import with_error_handling
from .base_handler import BaseHandler

logger = logging.getLogger(__name__)


class GameActionHandler(BaseHandler):
    """Handler for game screen actions."""

    def _require_running_game(self):
        game = self.require_game()
        if game.game_finished:
            raise ValidationError(
                ErrorCode.GAME_ALREADY_FINISHED,
                'The game is over'
            )
        return game

    @with_error_handling
    def handle_correct_guess(self, data=None):
        """Handle the got-it button: one point up and the next word."""
        self.log_handler_start('handle_correct_guess', data)
        game = self._require_running_game()
        game.on_correct_guess()
        self.log_handler_success('handle_correct_guess', f'score is now {game.score}')

    @with_error_handling
    def handle_skip_word(self, data=None):
        """Handle the skip button: one point down and the next word."""
        self.log_handler_start('handle_skip_word', data)
        game = self._require_running_game()
        game.on_skip()
        self.log_handler_success('handle_skip_word', f'score is now {game.score}')

    @with_error_handling
    def handle_buzz_complete(self, data=None):
        """Handle the client reporting that it played the requested vibration."""
        self.log_handler_start('handle_buzz_complete', data)
        game = self.require_game()
        game.acknowledge_buzz()
