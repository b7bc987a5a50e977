"""
Score Handler

This module handles Socket.IO events of the score screen.
"""

import logging

from src.services.error_response_factory import with_error_handling
from .base_handler import BaseHandler

logger = logging.getLogger(__name__)


class ScoreHandler(BaseHandler):
    """Handler for the score screen: showing the score and playing again."""

    @with_error_handling
    def handle_get_score_state(self, data=None):
        """Send the score screen state to the requesting client."""
        self.log_handler_start('handle_get_score_state', data)
        score = self.require_score()
        self.broadcast_service.send_score_state(self.socket_id, score)

    @with_error_handling
    def handle_play_again(self, data=None):
        """Handle the play again button."""
        self.log_handler_start('handle_play_again', data)
        score = self.require_score()
        score.request_play_again()

    @with_error_handling
    def handle_play_again_complete(self, data=None):
        """
        Handle the client having navigated back to the game screen.

        The client follows up with start_game to begin the new session.
        """
        self.log_handler_start('handle_play_again_complete', data)
        self.require_score()
        self.session_service.complete_play_again(self.socket_id)
        self.log_handler_success('handle_play_again_complete')
