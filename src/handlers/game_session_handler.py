"""
Game Session Handler

This module handles Socket.IO events that move a player between screens:
starting a game, leaving a finished game for the score screen, and
retrieving the current game state.
"""

import logging

from src.core.errors import ErrorCode, ValidationError
from src.services.error_response_factory import with_error_handling
from .base_handler import BaseHandler

logger = logging.getLogger(__name__)


class GameSessionHandler(BaseHandler):
    """Handler for game start, game end and state retrieval."""

    @with_error_handling
    def handle_start_game(self, data=None):
        """
        Start a new game for the requesting client.

        Any game or score screen the client still had is closed first.
        """
        self.log_handler_start('handle_start_game', data)
        self.validate_data_dict(data)

        socket_id = self.socket_id
        try:
            game = self.session_service.start_game(socket_id)
        except (RuntimeError, ValueError) as e:
            raise ValidationError(ErrorCode.START_GAME_FAILED, str(e))

        unsubscribe = game.subscribe(self.broadcast_service.create_game_listener(socket_id, game))
        self.session_service.add_subscription(socket_id, unsubscribe)

        self.log_handler_success('handle_start_game', f'first word has {len(game.word)} letters')
        self.emit_success('game_started', game.snapshot().to_dict())

    @with_error_handling
    def handle_get_game_state(self, data=None):
        """Send the full game state to the requesting client."""
        self.log_handler_start('handle_get_game_state', data)
        game = self.require_game()
        self.broadcast_service.send_game_state(self.socket_id, game)

    @with_error_handling
    def handle_game_finish_complete(self, data=None):
        """
        Handle the client leaving the finished game screen.

        Acknowledges the game-finished signal, closes the game and hands the
        final score to a new score screen.
        """
        self.log_handler_start('handle_game_finish_complete', data)
        game = self.require_game()
        if not game.game_finished:
            raise ValidationError(
                ErrorCode.GAME_NOT_FINISHED,
                'The game is still running'
            )

        socket_id = self.socket_id
        score = self.session_service.complete_game(socket_id)

        unsubscribe = score.subscribe(self.broadcast_service.create_score_listener(socket_id, score))
        self.session_service.add_subscription(socket_id, unsubscribe)

        self.log_handler_success('handle_game_finish_complete', f'final score {score.score}')
        self.emit_success('score_ready', score.snapshot().to_dict())
