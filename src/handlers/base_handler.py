"""
Base Handler Classes

This module provides the base class for Socket.IO handlers with common patterns
for service access, session lookup, error handling and response formatting.
"""

import logging
from abc import ABC
from typing import Any, Dict, Optional
from flask import request
from flask_socketio import emit

from container import get_container
from src.core.errors import ErrorCode, ValidationError
from src.game_controller import GameController
from src.score_controller import ScoreController

logger = logging.getLogger(__name__)


class BaseHandler(ABC):
    """
    Abstract base class for all Socket.IO handlers.

    Provides common functionality like service access, session lookup
    and standardized response formatting.
    """

    def __init__(self):
        self._container = get_container()

    @property
    def session_service(self):
        """Get the session service."""
        return self._container.get('SessionService')

    @property
    def broadcast_service(self):
        """Get the broadcast service."""
        return self._container.get('BroadcastService')

    @property
    def error_response_factory(self):
        """Get the error response factory service."""
        return self._container.get('ErrorResponseFactory')

    @property
    def socket_id(self) -> str:
        return request.sid  # type: ignore[attr-defined]

    def require_game(self) -> GameController:
        """
        Get the running game of the requesting client.

        Raises:
            ValidationError: If the client has no game
        """
        game = self.session_service.get_game(self.socket_id)
        if game is None:
            raise ValidationError(
                ErrorCode.NO_ACTIVE_GAME,
                'No game in progress. Start a game first.'
            )
        return game

    def require_score(self) -> ScoreController:
        """
        Get the score screen state of the requesting client.

        Raises:
            ValidationError: If the client is not on the score screen
        """
        score = self.session_service.get_score(self.socket_id)
        if score is None:
            raise ValidationError(
                ErrorCode.NO_SCORE_AVAILABLE,
                'No finished game to show a score for'
            )
        return score

    def validate_data_dict(self, data: Any) -> Dict[str, Any]:
        """
        Validate that optional event data is a dictionary.

        Raises:
            ValidationError: If data is present but not a dictionary
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationError(
                ErrorCode.INVALID_DATA,
                "Invalid data format - expected dictionary"
            )
        return data

    def emit_success(self, event_name: str, data: Optional[Dict[str, Any]] = None) -> None:
        """
        Emit a success response to the requesting client.

        Args:
            event_name: The name of the event to emit
            data: Optional data to include in the response
        """
        response = self.error_response_factory.create_success_response(data or {})
        emit(event_name, response)

    def log_handler_start(self, handler_name: str, data: Any = None) -> None:
        """Log the start of handler execution."""
        logger.info(f'{handler_name} called by client: {self.socket_id}')
        if data:
            logger.debug(f'{handler_name} data: {data}')

    def log_handler_success(self, handler_name: str, message: Optional[str] = None) -> None:
        """Log successful handler completion."""
        log_msg = f'{handler_name} completed successfully for client: {self.socket_id}'
        if message:
            log_msg += f' - {message}'
        logger.info(log_msg)
