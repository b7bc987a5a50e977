"""
Broadcast Service - Centralized Socket.IO message broadcasting.

This service handles all Socket.IO emissions in a centralized way:
- Individual player messages
- Game state change notifications
- Score screen notifications
"""

import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)


class BroadcastService:
    """Centralized service for all Socket.IO broadcasting operations."""

    def __init__(self, socketio, presenter):
        """Initialize the broadcast service.

        Args:
            socketio: Flask-SocketIO instance for emitting messages
            presenter: GameStatePresenter building the payloads
        """
        self.socketio = socketio
        self.presenter = presenter

    # Core emission methods

    def emit_to_player(self, event: str, data: Dict[str, Any], socket_id: str):
        """Emit an event to a specific player."""
        try:
            self.socketio.emit(event, data, to=socket_id)
            logger.debug(f'Emitted {event} to player {socket_id}')
        except Exception as e:
            logger.error(f'Error emitting {event} to player {socket_id}: {e}')

    # Controller listeners

    def create_game_listener(self, socket_id: str, game_controller) -> Callable[[str, Any], None]:
        """Build a listener that forwards every game state change to the player."""
        def listener(property_name: str, value: Any):
            payload = self.presenter.create_game_change(property_name, value, game_controller)
            self.emit_to_player('game_state_changed', payload, socket_id)
        return listener

    def create_score_listener(self, socket_id: str, score_controller) -> Callable[[str, Any], None]:
        """Build a listener that forwards score screen changes to the player."""
        def listener(property_name: str, value: Any):
            payload = self.presenter.create_score_change(property_name, value, score_controller)
            self.emit_to_player('score_state_changed', payload, socket_id)
        return listener

    # Full state messages

    def send_game_state(self, socket_id: str, game_controller):
        """Send the complete game state to a player (initial render or resync)."""
        try:
            self.emit_to_player('game_state', self.presenter.create_game_state(game_controller), socket_id)
        except Exception as e:
            logger.error(f'Error sending game state to player {socket_id}: {e}')

    def send_score_state(self, socket_id: str, score_controller):
        """Send the score screen state to a player."""
        try:
            self.emit_to_player('score_state', self.presenter.create_score_state(score_controller), socket_id)
        except Exception as e:
            logger.error(f'Error sending score state to player {socket_id}: {e}')
