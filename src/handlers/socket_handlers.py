"""
Socket.IO event handlers for the Guess The Word game.

This module provides the main registration function and connection/disconnection handlers
for the handler architecture using dependency injection and event routing.
"""

import logging
from flask import request
from flask_socketio import emit

from container import get_container
from .socket_event_router import setup_router
from .game_session_handler import GameSessionHandler
from .game_action_handler import GameActionHandler
from .score_handler import ScoreHandler

logger = logging.getLogger(__name__)


def register_socket_handlers(socketio_instance):
    """Register all socket handlers with the SocketIO instance."""

    router = setup_router(socketio_instance)

    session_handler = GameSessionHandler()
    action_handler = GameActionHandler()
    score_handler = ScoreHandler()

    # Connection/disconnection handlers don't go through the router
    socketio_instance.on_event('connect', handle_connect)
    socketio_instance.on_event('disconnect', handle_disconnect)

    # Game screen navigation
    router.register_route('start_game', session_handler.handle_start_game)
    router.register_route('get_game_state', session_handler.handle_get_game_state)
    router.register_route('game_finish_complete', session_handler.handle_game_finish_complete)

    # Game screen buttons
    router.register_route('correct_guess', action_handler.handle_correct_guess)
    router.register_route('skip_word', action_handler.handle_skip_word)
    router.register_route('buzz_complete', action_handler.handle_buzz_complete)

    # Score screen
    router.register_route('get_score_state', score_handler.handle_get_score_state)
    router.register_route('play_again', score_handler.handle_play_again)
    router.register_route('play_again_complete', score_handler.handle_play_again_complete)

    router.register_with_socketio()

    logger.info(f"Registered {len(router.get_registered_events())} socket event handlers")
    return router


def handle_connect(auth=None):
    """Handle client connection."""
    logger.info(f'Client connected: {request.sid}')
    emit('connected', {'status': 'Connected to Guess The Word server'})


def handle_disconnect(reason=None):
    """Handle client disconnection: the client's game is closed with its timer."""
    session_service = get_container().get('SessionService')

    logger.info(f'Client disconnected: {request.sid}')
    if session_service.remove_session(request.sid):
        logger.info(f'Closed game session of {request.sid}')
