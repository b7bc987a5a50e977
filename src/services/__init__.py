"""
Services package for the Guess The Word game

Contains the countdown machinery and the service classes wiring the game
controllers to Socket.IO. SessionService lives in
src.services.session_service and is imported from there, since it depends
on the controllers which in turn depend on the countdown services.
"""

from .scheduler_service import ThreadingScheduler, SocketIOScheduler, ScheduledTask
from .countdown_timer import CountdownTimer, create_countdown
from .game_state_presenter import GameStatePresenter
from .broadcast_service import BroadcastService

__all__ = [
    'ThreadingScheduler',
    'SocketIOScheduler',
    'ScheduledTask',
    'CountdownTimer',
    'create_countdown',
    'GameStatePresenter',
    'BroadcastService'
]
