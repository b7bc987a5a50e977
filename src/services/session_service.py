"""
Session Service - Manages game sessions per Socket.IO connection.

This service handles:
- Creating a game controller when a player starts a game
- Handing the final score over to a score controller when the game ends
- Socket ID to session mapping
- Closing controllers when a session ends
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from src.game_controller import GameController
from src.score_controller import ScoreController

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Controllers and listener subscriptions belonging to one connection."""
    socket_id: str
    game_controller: Optional[GameController] = None
    score_controller: Optional[ScoreController] = None
    unsubscribers: List[Callable[[], None]] = field(default_factory=list)

    def release_subscriptions(self) -> None:
        for unsubscribe in self.unsubscribers:
            unsubscribe()
        self.unsubscribers.clear()


class SessionService:
    """Manages game sessions and Socket.IO connections."""

    def __init__(self, content_manager, game_settings, scheduler):
        """Initialize the session service.

        Args:
            content_manager: Provides the vocabulary for new games
            game_settings: Countdown and buzz settings for new games
            scheduler: Drives the countdown ticks of every game
        """
        self.content_manager = content_manager
        self.game_settings = game_settings
        self.scheduler = scheduler
        # Store sessions (socket_id -> GameSession)
        self._sessions: Dict[str, GameSession] = {}
        logger.info("SessionService initialized")

    def start_game(self, socket_id: str) -> GameController:
        """Start a new game for a connection, ending any game or score screen it had.

        Args:
            socket_id: Socket.IO connection ID

        Returns:
            The running game controller
        """
        self.remove_session(socket_id)

        controller = GameController(
            vocabulary=self.content_manager.get_vocabulary(),
            settings=self.game_settings,
            scheduler=self.scheduler
        )
        self._sessions[socket_id] = GameSession(socket_id=socket_id, game_controller=controller)
        logger.debug(f"Started game for socket {socket_id}")
        return controller

    def get_session(self, socket_id: str) -> Optional[GameSession]:
        return self._sessions.get(socket_id)

    def get_game(self, socket_id: str) -> Optional[GameController]:
        """Get the running game controller of a connection, if any."""
        session = self._sessions.get(socket_id)
        return session.game_controller if session else None

    def get_score(self, socket_id: str) -> Optional[ScoreController]:
        """Get the score controller of a connection, if it is on the score screen."""
        session = self._sessions.get(socket_id)
        return session.score_controller if session else None

    def add_subscription(self, socket_id: str, unsubscribe: Callable[[], None]) -> None:
        session = self._sessions.get(socket_id)
        if session:
            session.unsubscribers.append(unsubscribe)

    def complete_game(self, socket_id: str) -> Optional[ScoreController]:
        """Leave the game screen: acknowledge the finish and hand the score over.

        Args:
            socket_id: Socket.IO connection ID

        Returns:
            The new score controller, or None if there was no game
        """
        session = self._sessions.get(socket_id)
        if not session or not session.game_controller:
            return None

        controller = session.game_controller
        controller.acknowledge_game_finished()
        final_score = controller.score

        session.release_subscriptions()
        controller.close()

        session.game_controller = None
        session.score_controller = ScoreController(final_score)
        logger.debug(f"Socket {socket_id} moved to score screen with score {final_score}")
        return session.score_controller

    def complete_play_again(self, socket_id: str) -> bool:
        """Leave the score screen after a play again request.

        The connection holds no session until its next start_game.

        Returns:
            True if there was a score screen to leave
        """
        session = self._sessions.get(socket_id)
        if not session or not session.score_controller:
            return False

        session.score_controller.acknowledge_play_again()
        session.release_subscriptions()
        session.score_controller = None
        del self._sessions[socket_id]
        return True

    def remove_session(self, socket_id: str) -> Optional[GameSession]:
        """Remove a session and close its game controller.

        Args:
            socket_id: Socket.IO connection ID

        Returns:
            The removed session or None if not found
        """
        session = self._sessions.pop(socket_id, None)
        if session:
            session.release_subscriptions()
            if session.game_controller:
                session.game_controller.close()
            logger.debug(f"Removed session for socket {socket_id}")
        return session

    def close_all(self) -> None:
        """Close every session (application shutdown)."""
        for socket_id in list(self._sessions.keys()):
            self.remove_session(socket_id)

    def has_session(self, socket_id: str) -> bool:
        return socket_id in self._sessions

    def get_sessions_count(self) -> int:
        """Get the total number of active sessions.

        Returns:
            Number of active sessions
        """
        return len(self._sessions)
