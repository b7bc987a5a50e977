"""
Game State Presenter - Centralized controller state transformation for broadcasts.

This service provides canonical transformations for controller state that needs
to be sent to clients, ensuring consistent payload shapes.
"""

import logging
from typing import Any, Dict

from src.core.game_states import BuzzType, CountdownState

logger = logging.getLogger(__name__)


class GameStatePresenter:
    """Centralized service for transforming controller state for client broadcasts."""

    def serialize_value(self, value: Any) -> Any:
        """Convert a single observable value into a JSON-friendly form.

        Args:
            value: Value published by a controller

        Returns:
            The value itself, or a plain representation for enums
        """
        if isinstance(value, BuzzType):
            return {'type': value.value, 'pattern': list(value.pattern)}
        if isinstance(value, CountdownState):
            return value.value
        return value

    def create_game_state(self, game_controller) -> Dict[str, Any]:
        """Create the full game state payload from a controller snapshot."""
        return game_controller.snapshot().to_dict()

    def create_game_change(self, property_name: str, value: Any, game_controller) -> Dict[str, Any]:
        """Create the payload for one game property change.

        Args:
            property_name: Name of the property that changed
            value: Its new value
            game_controller: Controller the change came from

        Returns:
            Dict with the changed property and the full current state
        """
        return {
            'property': property_name,
            'value': self.serialize_value(value),
            'state': self.create_game_state(game_controller)
        }

    def create_score_state(self, score_controller) -> Dict[str, Any]:
        return score_controller.snapshot().to_dict()

    def create_score_change(self, property_name: str, value: Any, score_controller) -> Dict[str, Any]:
        return {
            'property': property_name,
            'value': self.serialize_value(value),
            'state': self.create_score_state(score_controller)
        }
