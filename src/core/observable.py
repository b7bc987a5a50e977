"""
Observable - change notification channel for controller state.

Controllers hold their state privately and announce every change to the
subscribed listeners as a (property_name, value) pair.
"""

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]


class Observable:
    """Synchronous publish/subscribe channel for property changes."""

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for property changes.

        Args:
            listener: Callable invoked as listener(property_name, value)

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear_listeners(self) -> None:
        """Drop every registered listener."""
        self._listeners.clear()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self, property_name: str, value: Any) -> None:
        """Deliver a change to all listeners; a failing listener doesn't stop the others."""
        for listener in list(self._listeners):
            try:
                listener(property_name, value)
            except Exception as e:
                logger.error(f"Listener error while notifying {property_name}: {e}")
