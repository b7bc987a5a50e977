"""
Scheduler Service - Repeating background tasks for countdown ticks.

This service handles:
- Running a callback repeatedly on a fixed interval
- Cancelling the repetition from any thread
- Plain threading for standalone use, Socket.IO background tasks under the server
"""

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class ScheduledTask:
    """Handle for a repeating task; cancel() stops further runs."""

    def __init__(self, interval_seconds: float, callback: Callable[[], None]):
        self.interval_seconds = interval_seconds
        self.callback = callback
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def _run_once(self) -> None:
        try:
            self.callback()
        except Exception as e:
            logger.error(f"Error in scheduled task: {e}")


class _ThreadTask(ScheduledTask):

    def __init__(self, interval_seconds: float, callback: Callable[[], None]):
        super().__init__(interval_seconds, callback)
        self.thread = threading.Thread(target=self._loop, daemon=True)

    def _loop(self):
        # Event.wait returns True as soon as the task is cancelled
        while not self._cancelled.wait(self.interval_seconds):
            self._run_once()


class _SocketIOTask(ScheduledTask):

    def __init__(self, socketio, interval_seconds: float, callback: Callable[[], None]):
        super().__init__(interval_seconds, callback)
        self.socketio = socketio

    def _loop(self):
        while not self.cancelled:
            self.socketio.sleep(self.interval_seconds)
            if self.cancelled:
                break
            self._run_once()


class ThreadingScheduler:
    """Runs each repeating task on its own daemon thread."""

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        """
        Call a function every interval until cancelled.

        Args:
            interval_seconds: Delay before the first call and between calls
            callback: Function to call

        Returns:
            Handle used to cancel the task
        """
        task = _ThreadTask(interval_seconds, callback)
        task.thread.start()
        logger.debug(f"Started repeating thread task every {interval_seconds}s")
        return task


class SocketIOScheduler:
    """Runs repeating tasks as Flask-SocketIO background tasks."""

    def __init__(self, socketio):
        """Initialize the scheduler.

        Args:
            socketio: Flask-SocketIO instance providing start_background_task and sleep
        """
        self.socketio = socketio

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        task = _SocketIOTask(self.socketio, interval_seconds, callback)
        self.socketio.start_background_task(task._loop)
        logger.debug(f"Started repeating background task every {interval_seconds}s")
        return task
