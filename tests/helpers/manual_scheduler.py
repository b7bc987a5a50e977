"""
Manual scheduler for deterministic countdown tests.
Repeating tasks only run when the test calls tick().
"""

from src.services.scheduler_service import ScheduledTask


class ManualScheduler:
    """Scheduler whose tasks are advanced by hand."""

    def __init__(self):
        self.tasks = []

    def schedule_repeating(self, interval_seconds, callback):
        task = ScheduledTask(interval_seconds, callback)
        self.tasks.append(task)
        return task

    @property
    def active_tasks(self):
        return [task for task in self.tasks if not task.cancelled]

    def tick(self, times=1):
        """Fire every active task once per requested tick."""
        for _ in range(times):
            for task in self.active_tasks:
                task.callback()
