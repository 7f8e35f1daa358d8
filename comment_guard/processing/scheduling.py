"""Cancellable recurring tasks backed by daemon threads."""

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class RecurringTask:
    """Handle for a callback that runs every ``interval`` seconds until cancelled.

    The first run happens one interval after :meth:`start`. Exceptions raised
    by the callback are logged and do not stop the task.
    """

    def __init__(
        self, interval: float, callback: Callable[[], None], name: str | None = None
    ) -> None:
        self.interval = interval
        self._callback = callback
        self._cancelled = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name=name or "recurring-task", daemon=True
        )

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def start(self) -> "RecurringTask":
        self._thread.start()
        return self

    def cancel(self) -> None:
        """Stop future runs. Safe to call more than once."""
        self._cancelled.set()

    def _run(self) -> None:
        while not self._cancelled.wait(self.interval):
            try:
                self._callback()
            except Exception:
                logger.exception(f"Recurring task {self._thread.name} failed")


class ThreadingScheduler:
    """Creates recurring tasks on background threads."""

    def schedule_recurring(
        self, interval: float, callback: Callable[[], None], name: str | None = None
    ) -> RecurringTask:
        """Run ``callback`` every ``interval`` seconds.

        Args:
            interval: Seconds between runs
            callback: Function to call on every run
            name: Optional thread name for logging

        Returns:
            Handle whose ``cancel()`` stops the task

        """
        return RecurringTask(interval, callback, name=name).start()
