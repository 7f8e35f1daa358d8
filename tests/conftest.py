"""Shared fixtures: a scriptable gateway, a manual scheduler and a fake clock."""

from collections.abc import Callable

import pytest

from comment_guard.exceptions import GatewayError
from comment_guard.models.category import Category
from comment_guard.models.record import ClassificationRecord
from comment_guard.processing.session import DetectorSession


def make_record(
    text: str = "great video",
    is_spam: bool = False,
    confidence: float = 0.9,
    category: Category | None = None,
    reason: str = "test",
) -> ClassificationRecord:
    """Create a record without going through a gateway."""
    if category is None:
        category = Category.SPAM if is_spam else Category.SAFE
    return ClassificationRecord(
        text=text,
        is_spam=is_spam,
        confidence=confidence,
        category=category,
        reason=reason,
    )


class FakeGateway:
    """Deterministic gateway that records every call."""

    def __init__(self) -> None:
        self.classified: list[str] = []
        self.fail_texts: set[str] = set()
        self.source_calls: list[str] = []
        self.source_records: list[ClassificationRecord] = [
            make_record("first sampled comment"),
            make_record("join my telegram for crypto", is_spam=True, category=Category.SCAM),
        ]
        self.source_error: Exception | None = None
        self.on_analyze: Callable[[], None] | None = None
        self.polled: list[str] = []
        self.poll_queue: list = []
        self.on_poll: Callable[[], None] | None = None

    def classify_sample(self, text: str) -> ClassificationRecord:
        self.classified.append(text)
        if text in self.fail_texts:
            raise GatewayError(f"service unavailable for {text!r}")
        is_spam = "spam" in text.lower()
        return make_record(text, is_spam=is_spam, confidence=0.8 if is_spam else 0.6)

    def analyze_source(self, reference: str) -> list[ClassificationRecord]:
        self.source_calls.append(reference)
        if self.on_analyze:
            self.on_analyze()
        if self.source_error:
            raise self.source_error
        return list(self.source_records)

    def poll_recent(self, reference: str) -> list[ClassificationRecord]:
        self.polled.append(reference)
        if self.on_poll:
            self.on_poll()
        if not self.poll_queue:
            return []
        item = self.poll_queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class ManualTask:
    """Recurring task that only runs when the test fires it."""

    def __init__(self, interval: float, callback: Callable[[], None], name: str | None) -> None:
        self.interval = interval
        self.callback = callback
        self.name = name or "task"
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler double that never starts threads."""

    def __init__(self) -> None:
        self.tasks: list[ManualTask] = []

    def schedule_recurring(
        self, interval: float, callback: Callable[[], None], name: str | None = None
    ) -> ManualTask:
        task = ManualTask(interval, callback, name)
        self.tasks.append(task)
        return task

    def active_tasks(self, prefix: str = "") -> list[ManualTask]:
        return [t for t in self.tasks if not t.cancelled and t.name.startswith(prefix)]

    def fire(self, prefix: str = "") -> None:
        """Run every active task whose name starts with ``prefix`` once."""
        for task in self.active_tasks(prefix):
            if not task.cancelled:
                task.callback()


class FakeClock:
    """Monotonic clock whose sleep just advances time."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(gateway, scheduler, clock):
    """Create a session wired to the fakes."""
    detector = DetectorSession(gateway, scheduler, clock=clock, sleep=clock.sleep)
    yield detector
    detector.shutdown()
