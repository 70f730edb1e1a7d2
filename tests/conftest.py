import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


class FakeHandle:
    def __init__(self, when, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manual clock standing in for the event loop's call_later."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback):
        handle = FakeHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def run_next(self):
        """Fire the earliest pending callback; return False when nothing is pending."""
        pending = self.pending
        if not pending:
            return False
        handle = min(pending, key=lambda h: h.when)
        self.handles.remove(handle)
        self.now = handle.when
        handle.callback()
        return True

    def run_all(self, limit=1000):
        fired = 0
        while fired < limit and self.run_next():
            fired += 1
        return fired


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def sample_array():
    return [64, 34, 25, 12, 22, 11, 90]
