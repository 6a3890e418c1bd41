"""Shared fakes for driving the clock and controller headlessly."""

import itertools

import pytest

from freestyle.core.clock import SessionClock
from freestyle.core.errors import SourceUnavailableError
from freestyle.core.models import Language, WordEntry
from freestyle.core.session import SessionController
from freestyle.core.word_store import WordStore
from freestyle.storage.files import WordListSource


class FakeTime:
    """Manual monotonic clock, in seconds."""

    def __init__(self):
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float):
        self.now += ms / 1000.0


class FakeLoop:
    """Records alarms the way urwid.MainLoop schedules them."""

    def __init__(self):
        self.alarms = {}
        self._ids = itertools.count()

    def set_alarm_in(self, sec, callback, user_data=None):
        handle = next(self._ids)
        self.alarms[handle] = (sec, callback, user_data)
        return handle

    def remove_alarm(self, handle):
        return self.alarms.pop(handle, None) is not None

    def fire(self):
        """Run every pending alarm once."""
        pending = list(self.alarms.items())
        self.alarms.clear()
        for handle, (sec, callback, user_data) in pending:
            callback(self, user_data)


class RecordingPresenter:
    def __init__(self):
        self.snapshots = []

    def show(self, snapshot):
        self.snapshots.append(snapshot)

    @property
    def last(self):
        return self.snapshots[-1]


class DeferredDispatcher:
    """Holds background jobs until the test resolves them."""

    def __init__(self):
        self.jobs = []

    def submit(self, fn, callback):
        self.jobs.append((fn, callback))

    def run_all(self):
        jobs, self.jobs = self.jobs, []
        for fn, callback in jobs:
            callback(fn())


class StaticSource(WordListSource):
    """Word lists held in memory, keyed by file name."""

    def __init__(self, lists: dict[str, list[str]]):
        super().__init__(".")
        self.lists = lists

    def read(self, filename):
        if filename not in self.lists:
            raise SourceUnavailableError(f"Word list not found: {filename}")
        return [WordEntry(text=w) for w in self.lists[filename]]


LANGUAGES = [
    Language(code="AZ", label="Azərbaycan", file="AZ.txt"),
    Language(code="EN", label="English", file="EN.txt", live_definitions=True),
    Language(code="XX", label="Missing", file="XX.txt"),
]


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def fake_loop():
    return FakeLoop()


@pytest.fixture
def clock(fake_loop, fake_time):
    return SessionClock(fake_loop, tick_ms=50, time_fn=fake_time)


@pytest.fixture
def store():
    source = StaticSource({
        "AZ.txt": ["a", "b"],
        "EN.txt": ["apple", "banana", "cherry"],
    })
    return WordStore(LANGUAGES, source)


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def dispatcher():
    return DeferredDispatcher()


@pytest.fixture
def make_controller(store, clock, presenter, dispatcher):
    def factory(lookup=None, duration=5):
        return SessionController(
            store,
            clock,
            presenter=presenter,
            lookup=lookup,
            dispatcher=dispatcher,
            duration=duration,
        )
    return factory


