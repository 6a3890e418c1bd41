"""Session state machine: Idle -> Running <-> Paused -> Idle.

The controller owns all mutable session state. It talks to the word store
and the clock, and reports every change to a presenter, any object with a
``render(snapshot)`` method.
"""

import logging
import math
from typing import Callable, Optional

from freestyle.core.clock import SessionClock
from freestyle.core.errors import (
    DefinitionUnavailableError,
    EmptyWordListError,
    LoadError,
)
from freestyle.core.models import LoadStatus, SessionSnapshot, SessionState, WordEntry
from freestyle.core.word_store import WordStore
from freestyle.lookup.base import DefinitionLookup


logger = logging.getLogger(__name__)

DEFAULT_DURATION = 5
MIN_DURATION = 1
MAX_DURATION = 60

FETCHING_TEXT = "Fetching definition..."


class InlineDispatcher:
    """Runs background work immediately on the calling thread."""

    def submit(self, fn: Callable[[], object], callback: Callable[[object], None]) -> None:
        callback(fn())


class SessionController:
    """Runs practice sessions over the word store's current list."""

    def __init__(
        self,
        store: WordStore,
        clock: SessionClock,
        presenter=None,
        lookup: Optional[DefinitionLookup] = None,
        dispatcher=None,
        duration: int = DEFAULT_DURATION,
        min_duration: int = MIN_DURATION,
        max_duration: int = MAX_DURATION,
    ):
        self.store = store
        self.clock = clock
        self.presenter = presenter
        self.lookup = lookup
        self.dispatcher = dispatcher or InlineDispatcher()
        self.min_duration = min_duration
        self.max_duration = max_duration

        self.state = SessionState(interval_ms=self._clamp(duration) * 1000)
        self._word_text = "Ready?"
        self._hint = "Press start to begin your flow"

        self.clock.on_tick = self._on_tick
        self.clock.on_interval_elapsed = self._on_interval_elapsed

    # State queries

    @property
    def duration(self) -> int:
        """Interval length in whole seconds."""
        return self.state.interval_ms // 1000

    @property
    def is_idle(self) -> bool:
        return not self.state.is_running

    def snapshot(self) -> SessionSnapshot:
        """Build the presentation view of the current state."""
        state = self.state
        entry = state.current_entry

        if entry is not None:
            word_text = entry.text
            if entry.definition_pending:
                description = FETCHING_TEXT
            else:
                description = entry.display_description
        else:
            word_text = self._word_text
            description = None

        if state.is_running:
            countdown = max(0, math.ceil(state.remaining_ms / 1000))
            progress = self.clock.progress
        else:
            countdown = None
            progress = 0.0

        return SessionSnapshot(
            word_text=word_text,
            description=description,
            hint=self._current_hint(),
            countdown=countdown,
            progress=progress,
            is_running=state.is_running,
            is_paused=state.is_paused,
            words_shown=state.words_shown,
            rounds=state.round_count,
            word_count=self.store.word_count,
            language=state.language,
            duration=self.duration,
            load_status=state.load_status,
        )

    def _current_hint(self) -> str:
        if self.state.is_paused:
            return "PAUSED · Press Space to Resume"
        if self.state.is_running:
            return f"New word every {self.duration}s · Space to Pause"
        return self._hint

    def _render(self) -> None:
        if self.presenter is not None:
            self.presenter.show(self.snapshot())

    # User actions

    def start(self) -> bool:
        """Start a new round. Returns False when nothing was started."""
        if self.state.is_running:
            return False
        if self.store.word_count == 0:
            logger.info("Start ignored: no words loaded")
            return False

        state = self.state
        state.is_running = True
        state.is_paused = False
        state.round_count += 1
        state.words_shown = 0
        logger.info("Round %d started (%ss interval)", state.round_count, self.duration)

        self._show_next_word()
        self.clock.start(state.interval_ms)
        state.remaining_ms = self.clock.remaining_ms
        self._render()
        return True

    def stop(self) -> None:
        """End the round and reset counters and display."""
        if not self.state.is_running:
            return

        self.clock.stop()

        state = self.state
        logger.info("Round %d stopped after %d words", state.round_count, state.words_shown)
        state.is_running = False
        state.is_paused = False
        state.remaining_ms = 0.0
        state.current_entry = None
        state.words_shown = 0
        state.round_count = 0

        self._word_text = "Ready?"
        self._hint = "Press start to begin your flow"
        self._render()

    def toggle(self) -> None:
        """Main button: start when idle, stop when running."""
        if self.store.word_count == 0:
            return
        if self.state.is_running:
            self.stop()
        else:
            self.start()

    def toggle_pause(self) -> None:
        """Pause or resume a running round, keeping its progress."""
        state = self.state
        if not state.is_running:
            return

        if state.is_paused:
            state.is_paused = False
            self.clock.resume()
            logger.debug("Resumed with %.0fms left", self.clock.remaining_ms)
        else:
            self.clock.pause()
            state.is_paused = True
            logger.debug("Paused with %.0fms left", self.clock.remaining_ms)
        state.remaining_ms = self.clock.remaining_ms
        self._render()

    def space(self) -> None:
        """Space bar: pause/resume while running, start otherwise."""
        if self.state.is_running:
            self.toggle_pause()
        else:
            self.start()

    def change_language(self, code: str) -> bool:
        """Switch word lists, stopping any running round first.

        Returns True when the new list was loaded.
        """
        if self.state.is_running:
            self.stop()

        state = self.state
        state.language = code
        state.load_status = LoadStatus.LOADING
        self._word_text = "..."
        self._hint = "Loading words…"
        self._render()

        try:
            language_set = self.store.load(code)
        except LoadError as e:
            logger.error("Could not load word list for %s: %s", code, e)
            state.load_status = LoadStatus.ERROR
            self._word_text = "Error"
            self._hint = "Could not load word list"
            self._render()
            return False

        state.load_status = LoadStatus.READY
        self._word_text = "Ready?"
        self._hint = f"{len(language_set)} words loaded · Press start"
        self._render()
        return True

    def change_duration(self, seconds: int) -> int:
        """Set the interval for the next countdown. Returns the clamped value."""
        seconds = self._clamp(seconds)
        self.state.interval_ms = seconds * 1000
        if self.clock.is_running:
            self.clock.set_interval(self.state.interval_ms)
        self._render()
        return seconds

    def _clamp(self, seconds) -> int:
        return max(self.min_duration, min(self.max_duration, int(seconds)))

    # Clock events

    def _on_tick(self, remaining_ms: float, progress: float) -> None:
        self.state.remaining_ms = remaining_ms
        self._render()

    def _on_interval_elapsed(self) -> None:
        if not self.state.is_running:
            return
        self._show_next_word()
        self.state.remaining_ms = self.clock.remaining_ms

    # Words and definitions

    def _show_next_word(self) -> None:
        try:
            entry = self.store.pick_random()
        except EmptyWordListError:
            logger.warning("No words to show")
            return

        self.state.current_entry = entry
        self.state.words_shown += 1
        logger.debug("Word %d: %s", self.state.words_shown, entry.text)

        if self._wants_definition(entry):
            self._request_definition(entry)

    def _wants_definition(self, entry: WordEntry) -> bool:
        language_set = self.store.current
        return (
            self.lookup is not None
            and self.lookup.is_available()
            and language_set is not None
            and language_set.live_definitions
            and entry.needs_definition
        )

    def _request_definition(self, entry: WordEntry) -> None:
        entry.definition_pending = True
        self.dispatcher.submit(
            lambda: self._fetch_definition(entry.text),
            lambda result: self._on_definition(entry, result),
        )

    def _fetch_definition(self, word: str) -> Optional[str]:
        """Run a lookup; failures mean no definition."""
        try:
            return self.lookup.lookup(word)
        except DefinitionUnavailableError as e:
            logger.warning("Could not fetch definition for %s: %s", word, e)
            return None

    def _on_definition(self, entry: WordEntry, result: Optional[str]) -> None:
        entry.definition_pending = False
        # Only a different word on screen (or none) makes a result stale
        if self.state.current_entry is not entry:
            logger.debug("Discarding stale definition for %s", entry.text)
            return
        self.store.attach_definition(entry, result)
        self._render()
