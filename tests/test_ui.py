"""Tests for the terminal UI, drawn off-screen."""

import os

import urwid

from freestyle.core.models import Language, LoadStatus, SessionSnapshot
from freestyle.core.session import SessionController
from freestyle.ui.dispatch import ThreadDispatcher
from freestyle.ui.screens import SessionScreen
from freestyle.ui.theme import get_button_label, get_word_attr
from freestyle.ui.widgets import CountdownBar, LanguageBar


def make_snapshot(**overrides) -> SessionSnapshot:
    values = dict(
        word_text="Ready?",
        description=None,
        hint="Press start to begin your flow",
        countdown=None,
        progress=0.0,
        is_running=False,
        is_paused=False,
        words_shown=0,
        rounds=0,
        word_count=2,
        language="EN",
        duration=5,
        load_status=LoadStatus.READY,
    )
    values.update(overrides)
    return SessionSnapshot(**values)


class TestTheme:
    """Test theme helper functions."""

    def test_get_word_attr(self):
        assert get_word_attr(make_snapshot()) == "word"
        assert get_word_attr(make_snapshot(is_running=True)) == "word_active"
        assert get_word_attr(make_snapshot(is_running=True, is_paused=True)) == "word_paused"
        assert get_word_attr(make_snapshot(load_status=LoadStatus.ERROR)) == "word_error"

    def test_get_button_label(self):
        assert get_button_label(False) == "▶ Start"
        assert get_button_label(True) == "■ Stop"


class TestWidgets:

    def setup_method(self):
        self.languages = [
            Language("AZ", "Azərbaycan", "AZ.json"),
            Language("EN", "English", "EN.json"),
        ]

    def test_language_bar_cycles(self):
        bar = LanguageBar(self.languages)
        assert bar.next_code() == "AZ"
        bar.set_active("AZ")
        assert bar.next_code() == "EN"
        bar.set_active("EN")
        assert bar.next_code() == "AZ"

    def test_language_bar_code_at(self):
        bar = LanguageBar(self.languages)
        assert bar.code_at(1) == "EN"
        assert bar.code_at(5) is None

    def test_language_bar_click(self):
        selected = []
        bar = LanguageBar(self.languages, on_select=selected.append)
        # " 1:Azərbaycan " plus a spacer occupies columns 0-14
        assert bar.mouse_event((40,), "mouse press", 1, 16, 0, True)
        assert selected == ["EN"]

    def test_empty_language_bar(self):
        assert LanguageBar([]).next_code() is None

    def test_countdown_bar(self):
        bar = CountdownBar()
        bar.set_countdown("3", 0.4)
        assert bar.get_text() == "3"
        assert bar.current == 400


class FakeApp:
    def __init__(self):
        self.snapshots = []
        self.controller = None

    def on_snapshot(self, snapshot):
        self.snapshots.append(snapshot)


class TestSessionScreen:

    def test_show(self):
        app = FakeApp()
        screen = SessionScreen(app)
        snapshot = make_snapshot(
            word_text="dawn",
            description="The first light of day.",
            hint="New word every 5s · Space to Pause",
            countdown=4,
            progress=0.2,
            is_running=True,
            words_shown=3,
            rounds=1,
        )
        screen.show(snapshot)

        assert screen.word_text.text == "dawn"
        assert screen.description_text.text == "The first light of day."
        assert screen.countdown_text.text == "4"
        assert screen.button_text.text == "■ Stop"
        assert "Words: 3" in screen.stats_bar.text_widget.text
        assert app.snapshots == [snapshot]

    def test_show_idle(self):
        screen = SessionScreen(FakeApp())
        screen.show(make_snapshot())
        assert screen.countdown_text.text == "–"
        assert screen.description_text.text == ""
        assert screen.button_text.text == "▶ Start"

    def test_driven_by_controller_and_drawn(self, store, clock):
        app = FakeApp()
        screen = SessionScreen(app)
        app.controller = SessionController(store, clock, presenter=screen)

        app.controller.change_language("AZ")
        app.controller.start()
        assert screen.word_text.text in ("a", "b")
        assert app.snapshots[-1].is_running

        canvas = urwid.Frame(body=screen).render((80, 24), focus=True)
        lines = [line.decode("utf-8") for line in canvas.text]
        assert len(lines) == 24
        assert any("FreestyleFlow" in line for line in lines)
        assert any("Words: 1" in line for line in lines)

    def test_keys_reach_controller(self, store, clock):
        app = FakeApp()
        screen = SessionScreen(app)
        app.controller = SessionController(store, clock, presenter=screen)
        app.controller.change_language("AZ")

        assert screen.keypress((80, 24), "enter") is None
        assert app.controller.state.is_running
        assert screen.keypress((80, 24), "+") is None
        assert app.controller.duration == 6
        assert screen.keypress((80, 24), "x") == "x"


class FakePipeLoop:
    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()
        self.callback = None

    def watch_pipe(self, callback):
        self.callback = callback
        return self.write_fd


class TestThreadDispatcher:

    def test_result_delivered_through_pipe(self):
        loop = FakePipeLoop()
        dispatcher = ThreadDispatcher(loop)
        results = []

        dispatcher.submit(lambda: "definition", results.append)
        data = os.read(loop.read_fd, 1)
        assert results == []

        assert loop.callback(data) is True
        assert results == ["definition"]

    def test_failed_job_delivers_none(self):
        loop = FakePipeLoop()
        dispatcher = ThreadDispatcher(loop)
        results = []

        def boom():
            raise RuntimeError("boom")

        dispatcher.submit(boom, results.append)
        loop.callback(os.read(loop.read_fd, 1))
        assert results == [None]
