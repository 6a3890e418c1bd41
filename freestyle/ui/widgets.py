"""Custom urwid widgets for the practice timer."""

import urwid

from freestyle.core.models import Language


class LanguageBar(urwid.WidgetWrap):
    """A horizontal bar of languages with the active one highlighted."""

    def __init__(self, languages: list[Language], on_select=None):
        self.languages = languages
        self.active_code: str | None = None
        self.duration = 0
        self.on_select = on_select
        super().__init__(self._make())

    def _build(self):
        """Rebuild after a change."""
        self._w = self._make()

    def _make(self) -> urwid.Widget:
        """Build the bar widget."""
        columns = []
        for i, lang in enumerate(self.languages):
            attr = "tab_active" if lang.code == self.active_code else "tab_inactive"
            label = urwid.AttrMap(urwid.Text(f" {i + 1}:{lang.label} "), attr)
            columns.append(("pack", label))
            columns.append(("pack", urwid.Text(" ")))

        badge = urwid.AttrMap(urwid.Text(f" {self.duration}s ", align="right"), "badge")
        columns.append(badge)

        return urwid.AttrMap(urwid.Columns(columns), "header")

    def set_active(self, code: str | None):
        """Highlight a language without notifying."""
        if code != self.active_code:
            self.active_code = code
            self._build()

    def set_duration(self, seconds: int):
        """Show the configured interval."""
        if seconds != self.duration:
            self.duration = seconds
            self._build()

    def next_code(self) -> str | None:
        """Code of the language after the active one, wrapping around."""
        if not self.languages:
            return None
        codes = [lang.code for lang in self.languages]
        if self.active_code not in codes:
            return codes[0]
        return codes[(codes.index(self.active_code) + 1) % len(codes)]

    def code_at(self, index: int) -> str | None:
        """Code of the language at a position, or None."""
        if 0 <= index < len(self.languages):
            return self.languages[index].code
        return None

    def mouse_event(self, size, event, button, col, row, focus):
        if event == "mouse press" and button == 1 and self.on_select:
            x = 0
            for i, lang in enumerate(self.languages):
                tab_width = len(f" {i + 1}:{lang.label} ") + 1
                if x <= col < x + tab_width:
                    self.on_select(lang.code)
                    return True
                x += tab_width
        return False


class CountdownBar(urwid.ProgressBar):
    """A progress bar labelled with the countdown instead of a percentage."""

    def __init__(self):
        super().__init__("progress_normal", "progress_complete", current=0, done=1000,
                         satt="progress_smooth")
        self.label = "–"

    def set_countdown(self, label: str, progress: float):
        """Show remaining seconds and the elapsed fraction of the interval."""
        self.label = label
        self.set_completion(int(round(max(0.0, min(1.0, progress)) * self.done)))

    def get_text(self) -> str:
        return self.label


class StatsBar(urwid.WidgetWrap):
    """Words shown, rounds and loaded word count."""

    def __init__(self):
        self.text_widget = urwid.Text("", align="center")
        super().__init__(self.text_widget)
        self.set_stats(0, 0, 0)

    def set_stats(self, words_shown: int, rounds: int, word_count: int):
        self.text_widget.set_text(
            f"Words: {words_shown}   Rounds: {rounds}   List: {word_count}"
        )


class StatusBar(urwid.WidgetWrap):
    """A status bar showing hints and messages."""

    def __init__(self, text: str = ""):
        self.text_widget = urwid.Text(text)
        widget = urwid.AttrMap(self.text_widget, "footer")
        super().__init__(widget)

    def set_text(self, text: str):
        """Set the status text."""
        self.text_widget.set_text(text)
