"""Screen compositions for the practice timer."""

import urwid

from freestyle.core.models import SessionSnapshot
from freestyle.ui.theme import get_button_label, get_word_attr
from freestyle.ui.widgets import CountdownBar, StatsBar


class SessionScreen(urwid.WidgetWrap):
    """The word card with countdown. Renders controller snapshots."""

    def __init__(self, app):
        self.app = app

        self.countdown_text = urwid.Text("–", align="center")
        self.countdown_bar = CountdownBar()

        self.word_text = urwid.Text("...", align="center")
        self.word_display = urwid.AttrMap(self.word_text, "word")

        self.description_text = urwid.Text("", align="center")
        self.hint_text = urwid.Text("", align="center")
        self.button_text = urwid.Text(get_button_label(False), align="center")
        self.stats_bar = StatsBar()

        pile = urwid.Pile([
            urwid.Divider(),
            urwid.AttrMap(self.countdown_text, "countdown"),
            urwid.Padding(self.countdown_bar, align="center", width=("relative", 60)),
            urwid.Divider(),
            urwid.Divider(),
            self.word_display,
            urwid.Divider(),
            urwid.AttrMap(self.description_text, "description"),
            urwid.Divider(),
            urwid.Divider(),
            urwid.AttrMap(self.hint_text, "hint"),
            urwid.Divider(),
            self.button_text,
            urwid.Divider(),
            self.stats_bar,
        ])

        filler = urwid.Filler(pile, valign="middle")
        self.box = urwid.LineBox(filler, title="FreestyleFlow")
        super().__init__(self.box)

    def show(self, snapshot: SessionSnapshot):
        """Show a controller snapshot."""
        self.countdown_text.set_text(snapshot.countdown_text)
        self.countdown_bar.set_countdown(snapshot.countdown_text, snapshot.progress)

        self.word_text.set_text(snapshot.word_text)
        self.word_display.set_attr_map({None: get_word_attr(snapshot)})
        self.description_text.set_text(snapshot.description or "")
        self.hint_text.set_text(snapshot.hint)
        self.button_text.set_text(get_button_label(snapshot.is_running))
        self.stats_bar.set_stats(snapshot.words_shown, snapshot.rounds, snapshot.word_count)

        self.app.on_snapshot(snapshot)

    def selectable(self):
        return True

    def keypress(self, size, key):
        controller = self.app.controller

        if key == " ":
            controller.space()
            return None
        elif key in ("enter", "s"):
            controller.toggle()
            return None
        elif key in ("+", "="):
            controller.change_duration(controller.duration + 1)
            return None
        elif key in ("-", "_"):
            controller.change_duration(controller.duration - 1)
            return None

        return key
