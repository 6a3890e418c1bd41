"""Main application entry point."""

import logging
from typing import Optional

import urwid
from dotenv import load_dotenv

from freestyle.config import get_api_key, get_data_dir, get_languages, load_config
from freestyle.core.clock import SessionClock
from freestyle.core.models import SessionSnapshot
from freestyle.core.session import SessionController
from freestyle.core.word_store import WordStore
from freestyle.log import setup_logging
from freestyle.lookup.anthropic import AnthropicProvider
from freestyle.lookup.base import AIProvider, DefinitionLookup
from freestyle.lookup.dictionary import DEFAULT_BASE_URL, FreeDictionaryLookup
from freestyle.lookup.generator import AIDefinitionLookup
from freestyle.lookup.openai import OpenAIProvider
from freestyle.storage.files import WordListSource
from freestyle.ui.dispatch import ThreadDispatcher
from freestyle.ui.screens import SessionScreen
from freestyle.ui.theme import PALETTE
from freestyle.ui.widgets import LanguageBar, StatusBar


# Load .env file if present
load_dotenv()

logger = logging.getLogger(__name__)

HELP_TEXT = """
FreestyleFlow - random words for freestyle practice

Session:
  Space       Pause / resume (start when idle)
  Enter, s    Start / stop
  + / -       Longer / shorter interval

Languages:
  Tab, l      Next language
  1-9         Select language by number

  ?           This help
  q           Quit

Press any key to close...
"""


class App:
    """Main application class."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        language: Optional[str] = None,
        duration: Optional[int] = None,
    ):
        self.config = load_config(config_path)
        self.log_path = setup_logging(self.config)
        logger.info("Starting with config %s", self.config.get("_path", "<defaults>"))

        # Word lists
        source = WordListSource(get_data_dir(self.config))
        languages = get_languages(self.config) or source.discover()
        self.store = WordStore(languages, source)

        self.lookup = self._init_lookup()

        self._init_ui()

        session_config = self.config["session"]
        self.clock = SessionClock(self.loop, tick_ms=session_config.get("tick_ms", 50))
        self.controller = SessionController(
            self.store,
            self.clock,
            presenter=self.screen,
            lookup=self.lookup,
            dispatcher=ThreadDispatcher(self.loop),
            duration=duration or session_config.get("duration", 5),
            min_duration=session_config.get("min_duration", 1),
            max_duration=session_config.get("max_duration", 60),
        )

        initial = language or self.config.get("default_language")
        if not initial and languages:
            initial = languages[0].code
        if initial:
            self.controller.change_language(initial)
        else:
            self.status_bar.set_text("No word lists found - check data.base_path in config")

    def _init_lookup(self) -> Optional[DefinitionLookup]:
        """Create the definition lookup chosen in config."""
        lookup_config = self.config["lookup"]
        choice = (lookup_config.get("provider") or "none").lower()

        if choice == "none":
            return None

        anthropic_config = lookup_config.get("anthropic") or {}
        openai_config = lookup_config.get("openai") or {}
        anthropic_key = get_api_key(anthropic_config, "ANTHROPIC_API_KEY")
        openai_key = get_api_key(openai_config, "OPENAI_API_KEY")

        provider: Optional[AIProvider] = None
        if choice in ("anthropic", "auto") and anthropic_key:
            provider = AnthropicProvider(
                api_key=anthropic_key,
                model=anthropic_config.get("model", "claude-3-haiku-20240307"),
            )
        elif choice in ("openai", "auto") and openai_key:
            provider = OpenAIProvider(
                api_key=openai_key,
                model=openai_config.get("model", "gpt-4o-mini"),
            )
        elif choice in ("anthropic", "openai"):
            logger.warning("No API key for %s, using the dictionary lookup", choice)

        if provider and provider.is_available():
            logger.info("Definitions from %s", type(provider).__name__)
            return AIDefinitionLookup(provider, language=lookup_config.get("language", "English"))

        return FreeDictionaryLookup(
            base_url=lookup_config.get("base_url") or DEFAULT_BASE_URL,
            timeout=lookup_config.get("timeout", 5),
        )

    def _init_ui(self):
        """Initialize the UI components."""
        self.language_bar = LanguageBar(self.store.languages, on_select=self.select_language)
        self.screen = SessionScreen(self)
        self.status_bar = StatusBar()

        self.frame = urwid.Frame(
            header=self.language_bar,
            body=self.screen,
            footer=self.status_bar,
        )

        self.loop = urwid.MainLoop(
            self.frame,
            palette=PALETTE,
            unhandled_input=self.handle_input,
            handle_mouse=True,
        )

    def on_snapshot(self, snapshot: SessionSnapshot):
        """Keep the header and footer in step with the session."""
        self.language_bar.set_active(snapshot.language)
        self.language_bar.set_duration(snapshot.duration)
        self.update_status(snapshot)

    def update_status(self, snapshot: SessionSnapshot):
        """Update the status bar based on current state."""
        if snapshot.is_paused:
            hint = "[Space]resume [Enter]stop [q]uit"
        elif snapshot.is_running:
            hint = "[Space]pause [Enter]stop [+/-]interval [q]uit"
        else:
            hint = "[Space/Enter]start [+/-]interval [Tab]language [?]help [q]uit"
        self.status_bar.set_text(f" {snapshot.language or '-'} | {hint}")

    def select_language(self, code: Optional[str]):
        """Switch to another word list."""
        if code and code != self.controller.state.language:
            self.controller.change_language(code)

    def handle_input(self, key):
        """Handle global key input."""

        # Handle tuple keys (mouse events) - ignore them
        if not isinstance(key, str):
            return

        if key in ("q", "Q"):
            raise urwid.ExitMainLoop()

        if key in ("tab", "l"):
            self.select_language(self.language_bar.next_code())
            return

        if len(key) == 1 and key in "123456789":
            self.select_language(self.language_bar.code_at(int(key) - 1))
            return

        if key == "?":
            self._show_help()
            return

    def _show_help(self):
        """Show help overlay."""
        text = urwid.Text(HELP_TEXT)
        filler = urwid.Filler(text, valign="top")
        box = urwid.LineBox(filler, title="Help")
        overlay = urwid.Overlay(
            box,
            self.frame,
            align="center",
            width=50,
            valign="middle",
            height=22,
        )

        def close_help(key):
            self.loop.widget = self.frame
            self.loop.unhandled_input = self.handle_input
            return True

        self.loop.widget = overlay
        self.loop.unhandled_input = close_help

    def run(self):
        """Run the application."""
        try:
            self.loop.run()
        except KeyboardInterrupt:
            pass
        finally:
            self.clock.stop()
            logger.info("Exiting")


def main():
    """Entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Random words for freestyle practice")
    parser.add_argument(
        "-c", "--config",
        help="Path to config file",
        default=None,
    )
    parser.add_argument(
        "-l", "--language",
        help="Language code to start with (e.g. EN)",
        default=None,
    )
    parser.add_argument(
        "-d", "--duration",
        help="Seconds between words",
        type=int,
        default=None,
    )
    args = parser.parse_args()

    app = App(config_path=args.config, language=args.language, duration=args.duration)
    app.run()


if __name__ == "__main__":
    main()
