"""Data models for the practice timer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


PLACEHOLDER_PREFIXES = ("Term:", "Definition for")


class LoadStatus(Enum):
    """State of the active word list."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class Language:
    """A configured language and the file holding its word list."""
    code: str
    label: str
    file: str
    live_definitions: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Language":
        """Create from a config mapping."""
        code = str(data["code"])
        return cls(
            code=code,
            label=str(data.get("label", code)),
            file=str(data.get("file", f"{code}.json")),
            live_definitions=bool(data.get("live_definitions", False)),
        )


@dataclass(eq=False)
class WordEntry:
    """A word plus its optional description.

    Entries compare by identity: two entries with the same text are still
    distinct words in a list.
    """
    text: str
    description: Optional[str] = None
    description_is_authoritative: bool = False
    definition_pending: bool = False

    @property
    def has_placeholder_description(self) -> bool:
        """True when the description is missing or a generated stand-in."""
        if not self.description or not self.description.strip():
            return True
        return self.description.startswith(PLACEHOLDER_PREFIXES)

    @property
    def display_description(self) -> Optional[str]:
        """Description to show, or None for placeholders."""
        if self.description_is_authoritative:
            return self.description
        if self.has_placeholder_description:
            return None
        return self.description

    @property
    def needs_definition(self) -> bool:
        """Whether a live lookup should be started for this entry."""
        return (
            self.has_placeholder_description
            and not self.description_is_authoritative
            and not self.definition_pending
        )


@dataclass
class LanguageSet:
    """The loaded word list of one language."""
    code: str
    label: str
    entries: list[WordEntry] = field(default_factory=list)
    live_definitions: bool = False

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class SessionState:
    """Mutable session state, owned by the SessionController."""
    interval_ms: int
    is_running: bool = False
    is_paused: bool = False
    round_count: int = 0
    words_shown: int = 0
    remaining_ms: float = 0.0
    current_entry: Optional[WordEntry] = None
    language: Optional[str] = None
    load_status: LoadStatus = LoadStatus.IDLE


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the presentation layer needs to draw one frame."""
    word_text: str
    description: Optional[str]
    hint: str
    countdown: Optional[int]
    progress: float
    is_running: bool
    is_paused: bool
    words_shown: int
    rounds: int
    word_count: int
    language: Optional[str]
    duration: int
    load_status: LoadStatus

    @property
    def countdown_text(self) -> str:
        """Countdown as displayed, a dash when idle."""
        if self.countdown is None:
            return "–"
        return str(self.countdown)
