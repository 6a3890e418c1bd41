"""Core session logic - UI independent."""
from .models import (
    Language,
    LanguageSet,
    LoadStatus,
    SessionSnapshot,
    SessionState,
    WordEntry,
)
from .errors import (
    DefinitionUnavailableError,
    EmptyWordListError,
    FlowError,
    LanguageNotFoundError,
    LoadError,
    SourceUnavailableError,
)

# Note: WordStore, SessionClock and SessionController are imported directly
# where needed to avoid circular imports with the storage and lookup modules

__all__ = [
    "Language",
    "LanguageSet",
    "LoadStatus",
    "SessionSnapshot",
    "SessionState",
    "WordEntry",
    "DefinitionUnavailableError",
    "EmptyWordListError",
    "FlowError",
    "LanguageNotFoundError",
    "LoadError",
    "SourceUnavailableError",
]
