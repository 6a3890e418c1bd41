"""Word list management and random word selection."""

import logging
import random
from typing import Optional

from freestyle.core.errors import EmptyWordListError, LanguageNotFoundError
from freestyle.core.models import Language, LanguageSet, WordEntry
from freestyle.storage.files import WordListSource


logger = logging.getLogger(__name__)

_system_random = random.SystemRandom()


def random_index(size: int) -> int:
    """Uniform index in [0, size), from OS entropy when available."""
    try:
        return _system_random.randrange(size)
    except NotImplementedError:
        return random.randrange(size)


class WordStore:
    """Holds the word list of the active language."""

    def __init__(self, languages: list[Language], source: WordListSource):
        self._languages = {lang.code: lang for lang in languages}
        self.source = source
        self.current: Optional[LanguageSet] = None

    @property
    def languages(self) -> list[Language]:
        """Configured languages, in configuration order."""
        return list(self._languages.values())

    def get_language(self, code: str) -> Optional[Language]:
        """Get a configured language by code."""
        return self._languages.get(code)

    @property
    def word_count(self) -> int:
        """Number of entries in the current set."""
        return len(self.current) if self.current else 0

    def load(self, code: str) -> LanguageSet:
        """Load the word list for a language, replacing the current one.

        The current set is dropped first, so a failed load leaves the
        store empty.

        Raises:
            LanguageNotFoundError: If the code is not configured
            SourceUnavailableError: If the word list cannot be read
        """
        self.current = None

        language = self.get_language(code)
        if language is None:
            raise LanguageNotFoundError(code)

        entries = self.source.read(language.file)
        self.current = LanguageSet(
            code=language.code,
            label=language.label,
            entries=entries,
            live_definitions=language.live_definitions,
        )
        logger.info("Loaded %d words for %s", len(entries), code)
        return self.current

    def pick_random(self, language_set: Optional[LanguageSet] = None) -> WordEntry:
        """Pick a uniformly random entry. Repeats are allowed.

        Raises:
            EmptyWordListError: If there are no entries to pick from
        """
        language_set = language_set if language_set is not None else self.current
        if language_set is None or not language_set.entries:
            raise EmptyWordListError("No words loaded")
        return language_set.entries[random_index(len(language_set.entries))]

    def attach_definition(self, entry: WordEntry, result: Optional[str]) -> None:
        """Store a looked-up definition on an entry if there is one."""
        if isinstance(result, str) and result.strip():
            entry.description = result.strip()
            entry.description_is_authoritative = True
