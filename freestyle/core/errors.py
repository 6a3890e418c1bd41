"""Errors raised by the word store, loaders and definition lookups."""


class FlowError(Exception):
    """Base class for all application errors."""
    pass


class LoadError(FlowError):
    """A word list could not be loaded."""
    pass


class LanguageNotFoundError(LoadError):
    """The language code is not configured."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown language: {code}")


class SourceUnavailableError(LoadError):
    """The backing word list file is missing or unreadable."""
    pass


class DefinitionUnavailableError(FlowError):
    """The definition service failed (network or malformed response)."""
    pass


class EmptyWordListError(FlowError):
    """A word was requested from an empty word list."""
    pass
