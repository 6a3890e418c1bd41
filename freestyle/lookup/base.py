"""Base classes for definition lookups and AI providers."""

from abc import ABC, abstractmethod
from typing import Optional


class DefinitionLookup(ABC):
    """Best-effort source of word definitions."""

    @abstractmethod
    def lookup(self, word: str) -> Optional[str]:
        """
        Look up a short definition for a word.

        Args:
            word: The exact word as shown to the user

        Returns:
            The definition, or None if the service has none

        Raises:
            DefinitionUnavailableError: If the service could not be reached
                or answered with something unusable
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the lookup is configured and usable."""
        pass


class AIProvider(ABC):
    """Abstract base class for AI providers."""

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 200,
    ) -> str:
        """
        Generate text from a prompt.

        Args:
            prompt: The user prompt
            system: Optional system prompt
            max_tokens: Maximum tokens in response

        Returns:
            Generated text
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is configured and available."""
        pass
