"""Word definitions generated by an AI provider."""

import logging
from typing import Optional

from freestyle.core.errors import DefinitionUnavailableError
from freestyle.lookup.base import AIProvider, DefinitionLookup


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a dictionary for people practising freestyle speaking.
Answer with one short, plain definition sentence and nothing else.
Write the definition in the same language as the word."""

UNKNOWN_MARKER = "UNKNOWN"


class AIDefinitionLookup(DefinitionLookup):
    """Asks an AI provider for a one-sentence definition."""

    def __init__(self, provider: AIProvider, language: str = "English"):
        self.provider = provider
        self.language = language

    def is_available(self) -> bool:
        return self.provider.is_available()

    def build_prompt(self, word: str) -> str:
        return (
            f"Define this {self.language} word or phrase in one sentence: {word}\n"
            f"If it is not a real word, reply with {UNKNOWN_MARKER}."
        )

    def lookup(self, word: str) -> Optional[str]:
        try:
            response = self.provider.generate(
                self.build_prompt(word),
                system=SYSTEM_PROMPT,
                max_tokens=100,
            )
        except Exception as e:
            raise DefinitionUnavailableError(f"AI lookup for '{word}' failed: {e}") from e

        lines = (response or "").strip().splitlines()
        definition = lines[0].strip().strip('"').strip() if lines else ""
        if not definition or definition.upper().startswith(UNKNOWN_MARKER):
            logger.debug("AI has no definition for %s", word)
            return None
        return definition
