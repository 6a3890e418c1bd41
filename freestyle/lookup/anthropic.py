"""Anthropic Claude provider for definitions."""

import os
from typing import Optional

from freestyle.lookup.base import AIProvider


DEFAULT_MODEL = "claude-3-haiku-20240307"


class AnthropicProvider(AIProvider):
    """Anthropic Messages API provider."""

    def __init__(self, api_key: Optional[str] = None, model: str = DEFAULT_MODEL):
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self.model = model
        self._client = None

    def _get_client(self):
        """Lazy-load the Anthropic client."""
        if self._client is None:
            try:
                import anthropic
            except ImportError:
                raise ImportError(
                    "anthropic package not installed. "
                    "Install with: pip install 'freestyle-flow[ai]'"
                )
            self._client = anthropic.Anthropic(api_key=self.api_key)
        return self._client

    def is_available(self) -> bool:
        return bool(self.api_key)

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 200,
    ) -> str:
        if not self.is_available():
            raise ValueError("Anthropic API key not configured")

        kwargs = {
            "model": self.model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        response = self._get_client().messages.create(**kwargs)
        return response.content[0].text
