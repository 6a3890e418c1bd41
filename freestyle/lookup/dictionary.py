"""Definitions from the Free Dictionary API (dictionaryapi.dev)."""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from freestyle.core.errors import DefinitionUnavailableError
from freestyle.lookup.base import DefinitionLookup


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


def extract_definition(data) -> Optional[str]:
    """Get the first definition of the first meaning of the first entry."""
    try:
        definition = data[0]["meanings"][0]["definitions"][0]["definition"]
    except (IndexError, KeyError, TypeError):
        return None
    if not isinstance(definition, str) or not definition.strip():
        return None
    return definition.strip()


class FreeDictionaryLookup(DefinitionLookup):
    """Looks words up over HTTP, one request per word."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def is_available(self) -> bool:
        return bool(self.base_url)

    def lookup(self, word: str) -> Optional[str]:
        """Fetch a definition; a 404 means the word is unknown."""
        url = f"{self.base_url}/{quote(word.strip(), safe='')}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DefinitionUnavailableError(f"Request for '{word}' failed: {e}") from e

        if response.status_code == 404:
            logger.debug("No dictionary entry for %s", word)
            return None

        try:
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            raise DefinitionUnavailableError(f"Dictionary error for '{word}': {e}") from e
        except ValueError as e:
            raise DefinitionUnavailableError(f"Malformed response for '{word}'") from e

        return extract_definition(data)
