"""Best-effort definition lookups."""
from .base import AIProvider, DefinitionLookup
from .dictionary import FreeDictionaryLookup
from .generator import AIDefinitionLookup

__all__ = [
    "AIProvider",
    "DefinitionLookup",
    "FreeDictionaryLookup",
    "AIDefinitionLookup",
]
