"""Word list files: plain text, JSON and YAML."""

import json
import logging
from pathlib import Path
from typing import Callable

import yaml

from freestyle.core.errors import SourceUnavailableError
from freestyle.core.models import Language, WordEntry


logger = logging.getLogger(__name__)

WORD_LIST_SUFFIXES = (".json", ".yaml", ".yml", ".txt")


def parse_text(content: str) -> list[WordEntry]:
    """Parse a newline-delimited word list, one word per line."""
    return [
        WordEntry(text=line.strip())
        for line in content.splitlines()
        if line.strip()
    ]


def parse_records(data) -> list[WordEntry]:
    """Parse a decoded list of records or plain strings.

    Records are mappings with a ``word`` key and an optional
    ``description``. Blank words are dropped, order is kept.
    """
    if not isinstance(data, list):
        raise SourceUnavailableError(
            f"Expected a list of words, got {type(data).__name__}"
        )

    entries = []
    for item in data:
        if isinstance(item, str):
            text, description = item, None
        elif isinstance(item, dict):
            text = item.get("word")
            description = item.get("description")
        else:
            raise SourceUnavailableError(f"Unsupported word record: {item!r}")

        if not isinstance(text, str) or not text.strip():
            continue
        if description is not None:
            description = str(description).strip() or None
        entries.append(WordEntry(text=text.strip(), description=description))
    return entries


class WordListSource:
    """Reads word lists from a data directory.

    The parser is chosen by file suffix; unknown suffixes are read as
    plain text.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self._parsers: dict[str, Callable[[str], list[WordEntry]]] = {
            ".json": lambda content: parse_records(json.loads(content)),
            ".yaml": lambda content: parse_records(yaml.safe_load(content)),
            ".yml": lambda content: parse_records(yaml.safe_load(content)),
            ".txt": parse_text,
        }

    def _get_path(self, filename: str) -> Path:
        """Get file path for a word list."""
        return self.directory / filename

    def read(self, filename: str) -> list[WordEntry]:
        """Read and parse a word list file.

        Raises:
            SourceUnavailableError: If the file is missing or malformed
        """
        path = self._get_path(filename)
        if not path.is_file():
            raise SourceUnavailableError(f"Word list not found: {path}")

        parser = self._parsers.get(path.suffix.lower(), parse_text)
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
            entries = parser(content)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(f"Could not read {path}: {e}") from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SourceUnavailableError(f"Could not parse {path}: {e}") from e

        logger.debug("Parsed %d entries from %s", len(entries), path)
        return entries

    def discover(self) -> list[Language]:
        """List word list files in the directory as languages.

        When several files share a stem, the first suffix in
        WORD_LIST_SUFFIXES wins.
        """
        if not self.directory.is_dir():
            return []

        found: dict[str, Language] = {}
        for suffix in WORD_LIST_SUFFIXES:
            for path in sorted(self.directory.glob(f"*{suffix}")):
                code = path.stem.upper()
                if code not in found:
                    found[code] = Language(code=code, label=path.stem, file=path.name)
        return sorted(found.values(), key=lambda lang: lang.code)
