"""Configuration loading."""

import copy
import os
from pathlib import Path
from typing import Optional

import yaml

from freestyle.core.models import Language


CONFIG_PATHS = [
    "config.yaml",
    "~/.config/freestyle/config.yaml",
]

DEFAULT_CONFIG = {
    "data": {
        "base_path": "data",
    },
    "languages": [
        {"code": "AZ", "label": "Azərbaycan", "file": "AZ.json"},
        {"code": "EN", "label": "English", "file": "EN.json", "live_definitions": True},
    ],
    "default_language": None,
    "session": {
        "duration": 5,
        "min_duration": 1,
        "max_duration": 60,
        "tick_ms": 50,
    },
    "lookup": {
        "provider": "dictionary",
        "base_url": "https://api.dictionaryapi.dev/api/v2/entries/en",
        "timeout": 5,
        "anthropic": {},
        "openai": {},
    },
    "logging": {
        "level": "INFO",
        "dir": "~/.cache/freestyle",
        "file": "freestyle.log",
    },
}

# Values left over from copying the example config
PLACEHOLDER_KEYS = ("your-anthropic-api-key-here", "your-openai-api-key-here")


def merge_config(loaded: Optional[dict]) -> dict:
    """Merge a loaded config over the defaults, one section at a time."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    for key, value in (loaded or {}).items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value
    return config


def load_config(config_path: Optional[str] = None) -> dict:
    """Load configuration from the first file found, else defaults."""
    paths_to_try = [config_path] + CONFIG_PATHS

    for path in paths_to_try:
        if not path:
            continue
        path = os.path.expanduser(path)
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                config = merge_config(yaml.safe_load(f))
            config["_path"] = path
            return config

    return merge_config(None)


def get_languages(config: dict) -> list[Language]:
    """Configured languages; an empty list means discover from the data dir."""
    return [Language.from_dict(item) for item in config.get("languages") or []]


def get_api_key(section: dict, env_var: str) -> Optional[str]:
    """API key from a config section, falling back to the environment."""
    key = section.get("api_key") or os.environ.get(env_var)
    if key in PLACEHOLDER_KEYS:
        return None
    return key


def get_data_dir(config: dict) -> Path:
    """Data directory, relative paths resolved against the config file."""
    base_path = Path(os.path.expanduser(config["data"].get("base_path", "data")))
    if not base_path.is_absolute() and config.get("_path"):
        base_path = Path(config["_path"]).parent / base_path
    return base_path
