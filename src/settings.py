"""Static configuration for clipguard.

Engine thresholds and logging live in config.json and the noise-word list
lives in stopwords.json, so both can be edited without touching Python.
"""

import json
import os

from dotenv import load_dotenv

from adapters.config_transport import noise_words_from_transport, overrides_from_transport

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# A .env file may point the app at another config or stopword list.
load_dotenv()

CONFIG_PATH = os.getenv("CLIPGUARD_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")
STOPWORDS_PATH = os.getenv("CLIPGUARD_STOPWORDS") or os.path.join(PROJECT_ROOT, "stopwords.json")


def _load_json_config() -> dict:
    """Load config.json (engine and logging sections)."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        loaded = json.load(handle)
    if not isinstance(loaded, dict):
        raise ValueError(f"{CONFIG_PATH}: config root must be an object")
    return loaded


def _load_stopwords() -> list[str]:
    """Load stopwords.json; a missing file means no noise filtering."""

    if not os.path.exists(STOPWORDS_PATH):
        return []

    with open(STOPWORDS_PATH, "r", encoding="utf-8") as handle:
        loaded = json.load(handle)
    if not isinstance(loaded, list):
        raise ValueError(f"{STOPWORDS_PATH}: stopword list must be an array")
    return noise_words_from_transport(loaded)


def load_engine_settings() -> tuple[dict, list[str]]:
    """Re-read both files and return (engine overrides, noise words)."""

    config = _load_json_config()
    return overrides_from_transport(config.get("engine", {})), _load_stopwords()


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Engine thresholds in core units (TTL converted from minutes to ms).
ENGINE_OVERRIDES = overrides_from_transport(_CONFIG.get("engine", {}))

# Words removed before fingerprinting.
NOISE_WORDS = _load_stopwords()

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
