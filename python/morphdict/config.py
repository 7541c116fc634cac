"""Configuration loader for morphdict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "language": "es",
    "data_dir": "data",
    "output_dir": ".",
    "format": "python",
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/morphdict -> root
        Path.cwd() / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {
        "defaults": FALLBACK_DEFAULTS,
        "language_files": {},
    }
    return _config


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


def get_language_files(language: str) -> list[str] | None:
    """Get configured input file names for a language, if any."""
    cfg = load()
    return cfg.get("language_files", {}).get(language)


# Convenience accessors
def default_language() -> str:
    return get_default("language", FALLBACK_DEFAULTS["language"])


def default_data_dir() -> str:
    return get_default("data_dir", FALLBACK_DEFAULTS["data_dir"])


def default_output_dir() -> str:
    return get_default("output_dir", FALLBACK_DEFAULTS["output_dir"])


def default_format() -> str:
    return get_default("format", FALLBACK_DEFAULTS["format"])
