"""Environment-driven settings.

Values are read on each call so a `.env` loaded by the entry point, or a
variable patched in a test, takes effect without re-importing.
"""

import logging
import os

log = logging.getLogger(__name__)

DEFAULT_SEGMENTS = 120
DEFAULT_LANG = "en"
SUPPORTED_LANGS = ("en", "ko")


class ConfigError(Exception):
    """An environment variable holds an unusable value."""


def default_segments() -> int:
    """Vertex count for terminator rings (DAYNIGHT_SEGMENTS, default 120)."""
    raw = os.environ.get("DAYNIGHT_SEGMENTS")
    if raw is None or not raw.strip():
        return DEFAULT_SEGMENTS
    try:
        segments = int(raw)
    except ValueError:
        raise ConfigError(f"DAYNIGHT_SEGMENTS must be an integer, got {raw!r}") from None
    if segments < 3:
        raise ConfigError(f"DAYNIGHT_SEGMENTS must be at least 3, got {segments}")
    return segments


def default_lang() -> str:
    """Label language (DAYNIGHT_LANG, default 'en')."""
    lang = os.environ.get("DAYNIGHT_LANG", DEFAULT_LANG).strip().lower() or DEFAULT_LANG
    if lang not in SUPPORTED_LANGS:
        log.warning("Unsupported DAYNIGHT_LANG %r, using %r", lang, DEFAULT_LANG)
        return DEFAULT_LANG
    return lang


def log_level() -> int:
    """Console log level for the CLI (LOG_LEVEL, default INFO)."""
    name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"LOG_LEVEL must be a logging level name, got {name!r}")
    return level
