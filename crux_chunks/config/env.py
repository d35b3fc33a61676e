"""crux_chunks.config.env
======================

Environment driven settings for the chunk decoder.

Purpose
-------
- Provide a single source of truth for the environment variables the package
  honors and how their values are interpreted.
- Keep lookups cheap and side-effect free: settings are read on every call so
  tests (and long-running hosts) can change the environment at runtime.

Variables
---------
``CHUNKS_LOG_LEVEL``
    Logging level name for the shared ``crux_chunks`` logger (e.g. ``DEBUG``).
``CHUNKS_LOG_JSON``
    Emit JSON lines (default) or plain text when set to a false value.
``CHUNKS_LOG_DECODE_ERRORS``
    Emit a ``chunk.decode_error`` event before raising ``MalformedPayload``
    (default on).

Failure Modes
-------------
Unknown or malformed values never raise; they fall back to the defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .defaults import LOG_DECODE_ERRORS_ENV, LOG_JSON_ENV, LOG_LEVEL_ENV

_TRUE_VALUES = frozenset(("1", "true", "yes", "on"))
_FALSE_VALUES = frozenset(("0", "false", "no", "off"))

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Interpret an environment string as a boolean.

    Accepts ``1/true/yes/on`` and ``0/false/no/off`` case-insensitively and
    returns ``default`` for anything else, including ``None``.
    """
    if value is None:
        return default
    v = value.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    return default


def parse_level(value: Optional[str], default: Optional[int] = None) -> Optional[int]:
    """Parse a logging level name (case-insensitive) or numeric string."""
    if not value:
        return default
    v = value.strip()
    if v.isdigit():
        return int(v)
    return _LEVELS.get(v.upper(), default)


@dataclass(frozen=True)
class ChunkSettings:
    """Snapshot of the environment driven settings.

    Attributes:
        log_level: Explicit level override, or ``None`` to keep caller defaults.
        log_json: Whether console output uses the JSON formatter.
        log_decode_errors: Whether decode failures emit a log event.
    """

    log_level: Optional[int] = None
    log_json: bool = True
    log_decode_errors: bool = True


def get_settings() -> ChunkSettings:
    """Read :class:`ChunkSettings` from the current process environment."""
    return ChunkSettings(
        log_level=parse_level(os.getenv(LOG_LEVEL_ENV)),
        log_json=parse_bool(os.getenv(LOG_JSON_ENV), True),
        log_decode_errors=parse_bool(os.getenv(LOG_DECODE_ERRORS_ENV), True),
    )


__all__ = ["ChunkSettings", "get_settings", "parse_bool", "parse_level"]
