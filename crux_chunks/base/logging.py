"""Base structured logging utilities for the chunk decoder.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across modules.
- One shared base logger (``crux_chunks``) owns the console handler; module
  loggers are children that propagate to it, so nothing is emitted twice.

Environment:
    ``CHUNKS_LOG_LEVEL`` overrides the level and ``CHUNKS_LOG_JSON`` selects the
    formatter (see ``crux_chunks.config.env``).
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from ..config.defaults import LOGGER_NAME
from ..config.env import get_settings, parse_level
from .log_support import JsonFormatter, LogContext


_BASE_LOGGER_ATTR = "_chunks_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_chunks_console_handler"
_FILE_HANDLER_ATTR = "_chunks_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


class _StderrHandler(logging.StreamHandler):
    """Console handler that always writes to the current ``sys.stderr``.

    Resolving the stream at emit time honors stream swaps (pytest capture,
    daemonized hosts) without touching the handler after setup.
    """

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def _console_handler(json_mode: bool) -> logging.Handler:
    handler = _StderrHandler()
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: Optional[bool], level: int) -> logging.Logger:
    """Initialize (once) and return the shared base logger.

    After the first call the level only changes when ``CHUNKS_LOG_LEVEL`` is
    set, and the console formatter only when ``json_mode`` is given, so levels
    applied through ``configure_logger`` stick.
    """
    logger = logging.getLogger(LOGGER_NAME)
    settings = get_settings()

    if not getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(settings.log_level if settings.log_level is not None else level)
        logger.handlers[:] = [_console_handler(settings.log_json if json_mode is None else json_mode)]
        logger.propagate = False
        setattr(logger, _BASE_LOGGER_ATTR, True)
        return logger

    if settings.log_level is not None and logger.level != settings.log_level:
        logger.setLevel(settings.log_level)
    if json_mode is not None:
        for existing in logger.handlers:
            if getattr(existing, _CONSOLE_HANDLER_ATTR, False) and json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
    return logger


def get_logger(
    name: str = LOGGER_NAME,
    json_mode: Optional[bool] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Return the base logger or a propagating child of it.

    Intended for setup time (module import, host configuration); hot paths
    keep the logger they obtained once.

    Parameters:
        name: Logger name. Only children of ``crux_chunks`` (e.g.
            ``crux_chunks.openrouter.decoder``) reach the base handler.
        json_mode: Console formatter selection; ``None`` keeps the current
            formatter (``CHUNKS_LOG_JSON`` decides on first setup).
        level: Level applied on first setup when ``CHUNKS_LOG_LEVEL`` is unset.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved. Handlers do not filter,
        so the logger level alone gates output.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (replacing a managed handler pointing elsewhere). When
        ``None``, any previously attached managed file handler is removed.
    json_mode: bool
        Formatter used for the file handler.
    logger_name: str
        Name of the logger to configure.

    Returns
    -------
    logging.Logger
        The configured logger instance.
    """
    logger = get_logger(logger_name)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            with contextlib.suppress(OSError):
                h.close()

    if existing is None:
        # 10MB x 5 backups
        existing = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(existing, _FILE_HANDLER_ATTR, True)
        logger.addHandler(existing)
    existing.setFormatter(_make_formatter(json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON message.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (should be JSON formatted by ``get_logger``).
    event: str
        Event name (e.g. ``chunk.decode_error``).
    ctx: LogContext | None
        Provider/model context; merged shallowly.
    level: int
        Logging level for the record; the payload is not built when the
        logger would drop it.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``; otherwise drop them.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
