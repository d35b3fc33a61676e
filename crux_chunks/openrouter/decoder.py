"""Decoder mapping one OpenRouter streaming payload to a :class:`Chunk`.

Purpose:
    Turn the JSON object of a single streaming event into frozen records.
    Decoding is permissive about presence and strict about type:

    - every field except ``choices[].delta.role`` is optional; absent and
      ``null`` both decode to ``None`` (``choices`` to an empty tuple);
    - unknown fields are ignored, which keeps older code working against
      newer payload revisions;
    - a present field with the wrong JSON type is rejected.

Failure modes:
    :class:`MalformedPayload` is the only exception raised. Pydantic's
    ``ValidationError`` is chained as ``__cause__`` and kept on ``raw``; the
    ``location`` attribute points at the first offending field.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Sequence, Union

from pydantic import ValidationError

from ..base.errors import MalformedPayload
from ..base.logging import LogContext, get_logger, log_event
from ..config.defaults import PROVIDER_NAME
from ..config.env import get_settings
from .chunk import Chunk

_logger = get_logger(__name__)


def format_location(loc: Sequence[Union[str, int]]) -> str:
    """Render a pydantic error ``loc`` tuple as a JSON-path style pointer.

    ``("choices", 0, "delta", "role")`` becomes ``"$.choices[0].delta.role"``.
    Union member tags pydantic inserts (e.g. ``"int"``) are not wire fields and
    are dropped by the caller before formatting.
    """
    path = "$"
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def _describe(exc: ValidationError) -> tuple[str, str]:
    """Return ``(location, message)`` for the first error of ``exc``."""
    first = exc.errors(include_url=False)[0]
    loc = [p for p in first.get("loc", ()) if not _is_union_tag(p)]
    location = format_location(loc)
    if first.get("type") == "missing":
        return location, f"required field missing at {location}"
    return location, f"{first.get('msg', 'invalid value')} at {location}"


_UNION_TAGS = frozenset(("int", "float", "str"))


def _is_union_tag(part: Union[str, int]) -> bool:
    # smart-union members show up in loc as their strict type names
    return isinstance(part, str) and part in _UNION_TAGS


def _fail(message: str, location: str, raw: Optional[Exception] = None) -> MalformedPayload:
    if get_settings().log_decode_errors:
        log_event(
            _logger,
            "chunk.decode_error",
            LogContext(provider=PROVIDER_NAME),
            level=logging.WARNING,
            location=location,
            error=message,
        )
    return MalformedPayload(message=message, location=location, raw=raw)


def decode(payload: Any) -> Chunk:
    """Decode one JSON object into a :class:`Chunk`.

    Parameters:
        payload: The parsed JSON value of one streaming event.

    Returns:
        The decoded chunk. Decoding the same payload twice yields equal records.

    Raises:
        MalformedPayload: If ``payload`` is not a JSON object, a present field
            has the wrong JSON type, or a choice lacks ``delta.role``.
    """
    if not isinstance(payload, Mapping):
        raise _fail(f"chunk must be a JSON object, got {type(payload).__name__}", "$")
    try:
        return Chunk.model_validate(dict(payload))
    except ValidationError as exc:
        location, message = _describe(exc)
        raise _fail(message, location, exc) from exc


def decode_json(text: Union[str, bytes, bytearray]) -> Chunk:
    """Parse UTF-8 JSON text of one streaming event and decode it.

    Raises:
        MalformedPayload: On invalid JSON or any :func:`decode` failure.
    """
    try:
        payload = json.loads(text)
    except (ValueError, TypeError) as exc:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        raise _fail(f"invalid JSON: {exc}", "$", exc) from exc
    return decode(payload)


__all__ = ["decode", "decode_json", "format_location"]
