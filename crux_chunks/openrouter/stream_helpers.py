"""Server-sent events helpers for OpenRouter chunk streams.

Purpose:
    Decode a single SSE line as delivered by a line iterator such as
    ``httpx.Response.iter_lines()``. Splitting the byte stream into lines and
    buffering partial lines is the transport's job.

Line handling:
    - blank lines and SSE comments (``: OPENROUTER PROCESSING``) yield ``None``;
    - an optional ``data:`` prefix is stripped;
    - the ``[DONE]`` sentinel yields ``None``;
    - anything else must be one JSON object and is passed to ``decode_json``.

Failure modes:
    Unlike the lenient text translators of the provider adapters, malformed
    data lines raise :class:`MalformedPayload`; callers decide whether to skip.
"""

from __future__ import annotations

from typing import Optional, Union

from ..base.errors import MalformedPayload
from ..config.defaults import SSE_COMMENT_PREFIX, SSE_DATA_PREFIX, SSE_DONE_SENTINEL
from .chunk import Chunk
from .decoder import decode_json


def strip_data_prefix(line: Union[str, bytes]) -> Optional[str]:
    """Return the payload text of an SSE line, or ``None`` when it carries none.

    Parameters:
        line: Raw line; ``bytes`` are decoded as UTF-8.

    Returns:
        The text after ``data:`` (whitespace trimmed), or ``None`` for blank
        lines, comments and the ``[DONE]`` sentinel.

    Raises:
        MalformedPayload: If ``line`` is bytes that are not valid UTF-8.
    """
    if isinstance(line, (bytes, bytearray)):
        try:
            text = line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedPayload(message=f"line is not valid UTF-8: {exc}", location="$", raw=exc) from exc
    else:
        text = line
    text = text.strip()
    if not text or text.startswith(SSE_COMMENT_PREFIX):
        return None
    if text.startswith(SSE_DATA_PREFIX):
        text = text[len(SSE_DATA_PREFIX):].strip()
    if not text or text == SSE_DONE_SENTINEL:
        return None
    return text


def decode_line(line: Union[str, bytes]) -> Optional[Chunk]:
    """Decode one SSE line into a :class:`Chunk`, or ``None`` for non-data lines.

    Raises:
        MalformedPayload: When the data payload is not a valid chunk object.
    """
    payload = strip_data_prefix(line)
    if payload is None:
        return None
    return decode_json(payload)


__all__ = ["strip_data_prefix", "decode_line"]
