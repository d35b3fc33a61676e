"""crux_chunks package

Decoder for OpenRouter streaming chat-completion chunks and resolver for the
thought signatures that must be replayed across tool-calling turns.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`MalformedPayload`, :class:`ProviderError`, :class:`ErrorCode`
    - Decoding: :func:`decode`, :func:`decode_json`, :func:`decode_line`
    - Resolution: :func:`resolve_signature`, :func:`iter_signatures`
    - Records: :class:`Chunk`, :class:`Choice`, :class:`Delta`, :class:`ToolCall`

Example:
    >>> chunk = decode({"choices": [{"delta": {"role": "assistant",
    ...     "thought_signature": "sig"}}]})
    >>> resolve_signature(chunk.choices[0].delta)
    'sig'
"""

from .base.errors import ErrorCode, MalformedPayload, ProviderError
from .openrouter import (
    Chunk,
    Choice,
    Delta,
    ReasoningDetail,
    ToolCall,
    decode,
    decode_json,
    decode_line,
    iter_signatures,
    resolve_signature,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorCode",
    "MalformedPayload",
    "ProviderError",
    "Chunk",
    "Choice",
    "Delta",
    "ReasoningDetail",
    "ToolCall",
    "decode",
    "decode_json",
    "decode_line",
    "iter_signatures",
    "resolve_signature",
]
