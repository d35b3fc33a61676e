"""Thought signature resolution for decoded OpenRouter chunks.

Purpose:
    A thought signature is an opaque provider token that must be echoed back
    verbatim on the next request to keep reasoning continuity across a tool
    call round trip. Within one chunk it can live in several places; this
    module picks the single authoritative value for a delta or a tool call.

Precedence (first match wins):
    1. The node's own ``thought_signature``.
    2. ``extra_content.google.thought_signature`` on the node.
    3. Deltas only: the first entry of ``reasoning_details`` (wire order)
       yielding a signature, where an entry yields its ``signature`` field,
       or its ``data`` field when ``type == "reasoning.encrypted"``.

    "Set" means not ``None``; an empty string is a value. Chunk, choice and
    function level signature fields are never consulted.

Notes:
    Pure functions over frozen records; no I/O apart from optional debug
    logging in :func:`iter_signatures`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from ..base.logging import LogContext, get_logger, log_event
from ..config.defaults import ENCRYPTED_REASONING_TYPE
from .chunk import Chunk, Delta, ExtraContent, ReasoningDetail, ToolCall

SignatureNode = Union[Delta, ToolCall]

_logger = get_logger(__name__)


class SignatureSource(str, Enum):
    """Location a resolved signature was taken from."""

    DELTA = "delta"
    DELTA_EXTRA_CONTENT = "delta.extra_content"
    DELTA_REASONING_DETAILS = "delta.reasoning_details"
    TOOL_CALL = "tool_call"
    TOOL_CALL_EXTRA_CONTENT = "tool_call.extra_content"


@dataclass(frozen=True)
class ResolvedSignature:
    """A resolved signature together with the node it belongs to.

    Attributes:
        choice_index: Wire ``index`` of the choice, or its position when absent.
        tool_call_index: Position of the tool call within the delta, or
            ``None`` when the signature belongs to the delta itself.
        source: Location the value was taken from.
        value: The signature string.
    """

    choice_index: int
    tool_call_index: Optional[int]
    source: SignatureSource
    value: str


def reasoning_detail_signature(detail: ReasoningDetail) -> Optional[str]:
    """Return the signature carried by a single reasoning detail, if any."""
    if detail.signature is not None:
        return detail.signature
    if detail.type == ENCRYPTED_REASONING_TYPE:
        return detail.data
    return None


def _extra_content_signature(extra: Optional[ExtraContent]) -> Optional[str]:
    if extra is None or extra.google is None:
        return None
    return extra.google.thought_signature


def resolve_signature_with_source(node: SignatureNode) -> Optional[Tuple[str, SignatureSource]]:
    """Resolve the effective signature of ``node`` and report where it came from.

    Parameters:
        node: A decoded :class:`Delta` or :class:`ToolCall`.

    Returns:
        ``(value, source)`` or ``None`` when no candidate location is populated.

    Raises:
        TypeError: If ``node`` is neither a delta nor a tool call.
    """
    if isinstance(node, Delta):
        direct, nested = SignatureSource.DELTA, SignatureSource.DELTA_EXTRA_CONTENT
    elif isinstance(node, ToolCall):
        direct, nested = SignatureSource.TOOL_CALL, SignatureSource.TOOL_CALL_EXTRA_CONTENT
    else:
        raise TypeError(f"cannot resolve a signature for {type(node).__name__}; expected Delta or ToolCall")

    if node.thought_signature is not None:
        return node.thought_signature, direct
    extra_sig = _extra_content_signature(node.extra_content)
    if extra_sig is not None:
        return extra_sig, nested
    if isinstance(node, Delta):
        for detail in node.reasoning_details or ():
            sig = reasoning_detail_signature(detail)
            if sig is not None:
                return sig, SignatureSource.DELTA_REASONING_DETAILS
    return None


def resolve_signature(node: SignatureNode) -> Optional[str]:
    """Return the single effective signature of a delta or tool call, or ``None``."""
    resolved = resolve_signature_with_source(node)
    return resolved[0] if resolved is not None else None


def iter_signatures(chunk: Chunk) -> Iterator[ResolvedSignature]:
    """Yield every resolvable signature in ``chunk``.

    For each choice, the delta is visited first, then its tool calls in wire
    order. Nodes resolving to ``None`` are skipped.
    """
    ctx = LogContext(provider=chunk.provider, model=chunk.model, chunk_id=chunk.id)
    for position, choice in enumerate(chunk.choices):
        choice_index = choice.index if choice.index is not None else position
        nodes = [(None, choice.delta)]
        nodes.extend(enumerate(choice.delta.tool_calls or ()))
        for tool_call_index, node in nodes:
            resolved = resolve_signature_with_source(node)
            if resolved is None:
                continue
            value, source = resolved
            log_event(
                _logger,
                "signature.resolved",
                ctx,
                level=logging.DEBUG,
                choice_index=choice_index,
                tool_call_index=tool_call_index,
                source=source.value,
                length=len(value),
            )
            yield ResolvedSignature(choice_index, tool_call_index, source, value)


__all__ = [
    "SignatureNode",
    "SignatureSource",
    "ResolvedSignature",
    "reasoning_detail_signature",
    "resolve_signature",
    "resolve_signature_with_source",
    "iter_signatures",
]
