"""
Top-level record for one OpenRouter streaming event.

Purpose
-------
Mirror a ``chat.completion.chunk`` payload as a frozen pydantic record. The
shape is the union of every revision seen on the wire: all fields except
``choices[].delta.role`` are optional and unknown fields are ignored, so
payloads lacking newer fields (``extra_content``, ``reasoning_details``...)
decode into the same type with those fields unset.

Signature fields
----------------
Thought signatures can appear on the chunk, on a choice, on a delta, on a
tool call, on a function, inside ``extra_content.google`` and inside
``reasoning_details``. Only delta and tool-call nodes are resolved (see
``crux_chunks.openrouter.signatures``); the chunk and choice level fields are
exposed as decoded.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import StrictInt, StrictStr, field_validator

from .choice import Choice
from .chunk_error import ChunkError
from .usage import Usage
from .wire_model import WireModel


class Chunk(WireModel):
    """One decoded streaming event.

    Attributes:
        choices: Completion choices. Empty on the final usage-only chunk.
        id: Generation identifier shared by all chunks of a stream.
        object: Object tag (``"chat.completion.chunk"``).
        created: Unix timestamp of the generation.
        model: Model that served the request.
        provider: Upstream provider chosen by the router.
        usage: Aggregate usage; set on the last chunk only.
        thought_signature: Chunk level signature (raw, unresolved).
        error: In-band error reported after the stream started.
    """

    choices: Tuple[Choice, ...] = ()
    id: Optional[StrictStr] = None
    object: Optional[StrictStr] = None
    created: Optional[StrictInt] = None
    model: Optional[StrictStr] = None
    provider: Optional[StrictStr] = None
    usage: Optional[Usage] = None
    thought_signature: Optional[StrictStr] = None
    error: Optional[ChunkError] = None

    @field_validator("choices", mode="before")
    @classmethod
    def _null_choices(cls, value: Any) -> Any:
        # null and absent are the same thing on the wire
        return () if value is None else value

    @property
    def is_usage_only(self) -> bool:
        """True for the terminal chunk carrying usage and no choices."""
        return not self.choices and self.usage is not None


__all__ = ["Chunk"]
