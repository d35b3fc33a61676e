"""Incremental content for one choice of a streaming chunk."""
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import StrictStr

from .extra_content import ExtraContent
from .reasoning_detail import ReasoningDetail
from .tool_call import ToolCall
from .wire_model import WireModel


class Delta(WireModel):
    """Delta payload of a choice.

    Attributes:
        role: Message role. Required on the wire; absent or null is malformed.
        content: Output text fragment. For reasoning models these arrive after
            ``reasoning`` has finished.
        reasoning: Reasoning text fragment.
        tool_calls: Tool call fragments in wire order.
        thought_signature: Delta level signature.
        extra_content: Provider namespaced extras.
        reasoning_details: Structured reasoning fragments in wire order.
    """

    role: StrictStr
    content: Optional[StrictStr] = None
    reasoning: Optional[StrictStr] = None
    tool_calls: Optional[Tuple[ToolCall, ...]] = None
    thought_signature: Optional[StrictStr] = None
    extra_content: Optional[ExtraContent] = None
    reasoning_details: Optional[Tuple[ReasoningDetail, ...]] = None

    @property
    def effective_signature(self) -> Optional[str]:
        """Signature to persist for this delta (see ``resolve_signature``)."""
        from ..signatures import resolve_signature

        return resolve_signature(self)


__all__ = ["Delta"]
