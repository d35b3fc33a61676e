"""Streamed tool call fragment carried by a delta."""
from __future__ import annotations

from typing import Optional

from pydantic import StrictInt, StrictStr

from .extra_content import ExtraContent
from .function import Function
from .wire_model import WireModel


class ToolCall(WireModel):
    """Partial or complete function call fragment.

    Attributes:
        index: Position used by stream accumulators to merge fragments.
        id: Tool call identifier (usually only on the first fragment).
        type: Tool type, ``"function"`` in practice.
        function: Name/arguments fragment.
        thought_signature: Tool-call level signature.
        extra_content: Provider namespaced extras.
    """

    index: Optional[StrictInt] = None
    id: Optional[StrictStr] = None
    type: Optional[StrictStr] = None
    function: Optional[Function] = None
    thought_signature: Optional[StrictStr] = None
    extra_content: Optional[ExtraContent] = None

    @property
    def effective_signature(self) -> Optional[str]:
        """Signature to persist for this tool call (see ``resolve_signature``)."""
        from ..signatures import resolve_signature

        return resolve_signature(self)


__all__ = ["ToolCall"]
