"""One candidate completion within a streaming chunk."""
from __future__ import annotations

from typing import Optional

from pydantic import StrictInt, StrictStr

from .delta import Delta
from .wire_model import WireModel


class Choice(WireModel):
    """A choice entry.

    ``finish_reason`` values (``"stop"``, ``"length"``, ``"tool_calls"``...)
    are provider defined and kept as opaque strings. The choice level
    ``thought_signature`` is exposed raw and is not resolved.
    """

    delta: Delta
    index: Optional[StrictInt] = None
    finish_reason: Optional[StrictStr] = None
    native_finish_reason: Optional[StrictStr] = None
    thought_signature: Optional[StrictStr] = None


__all__ = ["Choice"]
