"""Function name/arguments fragment of a streamed tool call."""
from __future__ import annotations

from typing import Optional

from pydantic import StrictStr

from .wire_model import WireModel


class Function(WireModel):
    """Partial function call.

    ``arguments`` streams as incremental JSON text and is never parsed here.
    ``thought_signature`` is exposed raw and does not take part in signature
    resolution.
    """

    name: Optional[StrictStr] = None
    arguments: Optional[StrictStr] = None
    thought_signature: Optional[StrictStr] = None


__all__ = ["Function"]
