"""
Structured reasoning-trace fragment carried by a delta.

Known ``type`` tags include ``reasoning.text`` (plaintext ``text`` and an
optional ``signature``), ``reasoning.summary`` (``summary``) and
``reasoning.encrypted`` (opaque ``data``). The tag is kept as a free-form
string; new tags decode without changes here.
"""
from __future__ import annotations

from typing import Optional

from pydantic import StrictInt, StrictStr

from .wire_model import WireModel


class ReasoningDetail(WireModel):
    """One entry of ``delta.reasoning_details``.

    Attributes:
        type: Free-form type tag.
        text: Plaintext thinking text.
        summary: Plaintext reasoning summary.
        signature: Legacy signature field.
        data: Opaque payload; the signature carrier for encrypted details.
        id: Provider assigned identifier.
        format: Provider format tag (e.g. ``"google-gemini-v1"``).
        index: Sequence index as sent by the provider.
    """

    type: Optional[StrictStr] = None
    text: Optional[StrictStr] = None
    summary: Optional[StrictStr] = None
    signature: Optional[StrictStr] = None
    data: Optional[StrictStr] = None
    id: Optional[StrictStr] = None
    format: Optional[StrictStr] = None
    index: Optional[StrictInt] = None


__all__ = ["ReasoningDetail"]
