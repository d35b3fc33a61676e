"""
Provider-namespaced side channel attached to deltas and tool calls.

Google models routed through OpenRouter place the thought signature under
``extra_content.google.thought_signature``. The same shape is used on both
nodes.
"""
from __future__ import annotations

from typing import Optional

from pydantic import StrictStr

from .wire_model import WireModel


class GoogleExtraContent(WireModel):
    """Google specific payload nested in ``extra_content``."""

    thought_signature: Optional[StrictStr] = None


class ExtraContent(WireModel):
    """Container for provider namespaced extras.

    Attributes:
        google: Google payload, when the upstream provider is Gemini.
    """

    google: Optional[GoogleExtraContent] = None


__all__ = ["GoogleExtraContent", "ExtraContent"]
