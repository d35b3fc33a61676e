"""Token usage breakdowns nested under ``usage``."""
from __future__ import annotations

from typing import Optional

from pydantic import StrictInt

from .wire_model import WireModel


class PromptTokensDetails(WireModel):
    cached_tokens: Optional[StrictInt] = None


class CompletionTokensDetails(WireModel):
    reasoning_tokens: Optional[StrictInt] = None


__all__ = ["PromptTokensDetails", "CompletionTokensDetails"]
