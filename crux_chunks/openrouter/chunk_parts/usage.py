"""
Aggregate token usage reported on the final chunk of a stream.

Counts must be JSON integers; ``cost`` is any JSON number (credits).
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import StrictFloat, StrictInt

from .token_details import CompletionTokensDetails, PromptTokensDetails
from .wire_model import WireModel


class Usage(WireModel):
    """Token usage statistics for the entire request."""

    prompt_tokens: Optional[StrictInt] = None
    completion_tokens: Optional[StrictInt] = None
    total_tokens: Optional[StrictInt] = None
    cost: Optional[Union[StrictInt, StrictFloat]] = None
    prompt_tokens_details: Optional[PromptTokensDetails] = None
    completion_tokens_details: Optional[CompletionTokensDetails] = None


__all__ = ["Usage"]
