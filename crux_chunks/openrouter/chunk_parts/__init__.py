"""Chunk parts package public surface.

Re-exports the one-class-per-file records so callers can import from
`crux_chunks.openrouter.chunk_parts`; `crux_chunks.openrouter.chunk` remains
the primary stable import path.
"""

from .wire_model import WireModel
from .extra_content import ExtraContent, GoogleExtraContent
from .reasoning_detail import ReasoningDetail
from .function import Function
from .tool_call import ToolCall
from .delta import Delta
from .choice import Choice
from .token_details import CompletionTokensDetails, PromptTokensDetails
from .usage import Usage
from .chunk_error import ChunkError
from .chunk import Chunk

__all__ = [
    "WireModel",
    "ExtraContent",
    "GoogleExtraContent",
    "ReasoningDetail",
    "Function",
    "ToolCall",
    "Delta",
    "Choice",
    "CompletionTokensDetails",
    "PromptTokensDetails",
    "Usage",
    "ChunkError",
    "Chunk",
]
