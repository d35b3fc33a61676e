"""
OpenRouter streaming chunk records public surface.

This module re-exports the one-class-per-file implementations under
``crux_chunks.openrouter.chunk_parts`` to keep a single stable import path.
"""

from .chunk_parts import (
    Chunk,
    ChunkError,
    Choice,
    CompletionTokensDetails,
    Delta,
    ExtraContent,
    Function,
    GoogleExtraContent,
    PromptTokensDetails,
    ReasoningDetail,
    ToolCall,
    Usage,
    WireModel,
)

__all__ = [
    "Chunk",
    "ChunkError",
    "Choice",
    "CompletionTokensDetails",
    "Delta",
    "ExtraContent",
    "Function",
    "GoogleExtraContent",
    "PromptTokensDetails",
    "ReasoningDetail",
    "ToolCall",
    "Usage",
    "WireModel",
]
