"""OpenRouter streaming chunk decoding and thought signature resolution."""

from .chunk import (
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
)
from .decoder import decode, decode_json
from .signatures import (
    ResolvedSignature,
    SignatureSource,
    iter_signatures,
    reasoning_detail_signature,
    resolve_signature,
    resolve_signature_with_source,
)
from .stream_helpers import decode_line

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
    "decode",
    "decode_json",
    "decode_line",
    "ResolvedSignature",
    "SignatureSource",
    "iter_signatures",
    "reasoning_detail_signature",
    "resolve_signature",
    "resolve_signature_with_source",
]
