"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `crux_chunks.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .malformed_payload import MalformedPayload

__all__ = ["ErrorCode", "ProviderError", "MalformedPayload"]
