"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``crux_chunks.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.malformed_payload import MalformedPayload

__all__ = ["ErrorCode", "ProviderError", "MalformedPayload"]
