"""Shared foundations: error taxonomy and structured logging."""

from .errors import ErrorCode, MalformedPayload, ProviderError

__all__ = ["ErrorCode", "MalformedPayload", "ProviderError"]
