"""
Decode failure raised for chunk payloads that cannot be mapped to records.

A payload is malformed when the top-level value is not a JSON object, when a
present field carries the wrong JSON type, or when a required leaf (a delta's
``role``) is missing. Absence of any other field is never an error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class MalformedPayload(ProviderError):
    """Structured decode error for a single streaming chunk.

    Attributes:
        location: JSON-path style pointer to the offending field
            (``"$"`` for the payload itself, e.g. ``"$.choices[0].delta.role"``).

    Notes:
        Malformed payloads are never retryable; the same bytes fail the same way.
    """

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "malformed payload"
    provider: str = "openrouter"
    location: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        base = super().__str__()
        return f"{base} (at {self.location})" if self.location else base


__all__ = ["MalformedPayload"]
