"""
Normalized error codes (taxonomy).

Defines the `ErrorCode` enumeration shared by the decoder and its callers.
Values are lowercase snake_case and are considered a stable public contract
for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    VALIDATION = "validation"
    INTERNAL = "internal"


__all__ = ["ErrorCode"]
