"""
Error object OpenRouter attaches to a chunk when a stream fails mid-flight.

Once the HTTP status has been sent, upstream failures can only be reported
in-band; the chunk then carries ``error`` and usually a choice whose
``finish_reason`` is ``"error"``. Decoding it is not a decode failure.
"""
from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import StrictInt, StrictStr, field_serializer, field_validator

from .wire_model import WireModel


def _freeze(value: Any) -> Any:
    """Return a read-only deep copy: mappings become proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


class ChunkError(WireModel):
    """In-band stream error.

    Attributes:
        code: Numeric HTTP-like code or provider string code.
        message: Human readable description.
        metadata: Provider supplied diagnostics, passed through as a read-only
            mapping (nested objects are read-only too, arrays become tuples).
    """

    code: Optional[Union[StrictInt, StrictStr]] = None
    message: Optional[StrictStr] = None
    metadata: Optional[Mapping[str, Any]] = None

    @field_validator("metadata", mode="after")
    @classmethod
    def _freeze_metadata(cls, value: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
        return None if value is None else _freeze(value)

    @field_serializer("metadata")
    def _serialize_metadata(self, value: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        return None if value is None else _thaw(value)

    def __hash__(self) -> int:
        # metadata proxies are unhashable; hash their canonical JSON form
        metadata = None if self.metadata is None else json.dumps(_thaw(self.metadata), sort_keys=True, default=str)
        return hash((self.code, self.message, metadata))


__all__ = ["ChunkError"]
