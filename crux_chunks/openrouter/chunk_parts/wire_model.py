"""
Shared pydantic base for OpenRouter streaming chunk records.

Every record decoded from the wire is frozen, compares by value and ignores
fields it does not know, so payloads from newer schema revisions decode into
the same shapes as older ones. Attribute names are the wire names; the field
declarations on each subclass are the complete logical-to-wire mapping.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Frozen, extra-tolerant base for chunk records."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        """Return a JSON-ready dict with wire names, omitting unset fields.

        The result decodes back into an equal record, which lets callers echo
        a signature-bearing node verbatim in a follow-up request.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["WireModel"]
