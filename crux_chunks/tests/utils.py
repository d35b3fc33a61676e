"""Shared payload builders for chunk decoder and resolver tests."""
from __future__ import annotations

from typing import Any, Dict


def delta_payload(**delta_fields: Any) -> Dict[str, Any]:
    """Build a single-choice payload whose delta carries ``delta_fields``.

    ``role`` defaults to ``"assistant"`` and can be overridden.
    """
    delta: Dict[str, Any] = {"role": "assistant"}
    delta.update(delta_fields)
    return {"choices": [{"delta": delta}]}


def tool_call_payload(**tool_call_fields: Any) -> Dict[str, Any]:
    """Build a single-choice payload whose delta carries one tool call."""
    return delta_payload(tool_calls=[dict(tool_call_fields)])
