"""Shared payload fixtures for the chunk decoder test suite.

Payloads mirror real OpenRouter ``chat.completion.chunk`` events: an early
shape (role/content only), a Gemini tool-call shape carrying signatures in
several locations, and the terminal usage-only event.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterator

import pytest

from crux_chunks.base.logging import configure_logger, get_logger


_GEMINI_TOOL_CALL: Dict[str, Any] = {
    "id": "gen-1734000000-abc",
    "object": "chat.completion.chunk",
    "created": 1734000000,
    "model": "google/gemini-3-pro-preview",
    "provider": "Google",
    "choices": [
        {
            "index": 0,
            "delta": {
                "role": "assistant",
                "content": None,
                "reasoning": "Checking the weather tool.",
                "reasoning_details": [
                    {
                        "type": "reasoning.text",
                        "text": "Checking the weather tool.",
                        "format": "google-gemini-v1",
                        "index": 0,
                    },
                    {
                        "type": "reasoning.encrypted",
                        "data": "ENC-DETAIL",
                        "id": "rd-1",
                        "format": "google-gemini-v1",
                        "index": 1,
                    },
                ],
                "tool_calls": [
                    {
                        "index": 0,
                        "id": "call_1",
                        "type": "function",
                        "function": {"name": "get_weather", "arguments": "{\"city\": \"Oslo\"}"},
                        "extra_content": {"google": {"thought_signature": "TC-EXTRA"}},
                    }
                ],
            },
            "finish_reason": None,
            "native_finish_reason": None,
        }
    ],
}


@pytest.fixture()
def plain_payload() -> Dict[str, Any]:
    """Oldest payload shape: no signatures, no reasoning details."""

    return {
        "id": "gen-1",
        "model": "openai/gpt-4o-mini",
        "provider": "OpenAI",
        "choices": [{"delta": {"role": "assistant", "content": "Hel"}, "finish_reason": None}],
    }


@pytest.fixture()
def gemini_tool_call_payload() -> Dict[str, Any]:
    """Gemini tool call chunk with signatures in reasoning details and extra content."""

    return copy.deepcopy(_GEMINI_TOOL_CALL)


@pytest.fixture()
def usage_only_payload() -> Dict[str, Any]:
    """Terminal event: empty choices and aggregate usage."""

    return {
        "id": "gen-1",
        "model": "openai/gpt-4o-mini",
        "provider": "OpenAI",
        "choices": [],
        "usage": {
            "prompt_tokens": 12,
            "completion_tokens": 30,
            "total_tokens": 42,
            "cost": 0.00021,
            "prompt_tokens_details": {"cached_tokens": 0},
            "completion_tokens_details": {"reasoning_tokens": 18},
        },
    }



@pytest.fixture(autouse=True)
def reset_chunk_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Restore the shared ``crux_chunks`` logger to JSON output at INFO.

    Levels applied through ``configure_logger`` persist across calls, so each
    test starts from (and leaves behind) the same baseline.
    """

    def _reset() -> None:
        configure_logger(file_path=None)
        get_logger(json_mode=True).setLevel(logging.INFO)

    monkeypatch.delenv("CHUNKS_LOG_LEVEL", raising=False)
    _reset()
    yield
    _reset()
