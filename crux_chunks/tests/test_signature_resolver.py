"""Tests for thought signature resolution precedence.

Precedence per node: own ``thought_signature`` > ``extra_content.google`` >
(deltas only) first reasoning detail yielding a signature.
"""

from __future__ import annotations

import json

import pytest

from crux_chunks.base.errors import MalformedPayload
from crux_chunks.base.logging import configure_logger, get_logger
from crux_chunks.openrouter import (
    ReasoningDetail,
    SignatureSource,
    decode,
    iter_signatures,
    reasoning_detail_signature,
    resolve_signature,
    resolve_signature_with_source,
)
from crux_chunks.tests.utils import delta_payload, tool_call_payload


def _delta(**fields):
    return decode(delta_payload(**fields)).choices[0].delta


def _tool_call(**fields):
    return decode(tool_call_payload(**fields)).choices[0].delta.tool_calls[0]


def _google(sig):
    return {"google": {"thought_signature": sig}}


def test_no_signature_anywhere_resolves_to_none(plain_payload):
    chunk = decode(plain_payload)
    assert resolve_signature(chunk.choices[0].delta) is None  # nosec B101 - test assertion
    assert list(iter_signatures(chunk)) == []  # nosec B101 - test assertion


def test_extra_content_only_resolves_to_nested_value():
    assert resolve_signature(_delta(extra_content=_google("EXTRA"))) == "EXTRA"  # nosec B101 - test assertion
    assert resolve_signature(_tool_call(extra_content=_google("TC-EXTRA"))) == "TC-EXTRA"  # nosec B101 - test assertion


def test_direct_field_wins_over_extra_content():
    delta = _delta(thought_signature="DIRECT", extra_content=_google("EXTRA"))
    assert resolve_signature_with_source(delta) == ("DIRECT", SignatureSource.DELTA)  # nosec B101 - test assertion
    tool_call = _tool_call(thought_signature="DIRECT", extra_content=_google("EXTRA"))
    assert resolve_signature_with_source(tool_call) == ("DIRECT", SignatureSource.TOOL_CALL)  # nosec B101 - test assertion


def test_extra_content_wins_over_reasoning_details():
    delta = _delta(
        extra_content=_google("EXTRA"),
        reasoning_details=[{"type": "reasoning.text", "signature": "LEGACY"}],
    )
    assert resolve_signature_with_source(delta) == ("EXTRA", SignatureSource.DELTA_EXTRA_CONTENT)  # nosec B101 - test assertion


def test_encrypted_reasoning_detail_data_is_used():
    delta = _delta(reasoning_details=[{"type": "reasoning.encrypted", "data": "abc123"}])
    assert resolve_signature_with_source(delta) == ("abc123", SignatureSource.DELTA_REASONING_DETAILS)  # nosec B101 - test assertion


def test_first_detail_yielding_a_signature_wins():
    delta = _delta(
        reasoning_details=[
            {"type": "reasoning.text", "text": "thinking"},
            {"type": "reasoning.text", "signature": "sig2"},
            {"type": "reasoning.encrypted", "data": "later"},
        ]
    )
    assert resolve_signature(delta) == "sig2"  # nosec B101 - test assertion


def test_details_are_scanned_in_wire_order_not_by_index():
    delta = _delta(
        reasoning_details=[
            {"type": "reasoning.encrypted", "data": "first-on-wire", "index": 5},
            {"type": "reasoning.encrypted", "data": "lower-index", "index": 0},
        ]
    )
    assert resolve_signature(delta) == "first-on-wire"  # nosec B101 - test assertion


def test_empty_extra_content_falls_through():
    delta = _delta(extra_content={"google": {}}, reasoning_details=[{"signature": "LEGACY"}])
    assert resolve_signature(delta) == "LEGACY"  # nosec B101 - test assertion
    assert resolve_signature(_delta(extra_content={})) is None  # nosec B101 - test assertion


def test_empty_string_counts_as_set():
    delta = _delta(thought_signature="", extra_content=_google("EXTRA"))
    assert resolve_signature(delta) == ""  # nosec B101 - test assertion


@pytest.mark.parametrize(
    "detail, expected",
    [
        ({"signature": "legacy", "type": "reasoning.encrypted", "data": "enc"}, "legacy"),
        ({"type": "reasoning.encrypted", "data": "enc"}, "enc"),
        ({"type": "reasoning.encrypted"}, None),
        ({"type": "reasoning.text", "data": "not-a-signature"}, None),
        ({"type": "reasoning.summary", "summary": "short"}, None),
        ({}, None),
    ],
)
def test_reasoning_detail_signature(detail, expected):
    assert reasoning_detail_signature(ReasoningDetail.model_validate(detail)) == expected  # nosec B101 - test assertion


def test_tool_calls_ignore_reasoning_details_of_their_delta():
    payload = delta_payload(
        reasoning_details=[{"type": "reasoning.encrypted", "data": "DELTA-ONLY"}],
        tool_calls=[{"index": 0, "function": {"name": "f"}}],
    )
    delta = decode(payload).choices[0].delta
    assert resolve_signature(delta) == "DELTA-ONLY"  # nosec B101 - test assertion
    assert resolve_signature(delta.tool_calls[0]) is None  # nosec B101 - test assertion


def test_chunk_choice_and_function_signatures_are_not_resolved():
    payload = {
        "thought_signature": "CHUNK",
        "choices": [
            {
                "thought_signature": "CHOICE",
                "delta": {
                    "role": "assistant",
                    "tool_calls": [{"index": 0, "function": {"name": "f", "thought_signature": "FUNCTION"}}],
                },
            }
        ],
    }
    chunk = decode(payload)
    assert chunk.thought_signature == "CHUNK"  # nosec B101 - exposed raw
    assert chunk.choices[0].thought_signature == "CHOICE"  # nosec B101 - exposed raw
    assert chunk.choices[0].delta.tool_calls[0].function.thought_signature == "FUNCTION"  # nosec B101 - exposed raw
    assert resolve_signature(chunk.choices[0].delta) is None  # nosec B101 - test assertion
    assert resolve_signature(chunk.choices[0].delta.tool_calls[0]) is None  # nosec B101 - test assertion
    assert list(iter_signatures(chunk)) == []  # nosec B101 - test assertion


def test_effective_signature_property_delegates_to_resolver(gemini_tool_call_payload):
    delta = decode(gemini_tool_call_payload).choices[0].delta
    assert delta.effective_signature == "ENC-DETAIL"  # nosec B101 - test assertion
    assert delta.tool_calls[0].effective_signature == "TC-EXTRA"  # nosec B101 - test assertion


def test_effective_signature_is_not_serialized(gemini_tool_call_payload):
    delta = decode(gemini_tool_call_payload).choices[0].delta
    assert "effective_signature" not in delta.to_wire()  # nosec B101 - test assertion


def test_resolve_rejects_other_node_types(gemini_tool_call_payload):
    chunk = decode(gemini_tool_call_payload)
    for node in (chunk, chunk.choices[0], chunk.choices[0].delta.reasoning_details[0], None):
        with pytest.raises(TypeError):
            resolve_signature(node)


def test_iter_signatures_visits_delta_then_tool_calls(gemini_tool_call_payload):
    gemini_tool_call_payload["choices"].append(
        {"index": 1, "delta": {"role": "assistant", "tool_calls": [{"index": 0}, {"index": 1, "thought_signature": "T2"}]}}
    )
    hits = list(iter_signatures(decode(gemini_tool_call_payload)))
    assert [(h.choice_index, h.tool_call_index, h.source, h.value) for h in hits] == [  # nosec B101 - test assertion
        (0, None, SignatureSource.DELTA_REASONING_DETAILS, "ENC-DETAIL"),
        (0, 0, SignatureSource.TOOL_CALL_EXTRA_CONTENT, "TC-EXTRA"),
        (1, 1, SignatureSource.TOOL_CALL, "T2"),
    ]


def test_iter_signatures_falls_back_to_choice_position():
    payload = {"choices": [{"delta": {"role": "assistant"}}, {"delta": {"role": "assistant", "thought_signature": "S"}}]}
    (hit,) = iter_signatures(decode(payload))
    assert hit.choice_index == 1  # nosec B101 - test assertion


def _resolved_events(err: str):
    lines = [json.loads(line) for line in err.strip().splitlines() if line.strip()]
    return [line for line in lines if line.get("event") == "signature.resolved"]


def test_iter_signatures_logs_debug_event_without_value(capsys):
    configure_logger(level="DEBUG")
    chunk = decode(delta_payload(thought_signature="SECRET-SIG"))
    capsys.readouterr()
    list(iter_signatures(chunk))
    events = _resolved_events(capsys.readouterr().err)
    assert len(events) == 1  # nosec B101 - test assertion
    assert events[0]["source"] == "delta"  # nosec B101 - test assertion
    assert events[0]["length"] == len("SECRET-SIG")  # nosec B101 - test assertion
    assert "SECRET-SIG" not in json.dumps(events[0])  # nosec B101 - values are never logged


def test_configured_debug_level_survives_decode_errors_and_logger_lookups(capsys):
    configure_logger(level="DEBUG")
    with pytest.raises(MalformedPayload):
        decode({"model": 1})
    get_logger("crux_chunks.host")
    list(iter_signatures(decode(delta_payload(thought_signature="S"))))
    list(iter_signatures(decode(delta_payload(thought_signature="S"))))
    assert len(_resolved_events(capsys.readouterr().err)) == 2  # nosec B101 - test assertion


def test_signature_events_are_quiet_at_info(capsys):
    list(iter_signatures(decode(delta_payload(thought_signature="S"))))
    assert _resolved_events(capsys.readouterr().err) == []  # nosec B101 - test assertion
