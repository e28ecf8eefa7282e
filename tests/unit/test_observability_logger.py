# pylint: disable=missing-module-docstring,missing-function-docstring

import json
from typing import Any

import pytest

from config import Framing
from observability import logger


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    lines: list[str] = []
    monkeypatch.setattr(logger, "_print", lines.append)
    return lines


def test_log_event_emits_valid_jsonl(captured: list[str]) -> None:
    payload: dict[str, Any] = {
        "event_type": "TEST",
        "value": 123,
    }

    logger.log_event(payload)

    assert len(captured) == 1
    assert "\n" not in captured[0]
    assert json.loads(captured[0]) == payload


def test_bytes_and_enums_are_serialized(captured: list[str]) -> None:
    logger.log_event({"event_type": "TEST", "packet": b"\xfc\x01", "framing": Framing.OGG})

    decoded = json.loads(captured[0])
    assert decoded["packet"] == "fc01"
    assert decoded["framing"] == "ogg"


def test_unserializable_event_falls_back(captured: list[str]) -> None:
    logger.log_event({"ts_ms": 5, "event_type": "TEST", "payload": object()})

    decoded = json.loads(captured[0])
    assert decoded["event_type"] == "LOGGER_SERIALIZATION_ERROR"
    assert decoded["ts_ms"] == 5
    assert "object" in decoded["original_event_repr"]


def test_emit_stamps_common_fields(captured: list[str]) -> None:
    logger.emit("SILENCE_CREATED", session_id="enc_1", repeat_count=8)

    decoded = json.loads(captured[0])
    assert decoded["event_type"] == "SILENCE_CREATED"
    assert decoded["session_id"] == "enc_1"
    assert decoded["repeat_count"] == 8
    assert isinstance(decoded["ts_ms"], int)
