"""
JSONL event logger.

One JSON object per line on stdout, flushed per event. Byte strings
(packets, page fragments) are logged as hex and enums as their values,
so callers can pass framing objects straight through.
"""

from __future__ import annotations

import json
import sys
import time
from enum import Enum
from typing import Any, Callable, Mapping


def _stdout_print(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()

# Output sink; tests patch this.
_print: Callable[[str], None] = _stdout_print


def now_ms() -> int:
    """Wall-clock milliseconds, for event timestamps only."""
    return time.time_ns() // 1_000_000


def _encode_value(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dumps(event: Mapping[str, Any]) -> str:
    return json.dumps(event, default=_encode_value, ensure_ascii=False, separators=(",", ":"))


def log_event(event: Mapping[str, Any]) -> None:
    """
    Write one fully-formed event as a JSONL line. Never raises.

    An event that still cannot be serialized is replaced by a
    LOGGER_SERIALIZATION_ERROR event carrying its repr.
    """
    try:
        line = _dumps(event)
    except (TypeError, ValueError) as e:
        line = _dumps({
            "ts_ms": event.get("ts_ms"),
            "event_type": "LOGGER_SERIALIZATION_ERROR",
            "error": str(e),
            "original_event_repr": repr(event),
        })

    _print(line)


def emit(event_type: str, *, session_id: str | None = None, **fields: Any) -> None:
    """Stamp ts_ms / event_type / session_id onto `fields` and log it."""
    log_event({
        "ts_ms": now_ms(),
        "event_type": event_type,
        "session_id": session_id,
        **fields,
    })
