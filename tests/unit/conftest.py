# pylint: disable=missing-module-docstring,missing-function-docstring

import json
from typing import Any

import pytest

from config import Application, EncoderConfig, Framing
from observability import logger
from session.encoder_session import EncoderSession

from ogg_helpers import FakeCodec

STEREO_48K = EncoderConfig(48_000, 2, Application.AUDIO, Framing.OGG)


@pytest.fixture
def events(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    """JSONL events emitted through observability.logger, decoded."""
    captured: list[dict[str, Any]] = []
    monkeypatch.setattr(logger, "_print", lambda line: captured.append(json.loads(line)))
    return captured


@pytest.fixture
def fake_codec() -> FakeCodec:
    return FakeCodec()


@pytest.fixture
def session(fake_codec: FakeCodec, events: list[dict[str, Any]]) -> EncoderSession:
    return EncoderSession(STEREO_48K, codec=fake_codec)
