"""
libopus codec (via opuslib).

Implements the Codec contract on top of opuslib.Encoder. The native
encoder state is destroyed when the last reference to the opuslib
encoder goes away, so close() drops that reference exactly once.
"""

from __future__ import annotations

import opuslib

from audio.codec import Codec
from audio.pcm import PcmBlock, SampleFormat
from config import EncoderConfig
from errors import CodecError, ConfigurationError


class OpusCodec(Codec):
    """One libopus encoder handle, exclusively owned."""

    def __init__(self, config: EncoderConfig) -> None:
        try:
            self._encoder: opuslib.Encoder | None = opuslib.Encoder(
                config.sample_rate_hz,
                config.channels,
                config.application.opus_id,
            )
        except opuslib.OpusError as e:
            raise ConfigurationError(f"Creating opus encoder failed: {e}") from e

    def encode(self, block: PcmBlock, frame_size: int) -> bytes:
        encoder = self._encoder
        if encoder is None:
            raise CodecError("Opus encoder already released")

        try:
            if block.sample_format is SampleFormat.FLOAT32:
                return encoder.encode_float(block.pcm_bytes, frame_size)
            return encoder.encode(block.pcm_bytes, frame_size)
        except opuslib.OpusError as e:
            raise CodecError(f"Opus encoding error: {e}") from e

    def close(self) -> None:
        self._encoder = None

    @property
    def closed(self) -> bool:
        return self._encoder is None


def open_codec(config: EncoderConfig) -> Codec:
    return OpusCodec(config)
