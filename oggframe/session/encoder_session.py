"""
Encoder session (frame encoder orchestrator).

One session == one output stream == one codec handle.

Responsibilities:
- Owns the codec handle and releases it exactly once (close())
- Owns the page sequence counter (starts at 2; 0 and 1 are the header pages)
- Dispatches raw / int16 / float sample buffers to the codec
- Wraps codec packets into pages when framing is OGG
- Produces header pages and silence pages on request

NOT responsible for:
- Writing bytes anywhere (callers own persistence / transport)
- Pacing, retries, or concurrency control: a session is single-writer
- Parsing existing streams

Usage example:

    with EncoderSession(DEFAULT_CONFIG) as enc:
        out.write(enc.stream_header())
        for block in blocks:
            out.write(enc.encode_float(block))
        out.write(enc.encode_silence(enc.create_silence(0.5)))
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from audio.codec import Codec
from audio.pcm import PcmBlock, float32_block, int16_block, raw_block, to_block
from audio.silence import SilenceSpec, assemble_silence_page, synthesize_silence
from config import DEFAULT_CONFIG, EncoderConfig, Framing
from container.headers import build_header_pages
from container.page import build_page
from errors import CodecError, FramingModeError, SessionClosed
from observability.logger import emit
from constants import OGG_FIRST_AUDIO_PAGE_SEQ


def _new_session_id() -> str:
    return f"enc_{uuid4().hex[:12]}"


class EncoderSession:
    """
    Codec handle plus framing state.

    The page sequence counter increases by exactly 1 for every page this
    session emits (frame pages and silence pages alike), and never for a
    failed call or a bare (FRAMING NONE) packet.
    """

    def __init__(
        self,
        config: EncoderConfig = DEFAULT_CONFIG,
        *,
        codec: Codec | None = None,
    ) -> None:
        config.validate()

        if codec is None:
            # opuslib loads the native library at import time
            from audio.opus_codec import open_codec
            codec = open_codec(config)

        self._config = config
        self._codec: Codec | None = codec
        self._page_seq: int = OGG_FIRST_AUDIO_PAGE_SEQ
        self._pages_emitted: int = 0
        self.session_id: str = _new_session_id()

        emit(
            "ENCODER_SESSION_CREATED",
            session_id=self.session_id,
            sample_rate_hz=config.sample_rate_hz,
            channels=config.channels,
            application=config.application,
            framing=config.framing,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> EncoderConfig:
        return self._config

    @property
    def page_sequence(self) -> int:
        """Sequence number the next emitted page will carry."""
        return self._page_seq

    @property
    def closed(self) -> bool:
        return self._codec is None

    # ------------------------------------------------------------------
    # Header pages
    # ------------------------------------------------------------------

    def stream_header(self) -> bytes:
        """
        The two header pages (sequence 0 and 1).

        Returns b"" when framing is NONE. Does not touch the page counter.
        """
        framing = self._config.framing
        if framing is Framing.NONE:
            return b""
        if framing is Framing.OGG:
            return build_header_pages(self._config.channels)
        raise FramingModeError(f"Unknown framing mode {framing!r}")

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, samples: Any) -> bytes:
        """
        Encode one block given as raw PCM16 bytes, integer samples, or
        floating-point samples (interleaved).

        Raises:
            CodecError if the codec rejects the block.
            SessionClosed after close().
        """
        return self._encode_block(to_block(samples))

    def encode_raw(self, pcm_bytes: bytes) -> bytes:
        """Interleaved little-endian int16 bytes."""
        return self._encode_block(raw_block(pcm_bytes))

    def encode_int16(self, samples: Any) -> bytes:
        return self._encode_block(int16_block(samples))

    def encode_float(self, samples: Any) -> bytes:
        return self._encode_block(float32_block(samples))

    def _encode_block(self, block: PcmBlock) -> bytes:
        codec = self._require_codec()
        frame_count = block.frame_count(self._config.channels)

        try:
            packet = codec.encode(block, frame_count)
        except CodecError as e:
            emit(
                "CODEC_ENCODE_ERROR",
                session_id=self.session_id,
                sample_format=block.sample_format,
                frame_count=frame_count,
                error=str(e),
            )
            raise

        return self._frame(packet)

    def _frame(self, packet: bytes) -> bytes:
        framing = self._config.framing
        if framing is Framing.NONE:
            return packet
        if framing is Framing.OGG:
            page = build_page(self._page_seq, packet)
            self._advance()
            return page
        raise FramingModeError(f"Unknown framing mode {framing!r}")

    # ------------------------------------------------------------------
    # Silence
    # ------------------------------------------------------------------

    def create_silence(self, duration_s: float) -> SilenceSpec:
        """
        Encode one silent block sized for `duration_s` (one codec call).

        The result can be passed to encode_silence() any number of times.
        """
        codec = self._require_codec()

        silence = synthesize_silence(
            codec,
            duration_s=duration_s,
            sample_rate_hz=self._config.sample_rate_hz,
            channels=self._config.channels,
        )

        emit(
            "SILENCE_CREATED",
            session_id=self.session_id,
            duration_s=duration_s,
            block_size=silence.block_size,
            repeat_count=silence.repeat_count,
            payload_bytes=len(silence.payload),
        )
        return silence

    def encode_silence(self, silence: SilenceSpec) -> bytes:
        """
        One page with `repeat_count` copies of the silent packet.

        Advances the page counter by exactly 1. Requires OGG framing.
        """
        self._require_codec()
        if self._config.framing is not Framing.OGG:
            raise FramingModeError("Silence pages require OGG framing")

        page = assemble_silence_page(silence, self._page_seq)
        self._advance()
        return page

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the codec handle. Idempotent."""
        codec = self._codec
        if codec is None:
            return

        self._codec = None
        codec.close()

        emit(
            "ENCODER_SESSION_CLOSED",
            session_id=self.session_id,
            pages_emitted=self._pages_emitted,
            next_page_seq=self._page_seq,
        )

    def __enter__(self) -> EncoderSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_codec(self) -> Codec:
        if self._codec is None:
            raise SessionClosed(f"Encoder session {self.session_id} is closed")
        return self._codec

    def _advance(self) -> None:
        self._page_seq += 1
        self._pages_emitted += 1
