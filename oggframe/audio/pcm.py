"""
PCM sample representations accepted by the encoder.

Three inputs, two codec formats:
- raw bytes      -> INT16 (already interleaved little-endian int16)
- int samples    -> INT16
- float samples  -> FLOAT32 (nominal range [-1.0, 1.0])

Pure functions only. No resampling. No channel mixing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from constants import OPUS_SAMPLE_WIDTH_BYTES


class SampleFormat(str, Enum):
    INT16 = "int16"
    FLOAT32 = "float32"


@dataclass(frozen=True)
class PcmBlock:
    """
    One block of interleaved samples, ready for the codec.

    pcm_bytes:
        Interleaved samples in the codec's native layout
        (little-endian int16 or native float32).

    sample_count:
        Total samples across all channels.
    """
    sample_format: SampleFormat
    pcm_bytes: bytes
    sample_count: int

    def frame_count(self, channels: int) -> int:
        """Samples per channel."""
        return self.sample_count // channels


def int16_block(samples: Any) -> PcmBlock:
    """Interleaved integer samples; out-of-range values are clipped."""
    arr = np.asarray(samples)
    if arr.dtype != np.int16:
        arr = np.clip(arr, -32768, 32767).astype(np.int16)
    arr = arr.astype("<i2", copy=False).reshape(-1)
    return PcmBlock(SampleFormat.INT16, arr.tobytes(), arr.size)


def float32_block(samples: Any) -> PcmBlock:
    """Interleaved floating-point samples."""
    arr = np.asarray(samples, dtype=np.float32).reshape(-1)
    return PcmBlock(SampleFormat.FLOAT32, arr.tobytes(), arr.size)


def raw_block(pcm_bytes: bytes | bytearray | memoryview) -> PcmBlock:
    """
    Interleaved PCM16 little-endian bytes, passed through untouched.

    A trailing odd byte does not count as a sample.
    """
    data = bytes(pcm_bytes)
    return PcmBlock(SampleFormat.INT16, data, len(data) // OPUS_SAMPLE_WIDTH_BYTES)


def to_block(samples: Any) -> PcmBlock:
    """
    Classify any accepted representation.

    Raises:
        TypeError for sample types that are neither integer nor floating.
    """
    if isinstance(samples, (bytes, bytearray, memoryview)):
        return raw_block(samples)

    arr = np.asarray(samples)
    if arr.size == 0 or arr.dtype.kind == "f":
        return float32_block(arr)
    if arr.dtype.kind in ("i", "u"):
        return int16_block(arr)
    raise TypeError(f"Unsupported sample dtype: {arr.dtype}")


def silence_block(frame_size: int, channels: int) -> PcmBlock:
    """All-zero float block of `frame_size` samples per channel."""
    return float32_block(np.zeros(frame_size * channels, dtype=np.float32))
