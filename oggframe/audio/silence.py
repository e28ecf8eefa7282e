"""
Silence padding.

Encodes ONE all-zero block and repeats the resulting packet to cover a
requested duration, so idle periods cost a single codec call no matter
how long they are.

Block choice: the largest valid block size not exceeding the duration,
falling back to the smallest. Durations are rounded DOWN to a whole
number of blocks (repeat_count may be 0 for very short durations).
"""

from __future__ import annotations

from dataclasses import dataclass

from audio.codec import Codec
from audio.pcm import silence_block
from container.page import build_packets_page
from constants import OPUS_BLOCK_SIZES_AT_48K, OPUS_REFERENCE_RATE_HZ


@dataclass(frozen=True)
class SilenceSpec:
    """
    One pre-encoded silent packet plus how many times to repeat it.

    payload:
        Compressed packet for `block_size` samples of silence.

    repeat_count:
        Number of consecutive copies needed to cover the requested duration.
    """
    payload: bytes
    repeat_count: int
    block_size: int

    @property
    def covered_samples(self) -> int:
        return self.block_size * self.repeat_count


def block_sizes_for(sample_rate_hz: int) -> tuple[int, ...]:
    """Valid block sizes at `sample_rate_hz`, largest first."""
    return tuple(
        n * sample_rate_hz // OPUS_REFERENCE_RATE_HZ for n in OPUS_BLOCK_SIZES_AT_48K
    )


def choose_block_size(duration_samples: int, sample_rate_hz: int) -> int:
    sizes = block_sizes_for(sample_rate_hz)
    for size in sizes:
        if duration_samples >= size:
            return size
    return sizes[-1]


def synthesize_silence(
    codec: Codec,
    *,
    duration_s: float,
    sample_rate_hz: int,
    channels: int,
) -> SilenceSpec:
    """
    Encode one silent block sized for `duration_s`.

    Raises:
        errors.CodecError if the codec rejects the block.
    """
    if duration_s < 0:
        raise ValueError(f"duration_s must be >= 0, got {duration_s}")

    duration_samples = int(duration_s * sample_rate_hz)
    block_size = choose_block_size(duration_samples, sample_rate_hz)

    payload = codec.encode(silence_block(block_size, channels), block_size)

    return SilenceSpec(
        payload=payload,
        repeat_count=duration_samples // block_size,
        block_size=block_size,
    )


def assemble_silence_page(silence: SilenceSpec, page_seq: int) -> bytes:
    """
    One page carrying `repeat_count` copies of the silent packet.

    Raises:
        errors.SegmentTableOverflow if the copies need more than 255 lacing
        values (pages are never split).
    """
    return build_packets_page(page_seq, (silence.payload,) * silence.repeat_count)
