"""
WIRE CONSTANTS
--------------
Single source of truth for the container wire format and codec limits.

Rules:
- If changing a value changes the bytes on the wire, it belongs here.
- No magic numbers elsewhere in the codebase.
- Other modules MUST import from this file.
"""

from __future__ import annotations

from typing import Final, Tuple

# =============================================================================
# Ogg page layout  [RFC 3533 §6]
# =============================================================================
# 0   capture pattern "OggS"      (4)
# 4   stream structure version    (1)
# 5   header type flags           (1)
# 6   granule position            (8, LE)
# 14  bitstream serial number     (4, LE)
# 18  page sequence number        (4, LE)
# 22  CRC checksum                (4, LE)
# 26  number of page segments     (1)
# 27  segment table               (n)

OGG_CAPTURE_PATTERN: Final[bytes] = b"OggS"
OGG_STREAM_VERSION: Final[int] = 0

OGG_PAGE_SEQ_OFFSET: Final[int] = 18
OGG_CHECKSUM_OFFSET: Final[int] = 22
OGG_SEGMENT_COUNT_OFFSET: Final[int] = 26
OGG_PAGE_FIXED_HEADER_BYTES: Final[int] = 27

OGG_MAX_SEGMENTS_PER_PAGE: Final[int] = 255
OGG_LACING_VALUE_MAX: Final[int] = 255

# Placeholders: one logical stream, no timestamps.
OGG_STREAM_SERIAL: Final[int] = 0x44332211
OGG_GRANULE_PLACEHOLDER: Final[int] = 0

# Bytes reserved ahead of the payload in the page buffer.
OGG_PAGE_HEADER_BUDGET_BYTES: Final[int] = 0x200

# Page sequence numbers 0 and 1 belong to the header pages.
OGG_ID_HEADER_PAGE_SEQ: Final[int] = 0
OGG_COMMENT_HEADER_PAGE_SEQ: Final[int] = 1
OGG_FIRST_AUDIO_PAGE_SEQ: Final[int] = 2
OGG_PAGE_SEQ_MAX: Final[int] = 2**32 - 1

# =============================================================================
# Ogg CRC  [RFC 3533 §6: poly 0x04C11DB7, init 0, no reflection, no xorout]
# =============================================================================

OGG_CRC_POLYNOMIAL: Final[int] = 0x04C11DB7

# =============================================================================
# Opus header packets  [RFC 7845 §5]
# =============================================================================

OPUS_HEAD_MAGIC: Final[bytes] = b"OpusHead"
OPUS_HEAD_VERSION: Final[int] = 1
OPUS_HEAD_PRE_SKIP: Final[int] = 0
OPUS_HEAD_INPUT_RATE_PLACEHOLDER: Final[int] = 0
OPUS_HEAD_OUTPUT_GAIN: Final[int] = 0
OPUS_HEAD_MAPPING_FAMILY: Final[int] = 0

OPUS_TAGS_MAGIC: Final[bytes] = b"OpusTags"
OPUS_TAGS_VENDOR: Final[bytes] = b"x"

# =============================================================================
# Opus codec limits
# =============================================================================

OPUS_SAMPLE_RATES_HZ: Final[Tuple[int, ...]] = (8_000, 12_000, 16_000, 24_000, 48_000)
OPUS_CHANNEL_COUNTS: Final[Tuple[int, ...]] = (1, 2)

OPUS_APPLICATION_VOIP: Final[int] = 2048
OPUS_APPLICATION_AUDIO: Final[int] = 2049
OPUS_APPLICATION_RESTRICTED_LOWDELAY: Final[int] = 2051

# Valid block sizes at 48 kHz (60, 40, 20, 10, 5, 2.5 ms), largest first.
# Other rates scale these by rate / 48000.
OPUS_REFERENCE_RATE_HZ: Final[int] = 48_000
OPUS_BLOCK_SIZES_AT_48K: Final[Tuple[int, ...]] = (2880, 1920, 960, 480, 240, 120)

OPUS_SAMPLE_WIDTH_BYTES: Final[int] = 2  # int16 interleaved

# Largest packet libopus emits for one block.
OPUS_MAX_PACKET_BYTES: Final[int] = 1275

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_SAMPLE_RATE_HZ: Final[int] = 48_000
DEFAULT_CHANNELS: Final[int] = 2
