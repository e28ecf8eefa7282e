"""
Logical stream header pages (RFC 7845 §5).

Every Ogg Opus stream opens with exactly two pages:

    page 0  BOS flag, identification header ("OpusHead")
    page 1  comment header ("OpusTags"), no user comments

Only the channel count varies; output is deterministic for a given count.
"""

from __future__ import annotations

import struct

from container.page import HeaderType, build_page
from constants import (
    OGG_COMMENT_HEADER_PAGE_SEQ,
    OGG_ID_HEADER_PAGE_SEQ,
    OPUS_HEAD_INPUT_RATE_PLACEHOLDER,
    OPUS_HEAD_MAGIC,
    OPUS_HEAD_MAPPING_FAMILY,
    OPUS_HEAD_OUTPUT_GAIN,
    OPUS_HEAD_PRE_SKIP,
    OPUS_HEAD_VERSION,
    OPUS_TAGS_MAGIC,
    OPUS_TAGS_VENDOR,
)

# magic, version, channels, pre-skip, input rate, output gain, mapping family
_OPUS_HEAD = struct.Struct("<8sBBHIhB")


def identification_payload(channels: int) -> bytes:
    """19-byte OpusHead packet."""
    return _OPUS_HEAD.pack(
        OPUS_HEAD_MAGIC,
        OPUS_HEAD_VERSION,
        channels,
        OPUS_HEAD_PRE_SKIP,
        OPUS_HEAD_INPUT_RATE_PLACEHOLDER,
        OPUS_HEAD_OUTPUT_GAIN,
        OPUS_HEAD_MAPPING_FAMILY,
    )


def comment_payload() -> bytes:
    """OpusTags packet: vendor string, then a zero user-comment count."""
    return (
        OPUS_TAGS_MAGIC
        + struct.pack("<I", len(OPUS_TAGS_VENDOR))
        + OPUS_TAGS_VENDOR
        + struct.pack("<I", 0)
    )


def build_header_pages(channels: int) -> bytes:
    """Both header pages, back to back, each independently checksummed."""
    return build_page(
        OGG_ID_HEADER_PAGE_SEQ,
        identification_payload(channels),
        header_type=HeaderType.BEGINNING_OF_STREAM,
    ) + build_page(
        OGG_COMMENT_HEADER_PAGE_SEQ,
        comment_payload(),
    )
