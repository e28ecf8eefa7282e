"""
Ogg page assembly.

One call == one physical page:

    27 bytes  fixed header (capture pattern .. segment count)
    n  bytes  segment table (lacing values, one run per packet)
    m  bytes  packet data, contiguous

The page is assembled in a single buffer: packet data is written at a
fixed offset (the header budget) and the header is backfilled directly in
front of it, so the header length must be known before anything is
written. The checksum is stamped last, over the finished page.

Usage example:

    page = build_page(page_seq, opus_packet)
    out.write(page)
"""

from __future__ import annotations

import enum
import struct
from typing import Sequence

from container.crc import stamp_checksum
from container.lacing import segment_header_length, write_segments
from errors import HeaderTooLarge, SegmentTableOverflow
from constants import (
    OGG_CAPTURE_PATTERN,
    OGG_GRANULE_PLACEHOLDER,
    OGG_MAX_SEGMENTS_PER_PAGE,
    OGG_PAGE_FIXED_HEADER_BYTES,
    OGG_PAGE_HEADER_BUDGET_BYTES,
    OGG_PAGE_SEQ_MAX,
    OGG_STREAM_SERIAL,
    OGG_STREAM_VERSION,
)

# capture, version, header type, granule, serial, page seq, crc, segment count
_FIXED_HEADER = struct.Struct("<4sBBQIIIB")


class HeaderType(enum.IntFlag):
    """Header type flags (byte 5)."""

    NONE = 0x00
    CONTINUED = 0x01
    BEGINNING_OF_STREAM = 0x02
    END_OF_STREAM = 0x04


def page_header_length(packet_lengths: Sequence[int]) -> int:
    """Fixed header plus segment table for the given packet lengths."""
    return OGG_PAGE_FIXED_HEADER_BYTES + sum(
        segment_header_length(n) for n in packet_lengths
    )


def build_packets_page(
    page_seq: int,
    packets: Sequence[bytes],
    *,
    header_type: HeaderType = HeaderType.NONE,
    granule_position: int = OGG_GRANULE_PLACEHOLDER,
    serial: int = OGG_STREAM_SERIAL,
    header_budget: int = OGG_PAGE_HEADER_BUDGET_BYTES,
) -> bytes:
    """
    Build one checksummed page carrying every packet in `packets`, in order.

    Each packet gets its own terminated lacing run.

    Raises:
        ValueError if page_seq is outside the u32 range.
        HeaderTooLarge if the header does not fit in `header_budget`.
        SegmentTableOverflow if more than 255 lacing values are needed.
    """
    if page_seq < 0 or page_seq > OGG_PAGE_SEQ_MAX:
        raise ValueError(f"Invalid page sequence number: {page_seq}")

    lengths = [len(p) for p in packets]
    header_length = page_header_length(lengths)
    segment_count = header_length - OGG_PAGE_FIXED_HEADER_BYTES

    # Segment limit first: an oversized table is a page-format error
    # regardless of the buffer budget.
    if segment_count > OGG_MAX_SEGMENTS_PER_PAGE:
        raise SegmentTableOverflow(
            f"Page needs {segment_count} segments "
            f"(max {OGG_MAX_SEGMENTS_PER_PAGE})"
        )
    if header_length > header_budget:
        raise HeaderTooLarge(
            f"Page header of {header_length} bytes exceeds the "
            f"{header_budget}-byte header budget"
        )

    buf = bytearray(header_budget + sum(lengths))

    # Packet data at the fixed offset
    cursor = header_budget
    for packet in packets:
        buf[cursor : cursor + len(packet)] = packet
        cursor += len(packet)

    # Header backfilled in front of it
    start = header_budget - header_length
    _FIXED_HEADER.pack_into(
        buf,
        start,
        OGG_CAPTURE_PATTERN,
        OGG_STREAM_VERSION,
        int(header_type),
        granule_position,
        serial,
        page_seq,
        0,
        segment_count,
    )
    cursor = start + OGG_PAGE_FIXED_HEADER_BYTES
    for n in lengths:
        cursor += write_segments(buf, cursor, n)

    del buf[:start]
    stamp_checksum(buf)
    return bytes(buf)


def build_page(
    page_seq: int,
    payload: bytes,
    *,
    header_type: HeaderType = HeaderType.NONE,
    granule_position: int = OGG_GRANULE_PLACEHOLDER,
    serial: int = OGG_STREAM_SERIAL,
    header_budget: int = OGG_PAGE_HEADER_BUDGET_BYTES,
) -> bytes:
    """Build one checksummed page carrying a single packet."""
    return build_packets_page(
        page_seq,
        (payload,),
        header_type=header_type,
        granule_position=granule_position,
        serial=serial,
        header_budget=header_budget,
    )
