"""Test-only helpers: a deterministic fake codec and a minimal page reader."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from audio.codec import Codec
from audio.pcm import PcmBlock
from container.crc import ogg_crc32
from errors import CodecError

_FIXED_HEADER = struct.Struct("<4sBBQIIIB")


class FakeCodec(Codec):
    """
    Returns `packet_len`-byte packets; the first bytes identify the call.

    Set `fail_with` to make the next calls raise CodecError.
    """

    def __init__(self, packet_len: int = 40) -> None:
        self.packet_len = packet_len
        self.fail_with: str | None = None
        self.calls: list[tuple[PcmBlock, int]] = []
        self.close_calls = 0

    def encode(self, block: PcmBlock, frame_size: int) -> bytes:
        self.calls.append((block, frame_size))
        if self.fail_with is not None:
            raise CodecError(self.fail_with)
        if frame_size <= 0:
            raise CodecError("invalid frame size")
        tag = bytes([0xFC, frame_size & 0xFF, len(self.calls) & 0xFF])
        return (tag + b"\x00" * self.packet_len)[: self.packet_len]

    def close(self) -> None:
        self.close_calls += 1

    @property
    def closed(self) -> bool:
        return self.close_calls > 0


@dataclass(frozen=True)
class ParsedPage:
    capture_pattern: bytes
    version: int
    header_type: int
    granule_position: int
    serial: int
    page_seq: int
    checksum: int
    segment_table: bytes
    body: bytes


def parse_page(page: bytes) -> ParsedPage:
    (
        capture,
        version,
        header_type,
        granule,
        serial,
        page_seq,
        checksum,
        segment_count,
    ) = _FIXED_HEADER.unpack_from(page)
    table = page[27 : 27 + segment_count]
    return ParsedPage(
        capture_pattern=capture,
        version=version,
        header_type=header_type,
        granule_position=granule,
        serial=serial,
        page_seq=page_seq,
        checksum=checksum,
        segment_table=bytes(table),
        body=bytes(page[27 + segment_count :]),
    )


def packet_lengths(segment_table: bytes) -> list[int]:
    """Packet lengths encoded by a lacing table (unterminated tail dropped)."""
    lengths: list[int] = []
    total = 0
    for value in segment_table:
        total += value
        if value < 255:
            lengths.append(total)
            total = 0
    return lengths


def checksum_round_trips(page: bytes) -> bool:
    stored = struct.unpack_from("<I", page, 22)[0]
    zeroed = bytearray(page)
    zeroed[22:26] = b"\x00\x00\x00\x00"
    return ogg_crc32(zeroed) == stored


def split_pages(stream: bytes) -> list[bytes]:
    pages: list[bytes] = []
    offset = 0
    while offset < len(stream):
        segment_count = stream[offset + 26]
        table = stream[offset + 27 : offset + 27 + segment_count]
        end = offset + 27 + segment_count + sum(table)
        pages.append(stream[offset:end])
        offset = end
    return pages
