"""
Ogg page checksum.

CRC-32 with polynomial 0x04C11DB7, MSB-first (non-reflected), initial
value 0 and no final XOR. This is NOT the reflected CRC-32 behind
zlib.crc32 / binascii.crc32; the two disagree on every non-empty input.
"""

from __future__ import annotations

import struct

from constants import OGG_CHECKSUM_OFFSET, OGG_CRC_POLYNOMIAL


def _make_table(polynomial: int) -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i << 24
        for _ in range(8):
            if crc & 0x80000000:
                crc = (crc << 1) ^ polynomial
            else:
                crc <<= 1
        table.append(crc & 0xFFFFFFFF)
    return tuple(table)


_CRC_TABLE: tuple[int, ...] = _make_table(OGG_CRC_POLYNOMIAL)


def ogg_crc32(data: bytes | bytearray | memoryview) -> int:
    """Return the Ogg CRC-32 of `data`."""
    crc = 0
    for byte in data:
        crc = ((crc << 8) & 0xFFFFFFFF) ^ _CRC_TABLE[(crc >> 24) ^ byte]
    return crc


def stamp_checksum(page: bytearray) -> int:
    """
    Zero the checksum field, checksum the whole page, write it back LE.

    Mutates `page` in place and returns the checksum.
    """
    if len(page) < OGG_CHECKSUM_OFFSET + 4:
        raise ValueError(f"Page too short for a checksum field: {len(page)} bytes")

    struct.pack_into("<I", page, OGG_CHECKSUM_OFFSET, 0)
    crc = ogg_crc32(page)
    struct.pack_into("<I", page, OGG_CHECKSUM_OFFSET, crc)
    return crc
