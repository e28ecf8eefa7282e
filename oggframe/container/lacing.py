"""
Segment (lacing) table encoding.

A packet of length L is laced as L // 255 values of 255 followed by one
terminating value L % 255. A value of 255 means "packet continues", so a
length that is an exact multiple of 255 ends with an explicit 0.

    0    -> [0]
    254  -> [254]
    255  -> [255, 0]
    600  -> [255, 255, 90]
"""

from __future__ import annotations

from constants import OGG_LACING_VALUE_MAX


def segment_header_length(payload_len: int) -> int:
    """Number of lacing values needed for one packet of `payload_len` bytes."""
    if payload_len < 0:
        raise ValueError(f"payload_len must be >= 0, got {payload_len}")
    return payload_len // OGG_LACING_VALUE_MAX + 1


def write_segments(dest: bytearray, offset: int, payload_len: int) -> int:
    """
    Write the lacing values for one packet into `dest` at `offset`.

    Returns:
        Number of bytes written (always segment_header_length(payload_len)).
    """
    count = segment_header_length(payload_len)
    if offset < 0 or offset + count > len(dest):
        raise ValueError(
            f"Segment table of {count} bytes does not fit at offset {offset} "
            f"of a {len(dest)}-byte buffer"
        )
    full = count - 1
    end = offset + full
    dest[offset:end] = b"\xff" * full
    dest[end] = payload_len - full * OGG_LACING_VALUE_MAX
    return count


def lacing_values(payload_len: int) -> bytes:
    """Lacing values for one packet, as a standalone byte string."""
    out = bytearray(segment_header_length(payload_len))
    write_segments(out, 0, payload_len)
    return bytes(out)
