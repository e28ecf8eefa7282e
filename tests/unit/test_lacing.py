# pylint: disable=missing-module-docstring,missing-function-docstring

import pytest

from container.lacing import lacing_values, segment_header_length, write_segments

from ogg_helpers import packet_lengths


def test_header_length_formula():
    for n in range(0, 3 * 255 + 2):
        assert segment_header_length(n) == n // 255 + 1


@pytest.mark.parametrize(
    "length,expected",
    [
        (0, b"\x00"),
        (1, b"\x01"),
        (254, b"\xfe"),
        (255, b"\xff\x00"),
        (256, b"\xff\x01"),
        (510, b"\xff\xff\x00"),
        (600, b"\xff\xff\x5a"),
    ],
)
def test_lacing_values(length, expected):
    assert lacing_values(length) == expected


def test_exact_multiple_of_255_is_terminated():
    table = lacing_values(255 * 4)

    assert table[-1] == 0
    assert packet_lengths(table) == [255 * 4]


def test_write_segments_at_offset():
    dest = bytearray(b"\xaa" * 8)

    written = write_segments(dest, 3, 300)

    assert written == 2
    assert dest == b"\xaa\xaa\xaa\xff\x2d\xaa\xaa\xaa"


def test_write_segments_never_resizes_destination():
    dest = bytearray(3)

    with pytest.raises(ValueError):
        write_segments(dest, 2, 300)

    assert len(dest) == 3


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        segment_header_length(-1)
