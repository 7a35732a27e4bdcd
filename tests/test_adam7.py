import pytest

from pngkit.adam7 import (
    adam7_passes,
    expand_adam7_bits,
    expand_pass,
    subbyte_pixels,
)


def test_adam7_passes_4x4():
    assert list(adam7_passes(4, 4)) == [
        (1, 0, 1),
        (4, 0, 1),
        (5, 0, 2),
        (6, 0, 2),
        (6, 1, 2),
        (7, 0, 4),
        (7, 1, 4),
    ]


def test_adam7_passes_1x1_only_first_pass():
    assert list(adam7_passes(1, 1)) == [(1, 0, 1)]


def test_subbyte_pixels():
    pixels = list(subbyte_pixels(bytes([0b10101010, 0b10101010]), 1))
    assert len(pixels) == 16
    assert pixels == [1, 0] * 8


def test_subbyte_pixels_two_bits():
    assert list(subbyte_pixels(bytes([0b11100100]), 2)) == [3, 2, 1, 0]


def test_subbyte_pixels_bad_width():
    with pytest.raises(ValueError):
        subbyte_pixels(b"\x00", 8)


def _expected(offset, step, count):
    return [step * i + offset for i in range(count)]


WIDTH = 32


@pytest.mark.parametrize("line_no", range(8))
def test_expand_bits_passes_1_to_3(line_no):
    start = 8 * line_no * WIDTH
    assert list(expand_adam7_bits(1, WIDTH, line_no, 1)) == _expected(start, 8, 4)
    assert list(expand_adam7_bits(2, WIDTH, line_no, 1)) == _expected(start + 4, 8, 4)
    start3 = (8 * line_no + 4) * WIDTH
    assert list(expand_adam7_bits(3, WIDTH, line_no, 1)) == _expected(start3, 4, 8)


@pytest.mark.parametrize("line_no", range(16))
def test_expand_bits_passes_4_and_5(line_no):
    start = 4 * line_no * WIDTH + 2
    assert list(expand_adam7_bits(4, WIDTH, line_no, 1)) == _expected(start, 4, 8)
    start5 = (4 * line_no + 2) * WIDTH
    assert list(expand_adam7_bits(5, WIDTH, line_no, 1)) == _expected(start5, 2, 16)


@pytest.mark.parametrize("line_no", range(32))
def test_expand_bits_passes_6_and_7(line_no):
    start = 2 * line_no * WIDTH + 1
    assert list(expand_adam7_bits(6, WIDTH, line_no, 1)) == _expected(start, 2, 16)
    start7 = (2 * line_no + 1) * WIDTH
    assert list(expand_adam7_bits(7, WIDTH, line_no, 1)) == _expected(start7, 1, 32)


def test_expand_bits_bad_pass():
    with pytest.raises(ValueError):
        expand_adam7_bits(8, 8, 0, 1)


def test_expand_pass_subbyte():
    img = bytearray(8)
    steps = [
        (0b10000000, 1, 0, [0b10000000, 0, 0, 0, 0, 0, 0, 0]),
        (0b10000000, 2, 0, [0b10001000, 0, 0, 0, 0, 0, 0, 0]),
        (0b11000000, 3, 0, [0b10001000, 0, 0, 0, 0b10001000, 0, 0, 0]),
        (0b11000000, 4, 0, [0b10101010, 0, 0, 0, 0b10001000, 0, 0, 0]),
        (0b11000000, 4, 1, [0b10101010, 0, 0, 0, 0b10101010, 0, 0, 0]),
        (0b11110000, 5, 0, [0b10101010, 0, 0b10101010, 0, 0b10101010, 0, 0, 0]),
        (0b11110000, 5, 1, [0b10101010, 0, 0b10101010, 0, 0b10101010, 0, 0b10101010, 0]),
        (0b11110000, 6, 0, [0xFF, 0, 0b10101010, 0, 0b10101010, 0, 0b10101010, 0]),
        (0b11110000, 6, 1, [0xFF, 0, 0xFF, 0, 0b10101010, 0, 0b10101010, 0]),
        (0b11110000, 6, 2, [0xFF, 0, 0xFF, 0, 0xFF, 0, 0b10101010, 0]),
        (0b11110000, 6, 3, [0xFF, 0, 0xFF, 0, 0xFF, 0, 0xFF, 0]),
        (0b11111111, 7, 0, [0xFF, 0xFF, 0xFF, 0, 0xFF, 0, 0xFF, 0]),
        (0b11111111, 7, 1, [0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0, 0xFF, 0]),
        (0b11111111, 7, 2, [0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0]),
        (0b11111111, 7, 3, [0xFF] * 8),
    ]
    for byte, pass_, line_no, expected in steps:
        expand_pass(img, 8, bytes([byte]), pass_, line_no, 1)
        assert list(img) == expected, (pass_, line_no)


def test_expand_pass_out_of_range_pass_is_ignored():
    img = bytearray(8)
    expand_pass(img, 8, b"\xff", 0, 0, 1)
    expand_pass(img, 8, b"\xff", 8, 0, 1)
    assert img == bytearray(8)


def test_expand_pass_whole_bytes():
    img = bytearray(2 * 2 * 2)
    # 2x2 image, 16 bits per pixel; pass 7 line 0 covers row 1.
    expand_pass(img, 2, b"\x01\x02\x03\x04", 7, 0, 16)
    assert img == bytearray([0, 0, 0, 0, 1, 2, 3, 4])
    expand_pass(img, 2, b"\x09\x08", 1, 0, 16)
    assert img == bytearray([9, 8, 0, 0, 1, 2, 3, 4])


def test_expand_pass_outside_buffer():
    img = bytearray(2)
    with pytest.raises(IndexError):
        expand_pass(img, 2, b"\x01\x02\x03\x04", 7, 0, 16)