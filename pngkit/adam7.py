"""Adam7 interlacing: pass geometry and scanline expansion."""

from __future__ import annotations

from typing import Iterator

# pass -> (line_mul, line_off, samp_mul, samp_off)
_PASS_LAYOUT = {
    1: (8, 0, 8, 0),
    2: (8, 0, 8, 4),
    3: (8, 4, 4, 0),
    4: (4, 0, 4, 2),
    5: (4, 2, 2, 0),
    6: (2, 0, 2, 1),
    7: (2, 1, 1, 0),
}

_SUBBYTE_MASKS = {1: 1, 2: 3, 4: 15}


def _ceil_div(value: int, divisor: int) -> int:
    return max(0, -(-value // divisor))


def _pass_size(pass_: int, width: int, height: int) -> tuple[int, int]:
    line_mul, line_off, samp_mul, samp_off = _PASS_LAYOUT[pass_]
    line_width = _ceil_div(width - samp_off, samp_mul)
    lines = _ceil_div(height - line_off, line_mul)
    return line_width, lines


def adam7_passes(width: int, height: int) -> Iterator[tuple[int, int, int]]:
    """Yield (pass, line, line_width) for every non-empty line of all seven passes."""
    for pass_ in range(1, 8):
        line_width, lines = _pass_size(pass_, width, height)
        if line_width == 0:
            continue
        for line in range(lines):
            yield pass_, line, line_width


def subbyte_pixels(scanline: bytes, bits_pp: int) -> Iterator[int]:
    """Iterate sub-byte samples of a scanline, high-order bits first."""
    try:
        mask = _SUBBYTE_MASKS[bits_pp]
    except KeyError:
        raise ValueError(f"not a sub-byte pixel width: {bits_pp}") from None
    return _iter_subbyte(bytes(scanline), bits_pp, mask)


def _iter_subbyte(scanline: bytes, bits_pp: int, mask: int) -> Iterator[int]:
    for byte in scanline:
        for shift in range(8 - bits_pp, -1, -bits_pp):
            yield (byte >> shift) & mask


def expand_adam7_bits(pass_: int, width: int, line_no: int, bits_pp: int) -> range:
    """Bit positions in the full image for the pixels of one pass line."""
    try:
        line_mul, line_off, samp_mul, samp_off = _PASS_LAYOUT[pass_]
    except KeyError:
        raise ValueError(f"Adam7 pass out of range: {pass_}") from None
    prog_line = line_mul * line_no + line_off
    line_width = (width * bits_pp + 7) & ~7
    line_start = prog_line * line_width
    start = line_start + samp_off * bits_pp
    stop = line_start + width * bits_pp
    return range(start, stop, bits_pp * samp_mul)


def expand_pass(
    img: bytearray,
    width: int,
    scanline: bytes,
    pass_: int,
    line_no: int,
    bits_pp: int,
) -> None:
    """Copy the pixels of one interlaced scanline into the image buffer in place."""
    if pass_ not in _PASS_LAYOUT:
        return

    bit_indices = expand_adam7_bits(pass_, width, line_no, bits_pp)

    if bits_pp < 8:
        for pos, px in zip(bit_indices, subbyte_pixels(scanline, bits_pp)):
            rem = 8 - pos % 8 - bits_pp
            img[pos // 8] |= px << rem
        return

    bytes_pp = bits_pp // 8
    pixels = (
        scanline[offset : offset + bytes_pp]
        for offset in range(0, len(scanline), bytes_pp)
    )
    for bitpos, px in zip(bit_indices, pixels):
        start = bitpos // 8
        end = start + len(px)
        if end > len(img):
            raise IndexError("pixel position outside of image buffer")
        img[start:end] = px