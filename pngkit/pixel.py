"""Pixel layout enums, output transformations and parameter errors."""

from __future__ import annotations

import sys
from enum import Enum, IntEnum, IntFlag
from typing import Optional


class BitDepth(IntEnum):
    """Number of bits per sample."""

    ONE = 1
    TWO = 2
    FOUR = 4
    EIGHT = 8
    SIXTEEN = 16


class ColorType(IntEnum):
    """How a pixel is encoded."""

    GRAYSCALE = 0
    RGB = 2
    INDEXED = 3
    GRAYSCALE_ALPHA = 4
    RGBA = 6

    def samples(self) -> int:
        """Number of samples per pixel."""
        return _SAMPLES[self]

    def checked_raw_row_length(self, depth: BitDepth, width: int) -> Optional[int]:
        """Bytes of one filtered row (filter byte included), or None if too large."""
        bits = int(width) * self.samples() * int(depth)
        length = 1 + (bits + 7) // 8
        if length > sys.maxsize:
            return None
        return length

    def raw_row_length_from_width(self, depth: BitDepth, width: int) -> int:
        """Bytes of one filtered row of the given width, filter byte included."""
        depth = BitDepth(depth)
        samples = int(width) * self.samples()
        if depth is BitDepth.SIXTEEN:
            return 1 + samples * 2
        if depth is BitDepth.EIGHT:
            return 1 + samples
        samples_per_byte = 8 // int(depth)
        whole, rest = divmod(samples, samples_per_byte)
        return 1 + whole + (1 if rest else 0)

    def is_combination_invalid(self, bit_depth: BitDepth) -> bool:
        """True if the PNG standard forbids this color type with this bit depth."""
        bit_depth = BitDepth(bit_depth)
        sub_byte = bit_depth in (BitDepth.ONE, BitDepth.TWO, BitDepth.FOUR)
        multi_sample = self in (
            ColorType.RGB,
            ColorType.GRAYSCALE_ALPHA,
            ColorType.RGBA,
        )
        return (sub_byte and multi_sample) or (
            bit_depth is BitDepth.SIXTEEN and self is ColorType.INDEXED
        )


_SAMPLES = {
    ColorType.GRAYSCALE: 1,
    ColorType.INDEXED: 1,
    ColorType.RGB: 3,
    ColorType.GRAYSCALE_ALPHA: 2,
    ColorType.RGBA: 4,
}


class BytesPerPixel(IntEnum):
    """Byte-rounded pixel width used by the scanline filters."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    SIX = 6
    EIGHT = 8


class Unit(IntEnum):
    """Physical unit of the pixel dimensions."""

    UNSPECIFIED = 0
    METER = 1


class DisposeOp(IntEnum):
    """How the frame area is reset after an animation frame."""

    NONE = 0
    BACKGROUND = 1
    PREVIOUS = 2

    def __str__(self) -> str:
        return f"DISPOSE_OP_{self.name}"


class BlendOp(IntEnum):
    """How the pixels of a frame are written into the buffer."""

    SOURCE = 0
    OVER = 1

    def __str__(self) -> str:
        return f"BLEND_OP_{self.name}"


class Compression(Enum):
    """The type and strength of applied compression."""

    DEFAULT = "default"
    FAST = "fast"
    BEST = "best"
    # Kept for compatibility; prefer one of the levels above.
    HUFFMAN = "huffman"
    RLE = "rle"


class Transformations(IntFlag):
    """Output transformations applied while decoding."""

    IDENTITY = 0x00000
    STRIP_16 = 0x00001
    EXPAND = 0x00010
    ALPHA = 0x10000

    @classmethod
    def normalize_to_color8(cls) -> "Transformations":
        """Transform every input to 8-bit grayscale or color."""
        return cls.EXPAND | cls.STRIP_16


class ParameterError(ValueError):
    """A caller-supplied parameter does not fit the image."""


class ImageBufferSizeError(ParameterError):
    """A buffer does not have the exact size needed for the image data."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"wrong data size, expected {expected} got {actual}")


class PolledAfterEndOfImageError(ParameterError):
    """Another image was requested after the last one had been read."""

    def __init__(self) -> None:
        super().__init__("End of image has been reached")