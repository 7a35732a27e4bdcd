"""Image header information and the ancillary metadata carried with it."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, BinaryIO, ClassVar, Optional

from .chunk import acTL, cHRM, fcTL, gAMA, sRGB, write_chunk
from .pixel import (
    BitDepth,
    BlendOp,
    BytesPerPixel,
    ColorType,
    Compression,
    DisposeOp,
    Unit,
)

_U32_MAX = 0xFFFFFFFF


def _f32(value: float) -> float:
    """Round a float to single precision, overflowing to infinity."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass
class PixelDimensions:
    """Physical pixel dimensions (pHYs)."""

    xppu: int
    yppu: int
    unit: Unit = Unit.UNSPECIFIED


@dataclass
class FrameControl:
    """Frame control information of an animated image (fcTL)."""

    sequence_number: int = 0
    width: int = 0
    height: int = 0
    x_offset: int = 0
    y_offset: int = 0
    delay_num: int = 1
    delay_den: int = 30
    dispose_op: DisposeOp = DisposeOp.NONE
    blend_op: BlendOp = BlendOp.SOURCE

    def inc_seq_num(self, i: int) -> None:
        """Advance the sequence number by ``i``."""
        self.sequence_number += i

    def to_bytes(self) -> bytes:
        """The 26-byte payload of the fcTL chunk."""
        try:
            return struct.pack(
                ">IIIIIHHBB",
                self.sequence_number,
                self.width,
                self.height,
                self.x_offset,
                self.y_offset,
                self.delay_num,
                self.delay_den,
                int(self.dispose_op),
                int(self.blend_op),
            )
        except struct.error as exc:
            raise ValueError(f"frame control field out of range: {exc}") from exc

    def encode(self, stream: BinaryIO) -> None:
        """Write the fcTL chunk to a binary stream."""
        write_chunk(stream, fcTL, self.to_bytes())


@dataclass
class AnimationControl:
    """Animation control information (acTL)."""

    num_frames: int
    num_plays: int = 0

    def to_bytes(self) -> bytes:
        """The 8-byte payload of the acTL chunk."""
        try:
            return struct.pack(">II", self.num_frames, self.num_plays)
        except struct.error as exc:
            raise ValueError(f"animation control field out of range: {exc}") from exc

    def encode(self, stream: BinaryIO) -> None:
        """Write the acTL chunk to a binary stream."""
        write_chunk(stream, acTL, self.to_bytes())


@dataclass(frozen=True)
class ScaledFloat:
    """A float stored as an unsigned integer scaled by 100000."""

    scaled: int

    SCALING: ClassVar[float] = 100_000.0

    def __post_init__(self) -> None:
        if not 0 <= self.scaled <= _U32_MAX:
            raise ValueError(f"scaled value out of range: {self.scaled}")

    @staticmethod
    def in_range(value: float) -> bool:
        """Whether the value lies within the representable range."""
        value = _f32(value)
        if not value >= 0.0:
            return False
        product = _f32(value * ScaledFloat.SCALING)
        if math.isinf(product):
            return False
        return math.floor(product) <= _f32(float(_U32_MAX))

    @staticmethod
    def exact(value: float) -> bool:
        """Whether the value survives conversion and back unchanged."""
        back = ScaledFloat._reverse(ScaledFloat._forward(value))
        return _f32(value) == back

    @staticmethod
    def _forward(value: float) -> int:
        value = _f32(value)
        if math.isnan(value) or value < 0.0:
            value = 0.0
        product = _f32(value * ScaledFloat.SCALING)
        if math.isinf(product):
            return _U32_MAX
        return min(math.floor(product), _U32_MAX)

    @staticmethod
    def _reverse(encoded: int) -> float:
        return _f32(_f32(float(encoded)) / ScaledFloat.SCALING)

    @classmethod
    def from_value(cls, value: float) -> "ScaledFloat":
        """Scale and quantize a float, clamping it into the representable range."""
        return cls(cls._forward(value))

    @classmethod
    def from_scaled(cls, val: int) -> "ScaledFloat":
        """Build from a value already scaled as per the specification."""
        return cls(val)

    def value(self) -> float:
        """The unscaled floating point value."""
        return self._reverse(self.scaled)

    def encode_gama(self, stream: BinaryIO) -> None:
        """Write this value as a gAMA chunk."""
        write_chunk(stream, gAMA, struct.pack(">I", self.scaled))


@dataclass(frozen=True)
class SourceChromaticities:
    """Chromaticities of the color space primaries (cHRM)."""

    white: tuple[ScaledFloat, ScaledFloat]
    red: tuple[ScaledFloat, ScaledFloat]
    green: tuple[ScaledFloat, ScaledFloat]
    blue: tuple[ScaledFloat, ScaledFloat]

    @classmethod
    def from_floats(
        cls,
        white: tuple[float, float],
        red: tuple[float, float],
        green: tuple[float, float],
        blue: tuple[float, float],
    ) -> "SourceChromaticities":
        """Build from (x, y) float pairs."""

        def pair(xy: tuple[float, float]) -> tuple[ScaledFloat, ScaledFloat]:
            x, y = xy
            return ScaledFloat.from_value(x), ScaledFloat.from_value(y)

        return cls(pair(white), pair(red), pair(green), pair(blue))

    def to_be_bytes(self) -> bytes:
        """The 32-byte big-endian payload of the cHRM chunk."""
        values = (
            v.scaled for xy in (self.white, self.red, self.green, self.blue) for v in xy
        )
        return struct.pack(">8I", *values)

    def encode(self, stream: BinaryIO) -> None:
        """Write the cHRM chunk to a binary stream."""
        write_chunk(stream, cHRM, self.to_be_bytes())


class SrgbRenderingIntent(IntEnum):
    """Rendering intent of an sRGB image."""

    PERCEPTUAL = 0
    RELATIVE_COLORIMETRIC = 1
    SATURATION = 2
    ABSOLUTE_COLORIMETRIC = 3

    def encode(self, stream: BinaryIO) -> None:
        """Write the sRGB chunk to a binary stream."""
        write_chunk(stream, sRGB, bytes([int(self)]))


@dataclass
class Info:
    """Header information of a PNG image."""

    width: int = 0
    height: int = 0
    bit_depth: BitDepth = BitDepth.EIGHT
    color_type: ColorType = ColorType.GRAYSCALE
    interlaced: bool = False
    trns: Optional[bytes] = None
    pixel_dims: Optional[PixelDimensions] = None
    palette: Optional[bytes] = None
    gama_chunk: Optional[ScaledFloat] = None
    chrm_chunk: Optional[SourceChromaticities] = None
    frame_control: Optional[FrameControl] = None
    animation_control: Optional[AnimationControl] = None
    compression: Compression = Compression.FAST
    source_gamma: Optional[ScaledFloat] = None
    source_chromaticities: Optional[SourceChromaticities] = None
    srgb: Optional[SrgbRenderingIntent] = None
    icc_profile: Optional[bytes] = None
    uncompressed_latin1_text: list[Any] = field(default_factory=list)
    compressed_latin1_text: list[Any] = field(default_factory=list)
    utf8_text: list[Any] = field(default_factory=list)

    @classmethod
    def with_size(cls, width: int, height: int) -> "Info":
        """Default info with the given dimensions."""
        return cls(width=width, height=height)

    def size(self) -> tuple[int, int]:
        """Width and height."""
        return self.width, self.height

    def is_animated(self) -> bool:
        """True if the image carries both frame and animation control."""
        return self.frame_control is not None and self.animation_control is not None

    def bits_per_pixel(self) -> int:
        """Number of bits per pixel."""
        return self.color_type.samples() * int(self.bit_depth)

    def bytes_per_pixel(self) -> int:
        """Number of bytes per pixel, rounded up to whole bytes per sample."""
        return self.color_type.samples() * ((int(self.bit_depth) + 7) >> 3)

    def bpp_in_prediction(self) -> BytesPerPixel:
        """Byte distance used by the scanline filters."""
        return BytesPerPixel(self.bytes_per_pixel())

    def raw_bytes(self) -> int:
        """Bytes needed for one deinterlaced image, filter bytes included."""
        return self.height * self.raw_row_length()

    def raw_row_length(self) -> int:
        """Bytes needed for one deinterlaced row, filter byte included."""
        return self.raw_row_length_from_width(self.width)

    def checked_raw_row_length(self) -> Optional[int]:
        """Row length, or None if it cannot be represented."""
        return self.color_type.checked_raw_row_length(self.bit_depth, self.width)

    def raw_row_length_from_width(self, width: int) -> int:
        """Bytes needed for one row of the given width, filter byte included."""
        return self.color_type.raw_row_length_from_width(self.bit_depth, width)