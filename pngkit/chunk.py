"""PNG chunk types and chunk serialisation."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass
from typing import BinaryIO, Union

_MAX_CHUNK_LENGTH = 0xFFFFFFFF


@dataclass(frozen=True)
class ChunkType:
    """A four-byte PNG chunk type code."""

    code: bytes

    def __post_init__(self) -> None:
        code = bytes(self.code)
        if len(code) != 4:
            raise ValueError(f"chunk type must be 4 bytes long, got {len(code)}")
        object.__setattr__(self, "code", code)

    def is_critical(self) -> bool:
        """True if the chunk is critical (first letter upper case)."""
        return self.code[0] & 32 == 0

    def is_private(self) -> bool:
        """True if the chunk is private (second letter lower case)."""
        return self.code[1] & 32 != 0

    def reserved_set(self) -> bool:
        """True if the reserved bit is set, which makes the name invalid."""
        return self.code[2] & 32 != 0

    def safe_to_copy(self) -> bool:
        """True if the chunk is safe to copy when unknown."""
        return self.code[3] & 32 != 0

    def __str__(self) -> str:
        return self.code.decode("ascii", "backslashreplace")

    def __repr__(self) -> str:
        return (
            f"ChunkType(type={str(self)!r}, critical={self.is_critical()}, "
            f"private={self.is_private()}, reserved={self.reserved_set()}, "
            f"safecopy={self.safe_to_copy()})"
        )


# Critical chunks
IHDR = ChunkType(b"IHDR")
PLTE = ChunkType(b"PLTE")
IDAT = ChunkType(b"IDAT")
IEND = ChunkType(b"IEND")

# Ancillary chunks
tRNS = ChunkType(b"tRNS")
bKGD = ChunkType(b"bKGD")
tIME = ChunkType(b"tIME")
pHYs = ChunkType(b"pHYs")
cHRM = ChunkType(b"cHRM")
gAMA = ChunkType(b"gAMA")
sRGB = ChunkType(b"sRGB")
iCCP = ChunkType(b"iCCP")
tEXt = ChunkType(b"tEXt")
zTXt = ChunkType(b"zTXt")
iTXt = ChunkType(b"iTXt")

# Animation extension chunks
acTL = ChunkType(b"acTL")
fcTL = ChunkType(b"fcTL")
fdAT = ChunkType(b"fdAT")


def write_chunk(
    stream: BinaryIO, chunk_type: Union[ChunkType, bytes], data: bytes
) -> None:
    """Write one chunk (length, type, data, CRC) to a binary stream."""
    if not isinstance(chunk_type, ChunkType):
        chunk_type = ChunkType(chunk_type)
    data = bytes(data)
    if len(data) > _MAX_CHUNK_LENGTH:
        raise ValueError(f"chunk data too long: {len(data)} bytes")
    crc = zlib.crc32(chunk_type.code + data) & 0xFFFFFFFF
    stream.write(struct.pack(">I", len(data)))
    stream.write(chunk_type.code)
    stream.write(data)
    stream.write(struct.pack(">I", crc))