import io
import struct
import zlib

import pytest

from pngkit import chunk
from pngkit.chunk import ChunkType, write_chunk


def _ihdr_rgba8(width):
    return struct.pack(">IIBBBBB", width, width, 8, 6, 0, 0, 0)


def test_ihdr_flags():
    assert chunk.IHDR.is_critical() is True
    assert chunk.IHDR.is_private() is False
    assert chunk.IHDR.reserved_set() is False
    assert chunk.IHDR.safe_to_copy() is False


def test_text_flags():
    assert chunk.tEXt.is_critical() is False
    assert chunk.tEXt.is_private() is False
    assert chunk.tEXt.reserved_set() is False
    assert chunk.tEXt.safe_to_copy() is True


def test_private_and_reserved():
    ct = ChunkType(b"abcd")
    assert ct.is_critical() is False
    assert ct.is_private() is True
    assert ct.reserved_set() is True
    assert ct.safe_to_copy() is True


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        ChunkType(b"abc")


def test_equality_and_str():
    assert ChunkType(bytearray(b"IDAT")) == chunk.IDAT
    assert str(chunk.fcTL) == "fcTL"
    assert "critical=True" in repr(chunk.IEND)


def test_write_iend_bytes():
    buf = io.BytesIO()
    write_chunk(buf, b"IEND", b"")
    assert buf.getvalue() == bytes.fromhex("0000000049454e44ae426082")


def test_write_ihdr_layout():
    buf = io.BytesIO()
    data = _ihdr_rgba8(8)
    write_chunk(buf, chunk.IHDR, data)
    out = buf.getvalue()
    assert len(out) == 12 + 13
    assert out[:4] == b"\x00\x00\x00\x0d"
    assert out[4:8] == b"IHDR"
    assert out[8:21] == data
    (crc,) = struct.unpack(">I", out[21:])
    assert crc == zlib.crc32(out[4:21]) & 0xFFFFFFFF


def test_write_chunk_bad_type():
    with pytest.raises(ValueError):
        write_chunk(io.BytesIO(), b"IDATX", b"")