# pngkit

Pure-Python building blocks for working with PNG and APNG files.

## What it offers

- `pngkit.chunk` – `ChunkType`, a four-byte chunk code with the PNG naming-bit
  checks `is_critical`, `is_private`, `reserved_set` and `safe_to_copy`;
  constants for the standard chunk types (`IHDR`, `PLTE`, `IDAT`, `IEND`,
  `tRNS`, `gAMA`, `cHRM`, `sRGB`, `acTL`, `fcTL`, `fdAT` and others); and
  `write_chunk(stream, chunk_type, data)`, which writes a length-prefixed,
  CRC-terminated chunk to a binary stream.
- `pngkit.adam7` – Adam7 interlacing helpers: `adam7_passes(width, height)`
  yields `(pass, line, line_width)` for each non-empty reduced scanline,
  `subbyte_pixels` splits a scanline into 1-, 2- or 4-bit samples,
  `expand_adam7_bits` gives the bit positions of one pass line in the full
  image, and `expand_pass` copies a pass scanline into a `bytearray` image
  buffer in place.
- `pngkit.pixel` – the enums `ColorType` (with `samples`, row-length helpers
  and `is_combination_invalid`), `BitDepth`, `BytesPerPixel`, `Unit`,
  `DisposeOp`, `BlendOp`, `Compression`, the `Transformations` flags (with
  `normalize_to_color8`), and the errors `ParameterError`,
  `ImageBufferSizeError` and `PolledAfterEndOfImageError`.
- `pngkit.metadata` – `Info` (image header fields plus `size`, `is_animated`,
  `bits_per_pixel`, `bytes_per_pixel`, `raw_bytes`, `raw_row_length` and
  related helpers), `PixelDimensions`, and the chunk payload types
  `FrameControl`, `AnimationControl`, `ScaledFloat`, `SourceChromaticities`
  and `SrgbRenderingIntent`. `FrameControl`, `AnimationControl`,
  `SourceChromaticities` and `SrgbRenderingIntent` have an `encode(stream)`
  method that writes their chunk; `ScaledFloat.encode_gama(stream)` writes a
  gAMA chunk.

## Installation

```
pip install pngkit
```

## Example

```python
import io

from pngkit.adam7 import adam7_passes
from pngkit.chunk import write_chunk
from pngkit.pixel import BitDepth, ColorType

print(list(adam7_passes(4, 4)))
# [(1, 0, 1), (4, 0, 1), (5, 0, 2), (6, 0, 2), (6, 1, 2), (7, 0, 4), (7, 1, 4)]

print(ColorType.RGBA.raw_row_length_from_width(BitDepth.EIGHT, 2))  # 9

out = io.BytesIO()
write_chunk(out, b"IEND", b"")
print(out.getvalue().hex())  # 0000000049454e44ae426082
```

## What it does not do

pngkit does not decode or encode whole images. It has no reader that parses a
PNG stream, no scanline filtering or unfiltering, no zlib pipeline for image
data, no text-chunk (tEXt/zTXt/iTXt) types, and no command-line tool. `Info`
holds header fields and computes sizes but does not write an IHDR chunk
itself; the `Transformations` flags are definitions only.

## Running the tests

```
pip install -e ".[test]"
pytest
```