# psdexport

Building blocks for producing Photoshop (`.psd`) data, written with the
standard library only: PackBits run-length coding, encoding of planar
channel data in the four PSD compression types, big-endian binary writing,
conversion between planar and interleaved pixels, and the enumerations and
four-character keys the format uses.

## Installation

```
pip install psdexport
```

## Modules

- `psdexport.types`: `BlendMode`, `ColorMode`, `CompressionType`,
  `ImageResource`, `ExportChannel` and `ExportColorMode` enumerations;
  `make_key` packs a four-character key such as `"8BPS"` into its 32-bit
  big-endian integer; `blend_mode_from_key` maps a key (integer or four
  characters) to a `BlendMode`, giving `BlendMode.UNKNOWN` for keys it does
  not know; `BlendMode.key` gives the key back; `blend_mode_to_string` and
  `color_mode_to_string` return mode names.
- `psdexport.rle`: `compress_rle` encodes bytes with PackBits and pads the
  result to an even length; `decompress_rle(src, size)` decodes until `size`
  bytes are produced and raises `RleError` (a `ValueError`) on malformed
  input.
- `psdexport.layerdata`: `encode_channel(values, width, height,
  bits_per_channel, compression)` turns a flat, row-ordered sequence of
  channel values (integers for 8 and 16 bits, floats for 32 bits) into
  channel bytes. The individual encoders are `encode_raw`, `encode_rle`
  (one 16-bit size per row followed by the packed rows), `encode_zip` and
  `encode_zip_prediction` (row-wise delta coding, then zlib). 32-bit data
  given to `encode_zip` is always delta-coded first. `to_big_endian` packs
  values without compression.
- `psdexport.binio`: `BigEndianWriter` wraps a binary stream, writes
  `u8`/`u16`/`i16`/`u32`/`i32`/`f32` values and raw bytes, tracks its
  `position`, and `pad_to_even(start)` adds a zero byte when an odd number
  of bytes was written since `start`. Out-of-range values raise `ValueError`.
- `psdexport.interleave`: `interleave_rgb` (constant alpha) and
  `interleave_rgba` turn planes into a flat RGBA list.
- `psdexport.deinterleave`: `deinterleave_rgb` and `deinterleave_rgba` split
  flat interleaved data into a tuple of plane lists.
- `psdexport.canvas`: `copy_layer_data` copies the part of a planar layer
  that overlaps a canvas into the canvas sequence, in place.
- `psdexport.bitutil`: `is_power_of_two`, `round_up_to_multiple` and
  `round_down_to_multiple` for power-of-two alignment.

## Example

```python
import io

from psdexport.binio import BigEndianWriter
from psdexport.layerdata import encode_channel
from psdexport.rle import compress_rle, decompress_rle
from psdexport.types import CompressionType, make_key

packed = compress_rle(b"\x00" * 4)          # b"\xfd\x00"
assert decompress_rle(packed, 4) == b"\x00" * 4

width, height = 4, 2
red = [255] * (width * height)
channel = encode_channel(red, width, height, 8, CompressionType.RLE)

stream = io.BytesIO()
writer = BigEndianWriter(stream)
writer.write_u32(make_key("8BPS"))
writer.write_u16(int(CompressionType.RLE))
writer.write(channel)
print(writer.position, len(stream.getvalue()))
```

## What this package does not do

It has no document model and no writer for whole `.psd` files: layers,
merged image, alpha channels, metadata and the file's section layout have
to be assembled by the caller from the pieces above. It does not read or
parse `.psd` files, and it has no command-line tool.