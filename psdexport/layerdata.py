"""Encoding of planar layer channel data for the Layer and Mask section."""

from __future__ import annotations

import struct
import zlib
from collections.abc import Sequence

from psdexport.rle import compress_rle
from psdexport.types import CompressionType

_FORMATS = {8: "B", 16: "H", 32: "f"}
_MASKS = {8: 0xFF, 16: 0xFFFF}


def _format_for(bits_per_channel: int) -> str:
    try:
        return _FORMATS[bits_per_channel]
    except KeyError:
        raise ValueError(
            f"bits per channel must be 8, 16 or 32, got {bits_per_channel}"
        ) from None


def _check_size(values: Sequence, width: int, height: int) -> int:
    if width < 0 or height < 0:
        raise ValueError(f"invalid layer size {width}x{height}")
    count = width * height
    if len(values) != count:
        raise ValueError(
            f"planar data holds {len(values)} values, expected {count} "
            f"for a {width}x{height} layer"
        )
    return count


def to_big_endian(values: Sequence, bits_per_channel: int) -> bytes:
    """Pack channel values as big-endian 8-bit, 16-bit or 32-bit float data."""
    code = _format_for(bits_per_channel)
    try:
        return struct.pack(f">{len(values)}{code}", *values)
    except struct.error as exc:
        raise ValueError(
            f"values do not fit into {bits_per_channel}-bit channel data"
        ) from exc


def encode_raw(values: Sequence, width: int, height: int, bits_per_channel: int) -> bytes:
    """Return uncompressed big-endian channel data."""
    _check_size(values, width, height)
    return to_big_endian(values, bits_per_channel)


def encode_rle(values: Sequence, width: int, height: int, bits_per_channel: int) -> bytes:
    """Return RLE channel data: one 16-bit size per row, then the packed rows."""
    _check_size(values, width, height)
    _format_for(bits_per_channel)

    sizes = bytearray()
    rows = bytearray()
    for y in range(height):
        row = to_big_endian(values[y * width:(y + 1) * width], bits_per_channel)
        packed = compress_rle(row)
        sizes += struct.pack(">H", len(packed))
        rows += packed
    return bytes(sizes + rows)


def _delta_rows_int(values: Sequence[int], width: int, height: int, mask: int):
    for y in range(height):
        row = values[y * width:(y + 1) * width]
        if not row:
            continue
        yield row[0]
        for previous, current in zip(row, row[1:]):
            yield (current - previous) & mask


def _delta_rows_float(values: Sequence[float], width: int, height: int) -> bytes:
    out = bytearray()
    for y in range(height):
        row = to_big_endian(values[y * width:(y + 1) * width], 32)
        # split each row into byte planes: all first bytes, then all second bytes, ...
        planar = b"".join(row[plane::4] for plane in range(4))
        if not planar:
            continue
        out.append(planar[0])
        out += bytes((cur - prev) & 0xFF for prev, cur in zip(planar, planar[1:]))
    return bytes(out)


def encode_zip_prediction(
    values: Sequence, width: int, height: int, bits_per_channel: int
) -> bytes:
    """Delta-encode the data row by row, then compress it with zlib."""
    _check_size(values, width, height)
    _format_for(bits_per_channel)

    if bits_per_channel == 32:
        delta = _delta_rows_float(values, width, height)
    else:
        mask = _MASKS[bits_per_channel]
        delta = to_big_endian(
            list(_delta_rows_int(values, width, height, mask)), bits_per_channel
        )
    return zlib.compress(delta)


def encode_zip(values: Sequence, width: int, height: int, bits_per_channel: int) -> bytes:
    """Compress big-endian channel data with zlib.

    32-bit data is always delta-encoded first, as Photoshop treats ZIP and
    ZIP with prediction the same for float channels.
    """
    _check_size(values, width, height)
    if bits_per_channel == 32:
        return encode_zip_prediction(values, width, height, bits_per_channel)
    return zlib.compress(to_big_endian(values, bits_per_channel))


_ENCODERS = {
    CompressionType.RAW: encode_raw,
    CompressionType.RLE: encode_rle,
    CompressionType.ZIP: encode_zip,
    CompressionType.ZIP_WITH_PREDICTION: encode_zip_prediction,
}


def encode_channel(
    values: Sequence,
    width: int,
    height: int,
    bits_per_channel: int,
    compression: int,
) -> bytes:
    """Encode planar channel data with the given compression type."""
    try:
        kind = CompressionType(compression)
    except ValueError:
        raise ValueError(f"unknown compression type {compression!r}") from None
    return _ENCODERS[kind](values, width, height, bits_per_channel)