import io
import struct

import pytest

from psdexport.binio import BigEndianWriter


def _writer():
    stream = io.BytesIO()
    return stream, BigEndianWriter(stream)


def test_u16_is_big_endian():
    stream, writer = _writer()
    writer.write_u16(1)
    assert stream.getvalue() == b"\x00\x01"


def test_i16_negative():
    stream, writer = _writer()
    writer.write_i16(-1)
    assert stream.getvalue() == b"\xff\xff"


def test_u32_byte_order():
    stream, writer = _writer()
    writer.write_u32(0x01020304)
    assert stream.getvalue() == bytes([1, 2, 3, 4])


@pytest.mark.parametrize(
    "method, fmt, value",
    [
        ("write_u8", ">B", 200),
        ("write_u16", ">H", 65535),
        ("write_i16", ">h", -32768),
        ("write_u32", ">I", 4294967295),
        ("write_i32", ">i", -123456),
        ("write_f32", ">f", 16.0),
    ],
)
def test_values_round_trip(method, fmt, value):
    stream, writer = _writer()
    getattr(writer, method)(value)
    assert struct.unpack(fmt, stream.getvalue()) == (value,)


def test_f32_rounds_to_single_precision():
    stream, writer = _writer()
    writer.write_f32(0.23)
    (decoded,) = struct.unpack(">f", stream.getvalue())
    assert decoded == pytest.approx(0.23, rel=1e-6)
    assert len(stream.getvalue()) == struct.calcsize(">f")


def test_position_tracks_bytes_written():
    stream, writer = _writer()
    writer.write_u8(1)
    writer.write_u32(2)
    writer.write(b"hello")
    writer.write(bytearray(b"xy"))
    assert writer.position == len(stream.getvalue())


def test_position_starts_at_stream_offset():
    stream = io.BytesIO()
    stream.write(b"abc")
    writer = BigEndianWriter(stream)
    assert writer.position == 3
    writer.write_u16(7)
    assert writer.position == len(stream.getvalue())


def test_pad_to_even_after_odd_write():
    stream, writer = _writer()
    start = writer.position
    writer.write(b"x")
    padded = writer.pad_to_even(start)
    assert (writer.position - start) % 2 == 0
    assert stream.getvalue() == b"x" + b"\x00" * padded
    assert padded > 0


def test_pad_to_even_after_even_write_adds_nothing():
    stream, writer = _writer()
    start = writer.position
    writer.write(b"xy")
    writer.pad_to_even(start)
    assert stream.getvalue() == b"xy"


@pytest.mark.parametrize(
    "method, value",
    [
        ("write_u8", 256),
        ("write_u8", -1),
        ("write_u16", -1),
        ("write_u16", 65536),
        ("write_i16", 40000),
        ("write_u32", 2**32),
        ("write_i32", 2**31),
    ],
)
def test_out_of_range_raises(method, value):
    stream, writer = _writer()
    with pytest.raises(ValueError):
        getattr(writer, method)(value)
    assert stream.getvalue() == b""
    assert writer.position == 0