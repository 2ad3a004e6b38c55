"""PackBits run-length encoding as used for PSD channel data."""

from __future__ import annotations


class RleError(ValueError):
    """Raised when RLE data is malformed."""


def decompress_rle(src: bytes, size: int) -> bytes:
    """Decode PackBits data until ``size`` bytes have been produced."""
    data = bytes(src)
    out = bytearray()
    pos = 0
    while len(out) < size:
        if pos >= len(data):
            raise RleError("Malformed RLE data encountered")
        header = data[pos]
        pos += 1

        if header == 0x80:
            continue
        if header > 0x80:
            if pos >= len(data):
                raise RleError("Malformed RLE data encountered")
            out += bytes((data[pos],)) * (257 - header)
            pos += 1
        else:
            count = header + 1
            chunk = data[pos:pos + count]
            if len(chunk) < count:
                raise RleError("Malformed RLE data encountered")
            out += chunk
            pos += count
    return bytes(out[:size])


def compress_rle(data: bytes) -> bytes:
    """Encode data with PackBits, padded to an even number of bytes.

    The result is never longer than twice the input.
    """
    data = bytes(data)
    if not data:
        return b""

    out = bytearray()
    run_length = 0
    non_run_length = 0

    for i, (previous, current) in enumerate(zip(data, data[1:]), start=1):
        if previous == current:
            if non_run_length:
                # first repeat of a character: flush the literal bytes so far
                out.append(non_run_length - 1)
                out += data[i - non_run_length - 1:i - 1]
                non_run_length = 0

            run_length += 1
            if run_length == 128:
                out.append(257 - run_length)
                out.append(current)
                run_length = 0
        else:
            if run_length:
                run_length += 1
                out.append(257 - run_length)
                out.append(previous)
                run_length = 0
            else:
                non_run_length += 1

            if non_run_length == 128:
                out.append(non_run_length - 1)
                out += data[i - non_run_length:i]
                non_run_length = 0

    if run_length:
        run_length += 1
        out.append(257 - run_length)
        out.append(data[-1])
    else:
        non_run_length += 1
        out.append(non_run_length - 1)
        out += data[len(data) - non_run_length:]

    if len(out) & 1:
        out.append(0x80)
    return bytes(out)