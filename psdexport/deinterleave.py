"""Conversion of interleaved pixel data into separate planes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T", int, float)


def _split(data: Sequence[T], components: int) -> tuple[list[T], ...]:
    if len(data) % components:
        raise ValueError(
            f"interleaved data of length {len(data)} is not a whole number "
            f"of {components}-component pixels"
        )
    return tuple(list(data[offset::components]) for offset in range(components))


def deinterleave_rgb(rgb: Sequence[T]) -> tuple[list[T], list[T], list[T]]:
    """Split interleaved RGB data into red, green and blue planes."""
    red, green, blue = _split(rgb, 3)
    return red, green, blue


def deinterleave_rgba(
    rgba: Sequence[T],
) -> tuple[list[T], list[T], list[T], list[T]]:
    """Split interleaved RGBA data into red, green, blue and alpha planes."""
    red, green, blue, alpha = _split(rgba, 4)
    return red, green, blue, alpha