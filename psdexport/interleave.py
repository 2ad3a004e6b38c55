"""Conversion of planar channel data into interleaved RGBA pixels."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain, repeat
from typing import TypeVar

T = TypeVar("T", int, float)


def _check_lengths(**planes: Sequence) -> int:
    lengths = {name: len(plane) for name, plane in planes.items()}
    distinct = set(lengths.values())
    if len(distinct) > 1:
        detail = ", ".join(f"{name}={size}" for name, size in lengths.items())
        raise ValueError(f"planes must have the same length ({detail})")
    return distinct.pop() if distinct else 0


def interleave_rgb(
    red: Sequence[T], green: Sequence[T], blue: Sequence[T], alpha: T
) -> list[T]:
    """Turn planar RGB data into interleaved RGBA data with a constant alpha.

    The result holds four values per pixel, in R, G, B, A order.
    """
    count = _check_lengths(red=red, green=green, blue=blue)
    return list(chain.from_iterable(zip(red, green, blue, repeat(alpha, count))))


def interleave_rgba(
    red: Sequence[T], green: Sequence[T], blue: Sequence[T], alpha: Sequence[T]
) -> list[T]:
    """Turn planar RGBA data into interleaved RGBA data.

    The result holds four values per pixel, in R, G, B, A order.
    """
    _check_lengths(red=red, green=green, blue=blue, alpha=alpha)
    return list(chain.from_iterable(zip(red, green, blue, alpha)))