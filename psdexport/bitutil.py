"""Bit manipulation helpers for power-of-two alignment."""

from __future__ import annotations


def is_power_of_two(x: int) -> bool:
    """Return whether ``x`` is a power of two (zero counts as one)."""
    return (x & (x - 1)) == 0


def _check(num_to_round: int, multiple_of: int) -> None:
    if num_to_round < 0 or multiple_of <= 0:
        raise ValueError("arguments must be non-negative, multiple must be positive")
    if not is_power_of_two(multiple_of):
        raise ValueError(f"expected a power of two, got {multiple_of}")


def round_up_to_multiple(num_to_round: int, multiple_of: int) -> int:
    """Round up to the next multiple of a power of two."""
    _check(num_to_round, multiple_of)
    return (num_to_round + (multiple_of - 1)) & ~(multiple_of - 1)


def round_down_to_multiple(num_to_round: int, multiple_of: int) -> int:
    """Round down to the previous multiple of a power of two."""
    _check(num_to_round, multiple_of)
    return num_to_round & ~(multiple_of - 1)