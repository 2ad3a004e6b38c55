import pytest

from psdexport.bitutil import (
    is_power_of_two,
    round_down_to_multiple,
    round_up_to_multiple,
)


@pytest.mark.parametrize("x", [1, 2, 4, 8, 16, 1024, 1 << 40])
def test_powers_of_two(x):
    assert is_power_of_two(x) is True


@pytest.mark.parametrize("x", [3, 5, 6, 12, 1000])
def test_not_powers_of_two(x):
    assert is_power_of_two(x) is False


def test_zero_counts_as_power_of_two():
    assert is_power_of_two(0) is True


@pytest.mark.parametrize("multiple", [1, 2, 4, 8, 16])
@pytest.mark.parametrize("value", list(range(0, 40)))
def test_round_up_invariants(value, multiple):
    result = round_up_to_multiple(value, multiple)
    assert result % multiple == 0
    assert value <= result < value + multiple


@pytest.mark.parametrize("multiple", [1, 2, 4, 8, 16])
@pytest.mark.parametrize("value", list(range(0, 40)))
def test_round_down_invariants(value, multiple):
    result = round_down_to_multiple(value, multiple)
    assert result % multiple == 0
    assert value - multiple < result <= value


def test_pascal_name_padding_example():
    # a name of 5 characters plus its length byte is padded to 8 bytes
    assert round_up_to_multiple(5 + 1, 4) == 8


def test_multiples_are_unchanged():
    assert round_up_to_multiple(12, 4) == 12
    assert round_down_to_multiple(12, 4) == 12


def test_round_down_example():
    assert round_down_to_multiple(7, 4) == 4


@pytest.mark.parametrize("func", [round_up_to_multiple, round_down_to_multiple])
def test_non_power_of_two_multiple_raises(func):
    with pytest.raises(ValueError):
        func(10, 3)


@pytest.mark.parametrize("func", [round_up_to_multiple, round_down_to_multiple])
def test_negative_value_raises(func):
    with pytest.raises(ValueError):
        func(-1, 4)


@pytest.mark.parametrize("func", [round_up_to_multiple, round_down_to_multiple])
def test_zero_multiple_raises(func):
    with pytest.raises(ValueError):
        func(5, 0)