import pytest

from dsakit.numbers import (
    binary_to_decimal,
    countdown,
    decimal_to_binary,
    is_armstrong,
    is_prime,
)


@pytest.mark.parametrize("n", [0, 1, 153, 370, 371, 407])
def test_armstrong_numbers(n):
    assert is_armstrong(n) is True


@pytest.mark.parametrize("n", [2, 10, 100, 154, 372])
def test_not_armstrong_numbers(n):
    assert is_armstrong(n) is False


def test_decimal_to_binary_pinned():
    assert decimal_to_binary(5) == 101


@pytest.mark.parametrize("n", range(0, 200))
def test_binary_round_trip(n):
    assert binary_to_decimal(decimal_to_binary(n)) == n


def test_binary_digits_are_only_zero_or_one():
    for n in range(64):
        assert set(str(decimal_to_binary(n))) <= {"0", "1"}


def test_conversions_reject_negative():
    with pytest.raises(ValueError):
        decimal_to_binary(-3)
    with pytest.raises(ValueError):
        binary_to_decimal(-101)


def test_primes_below_twenty():
    assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]


def test_products_are_not_prime():
    for a in range(2, 15):
        for b in range(2, 15):
            assert is_prime(a * b) is False


def test_countdown_from_source():
    result = countdown(8)
    assert result[0] == 8
    assert result[-1] == 1
    assert len(result) == 8
    assert all(a - b == 1 for a, b in zip(result, result[1:]))


def test_countdown_zero_is_empty():
    assert countdown(0) == []


def test_countdown_negative_raises():
    with pytest.raises(ValueError):
        countdown(-1)