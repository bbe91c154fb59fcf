"""Small integer utilities: Armstrong numbers, base conversion, primality."""

from __future__ import annotations


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(abs(n))]


def is_armstrong(n: int) -> bool:
    """Return True if the sum of the cubes of the digits of ``n`` equals ``n``."""
    sign = -1 if n < 0 else 1
    return sign * sum(d**3 for d in _digits(n)) == n


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as bits and return their value.

    Only digits equal to 1 contribute; other digits count as zero.
    """
    if n < 0:
        raise ValueError("binary digits must form a non-negative number")
    return sum(1 << power for power, digit in enumerate(reversed(_digits(n))) if digit == 1)


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell the binary form of ``n``."""
    if n < 0:
        raise ValueError("only non-negative numbers can be converted")
    return int(format(n, "b"))


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division up to n // 2."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))


def countdown(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    if n < 0:
        raise ValueError("countdown needs a non-negative start")
    return list(range(n, 0, -1))