"""Arbitrary-precision integer helpers with Euclidean division semantics."""

from __future__ import annotations

from collections.abc import Iterable

ZERO = 0
ONE = 1
TWO = 2
THREE = 3
FOUR = 4
SEVEN = 7


def add(addend1: int, addend2: int) -> int:
    """Return the sum of the two values."""
    return addend1 + addend2


def mod(dividend: int, divisor: int) -> int:
    """Return the Euclidean remainder, always in ``[0, |divisor|)``."""
    return dividend % abs(divisor)


def div(dividend: int, divisor: int) -> int:
    """Return the Euclidean quotient, so ``dividend == q*divisor + mod(...)``."""
    return (dividend - mod(dividend, divisor)) // divisor


def equal(left: int, right: int) -> bool:
    """Return True when both values are equal."""
    return left == right


def exp(base: int, exponent: int, modulus: int = 0) -> int:
    """Return ``base**exponent``, reduced modulo ``|modulus|`` when it is non-zero."""
    if not modulus:
        return 1 if exponent <= 0 else base**exponent
    return pow(base, exponent, abs(modulus))


def mul(multiplicand: int, multiplier: int) -> int:
    """Return the product of the two values."""
    return multiplicand * multiplier


def sub(minuend: int, subtrahend: int) -> int:
    """Return ``minuend - subtrahend``."""
    return minuend - subtrahend


def maximum(x: int, y: int) -> int:
    """Return the larger of the two values."""
    return x if x > y else y


def minimum(x: int, y: int) -> int:
    """Return the smaller of the two values."""
    return x if x < y else y


def accumulate(values: Iterable[int]) -> int:
    """Return the sum of all values (0 for an empty iterable)."""
    return sum(values, ZERO)