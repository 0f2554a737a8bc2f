"""Arithmetic modulo the order of the secp256k1 group."""

from __future__ import annotations

from typing import Union

from .field import ByteStream, random_int

GROUP_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
FIELD_SIZE = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
MARSHAL_SIZE = 32

_Operand = Union["Scalar", int]


class Scalar:
    """An immutable integer modulo GROUP_ORDER, held in canonical form."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % GROUP_ORDER

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    @staticmethod
    def _coerce(other: _Operand) -> int:
        if isinstance(other, Scalar):
            return other._value
        if isinstance(other, int):
            return other
        raise TypeError(f"cannot combine scalar with {type(other).__name__}")

    def __add__(self, other: _Operand) -> Scalar:
        return Scalar(self._value + self._coerce(other))

    __radd__ = __add__

    def __sub__(self, other: _Operand) -> Scalar:
        return Scalar(self._value - self._coerce(other))

    def __rsub__(self, other: _Operand) -> Scalar:
        return Scalar(self._coerce(other) - self._value)

    def __mul__(self, other: _Operand) -> Scalar:
        return Scalar(self._value * self._coerce(other))

    __rmul__ = __mul__

    def __neg__(self) -> Scalar:
        return Scalar(-self._value)

    def __truediv__(self, other: _Operand) -> Scalar:
        divisor = Scalar(self._coerce(other))
        return self * divisor.inverse()

    def __rtruediv__(self, other: _Operand) -> Scalar:
        return Scalar(self._coerce(other)) / self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Scalar):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Scalar", self._value))

    def __str__(self) -> str:
        return f"scalar{{{self._value:x}}}"

    def __repr__(self) -> str:
        return f"Scalar(0x{self._value:x})"

    @classmethod
    def random(cls, stream: ByteStream) -> Scalar:
        """Sample a scalar uniformly using bytes from ``stream``."""
        return cls(random_int(GROUP_ORDER, stream))

    def inverse(self) -> Scalar:
        """Return the multiplicative inverse modulo GROUP_ORDER."""
        if self._value == 0:
            raise ZeroDivisionError("attempt to divide by zero")
        return Scalar(pow(self._value, -1, GROUP_ORDER))

    def to_bytes(self) -> bytes:
        """Return the 32-byte big-endian representation."""
        return self._value.to_bytes(MARSHAL_SIZE, "big")

    @classmethod
    def from_bytes(cls, buf: bytes) -> Scalar:
        """Build a scalar from exactly 32 big-endian bytes, reduced mod GROUP_ORDER."""
        if len(buf) != MARSHAL_SIZE:
            raise ValueError("cannot unmarshal to scalar: wrong length")
        return cls(int.from_bytes(buf, "big"))

    def allow_var_time(self, allowed: bool) -> None:
        """Accept variable-time operation; refusing it is unsupported."""
        if not allowed:
            raise RuntimeError("implementation is not constant-time!")


def represents_scalar(i: int) -> bool:
    """Return True iff ``i`` is below the group order."""
    return i < GROUP_ORDER


def scalar_to_hash(s: Scalar) -> bytes:
    """Return the scalar as a 32-byte big-endian word."""
    return s.to_bytes()