"""Arithmetic in the base field of secp256k1."""

from __future__ import annotations

from typing import Optional, Protocol, Union

Q = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SQRT_POWER = (Q + 1) >> 2


class ByteStream(Protocol):
    def read(self, n: int) -> bytes: ...


def random_int(modulus: int, stream: ByteStream) -> int:
    """Sample uniformly from ``[0, modulus)`` using bytes from ``stream``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    bit_len = modulus.bit_length()
    n_bytes = (bit_len + 7) // 8
    mask = 0xFF >> (n_bytes * 8 - bit_len)
    while True:
        buf = bytearray(stream.read(n_bytes))
        buf[0] &= mask
        candidate = int.from_bytes(buf, "big")
        if candidate < modulus:
            return candidate


_Operand = Union["FieldElement", int]


class FieldElement:
    """An immutable element of GF(Q), always held in canonical form."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % Q

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    @staticmethod
    def _coerce(other: _Operand) -> int:
        if isinstance(other, FieldElement):
            return other._value
        if isinstance(other, int):
            return other
        raise TypeError(f"cannot combine field element with {type(other).__name__}")

    def __add__(self, other: _Operand) -> FieldElement:
        return FieldElement(self._value + self._coerce(other))

    __radd__ = __add__

    def __sub__(self, other: _Operand) -> FieldElement:
        return FieldElement(self._value - self._coerce(other))

    def __rsub__(self, other: _Operand) -> FieldElement:
        return FieldElement(self._coerce(other) - self._value)

    def __mul__(self, other: _Operand) -> FieldElement:
        return FieldElement(self._value * self._coerce(other))

    __rmul__ = __mul__

    def __neg__(self) -> FieldElement:
        return FieldElement(-self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("FieldElement", self._value))

    def __str__(self) -> str:
        return f"fieldElt{{{self._value:x}}}"

    def __repr__(self) -> str:
        return f"FieldElement(0x{self._value:x})"

    @classmethod
    def from_bytes(cls, buf: bytes) -> FieldElement:
        """Build an element from a 32-byte big-endian value, reduced mod Q."""
        if len(buf) != 32:
            raise ValueError("field element encoding must be 32 bytes")
        return cls(int.from_bytes(buf, "big"))

    def to_bytes(self) -> bytes:
        """Return the 32-byte big-endian representation."""
        return self._value.to_bytes(32, "big")

    def is_even(self) -> bool:
        return self._value % 2 == 0

    @classmethod
    def random(cls, stream: ByteStream) -> FieldElement:
        """Sample an element uniformly using bytes from ``stream``."""
        return cls(random_int(Q, stream))


def field_square(y: FieldElement) -> FieldElement:
    """Return y² mod Q."""
    return FieldElement(pow(y.value, 2, Q))


def maybe_sqrt_in_field(v: FieldElement) -> Optional[FieldElement]:
    """Return a square root of ``v``, or None if it has none."""
    s = FieldElement(pow(v.value, SQRT_POWER, Q))
    if field_square(s) != v:
        return None
    return s


def right_hand_side(x: FieldElement) -> FieldElement:
    """Return x³ + 7 mod Q, the right side of the secp256k1 equation."""
    return FieldElement(pow(x.value, 3, Q) + 7)