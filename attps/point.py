"""Points on the secp256k1 curve, with (0, 0) standing for the identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .field import ByteStream, FieldElement, Q, maybe_sqrt_in_field, right_hand_side
from .hashing import keccak256
from .scalar import GROUP_ORDER, MARSHAL_SIZE as SCALAR_MARSHAL_SIZE, Scalar

GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
MARSHAL_SIZE = 33
EMBED_LEN = (255 - 8 - 8) // 8
_MAX_EMBED_ATTEMPTS = 10000

_Coordinate = Union[FieldElement, int]
_Multiplier = Union[Scalar, int]


class Point:
    """An immutable affine point; the identity is represented as (0, 0)."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: _Coordinate = 0, y: _Coordinate = 0) -> None:
        self._x = x if isinstance(x, FieldElement) else FieldElement(x)
        self._y = y if isinstance(y, FieldElement) else FieldElement(y)

    @property
    def x(self) -> FieldElement:
        return self._x

    @property
    def y(self) -> FieldElement:
        return self._y

    @classmethod
    def identity(cls) -> Point:
        """Return the group identity (the point at infinity)."""
        return cls(0, 0)

    @classmethod
    def generator(cls) -> Point:
        """Return the standard secp256k1 base point."""
        return cls(GX, GY)

    @property
    def is_identity(self) -> bool:
        return self._x.value == 0 and self._y.value == 0

    @classmethod
    def random(cls, stream: ByteStream) -> Point:
        """Sample a random curve point using bytes from ``stream``."""
        while True:
            x = FieldElement.random(stream)
            y = maybe_sqrt_in_field(right_hand_side(x))
            if y is not None:
                if stream.read(1)[0] & 1 == 0:
                    y = -y
                return cls(x, y)

    @classmethod
    def embed(cls, data: Optional[bytes], stream: ByteStream) -> Point:
        """Return a curve point whose x ordinate carries ``data``."""
        if data is not None and len(data) > EMBED_LEN:
            raise ValueError("too much data to embed in a point")
        prefix = b"" if data is None else bytes([len(data)]) + bytes(data)
        if not prefix:
            prefix = b"\x00"
        for _ in range(_MAX_EMBED_ATTEMPTS):
            buf = prefix + stream.read(32 - len(prefix))
            x = FieldElement.from_bytes(buf)
            y = maybe_sqrt_in_field(right_hand_side(x))
            if y is not None:
                return cls(x, y)
        raise RuntimeError("failed to find point satisfying all constraints")

    def embedded_data(self) -> bytes:
        """Return the data embedded in this point's x ordinate."""
        b = self._x.to_bytes()
        length = b[0]
        if length > EMBED_LEN:
            raise ValueError("point specifies too much data")
        return b[1 : length + 1]

    def marshal(self) -> bytes:
        """Return the compressed form: 32-byte x, then 0 for even y or 1 for odd."""
        root = maybe_sqrt_in_field(right_hand_side(self._x))
        if root is None:
            raise ValueError("x³+7 not a square")
        if self._y != root and self._y != -root:
            raise ValueError("y ≠ ±maybeSqrt(x³+7), so not a point on the curve")
        return self._x.to_bytes() + bytes([0 if self._y.is_even() else 1])

    @classmethod
    def unmarshal(cls, buf: bytes) -> Point:
        """Decode a point from its 33-byte compressed form."""
        if len(buf) != MARSHAL_SIZE:
            raise ValueError("wrong length for marshaled point")
        sign = buf[32]
        if sign not in (0, 1):
            raise ValueError("bad sign byte (the last one)")
        x = FieldElement.from_bytes(bytes(buf[:32]))
        y = maybe_sqrt_in_field(right_hand_side(x))
        if y is None:
            raise ValueError("x ordinate does not correspond to a curve point")
        if (sign == 0) != y.is_even():
            y = -y
        return cls(x, y)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return _add(self, other)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return _add(self, Point(other._x, -other._y))

    def __neg__(self) -> Point:
        return Point(self._x, -self._y)

    def __mul__(self, multiplier: _Multiplier) -> Point:
        if isinstance(multiplier, Scalar):
            k = multiplier.value
        elif isinstance(multiplier, int):
            k = multiplier % GROUP_ORDER
        else:
            return NotImplemented
        return _scalar_mult(self, k)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Point):
            return self._x == other._x and self._y == other._y
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Point", self._x.value, self._y.value))

    def __str__(self) -> str:
        return f"Secp256k1{{X: {self._x}, Y: {self._y}}}"

    def __repr__(self) -> str:
        return f"Point(0x{self._x.value:x}, 0x{self._y.value:x})"


def _double(p: Point) -> Point:
    x, y = p.x.value, p.y.value
    if p.is_identity or y == 0:
        return Point.identity()
    lam = 3 * x * x * pow(2 * y, -1, Q) % Q
    x3 = (lam * lam - 2 * x) % Q
    y3 = (lam * (x - x3) - y) % Q
    return Point(x3, y3)


def _add(p: Point, q: Point) -> Point:
    if p.is_identity:
        return q
    if q.is_identity:
        return p
    x1, y1 = p.x.value, p.y.value
    x2, y2 = q.x.value, q.y.value
    if x1 == x2:
        if y1 == y2:
            return _double(p)
        return Point.identity()
    lam = (y2 - y1) * pow(x2 - x1, -1, Q) % Q
    x3 = (lam * lam - x1 - x2) % Q
    y3 = (lam * (x1 - x3) - y1) % Q
    return Point(x3, y3)


def _scalar_mult(p: Point, k: int) -> Point:
    result = Point.identity()
    if k == 0 or p.is_identity:
        return result
    addend = p
    while k:
        if k & 1:
            result = _add(result, addend)
        addend = _double(addend)
        k >>= 1
    return result


@dataclass(frozen=True)
class KeyPair:
    """A private scalar together with its public point."""

    private: Scalar
    public: Point


class Secp256k1:
    """The secp256k1 group: factory for scalars and points."""

    def __str__(self) -> str:
        return "Secp256k1"

    def scalar_len(self) -> int:
        return SCALAR_MARSHAL_SIZE

    def point_len(self) -> int:
        return MARSHAL_SIZE

    def scalar(self) -> Scalar:
        return Scalar(0)

    def point(self) -> Point:
        return Point.identity()


def ethereum_address(p: Point) -> bytes:
    """Return the 20-byte Ethereum address of ``p`` taken as a public key."""
    return keccak256(long_marshal(p))[12:]


def is_secp256k1_point(p: object) -> bool:
    return isinstance(p, Point)


def coordinates(p: Point) -> tuple[int, int]:
    """Return the affine coordinates of ``p`` as integers."""
    return p.x.value, p.y.value


def valid_public_key(p: object) -> bool:
    """Return True iff ``p`` is a point lying on the curve."""
    if not isinstance(p, Point):
        return False
    root = maybe_sqrt_in_field(right_hand_side(p.x))
    return root is not None and (p.y == root or p.y == -root)


def generate(stream: ByteStream) -> KeyPair:
    """Generate a key pair whose public key is a valid curve point."""
    while True:
        private = Scalar.random(stream)
        public = Point.generator() * private
        if valid_public_key(public):
            return KeyPair(private, public)


def long_marshal(p: Point) -> bytes:
    """Return x ‖ y, each as a 32-byte big-endian word."""
    return p.x.to_bytes() + p.y.to_bytes()


def long_unmarshal(m: bytes) -> Point:
    """Decode a point from 64 bytes of concatenated coordinates."""
    if len(m) != 64:
        raise ValueError(
            f"0x{bytes(m).hex()} does not represent an uncompressed secp256k1Point. "
            f"Should be length 64, but is length {len(m)}"
        )
    p = Point(int.from_bytes(m[:32], "big"), int.from_bytes(m[32:], "big"))
    if not valid_public_key(p):
        raise ValueError(f"{p} is not a valid secp256k1 point")
    return p


def scalar_to_public_point(s: Scalar) -> Point:
    """Return ``s`` times the generator."""
    return Point.generator() * s


def set_coordinates(x: int, y: int) -> Point:
    """Return the point (x, y), raising ValueError if it is not on the curve."""
    p = Point(x, y)
    if not valid_public_key(p):
        raise ValueError("point requested from invalid coordinates")
    return p