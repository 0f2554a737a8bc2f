"""Curve helpers mirroring the on-chain VRF verifier's computations."""

from __future__ import annotations

from typing import Callable, Optional

from .hashing import keccak256, uint256_to_bytes32
from .point import Point, Secp256k1, long_marshal, set_coordinates, valid_public_key
from .scalar import Scalar

FIELD_SIZE = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP256K1_CURVE = Secp256k1()
GENERATOR = Point.generator()
_EULERS_CRITERION_POWER = (FIELD_SIZE - 1) // 2
_SQRT_POWER = (FIELD_SIZE + 1) // 4

HASH_TO_CURVE_HASH_PREFIX = (1).to_bytes(32, "big")
SCALAR_FROM_CURVE_HASH_PREFIX = (2).to_bytes(32, "big")
RANDOM_OUTPUT_HASH_PREFIX = (3).to_bytes(32, "big")


class CGammaEqualsSHashError(ValueError):
    """Raised when c*gamma equals s*hash, which the verifier forbids."""

    def __init__(self, message: str = "pick a different nonce; c*gamma = s*hash, with this one"):
        super().__init__(message)


def _neg(f: int) -> int:
    return FIELD_SIZE - f


def _projective_sub(x1: int, z1: int, x2: int, z2: int) -> tuple[int, int]:
    num1 = z2 * x1
    num2 = _neg(z1 * x2)
    return (num1 + num2) % FIELD_SIZE, (z1 * z2) % FIELD_SIZE


def _projective_mul(x1: int, z1: int, x2: int, z2: int) -> tuple[int, int]:
    return x1 * x2, z1 * z2


def projective_ec_add(p: Point, q: Point) -> tuple[int, int, int]:
    """Return projective (x, y, z) of p + q, as computed by the verifier."""
    px, py = p.x.value, p.y.value
    qx, qy = q.x.value, q.y.value
    lx = qy - py
    lz = qx - px

    sx, dx = _projective_mul(lx, lz, lx, lz)
    sx, dx = _projective_sub(sx, dx, px, 1)
    sx, dx = _projective_sub(sx, dx, qx, 1)

    sy, dy = _projective_sub(px, 1, sx, dx)
    sy, dy = _projective_mul(sy, dy, lx, lz)
    sy, dy = _projective_sub(sy, dy, py, 1)

    sx, sy, sz = sx * dy, sy * dx, dx * dy
    return sx % FIELD_SIZE, sy % FIELD_SIZE, sz % FIELD_SIZE


def is_square(x: int) -> bool:
    """Return True iff x is a non-zero square in GF(FIELD_SIZE)."""
    return pow(x, _EULERS_CRITERION_POWER, FIELD_SIZE) == 1


def square_root(x: int) -> int:
    """Return a square root of x, assuming x is a square."""
    return pow(x, _SQRT_POWER, FIELD_SIZE)


def y_squared(x: int) -> int:
    """Return x³ + 7 mod FIELD_SIZE."""
    return (pow(x, 3, FIELD_SIZE) + 7) % FIELD_SIZE


def is_curve_x_ordinate(x: int) -> bool:
    """Return True iff some y satisfies y² = x³ + 7."""
    return is_square(y_squared(x))


def field_hash(msg: bytes) -> int:
    """Hash ``msg`` uniformly into [0, FIELD_SIZE)."""
    rv = int.from_bytes(keccak256(msg), "big")
    while rv >= FIELD_SIZE:
        rv = int.from_bytes(keccak256(rv.to_bytes(32, "big")), "big")
    return rv


def linear_combination(c: int, p1: Point, s: int, p2: Point) -> Point:
    """Return c*p1 + s*p2."""
    return p1 * Scalar(c) + p2 * Scalar(s)


def check_c_gamma_not_equal_to_s_hash(c: int, gamma: Point, s: int, hash_point: Point) -> None:
    """Raise CGammaEqualsSHashError if c*gamma == s*hash_point."""
    if gamma * Scalar(c) == hash_point * Scalar(s):
        raise CGammaEqualsSHashError()


def hash_to_curve(
    p: Point,
    input_value: int,
    ordinates: Optional[Callable[[int], None]] = None,
) -> Point:
    """Hash a public key and input to a curve point with even y.

    Each candidate x ordinate is passed to ``ordinates`` when given.
    """
    if not (valid_public_key(p) and 0 <= input_value and input_value.bit_length() <= 256):
        raise ValueError("bad input to vrf.HashToCurve")
    report = ordinates or (lambda _x: None)
    x = field_hash(HASH_TO_CURVE_HASH_PREFIX + long_marshal(p) + uint256_to_bytes32(input_value))
    report(x)
    while not is_curve_x_ordinate(x):
        x = field_hash(x.to_bytes(32, "big"))
        report(x)
    y = square_root(y_squared(x))
    rv = set_coordinates(x, y)
    if y % 2 == 1:
        rv = -rv
    return rv


def scalar_from_curve_points(
    hash_point: Point, pk: Point, gamma: Point, u_witness: bytes, v: Point
) -> int:
    """Return the challenge hash over the given points and 20-byte witness."""
    if not all(valid_public_key(pt) for pt in (hash_point, pk, gamma, v)):
        raise ValueError("bad arguments to vrf.ScalarFromCurvePoints")
    if len(u_witness) != 20:
        raise ValueError("u witness must be 20 bytes")
    msg = SCALAR_FROM_CURVE_HASH_PREFIX + b"".join(
        long_marshal(pt) for pt in (hash_point, pk, gamma, v)
    ) + bytes(u_witness)
    return int.from_bytes(keccak256(msg), "big")