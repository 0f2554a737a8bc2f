"""Compressed secp256k1 public keys as used for VRF key identification."""

from __future__ import annotations

from dataclasses import dataclass, field

from .hashing import must_hash
from .point import MARSHAL_SIZE, Point, long_marshal

COMPRESSED_PUBLIC_KEY_LENGTH = MARSHAL_SIZE
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _decode_prefixed_hex(text: str) -> bytes:
    if not text:
        raise ValueError("empty hex string")
    if len(text) < 2 or text[0] != "0" or text[1] not in "xX":
        raise ValueError("hex string without 0x prefix")
    digits = text[2:]
    if len(digits) % 2:
        raise ValueError("hex string of odd length")
    if any(c not in _HEX_DIGITS for c in digits):
        raise ValueError("invalid hex string")
    return bytes.fromhex(digits)


@dataclass(frozen=True)
class PublicKey:
    """A secp256k1 point in compressed form: 32-byte x, then a parity byte."""

    raw: bytes = field(default=bytes(COMPRESSED_PUBLIC_KEY_LENGTH))

    def __post_init__(self) -> None:
        if len(self.raw) != COMPRESSED_PUBLIC_KEY_LENGTH:
            raise ValueError(
                f"wrong length for public key: {self.raw!r} of length {len(self.raw)}"
            )
        object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def from_hex(cls, text: str) -> PublicKey:
        """Parse a 0x-prefixed hex string holding the compressed key."""
        try:
            raw = _decode_prefixed_hex(text)
        except ValueError as exc:
            raise ValueError(f"while parsing {text} as public key: {exc}") from exc
        return cls.from_bytes(raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> PublicKey:
        """Build a key from exactly 33 bytes."""
        return cls(bytes(raw))

    def point(self) -> Point:
        """Return the curve point this key encodes."""
        return Point.unmarshal(self.raw)

    def uncompressed_hex(self) -> str:
        """Return x ‖ y of the point as 0x-hex."""
        return "0x" + long_marshal(self.point()).hex()

    def hash(self) -> bytes:
        """Return the Keccak-256 hash of the uncompressed point."""
        return must_hash(long_marshal(self.point()))

    def address(self) -> bytes:
        """Return the 20-byte Ethereum address, or zeros for an invalid key."""
        try:
            digest = self.hash()
        except ValueError:
            return bytes(20)
        return digest[12:]

    def is_zero(self) -> bool:
        """Return True iff every byte of the key is zero."""
        return not any(self.raw)

    def __str__(self) -> str:
        return "0x" + self.raw.hex()