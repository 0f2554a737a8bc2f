"""Keccak-256 hashing and 256-bit encoding helpers."""

from __future__ import annotations

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """Return the legacy Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def uint256_to_bytes32(n: int) -> bytes:
    """Return ``n`` as a 32-byte big-endian word."""
    if n < 0:
        raise ValueError("uint256 must be non-negative")
    if n.bit_length() > 256:
        raise ValueError("too big to marshal to uint256")
    return n.to_bytes(32, "big")


def must_hash(data: bytes | str) -> bytes:
    """Return the 32-byte Keccak-256 hash of ``data``."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return keccak256(data)