"""A cipher suite combining secp256k1, Keccak-256 and a random source."""

from __future__ import annotations

import os
from typing import Optional

from Crypto.Hash import keccak

from .field import ByteStream
from .point import Secp256k1


class SystemRandomStream:
    """A byte source backed by the operating system's secure generator."""

    def read(self, n: int) -> bytes:
        """Return ``n`` cryptographically secure random bytes."""
        if n < 0:
            raise ValueError("cannot read a negative number of bytes")
        return os.urandom(n)


class Suite(Secp256k1):
    """The secp256k1 group with Keccak-256 hashing and a random stream."""

    def __init__(self, stream: Optional[ByteStream] = None) -> None:
        self._stream = stream

    def hash(self):
        """Return a fresh legacy Keccak-256 hash object."""
        return keccak.new(digest_bits=256)

    def random_stream(self) -> ByteStream:
        """Return the configured stream, or a secure system stream."""
        if self._stream is not None:
            return self._stream
        return SystemRandomStream()


def new_blake_keccak_secp256k1() -> Suite:
    """Return a suite that draws randomness from the operating system."""
    return Suite()