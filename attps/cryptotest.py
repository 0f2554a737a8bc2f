"""Deterministic byte streams for reproducible tests of randomised code."""

from __future__ import annotations

import random


class DeterministicStream:
    """A seeded pseudo-random byte source; never use it for secrets."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    def read(self, n: int) -> bytes:
        """Return the next ``n`` pseudo-random bytes."""
        if n < 0:
            raise ValueError("cannot read a negative number of bytes")
        return self._rng.randbytes(n)


def new_stream(seed: int) -> DeterministicStream:
    """Return a stream seeded from ``seed``."""
    return DeterministicStream(seed)