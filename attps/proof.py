"""Verification of VRF proofs over secp256k1."""

from __future__ import annotations

from dataclasses import dataclass

from .hashing import must_hash
from .point import Point, ethereum_address, long_marshal, valid_public_key
from .scalar import represents_scalar
from .vrf_crypto import (
    GENERATOR,
    RANDOM_OUTPUT_HASH_PREFIX,
    CGammaEqualsSHashError,
    check_c_gamma_not_equal_to_s_hash,
    hash_to_curve,
    linear_combination,
    scalar_from_curve_points,
)


class ProofError(ValueError):
    """Raised when a proof cannot be checked at all."""


@dataclass(frozen=True)
class Proof:
    """A proof that ``gamma`` was derived from ``seed`` under ``public_key``."""

    public_key: Point
    gamma: Point
    c: int
    s: int
    seed: int
    output: int

    def __str__(self) -> str:
        return (
            f"vrf.Proof{{PublicKey: {self.public_key}, Gamma: {self.gamma}, "
            f"C: {self.c:x}, S: {self.s:x}, Seed: {self.seed:x}, Output: {self.output:x}}}"
        )

    def well_formed(self) -> bool:
        """Return True iff the fields pass the basic domain checks."""
        return (
            valid_public_key(self.public_key)
            and valid_public_key(self.gamma)
            and represents_scalar(self.c)
            and represents_scalar(self.s)
            and abs(self.output).bit_length() <= 256
        )

    def verify(self) -> bool:
        """Return True iff gamma and output were produced as the protocol requires.

        Raises ProofError when the proof is malformed or uses a forbidden nonce.
        """
        if not self.well_formed():
            raise ProofError("badly-formatted proof")
        h = hash_to_curve(self.public_key, self.seed)
        try:
            check_c_gamma_not_equal_to_s_hash(self.c, self.gamma, self.s, h)
        except CGammaEqualsSHashError as exc:
            raise ProofError("c*γ = s*hash (disallowed in solidity verifier)") from exc
        u_prime = linear_combination(self.c, self.public_key, self.s, GENERATOR)
        v_prime = linear_combination(self.c, self.gamma, self.s, h)
        u_witness = ethereum_address(u_prime)
        c_prime = scalar_from_curve_points(h, self.public_key, self.gamma, u_witness, v_prime)
        output = int.from_bytes(
            must_hash(RANDOM_OUTPUT_HASH_PREFIX + long_marshal(self.gamma)), "big"
        )
        return self.c == c_prime and self.output == output