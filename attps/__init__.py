"""Secp256k1 VRF proof verification, request IDs and signature encoding for ATTPs clients."""

__version__ = "0.1.0"