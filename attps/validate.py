"""Validation of identifiers, timestamps and private keys."""

from __future__ import annotations

import re
import uuid
from typing import Optional

from cryptography.hazmat.primitives.asymmetric import ec

_HEX32 = re.compile(r"[0-9a-fA-F]{32}")
_HEX_CHAR = re.compile(r"[0-9a-fA-F]")
_GROUP_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_MIN_TIMESTAMP = 1000000000000
_MAX_TIMESTAMP = 9999999999999


def _uuid_digits(text: str) -> Optional[str]:
    if len(text) == 45:
        if text[:9].lower() != "urn:uuid:":
            return None
        text = text[9:]
    elif len(text) == 38:
        if text[0] != "{" or text[-1] != "}":
            return None
        text = text[1:-1]
    elif len(text) == 32:
        return text if _HEX32.fullmatch(text) else None
    if len(text) != 36 or any(text[i] != "-" for i in (8, 13, 18, 23)):
        return None
    digits = text.replace("-", "")
    return digits if _HEX32.fullmatch(digits) else None


def is_uuid_v4(text: str) -> bool:
    """Return True when ``text`` parses as a UUID whose version is 4."""
    digits = _uuid_digits(text)
    return digits is not None and int(digits[12], 16) == 4


def new_uuid_v4() -> str:
    """Return a fresh random UUID in canonical form."""
    return str(uuid.uuid4())


def is_valid_13_digit_timestamp(timestamp: int) -> bool:
    """Return True for a millisecond timestamp with exactly 13 digits."""
    return _MIN_TIMESTAMP <= timestamp <= _MAX_TIMESTAMP


def hex_to_private_key(hex_key: str) -> ec.EllipticCurvePrivateKey:
    """Parse a 256-bit hex secp256k1 private key, with or without ``0x``."""
    if len(hex_key) > 1 and hex_key[:2] == "0x":
        hex_key = hex_key[2:]
    bad = next((c for c in hex_key if not _HEX_CHAR.fullmatch(c)), None)
    if bad is not None:
        raise ValueError(f"invalid hex character {bad!r} in private key")
    if len(hex_key) % 2:
        raise ValueError("invalid hex data for private key")
    raw = bytes.fromhex(hex_key)
    if len(raw) * 8 != 256:
        raise ValueError("invalid length, need 256 bits")
    d = int.from_bytes(raw, "big")
    if d >= _GROUP_ORDER:
        raise ValueError("invalid private key, >=N")
    if d <= 0:
        raise ValueError("invalid private key, zero or negative")
    return ec.derive_private_key(d, ec.SECP256K1())