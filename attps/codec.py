"""Hex, hashing and ABI encoding helpers."""

from __future__ import annotations

import re
import secrets
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit

from .hashing import keccak256

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_HEX_PAIRS_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
_WORD = 32


def _decode_hex(text: str) -> bytes:
    if text and not _HEX_RE.fullmatch(text):
        raise ValueError(f"invalid hex character in {text!r}")
    if len(text) % 2:
        raise ValueError("odd length hex string")
    return bytes.fromhex(text)


def _lenient_from_hex(text: str) -> bytes:
    if len(text) >= 2 and text[0] == "0" and text[1] in "xX":
        text = text[2:]
    if len(text) % 2:
        text = "0" + text
    return bytes.fromhex(_HEX_PAIRS_RE.match(text).group())


def hex_string_to_bytes32(hex_string: str) -> bytes:
    """Decode a hex string into 32 bytes.

    Invalid hex raises ValueError; a value of the wrong length yields 32 zero bytes.
    """
    if len(hex_string) > 2 and hex_string[:2] == "0x":
        hex_string = hex_string[2:]
    data = _decode_hex(hex_string)
    if len(data) != 32:
        return bytes(32)
    return data


def string_to_keccak256(text: str) -> bytes:
    """Return the Keccak-256 digest of the UTF-8 encoded text."""
    return keccak256(text.encode("utf-8"))


def hex_string_to_keccak256(hex_string: str) -> str:
    """Hash the bytes a hex string encodes and return the digest as hex."""
    if len(hex_string) > 1 and hex_string[:2] == "0x":
        hex_string = hex_string[2:]
    try:
        data = _decode_hex(hex_string)
    except ValueError as exc:
        raise ValueError(f"invalid hex string: {exc}") from exc
    return keccak256(data).hex()


@dataclass(frozen=True)
class SignatureData:
    """An ECDSA signature split into its r, s and v parts."""

    r: bytes
    s: bytes
    v: int

    def __post_init__(self) -> None:
        if len(self.r) != 32 or len(self.s) != 32:
            raise ValueError("r and s must be 32 bytes each")
        if not 0 <= self.v <= 0xFF:
            raise ValueError("v must fit in one byte")


def encode_signature_strings(signatures: Iterable[str]) -> bytes:
    """ABI-encode signatures given as hex strings."""
    return encode_signatures(_lenient_from_hex(sig) for sig in signatures)


def encode_signatures(signatures: Iterable[bytes]) -> bytes:
    """ABI-encode 65-byte signatures (r ‖ s ‖ v)."""
    parsed = []
    for signature in signatures:
        if len(signature) != 65:
            raise ValueError("invalid signature")
        parsed.append(SignatureData(bytes(signature[:32]), bytes(signature[32:64]), signature[64]))
    return encode_signature_data(parsed)


def _encode_array(words: list[bytes]) -> bytes:
    return len(words).to_bytes(_WORD, "big") + b"".join(words)


def encode_signature_data(signatures: Iterable[SignatureData]) -> bytes:
    """ABI-encode signatures as the tuple (bytes32[] r, bytes32[] s, uint8[] v)."""
    sigs = list(signatures)
    tails = [
        _encode_array([sig.r for sig in sigs]),
        _encode_array([sig.s for sig in sigs]),
        _encode_array([sig.v.to_bytes(_WORD, "big") for sig in sigs]),
    ]
    head = b""
    offset = _WORD * len(tails)
    for tail in tails:
        head += offset.to_bytes(_WORD, "big")
        offset += len(tail)
    return head + b"".join(tails)


def long_to_bytes(n: int) -> bytes:
    """Return a signed 64-bit integer as 8 big-endian bytes."""
    return n.to_bytes(8, "big", signed=True)


def is_hex_string(s: str) -> bool:
    """Return True when ``s`` is a non-empty string of hex digits."""
    return _HEX_RE.fullmatch(s) is not None


def secure_random_string(length: int) -> str:
    """Return ``length // 2`` random alphanumerics, hex-encoded."""
    if length < 0:
        raise ValueError("length must be non-negative")
    random_bytes = secrets.token_bytes(length // 2)
    chosen = "".join(_CHARSET[b % len(_CHARSET)] for b in random_bytes)
    return chosen.encode("ascii").hex()


def is_valid_http_base_url(text: str) -> bool:
    """Return True for an http or https URL that names a host."""
    try:
        parsed = urlsplit(text)
    except ValueError:
        return False
    if parsed.scheme not in ("http", "https"):
        return False
    return bool(parsed.netloc.rpartition("@")[2])