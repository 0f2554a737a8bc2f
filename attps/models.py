"""Request and proof records exchanged with the VRF service."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

_GO_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _compact_json(value: Any) -> str:
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _GO_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


@dataclass
class VRFRequest:
    """A request for a verifiable random number."""

    version: Optional[int] = None
    target_agent_id: Optional[str] = None
    client_seed: Optional[str] = None
    key_hash: Optional[str] = None
    request_timestamp: Optional[int] = None
    request_id: Optional[str] = None
    callback_uri: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the request keyed by its wire names."""
        return {
            "version": self.version,
            "target_agent_id": self.target_agent_id,
            "client_seed": self.client_seed,
            "key_hash": self.key_hash,
            "request_timestamp": self.request_timestamp,
            "request_id": self.request_id,
            "callback_uri": self.callback_uri,
        }


@dataclass
class Provider:
    """A VRF provider: its address and key hash."""

    address: Optional[str] = None
    key_hash: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Provider:
        return cls(address=data.get("address"), key_hash=data.get("keyHash"))


_PROOF_KEYS = (
    ("public_x", "publicX"),
    ("public_y", "publicY"),
    ("gamma_x", "gammaX"),
    ("gamma_y", "gammaY"),
    ("c", "c"),
    ("s", "s"),
    ("seed", "seed"),
    ("output", "output"),
)


@dataclass
class ProofFields:
    """The hex-encoded numbers that make up a VRF proof."""

    public_x: Optional[str] = None
    public_y: Optional[str] = None
    gamma_x: Optional[str] = None
    gamma_y: Optional[str] = None
    c: Optional[str] = None
    s: Optional[str] = None
    seed: Optional[str] = None
    output: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProofFields:
        return cls(**{attr: data.get(key) for attr, key in _PROOF_KEYS})


def _proof_fields_dict(fields: ProofFields) -> dict[str, Any]:
    return {key: getattr(fields, attr) for attr, key in _PROOF_KEYS}


@dataclass
class VRFProof:
    """A proof returned for a request, keyed by the request id."""

    request_id: Optional[str] = None
    proof: Optional[ProofFields] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VRFProof:
        raw_proof = data.get("proof")
        return cls(
            request_id=data.get("requestId"),
            proof=None if raw_proof is None else ProofFields.from_dict(raw_proof),
        )

    def marshal(self) -> str:
        """Return the proof as compact JSON."""
        return _compact_json(
            {
                "requestId": self.request_id,
                "proof": None if self.proof is None else _proof_fields_dict(self.proof),
            }
        )