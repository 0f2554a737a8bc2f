"""Request-id derivation, request checks and proof verification for the VRF service."""

from __future__ import annotations

import re

from .codec import is_hex_string, long_to_bytes
from .hashing import keccak256
from .models import VRFProof, VRFRequest
from .point import set_coordinates
from .proof import Proof
from .validate import is_uuid_v4

_BIG_HEX = re.compile(r"[+-]?[0-9a-fA-F]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


class VRFError(ValueError):
    """Raised when a request or proof is rejected."""


def _seed_bytes(seed: str) -> bytes:
    if len(seed) >= 2 and seed[0] == "0" and seed[1] in "xX":
        seed = seed[2:]
    if not _HEX_DIGITS.fullmatch(seed):
        raise VRFError(f"invalid client seed: {seed}")
    if len(seed) % 2:
        seed = "0" + seed
    return bytes.fromhex(seed)


def cal_request_id(
    version: int,
    target_agent_id: str,
    customer_seed: str,
    request_timestamp: int,
    callback_uri: str,
) -> str:
    """Return the hex Keccak-256 id of a request's identifying fields."""
    data = (
        long_to_bytes(version)
        + target_agent_id.encode("utf-8")
        + _seed_bytes(customer_seed)
        + long_to_bytes(request_timestamp)
        + callback_uri.encode("utf-8")
    )
    return keccak256(data).hex()


def _parse_big_hex(name: str, text: object) -> int:
    if not isinstance(text, str):
        raise VRFError(f"missing proof field {name}")
    digits = text[2:] if text.startswith("0x") else text
    if not _BIG_HEX.fullmatch(digits):
        raise VRFError(f"invalid hex value for {name}: {text!r}")
    return int(digits, 16)


def verify_vrf_proof(vrf_proof: VRFProof) -> bool:
    """Return True if the proof checks out; raise VRFError otherwise."""
    fields = vrf_proof.proof
    if fields is None:
        raise VRFError("missing proof")
    values = {
        name: _parse_big_hex(name, getattr(fields, name))
        for name in ("public_x", "public_y", "gamma_x", "gamma_y", "c", "s", "seed", "output")
    }
    try:
        proof = Proof(
            public_key=set_coordinates(values["public_x"], values["public_y"]),
            gamma=set_coordinates(values["gamma_x"], values["gamma_y"]),
            c=values["c"],
            s=values["s"],
            seed=values["seed"],
            output=values["output"],
        )
        status = proof.verify()
    except ValueError as exc:
        raise VRFError(str(exc)) from exc
    if not status:
        raise VRFError("invalid proof")
    return True


def check_request_params(request: VRFRequest, expected_version: int) -> None:
    """Raise VRFError unless the request is well formed and its id matches."""
    missing = [name for name, value in request.to_dict().items() if value is None]
    if missing:
        raise VRFError(f"missing request fields: {', '.join(missing)}")
    if request.version != expected_version:
        raise VRFError(f"vrf version mismatch, must {expected_version}")
    if not is_uuid_v4(request.target_agent_id):
        raise VRFError(f"invalid target agent id: {request.target_agent_id}")
    if not is_hex_string(request.client_seed):
        raise VRFError(f"invalid client seed: {request.client_seed}")
    if not is_hex_string(request.key_hash):
        raise VRFError(f"invalid key hash: {request.key_hash}")
    request_id = cal_request_id(
        request.version,
        request.target_agent_id,
        request.client_seed,
        request.request_timestamp,
        request.callback_uri,
    )
    if request.request_id != request_id:
        raise VRFError(f"invalid request ID: {request.request_id}")