# attps

Client-side tools for verifiable random numbers (VRF) issued by an ATTPs
service. The package verifies the secp256k1 VRF proofs that a provider
returns, computes and checks the request ID that a random-number request
must carry, and ABI-encodes ECDSA signatures the way on-chain verifiers
expect them.

Everything runs locally in pure Python.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Verifying a VRF proof

A proof comes back from the service as JSON. Load the decoded document with
`VRFProof.from_dict` and hand it to `verify_vrf_proof`:

```python
from attps.models import VRFProof
from attps.vrf import VRFError, verify_vrf_proof

document = {
    "requestId": "297ad27913e541f293700c63960f9e6bdc840b2982ec6be363c0852a8c7c403b",
    "proof": {
        "publicX": "0xed3bace23c5e17652e174c835fb72bf53ee306b3406a26890221b4cef7500f88",
        "publicY": "0xe57a6f571288ccffdcda5e8a7a1f87bf97bd17be084895d0fce17ad5e335286e",
        "gammaX": "0x7ce22e7667f955f5dcc805a5bae7f78d21d0cb04eb5190f3b8e20b68a45d0b87",
        "gammaY": "0xc8f9d9e8d5e4eb22adf379df733a8b1ce4edf26a2ca9a4a3d8a07cb3e3dffd9",
        "c": "0x45945e1b7362a7026df893d39496eb838b6d85264f56899182269be4d53d6fe",
        "s": "0x7ebf871ad068ce4bbe04cd726e359334581881b4e78da352b7ac413ebcf90a2",
        "seed": "0xd3ea21873da2909f9f732966278cc022d523006ea574a58b324b83c0c08a5346",
        "output": "0x11449014f7e3fb46f190149f5c147242300ccdb0e77a58fa53e01972939a3f14",
    },
}

proof = VRFProof.from_dict(document)
try:
    verify_vrf_proof(proof)
except VRFError as exc:
    print("proof rejected:", exc)
else:
    print("proof is valid")

print(proof.marshal())  # compact JSON
```

`verify_vrf_proof` returns `True` for a good proof and raises `VRFError`
otherwise: when a field is missing or not hexadecimal, when a point lies off
the curve, when the proof is badly formed, or when the challenge or output
does not match.

## Building and checking a request

The request ID is the Keccak-256 hash of the version, target agent ID,
client seed, timestamp and callback URI:

```python
from attps.vrf import cal_request_id

request_id = cal_request_id(
    1,
    "f2464336-fbcf-4603-bda5-ce65c0318fb6",
    "1234",
    1739265192,
    "http://127.0.0.1:8888/api/vrf/proof",
)
# '6f71619f1e6ea42616c9bbdc8fe001511e0c37b72373dc259857b29c1e61597c'
```

`check_request_params(request, expected_version)` validates a `VRFRequest`:
every field present, the expected version, a UUIDv4 target agent ID,
hexadecimal client seed and key hash, and a request ID that matches the
other fields. It raises `VRFError` when a check fails. `VRFRequest.to_dict()`
returns the request keyed by its wire names; `Provider.from_dict` reads a
provider entry (`address`, `keyHash`).

Helpers for the individual fields live in `attps.validate`
(`is_uuid_v4`, `new_uuid_v4`, `is_valid_13_digit_timestamp`,
`hex_to_private_key`) and `attps.codec` (`is_hex_string`,
`secure_random_string`, `is_valid_http_base_url`, `long_to_bytes`).

## Hashing and signature encoding

```python
from attps.codec import hex_string_to_keccak256, string_to_keccak256

string_to_keccak256("hello world").hex()
# '47173285a8d7341e5e972fc677286384f802f8ef42a5ec5f03bbfa254cb01fad'

hex_string_to_keccak256("0x68656c6c6f20776f726c64")
# '47173285a8d7341e5e972fc677286384f802f8ef42a5ec5f03bbfa254cb01fad'
```

`encode_signature_strings` takes 65-byte `r‖s‖v` signatures as hex and
returns the ABI encoding of `(bytes32[] r, bytes32[] s, uint8[] v)`;
`encode_signatures` and `encode_signature_data` accept raw bytes and
`SignatureData` values respectively. A signature that is not 65 bytes raises
`ValueError`. `hex_string_to_bytes32` decodes a hex string into 32 bytes,
giving 32 zero bytes when the decoded value has another length.

## Lower-level building blocks

- `attps.point` — secp256k1 points (`Point`, `Secp256k1`, `KeyPair`,
  `generate`, `long_marshal`, `long_unmarshal`, `set_coordinates`,
  `ethereum_address`).
- `attps.scalar` — scalars modulo the group order (`Scalar`).
- `attps.field` — base-field elements (`FieldElement`).
- `attps.public_key` — compressed public keys (`PublicKey`) with their
  Keccak hash and Ethereum address.
- `attps.vrf_crypto` — hash-to-curve and the other primitives the on-chain
  verifier uses.
- `attps.proof` — the `Proof` object and its `verify` method.
- `attps.suite` — `new_blake_keccak_secp256k1()`, a suite bundling the
  curve, Keccak-256 and a system random stream.
- `attps.hashing` — `keccak256`, `must_hash`, `uint256_to_bytes32`.
- `attps.bigmath` — integer helpers with Euclidean division.
- `attps.cryptotest` — `new_stream(seed)`, a deterministic random stream
  for reproducible tests.

## What this package does not do

It has no HTTP client: it does not list providers, send random-number
requests or fetch proofs from a service. Make those calls with your own
HTTP library and pass the decoded JSON to `VRFProof.from_dict` and
`Provider.from_dict`. It also does not build, sign or send Ethereum
transactions, and it has no command-line tool.

The curve arithmetic is not constant-time and should not handle secret keys
in settings where timing side channels matter.