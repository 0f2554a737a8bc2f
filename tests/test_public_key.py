import pytest

from attps.hashing import keccak256
from attps.point import Point, ethereum_address, long_marshal
from attps.public_key import PublicKey
from attps.scalar import Scalar


def _generator_key() -> PublicKey:
    return PublicKey.from_bytes(Point.generator().marshal())


def test_round_trip_through_bytes_and_point():
    assert _generator_key().point() == Point.generator()


def test_str_and_from_hex_round_trip():
    key = _generator_key()
    text = str(key)
    assert text.startswith("0x")
    assert PublicKey.from_hex(text) == key
    assert PublicKey.from_hex("0X" + text[2:]) == key


def test_uncompressed_hex():
    key = _generator_key()
    assert key.uncompressed_hex() == "0x" + long_marshal(Point.generator()).hex()


def test_hash_matches_keccak_of_long_marshal():
    key = _generator_key()
    assert key.hash() == keccak256(long_marshal(Point.generator()))


def test_address_known_example():
    private = Scalar(0x3A1076BF45AB87712AD64CCB3B10217737F7FAACBF2872E88FDD9A537D8FE266)
    public = Point.generator() * private
    key = PublicKey.from_bytes(public.marshal())
    assert key.address().hex() == "c2d7cf95645d33006175b78989035c7c9061d3f9"
    assert key.address() == ethereum_address(public)


def test_address_of_invalid_key_is_zero():
    raw = bytearray(33)
    raw[31] = 5
    key = PublicKey.from_bytes(bytes(raw))
    assert key.address() == bytes(20)
    with pytest.raises(ValueError, match="does not correspond to a curve point"):
        key.point()


def test_is_zero():
    assert PublicKey().is_zero()
    assert not _generator_key().is_zero()


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError, match="wrong length for public key"):
        PublicKey.from_bytes(bytes(32))


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty hex string"),
        ("00" * 33, "without 0x prefix"),
        ("0x123", "odd length"),
        ("0xzz", "invalid hex string"),
        ("0x" + "00" * 32, "wrong length for public key"),
    ],
)
def test_from_hex_errors(text, message):
    with pytest.raises(ValueError, match=message):
        PublicKey.from_hex(text)