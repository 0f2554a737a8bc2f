import os

import pytest

from attps.cryptotest import new_stream
from attps.field import FieldElement
from attps.point import (
    EMBED_LEN,
    KeyPair,
    Point,
    Secp256k1,
    coordinates,
    ethereum_address,
    generate,
    is_secp256k1_point,
    long_marshal,
    long_unmarshal,
    scalar_to_public_point,
    set_coordinates,
    valid_public_key,
)
from attps.scalar import Scalar

SAMPLES = 10


@pytest.fixture
def stream():
    return new_stream(0)


def _on_curve(p):
    x, y = coordinates(p)
    q = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
    return (y * y - x * x * x - 7) % q == 0


def test_group_string():
    assert str(Secp256k1()) == "Secp256k1"


def test_group_constructors():
    group = Secp256k1()
    assert group.scalar_len() == 32
    assert group.scalar() == Scalar(0)
    assert group.point_len() == 33
    assert group.point() == Point(0, 0)


def test_point_string():
    assert str(Point.identity()) == "Secp256k1{X: fieldElt{0}, Y: fieldElt{0}}"


def test_random_points_are_distinct_and_on_curve(stream):
    seen = set()
    for _ in range(SAMPLES):
        p = Point.random(stream)
        assert _on_curve(p)
        assert p not in seen
        seen.add(p)


def test_equal_coordinates_give_equal_points(stream):
    p = Point.random(stream)
    assert Point(p.x, p.y) == p
    assert p + p != p


def test_identity_and_add(stream):
    for _ in range(SAMPLES):
        p = Point.random(stream)
        assert p + Point.identity() == p
        assert Point.identity() + p == p


def test_generator_is_not_identity():
    assert Point.generator() != Point.identity()
    assert valid_public_key(Point.generator())


def test_embed_roundtrip(stream):
    for _ in range(SAMPLES):
        data = os.urandom(EMBED_LEN)
        p = Point.embed(data, stream)
        assert _on_curve(p)
        assert p.embedded_data() == data


def test_embedded_data_too_long():
    buf = bytearray(32)
    buf[0] = 30
    p = Point(FieldElement.from_bytes(bytes(buf)), 0)
    with pytest.raises(ValueError, match="specifies too much data"):
        p.embedded_data()


def test_embed_too_much_data(stream):
    with pytest.raises(ValueError, match="too much data to embed in a point"):
        Point.embed(bytes(EMBED_LEN + 1), stream)


def test_add_sub_and_neg(stream):
    for _ in range(SAMPLES):
        q = Point.random(stream)
        assert q - q == Point.identity()
        assert -q + q == Point.identity()
        assert q - (-q) == q + q


def test_mul(stream):
    one = Scalar(1)
    g = Point.generator()
    assert g * one == g
    assert 2 * g == g + g
    for _ in range(2):
        p = Point.random(stream)
        multiplier = Scalar.random(stream)
        assert p * one == p
        assert p * multiplier + p * (-multiplier) == Point.identity()
        assert g * multiplier + g * (-multiplier) == Point.identity()


def test_mul_by_zero_gives_identity(stream):
    p = Point.random(stream)
    assert p * Scalar(0) == Point.identity()


def test_marshal_roundtrip(stream):
    for _ in range(SAMPLES):
        p = Point.random(stream)
        serialized = p.marshal()
        assert len(serialized) == 33
        assert Point.unmarshal(serialized) == p


def test_marshal_errors():
    with pytest.raises(ValueError, match="not a square"):
        Point(0, 5).marshal()
    with pytest.raises(ValueError, match="not a point on the curve"):
        Point(1, 5).marshal()


def test_unmarshal_errors():
    data = bytearray(34)
    with pytest.raises(ValueError, match="wrong length for marshaled point"):
        Point.unmarshal(bytes(data))
    with pytest.raises(ValueError, match="wrong length for marshaled point"):
        Point.unmarshal(bytes(data[:32]))
    data[32] = 2
    with pytest.raises(ValueError, match="bad sign byte"):
        Point.unmarshal(bytes(data[:33]))
    data[32] = 0
    data[31] = 5
    with pytest.raises(ValueError, match="does not correspond to a curve point"):
        Point.unmarshal(bytes(data[:33]))


def test_generator_unchanged_by_arithmetic():
    p = Point.generator()
    doubled = p + p
    assert doubled != Point.generator()
    assert Point.generator() == p


def test_ethereum_address():
    private = Scalar(0x3A1076BF45AB87712AD64CCB3B10217737F7FAACBF2872E88FDD9A537D8FE266)
    public = Point.generator() * private
    assert ethereum_address(public).hex() == "c2d7cf95645d33006175b78989035c7c9061d3f9"


def test_is_secp256k1_point():
    assert not is_secp256k1_point((0, 0))
    assert is_secp256k1_point(Point.identity())


def test_coordinates():
    assert coordinates(Point.identity()) == (0, 0)


def test_valid_public_key():
    assert not valid_public_key(Point.identity())
    assert valid_public_key(Point.generator())
    assert not valid_public_key(None)


def test_generate(stream):
    pair = generate(stream)
    assert isinstance(pair, KeyPair)
    assert valid_public_key(pair.public)
    assert pair.public == Point.generator() * pair.private


def test_long_marshal_roundtrip(stream):
    p = Point.random(stream)
    encoded = long_marshal(p)
    assert len(encoded) == 64
    assert long_unmarshal(encoded) == p


def test_long_unmarshal_errors():
    with pytest.raises(ValueError, match="Should be length 64, but is length 3"):
        long_unmarshal(b"\x00\x01\x02")
    with pytest.raises(ValueError, match="is not a valid secp256k1 point"):
        long_unmarshal(bytes(64))


def test_scalar_to_public_point():
    assert scalar_to_public_point(Scalar(1)) == Point.generator()
    assert scalar_to_public_point(Scalar(2)) == Point.generator() + Point.generator()


def test_set_coordinates():
    g = Point.generator()
    x, y = coordinates(g)
    assert set_coordinates(x, y) == g
    with pytest.raises(ValueError, match="invalid coordinates"):
        set_coordinates(1, 5)