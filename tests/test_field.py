import pytest

from attps.cryptotest import new_stream
from attps.field import (
    Q,
    FieldElement,
    field_square,
    maybe_sqrt_in_field,
    random_int,
    right_hand_side,
)

NUM_SAMPLES = 10
ZERO = FieldElement(0)


@pytest.fixture
def stream():
    return new_stream(0)


def _picks(stream, count=NUM_SAMPLES):
    return [FieldElement.random(stream) for _ in range(count)]


@pytest.mark.parametrize("value", [5, 67108864, 67108865, 4294967295])
def test_set_int_and_equal(value):
    assert FieldElement(value) == FieldElement(value)
    assert FieldElement(value).value == value


def test_string():
    assert str(ZERO) == "fieldElt{0}"


def test_equal_with_none():
    assert [None, ZERO, None].count(ZERO) == 1
    assert [ZERO, None].index(None) == 1


def test_single_representation():
    assert FieldElement(1) == FieldElement(Q + 1)
    assert FieldElement(Q + 1).value == 1
    assert FieldElement(-1).value == Q - 1


def test_immutable_arithmetic():
    f = FieldElement(1)
    g = f + f
    assert f == FieldElement(1)
    assert g == FieldElement(2)


def test_smoke_pick(stream):
    f = FieldElement.random(stream)
    assert f.value > 1000000000


def test_picks_are_novel(stream):
    picks = _picks(stream)
    assert len(set(p.to_bytes() for p in picks)) == NUM_SAMPLES


def test_neg(stream):
    for f in _picks(stream):
        assert f + (-f) == ZERO


def test_sub(stream):
    for f in _picks(stream):
        assert f - f == ZERO


def test_bytes_round_trip(stream):
    for f in _picks(stream):
        encoded = f.to_bytes()
        assert len(encoded) == 32
        assert FieldElement.from_bytes(encoded) == f


def test_from_bytes_reduces():
    f = FieldElement.from_bytes(b"\xff" * 32)
    assert 0 <= f.value < Q
    assert f == FieldElement(int.from_bytes(b"\xff" * 32, "big"))


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        FieldElement.from_bytes(b"\x00" * 31)


def test_maybe_square_root(stream):
    assert maybe_sqrt_in_field(FieldElement(-1)) is None
    for f in _picks(stream):
        assert 0 <= f.value < Q
        s = field_square(f)
        g = maybe_sqrt_in_field(s)
        assert g is not None
        assert f == g or f == -g
        assert maybe_sqrt_in_field(-s) is None


def test_right_hand_side():
    assert right_hand_side(FieldElement(1)) == FieldElement(8)
    assert right_hand_side(FieldElement(2)) == FieldElement(15)


def test_is_even():
    assert FieldElement(2).is_even()
    assert not FieldElement(3).is_even()


def test_random_int_bounds():
    stream = new_stream(7)
    values = [random_int(10, stream) for _ in range(200)]
    assert all(0 <= v < 10 for v in values)
    assert len(set(values)) > 1


def test_random_int_deterministic():
    runs = {random_int(Q, new_stream(seed)) for seed in (4, 4, 5)}
    assert len(runs) == 2


def test_random_int_rejects_bad_modulus(stream):
    with pytest.raises(ValueError):
        random_int(0, stream)