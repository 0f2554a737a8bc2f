import pytest

from attps import bigmath


def test_maximum():
    assert bigmath.maximum(1, 2) == 2
    assert bigmath.maximum(2, 1) == 2


def test_minimum():
    assert bigmath.minimum(1, 2) == 1
    assert bigmath.minimum(2, 1) == 1


def test_accumulate():
    assert bigmath.accumulate([1, 2, 3, 4, 5]) == 15
    assert bigmath.accumulate([]) == 0


@pytest.mark.parametrize(
    "dividend,divisor",
    [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (10, 5)],
)
def test_euclidean_division_invariant(dividend, divisor):
    q = bigmath.div(dividend, divisor)
    r = bigmath.mod(dividend, divisor)
    assert dividend == q * divisor + r
    assert 0 <= r < abs(divisor)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        bigmath.div(1, 0)


def test_exp_modular_and_plain():
    assert bigmath.exp(3, 4, 5) == pow(3, 4, 5)
    assert bigmath.exp(2, 10) == 1024
    assert bigmath.exp(5, 0) == 1
    assert 0 <= bigmath.exp(3, 5, -7) < 7


def test_arithmetic_basics():
    assert bigmath.add(2, 3) == 5
    assert bigmath.sub(2, 3) == -1
    assert bigmath.mul(4, 6) == 24
    assert bigmath.equal(7, 7)
    assert not bigmath.equal(7, 8)