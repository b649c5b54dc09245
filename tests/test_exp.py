import pytest

from bn128kit.exp import naf_mul_by_scalar
from bn128kit.naf import build_naf
from bn128kit.primefield import PrimeField

R = 21888242871839275222246405745257275088548364400416034343698204186575808495617
F = PrimeField(R)


class AdditiveGroup:
    zero = 0

    def __init__(self):
        self.dbl_count = 0

    def add(self, a, b):
        return F.add(a, b)

    def sub(self, a, b):
        return F.sub(a, b)

    def dbl(self, a):
        self.dbl_count += 1
        return F.dbl(a)


class MultiplicativeGroup:
    zero = 1

    def add(self, a, b):
        return F.mul(a, b)

    def sub(self, a, b):
        return F.div(a, b)

    def dbl(self, a):
        return F.square(a)


@pytest.mark.parametrize("k", [0, 1, 2, 3, 5, 65, 255, 256, 2**64 + 7, R - 1])
def test_additive_matches_field_mul(k):
    scalar = k.to_bytes(32, "little")
    assert naf_mul_by_scalar(AdditiveGroup(), 7, scalar) == F.mul(7, k)


@pytest.mark.parametrize("k", [1, 3, 65, 123456789, R - 2])
def test_multiplicative_matches_field_exp(k):
    scalar = k.to_bytes(32, "little")
    assert naf_mul_by_scalar(MultiplicativeGroup(), 3, scalar) == F.exp(3, scalar)


def test_times_group_order_is_zero():
    g = AdditiveGroup()
    assert naf_mul_by_scalar(g, 12345, R.to_bytes(32, "little")) == g.zero


def test_zero_scalar_gives_identity_without_doubling():
    g = AdditiveGroup()
    assert naf_mul_by_scalar(g, 9, bytes(32)) == g.zero
    assert g.dbl_count == 0


def test_int_scalar_same_as_bytes():
    g = AdditiveGroup()
    k = 987654321987654321
    assert naf_mul_by_scalar(g, 11, k) == naf_mul_by_scalar(g, 11, k.to_bytes(16, "little"))


def test_doubling_count_follows_naf_length():
    g = AdditiveGroup()
    scalar = (0xBEEF).to_bytes(4, "little")
    naf = build_naf(scalar)
    top = max(i for i, d in enumerate(naf) if d)
    naf_mul_by_scalar(g, 2, scalar)
    assert g.dbl_count == top + 1


def test_negative_int_scalar_rejected():
    with pytest.raises(ValueError):
        naf_mul_by_scalar(AdditiveGroup(), 1, -5)