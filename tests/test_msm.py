import random
from functools import reduce

import pytest

from bn128kit.msm import MSM
from bn128kit.primefield import PrimeField

R = 21888242871839275222246405745257275088548364400416034343698204186575808495617
F = PrimeField(R)


class AdditiveGroup:
    zero = 0

    def add(self, a, b):
        return F.add(a, b)

    def sub(self, a, b):
        return F.sub(a, b)

    def dbl(self, a):
        return F.dbl(a)

    def is_zero(self, a):
        return F.is_zero(a)

    def mul_by_scalar(self, base, scalar):
        return F.mul(base, int.from_bytes(scalar, "little"))


G = AdditiveGroup()


def pack(values, size):
    return b"".join(v.to_bytes(size, "little") for v in values)


def naive(bases, values, size):
    terms = [G.mul_by_scalar(b, v.to_bytes(size, "little")) for b, v in zip(bases, values)]
    return reduce(G.add, terms, G.zero)


def test_sum_of_squares_like_source():
    n = 1500
    one = 3
    bases = []
    for i in range(n):
        bases.append(one if i == 0 else G.add(bases[-1], one))
    values = [i + 1 for i in range(n)]
    acc = sum(v * v for v in values)
    result = MSM(G).run(bases, pack(values, 32), 32)
    assert result == G.mul_by_scalar(one, acc.to_bytes(32, "little"))


@pytest.mark.parametrize("n", [2, 8, 50, 300])
def test_random_matches_naive(n):
    rng = random.Random(n)
    bases = [rng.randrange(R) for _ in range(n)]
    values = [rng.randrange(R) for _ in range(n)]
    assert MSM(G).run(bases, pack(values, 32), 32) == naive(bases, values, 32)


def test_thread_counts_agree():
    rng = random.Random(11)
    bases = [rng.randrange(R) for _ in range(40)]
    buf = pack([rng.randrange(R) for _ in bases], 32)
    msm = MSM(G)
    assert msm.run(bases, buf, 32, 1) == msm.run(bases, buf, 32, 4)


def test_small_scalars_like_source_eight_points():
    rng = random.Random(12)
    bases = [rng.randrange(R) for _ in range(8)]
    values = [1, 4, 4, 4, 8, 10, 1, 5]
    assert MSM(G).run(bases, pack(values, 32), 32) == naive(bases, values, 32)


def test_eight_byte_scalars():
    rng = random.Random(13)
    bases = [rng.randrange(R) for _ in range(20)]
    values = [rng.randrange(1 << 60) for _ in bases]
    assert MSM(G).run(bases, pack(values, 8), 8) == naive(bases, values, 8)


def test_empty_and_single():
    msm = MSM(G)
    assert msm.run([], b"", 32) == G.zero
    buf = pack([17], 32)
    assert msm.run([4], buf, 32) == G.mul_by_scalar(4, buf)


def test_too_few_scalar_bytes_rejected():
    with pytest.raises(ValueError):
        MSM(G).run([1, 2], bytes(40), 32)


def test_non_positive_scalar_size_rejected():
    with pytest.raises(ValueError):
        MSM(G).run([1, 2], b"", 0)