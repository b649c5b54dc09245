import pytest

from bn128kit.alt_bn128 import get_engine
from bn128kit.fft import FFT
from bn128kit.primefield import PrimeField


@pytest.fixture(scope="module")
def fr():
    return get_engine().fr


def test_fft_ifft_roundtrip_1024(fr):
    n = 1 << 10
    a = [fr.from_int(i + 1) for i in range(n)]
    fft = FFT(fr, n)
    back = fft.ifft(fft.fft(a))
    assert all(fr.eq(x, fr.from_int(i + 1)) for i, x in enumerate(back))


def test_fft_matches_naive_evaluation(fr):
    n = 8
    fft = FFT(fr, n)
    coeffs = [fr.from_int(3 * i + 7) for i in range(n)]
    w = fft.root(3, 1)
    result = fft.fft(coeffs)
    for k in range(n):
        point = fr.exp(w, k)
        value = 0
        for c in reversed(coeffs):
            value = fr.add(fr.mul(value, point), c)
        assert fr.eq(result[k], value)


def test_fft_does_not_modify_input(fr):
    fft = FFT(fr, 4)
    a = [1, 2, 3, 4]
    fft.fft(a)
    assert a == [1, 2, 3, 4]


def test_root_orders(fr):
    fft = FFT(fr, 16)
    w = fft.root(4, 1)
    assert fr.is_one(fr.exp(w, 16))
    assert fr.eq(fr.exp(w, 8), fr.neg_one)


def test_small_field_roots():
    f = PrimeField(17)
    fft = FFT(f, 16)
    assert fft.s == 4
    w = fft.root(4, 1)
    assert f.eq(f.exp(w, 8), f.neg_one)
    assert f.is_one(f.exp(w, 16))


def test_small_field_roundtrip():
    f = PrimeField(17)
    fft = FFT(f, 16)
    a = [i % 17 for i in range(16)]
    assert fft.ifft(fft.fft(a)) == a


def test_single_element_is_identity(fr):
    fft = FFT(fr, 4)
    assert fft.fft([5]) == [5]
    assert fft.ifft([5]) == [5]


def test_log2():
    assert FFT.log2(1024) == 10
    assert FFT.log2(5) == 2
    assert FFT.log2(1) == 0
    with pytest.raises(ValueError):
        FFT.log2(0)


def test_domain_too_big():
    with pytest.raises(ValueError):
        FFT(PrimeField(17), 32)


def test_non_power_of_two_rejected(fr):
    fft = FFT(fr, 8)
    with pytest.raises(ValueError):
        fft.fft([1, 2, 3])


def test_length_beyond_domain_rejected():
    fft = FFT(PrimeField(17), 4)
    with pytest.raises(ValueError):
        fft.fft(list(range(32)))


def test_empty_rejected(fr):
    fft = FFT(fr, 4)
    with pytest.raises(ValueError):
        fft.fft([])