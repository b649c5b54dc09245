import struct

import pytest

from bn128kit.alt_bn128 import Q, R
from bn128kit.binfile import BinFile
from bn128kit.zkey_utils import load_header

N8 = 32


def build(sections):
    out = bytearray(b"zkey")
    out += struct.pack("<II", 1, len(sections))
    for section_id, payload in sections:
        out += struct.pack("<IQ", section_id, len(payload))
        out += payload
    return bytes(out)


def points():
    return {
        "alpha1": bytes([1]) * (N8 * 2),
        "beta1": bytes([2]) * (N8 * 2),
        "beta2": bytes([3]) * (N8 * 4),
        "gamma2": bytes([4]) * (N8 * 4),
        "delta1": bytes([5]) * (N8 * 2),
        "delta2": bytes([6]) * (N8 * 4),
    }


def header_section(n_vars=11, n_public=2, domain_size=16):
    p = points()
    return (
        struct.pack("<I", N8) + Q.to_bytes(N8, "little")
        + struct.pack("<I", N8) + R.to_bytes(N8, "little")
        + struct.pack("<III", n_vars, n_public, domain_size)
        + p["alpha1"] + p["beta1"] + p["beta2"]
        + p["gamma2"] + p["delta1"] + p["delta2"]
    )


def make_file(protocol=1, n_coefs=3, extra=b""):
    return BinFile(
        build([
            (1, struct.pack("<I", protocol) + extra),
            (2, header_section()),
            (4, bytes((12 + N8) * n_coefs)),
        ]),
        "zkey",
        1,
    )


def test_load_header_fields():
    h = load_header(make_file())
    assert h.n8q == N8
    assert h.n8r == N8
    assert h.q_prime == Q
    assert h.r_prime == R
    assert (h.n_vars, h.n_public, h.domain_size) == (11, 2, 16)
    assert h.n_coefs == 3


def test_load_header_points():
    h = load_header(make_file())
    p = points()
    assert h.vk_alpha1 == p["alpha1"]
    assert h.vk_beta1 == p["beta1"]
    assert h.vk_beta2 == p["beta2"]
    assert h.vk_gamma2 == p["gamma2"]
    assert h.vk_delta1 == p["delta1"]
    assert h.vk_delta2 == p["delta2"]


def test_not_groth16():
    with pytest.raises(ValueError, match="groth16"):
        load_header(make_file(protocol=2))


def test_protocol_section_wrong_size():
    with pytest.raises(ValueError):
        load_header(make_file(extra=b"\x00\x00"))


def test_missing_coefficient_section():
    f = BinFile(
        build([(1, struct.pack("<I", 1)), (2, header_section())]), "zkey", 1
    )
    with pytest.raises(KeyError):
        load_header(f)