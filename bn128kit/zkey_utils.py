"""Header of Groth16 proving-key files."""

from __future__ import annotations

from dataclasses import dataclass

from .binfile import BinFile

GROTH16_PROTOCOL = 1


@dataclass
class ZKeyHeader:
    """Sizes, primes and verification-key points from a proving key."""

    n8q: int
    q_prime: int
    n8r: int
    r_prime: int
    n_vars: int
    n_public: int
    domain_size: int
    n_coefs: int
    vk_alpha1: bytes
    vk_beta1: bytes
    vk_beta2: bytes
    vk_gamma2: bytes
    vk_delta1: bytes
    vk_delta2: bytes


def load_header(f: BinFile) -> ZKeyHeader:
    """Read sections 1 and 2 and the coefficient count of section 4."""
    f.start_read_section(1)
    protocol = f.read_u32_le()
    if protocol != GROTH16_PROTOCOL:
        raise ValueError("zkey file is not groth16")
    f.end_read_section()

    f.start_read_section(2)
    n8q = f.read_u32_le()
    q_prime = int.from_bytes(f.read(n8q), "little")
    n8r = f.read_u32_le()
    r_prime = int.from_bytes(f.read(n8r), "little")
    n_vars = f.read_u32_le()
    n_public = f.read_u32_le()
    domain_size = f.read_u32_le()
    vk_alpha1 = f.read(n8q * 2)
    vk_beta1 = f.read(n8q * 2)
    vk_beta2 = f.read(n8q * 4)
    vk_gamma2 = f.read(n8q * 4)
    vk_delta1 = f.read(n8q * 2)
    vk_delta2 = f.read(n8q * 4)
    f.end_read_section()

    n_coefs = f.get_section_size(4) // (12 + n8r)

    return ZKeyHeader(
        n8q=n8q,
        q_prime=q_prime,
        n8r=n8r,
        r_prime=r_prime,
        n_vars=n_vars,
        n_public=n_public,
        domain_size=domain_size,
        n_coefs=n_coefs,
        vk_alpha1=vk_alpha1,
        vk_beta1=vk_beta1,
        vk_beta2=vk_beta2,
        vk_gamma2=vk_gamma2,
        vk_delta1=vk_delta1,
        vk_delta2=vk_delta2,
    )