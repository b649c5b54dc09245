"""Header of witness files."""

from __future__ import annotations

from dataclasses import dataclass

from .binfile import BinFile


@dataclass
class WtnsHeader:
    """Element size in bytes, field prime and number of witness values."""

    n8: int
    prime: int
    n_vars: int


def load_header(f: BinFile) -> WtnsHeader:
    """Read the header held in section 1."""
    f.start_read_section(1)
    n8 = f.read_u32_le()
    prime = int.from_bytes(f.read(n8), "little")
    n_vars = f.read_u32_le()
    f.end_read_section()
    return WtnsHeader(n8=n8, prime=prime, n_vars=n_vars)