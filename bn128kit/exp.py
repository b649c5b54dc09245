"""Scalar multiplication in an additive group by the non-adjacent form."""

from __future__ import annotations

from typing import Any, Union

from .naf import build_naf


def _scalar_bytes(scalar: Union[int, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(scalar, int):
        if scalar < 0:
            raise ValueError("scalar must not be negative")
        return scalar.to_bytes(max((scalar.bit_length() + 7) // 8, 1), "little")
    return bytes(scalar)


def naf_mul_by_scalar(group: Any, base: Any, scalar: Union[int, bytes]) -> Any:
    """Return ``scalar * base`` in ``group``.

    ``group`` provides ``zero``, ``dbl``, ``add`` and ``sub``; ``scalar`` is a
    non-negative integer or little-endian bytes.
    """
    naf = build_naf(_scalar_bytes(scalar))
    result = group.zero
    started = False
    for digit in reversed(naf):
        if not started:
            if digit == 0:
                continue
            started = True
        result = group.dbl(result)
        if digit == 1:
            result = group.add(result, base)
        elif digit == -1:
            result = group.sub(result, base)
    return result