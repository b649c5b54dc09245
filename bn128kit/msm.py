"""Multi-scalar multiplication by signed-digit bucket windows."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any, List, Sequence

from .misc import ThreadPool

MIN_CHUNK_SIZE_BITS = 3
MAX_CHUNK_SIZE_BITS = 16


def _chunk_count(scalar_size: int, bits: int) -> int:
    return (scalar_size * 8 - 1) // bits + 1


def _adds_count(n_points: int, scalar_size: int, bits: int) -> int:
    return _chunk_count(scalar_size, bits) * (n_points + (1 << bits) + bits + 1)


def _bits_per_chunk(n_points: int, scalar_size: int) -> int:
    best = MIN_CHUNK_SIZE_BITS
    min_adds = _adds_count(n_points, scalar_size, best)
    for k in range(MIN_CHUNK_SIZE_BITS + 1, MAX_CHUNK_SIZE_BITS + 1):
        adds = _adds_count(n_points, scalar_size, k)
        if adds < min_adds:
            min_adds = adds
            best = k
    return best


class MSM:
    """Computes ``sum(scalar_i * base_i)`` with signed window digits.

    The group provides ``zero``, ``add``, ``sub``, ``dbl`` and
    ``mul_by_scalar(base, scalar_bytes)``. A carry out of the final window is
    dropped, so scalars must leave the top bit of their last window clear.
    """

    def __init__(self, group: Any) -> None:
        self.group = group

    def run(
        self,
        bases: Sequence[Any],
        scalars: bytes,
        scalar_size: int,
        n_threads: int = 0,
    ) -> Any:
        g = self.group
        bases = list(bases)
        n = len(bases)
        if scalar_size <= 0:
            raise ValueError("scalar_size must be positive")
        buf = bytes(scalars)
        if len(buf) < n * scalar_size:
            raise ValueError(f"need {n * scalar_size} bytes of scalars, got {len(buf)}")
        if n == 0:
            return g.zero
        if n == 1:
            return g.mul_by_scalar(bases[0], buf[:scalar_size])

        bits = _bits_per_chunk(n, scalar_size)
        n_chunks = _chunk_count(scalar_size, bits)
        n_buckets = 1 << (bits - 1)
        mask = (1 << bits) - 1

        sliced: List[List[int]] = []
        for i in range(n):
            value = int.from_bytes(buf[i * scalar_size:(i + 1) * scalar_size], "little")
            carry = 0
            digits = []
            for j in range(n_chunks):
                index = ((value >> (j * bits)) & mask) + carry
                if index >= n_buckets:
                    index -= 2 * n_buckets
                    carry = 1
                else:
                    carry = 0
                digits.append(index)
            sliced.append(digits)

        chunks: List[Any] = [g.zero] * n_chunks

        def job(begin: int, end: int, _k: int) -> None:
            for j in range(begin, end):
                buckets = [g.zero] * n_buckets
                for base, digits in zip(bases, sliced):
                    index = digits[j]
                    if index > 0:
                        buckets[index - 1] = g.add(buckets[index - 1], base)
                    elif index < 0:
                        buckets[-index - 1] = g.sub(buckets[-index - 1], base)
                total = buckets[-1]
                running = total
                for bucket in reversed(buckets[:-1]):
                    running = g.add(running, bucket)
                    total = g.add(total, running)
                chunks[j] = total

        pool_ctx = (
            nullcontext(ThreadPool.default_pool()) if n_threads == 0 else ThreadPool(n_threads)
        )
        with pool_ctx as pool:
            pool.parallel_for(0, n_chunks, job)

        result = chunks[-1]
        for chunk in reversed(chunks[:-1]):
            for _ in range(bits):
                result = g.dbl(result)
            result = g.add(result, chunk)
        return result