"""Multi-scalar multiplication by windowed buckets, accumulated per thread."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any, Callable, List, Optional, Sequence

from .misc import ThreadPool, log2

PACK_FACTOR = 2
MAX_CHUNK_SIZE_BITS = 16
MIN_CHUNK_SIZE_BITS = 2


def _split_scalars(scalars: bytes, scalar_size: int, n: int) -> List[int]:
    if scalar_size <= 0:
        raise ValueError("scalar_size must be positive")
    buf = bytes(scalars)
    if len(buf) < n * scalar_size:
        raise ValueError(
            f"need {n * scalar_size} bytes of scalars, got {len(buf)}"
        )
    return [
        int.from_bytes(buf[i * scalar_size:(i + 1) * scalar_size], "little")
        for i in range(n)
    ]


def _pool(n_threads: int):
    if n_threads == 0:
        return nullcontext(ThreadPool.default_pool())
    return ThreadPool(n_threads)


class ParallelMultiexp:
    """Computes ``sum(scalar_i * base_i)`` in a group.

    The group provides ``zero``, ``add``, ``dbl``, ``is_zero`` and
    ``mul_by_scalar(base, scalar_bytes)``.
    """

    def __init__(self, group: Any) -> None:
        self.group = group

    def multiexp(
        self,
        bases: Sequence[Any],
        scalars: bytes,
        scalar_size: int,
        n_threads: int = 0,
    ) -> Any:
        """Multi-exponentiation over little-endian scalars packed in ``scalars``."""
        return self._run(bases, scalars, scalar_size, n_threads, None)

    def multiexp_sized(
        self,
        bases: Sequence[Any],
        scalars: bytes,
        scalar_size: int,
        nx: int,
        sizes: Sequence[int],
        n_threads: int = 0,
    ) -> Any:
        """Like ``multiexp`` over bases laid out in ``nx`` interleaved columns.

        Column ``c`` holds the bases at ``c, c + nx, c + 2*nx, ...``; only its
        first ``sizes[c]`` entries take part.
        """
        if nx <= 0:
            raise ValueError("nx must be positive")
        if len(sizes) < nx:
            raise ValueError(f"need {nx} column sizes, got {len(sizes)}")

        def include(i: int) -> bool:
            return i // nx < sizes[i % nx]

        return self._run(bases, scalars, scalar_size, n_threads, include)

    def _run(
        self,
        bases: Sequence[Any],
        scalars: bytes,
        scalar_size: int,
        n_threads: int,
        include: Optional[Callable[[int], bool]],
    ) -> Any:
        g = self.group
        bases = list(bases)
        n = len(bases)
        values = _split_scalars(scalars, scalar_size, n)
        if n == 0:
            return g.zero
        if n == 1:
            return g.mul_by_scalar(bases[0], bytes(scalars)[:scalar_size])

        bits = log2(n // PACK_FACTOR)
        bits = min(max(bits, MIN_CHUNK_SIZE_BITS), MAX_CHUNK_SIZE_BITS)
        n_chunks = (scalar_size * 8 - 1) // bits + 1

        active = [
            i for i in range(n)
            if (include is None or include(i)) and not g.is_zero(bases[i])
        ]

        with _pool(n_threads) as pool:
            results = [
                self._process_chunk(pool, bases, values, active, chunk, bits)
                for chunk in range(n_chunks)
            ]

        result = results[-1]
        for chunk_result in reversed(results[:-1]):
            for _ in range(bits):
                result = g.dbl(result)
            result = g.add(result, chunk_result)
        return result

    def _process_chunk(
        self,
        pool: ThreadPool,
        bases: List[Any],
        values: List[int],
        active: List[int],
        chunk: int,
        bits: int,
    ) -> Any:
        g = self.group
        n_buckets = 1 << bits
        mask = n_buckets - 1
        shift = chunk * bits
        accs = [[g.zero] * n_buckets for _ in range(pool.n_threads)]

        def job(begin: int, end: int, k: int) -> None:
            acc = accs[k]
            for i in active[begin:end]:
                v = (values[i] >> shift) & mask
                if v:
                    acc[v] = g.add(acc[v], bases[i])

        pool.parallel_for(0, len(active), job)

        buckets = accs[0]
        for other in accs[1:]:
            for i, point in enumerate(other):
                if not g.is_zero(point):
                    buckets[i] = g.add(buckets[i], point)

        running = g.zero
        total = g.zero
        for i in range(n_buckets - 1, 0, -1):
            running = g.add(running, buckets[i])
            total = g.add(total, running)
        return total