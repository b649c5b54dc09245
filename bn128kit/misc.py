"""Bit helpers and a small thread pool that splits index ranges into jobs."""

from __future__ import annotations

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional


def log2(value: int) -> int:
    """Floor of the base-2 logarithm of ``value`` taken as an unsigned 32-bit integer.

    Zero gives zero.
    """
    return max((value & 0xFFFFFFFF).bit_length() - 1, 0)


def divide_work(element_count: int, thread_count: int) -> List[int]:
    """Split ``element_count`` items into job sizes for ``thread_count`` threads.

    The first jobs take one extra item each when the split is uneven. With
    fewer items than threads, every job holds a single item.
    """
    if element_count <= 0:
        raise ValueError("element_count must be positive")
    if thread_count <= 0:
        raise ValueError("thread_count must be positive")
    if element_count <= thread_count:
        return [1] * element_count
    size, rest = divmod(element_count, thread_count)
    return [size + 1 if i < rest else size for i in range(thread_count)]


class ThreadPool:
    """Runs jobs on ``n_threads`` threads, the calling thread being one of them."""

    _default: Optional["ThreadPool"] = None
    _default_lock = threading.Lock()

    def __init__(self, n_threads: int = 0) -> None:
        if n_threads < 0:
            raise ValueError("n_threads must not be negative")
        self.n_threads = n_threads or self.default_thread_count()
        self._executor: Optional[ThreadPoolExecutor] = None
        if self.n_threads > 1:
            self._executor = ThreadPoolExecutor(max_workers=self.n_threads - 1)

    @staticmethod
    def default_thread_count() -> int:
        return os.cpu_count() or 1

    @staticmethod
    def default_pool() -> "ThreadPool":
        """The shared pool sized to the machine."""
        with ThreadPool._default_lock:
            if ThreadPool._default is None:
                ThreadPool._default = ThreadPool()
            return ThreadPool._default

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._shutdown()

    def _shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _run(self, calls: List[tuple], func: Callable[..., None]) -> None:
        """Run all but the last call on workers and the last one here."""
        *remote, local = calls
        futures: List[Future] = []
        if remote:
            if self._executor is None:
                raise RuntimeError("thread pool is closed")
            futures = [self._executor.submit(func, *args) for args in remote]
        try:
            func(*local)
        finally:
            wait(futures)
        for future in futures:
            future.result()

    def parallel_for(self, begin: int, end: int, func: Callable[[int, int, int], None]) -> None:
        """Call ``func(job_begin, job_end, job_index)`` over ``[begin, end)``.

        An empty range does nothing.
        """
        count = end - begin
        if count <= 0:
            return
        calls = []
        start = begin
        for index, size in enumerate(divide_work(count, self.n_threads)):
            calls.append((start, start + size, index))
            start += size
        self._run(calls, func)

    def parallel_block(self, func: Callable[[int, int], None]) -> None:
        """Call ``func(thread_index, n_threads)`` once for every thread."""
        self._run([(k, self.n_threads) for k in range(self.n_threads)], func)