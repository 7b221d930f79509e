"""Batching wrappers around a :class:`~catsync.hashers.Hasher`.

Each wrapper returns the inner hasher's digests unchanged and only alters
how ``hash_kmers`` materializes them for a whole text:

- ``Unbuffered`` streams lazily from the inner hasher
- ``Buffer`` collects the stream into a list first
- ``Buffer2`` fills one pre-sized numpy array by index
- ``BufferDouble`` splits the text in two overlapping halves and hashes
  each independently, optionally on two threads
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator

import numpy as np

from catsync.hashers import Hasher, Text, as_bytes, check_window

logger = logging.getLogger(__name__)

_DONE = object()


def _fill(out: np.ndarray, start: int, count: int, it: Iterator[int]) -> None:
    """Write exactly *count* digests from *it* into ``out[start:start + count]``."""
    for i in range(count):
        try:
            out[start + i] = next(it)
        except StopIteration:
            raise RuntimeError(
                f"hasher produced {i} digests, expected {count}"
            ) from None
    if next(it, _DONE) is not _DONE:
        raise RuntimeError(f"hasher produced more than {count} digests")


class _Wrapper(Hasher):
    def __init__(self, hasher: Hasher):
        self.hasher = hasher
        self.dtype = hasher.dtype
        self.default = hasher.default

    def hash(self, t: bytes) -> int:
        return self.hasher.hash(t)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hasher!r})"


class Unbuffered(_Wrapper):
    """Digests are produced one at a time by the inner hasher."""

    def _stream(self, k: int, t: bytes) -> Iterator[int]:
        return self.hasher.hash_kmers(k, t)


class Buffer(_Wrapper):
    """Collect all digests into a list, then replay it."""

    def _stream(self, k: int, t: bytes) -> Iterator[int]:
        return iter(list(self.hasher.hash_kmers(k, t)))


class Buffer2(_Wrapper):
    """Fill an array of exactly ``len(t) - k + 1`` slots, then replay it."""

    def _stream(self, k: int, t: bytes) -> Iterator[int]:
        n = len(t) - k + 1
        out = np.full(n, self.default, dtype=self.dtype)
        _fill(out, 0, n, self.hasher.hash_kmers(k, t))
        return iter(out.tolist())


class BufferDouble(_Wrapper):
    """Hash two overlapping halves of the text independently.

    The windows are split into two runs of ``num_kmers // 2``; the first
    half covers windows ``[0, kmers_per_part)`` and the second
    ``[kmers_per_part, 2 * kmers_per_part)``.  When the window count is odd
    the last window is not hashed.
    """

    def __init__(self, hasher: Hasher, parallel: bool = False):
        super().__init__(hasher)
        self.parallel = parallel

    def hash_kmers(self, k: int, t: Text) -> Iterator[int]:
        t = as_bytes(t)
        num_kmers = check_window(k, len(t))
        # TODO: confirm whether the trailing window of an odd count should be hashed.
        kmers_per_part = num_kmers // 2
        if num_kmers % 2:
            logger.debug("BufferDouble: dropping window %d of %d", num_kmers - 1, num_kmers)
        out = np.full(2 * kmers_per_part, self.default, dtype=self.dtype)
        if kmers_per_part == 0:
            return iter(out.tolist())

        part_len = kmers_per_part + k - 1
        t0 = t[:part_len]
        t1 = t[kmers_per_part : kmers_per_part + part_len]

        halves = [
            (0, self.hasher.hash_kmers(k, t0)),
            (kmers_per_part, self.hasher.hash_kmers(k, t1)),
        ]
        if self.parallel:
            logger.debug("BufferDouble: hashing 2 x %d windows on 2 threads", kmers_per_part)
            with ThreadPoolExecutor(max_workers=2) as pool:
                futures = [
                    pool.submit(_fill, out, start, kmers_per_part, it) for start, it in halves
                ]
                for f in futures:
                    f.result()
        else:
            for start, it in halves:
                _fill(out, start, kmers_per_part, it)
        return iter(out.tolist())

    def __repr__(self) -> str:
        return f"BufferDouble({self.hasher!r}, parallel={self.parallel})"
