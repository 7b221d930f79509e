"""K-mer hash functions producing 64-bit digests."""

from __future__ import annotations

from typing import Iterator, Union

import numpy as np
import xxhash


MASK64 = 0xFFFFFFFFFFFFFFFF

Text = Union[bytes, bytearray, memoryview, str]


def as_bytes(text: Text) -> bytes:
    """Return *text* as ``bytes``; ``str`` input is ASCII-encoded."""
    if isinstance(text, str):
        return text.encode("ascii")
    return bytes(text)


def check_window(k: int, n: int) -> int:
    """Validate a window length against a text length and return the window count."""
    if k < 1:
        raise ValueError(f"window length must be positive, got k={k}")
    if k > n:
        raise ValueError(f"window length k={k} exceeds text length {n}")
    return n - k + 1


def _rotl(x: int, r: int) -> int:
    r %= 64
    return ((x << r) | (x >> (64 - r))) & MASK64


class Hasher:
    """Maps a byte slice to a 64-bit digest.

    Subclasses implement :meth:`hash`.  Rolling hashers also override
    :meth:`_stream` with an incremental computation that must agree with
    :meth:`hash` on every window.
    """

    dtype = np.uint64
    default = 0

    def hash(self, t: bytes) -> int:
        raise NotImplementedError

    def hash_kmers(self, k: int, t: Text) -> Iterator[int]:
        """Yield the digest of every length-*k* window of *t*, left to right."""
        t = as_bytes(t)
        check_window(k, len(t))
        return self._stream(k, t)

    def _stream(self, k: int, t: bytes) -> Iterator[int]:
        return (self.hash(t[i : i + k]) for i in range(len(t) - k + 1))

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FxHash(Hasher):
    """Fx multiply-rotate hash over little-endian words."""

    SEED = 0x517CC1B727220A95

    def hash(self, t: bytes) -> int:
        t = as_bytes(t)
        h = 0
        i = 0
        n = len(t)
        for width in (8, 4, 2, 1):
            while n - i >= width:
                word = int.from_bytes(t[i : i + width], "little")
                h = ((_rotl(h, 5) ^ word) * self.SEED) & MASK64
                i += width
        return h


class PolyHash(Hasher):
    """Base-31 polynomial hash modulo 2**64 with a rolling k-mer stream."""

    BASE = 31

    def hash(self, t: bytes) -> int:
        h = 0
        for c in as_bytes(t):
            h = (h * self.BASE + c) & MASK64
        return h

    def _stream(self, k: int, t: bytes) -> Iterator[int]:
        # Weight of the outgoing symbol.
        top = pow(self.BASE, k - 1, 1 << 64)
        h = self.hash(t[:k])
        yield h
        for i in range(k, len(t)):
            h = ((h - t[i - k] * top) * self.BASE + t[i]) & MASK64
            yield h


_NT_SEEDS = {
    ord("A"): 0x3C8BFBB395C60474,
    ord("C"): 0x3193C18562A02B4C,
    ord("G"): 0x20323ED082572324,
    ord("T"): 0x295549F54BE24456,
}
_NT_SEEDS.update({c + 32: s for c, s in list(_NT_SEEDS.items())})


class NtHash(Hasher):
    """Forward-strand ntHash.

    Each nucleotide has a fixed 64-bit seed; the hash of a k-mer is the xor
    of its seeds, each rotated left by its distance from the k-mer's end.
    Symbols outside ``ACGT`` (either case) contribute zero.
    """

    def hash(self, t: bytes) -> int:
        t = as_bytes(t)
        k = len(t)
        h = 0
        for i, c in enumerate(t):
            h ^= _rotl(_NT_SEEDS.get(c, 0), k - 1 - i)
        return h

    def _stream(self, k: int, t: bytes) -> Iterator[int]:
        h = self.hash(t[:k])
        yield h
        for i in range(k, len(t)):
            h = _rotl(h, 1) ^ _rotl(_NT_SEEDS.get(t[i - k], 0), k) ^ _NT_SEEDS.get(t[i], 0)
            yield h


class XxHash(Hasher):
    """XXH3 64-bit hash, optionally seeded."""

    def __init__(self, seed: int = 0):
        self.seed = seed & MASK64

    def hash(self, t: bytes) -> int:
        return xxhash.xxh3_64_intdigest(as_bytes(t), seed=self.seed)

    def __repr__(self) -> str:
        return f"XxHash(seed={self.seed})"
