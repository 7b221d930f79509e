"""Orders over fixed-length windows and the factories that build them.

An :class:`Order` ranks k-mers: smaller keys are preferred as minimizer
candidates.  A :class:`ToOrder` is the configuration side, turning scheme
parameters ``(w, k, sigma)`` into a ready-to-use order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from catsync.alphabet import symbol_rank
from catsync.hashers import MASK64, FxHash, Hasher, Text, as_bytes, check_window


class Order:
    """A total preorder over k-mers of length ``k``."""

    default_key: Any = 0

    def __init__(self, k: int):
        self.k = k

    def key(self, kmer: Text) -> Any:
        raise NotImplementedError

    def keys(self, text: Text, k: int) -> Iterator[Any]:
        """Yield ``key(text[i:i + k])`` for every window of *text*."""
        text = self._check_text(text, k)
        return self._keys(text)

    def _keys(self, text: bytes) -> Iterator[Any]:
        k = self.k
        return (self.key(text[i : i + k]) for i in range(len(text) - k + 1))

    @staticmethod
    def complement(key: int) -> int:
        """64-bit bitwise complement of a scalar key."""
        return ~key & MASK64

    def _check_kmer(self, kmer: Text) -> bytes:
        kmer = as_bytes(kmer)
        if len(kmer) != self.k:
            raise ValueError(f"expected a k-mer of length {self.k}, got {len(kmer)}")
        return kmer

    def _check_text(self, text: Text, k: int) -> bytes:
        if k != self.k:
            raise ValueError(f"order was built for k={self.k}, called with k={k}")
        text = as_bytes(text)
        check_window(k, len(text))
        return text


class ToOrder:
    """Builds an :class:`Order` from scheme parameters."""

    def to_order(self, w: int, k: int, sigma: int) -> Order:
        raise NotImplementedError


class RandomO(Order):
    """Orders k-mers by their digest under a hasher."""

    def __init__(self, k: int, hasher: Hasher):
        super().__init__(k)
        self.hasher = hasher

    def key(self, kmer: Text) -> int:
        return self.hasher.hash(self._check_kmer(kmer))

    def _keys(self, text: bytes) -> Iterator[int]:
        return self.hasher.hash_kmers(self.k, text)

    def __repr__(self) -> str:
        return f"RandomO(k={self.k}, hasher={self.hasher!r})"


@dataclass(frozen=True)
class RandomOrder(ToOrder):
    """A pseudo-random order: k-mers ranked by hash value."""

    hasher: Hasher = field(default_factory=FxHash)

    def to_order(self, w: int, k: int, sigma: int) -> RandomO:
        return RandomO(k, self.hasher)


class LexO(Order):
    """Lexicographic order, keyed by the base-``sigma`` value of the k-mer."""

    def __init__(self, k: int, sigma: int):
        super().__init__(k)
        self.sigma = sigma
        self._mod = sigma**k

    def key(self, kmer: Text) -> int:
        v = 0
        for c in self._check_kmer(kmer):
            v = v * self.sigma + symbol_rank(c, self.sigma)
        return v

    def _keys(self, text: bytes) -> Iterator[int]:
        sigma, mod, k = self.sigma, self._mod, self.k
        v = 0
        for i, c in enumerate(text):
            v = (v * sigma + symbol_rank(c, sigma)) % mod
            if i >= k - 1:
                yield v


@dataclass(frozen=True)
class LexOrder(ToOrder):
    """Lexicographic order; ``A < C < G < T`` for DNA."""

    def to_order(self, w: int, k: int, sigma: int) -> LexO:
        if sigma < 2:
            raise ValueError(f"alphabet size must be at least 2, got sigma={sigma}")
        if sigma**k > 1 << 64:
            raise ValueError(f"sigma**k does not fit in 64 bits (sigma={sigma}, k={k})")
        return LexO(k, sigma)
