"""Open and closed syncmers as an order over k-mers.

Each k-mer is classified by where its minimal t-mer (length ``r``) falls:

- *open*: at the configured offset (optionally modulo ``w``)
- *closed*: at either end of the k-mer
- *other*: anywhere else

Open k-mers sort before closed ones, closed before the rest.  Within a
class, k-mers can additionally be ranked by their minimal t-mer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from catsync.hashers import Text
from catsync.minimizer import Minimizer
from catsync.order import Order, RandomOrder, ToOrder

logger = logging.getLogger(__name__)

OPEN = 0
CLOSED = 1
OTHER = 2


@dataclass(frozen=True)
class OpenClosed(ToOrder):
    """Configuration of an open/closed syncmer scheme.

    Attributes
    ----------
    r : int
        Length of the t-mers ranked by the secondary order *o*.
    open : bool
        Rank open syncmers first.
    closed : bool
        Rank closed syncmers second.
    offset : int, optional
        Position an open syncmer's minimal t-mer must have.  Defaults to the
        middle of the k-mer.
    modulo : bool
        Match *offset* against the t-mer position modulo ``w``.
    open_by_tmer, closed_by_tmer, other_by_tmer : bool
        Break ties within each class by the minimal t-mer's key.
    anti_tmer : bool
        Where a class is not ranked by t-mer, rank it by the complement of
        the t-mer's key instead of leaving it tied.
    o : ToOrder
        Secondary order over t-mers.
    """

    r: int
    open: bool = False
    closed: bool = False
    offset: Optional[int] = None
    modulo: bool = False
    open_by_tmer: bool = False
    closed_by_tmer: bool = False
    other_by_tmer: bool = False
    anti_tmer: bool = False
    o: ToOrder = field(default_factory=RandomOrder)

    def __post_init__(self):
        if self.r < 1:
            raise ValueError(f"t-mer length must be positive, got r={self.r}")
        if self.offset is not None and self.offset < 0:
            raise ValueError(f"offset must be non-negative, got {self.offset}")

    def to_order(self, w: int, k: int, sigma: int) -> "OpenClosedO":
        if w < 1:
            raise ValueError(f"window must hold at least one k-mer, got w={w}")
        if self.r > k:
            raise ValueError(f"t-mer length r={self.r} exceeds k={k}")
        r = self.r
        if self.modulo:
            offset = (self.offset if self.offset is not None else (k - r) % w // 2) % w
        else:
            offset = self.offset if self.offset is not None else (k - r) // 2
        logger.debug(
            "open/closed order: w=%d k=%d r=%d sigma=%d offset=%d modulo=%s",
            w, k, r, sigma, offset, self.modulo,
        )
        return OpenClosedO(
            config=self,
            w=w,
            k=k,
            offset=offset,
            m=Minimizer.build_from_order(self.o, k - r + 1, r, sigma),
        )


class OpenClosedO(Order):
    """Keys k-mers by ``(category, tiebreak)``."""

    def __init__(self, config: OpenClosed, w: int, k: int, offset: int, m: Minimizer):
        super().__init__(k)
        self.config = config
        self.r = config.r
        self.w = w
        self.offset = offset
        self.m = m

    def classify(self, x: int) -> Tuple[int, bool]:
        """Category of a k-mer whose minimal t-mer is at *x*, and whether to tie-break by t-mer."""
        c = self.config
        w0 = self.k - self.r
        if not 0 <= x <= w0:
            raise ValueError(f"t-mer position {x} outside [0, {w0}]")
        is_open = (x % self.w if c.modulo else x) == self.offset
        is_closed = x == 0 or x == w0
        if c.open and is_open:
            return OPEN, c.open_by_tmer
        if c.closed and is_closed:
            return CLOSED, c.closed_by_tmer
        return OTHER, c.other_by_tmer

    def _inner_key(self, kmer: bytes, x: int) -> Tuple[int, int]:
        category, by_tmer = self.classify(x)
        if by_tmer:
            tiebreak = self.m.order.key(kmer[x : x + self.r])
        elif self.config.anti_tmer:
            tiebreak = self.m.order.complement(self.m.order.key(kmer[x : x + self.r]))
        else:
            tiebreak = self.m.order.default_key
        return category, tiebreak

    def key(self, kmer: Text) -> Tuple[int, int]:
        kmer = self._check_kmer(kmer)
        return self._inner_key(kmer, self.m.sample(kmer))

    def _keys(self, text: bytes) -> Iterator[Tuple[int, int]]:
        k = self.k
        for i, x in enumerate(self.m.stream(text)):
            yield self._inner_key(text[i : i + k], x)
