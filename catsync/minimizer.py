"""Sliding-window minimizer over an inner order."""

from __future__ import annotations

import logging
from collections import deque
from typing import List

from catsync.hashers import Text, as_bytes, check_window
from catsync.order import Order, ToOrder

logger = logging.getLogger(__name__)

# Windows of at most this many candidates are rescanned instead of using the deque.
RESCAN_MAX_W = 4


class Minimizer:
    """Selects the minimal k-mer among ``w`` consecutive k-mers.

    A window spans ``w + k - 1`` symbols.  :meth:`sample` and :meth:`stream`
    report the *offset* of the winning k-mer inside its window, with ties
    going to the leftmost candidate.
    """

    def __init__(self, order: Order, w: int, k: int):
        if w < 1:
            raise ValueError(f"window must hold at least one k-mer, got w={w}")
        if order.k != k:
            raise ValueError(f"order was built for k={order.k}, minimizer uses k={k}")
        self.order = order
        self.w = w
        self.k = k
        self.window_len = w + k - 1

    @classmethod
    def build_from_order(cls, to_order: ToOrder, w: int, k: int, sigma: int) -> "Minimizer":
        logger.debug("building minimizer over %r (w=%d, k=%d, sigma=%d)", to_order, w, k, sigma)
        return cls(to_order.to_order(w, k, sigma), w, k)

    def ord(self) -> Order:
        return self.order

    def sample(self, window: Text) -> int:
        """Offset in ``[0, w)`` of the minimal k-mer of *window*."""
        window = as_bytes(window)
        if len(window) != self.window_len:
            raise ValueError(
                f"expected a window of length {self.window_len}, got {len(window)}"
            )
        keys = list(self.order.keys(window, self.k))
        self._check_count(len(keys), self.w)
        return min(range(self.w), key=keys.__getitem__)

    def stream(self, text: Text) -> List[int]:
        """Winning offset for every window of *text*, left to right."""
        text = as_bytes(text)
        check_window(self.window_len, len(text))
        n_keys = len(text) - self.k + 1
        keys = self.order.keys(text, self.k)
        if self.w <= RESCAN_MAX_W:
            keys = list(keys)
            self._check_count(len(keys), n_keys)
            return self._rescan(keys)
        out = self._sliding(keys)
        # One offset per window exactly when the order yielded one key per t-mer.
        self._check_count(len(out) + self.w - 1, n_keys)
        return out

    def _check_count(self, got: int, expected: int) -> None:
        if got != expected:
            raise RuntimeError(
                f"{self.order!r} yielded {got} keys, expected {expected} "
                f"(one per length-{self.k} window)"
            )

    def _rescan(self, keys: list) -> List[int]:
        w = self.w
        out = []
        for start in range(len(keys) - w + 1):
            best = 0
            for x in range(1, w):
                if keys[start + x] < keys[start + best]:
                    best = x
            out.append(best)
        return out

    def _sliding(self, keys) -> List[int]:
        w = self.w
        # (position, key) pairs with strictly increasing keys; equal keys keep
        # the older entry so the leftmost minimum stays at the front.
        q: deque = deque()
        out = []
        for pos, key in enumerate(keys):
            while q and q[-1][1] > key:
                q.pop()
            q.append((pos, key))
            start = pos - w + 1
            if start < 0:
                continue
            while q[0][0] < start:
                q.popleft()
            out.append(q[0][0] - start)
        return out

    def __repr__(self) -> str:
        return f"Minimizer(w={self.w}, k={self.k}, order={type(self.order).__name__})"
