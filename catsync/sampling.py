"""Apply a scheme to a text: sampled positions and density."""

from __future__ import annotations

from typing import List

from catsync.hashers import Text, as_bytes, check_window
from catsync.minimizer import Minimizer
from catsync.order import ToOrder


def sample_positions(scheme: ToOrder, text: Text, w: int, k: int, sigma: int = 4) -> List[int]:
    """Start of the selected k-mer for every window of *w* consecutive k-mers.

    The k-mer with the smallest key under *scheme* wins; ties go to the
    leftmost k-mer.  One position is returned per window, so consecutive
    windows usually repeat the same position.
    """
    m = Minimizer.build_from_order(scheme, w, k, sigma)
    return [i + x for i, x in enumerate(m.stream(text))]


def sampled_positions(scheme: ToOrder, text: Text, w: int, k: int, sigma: int = 4) -> List[int]:
    """Sorted distinct k-mer positions selected by *scheme*."""
    return sorted(set(sample_positions(scheme, text, w, k, sigma)))


def density(scheme: ToOrder, text: Text, w: int, k: int, sigma: int = 4) -> float:
    """Fraction of the text's k-mers that get sampled."""
    text = as_bytes(text)
    n_kmers = check_window(k, len(text))
    return len(sampled_positions(scheme, text, w, k, sigma)) / n_kmers
