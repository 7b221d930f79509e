"""Symbol encoding for sequence alphabets."""

# Base encoding: A=0, C=1, G=2, T=3
BASE_TO_INT = {"A": 0, "C": 1, "G": 2, "T": 3,
               "a": 0, "c": 1, "g": 2, "t": 3}

_DNA_RANK = {ord(b): i for b, i in BASE_TO_INT.items()}


def symbol_rank(c: int, sigma: int) -> int:
    """Rank of byte *c* in an alphabet of *sigma* symbols.

    For ``sigma == 4`` nucleotides map to ``A, C, G, T -> 0..3``; every
    other byte (and every byte of a larger alphabet) is reduced modulo
    *sigma*.
    """
    if sigma == 4:
        rank = _DNA_RANK.get(c)
        if rank is not None:
            return rank
    return c % sigma
